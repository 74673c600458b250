"""Lexer."""

from confslice.lexer.char_source import CharSource
from confslice.lexer.lexer import (
    TRANSITIONS,
    Lexer,
    classify_char,
    classify_lexeme,
    dump_tokens,
)
from confslice.lexer.tokens import (
    PUNCTUATION,
    CharClass,
    LexState,
    Token,
    TokenKind,
)

__all__ = [
    "PUNCTUATION",
    "TRANSITIONS",
    "CharClass",
    "CharSource",
    "LexState",
    "Lexer",
    "Token",
    "TokenKind",
    "classify_char",
    "classify_lexeme",
    "dump_tokens",
]
