"""Table-driven lexer."""

from __future__ import annotations

import logging
from typing import Final

from confslice.errors import LexError
from confslice.lexer.char_source import CharSource
from confslice.lexer.tokens import PUNCTUATION, CharClass, LexState, Token, TokenKind

logger = logging.getLogger(__name__)

_S0 = LexState.START
_S1 = LexState.IDENTIFIER
_S2 = LexState.NUMBER
_S3 = LexState.SLASH
_S4 = LexState.COMMENT
_S5 = LexState.STRING
_S6 = LexState.ESCAPE
_S7 = LexState.FRACTION
_S8 = LexState.SIGN
_OK = LexState.OK
_BK = LexState.BACKTRACK
_ER = LexState.ERROR

# Indexed as TRANSITIONS[state][char_class].
TRANSITIONS: Final[tuple[tuple[LexState, ...], ...]] = (
    # ws   lt   dg   EOL  EOF  /    "    \    -    _    .    +    o
    (_S0, _S1, _S2, _S0, _OK, _S3, _S5, _OK, _S8, _OK, _S7, _S8, _OK),  # START
    (_BK, _S1, _S1, _BK, _BK, _BK, _BK, _BK, _S1, _S1, _S1, _S1, _BK),  # IDENTIFIER
    (_BK, _BK, _S2, _BK, _BK, _BK, _BK, _BK, _BK, _BK, _S7, _BK, _BK),  # NUMBER
    (_BK, _BK, _BK, _BK, _BK, _S4, _BK, _BK, _BK, _BK, _BK, _BK, _BK),  # SLASH
    (_S4, _S4, _S4, _S0, _ER, _S4, _S4, _S4, _S4, _S4, _S4, _S4, _S4),  # COMMENT
    (_S5, _S5, _S5, _ER, _ER, _S5, _OK, _S6, _S5, _S5, _S5, _S5, _S5),  # STRING
    (_S5, _S5, _S5, _ER, _ER, _S5, _S5, _S6, _S5, _S5, _S5, _S5, _S5),  # ESCAPE
    (_BK, _BK, _S7, _BK, _BK, _BK, _BK, _BK, _BK, _BK, _BK, _BK, _BK),  # FRACTION
    (_BK, _BK, _S2, _BK, _BK, _BK, _BK, _BK, _BK, _BK, _BK, _BK, _BK),  # SIGN
)

_SPECIAL_CLASSES: Final[dict[str, CharClass]] = {
    "\n": CharClass.EOL,
    "/": CharClass.SLASH,
    '"': CharClass.DITTO,
    "\\": CharClass.BACKSLASH,
    "-": CharClass.MINUS,
    "_": CharClass.UNDERSCORE,
    ".": CharClass.PERIOD,
    "+": CharClass.PLUS,
}

_WHITESPACE: Final[frozenset[str]] = frozenset(" \t\r\f\v")

# Any character is accepted inside these states.
_OPAQUE_STATES: Final[frozenset[LexState]] = frozenset({LexState.STRING, LexState.ESCAPE, LexState.COMMENT})

# Reaching these states does not add the character to the lexeme.
_UNRECORDED_STATES: Final[frozenset[LexState]] = frozenset(
    {LexState.START, LexState.COMMENT, LexState.BACKTRACK, LexState.ERROR}
)


def classify_char(ch: str) -> CharClass:
    """Map one input character (empty string for end of input) to its class."""
    if not ch:
        return CharClass.EOF
    special = _SPECIAL_CLASSES.get(ch)
    if special is not None:
        return special
    if ch.isascii():
        if ch.isalpha():
            return CharClass.LETTER
        if ch.isdigit():
            return CharClass.DIGIT
    if ch in _WHITESPACE:
        return CharClass.WHITE
    return CharClass.OTHER


def classify_lexeme(lexeme: str) -> TokenKind:
    """Assign a token kind to a finished lexeme."""
    if not lexeme:
        return TokenKind.EOF
    first = lexeme[0]
    punctuation = PUNCTUATION.get(first)
    if punctuation is not None:
        return punctuation
    if first.isascii() and first.isalpha():
        return TokenKind.IDENTIFIER
    if '"' in lexeme:
        return TokenKind.STRING
    if _is_ascii_digit(first) or (first == "-" and len(lexeme) > 1 and _is_ascii_digit(lexeme[1])):
        return TokenKind.DOUBLE if "." in lexeme else TokenKind.INTEGER
    return TokenKind.UNKNOWN


def _is_ascii_digit(ch: str) -> bool:
    return ch.isascii() and ch.isdigit()


class Lexer:
    """Finite-state lexer that produces one token per call."""

    def __init__(self, source: CharSource, *, keep_string_whitespace: bool = True) -> None:
        self._source = source
        self._keep_string_whitespace = keep_string_whitespace

    @classmethod
    def from_text(cls, text: str, *, keep_string_whitespace: bool = True) -> "Lexer":
        return cls(CharSource.from_text(text), keep_string_whitespace=keep_string_whitespace)

    def next_token(self) -> Token:
        """Run the automaton until it reaches an outcome and classify the lexeme.

        Raises `LexError` on an illegal character, or when a line or the
        input ends inside a string or a ``//`` comment.
        """
        state = LexState.START
        lexeme: list[str] = []

        while not state.is_terminal:
            if state == LexState.START:
                lexeme.clear()

            ch = self._source.read()
            char_class = classify_char(ch)
            if char_class == CharClass.OTHER and ch not in PUNCTUATION and state not in _OPAQUE_STATES:
                raise LexError(self._source.line, ch)

            state = TRANSITIONS[state][char_class]

            if state == LexState.ERROR:
                raise LexError(self._source.line, ch, unexpected_end=True)
            if state == LexState.BACKTRACK:
                self._source.push_back(ch)
            elif state not in _UNRECORDED_STATES and char_class != CharClass.EOF:
                # Whitespace only reaches here inside a string.
                if self._keep_string_whitespace or char_class != CharClass.WHITE:
                    lexeme.append(ch)

        text = "".join(lexeme)
        return Token(classify_lexeme(text), text, self._source.line)

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        logger.debug("Lexed %d tokens", len(tokens))
        return tokens


def dump_tokens(tokens: list[Token]) -> None:
    """Print token list with kind, line and text for debugging."""
    for i, tok in enumerate(tokens):
        print(f"{i:03d} {tok.kind.name:<12} line={tok.line:<4} text={tok.text!r}")
