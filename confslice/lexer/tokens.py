"""Lexer tokens, character classes and automaton states."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Final


class CharClass(IntEnum):
    """Input symbol classes; values are the transition table's column indices."""

    WHITE = 0  # space, tab, carriage return
    LETTER = 1
    DIGIT = 2
    EOL = 3  # \n
    EOF = 4
    SLASH = 5  # /
    DITTO = 6  # "
    BACKSLASH = 7  # \
    MINUS = 8  # -
    UNDERSCORE = 9  # _
    PERIOD = 10  # .
    PLUS = 11  # +
    OTHER = 12


class LexState(IntEnum):
    """Automaton states and terminal outcomes; states are the table's row indices."""

    START = 0
    IDENTIFIER = 1
    NUMBER = 2
    SLASH = 3  # one / seen, a second one opens a comment
    COMMENT = 4  # skipped up to the end of the line
    STRING = 5
    ESCAPE = 6  # the character after \ inside a string
    FRACTION = 7  # digits after a .
    SIGN = 8  # a leading - or +, only a digit continues it

    # Outcomes
    OK = 100
    BACKTRACK = 101  # one lookahead character was read too many
    ERROR = 102

    @property
    def is_terminal(self) -> bool:
        return self >= LexState.OK


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1
    UNKNOWN = 2  # lexeme the automaton accepted but no rule classifies

    # -------------------------
    # Identifiers / literals
    # -------------------------
    IDENTIFIER = 40
    INTEGER = 41
    STRING = 42
    DOUBLE = 43

    # -------------------------
    # Punctuation
    # -------------------------
    ASSIGN = 50  # =
    LBRACKET = 51  # [
    RBRACKET = 52  # ]
    LPAREN = 53  # (
    RPAREN = 54  # )
    LBRACE = 55  # {
    RBRACE = 56  # }
    LANGLE = 57  # <
    RANGLE = 58  # >
    SEMICOLON = 59  # ;
    COLON = 60  # :
    COMMA = 61  # ,

    @property
    def is_value(self) -> bool:
        return self in (TokenKind.INTEGER, TokenKind.STRING, TokenKind.DOUBLE)


PUNCTUATION: Final[dict[str, TokenKind]] = {
    "=": TokenKind.ASSIGN,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "<": TokenKind.LANGLE,
    ">": TokenKind.RANGLE,
    ";": TokenKind.SEMICOLON,
    ":": TokenKind.COLON,
    ",": TokenKind.COMMA,
}


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token with its lexeme and the line it ended on."""

    kind: TokenKind
    text: str
    line: int

    @property
    def display(self) -> str:
        """Lexeme as shown in diagnostics."""
        if self.kind == TokenKind.EOF:
            return "EOF"
        return self.text
