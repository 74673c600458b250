"""Recursive-descent parser core."""

from typing import NoReturn

from confslice.errors import ConfigSyntaxError, NestingTooDeepError
from confslice.lexer import Token, TokenKind
from confslice.parser.options import ParserOptions
from confslice.parser.token_source import TokenSource


class Parser:
    """Token cursor shared by the grammar routines.

    There is no recovery: `error` raises, and the first error ends the parse.
    """

    def __init__(self, source: TokenSource, options: ParserOptions | None = None) -> None:
        self._source = source
        self._options = options or ParserOptions()

    @property
    def source(self) -> TokenSource:
        return self._source

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def current(self) -> Token:
        return self._source.current

    @property
    def current_kind(self) -> TokenKind:
        return self._source.current_kind

    def at(self, kind: TokenKind) -> bool:
        return self.current_kind == kind

    def bump(self) -> Token:
        return self._source.bump()

    def eat(self, kind: TokenKind) -> bool:
        if self.current_kind == kind:
            self.bump()
            return True
        return False

    def expect(self, kind: TokenKind, expected: str) -> Token:
        if self.current_kind != kind:
            self.error(expected)
        return self.bump()

    def error(self, expected: str) -> NoReturn:
        token = self.current
        raise ConfigSyntaxError(token.line, token.display, expected)

    def nesting_error(self) -> NestingTooDeepError:
        token = self.current
        return NestingTooDeepError(token.line, token.display)
