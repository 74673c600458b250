"""Token source that feeds the parser one token of lookahead."""

from confslice.lexer import Lexer, Token, TokenKind


class TokenSource:
    """Bridge between lexer and parser holding the current token.

    The first token is read on construction; each `bump` reads exactly one
    more from the lexer. Bumping past end of input keeps returning EOF.
    """

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self._current: Token = lexer.next_token()
        self._consumed = 0

    @property
    def current(self) -> Token:
        return self._current

    @property
    def current_kind(self) -> TokenKind:
        return self._current.kind

    @property
    def consumed(self) -> int:
        """Number of tokens bumped so far."""
        return self._consumed

    def bump(self) -> Token:
        """Advance and return the token that was current."""
        token = self._current
        if token.kind != TokenKind.EOF:
            self._current = self._lexer.next_token()
            self._consumed += 1
        return token
