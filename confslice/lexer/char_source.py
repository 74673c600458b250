"""Character-at-a-time reader with one character of push-back."""

from __future__ import annotations

import io
from typing import TextIO


class CharSource:
    """Reads a text stream one character at a time and counts lines.

    The line counter starts at 1 and moves once per newline read. Pushing a
    newline back moves it back again, so a re-read newline is only counted
    once.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pushed_back: str | None = None
        self._line = 1

    @classmethod
    def from_text(cls, text: str) -> "CharSource":
        return cls(io.StringIO(text))

    @property
    def line(self) -> int:
        return self._line

    def read(self) -> str:
        """Return the next character, or an empty string at end of input."""
        if self._pushed_back is not None:
            ch = self._pushed_back
            self._pushed_back = None
        else:
            ch = self._stream.read(1)
        if ch == "\n":
            self._line += 1
        return ch

    def push_back(self, ch: str) -> None:
        if self._pushed_back is not None:
            raise RuntimeError("CharSource holds at most one pushed-back character")
        if not ch:
            # End of input reads as empty again on its own.
            return
        if ch == "\n":
            self._line -= 1
        self._pushed_back = ch
