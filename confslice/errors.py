"""Exceptions raised while loading and reading configurations."""

from __future__ import annotations

from confslice.diagnostics import (
    IO_FILE_NOT_FOUND,
    LEXER_ILLEGAL_CHARACTER,
    LEXER_UNEXPECTED_END,
    PARSER_NESTING_TOO_DEEP,
    PARSER_UNEXPECTED_TOKEN,
    Diagnostic,
    DiagnosticSpec,
    format_diagnostic,
)


class ConfsliceError(Exception):
    """Base class for every error that aborts a parse.

    Each instance carries the single `Diagnostic` describing it.
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(format_diagnostic(diagnostic))
        self.diagnostic = diagnostic

    @property
    def line(self) -> int | None:
        return self.diagnostic.line


class LexError(ConfsliceError):
    """An illegal character, or a line/file ending inside a string or comment."""

    def __init__(self, line: int, char: str, *, unexpected_end: bool = False) -> None:
        if unexpected_end:
            diagnostic = _diagnostic(LEXER_UNEXPECTED_END, line)
        else:
            diagnostic = _diagnostic(LEXER_ILLEGAL_CHARACTER, line, char=char)
        super().__init__(diagnostic)
        self.char = char
        self.unexpected_end = unexpected_end


class ConfigSyntaxError(ConfsliceError):
    """A token that the grammar does not allow at the current position."""

    def __init__(self, line: int, found: str, expected: str) -> None:
        super().__init__(_diagnostic(PARSER_UNEXPECTED_TOKEN, line, found=found, expected=expected))
        self.found = found
        self.expected = expected


class NestingTooDeepError(ConfigSyntaxError):
    """Input nested deeper than the interpreter's recursion limit allows."""

    def __init__(self, line: int, found: str) -> None:
        ConfsliceError.__init__(self, _diagnostic(PARSER_NESTING_TOO_DEEP, line))
        self.found = found
        self.expected = ""


class ConfigIOError(ConfsliceError):
    """The configuration file could not be opened."""

    def __init__(self, path: str) -> None:
        super().__init__(_diagnostic(IO_FILE_NOT_FOUND, None, path=path))
        self.path = path


class DataConversionError(ConfsliceError, ValueError):
    """A scalar's text cannot be read as the requested Python type."""

    def __init__(self, text: str, target: str) -> None:
        super().__init__(
            Diagnostic(
                code="DATA_CONVERSION_FAILED",
                message=f"Cannot read {text!r} as {target}.",
                line=None,
                category="model",
            )
        )
        self.text = text
        self.target = target


def _diagnostic(spec: DiagnosticSpec, line: int | None, **fields: str) -> Diagnostic:
    return Diagnostic(
        code=spec.code,
        message=spec.message.format(**fields) if fields else spec.message,
        line=line,
        severity=spec.severity,
        hint=spec.hint,
        category=spec.category,
    )


__all__ = [
    "ConfigIOError",
    "ConfigSyntaxError",
    "ConfsliceError",
    "DataConversionError",
    "LexError",
    "NestingTooDeepError",
]
