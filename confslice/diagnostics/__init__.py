"""Diagnostics."""

from confslice.diagnostics.codes import (
    IO_FILE_NOT_FOUND,
    LEXER_ILLEGAL_CHARACTER,
    LEXER_UNEXPECTED_END,
    PARSER_NESTING_TOO_DEEP,
    PARSER_UNEXPECTED_TOKEN,
    DiagnosticSpec,
)
from confslice.diagnostics.diagnostic import Diagnostic, Severity
from confslice.diagnostics.report import format_diagnostic, has_errors

__all__ = [
    "IO_FILE_NOT_FOUND",
    "LEXER_ILLEGAL_CHARACTER",
    "LEXER_UNEXPECTED_END",
    "PARSER_NESTING_TOO_DEEP",
    "PARSER_UNEXPECTED_TOKEN",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "format_diagnostic",
    "has_errors",
]
