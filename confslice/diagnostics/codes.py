"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from confslice.diagnostics.diagnostic import Severity


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_ILLEGAL_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_ILLEGAL_CHARACTER",
    message="'{char}': Not allowed character.",
    hint="Only letters, digits, whitespace, punctuation and the symbols / \" \\ - _ . + may appear outside strings.",
    severity="error",
    category="lexer",
)

LEXER_UNEXPECTED_END: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNEXPECTED_END",
    message="end of line or file is not allowed here.",
    hint="Close the string with a double quote on the same line, or end a // comment with a newline.",
    severity="error",
    category="lexer",
)

PARSER_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_TOKEN",
    message="{found} is not allowed here. {expected} was expected.",
    severity="error",
    category="parser",
)

PARSER_NESTING_TOO_DEEP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_NESTING_TOO_DEEP",
    message="nesting is too deep.",
    hint="Flatten deeply nested lists or entities.",
    severity="error",
    category="parser",
)

IO_FILE_NOT_FOUND: Final[DiagnosticSpec] = DiagnosticSpec(
    code="IO_FILE_NOT_FOUND",
    message='File "{path}" not found.',
    severity="error",
    category="io",
)
