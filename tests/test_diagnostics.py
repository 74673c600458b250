import pytest

from confslice.diagnostics import (
    IO_FILE_NOT_FOUND,
    LEXER_ILLEGAL_CHARACTER,
    LEXER_UNEXPECTED_END,
    PARSER_NESTING_TOO_DEEP,
    PARSER_UNEXPECTED_TOKEN,
    Diagnostic,
    format_diagnostic,
    has_errors,
)
from confslice.errors import (
    ConfigIOError,
    ConfigSyntaxError,
    ConfsliceError,
    LexError,
    NestingTooDeepError,
)


def test_codes_are_unique_and_categorized() -> None:
    specs = [
        LEXER_ILLEGAL_CHARACTER,
        LEXER_UNEXPECTED_END,
        PARSER_UNEXPECTED_TOKEN,
        PARSER_NESTING_TOO_DEEP,
        IO_FILE_NOT_FOUND,
    ]
    assert len({spec.code for spec in specs}) == len(specs)
    assert {spec.category for spec in specs} == {"lexer", "parser", "io"}
    assert all(spec.severity == "error" for spec in specs)


@pytest.mark.parametrize(
    ("error", "text"),
    [
        (
            ConfigSyntaxError(4, "}", "Entity or key definition"),
            "Error at line 4: } is not allowed here. Entity or key definition was expected.",
        ),
        (LexError(2, "@"), "Error at line 2: '@': Not allowed character."),
        (
            LexError(9, "", unexpected_end=True),
            "Error at line 9: end of line or file is not allowed here.",
        ),
        (ConfigIOError("conf/app.conf"), 'File "conf/app.conf" not found.'),
        (NestingTooDeepError(3, "<"), "Error at line 3: nesting is too deep."),
    ],
)
def test_driver_texts(error: ConfsliceError, text: str) -> None:
    assert format_diagnostic(error.diagnostic) == text
    assert str(error) == text


def test_error_fields() -> None:
    err = ConfigSyntaxError(7, "EOF", ";")
    assert err.line == 7
    assert err.found == "EOF"
    assert err.expected == ";"
    assert err.diagnostic.category == "parser"

    io_err = ConfigIOError("x.conf")
    assert io_err.line is None
    assert io_err.path == "x.conf"


def test_warning_label() -> None:
    diagnostic = Diagnostic(code="X", message="careful.", line=1, severity="warning")
    assert format_diagnostic(diagnostic) == "Warning at line 1: careful."
    assert has_errors([diagnostic]) is False


def test_has_errors_ignores_warnings() -> None:
    warning = Diagnostic(code="W", message="w", line=1, severity="warning")
    error = LexError(1, "@").diagnostic

    assert has_errors([warning, error]) is True
    assert has_errors([warning]) is False
    assert has_errors([]) is False
