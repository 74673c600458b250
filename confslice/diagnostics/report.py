"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from confslice.diagnostics.diagnostic import Diagnostic


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """Render a diagnostic the way the command-line driver prints it.

    Diagnostics tied to a source line get the ``Error at line <n>:`` prefix;
    file-level ones (a missing file) are printed as-is.
    """
    if diagnostic.line is None:
        return diagnostic.message
    label = "Error" if diagnostic.severity == "error" else "Warning"
    return f"{label} at line {diagnostic.line}: {diagnostic.message}"
