"""Parse carriers returned by the pipeline entrypoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from confslice.diagnostics import has_errors

if TYPE_CHECKING:
    from confslice.diagnostics import Diagnostic
    from confslice.errors import ConfsliceError
    from confslice.model import Configuration
    from confslice.parser.options import ParserOptions


@dataclass(slots=True)
class ConfsliceParseResult:
    """Outcome of one parse: the configuration, or the error that stopped it.

    A failed parse never carries a partial configuration.
    """

    source_path: str | None
    options: ParserOptions
    configuration: Configuration | None
    diagnostics: list[Diagnostic] = field(default_factory=list)
    error: ConfsliceError | None = None

    @property
    def ok(self) -> bool:
        return self.configuration is not None

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    def unwrap(self) -> Configuration:
        """Return the configuration or re-raise the error that stopped the parse."""
        if self.configuration is None:
            if self.error is not None:
                raise self.error
            raise RuntimeError("Parse result holds neither a configuration nor an error")
        return self.configuration
