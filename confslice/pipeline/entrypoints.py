"""Entrypoints that turn parse errors into result carriers."""

from __future__ import annotations

import logging
from pathlib import Path

from confslice.diagnostics import Diagnostic, format_diagnostic
from confslice.errors import ConfsliceError
from confslice.model import Configuration
from confslice.parser import ParseMode, ParserOptions, parse, parse_file, resolve_options
from confslice.pipeline.result import ConfsliceParseResult

logger = logging.getLogger(__name__)


def parse_text(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> ConfsliceParseResult:
    """Parse in-memory source into a result carrier."""
    resolved_options = resolve_options(options=options, mode=mode)
    try:
        config = parse(text, options=resolved_options)
    except ConfsliceError as exc:
        return _failed(None, resolved_options, exc)
    return ConfsliceParseResult(source_path=None, options=resolved_options, configuration=config)


def load_and_parse(
    path: str | Path,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> ConfsliceParseResult:
    """Open, tokenize and parse one configuration file.

    A missing file yields a failed result with an ``IO_FILE_NOT_FOUND``
    diagnostic before any tokenizing starts.
    """
    resolved_options = resolve_options(options=options, mode=mode)
    source_path = str(path).replace("\\", "/")
    try:
        config = parse_file(path, options=resolved_options)
    except ConfsliceError as exc:
        return _failed(source_path, resolved_options, exc)
    return ConfsliceParseResult(source_path=source_path, options=resolved_options, configuration=config)


class ConfSlice:
    """Stateful loader: `analyze` a file, then read its `configuration`.

    `analyze` returns 0 on success and 1 on failure. After a failure the
    configuration from an earlier successful call is discarded.
    """

    def __init__(self, options: ParserOptions | None = None, *, mode: ParseMode | None = None) -> None:
        self._options = resolve_options(options=options, mode=mode)
        self._configuration: Configuration | None = None
        self._diagnostics: list[Diagnostic] = []

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    def analyze(self, filename: str | Path) -> int:
        result = load_and_parse(filename, self._options)
        self._configuration = result.configuration
        self._diagnostics = list(result.diagnostics)
        return 0 if result.ok else 1

    def configuration(self) -> Configuration | None:
        return self._configuration


def _failed(
    source_path: str | None,
    options: ParserOptions,
    exc: ConfsliceError,
) -> ConfsliceParseResult:
    logger.debug("Parse of %s failed: %s", source_path or "<memory>", format_diagnostic(exc.diagnostic))
    return ConfsliceParseResult(
        source_path=source_path,
        options=options,
        configuration=None,
        diagnostics=[exc.diagnostic],
        error=exc,
    )
