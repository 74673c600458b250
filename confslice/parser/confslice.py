"""High-level parse entrypoints for confslice source."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import TextIO

from confslice.errors import ConfigIOError
from confslice.lexer import CharSource, Lexer
from confslice.model import Configuration
from confslice.parser.grammar import parse_config
from confslice.parser.options import ParseMode, ParserOptions, resolve_options
from confslice.parser.parser import Parser
from confslice.parser.token_source import TokenSource

logger = logging.getLogger(__name__)


def parse_stream(
    stream: TextIO,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> Configuration:
    """Parse everything readable from `stream`; raises `ConfsliceError` on the first error."""
    resolved_options = resolve_options(options=options, mode=mode)
    logger.debug(
        "Parsing in %s mode (retain_pairs=%s, keep_string_whitespace=%s)",
        resolved_options.mode,
        resolved_options.retain_pairs,
        resolved_options.keep_string_whitespace,
    )

    lexer = Lexer(CharSource(stream), keep_string_whitespace=resolved_options.keep_string_whitespace)
    source = TokenSource(lexer)
    parser = Parser(source, options=resolved_options)

    config = parse_config(parser)
    logger.debug(
        "Parsed %d tokens into %d keys and %d entities",
        source.consumed,
        config.size_of_keys(),
        config.size_of_entities(),
    )
    return config


def parse(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> Configuration:
    return parse_stream(io.StringIO(text), options=options, mode=mode)


def parse_file(
    path: str | Path,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> Configuration:
    """Open `path` and parse it; the file is closed on every exit path.

    Undecodable bytes are carried through as surrogates: inside strings they
    are kept, anywhere else they are rejected as illegal characters.
    """
    file_path = Path(path)
    try:
        handle = file_path.open("r", encoding="utf-8", errors="surrogateescape", newline="")
    except OSError:
        raise ConfigIOError(str(path)) from None

    logger.debug("Opened %s", file_path)
    with handle:
        return parse_stream(handle, options=options, mode=mode)
