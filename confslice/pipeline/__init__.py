"""Parse carriers and file-level entrypoints."""

from confslice.pipeline.entrypoints import ConfSlice, load_and_parse, parse_text
from confslice.pipeline.result import ConfsliceParseResult

__all__ = [
    "ConfSlice",
    "ConfsliceParseResult",
    "load_and_parse",
    "parse_text",
]
