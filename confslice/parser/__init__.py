"""Parser infrastructure (token source + recursive-descent grammar)."""

from confslice.parser.confslice import parse, parse_file, parse_stream
from confslice.parser.grammar import (
    parse_array,
    parse_config,
    parse_entity,
    parse_key,
    parse_key_or_entity,
    parse_list,
    parse_pairs,
    parse_value,
)
from confslice.parser.options import ParseMode, ParserOptions, resolve_options
from confslice.parser.parser import Parser
from confslice.parser.token_source import TokenSource

__all__ = [
    "ParseMode",
    "Parser",
    "ParserOptions",
    "TokenSource",
    "parse",
    "parse_array",
    "parse_config",
    "parse_entity",
    "parse_file",
    "parse_key",
    "parse_key_or_entity",
    "parse_list",
    "parse_pairs",
    "parse_stream",
    "parse_value",
    "resolve_options",
]
