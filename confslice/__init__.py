"""confslice: parser for nested entity/key configuration files."""

from confslice.diagnostics import Diagnostic, format_diagnostic
from confslice.errors import (
    ConfigIOError,
    ConfigSyntaxError,
    ConfsliceError,
    DataConversionError,
    LexError,
    NestingTooDeepError,
)
from confslice.model import (
    Array,
    Configuration,
    Data,
    DataKind,
    Entity,
    Key,
    KeyKind,
    List,
    Pairs,
    Value,
)
from confslice.parser import ParseMode, ParserOptions, parse, parse_file
from confslice.pipeline import ConfSlice, ConfsliceParseResult, load_and_parse, parse_text

__all__ = [
    "Array",
    "ConfSlice",
    "ConfigIOError",
    "ConfigSyntaxError",
    "Configuration",
    "ConfsliceError",
    "ConfsliceParseResult",
    "Data",
    "DataConversionError",
    "DataKind",
    "Diagnostic",
    "Entity",
    "Key",
    "KeyKind",
    "LexError",
    "List",
    "NestingTooDeepError",
    "Pairs",
    "ParseMode",
    "ParserOptions",
    "Value",
    "format_diagnostic",
    "load_and_parse",
    "parse",
    "parse_file",
    "parse_text",
]
