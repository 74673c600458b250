"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    STRICT = "strict"
    COMPAT = "compat"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Feature flags controlling compatibility behavior.

    `retain_pairs` stores the entries of ``key = { id = value; ... };``
    blocks. `keep_string_whitespace` keeps blanks and tabs inside quoted
    strings. The compat profile turns both off to reproduce older readers,
    which parsed pair blocks but dropped every entry, and squeezed all
    whitespace out of strings.
    """

    mode: ParseMode = ParseMode.STRICT
    retain_pairs: bool = True
    keep_string_whitespace: bool = True

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        if mode == ParseMode.COMPAT:
            return ParserOptions(mode=mode, retain_pairs=False, keep_string_whitespace=False)

        return ParserOptions(mode=mode, retain_pairs=True, keep_string_whitespace=True)


def resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()
