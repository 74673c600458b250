#!/usr/bin/env python3
"""Check one configuration file: prints OK or ERROR and exits 0 or 1."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from confslice.diagnostics import format_diagnostic
from confslice.parser import ParseMode
from confslice.pipeline import load_and_parse


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check a configuration file for syntax errors")
    parser.add_argument("path", type=Path, help="Configuration file to check")
    parser.add_argument(
        "--mode",
        type=ParseMode,
        choices=list(ParseMode),
        default=ParseMode.STRICT,
        help="Parser profile (default: strict)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    result = load_and_parse(args.path, mode=args.mode)
    if result.ok:
        print("OK")
        return 0

    print("ERROR")
    for diagnostic in result.diagnostics:
        print(format_diagnostic(diagnostic), file=sys.stderr)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
