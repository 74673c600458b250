#!/usr/bin/env python
import argparse
from pathlib import Path

from confslice.errors import ConfsliceError
from confslice.lexer import CharSource, Lexer, Token, TokenKind


def format_token(idx: int, token: Token) -> str:
    base = f"[{idx}] kind={token.kind.name} line={token.line} text={token.text!r}"
    if token.kind == TokenKind.UNKNOWN:
        return base + " (rejected by the parser)"
    return base


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump the token stream of a configuration file")
    parser.add_argument("path", type=Path, help="Configuration file to tokenize")
    parser.add_argument("--output", type=Path, default=None, help="Write tokens here instead of stdout")
    args = parser.parse_args()

    lines: list[str] = []
    with args.path.open("r", encoding="utf-8", errors="surrogateescape", newline="") as handle:
        lexer = Lexer(CharSource(handle))
        try:
            while True:
                token = lexer.next_token()
                lines.append(format_token(len(lines), token))
                if token.kind == TokenKind.EOF:
                    break
        except ConfsliceError as exc:
            lines.append(f"!! {exc}")

    if args.output is None:
        print("\n".join(lines))
        return 0

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text("\n".join(lines) + "\n", encoding="utf-8")
    print(f"Wrote {len(lines)} tokens to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
