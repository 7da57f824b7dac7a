"""Simple CLI to lex a Monkey source file (or an expression) and print tokens."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable, List, Sequence

from .lexer import Lexer
from .tokens import TokenKind


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Lex Monkey source and print tokens")
    src = parser.add_mutually_exclusive_group(required=True)
    src.add_argument("path", nargs="?", type=Path, help="Path to Monkey source")
    src.add_argument("-e", "--expr", default=None, help="Lex this text instead of a file")
    parser.add_argument(
        "--show-eof",
        action="store_true",
        help="Also print the EOF token that ends each line",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any ILLEGAL token was found",
    )
    args = parser.parse_args(argv)

    if args.expr is not None:
        text = args.expr
    else:
        try:
            text = args.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            log_error(f"file not found: {args.path}")
            return 1
        except UnicodeDecodeError as e:
            log_error(f"not valid UTF-8: {args.path} ({e.reason})")
            return 1

    illegal = dump_lines(source_lines(text), show_eof=args.show_eof)
    if illegal and args.strict:
        log_error(f"{illegal} illegal character(s)")
        return 1
    return 0


def source_lines(text: str) -> List[str]:
    """Split on "\\n" only, as the REPL reads lines; a trailing "\\r" is dropped."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.rstrip("\r") for line in lines]


def dump_lines(lines: Iterable[str], show_eof: bool = False) -> int:
    """Print the tokens of each line; return how many were ILLEGAL."""
    illegal = 0
    for lineno, line in enumerate(lines, start=1):
        lexer = Lexer(line)
        while True:
            tok = lexer.next_token()
            if tok.kind is TokenKind.EOF:
                if show_eof:
                    print(f"{lineno}:{tok.kind.name}\t{tok.literal!r}")
                break
            if tok.kind is TokenKind.ILLEGAL:
                illegal += 1
            print(f"{lineno}:{tok.kind.name}\t{tok.literal!r}")
    return illegal


def log_error(msg: str) -> None:
    print(f"[monkey-lex:error] {msg}")


if __name__ == "__main__":
    raise SystemExit(main())
