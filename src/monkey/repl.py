"""Interactive token printer: reads lines, prints the tokens of each one."""

from __future__ import annotations

import argparse
import getpass
import sys
from typing import Sequence, TextIO

from .lexer import Lexer

PROMPT = "monkey> "
EXIT_COMMAND = "exit"


def start(stdin: TextIO, stdout: TextIO, prompt: str = PROMPT) -> int:
    """Run the read-lex-print loop until ``exit`` (0) or end of input (1)."""
    while True:
        stdout.write(prompt)
        stdout.flush()

        line = stdin.readline()
        if not line:
            return 1

        line = line.rstrip("\r\n")
        if line == EXIT_COMMAND:
            return 0

        for tok in Lexer(line):
            print(tok, file=stdout)


def greeting(user: str | None = None) -> str:
    if user is None:
        user = username()
    return f"Hello {user}! This is the Monkey programming language!"


def username() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "stranger"


def main(argv: Sequence[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Interactive Monkey token printer")
    ap.add_argument("--prompt", default=PROMPT, help=f"Prompt string (default: {PROMPT!r})")
    ap.add_argument(
        "--no-greeting",
        action="store_true",
        help="Do not print the greeting line on startup",
    )
    args = ap.parse_args(argv)

    if not args.no_greeting:
        print(greeting())
    return start(sys.stdin, sys.stdout, prompt=args.prompt)


if __name__ == "__main__":
    raise SystemExit(main())
