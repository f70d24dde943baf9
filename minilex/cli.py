"""Interactive lexer: read lines and print the tokens found in each."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, List, Optional

from .scanner import tokenize
from .tokens import Token
from .unquote import remove_quotes

PROMPT = "lex> "


def format_token(token: Token) -> str:
    """Render a token as ``[text] (KIND)``."""
    return f"[{token.text}] ({token.type.name})"


def _interactive_lines() -> Iterator[str]:
    try:
        import readline  # noqa: F401  (enables line editing and history)
    except ImportError:
        pass
    while True:
        try:
            yield input(PROMPT)
        except EOFError:
            return


def _piped_lines() -> Iterator[str]:
    for line in sys.stdin:
        yield line[:-1] if line.endswith("\n") else line


def main(argv: Optional[List[str]] = None) -> int:
    """Read lines until end of input, printing each line's tokens."""
    parser = argparse.ArgumentParser(
        prog="minilex", description="Print the tokens of each line read."
    )
    parser.parse_args(argv)

    lines = _interactive_lines() if sys.stdin.isatty() else _piped_lines()
    for line in lines:
        try:
            tokens = tokenize(line)
        except ValueError as exc:
            print(f"minilex: {exc}", file=sys.stderr)
            continue
        remove_quotes(tokens)
        for token in tokens:
            print(format_token(token))
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())