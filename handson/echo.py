"""Echo standard input back line by line behind a ``>`` prompt."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of ``stream`` without their line endings."""
    for line in stream:
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        yield line


def echo(stream: TextIO, out: TextIO) -> None:
    """Prompt with ``>`` and write back each line read from ``stream``."""
    lines = read_lines(stream)
    while True:
        out.write(">")
        out.flush()
        text = next(lines, None)
        if text is None:
            break
        out.write(text + "\n")


def main(argv: list[str] | None = None) -> int:
    """Echo standard input to standard output."""
    echo(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())