"""Fetch a URL and copy the response body to a stream."""

from __future__ import annotations

import sys
import urllib.error
import urllib.request
from contextlib import closing
from typing import BinaryIO

_CHUNK_SIZE = 64 * 1024


def fetch(url: str, out: BinaryIO) -> int:
    """Copy the body of a GET on ``url`` to ``out``; return the bytes copied.

    Error statuses are not treated as failures: their body is copied too.
    """
    try:
        response = urllib.request.urlopen(url)
    except urllib.error.HTTPError as err:
        response = err

    total = 0
    with closing(response):
        while chunk := response.read(_CHUNK_SIZE):
            out.write(chunk)
            total += len(chunk)
    out.flush()
    return total


def main(argv: list[str] | None = None) -> int:
    """Print the body found at the URL given as the first argument."""
    args = sys.argv[1:] if argv is None else argv
    try:
        if not args:
            raise ValueError("URL is required")
        fetch(args[0], sys.stdout.buffer)
    except (OSError, ValueError) as err:
        print("Error:", err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())