"""Copy a file, prefixing each line with its line number."""

from __future__ import annotations

import sys


def _strip_ending(line: bytes) -> bytes:
    if line.endswith(b"\n"):
        line = line[:-1]
    if line.endswith(b"\r"):
        line = line[:-1]
    return line


def number_lines(src: str, dst: str) -> int:
    """Write each line of ``src`` to ``dst`` as ``N:line``.

    Returns the number of lines written.
    """
    try:
        source = open(src, "rb")
    except OSError as err:
        raise OSError(f"ファイルが開けませんでした。{src}") from err

    with source:
        try:
            target = open(dst, "wb")
        except OSError as err:
            raise OSError(f"ファイルを書き出せませんでした。{dst}") from err
        with target:
            count = 0
            for count, line in enumerate(source, start=1):
                target.write(b"%d:" % count + _strip_ending(line) + b"\n")
    return count


def main(argv: list[str] | None = None) -> int:
    """Number the lines of the first file into the second."""
    args = sys.argv[1:] if argv is None else argv
    try:
        if len(args) < 2:
            raise ValueError("引数が足りません。")
        number_lines(args[0], args[1])
    except (OSError, ValueError) as err:
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())