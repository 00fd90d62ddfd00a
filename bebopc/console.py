"""Line-oriented console input and output."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

__all__ = ["read_line", "write", "write_line", "main"]

INITIAL_CAPACITY = 24
GROWTH_STEP = 128
PROMPT = "Insert a text: "


def read_line(stream: TextIO | None = None) -> str:
    """Read one line and return it without its newline.

    Raises EOFError when nothing is left to read.
    """
    stream = sys.stdin if stream is None else stream
    line = stream.readline()
    if not line:
        raise EOFError("no input to read")
    return line[:-1] if line.endswith("\n") else line


def write(text: str, stream: TextIO | None = None) -> None:
    """Write text as it is."""
    stream = sys.stdout if stream is None else stream
    stream.write(text)
    stream.flush()


def write_line(text: str, stream: TextIO | None = None) -> None:
    """Write text followed by a newline."""
    write(text + "\n", stream)


def _capacity_for(length: int) -> int:
    """Size the line buffer reaches when holding ``length`` bytes."""
    extra = max(0, length - INITIAL_CAPACITY)
    return INITIAL_CAPACITY + GROWTH_STEP * -(-extra // GROWTH_STEP)


def main(argv: list[str] | None = None) -> int:
    """Prompt for a line, echo it, and report the buffer it needed."""
    argparse.ArgumentParser(
        prog="bebop-io", description="Read a line and echo it with buffer details."
    ).parse_args(argv)

    write(PROMPT)
    try:
        line = read_line()
    except EOFError:
        return 1

    write_line(line)
    length = len(line.encode("utf-8")) + 1
    print(f"\nBuffer::allmemory: {_capacity_for(length)}")
    print(f"Buffer::length: {length}")
    print(f"Buffer::buffer: {line}")
    return 0


if __name__ == "__main__":
    sys.exit(main())