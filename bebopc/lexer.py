"""Lexical analysis of Bebop source text into keyword tokens."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Iterator

from bebopc.keywords import KeyKind, Keyword, is_a_keyword

__all__ = [
    "LexicalErrorCode",
    "LexicalError",
    "Token",
    "decode_char",
    "is_interruption",
    "tokenize",
    "main",
]

_SPACE = 0x20

_INTERRUPTIONS_1 = frozenset(b"+-*%/=^|&~`!?@#$(){}[],.:;<>\\'\"\n")
_INTERRUPTIONS_2 = frozenset(
    c.encode("utf-8") for c in "¹²³£¢¬°´®ŧøþªÆÐŊĦˀĸŁºˇ«»©µ·"
)
_INTERRUPTIONS_3 = frozenset(c.encode("utf-8") for c in "←↓→„“”•")


class LexicalErrorCode(IntEnum):
    """Kinds of failure the lexer reports."""

    INVALID_CHAR = 0
    REALLOC_WORD = 1

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    LexicalErrorCode.INVALID_CHAR: "invalid charactere",
    LexicalErrorCode.REALLOC_WORD: "error when relocating string",
}


class LexicalError(Exception):
    """Raised when the source cannot be split into words."""

    def __init__(self, code: LexicalErrorCode, position: int | None = None) -> None:
        super().__init__(code.message)
        self.code = code
        self.position = position

    @property
    def message(self) -> str:
        return self.code.message


@dataclass(frozen=True)
class Token:
    """A reserved word found in the source."""

    keyword: Keyword

    @property
    def text(self) -> str:
        return self.keyword.text

    @property
    def kind(self) -> KeyKind:
        return self.keyword.kind


def _as_bytes(source: str | bytes) -> bytes:
    return source.encode("utf-8") if isinstance(source, str) else bytes(source)


def decode_char(data: bytes, index: int) -> tuple[int, int]:
    """Read the UTF-8 character starting at ``index``.

    Returns the character's raw bytes packed big-endian into an integer,
    and its size in bytes. Raises LexicalError on an invalid lead byte or
    a character cut short by the end of the data.
    """
    lead = data[index]
    if lead < 0x80:
        size = 1
    elif lead >> 5 == 0x06:
        size = 2
    elif lead >> 4 == 0x0E:
        size = 3
    elif lead >> 3 == 0x1E:
        size = 4
    else:
        raise LexicalError(LexicalErrorCode.INVALID_CHAR, index)

    chunk = data[index : index + size]
    if len(chunk) < size:
        raise LexicalError(LexicalErrorCode.INVALID_CHAR, index)
    return int.from_bytes(chunk, "big"), size


def is_interruption(char: int, size: int) -> bool:
    """Tell whether a packed character of ``size`` bytes ends a word."""
    if size == 1:
        return char in _INTERRUPTIONS_1
    if size == 2:
        return char.to_bytes(2, "big") in _INTERRUPTIONS_2
    if size == 3:
        return char.to_bytes(3, "big") in _INTERRUPTIONS_3
    return False


def _scan(source: str | bytes) -> Iterator[tuple[bytes, Keyword | None]]:
    """Yield every word of the source with the keyword it names, if any.

    Spaces are dropped without ending a word; interruption characters end
    the current word and are themselves discarded.
    """
    data = _as_bytes(source)
    word = bytearray()
    index = 0
    while index < len(data):
        if data[index] == _SPACE:
            index += 1
            continue

        char, size = decode_char(data, index)
        if size == 4:
            raise LexicalError(LexicalErrorCode.INVALID_CHAR, index)

        if is_interruption(char, size):
            if size == 3:
                raise LexicalError(LexicalErrorCode.INVALID_CHAR, index)
            if word:
                finished = bytes(word)
                word.clear()
                yield finished, is_a_keyword(finished)
        else:
            word += data[index : index + size]
        index += size

    if word:
        finished = bytes(word)
        yield finished, is_a_keyword(finished)


def tokenize(source: str | bytes) -> list[Token]:
    """Split the source into words and return those that are reserved words."""
    return [Token(keyword) for _, keyword in _scan(source) if keyword is not None]


def main(argv: list[str] | None = None) -> int:
    """Run the lexer over a file (or standard input) and print its trace."""
    parser = argparse.ArgumentParser(
        prog="bebopc-lex", description="Print the words and keywords of a Bebop source."
    )
    parser.add_argument("file", nargs="?", help="source file; standard input if omitted")
    args = parser.parse_args(argv)

    if args.file is None:
        source = sys.stdin.buffer.read()
    else:
        source = Path(args.file).read_bytes()

    try:
        for word, keyword in _scan(source):
            print(f"word: {word.decode('utf-8', errors='replace')}")
            if keyword is None:
                print("not is a keyword")
                continue
            print(f"key.string: {keyword.text}")
            print(f"key.code: {keyword.code}")
            print(f"key.length: {keyword.length}")
            print(f"key.type: {int(keyword.kind)}")
            print()
    except LexicalError as error:
        print(f"ERROR[{int(error.code)}]: {error.message}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())