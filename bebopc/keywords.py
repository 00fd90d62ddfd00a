"""Reserved words of the Bebop language and their lookup by hash code."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

__all__ = [
    "KeyKind",
    "ObjectType",
    "Keyword",
    "IDENTIFIERS",
    "OBJECTS",
    "METHODS",
    "string_code",
    "is_a_keyword",
]

_UINT_MASK = 0xFFFFFFFF


class KeyKind(IntEnum):
    """Category of a reserved word."""

    IDENT = 0
    OBJECT = 1
    FN = 2


class ObjectType(Enum):
    """Data types a value in the language can have."""

    I8 = 0
    I16 = 1
    I32 = 2
    I64 = 3
    I128 = 4
    U8 = 5
    U16 = 6
    U32 = 7
    U64 = 8
    U128 = 9
    F32 = 10
    F64 = 11
    CHAR = 12
    STR = 13
    STRING = 14
    ARRAY = 15
    BUFFER = 16
    HASHMAP = 17
    LIST = 18
    SET = 19
    STRUCT = 20
    ENUM = 21


@dataclass(frozen=True)
class Keyword:
    """A reserved word with its precomputed hash code and category."""

    text: str
    code: int
    kind: KeyKind

    @property
    def length(self) -> int:
        """Length of the word in bytes."""
        return len(self.text.encode("utf-8"))


def _kw(text: str, code: int, kind: KeyKind = KeyKind.IDENT) -> Keyword:
    return Keyword(text, code, kind)


IDENTIFIERS: tuple[Keyword, ...] = (
    _kw("if", 10332),
    _kw("elif", 10557),
    _kw("else", 10688),
    _kw("switch", 11957),
    _kw("match", 11953),
    _kw("for", 10421),
    _kw("while", 12692),
    _kw("loop", 10956),
    _kw("break", 10219),
    _kw("continue", 10638),
    _kw("case", 10081),
    _kw("default", 10933),
    _kw("return", 12088),
    _kw("struct", 13664),
    _kw("enum", 10732),
    _kw("fn", 10640),
    _kw("import", 11020),
    _kw("imut", 10672),
    _kw("mthd", 11430),
    _kw("contract", 10639),
    _kw("let", 11223),
    _kw("i8", 4604),
    _kw("i16", 3948),
    _kw("i32", 3930),
    _kw("i64", 3947),
    _kw("i128", 4885),
    _kw("u8", 6020),
    _kw("u16", 6580),
    _kw("u32", 6118),
    _kw("u64", 6571),
    _kw("u128", 6277),
    _kw("char", 10223),
    _kw("f32", 4009),
    _kw("f64", 4208),
    _kw("str", 13471, KeyKind.FN),
    _kw("null", 12383),
    _kw("none", 11489),
    _kw("_compiler", 9314),
    _kw("_define", 7771),
    _kw("_if", 7192),
    # These two carry the codes of "elif" and "else", as the table defines them.
    _kw("_elif", 10557),
    _kw("_else", 10688),
    _kw("_end", 7181),
)

OBJECTS: tuple[Keyword, ...] = (
    _kw("IO", 5499, KeyKind.OBJECT),
    _kw("File", 5345, KeyKind.OBJECT),
    _kw("Buffer", 5346, KeyKind.OBJECT),
    _kw("HashMap", 5858, KeyKind.OBJECT),
    _kw("String", 6592, KeyKind.OBJECT),
    _kw("Set", 7128, KeyKind.OBJECT),
    _kw("List", 5874, KeyKind.OBJECT),
    _kw("Type", 6401, KeyKind.OBJECT),
)

METHODS: tuple[Keyword, ...] = (
    _kw("new", 11654, KeyKind.FN),
    _kw("from", 10731, KeyKind.FN),
    _kw("push", 11334, KeyKind.FN),
    _kw("foreach", 10696, KeyKind.FN),
    _kw("copy", 10202, KeyKind.FN),
    _kw("offset", 11978, KeyKind.FN),
    _kw("remove_f_id", 12653, KeyKind.FN),
    _kw("remove_f_v", 14390, KeyKind.FN),
    _kw("include", 11087, KeyKind.FN),
    _kw("length", 11974, KeyKind.FN),
    _kw("capacity", 10747, KeyKind.FN),
    _kw("resize", 11861, KeyKind.FN),
    _kw("wrt", 14173, KeyKind.FN),
    _kw("wrtln", 12867, KeyKind.FN),
    _kw("rdln", 11748, KeyKind.FN),
    _kw("rdchar", 13692, KeyKind.FN),
    _kw("open", 12711, KeyKind.FN),
    _kw("write", 12742, KeyKind.FN),
    _kw("read_file", 12251, KeyKind.FN),
    _kw("read_line", 12247, KeyKind.FN),
    _kw("close", 10235, KeyKind.FN),
    _kw("to_string", 12931, KeyKind.FN),
    _kw("to_integer", 14330, KeyKind.FN),
    _kw("to_float", 14492, KeyKind.FN),
)

_MIN_LENGTH = 2  # length of "if"
_MAX_LENGTH = 11  # length of "remove_f_id"
_MIN_CODE = 3930  # code of "i32"
_MAX_CODE = 14492  # code of "to_float"


def _as_bytes(word: str | bytes) -> bytes:
    return word.encode("utf-8") if isinstance(word, str) else bytes(word)


def _signed(byte: int) -> int:
    return byte - 256 if byte >= 128 else byte


def string_code(word: str | bytes) -> int:
    """Return the 32-bit hash code used to recognise reserved words.

    Bytes are taken as signed chars; the running sum stops at a NUL byte.
    """
    data = _as_bytes(word)
    if not data:
        raise ValueError("cannot compute the code of an empty word")

    chars = [_signed(b) for b in data]
    terminated = chars[: chars.index(0)] if 0 in chars else chars

    code = sum(terminated)
    code += sum(cur ^ prev for prev, cur in zip(terminated, terminated[1:]))

    first, last = chars[0], chars[-1]
    code += len(chars) * (first ^ last) + (first & last) * first
    return code & _UINT_MASK


def is_a_keyword(word: str | bytes) -> Keyword | None:
    """Return the reserved word matching ``word``, or None.

    Objects are searched first, then methods, then identifiers. An entry
    whose code and length match but whose text differs ends the search of
    its table; among identifiers it ends the whole search.
    """
    data = _as_bytes(word)
    if not _MIN_LENGTH <= len(data) <= _MAX_LENGTH:
        return None

    code = string_code(data)
    if not _MIN_CODE <= code <= _MAX_CODE:
        return None

    for table in (OBJECTS, METHODS, IDENTIFIERS):
        candidate = next(
            (k for k in table if k.code == code and k.length == len(data)),
            None,
        )
        if candidate is None:
            continue
        if candidate.text.encode("utf-8") == data:
            return candidate
        if table is IDENTIFIERS:
            return None
    return None