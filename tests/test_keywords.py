import pytest

from bebopc.keywords import (
    IDENTIFIERS,
    METHODS,
    OBJECTS,
    KeyKind,
    Keyword,
    ObjectType,
    is_a_keyword,
    string_code,
)


@pytest.mark.parametrize(
    "word, code",
    [
        ("if", 10332),
        ("fn", 10640),
        ("IO", 5499),
        ("str", 13471),
        ("i32", 3930),
        ("new", 11654),
        ("to_float", 14492),
    ],
)
def test_string_code_matches_table(word, code):
    assert string_code(word) == code


def test_string_code_accepts_bytes():
    assert string_code(b"while") == string_code("while")


def test_string_code_empty_raises():
    with pytest.raises(ValueError):
        string_code("")


def test_string_code_is_32_bit():
    assert 0 <= string_code("\u00e7\u00e7\u00e7") <= 0xFFFFFFFF


@pytest.mark.parametrize(
    "word, kind",
    [
        ("if", KeyKind.IDENT),
        ("fn", KeyKind.IDENT),
        ("i32", KeyKind.IDENT),
        ("str", KeyKind.FN),
        ("IO", KeyKind.OBJECT),
        ("new", KeyKind.FN),
        ("to_float", KeyKind.FN),
    ],
)
def test_is_a_keyword_finds_word(word, kind):
    found = is_a_keyword(word)
    assert isinstance(found, Keyword)
    assert found.text == word
    assert found.kind is kind


def test_every_consistent_entry_is_found():
    tables = IDENTIFIERS + OBJECTS + METHODS
    consistent = [k for k in tables if string_code(k.text) == k.code]
    assert consistent
    for keyword in consistent:
        result = is_a_keyword(keyword.text)
        assert result is not None
        assert result.text == keyword.text


@pytest.mark.parametrize("word", ["a", "x" * 12, "Hello", "banana"])
def test_is_a_keyword_rejects_non_keywords(word):
    assert is_a_keyword(word) is None


def test_is_a_keyword_empty():
    assert is_a_keyword("") is None


def test_keyword_length_is_byte_length():
    keyword = is_a_keyword("remove_f_v")
    assert keyword is not None
    assert keyword.length == len("remove_f_v")


def test_tables_have_expected_kinds():
    assert len(OBJECTS) == 8
    assert len(METHODS) == 24
    assert len(IDENTIFIERS) == 43
    objects = [k for k in OBJECTS if string_code(k.text) == k.code]
    methods = [k for k in METHODS if string_code(k.text) == k.code]
    assert objects
    assert methods
    assert all(is_a_keyword(k.text).kind is KeyKind.OBJECT for k in objects)
    assert all(is_a_keyword(k.text).kind is KeyKind.FN for k in methods)


def test_object_type_order():
    assert ObjectType(0) is ObjectType.I8
    assert ObjectType(len(ObjectType) - 1) is ObjectType.ENUM
    values = [t.value for t in ObjectType]
    assert values == sorted(values)