import io

import pytest

from bebopc.console import main, read_line, write, write_line


def test_read_line_strips_newline():
    assert read_line(io.StringIO("hello\nworld\n")) == "hello"


def test_read_line_reads_one_line_at_a_time():
    stream = io.StringIO("first\nsecond\n")
    assert [read_line(stream), read_line(stream)] == ["first", "second"]


def test_read_line_without_trailing_newline():
    assert read_line(io.StringIO("tail")) == "tail"


def test_read_line_empty_line():
    assert read_line(io.StringIO("\n")) == ""


def test_read_line_eof():
    with pytest.raises(EOFError):
        read_line(io.StringIO(""))


def test_write_and_write_line():
    out = io.StringIO()
    write("Insert a text: ", out)
    write_line("abc", out)
    assert out.getvalue() == "Insert a text: abc\n"


def test_write_line_round_trip():
    out = io.StringIO()
    write_line("some text", out)
    assert read_line(io.StringIO(out.getvalue())) == "some text"


def test_main_echoes_short_line(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("hello\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Insert a text: hello\n")
    lines = out.splitlines()
    assert "Buffer::allmemory: 24" in lines
    assert "Buffer::length: 6" in lines
    assert "Buffer::buffer: hello" in lines


def test_main_grows_buffer_for_long_line(monkeypatch, capsys):
    text = "x" * 30
    monkeypatch.setattr("sys.stdin", io.StringIO(text + "\n"))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "Buffer::allmemory: 152" in lines
    assert f"Buffer::length: {len(text) + 1}" in lines
    assert f"Buffer::buffer: {text}" in lines


def test_main_without_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 1
    assert capsys.readouterr().out == "Insert a text: "