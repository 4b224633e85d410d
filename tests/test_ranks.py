import io

import pytest

from metalib.ranks import (
    clone,
    count_char,
    cut,
    extend,
    file_to_text,
    find_prefixed,
    find_prefixed_index,
    offset,
    print_lines,
    word_array,
)

ENV = ["HOME=/home/user", "PATH=/bin", "SHELL=/bin/sh"]


def test_count_char():
    assert count_char("banana", "a") == 3
    assert count_char("banana", "z") == 0


def test_cut():
    assert cut("a:b:c", ":") == "a"
    assert cut("abc", ":") == "abc"


def test_file_to_text_round_trip(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("line one\nline two\n")
    assert file_to_text(path) == "line one\nline two\n"


def test_file_to_text_stops_at_nul(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"head\0tail")
    assert file_to_text(path) == "head"


def test_file_to_text_missing(tmp_path):
    with pytest.raises(OSError):
        file_to_text(tmp_path / "missing")


def test_word_array():
    assert word_array("  hello, world 42!") == ["hello", "world", "42"]
    assert word_array("...") == []


def test_offset():
    assert offset("PATH=/bin", "PATH=") == "/bin"


def test_extend():
    assert extend(["a"], 2) == ["a", None, None]
    with pytest.raises(ValueError):
        extend(["a"], -1)


def test_print_lines():
    buf = io.StringIO()
    print_lines(["a", "b"], buf)
    assert buf.getvalue() == "a\nb\n"


def test_find_prefixed():
    assert find_prefixed(ENV, "PATH=") == "PATH=/bin"
    assert find_prefixed(ENV, "USER=") is None
    assert find_prefixed(["PA"], "PATH") == "PA"


def test_find_prefixed_index():
    assert find_prefixed_index(ENV, "SHELL=") == 2
    assert find_prefixed_index(ENV, "USER=") == 0


def test_clone_is_independent():
    copy = clone(ENV)
    assert copy == ENV
    copy.append("X=1")
    assert len(copy) == len(ENV) + 1