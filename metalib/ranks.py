"""Helpers for strings (rank 1) and lists of strings (rank 2)."""

import re
import sys
from collections.abc import Sequence
from typing import TextIO

MAX_FILE_SIZE = 1_000_000
_WORD = re.compile(r"[A-Za-z0-9]+")


def _prefix_match(line: str, prefix: str) -> bool:
    """Compare characters until either string ends.

    A line shorter than the prefix matches if it is a prefix of it.
    """
    common = min(len(line), len(prefix))
    return line[:common] == prefix[:common]


def count_char(text: str, char: str) -> int:
    """Count the occurrences of ``char`` in ``text``."""
    return text.count(char)


def cut(text: str, delim: str) -> str:
    """Return ``text`` up to the first ``delim``."""
    return text.partition(delim)[0]


def file_to_text(path) -> str:
    """Read at most one megabyte of a file, up to its first NUL byte."""
    with open(path, "rb") as handle:
        data = handle.read(MAX_FILE_SIZE)
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def word_array(text: str) -> list[str]:
    """Split ``text`` into its runs of ASCII letters and digits."""
    return _WORD.findall(text)


def offset(text: str, prefix: str) -> str:
    """Drop as many leading characters as ``prefix`` has."""
    return text[len(prefix):]


def extend(lines: Sequence[str], added_slots: int) -> list[str | None]:
    """Copy ``lines`` and append ``added_slots`` empty slots."""
    if added_slots < 0:
        raise ValueError("added_slots must not be negative")
    return [*lines, *([None] * added_slots)]


def print_lines(lines: Sequence[str], stream: TextIO | None = None) -> None:
    """Write each line followed by a newline."""
    out = stream or sys.stdout
    for line in lines:
        out.write(f"{line}\n")


def find_prefixed(lines: Sequence[str], prefix: str) -> str | None:
    """Return the first line that starts with ``prefix``, or None."""
    return next((line for line in lines if _prefix_match(line, prefix)), None)


def find_prefixed_index(lines: Sequence[str], prefix: str) -> int:
    """Return the index of the first line starting with ``prefix``, 0 if none."""
    return next(
        (index for index, line in enumerate(lines) if _prefix_match(line, prefix)),
        0,
    )


def clone(lines: Sequence[str]) -> list[str]:
    """Return an independent copy of ``lines``."""
    return list(lines)