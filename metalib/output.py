"""Small writers for characters, strings and numbers, plus a tiny printf."""

import sys
from typing import Any, TextIO


def putchar(c: str, stream: TextIO | None = None) -> None:
    """Write one character to ``stream`` (standard output by default)."""
    (stream or sys.stdout).write(c)


def putstr(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` to ``stream`` (standard output by default)."""
    (stream or sys.stdout).write(text)


def puterr(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` to ``stream`` (standard error by default)."""
    (stream or sys.stderr).write(text)


def put_nbr(nb: int, stream: TextIO | None = None) -> None:
    """Write the decimal form of ``nb``."""
    putstr(str(nb), stream)


def _as_char(value: Any) -> str:
    return chr(value) if isinstance(value, int) else str(value)


def mprintf(
    fmt: str,
    *args: Any,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> None:
    """Print ``fmt``, replacing ``%s``, ``%e``, ``%d``, ``%i`` and ``%c``.

    ``%e`` writes its string argument to the error stream. Any other
    character after ``%`` is dropped without consuming an argument.
    """
    values = iter(args)

    def next_value() -> Any:
        try:
            return next(values)
        except StopIteration:
            raise ValueError("not enough arguments for format") from None

    chars = iter(fmt)
    for char in chars:
        if char != "%":
            putchar(char, out)
            continue
        flag = next(chars, "")
        if flag == "s":
            putstr(next_value(), out)
        elif flag == "e":
            puterr(next_value(), err)
        elif flag in ("d", "i"):
            put_nbr(int(next_value()), out)
        elif flag == "c":
            putchar(_as_char(next_value()), out)