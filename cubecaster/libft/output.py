"""Formatted and plain output to text streams.

``format_printf`` understands the conversions ``%c``, ``%s``, ``%p``, ``%d``,
``%i``, ``%u``, ``%x``, ``%X`` and ``%%``. An unknown conversion, or a ``%``
at the very end of the format, produces no output.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO, Union

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"
_DECIMAL = "0123456789"
_NULL_TEXT = "(null)"
_INT_MIN = -(2**31)


def _to_int32(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer argument, got {value!r}")
    return (value - _INT_MIN) % 2**32 + _INT_MIN


def _in_base(value: int, digits: str) -> str:
    base = len(digits)
    out = []
    while True:
        value, rem = divmod(value, base)
        out.append(digits[rem])
        if value == 0:
            break
    return "".join(reversed(out))


def _char_text(c: Union[int, str]) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(_to_int32(c) & 0xFF)


def _number(value: Any, conversion: str) -> str:
    n = _to_int32(value)
    if conversion in "di":
        return ("-" if n < 0 else "") + _in_base(abs(n), _DECIMAL)
    unsigned = n % 2**32
    if conversion == "u":
        return _in_base(unsigned, _DECIMAL)
    return _in_base(unsigned, _LOWER_HEX if conversion == "x" else _UPPER_HEX)


def _pointer(value: Any) -> str:
    if value is None:
        value = 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an address as an integer, got {value!r}")
    return "0x" + _in_base(value % 2**64, _LOWER_HEX)


def _pieces(fmt: str, args: tuple) -> Iterator[str]:
    pending = iter(args)

    def take() -> Any:
        try:
            return next(pending)
        except StopIteration:
            raise ValueError(f"not enough arguments for format {fmt!r}") from None

    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        conversion = next(chars, "")
        if conversion == "c":
            yield _char_text(take())
        elif conversion == "s":
            text = take()
            yield _NULL_TEXT if text is None else str(text)
        elif conversion == "p":
            yield _pointer(take())
        elif conversion in ("d", "i", "u", "x", "X"):
            yield _number(take(), conversion)
        elif conversion == "%":
            yield "%"


def format_printf(fmt: str, *args: Any) -> str:
    """The text ``printf(fmt, *args)`` would write."""
    return "".join(_pieces(fmt, args))


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)


def put_char(c: Union[int, str], stream: Optional[TextIO] = None) -> None:
    """Write one character."""
    _stream(stream).write(_char_text(c))


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text``; None writes nothing."""
    if text is None:
        return
    _stream(stream).write(text)


def put_endl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline; None writes nothing."""
    if text is None:
        return
    _stream(stream).write(text + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write a signed 32-bit integer in decimal."""
    _stream(stream).write(_number(n, "d"))