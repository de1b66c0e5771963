"""String helpers: splitting, trimming, searching, comparing and copying.

Searches return indices rather than pointers: ``None`` stands for "not
found". The bounded copy functions work on NUL-terminated byte buffers.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, MutableSequence, Optional, Union

CharLike = Union[int, str]
BytesLike = Union[bytes, bytearray, memoryview, str]

_NUL = "\0"


def _char(c: CharLike) -> str:
    """The character a C ``int`` argument converts to."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {c!r}")
    return chr(c % 256)


def _cstr(data: BytesLike) -> bytes:
    """The bytes of ``data`` up to, not including, its first NUL."""
    raw = data.encode() if isinstance(data, str) else bytes(data)
    return raw.split(b"\0", 1)[0]


def _check_size(size: int, buffer: bytearray) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(buffer):
        raise ValueError(f"size {size} exceeds the buffer length {len(buffer)}")


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping the empty pieces."""
    sep = _char(sep)
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``.

    A start past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    start = min(start, len(text))
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first unequal character codes, or 0. The
    shorter string behaves as if it ended with NUL.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for x, y in islice(zip_longest(a, b, fillvalue=_NUL), n):
        if x == _NUL and y == _NUL:
            break
        if x != y:
            return ord(x) - ord(y)
    return 0


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``text``.

    Searching for NUL finds the terminator at ``len(text)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``text``.

    Searching for NUL finds the terminator at ``len(text)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strjoin(a: Optional[str], b: Optional[str]) -> Optional[str]:
    """``a`` followed by ``b``; None if either is missing."""
    if a is None or b is None:
        return None
    return a + b


def strlcpy(dst: bytearray, src: BytesLike, size: int) -> int:
    """Copy ``src`` into ``dst`` as a NUL-terminated string of at most ``size`` bytes.

    Returns the length of ``src``; a result of ``size`` or more means the copy
    was truncated.
    """
    _check_size(size, dst)
    source = _cstr(src)
    if size:
        count = min(size - 1, len(source))
        dst[:count] = source[:count]
        dst[count] = 0
    return len(source)


def strlcat(dst: bytearray, src: BytesLike, size: int) -> int:
    """Append ``src`` to the NUL-terminated string in ``dst``, within ``size`` bytes.

    Returns the length the full result would have had; a result of ``size``
    or more means the copy was truncated.
    """
    _check_size(size, dst)
    source = _cstr(src)
    end = bytes(dst[:size]).find(b"\0")
    dst_len = size if end < 0 else end
    if dst_len < size:
        count = min(size - dst_len - 1, len(source))
        dst[dst_len:dst_len + count] = source[:count]
        dst[dst_len + count] = 0
    return dst_len + len(source)


def strmapi(
    text: Optional[str], func: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """A new string of ``func(index, char)`` for each character of ``text``."""
    if text is None or func is None:
        return None
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    text: Optional[MutableSequence],
    func: Optional[Callable[[int, MutableSequence], None]],
) -> None:
    """Call ``func(index, text)`` for each element, letting it edit ``text`` in place.

    Iteration stops at the first NUL element.
    """
    if text is None or func is None:
        return
    for index in range(len(text)):
        if text[index] in (0, _NUL):
            break
        func(index, text)