"""String helpers: number conversion, splitting, trimming and bounded search."""

from __future__ import annotations

from typing import Optional

_WHITESPACE = "\t\n\v\f\r "
_DIGITS = "0123456789"


def _wrap_int32(number: int) -> int:
    """Reduce ``number`` to a signed 32-bit value the way C integer overflow does."""
    number &= 0xFFFFFFFF
    return number - 0x100000000 if number >= 0x80000000 else number


def atoi(text: str) -> int:
    """Convert the leading number of ``text`` to an int.

    Leading whitespace is skipped and one optional sign is honoured; the
    conversion stops at the first non-digit. Text without digits gives 0.
    The result wraps around like a signed 32-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if char not in _DIGITS:
            break
        digits.append(char)
    if not digits:
        return 0
    return _wrap_int32(sign * int("".join(digits)))


def itoa(number: int) -> str:
    """Decimal representation of ``number``, with a leading '-' when negative."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"not an integer: {number!r}")
    return str(number)


def split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on ``delimiter``, leaving out empty pieces."""
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    return [word for word in text.split(delimiter) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start`` on.

    A start beyond the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Position of the first ``little`` lying wholly within the first ``length``
    characters of ``big``, or None when there is none.

    An empty ``little`` is found at position 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not little:
        return 0
    position = big[:length].find(little)
    return None if position < 0 else position


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` as if in a buffer of ``size`` characters.

    Returns the resulting string and the length that was tried: the length
    of ``dst`` plus that of ``src``, or ``size`` plus the length of ``src``
    when ``dst`` already fills the buffer. The result keeps room for a
    terminator, so it holds at most ``size - 1`` characters of its own.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dst_len = min(len(dst), size)
    if size <= dst_len:
        return dst, len(src) + size
    room = size - dst_len - 1
    return dst + src[:room], dst_len + len(src)