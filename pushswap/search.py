"""Bounded copying, comparison and character search over strings and bytes."""

from __future__ import annotations

from typing import Optional


def _c_string(text: str) -> str:
    """The part of ``text`` before the first NUL, as a C string would see it."""
    return text.split("\0", 1)[0]


def _single_char(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character: {char!r}")
    return char


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` as if into a buffer of ``size`` characters.

    Returns the copied string, at most ``size - 1`` characters long so that
    a terminator still fits, and the full length of ``src``. A size of zero
    copies nothing. A returned length of ``size`` or more means the copy
    was truncated.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    source = _c_string(src)
    if size == 0:
        return "", len(source)
    return source[: size - 1], len(source)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first differing characters' codes, or 0
    when the strings agree up to ``n`` characters or up to their end.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    first = _c_string(s1)
    second = _c_string(s2)
    for position in range(n):
        left = ord(first[position]) if position < len(first) else 0
        right = ord(second[position]) if position < len(second) else 0
        if left != right or left == 0:
            return left - right
    return 0


def memcmp(b1: bytes, b2: bytes, n: int) -> int:
    """Compare the first ``n`` bytes of two byte strings.

    Returns the difference of the first differing bytes, or 0 when they
    match. Raises ValueError when either input is shorter than ``n``.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if n > len(b1) or n > len(b2):
        raise ValueError("n exceeds the length of the data")
    for left, right in zip(b1[:n], b2[:n]):
        if left != right:
            return left - right
    return 0


def strchr(text: str, char: str) -> Optional[int]:
    """Position of the first ``char`` in ``text``, or None.

    The terminator counts as part of the string: searching for NUL gives
    the length of the text.
    """
    char = _single_char(char)
    source = _c_string(text)
    if char == "\0":
        return len(source)
    position = source.find(char)
    return None if position < 0 else position


def strrchr(text: str, char: str) -> Optional[int]:
    """Position of the last ``char`` in ``text``, or None.

    Searching for NUL gives the length of the text.
    """
    char = _single_char(char)
    source = _c_string(text)
    if char == "\0":
        return len(source)
    position = source.rfind(char)
    return None if position < 0 else position


def memchr(data: bytes, byte: int, n: int) -> Optional[int]:
    """Position of the first ``byte`` within the first ``n`` bytes of ``data``.

    ``byte`` is reduced to an unsigned char. Raises ValueError when ``data``
    is shorter than ``n``.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if n > len(data):
        raise ValueError("n exceeds the length of the data")
    position = data.find(bytes([byte & 0xFF]), 0, n)
    return None if position < 0 else position