"""ASCII character class tests and case conversion."""

from __future__ import annotations

from typing import TypeVar, Union

_Char = TypeVar("_Char", int, str)


def _code(c: Union[int, str]) -> int:
    if isinstance(c, bool):
        raise TypeError(f"not a character: {c!r}")
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character: {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"not a character: {c!r}")


def isalpha(c: Union[int, str]) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: Union[int, str]) -> bool:
    """True for decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: Union[int, str]) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: Union[int, str]) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: Union[int, str]) -> bool:
    """True for printable ASCII, space included (32 to 126)."""
    return 32 <= _code(c) <= 126


def _shift(c: _Char, low: int, high: int, offset: int) -> _Char:
    code = _code(c)
    if low <= code <= high:
        code += offset
    return chr(code) if isinstance(c, str) else code


def toupper(c: _Char) -> _Char:
    """Upper-case an ASCII lower-case letter; anything else is returned as is.

    A character gives a character and a code gives a code.
    """
    return _shift(c, ord("a"), ord("z"), -32)


def tolower(c: _Char) -> _Char:
    """Lower-case an ASCII upper-case letter; anything else is returned as is.

    A character gives a character and a code gives a code.
    """
    return _shift(c, ord("A"), ord("Z"), 32)