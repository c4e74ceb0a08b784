"""A small printf: %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, Optional

HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_MISSING = object()


def _require_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} expects an integer, got {value!r}")
    return int(value)


def _in_base(number: int, digits: str) -> str:
    base = len(digits)
    out = []
    while True:
        number, remainder = divmod(number, base)
        out.append(digits[remainder])
        if number == 0:
            break
    return "".join(reversed(out))


def _int32(number: int) -> int:
    number &= 0xFFFFFFFF
    return number - 0x100000000 if number >= 0x80000000 else number


def _uint32(number: int) -> int:
    return number & 0xFFFFFFFF


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {value!r}")
    return value


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    address &= 0xFFFFFFFFFFFFFFFF
    if address == 0:
        return "(nil)"
    return "0x" + _in_base(address, HEX_LOWER)


def _signed(value: Any) -> str:
    return str(_int32(_require_int(value, "d")))


def _unsigned(value: Any) -> str:
    return str(_uint32(_require_int(value, "u")))


def _hex_lower(value: Any) -> str:
    return _in_base(_uint32(_require_int(value, "x")), HEX_LOWER)


def _hex_upper(value: Any) -> str:
    return _in_base(_uint32(_require_int(value, "X")), HEX_UPPER)


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def format_string(fmt: Optional[str], *args: Any) -> str:
    """Render ``fmt`` with ``args``.

    Integers follow 32-bit C semantics: %d and %i wrap to a signed value,
    %u, %x and %X to an unsigned one. %s shows None as "(null)" and %p
    shows None or 0 as "(nil)"; %p prints an integer as an address and
    any other object by its identity. A None format gives an empty string.
    Raises ValueError for an unknown or dangling conversion or a missing
    argument; surplus arguments are ignored.
    """
    if fmt is None:
        return ""
    pieces: list[str] = []
    arguments: Iterator[Any] = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with a lone '%'")
        if spec == "%":
            pieces.append("%")
            continue
        converter = _CONVERTERS.get(spec)
        if converter is None:
            raise ValueError(f"unknown conversion: %{spec}")
        value = next(arguments, _MISSING)
        if value is _MISSING:
            raise ValueError(f"missing argument for %{spec}")
        pieces.append(converter(value))
    return "".join(pieces)


def printf(fmt: Optional[str], *args: Any) -> int:
    """Write the rendered format to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)