"""Splitting a single argument string into number tokens."""

from __future__ import annotations


def parse_args(text: str, delimiter: str = " ") -> list[str]:
    """Split ``text`` on ``delimiter``, dropping empty pieces.

    Raises ValueError when the text holds no words at all.
    """
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    words = [word for word in text.split(delimiter) if word]
    if not words:
        raise ValueError("no arguments to parse")
    return words