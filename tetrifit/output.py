"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

import sys
from typing import TextIO

from tetrifit.chars import itoa


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: str | int, stream: TextIO | None = None) -> None:
    """Write one character, given as a string or a character code."""
    if isinstance(char, int) and not isinstance(char, bool):
        char = chr(char)
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _target(stream).write(char)


def put_str(text: str | None, stream: TextIO | None = None) -> None:
    """Write *text*; None writes nothing."""
    if text is not None:
        _target(stream).write(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> None:
    """Write *text* followed by a newline; None writes nothing."""
    if text is not None:
        _target(stream).write(text + "\n")


def put_nbr(number: int, stream: TextIO | None = None) -> None:
    """Write an integer in decimal."""
    _target(stream).write(itoa(number))