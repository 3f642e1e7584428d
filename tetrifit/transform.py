"""Building, copying, trimming, splitting and mapping text."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_TRIM_CHARS = " \n\t"
_NUL = "\0"


def _check_length(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def strdup(text: str) -> str:
    """Return a copy of *text*."""
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    return str(text)


def strncpy(src: str, length: int) -> str:
    """Return exactly *length* characters: *src* cut short or padded with NUL."""
    _check_length(length, "length")
    head = src[:length]
    return head + _NUL * (length - len(head))


def strcat(first: str, second: str) -> str:
    """Return *second* appended to *first*."""
    return first + second


def strncat(first: str, second: str, length: int) -> str:
    """Append at most *length* characters of *second* to *first*."""
    _check_length(length, "length")
    return first + second[:length]


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dest* within a buffer of *size* characters.

    Returns the resulting text, which holds at most ``size - 1`` characters,
    and the length the full concatenation would have had. When *size* does
    not exceed the length of *dest*, *dest* is left as it is and the length
    reported is ``len(src) + size``.
    """
    _check_length(size, "size")
    if size <= len(dest):
        return dest, len(src) + size
    room = size - 1 - len(dest)
    return dest + src[:room], len(dest) + len(src)


def strsub(text: str, start: int, length: int) -> str:
    """Return the *length* characters of *text* beginning at *start*."""
    _check_length(start, "start")
    _check_length(length, "length")
    if start + length > len(text):
        raise ValueError(
            f"substring [{start}, {start + length}) lies outside text of length {len(text)}"
        )
    return text[start : start + length]


def strjoin(first: str | None, second: str | None) -> str | None:
    """Concatenate two strings; None when either is missing."""
    if first is None or second is None:
        return None
    return first + second


def strtrim(text: str | None) -> str | None:
    """Strip spaces, newlines and tabs from both ends; None stays None."""
    if text is None:
        return None
    return text.strip(_TRIM_CHARS)


def strsplit(text: str | None, separator: str) -> list[str] | None:
    """Split *text* on *separator*, dropping empty pieces; None stays None."""
    if not isinstance(separator, str) or len(separator) != 1:
        raise ValueError(f"expected a single character, got {separator!r}")
    if text is None:
        return None
    return [word for word in text.split(separator) if word]


def strmap(text: str | None, func: Callable[[str], str]) -> str | None:
    """Apply *func* to each character and join the results."""
    if text is None:
        return None
    return "".join(func(ch) for ch in text)


def strmapi(text: str | None, func: Callable[[int, str], str]) -> str | None:
    """Apply *func* to each index and character and join the results."""
    if text is None:
        return None
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striter(text: str | None, func: Callable[[str], object] | None) -> None:
    """Call *func* on each character of *text*."""
    if not text or func is None:
        return
    for ch in text:
        func(ch)


def striteri(text: str | None, func: Callable[[int, str], object] | None) -> None:
    """Call *func* on each index and character of *text*."""
    if not text or func is None:
        return
    for index, ch in enumerate(text):
        func(index, ch)


def strnew(size: int) -> bytearray:
    """Return a zero-filled buffer of *size* bytes."""
    _check_length(size, "size")
    return bytearray(size)


def strclr(buffer: MutableSequence | None) -> None:
    """Zero a buffer in place up to its first zero element.

    Works on byte buffers (zero is 0) and on lists of characters (zero is NUL).
    """
    if buffer is None:
        return
    for index, item in enumerate(buffer):
        if item == 0 or item == _NUL:
            break
        buffer[index] = 0 if isinstance(item, int) else _NUL