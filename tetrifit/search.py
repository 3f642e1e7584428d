"""Length, search and comparison helpers for text."""

from __future__ import annotations

_NUL = "\0"


def _single_char(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def _code_at(text: str, index: int) -> int:
    """Code of the character at *index*, or 0 past the end of *text*."""
    return ord(text[index]) if index < len(text) else 0


def strlen(text: str) -> int:
    """Number of characters in *text*."""
    return len(text)


def strchr(text: str, char: str) -> int | None:
    """Index of the first *char* in *text*, or None when absent.

    Searching for the NUL character gives the length of *text*.
    """
    if _single_char(char) == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> int | None:
    """Index of the last *char* in *text*, or None when absent.

    Searching for the NUL character gives the length of *text*.
    """
    if _single_char(char) == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strstr(haystack: str, needle: str) -> int | None:
    """Index of the first occurrence of *needle*; 0 for an empty needle."""
    if not needle:
        return 0
    index = haystack.find(needle)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Like :func:`strstr`, but the match must lie within the first *length* characters."""
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strstrcount(text: str, needle: str) -> int:
    """Count occurrences of *needle* in *text*, overlapping ones included.

    An empty needle counts as one occurrence.
    """
    if not needle:
        return 1
    return sum(1 for start in range(len(text)) if text.startswith(needle, start))


def strcmp(first: str, second: str) -> int:
    """Difference of the first differing character codes; 0 when equal.

    The end of a string compares as code 0.
    """
    for a, b in zip(first, second):
        if a != b:
            return ord(a) - ord(b)
    shared = min(len(first), len(second))
    return _code_at(first, shared) - _code_at(second, shared)


def strncmp(first: str, second: str, length: int) -> int:
    """Like :func:`strcmp`, looking at no more than *length* characters."""
    if length < 0:
        raise ValueError("length must not be negative")
    return strcmp(first[:length], second[:length])


def strequ(first: str | None, second: str | None) -> bool:
    """True when both strings are given and equal."""
    if first is None or second is None:
        return False
    return strcmp(first, second) == 0


def strnequ(first: str | None, second: str | None, length: int) -> bool:
    """True when both strings are given and their first *length* characters match."""
    if first is None or second is None:
        return False
    return strncmp(first, second, length) == 0


def count_words(text: str, separator: str) -> int:
    """Number of non-empty runs of *text* between occurrences of *separator*."""
    sep = _single_char(separator)
    return sum(1 for word in text.split(sep) if word)