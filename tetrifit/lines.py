"""Splitting text into newline-terminated lines."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO

BUFFER_SIZE = 32


def split_lines(text: str) -> list[str]:
    """Split *text* on newlines.

    A final newline does not start another, empty line, and empty text
    has no lines at all.
    """
    return list(_lines_of(iter([text])))


def iter_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of a text stream, read a chunk at a time."""

    def chunks() -> Iterator[str]:
        while chunk := stream.read(BUFFER_SIZE):
            yield chunk

    yield from _lines_of(chunks())


def _lines_of(chunks: Iterator[str]) -> Iterator[str]:
    pending = ""
    for chunk in chunks:
        pending += chunk
        *complete, pending = pending.split("\n")
        yield from complete
    if pending:
        yield pending