"""Reading and checking a file of tetromino blocks."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence

from tetrifit.lines import split_lines

MAX_PIECES = 26
BLOCK_SIZE = 4
CELLS_PER_PIECE = 4
EMPTY = "."
FILLED = "#"

Block = list[str]


class InvalidInputError(ValueError):
    """The input does not describe a valid set of tetrominoes."""


def validate_format(lines: Sequence[str]) -> None:
    """Check the layout of the input lines.

    Blocks are four lines of four '.' or '#' characters, each holding
    exactly four '#', separated by single empty lines, with no empty line
    after the last block.
    """
    lines = list(lines)
    if not lines or (len(lines) + 1) % (BLOCK_SIZE + 1):
        raise InvalidInputError("wrong number of lines")
    for number, line in enumerate(lines, 1):
        if number % (BLOCK_SIZE + 1) == 0:
            if line:
                raise InvalidInputError(f"line {number} should be empty")
        elif len(line) != BLOCK_SIZE or set(line) - {EMPTY, FILLED}:
            raise InvalidInputError(f"line {number} is malformed")
    for start in range(0, len(lines), BLOCK_SIZE + 1):
        block = lines[start : start + BLOCK_SIZE]
        if sum(row.count(FILLED) for row in block) != CELLS_PER_PIECE:
            raise InvalidInputError(
                f"block starting at line {start + 1} does not hold {CELLS_PER_PIECE} cells"
            )


def count_pieces(lines: Sequence[str]) -> int:
    """Number of complete blocks in *lines*; more than 26 is an error."""
    # Each block takes four lines plus one separator; the last has none.
    count = (len(lines) + 1) // (BLOCK_SIZE + 1)
    if count > MAX_PIECES:
        raise InvalidInputError(f"more than {MAX_PIECES} pieces")
    return count


def split_blocks(lines: Iterable[str], count: int) -> list[Block]:
    """Take *count* blocks of four lines, skipping the separator after each."""
    remaining = iter(lines)
    blocks = []
    for _ in range(count):
        block = [row for _, row in zip(range(BLOCK_SIZE), remaining)]
        if len(block) != BLOCK_SIZE:
            raise InvalidInputError("input ends inside a block")
        blocks.append(block)
        next(remaining, None)
    return blocks


def label_blocks(blocks: Iterable[Block]) -> list[Block]:
    """Replace the '#' cells of each block by its letter, 'A' for the first."""
    return [
        [row.replace(FILLED, chr(ord("A") + index)) for row in block]
        for index, block in enumerate(blocks)
    ]


def connection_count(block: Sequence[str], letter: str) -> int:
    """Number of side-by-side pairs of *letter* cells, across and down."""
    count = 0
    for r, row in enumerate(block):
        below = block[r + 1] if r + 1 < len(block) else ""
        for c, cell in enumerate(row):
            if cell != letter:
                continue
            if c + 1 < len(row) and row[c + 1] == letter:
                count += 1
            if c < len(below) and below[c] == letter:
                count += 1
    return count


def _first_letter(block: Sequence[str]) -> str:
    for row in block:
        for cell in row:
            if "A" <= cell <= "Z":
                return cell
    return EMPTY


def is_connected(block: Sequence[str]) -> bool:
    """True when the labelled cells of *block* form one tetromino."""
    return connection_count(block, _first_letter(block)) in (3, 4)


def parse(text: str) -> list[Block]:
    """Check *text* and return its blocks, labelled 'A', 'B', ..."""
    lines = split_lines(text)
    validate_format(lines)
    count = count_pieces(lines)
    if count == 0:
        raise InvalidInputError("no pieces")
    blocks = label_blocks(split_blocks(lines, count))
    for index, block in enumerate(blocks):
        if not is_connected(block):
            raise InvalidInputError(f"piece {index + 1} is not a tetromino")
    return blocks


def load(path: str | os.PathLike[str]) -> list[Block]:
    """Read and parse the file at *path*."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise InvalidInputError(f"cannot read {os.fspath(path)}") from exc
    return parse(text)