"""Tetromino pieces described by the offsets of their cells."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from tetrifit.parse import CELLS_PER_PIECE, EMPTY

Offset = tuple[int, int]


def _is_label(cell: str) -> bool:
    return "A" <= cell <= "Z"


def block_letter(block: Sequence[str]) -> str:
    """First upper-case letter of *block* in reading order, or '.' if none."""
    for row in block:
        for cell in row:
            if _is_label(cell):
                return cell
    return EMPTY


@dataclass(frozen=True)
class Piece:
    """A labelled tetromino.

    ``offsets`` lists the cells in reading order, relative to the first
    one, so the first offset is always ``(0, 0)`` and no row offset is
    negative; column offsets may be.
    """

    letter: str
    offsets: tuple[Offset, ...]

    @classmethod
    def from_block(cls, block: Sequence[str]) -> Piece:
        """Build a piece from a labelled block; its first four cells are used."""
        cells = [
            (r, c)
            for r, row in enumerate(block)
            for c, cell in enumerate(row)
            if _is_label(cell)
        ]
        if len(cells) < CELLS_PER_PIECE:
            raise ValueError(
                f"block holds {len(cells)} labelled cells, expected {CELLS_PER_PIECE}"
            )
        first_row, first_col = cells[0]
        offsets = tuple(
            (r - first_row, c - first_col) for r, c in cells[:CELLS_PER_PIECE]
        )
        return cls(block_letter(block), offsets)


def pieces_from_blocks(blocks: Iterable[Sequence[str]]) -> list[Piece]:
    """Turn labelled blocks into pieces, keeping their order."""
    return [Piece.from_block(block) for block in blocks]