"""First-fit placement of a labelled block directly on a character grid."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

from tetrifit.parse import CELLS_PER_PIECE, EMPTY
from tetrifit.pieces import Piece, block_letter

Grid = MutableSequence[MutableSequence[str]]


def clear_grid(grid: Grid) -> None:
    """Set every cell of *grid* to empty."""
    for row in grid:
        row[:] = [EMPTY] * len(row)


def count_block_letter(grid: Sequence[Sequence[str]], block: Sequence[str]) -> int:
    """Number of grid cells holding the letter of *block*."""
    letter = block_letter(block)
    return sum(list(row).count(letter) for row in grid)


def find_free(
    grid: Sequence[Sequence[str]], row: int, col: int
) -> tuple[int, int] | None:
    """First empty cell at or after (row, col) in reading order, or None."""
    if row < 0 or col < 0:
        raise ValueError("position must not be negative")
    for r in range(row, len(grid)):
        cells = grid[r]
        for c in range(col if r == row else 0, len(cells)):
            if cells[c] == EMPTY:
                return r, c
    return None


def _is_free(grid: Sequence[Sequence[str]], row: int, col: int) -> bool:
    return 0 <= row < len(grid) and 0 <= col < len(grid[row]) and grid[row][col] == EMPTY


def place_first_fit(grid: Grid, block: Sequence[str]) -> bool:
    """Write *block*'s piece at the first empty anchor where it fits.

    A grid that already holds the whole piece is left as it is. Returns
    True when the piece is on the grid afterwards.
    """
    piece = Piece.from_block(block)
    present = count_block_letter(grid, block)
    if present >= CELLS_PER_PIECE:
        return True
    if present:
        raise ValueError(f"grid holds part of piece {piece.letter}")
    start = (0, 0)
    while (spot := find_free(grid, *start)) is not None:
        row, col = spot
        cells = [(row + dr, col + dc) for dr, dc in piece.offsets]
        if all(_is_free(grid, r, c) for r, c in cells):
            for r, c in cells:
                grid[r][c] = piece.letter
            return True
        start = (row, col + 1)
    return False