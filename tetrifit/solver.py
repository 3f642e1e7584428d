"""Fitting tetrominoes into the smallest square the search can reach."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from tetrifit.parse import CELLS_PER_PIECE, EMPTY
from tetrifit.pieces import Piece


class Board:
    """A square grid of cells, each empty ('.') or holding a piece letter."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("board size must be at least 1")
        self._cells = [[EMPTY] * size for _ in range(size)]

    @property
    def size(self) -> int:
        return len(self._cells)

    @classmethod
    def for_pieces(cls, count: int) -> Board:
        """Smallest empty square with room for *count* pieces' worth of cells."""
        if count < 0:
            raise ValueError("piece count must not be negative")
        size = 1
        while size * size < count * CELLS_PER_PIECE:
            size += 1
        return cls(size)

    def _cells_of(self, piece: Piece, row: int, col: int) -> list[tuple[int, int]]:
        return [(row + dr, col + dc) for dr, dc in piece.offsets]

    def _is_free(self, row: int, col: int) -> bool:
        return (
            0 <= row < self.size
            and 0 <= col < self.size
            and self._cells[row][col] == EMPTY
        )

    def can_place(self, piece: Piece, row: int, col: int) -> bool:
        """True when every cell of *piece* anchored at (row, col) is empty."""
        return all(self._is_free(r, c) for r, c in self._cells_of(piece, row, col))

    def place(self, piece: Piece, row: int, col: int) -> None:
        """Write *piece* anchored at (row, col)."""
        if not self.can_place(piece, row, col):
            raise ValueError(f"piece {piece.letter} does not fit at ({row}, {col})")
        for r, c in self._cells_of(piece, row, col):
            self._cells[r][c] = piece.letter

    def remove(self, letter: str) -> None:
        """Empty every cell holding *letter*."""
        for row in self._cells:
            row[:] = [EMPTY if cell == letter else cell for cell in row]

    def count(self, letter: str) -> int:
        """Number of cells holding *letter*."""
        return sum(row.count(letter) for row in self._cells)

    def find(self, letter: str) -> tuple[int, int] | None:
        """First cell holding *letter* in reading order, or None."""
        for r, row in enumerate(self._cells):
            if letter in row:
                return r, row.index(letter)
        return None

    def rows(self) -> list[str]:
        """The board as one string per row."""
        return ["".join(row) for row in self._cells]

    def __str__(self) -> str:
        return "\n".join(self.rows())


def _positions_from(size: int, row: int, col: int) -> Iterator[tuple[int, int]]:
    for r in range(row, size):
        for c in range(col if r == row else 0, size):
            yield r, c


def _place_from(piece: Piece, board: Board, row: int, col: int) -> bool:
    """Place *piece* at the first fitting anchor from (row, col) on."""
    for r, c in _positions_from(board.size, row, col):
        if board.can_place(piece, r, c):
            board.place(piece, r, c)
            return True
    return False


def _is_placed(board: Board, piece: Piece) -> bool:
    return board.count(piece.letter) == CELLS_PER_PIECE


def place_all(pieces: Sequence[Piece], board: Board) -> bool:
    """Place the pieces in order, each at its first fit; stop at the first failure.

    Returns True when every piece was placed.
    """
    for piece in pieces:
        _place_from(piece, board, 0, 0)
        if not _is_placed(board, piece):
            return False
    return True


def advance(piece: Piece, board: Board) -> bool:
    """Move *piece* to the next anchor that fits after its current one.

    When no later anchor fits the piece is left off the board. Returns
    True when the piece ends up placed.
    """
    anchor = board.find(piece.letter)
    board.remove(piece.letter)
    if anchor is None:
        return False
    row, col = anchor
    return _place_from(piece, board, row, col + 1)


def final_track(pieces: Sequence[Piece], board: Board, index: int) -> None:
    """Shift pieces from *index* on, retrying the later ones after each shift."""
    last = pieces[-1]
    current = pieces[index]
    while _is_placed(board, current):
        if _is_placed(board, last):
            return
        if index + 2 < len(pieces):
            final_track(pieces, board, index + 1)
        following = pieces[index + 1]
        while not _is_placed(board, following):
            advance(current, board)
            if not _is_placed(board, current):
                break
            place_all(pieces[index + 1 :], board)
            if _is_placed(board, last):
                return


def solve(pieces: Sequence[Piece]) -> Board:
    """Fit all *pieces* on a square board, growing it until the search succeeds."""
    pieces = list(pieces)
    if not pieces:
        raise ValueError("no pieces to place")
    last = pieces[-1]
    count = len(pieces)
    while True:
        board = Board.for_pieces(count)
        place_all(pieces, board)
        if _is_placed(board, last):
            return board
        final_track(pieces, board, 0)
        if _is_placed(board, last):
            return board
        count += 1