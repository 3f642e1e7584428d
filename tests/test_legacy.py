import pytest

from tetrifit.legacy import clear_grid, count_block_letter, find_free, place_first_fit
from tetrifit.pieces import Piece
from tetrifit.solver import Board, place_all

LINE_BLOCK = ["AAAA", "....", "....", "...."]
SQUARE_BLOCK = ["....", ".BB.", ".BB.", "...."]
T_BLOCK = [".C..", "CCC.", "....", "...."]


def _grid(size):
    return [["."] * size for _ in range(size)]


def _rows(grid):
    return ["".join(row) for row in grid]


def test_clear_grid_empties_every_cell():
    grid = [list("AB."), list("CCC"), list(".D.")]
    clear_grid(grid)
    assert _rows(grid) == _rows(_grid(3))


def test_count_block_letter():
    grid = [list("BB.."), list("BB.."), list("...."), list("AAAA")]
    assert count_block_letter(grid, SQUARE_BLOCK) == 4
    assert count_block_letter(_grid(4), SQUARE_BLOCK) == 0


def test_find_free_from_origin_and_wrapping():
    grid = [list("AAA"), list("A.."), list("...")]
    assert find_free(grid, 0, 0) == (1, 1)
    assert find_free(grid, 1, 3) == (2, 0)


def test_find_free_on_full_grid():
    grid = [list("AB"), list("CD")]
    assert find_free(grid, 0, 0) is None


def test_find_free_rejects_negative_position():
    with pytest.raises(ValueError):
        find_free(_grid(2), 0, -1)


def test_place_line_on_empty_grid():
    grid = _grid(4)
    assert place_first_fit(grid, LINE_BLOCK) is True
    assert _rows(grid)[0] == "AAAA"
    assert count_block_letter(grid, LINE_BLOCK) == 4


@pytest.mark.parametrize("block", [LINE_BLOCK, SQUARE_BLOCK, T_BLOCK])
def test_matches_board_first_fit(block):
    grid = [list("X..."), list("...."), list(".X.."), list("....")]
    assert place_first_fit(grid, block) is True
    board = Board(4)
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == "X":
                board.place(Piece("X", ((0, 0),)), r, c)
    piece = Piece.from_block(block)
    assert place_all([piece], board) is True
    assert _rows(grid) == board.rows()


def test_no_fit_leaves_grid_unchanged():
    grid = _grid(3)
    assert place_first_fit(grid, LINE_BLOCK) is False
    assert _rows(grid) == _rows(_grid(3))


def test_already_placed_piece_is_left_alone():
    grid = [list("BB.."), list("BB.."), list("...."), list("....")]
    before = _rows(grid)
    assert place_first_fit(grid, SQUARE_BLOCK) is True
    assert _rows(grid) == before


def test_partial_piece_rejected():
    grid = [list("B..."), list("...."), list("...."), list("....")]
    with pytest.raises(ValueError):
        place_first_fit(grid, SQUARE_BLOCK)