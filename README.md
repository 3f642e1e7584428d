# tetrifit

Packs up to 26 tetrominoes into a square board and prints the result, each
piece shown by its own letter. The board starts at the smallest square with
room for all the cells. It grows one step at a time until the search
succeeds.

## Input format

The input file holds one to 26 pieces. Each piece is four lines of exactly
four characters: `.` for empty and `#` for a block. A single empty line goes
between pieces, and no empty line follows the last one. Every piece must
have exactly four `#` cells, joined side to side.

```
...#
...#
...#
...#

....
....
..##
..##
```

## Usage

Install the package, then run:

```
tetrifit pieces.txt
```

The board is printed one row per line. Pieces are lettered `A`, `B`, `C`, …
in the order they appear in the file, and `.` marks an empty cell. For the
example above the output is:

```
ABB.
ABB.
A...
A...
```

The command prints `error` if the file cannot be read, is badly formed, or
holds an invalid piece. Called with anything other than exactly one file
argument, it prints `usage: tetrifit target_file`. The exit status is always 0.

## Library use

```python
from tetrifit.parse import load
from tetrifit.pieces import pieces_from_blocks
from tetrifit.solver import solve

blocks = load("pieces.txt")
board = solve(pieces_from_blocks(blocks))
print(board)  # or board.rows() for a list of strings
```

- `tetrifit.parse.parse(text)` does the same as `load` but takes a string.
  Both raise `tetrifit.parse.InvalidInputError` when the input is rejected.
- `tetrifit.pieces.Piece` holds a piece's letter and the offsets of its
  cells.
- `tetrifit.solver.Board` is the square grid. It has `can_place`, `place`,
  `remove`, `count`, `find` and `rows`.
- `tetrifit.cli.run(path)` returns the rows the command would print.
- `tetrifit.legacy.place_first_fit(grid, block)` writes one labelled block
  at the first empty spot where it fits on a grid of character lists.

The package also holds small text helpers, none of which the solver needs:

- `tetrifit.chars`: ASCII classification, `atoi` and `itoa`.
- `tetrifit.search`: searching and comparing strings.
- `tetrifit.transform`: copying, trimming, splitting and mapping strings.
- `tetrifit.lines`: splitting text or a stream into lines.
- `tetrifit.output`: writing characters, strings and numbers to a stream.
- `tetrifit.linked`: a minimal singly linked list.

## Tests

```
pip install -e ".[test]"
pytest
```