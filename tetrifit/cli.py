"""Command line entry point: fit the pieces of a file into the smallest square."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from tetrifit.output import put_endl, put_str
from tetrifit.parse import InvalidInputError, load
from tetrifit.pieces import pieces_from_blocks
from tetrifit.solver import solve

USAGE = "usage: tetrifit target_file\n"
ERROR = "error\n"


def run(path: str | os.PathLike[str]) -> list[str]:
    """Read the pieces in *path* and return the solved board, one string per row.

    Raises InvalidInputError when the file cannot be read or is not valid.
    """
    blocks = load(path)
    board = solve(pieces_from_blocks(blocks))
    return board.rows()


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the file named on the command line and print the board.

    Prints a usage line unless exactly one file is given, and "error" when
    the file is invalid. Always returns 0.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        put_str(USAGE)
        return 0
    try:
        rows = run(args[0])
    except InvalidInputError:
        put_str(ERROR)
        return 0
    for row in rows:
        put_endl(row)
    return 0


if __name__ == "__main__":
    sys.exit(main())