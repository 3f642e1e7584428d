"""Fit tetrominoes into a square board, with the small text helpers it uses."""

__version__ = "0.1.0"