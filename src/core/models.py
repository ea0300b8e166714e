"""Data models for the gameplay core."""

from typing import NamedTuple


class GridCell(NamedTuple):
    """A (row, column) position on the letter grid."""
    row: int
    col: int
