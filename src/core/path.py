"""Selection path validation and word assembly."""

from typing import Sequence, Tuple

from .models import GridCell


def is_adjacent(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    """Two cells are adjacent if they touch in any of the 8 directions."""
    (r1, c1), (r2, c2) = a, b
    return abs(r1 - r2) <= 1 and abs(c1 - c2) <= 1 and (r1, c1) != (r2, c2)


def is_valid_path(path: Sequence[Tuple[int, int]]) -> bool:
    """
    Check that a selection path is geometrically legal.

    A legal path is non-empty, never revisits a cell, and every step moves
    to an adjacent cell. A single cell is a legal path.
    """
    if not path:
        return False

    cells = [GridCell(*cell) for cell in path]
    for i in range(1, len(cells)):
        if not is_adjacent(cells[i - 1], cells[i]):
            return False
        if cells[i] in cells[:i]:
            return False

    return True


def path_to_word(path: Sequence[Tuple[int, int]], grid: Sequence[Sequence[str]]) -> str:
    """
    Spell out the letters under a path, in path order.

    The path is not validated and letters keep the case they have in `grid`.
    """
    return "".join(grid[row][col] for row, col in path)
