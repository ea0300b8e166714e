"""Exhaustive word search over a letter grid."""

from typing import Dict, List, Sequence

from .models import GridCell
from .trie import Lexicon


def find_words(
    grid: Sequence[Sequence[str]],
    lexicon: Lexicon,
    min_length: int = 3
) -> Dict[str, List[GridCell]]:
    """
    Find every lexicon word that can be traced on the grid.

    Walks all adjacency-valid paths depth-first, abandoning a path as soon as
    its letters are no longer a prefix of any word.

    Args:
        grid: Row-major letters
        lexicon: Lower-case lexicon to search
        min_length: Shortest word to report

    Returns:
        Mapping of each word found to one path that spells it
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    found: Dict[str, List[GridCell]] = {}

    def walk(path: List[GridCell], prefix: str) -> None:
        if len(prefix) >= min_length and prefix not in found and lexicon.has_word(prefix):
            found[prefix] = list(path)

        row, col = path[-1]
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                nxt = GridCell(row + dr, col + dc)
                if (dr, dc) == (0, 0) or nxt in path:
                    continue
                if not (0 <= nxt.row < rows and 0 <= nxt.col < cols):
                    continue
                word = prefix + grid[nxt.row][nxt.col].lower()
                if not lexicon.has_prefix(word):
                    continue
                path.append(nxt)
                walk(path, word)
                path.pop()

    for row in range(rows):
        for col in range(cols):
            start = grid[row][col].lower()
            if lexicon.has_prefix(start):
                walk([GridCell(row, col)], start)

    return found
