"""Letter grid generation and lookup."""

import random
from typing import Iterator, List, Optional, Sequence, Tuple

from pydantic import BaseModel, field_validator

from ..core.models import GridCell


# Weighted letter pool tiles are rolled from (common letters repeat)
LETTER_BAG = "EEEEEEEEEEEEAAAAAAAIIIIIIIONNNNRRRRTTTTTLLLLSSSSUUUUDDGGBBCCMMPPFFHHVVWWYYKJXQZ"


class Board(BaseModel):
    """
    The letter grid for a round.

    Attributes:
        letters: Row-major table of single-character tiles
    """

    letters: List[List[str]]

    @field_validator("letters")
    @classmethod
    def _check_shape(cls, value: List[List[str]]) -> List[List[str]]:
        if not value or not value[0]:
            raise ValueError("Board needs at least one row and one column")
        width = len(value[0])
        for i, row in enumerate(value):
            if len(row) != width:
                raise ValueError(f"Row {i} has {len(row)} tiles, expected {width}")
            for letter in row:
                if len(letter) != 1:
                    raise ValueError(f"Tile {letter!r} in row {i} is not a single character")
        return value

    @classmethod
    def create(cls, rows: int = 5, cols: int = 5, seed: Optional[int] = None) -> "Board":
        """
        Roll a new board from the letter bag.

        Args:
            rows: Number of rows
            cols: Number of columns
            seed: Optional random seed for reproducibility

        Returns:
            A new Board with random letters
        """
        rng = random.Random(seed)
        letters = [[rng.choice(LETTER_BAG) for _ in range(cols)] for _ in range(rows)]
        return cls(letters=letters)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """Build a board from strings, one per row (e.g. ["CAT", "ODE"])."""
        return cls(letters=[list(row) for row in rows])

    @property
    def rows(self) -> int:
        return len(self.letters)

    @property
    def cols(self) -> int:
        return len(self.letters[0])

    def contains(self, cell: Tuple[int, int]) -> bool:
        """Check whether a cell lies on the board."""
        row, col = cell
        return 0 <= row < self.rows and 0 <= col < self.cols

    def letter_at(self, cell: Tuple[int, int]) -> str:
        """Get the letter at a cell. Raises ValueError for off-board cells."""
        if not self.contains(cell):
            raise ValueError(f"Cell {tuple(cell)} is outside the {self.rows}x{self.cols} board")
        row, col = cell
        return self.letters[row][col]

    def cells(self) -> Iterator[GridCell]:
        """Iterate over every cell in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield GridCell(row, col)

    def as_rows(self) -> List[str]:
        """The board as one string per row."""
        return ["".join(row) for row in self.letters]

    def render(self, selection: Sequence[Tuple[int, int]] = ()) -> str:
        """Render the board as text, bracketing selected tiles."""
        selected = {tuple(cell) for cell in selection}
        lines = []
        for row in range(self.rows):
            lines.append("".join(
                f"[{self.letters[row][col]}]" if (row, col) in selected
                else f" {self.letters[row][col]} "
                for col in range(self.cols)
            ))
        return "\n".join(lines)
