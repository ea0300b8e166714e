"""
Round controller for managing one player's turn state.

Owns the in-progress selection, the set of words already submitted and the
running score, and runs each submission through the core checks in order:
path legality, word assembly, dictionary lookup, duplicate check, scoring.
"""

from datetime import datetime
from typing import Dict, List, Optional, Sequence, Set, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .board import Board
from .models import GameConfig, RejectionCode, RoundResult, SubmissionResult
from .timer import RoundTimer, TimerEvent
from ..core.models import GridCell
from ..core.path import is_adjacent, is_valid_path, path_to_word
from ..core.scoring import score_word
from ..core.trie import Lexicon


class Round(BaseModel):
    """
    A single round of play on one board.

    Attributes:
        board: The letter grid
        lexicon: Dictionary used to accept words
        timer: Round countdown
        config: Configuration the round was created from
        selection: Cells selected so far, in order
        submitted: Normalised words already accepted
        words: Accepted words in submission order
        score: Running score
        history: Every submission, accepted or not
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    board: Board
    lexicon: Lexicon
    timer: RoundTimer = Field(default_factory=RoundTimer)
    config: GameConfig = Field(default_factory=GameConfig)
    selection: List[GridCell] = Field(default_factory=list)
    submitted: Set[str] = Field(default_factory=set)
    words: List[str] = Field(default_factory=list)
    score: int = 0
    history: List[SubmissionResult] = Field(default_factory=list)
    started_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        config: Optional[GameConfig] = None,
        lexicon: Optional[Lexicon] = None,
        board: Optional[Board] = None
    ) -> "Round":
        """
        Factory method to create a round with a fresh board and timer.

        Args:
            config: Round configuration (defaults if omitted)
            lexicon: Dictionary to play against (empty if omitted)
            board: Board to play on (rolled from config if omitted)

        Returns:
            A new Round ready to play
        """
        config = config or GameConfig()
        if board is None:
            board = Board.create(rows=config.rows, cols=config.cols, seed=config.seed)
        timer = RoundTimer(duration=config.round_seconds, warning=config.warning_seconds)
        return cls(
            board=board,
            lexicon=lexicon if lexicon is not None else Lexicon(),
            timer=timer,
            config=config,
            started_at=datetime.now(),
        )

    @property
    def is_over(self) -> bool:
        return self.timer.expired

    @property
    def word_count(self) -> int:
        return len(self.words)

    @property
    def current_word(self) -> str:
        """Letters under the current selection."""
        return path_to_word(self.selection, self.board.letters)

    @property
    def selection_is_prefix(self) -> bool:
        """Whether the selection could still be extended into a dictionary word."""
        return self.lexicon.has_prefix(self.current_word.lower())

    def select(self, cell: Tuple[int, int]) -> bool:
        """
        Activate a tile.

        Re-activating a selected tile drops it and every tile selected after
        it. A tile that does not touch the last selected tile is ignored.

        Args:
            cell: The (row, col) activated

        Returns:
            True if the selection changed

        Raises:
            ValueError: If the cell is off the board
        """
        if not self.board.contains(cell):
            raise ValueError(f"Cell {tuple(cell)} is outside the {self.board.rows}x{self.board.cols} board")
        if self.is_over:
            return False

        cell = GridCell(*cell)
        if cell in self.selection:
            del self.selection[self.selection.index(cell):]
            return True
        if self.selection and not is_adjacent(self.selection[-1], cell):
            return False

        self.selection.append(cell)
        return True

    def clear_selection(self) -> None:
        """Drop the current selection."""
        self.selection = []

    def _reject(self, code: RejectionCode, message: str, word: str = "") -> SubmissionResult:
        result = SubmissionResult(
            accepted=False,
            word=word,
            path=list(self.selection),
            code=code,
            message=message,
        )
        self.history.append(result)
        self.clear_selection()
        return result

    def submit(self) -> SubmissionResult:
        """
        Submit the current selection as a word.

        The selection is cleared whatever the outcome.

        Returns:
            SubmissionResult describing acceptance or the rejection reason
        """
        if self.is_over:
            return self._reject("ROUND_OVER", "The round is over")
        if not self.selection:
            return self._reject("EMPTY_SELECTION", "No tiles selected")
        if not is_valid_path(self.selection):
            return self._reject("INVALID_PATH", "Selected tiles do not form a connected path")

        word = self.current_word.lower()
        if len(word) < self.config.min_word_length:
            return self._reject(
                "TOO_SHORT",
                f"'{word}' is shorter than {self.config.min_word_length} letters",
                word=word
            )
        if not self.lexicon.has_word(word):
            return self._reject("NOT_A_WORD", f"'{word}' is not in the dictionary", word=word)
        if word in self.submitted:
            return self._reject("DUPLICATE_WORD", f"'{word}' was already found", word=word)

        points = score_word(word)
        self.submitted.add(word)
        self.words.append(word)
        self.score += points

        result = SubmissionResult(accepted=True, word=word, score=points, path=list(self.selection))
        self.history.append(result)
        self.clear_selection()
        return result

    def submit_path(self, path: Sequence[Tuple[int, int]]) -> SubmissionResult:
        """
        Replace the selection with a whole path and submit it.

        Unlike `select`, the path is taken as given, so a broken path is
        reported as INVALID_PATH rather than silently trimmed.

        Raises:
            ValueError: If any cell is off the board
        """
        for cell in path:
            if not self.board.contains(cell):
                raise ValueError(f"Cell {tuple(cell)} is outside the {self.board.rows}x{self.board.cols} board")
        self.selection = [GridCell(*cell) for cell in path]
        return self.submit()

    def tick(self, seconds: float) -> List[TimerEvent]:
        """Advance the round clock. Expiry drops any half-built selection."""
        events = self.timer.advance(seconds)
        if "EXPIRED" in events:
            self.clear_selection()
        return events

    def toggle_pause(self) -> bool:
        """Pause or resume the round timer. Returns True if running."""
        return self.timer.toggle_pause()

    def get_state(self) -> Dict:
        """
        Get the current round state as a dictionary.

        Useful for serialization and display.
        """
        return {
            "board": self.board.as_rows(),
            "selection": [list(cell) for cell in self.selection],
            "current_word": self.current_word,
            "score": self.score,
            "word_count": self.word_count,
            "remaining_seconds": self.timer.remaining,
            "running": self.timer.running,
            "is_over": self.is_over,
        }

    def get_result(self, end_reason: str = "") -> RoundResult:
        """Build the final round result."""
        return RoundResult(
            config=self.config,
            board=self.board.as_rows(),
            words=list(self.words),
            score=self.score,
            word_count=self.word_count,
            submissions=list(self.history),
            elapsed_seconds=self.timer.elapsed,
            end_reason=end_reason or ("Time up" if self.is_over else ""),
            started_at=self.started_at.isoformat() if self.started_at else "",
            ended_at=datetime.now().isoformat(),
        )
