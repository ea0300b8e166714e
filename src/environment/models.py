"""
Pydantic models for the environment layer.

This module contains the configuration and result models used by the round
controller and the front end. The main logic classes (Board, Round,
RoundTimer) remain in their respective files.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field, model_validator

from ..core.models import GridCell


RejectionCode = Literal[
    "EMPTY_SELECTION",
    "ROUND_OVER",
    "INVALID_PATH",
    "TOO_SHORT",
    "NOT_A_WORD",
    "DUPLICATE_WORD",
]


class GameConfig(BaseModel):
    """Configuration for a single round."""
    rows: int = Field(default=5, ge=1)
    cols: int = Field(default=5, ge=1)
    seed: Optional[int] = None
    round_seconds: float = Field(default=180.0, gt=0)
    warning_seconds: float = Field(default=10.0, ge=0)
    min_word_length: int = Field(default=3, ge=1)
    word_list: Optional[str] = None

    @model_validator(mode="after")
    def _check_warning(self) -> "GameConfig":
        if self.warning_seconds >= self.round_seconds:
            raise ValueError(
                f"warning_seconds ({self.warning_seconds}) must be shorter "
                f"than round_seconds ({self.round_seconds})"
            )
        return self


class SubmissionResult(BaseModel):
    """Outcome of submitting the current selection."""
    accepted: bool
    word: str = ""
    score: int = 0
    path: List[GridCell] = Field(default_factory=list)
    code: Optional[RejectionCode] = None
    message: Optional[str] = None


class RoundResult(BaseModel):
    """Result of a complete round."""
    config: GameConfig
    board: List[str] = Field(default_factory=list)
    words: List[str] = Field(default_factory=list)
    score: int = 0
    word_count: int = 0
    submissions: List[SubmissionResult] = Field(default_factory=list)
    elapsed_seconds: float = 0.0
    end_reason: str = ""
    started_at: str = ""
    ended_at: str = ""
