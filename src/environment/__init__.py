"""Round environment for the letter-grid game."""

from .models import (
    RejectionCode,
    GameConfig,
    SubmissionResult,
    RoundResult,
)
from .board import Board, LETTER_BAG
from .timer import RoundTimer, TimerEvent
from .round import Round
from .layout import (
    Viewport,
    GridLayout,
    UICoords,
    CoordsSource,
    fit_viewport,
    load_coords,
)

__all__ = [
    "RejectionCode",
    "GameConfig",
    "SubmissionResult",
    "RoundResult",
    "Board",
    "LETTER_BAG",
    "RoundTimer",
    "TimerEvent",
    "Round",
    "Viewport",
    "GridLayout",
    "UICoords",
    "CoordsSource",
    "fit_viewport",
    "load_coords",
]
