"""Round countdown and timer-face animation state."""

import math
from typing import List, Literal

from pydantic import BaseModel, Field, model_validator


TimerEvent = Literal["WARNING", "EXPIRED"]

ROUND_SECONDS = 180.0
WARNING_SECONDS = 10.0


class RoundTimer(BaseModel):
    """
    Tracks elapsed time in a round.

    The timer face turns once over the whole round. A single WARNING event
    fires when the remaining time first drops into the warning window and a
    single EXPIRED event fires when the round ends.

    Attributes:
        duration: Round length in seconds
        warning: Length of the warning window in seconds
        elapsed: Seconds played so far
        running: False while paused or after expiry
        warned: Whether the warning has fired
        expired: Whether the round is over
    """

    duration: float = Field(default=ROUND_SECONDS, gt=0)
    warning: float = Field(default=WARNING_SECONDS, ge=0)
    elapsed: float = Field(default=0.0, ge=0)
    running: bool = True
    warned: bool = False
    expired: bool = False

    @model_validator(mode="after")
    def _check_warning(self) -> "RoundTimer":
        if self.warning >= self.duration:
            raise ValueError(
                f"Warning window ({self.warning}s) must be shorter than the round ({self.duration}s)"
            )
        return self

    @property
    def remaining(self) -> float:
        """Seconds left in the round."""
        return max(0.0, self.duration - self.elapsed)

    @property
    def rotation(self) -> float:
        """Timer face angle in radians."""
        if self.expired:
            return 0.0
        return (self.elapsed * (2 * math.pi / self.duration)) % (2 * math.pi)

    def advance(self, seconds: float) -> List[TimerEvent]:
        """
        Move the clock forward.

        Args:
            seconds: Time since the last call

        Returns:
            Events fired by this step, in order

        Raises:
            ValueError: If seconds is negative
        """
        if seconds < 0:
            raise ValueError(f"Cannot advance the timer by a negative amount ({seconds})")
        if not self.running or self.expired:
            return []

        events: List[TimerEvent] = []
        self.elapsed += seconds
        remaining = self.duration - self.elapsed

        if not self.warned and 0 < remaining <= self.warning:
            self.warned = True
            events.append("WARNING")

        if self.elapsed >= self.duration:
            self.elapsed = self.duration
            self.running = False
            self.expired = True
            events.append("EXPIRED")

        return events

    def toggle_pause(self) -> bool:
        """Pause or resume the timer. Returns True if it is now running."""
        if not self.expired:
            self.running = not self.running
        return self.running
