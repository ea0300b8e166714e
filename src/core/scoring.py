"""Length-based word scoring."""

from typing import Dict


# Points for word lengths between the floor and the cap
SCORE_TABLE: Dict[int, int] = {
    3: 1,
    4: 1,
    5: 2,
    6: 3,
    7: 5,
}

MIN_SCORING_LENGTH = 3
MAX_SCORE_LENGTH = 8
MAX_SCORE = 11


def score_word(word: str) -> int:
    """Return the point value of a word based on its length."""
    n = len(word)
    if n < MIN_SCORING_LENGTH:
        return 0
    if n >= MAX_SCORE_LENGTH:
        return MAX_SCORE
    return SCORE_TABLE[n]
