"""Letter frequency table and per-letter point values."""

import math
from typing import Dict

from pydantic import BaseModel, Field


# Relative English letter frequencies; drives both scoring and board generation.
LETTER_FREQUENCIES: Dict[str, float] = {
    "a": 0.078, "b": 0.02, "c": 0.04, "d": 0.038, "e": 0.11, "f": 0.014,
    "g": 0.03, "h": 0.023, "i": 0.086, "j": 0.0021, "k": 0.0097, "l": 0.053,
    "m": 0.027, "n": 0.072, "o": 0.061, "p": 0.028, "q": 0.0019, "r": 0.073,
    "s": 0.087, "t": 0.067, "u": 0.033, "v": 0.01, "w": 0.0091, "x": 0.0027,
    "y": 0.016, "z": 0.0044,
}

UNKNOWN_FREQUENCY = 0.01


def points_for_letter(letter: str, frequencies: Dict[str, float] = LETTER_FREQUENCIES) -> int:
    """
    Point value of a letter: floor(log2(f('e') / f(letter))) + 1.

    Common letters score 1, rare letters score higher. Unknown characters
    use a frequency of 0.01.
    """
    e_freq = frequencies.get("e", LETTER_FREQUENCIES["e"])
    letter_freq = frequencies.get(letter.lower(), UNKNOWN_FREQUENCY)
    return math.floor(math.log2(e_freq / letter_freq)) + 1


class ScoreSheet(BaseModel):
    """Per-word scores for a group of answers."""
    scores: Dict[str, int] = Field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(self.scores.values())

    def __len__(self) -> int:
        return len(self.scores)
