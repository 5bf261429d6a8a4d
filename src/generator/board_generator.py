"""Random board construction from the letter frequency table."""

import random
from typing import Dict, List, Sequence, Tuple

from pydantic import BaseModel, Field

from ..game.board import Board
from ..game.models import BOARD_SIZE, WILDCARD
from ..game.scoring import LETTER_FREQUENCIES, points_for_letter


WILDCARD_POSITIONS: List[Tuple[int, int]] = [(1, 1), (2, 2)]


class BoardGenerator(BaseModel):
    """
    Builds random boards from the letter frequency table.

    Attributes:
        letter_frequencies: Letter -> relative weight for random selection
        wildcard_positions: Cells overwritten with zero-point wildcards
    """

    letter_frequencies: Dict[str, float] = Field(default_factory=lambda: dict(LETTER_FREQUENCIES))
    wildcard_positions: List[Tuple[int, int]] = Field(default_factory=lambda: list(WILDCARD_POSITIONS))

    def generate_board(self, rng: random.Random) -> Board:
        """
        Draw 16 letters independently by frequency, then place the wildcards.

        Args:
            rng: Seeded random generator; the same state yields the same board
        """
        letters = list(self.letter_frequencies)
        weights = [self.letter_frequencies[letter] for letter in letters]

        board = Board.new()
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                letter = self.weighted_choice(letters, weights, rng)
                board.set_tile(row, col, letter, points_for_letter(letter, self.letter_frequencies), False)

        for row, col in self.wildcard_positions:
            board.set_tile(row, col, WILDCARD, 0, True)

        return board

    @staticmethod
    def weighted_choice(
        letters: Sequence[str],
        weights: Sequence[float],
        rng: random.Random,
    ) -> str:
        return rng.choices(letters, weights=weights, k=1)[0]
