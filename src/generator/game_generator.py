"""
Daily board generation.

For a date, boards are drawn from a seeded generator until one clears the
quality bar: the sum of its top 5 answer scores must reach the threshold.
After every attempt of a round fails, the threshold is cut by 25% once and
another round runs. If that also fails, generation for the date is
exhausted.
"""

import hashlib
import math
import random
from datetime import date as Date, timedelta
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..game.engine import GameEngine
from ..game.errors import GameError, GenerationExhausted
from ..game.models import Answer
from ..utils.logging_utils import get_logger
from .board_generator import BoardGenerator
from .config import GeneratorConfig
from .models import GameAnswer, GenerationResult, StoredGame
from .store import BoardStore


logger = get_logger(__name__)

DATE_FORMAT = "%Y-%m-%d"


def create_seed(date: str, reduction_round: int, generation_attempt: int) -> bytes:
    """32-byte seed derived from the date and attempt numbers."""
    seed_string = f"{date}:{reduction_round}:{generation_attempt}"
    return hashlib.sha256(seed_string.encode("utf-8")).digest()


def rng_for(date: str, reduction_round: int, generation_attempt: int) -> random.Random:
    seed = create_seed(date, reduction_round, generation_attempt)
    return random.Random(int.from_bytes(seed, "big"))


def top_scores_sum(answers: List[Answer], top_n: int = 5) -> int:
    """Sum of the `top_n` highest answer scores (fewer if fewer answers)."""
    scores = sorted((answer.score() for answer in answers), reverse=True)
    return sum(scores[:top_n])


class GameGenerator(BaseModel):
    """
    Generates and stores daily boards.

    Attributes:
        engine: Game engine holding the dictionary
        config: Threshold and retry policy
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    engine: GameEngine
    config: GeneratorConfig = Field(default_factory=GeneratorConfig)

    @property
    def board_generator(self) -> BoardGenerator:
        return BoardGenerator(wildcard_positions=self.config.wildcard_positions)

    def try_generate_valid_board(
        self,
        rng: random.Random,
        threshold_score: int,
    ) -> Tuple[Optional[GenerationResult], int]:
        """
        Build one board and score it.

        Returns:
            (result, top_score) where result is None if the board fell short
        """
        board = self.board_generator.generate_board(rng)
        answers = self.engine.find_all_valid_words(
            board,
            min_length=self.config.min_word_length,
            max_length=self.config.max_word_length,
        )
        top_score = top_scores_sum(answers, self.config.top_n)

        if top_score < threshold_score:
            return None, top_score

        return GenerationResult(
            board=board,
            threshold_score=threshold_score,
            top_score=top_score,
            answers=answers,
        ), top_score

    def generate_board_for_date(self, date: str) -> GenerationResult:
        """
        Generate the board for a date.

        The same date always yields the same board.

        Raises:
            GenerationExhausted: If no attempt clears the (possibly reduced) threshold
        """
        threshold_score = self.config.threshold_score

        for reduction_round in range(self.config.max_threshold_reductions + 1):
            for generation_attempt in range(1, self.config.generation_attempts + 1):
                rng = rng_for(date, reduction_round, generation_attempt)
                result, top_score = self.try_generate_valid_board(rng, threshold_score)

                if result is not None:
                    logger.info(
                        "Generated board for %s after %d attempts with threshold %d (top %d sum %d, %d answers)",
                        date, generation_attempt, threshold_score, self.config.top_n,
                        top_score, len(result.answers),
                    )
                    return result

                logger.warning(
                    "Generation attempt %d failed for date %s with threshold %d: top %d words sum to %d",
                    generation_attempt, date, threshold_score, self.config.top_n, top_score,
                )

            if reduction_round < self.config.max_threshold_reductions:
                threshold_score = math.floor(threshold_score * self.config.reduction_factor)
                logger.info(
                    "Reducing threshold score to %d for date %s and retrying",
                    threshold_score, date,
                )

        logger.error(
            "Failed to generate valid game for date %s after %d attempts",
            date, self.config.total_attempts,
        )
        raise GenerationExhausted(date)

    def generate_game_for_date(self, date: str, store: BoardStore) -> StoredGame:
        """
        Generate a board for a date and persist it.

        Raises:
            GenerationExhausted: If no acceptable board was found
            CorruptBoardData: If an existing stored game does not parse
            FileExistsError: If the store already holds a game for the date
        """
        result = self.generate_board_for_date(date)
        game = StoredGame(
            date=date,
            sequence_number=store.get_next_sequence_number(),
            threshold_score=result.threshold_score,
            board=result.board,
            answers=[GameAnswer.from_answer(answer) for answer in result.answers],
        )
        return store.save_game(game)

    def generate_missing_games(
        self,
        store: BoardStore,
        today: Date,
        days_ahead: int = 3,
        days_back: int = 7,
    ) -> List[str]:
        """
        Fill in games for today, the next `days_ahead` days and the
        `days_back` days before today.

        A date that fails to generate or store is logged and skipped.

        Returns:
            Dates for which a new game was stored
        """
        targets = [today + timedelta(days=n) for n in range(days_ahead + 1)]
        targets += [today - timedelta(days=n) for n in range(days_back, 0, -1)]

        created: List[str] = []
        for target in targets:
            date_str = target.strftime(DATE_FORMAT)
            if store.game_exists_for_date(date_str):
                logger.info("Game already exists for date: %s", date_str)
                continue
            try:
                game = self.generate_game_for_date(date_str, store)
            except (GameError, OSError) as e:
                logger.error("Failed to generate game for date %s: %s", date_str, e)
                continue
            logger.info("Generated game for date %s with sequence number %d", date_str, game.sequence_number)
            created.append(date_str)

        return created
