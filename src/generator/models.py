"""Pydantic models for generated and stored games."""

from typing import List

from pydantic import BaseModel, Field

from ..game.board import Board
from ..game.constraints import WildcardRequirement
from ..game.models import Answer, Position


class GameAnswer(BaseModel):
    """A discoverable word on a stored board, with its first path."""
    word: str
    score: int
    path: List[Position] = Field(default_factory=list)
    constraints: List[WildcardRequirement] = Field(default_factory=list)

    @classmethod
    def from_answer(cls, answer: Answer) -> "GameAnswer":
        return cls(
            word=answer.word,
            score=answer.score(),
            path=answer.best_path().positions if answer.paths else [],
            constraints=answer.constraints_set.path_constraint_sets,
        )


class GenerationResult(BaseModel):
    """An accepted board and the threshold it cleared."""
    board: Board
    threshold_score: int
    top_score: int = 0
    answers: List[Answer] = Field(default_factory=list)


class StoredGame(BaseModel):
    """A write-once record for one date."""
    date: str
    sequence_number: int
    threshold_score: int
    board: Board
    answers: List[GameAnswer] = Field(default_factory=list)
