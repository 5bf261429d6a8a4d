"""Data models for tiles, paths and answers."""

from typing import Dict, List, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field

from .constraints import (
    AnswerGroupConstraintSet,
    TileConstraints,
    WildcardRequirement,
    has_collision,
    wildcard_class,
)


WILDCARD = "*"
PLACEHOLDER = "."
BOARD_SIZE = 4


class Position(NamedTuple):
    """A cell on the board."""
    row: int
    col: int


class Tile(BaseModel):
    """A single board cell. Wildcards match any character."""
    model_config = ConfigDict(frozen=True)

    letter: str
    points: int = Field(0, ge=0)
    is_wildcard: bool = False
    row: int = Field(..., ge=0, lt=BOARD_SIZE)
    col: int = Field(..., ge=0, lt=BOARD_SIZE)

    @property
    def id(self) -> str:
        return f"{self.row}_{self.col}"

    @property
    def position(self) -> Position:
        return Position(self.row, self.col)

    @property
    def wildcard_class(self) -> str:
        return wildcard_class(self.row, self.col)

    def matches(self, ch: str) -> bool:
        return self.is_wildcard or self.letter == ch


class Row(BaseModel):
    tiles: List[Tile]


class Path(BaseModel):
    """One tracing of a word across adjacent, distinct tiles."""
    model_config = ConfigDict(frozen=True)

    tiles: List[Tile]
    requirement: WildcardRequirement = Field(default_factory=WildcardRequirement)
    tile_constraints: TileConstraints = Field(default_factory=dict)

    @property
    def positions(self) -> List[Position]:
        return [tile.position for tile in self.tiles]

    @property
    def score(self) -> int:
        return sum(tile.points for tile in self.tiles)

    def is_consistent_with(self, fixed: TileConstraints) -> bool:
        """True if this path's wildcard letters agree with already-fixed tiles."""
        return not has_collision(fixed, self.tile_constraints)


class Answer(BaseModel):
    """A word together with every path that spells it on a board."""
    word: str
    paths: List[Path] = Field(default_factory=list)

    @property
    def constraints_set(self) -> AnswerGroupConstraintSet:
        return AnswerGroupConstraintSet(
            path_constraint_sets=[path.requirement for path in self.paths]
        )

    @property
    def is_realizable(self) -> bool:
        return bool(self.paths)

    def best_path(self) -> Path:
        """
        The first discovered path.

        Raises:
            IndexError: If the answer has no paths
        """
        return self.paths[0]

    def score(self) -> int:
        """Points along the first discovered path, or 0 without paths."""
        if not self.paths:
            return 0
        return self.paths[0].score

    def filter_paths_by_constraints(self, previously_fixed: Dict[str, str]) -> "Answer":
        """Keep only paths whose wildcard tiles agree with `previously_fixed` (tile id -> letter)."""
        return Answer(
            word=self.word,
            paths=[path for path in self.paths if path.is_consistent_with(previously_fixed)],
        )

    def __str__(self) -> str:
        return self.word


class ValidationError(BaseModel):
    """A single problem found in a submission."""
    code: str
    message: str
    word: Optional[str] = None
    cascade_level: int = 0  # 0=FATAL, 1=CRITICAL, 2=HIGH, 3=MEDIUM, 4=LOW


class ValidationResult(BaseModel):
    """Result of checking a submission of several words."""
    valid: bool
    errors: List[ValidationError] = Field(default_factory=list)
    words: List[str] = Field(default_factory=list)
    answers: List[Answer] = Field(default_factory=list)
    scores: Dict[str, int] = Field(default_factory=dict)
    total_score: int = 0
