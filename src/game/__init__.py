"""Puzzle core: dictionary, board, path search and wildcard constraints."""

from .board import Board, DIRECTIONS
from .cascade import filter_cascading_errors
from .constraints import (
    AnswerGroupConstraintSet,
    WildcardRequirement,
    has_collision,
    intersect_tile_constraints,
    wildcard_class,
)
from .discovery import discover_candidate_substrings
from .engine import GameEngine, sanitize_word
from .errors import (
    CorruptBoardData,
    DictionaryMiss,
    GameError,
    GenerationExhausted,
    InvalidWord,
    NoRealizablePath,
    UnsatisfiableConstraint,
)
from .models import (
    Answer,
    Path,
    Position,
    Row,
    Tile,
    ValidationError,
    ValidationResult,
    WILDCARD,
)
from .scoring import LETTER_FREQUENCIES, ScoreSheet, points_for_letter
from .trie import Trie
from .verify import verify_submission

__all__ = [
    # Board model and search
    "Board",
    "DIRECTIONS",
    "Tile",
    "Row",
    "Path",
    "Position",
    "Answer",
    "WILDCARD",
    # Constraints
    "WildcardRequirement",
    "AnswerGroupConstraintSet",
    "wildcard_class",
    "has_collision",
    "intersect_tile_constraints",
    # Dictionary and scoring
    "Trie",
    "LETTER_FREQUENCIES",
    "points_for_letter",
    "ScoreSheet",
    # Engine
    "GameEngine",
    "sanitize_word",
    "discover_candidate_substrings",
    # Verification
    "verify_submission",
    "filter_cascading_errors",
    "ValidationError",
    "ValidationResult",
    # Errors
    "GameError",
    "InvalidWord",
    "DictionaryMiss",
    "NoRealizablePath",
    "UnsatisfiableConstraint",
    "GenerationExhausted",
    "CorruptBoardData",
]
