"""
Wildcard constraint algebra.

Two mechanisms live here:

1. Class-based: a board has at most one class A wildcard (top-left quadrant)
   and one class B wildcard (everywhere else). A `WildcardRequirement`
   records which letter each class must resolve to for one path, and an
   `AnswerGroupConstraintSet` is the disjunction of those requirements over
   all paths of an answer. Folding sets across answers decides whether the
   answers can share the board.

2. Per-tile: a plain mapping from tile id ("row_col") to letter, used to
   check one new word against letters already committed by earlier words.
"""

from typing import Dict, Iterable, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .errors import UnsatisfiableConstraint


RequirementKind = Literal["unconstrained", "class_a", "class_b", "both"]

# Per-tile constraints: wildcard tile id -> letter
TileConstraints = Dict[str, str]


def wildcard_class(row: int, col: int) -> Literal["A", "B"]:
    """Class A is the top-left quadrant, class B is everything else."""
    return "A" if row < 2 and col < 2 else "B"


class WildcardRequirement(BaseModel):
    """
    Letters a path forces onto the board's wildcards.

    `class_a` / `class_b` are None when that wildcard is unused. The four
    states are Unconstrained, ClassADecided, ClassBDecided and BothDecided.
    """
    model_config = ConfigDict(frozen=True)

    class_a: Optional[str] = None
    class_b: Optional[str] = None

    @classmethod
    def unconstrained(cls) -> "WildcardRequirement":
        return cls()

    @classmethod
    def a_decided(cls, letter: str) -> "WildcardRequirement":
        return cls(class_a=letter)

    @classmethod
    def b_decided(cls, letter: str) -> "WildcardRequirement":
        return cls(class_b=letter)

    @classmethod
    def both_decided(cls, letter_a: str, letter_b: str) -> "WildcardRequirement":
        return cls(class_a=letter_a, class_b=letter_b)

    @property
    def kind(self) -> RequirementKind:
        if self.class_a is not None and self.class_b is not None:
            return "both"
        if self.class_a is not None:
            return "class_a"
        if self.class_b is not None:
            return "class_b"
        return "unconstrained"

    def merge(self, other: "WildcardRequirement") -> "WildcardRequirement":
        """
        Combine two requirements on the same assignment.

        Each class slot must agree exactly where both sides decide it;
        otherwise the undecided side takes the other's letter.

        Raises:
            UnsatisfiableConstraint: If a class is decided to two different letters
        """
        if self.class_a is not None and other.class_a is not None and self.class_a != other.class_a:
            raise UnsatisfiableConstraint(
                f"Class A wildcard cannot be both '{self.class_a}' and '{other.class_a}'"
            )
        if self.class_b is not None and other.class_b is not None and self.class_b != other.class_b:
            raise UnsatisfiableConstraint(
                f"Class B wildcard cannot be both '{self.class_b}' and '{other.class_b}'"
            )
        return WildcardRequirement(
            class_a=self.class_a if self.class_a is not None else other.class_a,
            class_b=self.class_b if self.class_b is not None else other.class_b,
        )

    def is_compatible_with(self, other: "WildcardRequirement") -> bool:
        try:
            self.merge(other)
        except UnsatisfiableConstraint:
            return False
        return True

    def __str__(self) -> str:
        if self.kind == "unconstrained":
            return "Unconstrained"
        if self.kind == "class_a":
            return f"ClassADecided({self.class_a})"
        if self.kind == "class_b":
            return f"ClassBDecided({self.class_b})"
        return f"BothDecided({self.class_a}, {self.class_b})"


class AnswerGroupConstraintSet(BaseModel):
    """Disjunction of wildcard requirements; any one alternative suffices."""
    path_constraint_sets: List[WildcardRequirement] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.path_constraint_sets)

    def intersection(self, other: "AnswerGroupConstraintSet") -> "AnswerGroupConstraintSet":
        """
        Keep every pairwise merge that succeeds.

        Duplicates are kept; they never change satisfiability.

        Raises:
            UnsatisfiableConstraint: If no pair merges
        """
        merged: List[WildcardRequirement] = []
        for mine in self.path_constraint_sets:
            for theirs in other.path_constraint_sets:
                try:
                    merged.append(mine.merge(theirs))
                except UnsatisfiableConstraint:
                    continue

        if not merged:
            raise UnsatisfiableConstraint("Some answers have conflicting wildcard constraints")
        return AnswerGroupConstraintSet(path_constraint_sets=merged)

    @classmethod
    def fold(cls, sets: Iterable["AnswerGroupConstraintSet"]) -> "AnswerGroupConstraintSet":
        """
        Intersect all sets, starting from the first.

        An empty input has no valid assignment.

        Raises:
            UnsatisfiableConstraint: If the input is empty or any intersection fails
        """
        sets = list(sets)
        if not sets:
            raise UnsatisfiableConstraint("No answers to combine")

        accumulator = sets[0]
        if not accumulator.path_constraint_sets:
            raise UnsatisfiableConstraint("Answer has no realizable path")
        for constraint_set in sets[1:]:
            accumulator = accumulator.intersection(constraint_set)
        return accumulator

    @classmethod
    def is_valid_set(cls, answers: Iterable) -> bool:
        """True if all answers can be placed on the board at the same time."""
        try:
            cls.fold(answer.constraints_set for answer in answers)
        except UnsatisfiableConstraint:
            return False
        return True


def has_collision(first: TileConstraints, second: TileConstraints) -> bool:
    """True if the two mappings fix the same wildcard tile to different letters."""
    return any(
        tile_id in first and first[tile_id] != letter
        for tile_id, letter in second.items()
    )


def intersect_tile_constraints(first: TileConstraints, second: TileConstraints) -> Optional[TileConstraints]:
    """Union of both mappings, or None if they collide."""
    if has_collision(first, second):
        return None
    merged = dict(first)
    merged.update(second)
    return merged
