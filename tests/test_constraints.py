"""Tests for the wildcard constraint algebra."""

import itertools

import pytest

from src.game import (
    AnswerGroupConstraintSet,
    UnsatisfiableConstraint,
    WildcardRequirement,
    has_collision,
    intersect_tile_constraints,
    wildcard_class,
)


U = WildcardRequirement.unconstrained()
A = WildcardRequirement.a_decided
B = WildcardRequirement.b_decided
BOTH = WildcardRequirement.both_decided

# Four states, two letter choices each where a slot is decided
SAMPLES = [U, A("x"), A("y"), B("x"), B("y"), BOTH("x", "x"), BOTH("x", "y"), BOTH("y", "y")]


def group(*requirements):
    return AnswerGroupConstraintSet(path_constraint_sets=list(requirements))


class TestWildcardClass:
    """Top-left quadrant is class A."""

    def test_classes(self):
        """(r<2, c<2) is A; everything else is B."""
        assert wildcard_class(0, 0) == "A"
        assert wildcard_class(1, 1) == "A"
        assert wildcard_class(1, 2) == "B"
        assert wildcard_class(2, 1) == "B"
        assert wildcard_class(3, 3) == "B"


class TestMerge:
    """Merging two requirements on the same assignment."""

    def test_unconstrained_is_identity(self):
        """Merging with Unconstrained returns the other side."""
        for requirement in SAMPLES:
            assert U.merge(requirement) == requirement
            assert requirement.merge(U) == requirement

    def test_a_and_b_combine(self):
        """Deciding different classes yields BothDecided."""
        merged = A("a").merge(B("b"))
        assert merged == BOTH("a", "b")
        assert merged.kind == "both"
        assert str(merged) == "BothDecided(a, b)"

    def test_same_letter_is_idempotent(self):
        """Agreeing decisions merge to themselves."""
        assert A("a").merge(A("a")) == A("a")
        assert BOTH("a", "b").merge(B("b")) == BOTH("a", "b")

    def test_conflicting_class_a(self):
        """Class A cannot resolve to two letters."""
        with pytest.raises(UnsatisfiableConstraint):
            A("a").merge(A("b"))

    def test_conflicting_class_b_inside_both(self):
        """A BothDecided conflicts on either slot."""
        with pytest.raises(UnsatisfiableConstraint):
            BOTH("a", "b").merge(B("c"))
        with pytest.raises(UnsatisfiableConstraint):
            A("z").merge(BOTH("a", "b"))

    def test_commutative(self):
        """merge(x, y) and merge(y, x) agree, including on failure."""
        for left, right in itertools.product(SAMPLES, repeat=2):
            try:
                forward = left.merge(right)
            except UnsatisfiableConstraint:
                forward = None
            try:
                backward = right.merge(left)
            except UnsatisfiableConstraint:
                backward = None
            assert forward == backward, (left, right)

    def test_is_compatible_with(self):
        """Boolean form of merge."""
        assert A("a").is_compatible_with(B("b"))
        assert not A("a").is_compatible_with(BOTH("b", "c"))

    def test_kind_and_str(self):
        """Each state names itself."""
        assert (U.kind, str(U)) == ("unconstrained", "Unconstrained")
        assert (A("q").kind, str(A("q"))) == ("class_a", "ClassADecided(q)")
        assert (B("q").kind, str(B("q"))) == ("class_b", "ClassBDecided(q)")

    def test_requirements_are_immutable(self):
        """Requirements are frozen values."""
        with pytest.raises(Exception):
            A("a").class_a = "b"


class TestIntersection:
    """Pairwise intersection of alternative sets."""

    def test_keeps_every_successful_merge(self):
        """All compatible pairs survive, in order."""
        left = group(A("a"), A("b"))
        right = group(U, B("c"))

        result = left.intersection(right)

        assert result.path_constraint_sets == [A("a"), BOTH("a", "c"), A("b"), BOTH("b", "c")]

    def test_drops_failed_merges(self):
        """Incompatible pairs are discarded."""
        result = group(A("a"), A("b")).intersection(group(A("b")))
        assert result.path_constraint_sets == [A("b")]

    def test_duplicates_are_kept(self):
        """Equal merges are not collapsed."""
        result = group(U, U).intersection(group(A("a")))
        assert result.path_constraint_sets == [A("a"), A("a")]

    def test_no_successful_merge(self):
        """An empty intersection is unsatisfiable."""
        with pytest.raises(UnsatisfiableConstraint):
            group(A("a")).intersection(group(A("b")))

    def test_empty_operand(self):
        """Intersecting with an empty set is unsatisfiable."""
        with pytest.raises(UnsatisfiableConstraint):
            group(U).intersection(group())


class TestFold:
    """Folding sets across a group of answers."""

    def test_single_set(self):
        """One non-empty set folds to itself."""
        assert AnswerGroupConstraintSet.fold([group(A("a"), U)]) == group(A("a"), U)

    def test_folds_left_to_right(self):
        """Each set narrows the accumulated alternatives."""
        result = AnswerGroupConstraintSet.fold([
            group(U, A("a")),
            group(A("a"), A("b")),
            group(B("c")),
        ])
        assert result.path_constraint_sets == [BOTH("a", "c"), BOTH("b", "c"), BOTH("a", "c")]

    def test_empty_input(self):
        """No answers cannot be folded."""
        with pytest.raises(UnsatisfiableConstraint):
            AnswerGroupConstraintSet.fold([])

    def test_empty_first_set(self):
        """An answer without paths makes the group unsatisfiable."""
        with pytest.raises(UnsatisfiableConstraint):
            AnswerGroupConstraintSet.fold([group()])

    def test_conflict_propagates(self):
        """A failed intersection fails the fold."""
        with pytest.raises(UnsatisfiableConstraint):
            AnswerGroupConstraintSet.fold([group(A("a")), group(U), group(A("b"))])


class TestIsValidSet:
    """Group compatibility over answers."""

    class FakeAnswer:
        def __init__(self, *requirements):
            self.constraints_set = group(*requirements)

    def test_compatible_answers(self):
        """Answers sharing an assignment are valid together."""
        answers = [self.FakeAnswer(A("a"), A("b")), self.FakeAnswer(B("c")), self.FakeAnswer(U)]
        assert AnswerGroupConstraintSet.is_valid_set(answers)

    def test_incompatible_answers(self):
        """Answers forcing different letters on one class are not."""
        answers = [self.FakeAnswer(A("a")), self.FakeAnswer(A("b"))]
        assert not AnswerGroupConstraintSet.is_valid_set(answers)

    def test_empty_group_is_invalid(self):
        """An empty group has no valid assignment."""
        assert not AnswerGroupConstraintSet.is_valid_set([])

    def test_answer_without_paths(self):
        """An unrealizable answer invalidates the group."""
        answers = [self.FakeAnswer(U), self.FakeAnswer()]
        assert not AnswerGroupConstraintSet.is_valid_set(answers)


class TestTileConstraints:
    """Per-tile letter mappings."""

    def test_collision(self):
        """Same tile, different letter."""
        assert has_collision({"1_1": "a"}, {"1_1": "b"})
        assert not has_collision({"1_1": "a"}, {"1_1": "a", "2_2": "c"})
        assert not has_collision({}, {"2_2": "c"})

    def test_intersect(self):
        """Compatible mappings union; colliding ones give None."""
        assert intersect_tile_constraints({"1_1": "a"}, {"2_2": "c"}) == {"1_1": "a", "2_2": "c"}
        assert intersect_tile_constraints({"1_1": "a"}, {"1_1": "b"}) is None
