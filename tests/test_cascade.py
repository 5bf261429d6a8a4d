"""Test cascading error filtering logic."""

from src.game import Board, GameEngine, ValidationError, filter_cascading_errors, verify_submission
from src.game.cascade import CRITICAL, FATAL, HIGH, LOW, MEDIUM


BOARD = Board.from_letters("catqx*xxxx*xxxxz")
ENGINE = GameEngine.from_words(["act", "cat", "cot", "cut", "quiz"])


def error(code: str, level: int) -> ValidationError:
    return ValidationError(code=code, message=code.lower(), cascade_level=level)


class TestCascadeLevelConstants:
    """Test that cascade level constants are correctly defined."""

    def test_cascade_levels_defined(self):
        """Cascade levels should have correct values."""
        assert FATAL == 0
        assert CRITICAL == 1
        assert HIGH == 2
        assert MEDIUM == 3
        assert LOW == 4


class TestCascadeFiltering:
    """Test error cascade hierarchy."""

    def test_no_errors(self):
        """Nothing in, nothing out."""
        assert filter_cascading_errors([]) == []

    def test_fatal_hides_everything_else(self):
        """When a fatal error exists, only fatal errors are shown."""
        errors = [error("MALFORMED_WORD", FATAL), error("INVALID_WORD", CRITICAL), error("DUPLICATE_WORD", LOW)]
        filtered = filter_cascading_errors(errors)
        assert [e.code for e in filtered] == ["MALFORMED_WORD"]

    def test_word_errors_keep_conflicts(self):
        """Conflicts between usable words stay visible next to unusable words."""
        errors = [
            error("INVALID_WORD", CRITICAL),
            error("NO_PATH", HIGH),
            error("CONSTRAINT_CONFLICT", MEDIUM),
            error("DUPLICATE_WORD", LOW),
        ]
        filtered = filter_cascading_errors(errors)
        assert [e.code for e in filtered] == ["INVALID_WORD", "NO_PATH", "CONSTRAINT_CONFLICT", "DUPLICATE_WORD"]

    def test_most_severe_first(self):
        """Errors are ordered by level, keeping discovery order within a level."""
        errors = [
            ValidationError(code="DUPLICATE_WORD", message="a", cascade_level=LOW),
            ValidationError(code="NO_PATH", message="first", cascade_level=HIGH),
            ValidationError(code="CONSTRAINT_CONFLICT", message="b", cascade_level=MEDIUM),
            ValidationError(code="INVALID_WORD", message="c", cascade_level=CRITICAL),
            ValidationError(code="NO_PATH", message="second", cascade_level=HIGH),
        ]
        filtered = filter_cascading_errors(errors)
        assert [(e.code, e.message) for e in filtered] == [
            ("INVALID_WORD", "c"),
            ("NO_PATH", "first"),
            ("NO_PATH", "second"),
            ("CONSTRAINT_CONFLICT", "b"),
            ("DUPLICATE_WORD", "a"),
        ]

    def test_only_low_level_errors_shown_in_full(self):
        """Without word errors, everything is shown."""
        errors = [error("CONSTRAINT_CONFLICT", MEDIUM), error("DUPLICATE_WORD", LOW)]
        assert filter_cascading_errors(errors) == errors

    def test_max_errors_limit(self):
        """Should limit output to max_errors with a summary."""
        errors = [error("INVALID_WORD", CRITICAL) for _ in range(8)]
        filtered = filter_cascading_errors(errors, max_errors=5)

        assert len(filtered) == 5
        assert filtered[-1].code == "ADDITIONAL_ERRORS"
        assert "4 more errors" in filtered[-1].message
        assert filtered[-1].cascade_level == CRITICAL

    def test_summary_replaces_last_slot(self):
        """The summary takes the last slot and counts everything hidden."""
        errors = [error("NO_PATH", HIGH) for _ in range(3)]
        filtered = filter_cascading_errors(errors, max_errors=2)
        assert [e.code for e in filtered] == ["NO_PATH", "ADDITIONAL_ERRORS"]
        assert "2 more errors" in filtered[-1].message

    def test_at_limit_is_not_summarized(self):
        """Exactly max_errors errors are all shown."""
        errors = [error("NO_PATH", HIGH) for _ in range(5)]
        assert filter_cascading_errors(errors) == errors


class TestCascadeOnSubmissions:
    """Cascade applied to real verification results."""

    def test_invalid_word_does_not_hide_conflict(self):
        """A conflict among the usable words is shown alongside an unknown word."""
        result = verify_submission(ENGINE, BOARD, ["cot", "cut", "dog"])
        codes = [e.code for e in result.errors]
        assert "INVALID_WORD" in codes
        assert "CONSTRAINT_CONFLICT" in codes

        filtered = filter_cascading_errors(result.errors)
        assert [e.code for e in filtered] == ["INVALID_WORD", "CONSTRAINT_CONFLICT"]

    def test_conflict_shown_alone(self):
        """A pure conflict is reported as is."""
        result = verify_submission(ENGINE, BOARD, ["cot", "cut"])
        filtered = filter_cascading_errors(result.errors)
        assert [e.code for e in filtered] == ["CONSTRAINT_CONFLICT"]
