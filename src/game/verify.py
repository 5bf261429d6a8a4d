"""
Submission verification: checks a finished set of words against a board.

Validates:
1. Submission shape (non-empty, lowercase a-z words, no duplicates)
2. Dictionary membership of every word
3. A realizable path for every word
4. Wildcard compatibility across all words
"""

import re
from typing import Iterable, List, Set

from .board import Board
from .cascade import CRITICAL, FATAL, HIGH, LOW, MEDIUM
from .constraints import AnswerGroupConstraintSet
from .engine import GameEngine, sanitize_word
from .models import Answer, ValidationError, ValidationResult


WORD_PATTERN = re.compile(r"^[a-z]+$")


def validate_shape(words: List[str]) -> List[ValidationError]:
    """Reject empty submissions, malformed words and duplicates."""
    errors: List[ValidationError] = []

    if not words:
        errors.append(ValidationError(
            code="EMPTY_SUBMISSION",
            message="Submission contains no words",
            cascade_level=FATAL
        ))
        return errors

    seen: Set[str] = set()
    for word in words:
        if not WORD_PATTERN.match(word):
            errors.append(ValidationError(
                code="MALFORMED_WORD",
                message=f"'{word}' must contain only letters a-z",
                word=word,
                cascade_level=FATAL
            ))
        elif word in seen:
            errors.append(ValidationError(
                code="DUPLICATE_WORD",
                message=f"'{word}' was submitted more than once",
                word=word,
                cascade_level=LOW
            ))
        seen.add(word)

    return errors


def validate_words(engine: GameEngine, board: Board, words: List[str]) -> tuple[List[Answer], List[ValidationError]]:
    """Check each word against the dictionary and the board."""
    answers: List[Answer] = []
    errors: List[ValidationError] = []

    for word in dict.fromkeys(words):
        if not engine.is_valid_word_in_dictionary(word):
            errors.append(ValidationError(
                code="INVALID_WORD",
                message=f"'{word}' is not a valid dictionary word",
                word=word,
                cascade_level=CRITICAL
            ))
            continue

        answer = engine.find_word_paths(board, word)
        if not answer.paths:
            errors.append(ValidationError(
                code="NO_PATH",
                message=f"'{word}' cannot be formed on this board",
                word=word,
                cascade_level=HIGH
            ))
            continue

        answers.append(answer)

    return answers, errors


def verify_submission(engine: GameEngine, board: Board, words: Iterable[str]) -> ValidationResult:
    """
    Main verification function: validates a submission of several words.

    Returns a ValidationResult with:
    - valid: True if every word is usable and all words can share the wildcards
    - errors: List of validation errors
    - answers: Answers for the usable words
    - scores / total_score: Best group scores when the submission is valid
    """
    words = [sanitize_word(word) for word in words]
    all_errors = validate_shape(words)

    if any(e.cascade_level == FATAL for e in all_errors):
        return ValidationResult(valid=False, errors=all_errors, words=words)

    answers, word_errors = validate_words(engine, board, words)
    all_errors.extend(word_errors)

    if answers and not AnswerGroupConstraintSet.is_valid_set(answers):
        all_errors.append(ValidationError(
            code="CONSTRAINT_CONFLICT",
            message="Some answers have conflicting wildcard constraints",
            cascade_level=MEDIUM
        ))

    valid = len(all_errors) == 0
    result = ValidationResult(valid=valid, errors=all_errors, words=words, answers=answers)

    if valid:
        sheet = engine.score_answer_group(board, [a.word for a in answers])
        result.scores = sheet.scores
        result.total_score = sheet.total

    return result
