"""
Game engine: dictionary-backed word validation, group compatibility and
scoring on top of the board model.
"""

from pathlib import Path as FilePath
from typing import Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .board import Board
from .constraints import AnswerGroupConstraintSet, TileConstraints, intersect_tile_constraints
from .discovery import MAX_WORD_LENGTH, MIN_WORD_LENGTH, discover_candidate_substrings
from .errors import DictionaryMiss, NoRealizablePath, UnsatisfiableConstraint
from .models import Answer
from .scoring import ScoreSheet
from .trie import Trie


def sanitize_word(word: str) -> str:
    """Strip surrounding whitespace and lowercase."""
    return word.strip().lower()


class GameEngine(BaseModel):
    """
    Combines the dictionary index with board path search.

    Attributes:
        index: Dictionary index built once and only read afterwards
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    index: Trie

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "GameEngine":
        return cls(index=Trie.from_words(words))

    @classmethod
    def from_file(cls, path: str | FilePath) -> "GameEngine":
        return cls(index=Trie.from_file(path))

    def is_valid_word_in_dictionary(self, word: str) -> bool:
        return self.index.contains(word)

    def find_word_paths(self, board: Board, word: str) -> Answer:
        return board.resolve(word)

    # ---------- Single words ----------

    def validate_word(self, board: Board, word: str) -> Answer:
        """
        Validate one word against the dictionary and the board.

        Raises:
            DictionaryMiss: If the word is not in the dictionary
            NoRealizablePath: If the word cannot be traced on the board
        """
        if not self.is_valid_word_in_dictionary(word):
            raise DictionaryMiss(word)

        answer = self.find_word_paths(board, word)
        if not answer.paths:
            raise NoRealizablePath(word)
        return answer

    def validate_word_with_prior_constraints(
        self,
        board: Board,
        word: str,
        previously_fixed: Dict[str, str],
    ) -> Optional[Answer]:
        """
        Validate a word given wildcard letters already committed by earlier words.

        Args:
            board: The board to trace on
            word: Candidate word
            previously_fixed: Wildcard tile id ("row_col") -> committed letter

        Returns:
            The answer restricted to compatible paths, or None if the word is
            invalid or every path conflicts with the committed letters
        """
        try:
            answer = self.validate_word(board, word)
        except (DictionaryMiss, NoRealizablePath):
            return None

        filtered = answer.filter_paths_by_constraints(previously_fixed)
        if not filtered.paths:
            return None
        return filtered

    def accept_words_in_order(
        self,
        board: Board,
        words: Iterable[str],
        previously_fixed: Optional[TileConstraints] = None,
    ) -> Tuple[List[Answer], TileConstraints]:
        """
        Accept words one at a time, committing wildcard letters as they go.

        Each accepted word fixes the wildcard tiles on its first compatible
        path; later words must agree with those letters. Words that are
        invalid or conflict with committed letters are skipped.

        Returns:
            (accepted answers, committed wildcard tile id -> letter)
        """
        committed: TileConstraints = dict(previously_fixed or {})
        accepted: List[Answer] = []

        for word in words:
            answer = self.validate_word_with_prior_constraints(board, sanitize_word(word), committed)
            if answer is None:
                continue
            merged = intersect_tile_constraints(committed, answer.best_path().tile_constraints)
            if merged is None:
                continue
            committed = merged
            accepted.append(answer)

        return accepted, committed

    # ---------- Groups of words ----------

    def resolve_answers(self, board: Board, words: Iterable[str]) -> List[Answer]:
        """
        Validate every word, in order.

        Raises:
            DictionaryMiss: On the first word missing from the dictionary
            NoRealizablePath: On the first word that cannot be traced
        """
        return [self.validate_word(board, word) for word in words]

    def validate_answer_group(self, board: Board, words: Iterable[str]) -> List[Answer]:
        """
        Validate a finished submission of several words.

        Raises:
            DictionaryMiss: If a word is not in the dictionary
            NoRealizablePath: If a word cannot be traced
            UnsatisfiableConstraint: If the words cannot share the wildcards
        """
        words = [sanitize_word(word) for word in words]
        for word in words:
            if not self.is_valid_word_in_dictionary(word):
                raise DictionaryMiss(word)

        answers = self.resolve_answers(board, words)
        if not AnswerGroupConstraintSet.is_valid_set(answers):
            raise UnsatisfiableConstraint("Some answers have conflicting wildcard constraints")
        return answers

    def score_answer_group(self, board: Board, words: Iterable[str]) -> ScoreSheet:
        """
        Best achievable per-word scores for words placed together.

        For each wildcard assignment that satisfies the whole group, every word
        takes its highest-scoring path compatible with that assignment; the
        assignment with the highest total wins.

        Raises:
            NoRealizablePath: If a word cannot be traced
            UnsatisfiableConstraint: If the words cannot share the wildcards
        """
        words = [sanitize_word(word) for word in words]
        if not words:
            return ScoreSheet()

        answers = []
        for word in words:
            answer = self.find_word_paths(board, word)
            if not answer.paths:
                raise NoRealizablePath(word)
            answers.append(answer)

        try:
            combined = AnswerGroupConstraintSet.fold(a.constraints_set for a in answers)
        except UnsatisfiableConstraint as e:
            raise UnsatisfiableConstraint(
                "Answers cannot coexist due to conflicting wildcard constraints"
            ) from e

        best_total = -1
        best_scores: Dict[str, int] = {}
        for assignment in combined.path_constraint_sets:
            scores: Dict[str, int] = {}
            for answer in answers:
                scores[answer.word] = max(
                    (path.score for path in answer.paths if path.requirement.is_compatible_with(assignment)),
                    default=0,
                )
            total = sum(scores.values())
            if total > best_total:
                best_total = total
                best_scores = scores

        return ScoreSheet(scores=best_scores)

    # ---------- Discovery ----------

    def find_all_valid_words(
        self,
        board: Board,
        min_length: int = MIN_WORD_LENGTH,
        max_length: int = MAX_WORD_LENGTH,
    ) -> List[Answer]:
        """Every dictionary word with at least one realizable path, sorted by word."""
        candidates = discover_candidate_substrings(board, self.index, min_length, max_length)

        answers: List[Answer] = []
        for word in sorted(candidates):
            if not self.is_valid_word_in_dictionary(word):
                continue
            answer = self.find_word_paths(board, word)
            if answer.paths:
                answers.append(answer)
        return answers
