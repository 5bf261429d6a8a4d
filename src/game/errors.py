"""Exceptions raised by the game core."""

from typing import Optional


class GameError(ValueError):
    """Base class for expected, recoverable game outcomes."""


class InvalidWord(GameError):
    """A submitted word cannot be accepted on a board."""

    code = "INVALID_WORD"

    def __init__(self, word: str, message: Optional[str] = None):
        self.word = word
        super().__init__(message or f"'{word}' is not a valid word")


class DictionaryMiss(InvalidWord):
    """The word is not in the dictionary."""

    code = "NOT_IN_DICTIONARY"

    def __init__(self, word: str):
        super().__init__(word, f"Word '{word}' not found in dictionary")


class NoRealizablePath(InvalidWord):
    """The word is in the dictionary but cannot be traced on the board."""

    code = "NO_PATH"

    def __init__(self, word: str):
        super().__init__(word, f"Word '{word}' cannot be formed on this board")


class UnsatisfiableConstraint(GameError):
    """Wildcard requirements contradict each other."""

    def __init__(self, message: str = "Constraints cannot be satisfied"):
        super().__init__(message)


class GenerationExhausted(GameError):
    """No generated board met the quality threshold."""

    def __init__(self, date: str):
        self.date = date
        super().__init__(f"Could not generate valid game for date: {date}")


class CorruptBoardData(GameError):
    """Persisted board data does not parse into a 4x4 board."""
