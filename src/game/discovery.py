"""Exhaustive word discovery used while generating boards."""

import string
from typing import Set, Tuple

from .board import Board
from .models import BOARD_SIZE
from .trie import Trie


ALPHABET = string.ascii_lowercase
MIN_WORD_LENGTH = 3
MAX_WORD_LENGTH = 16


def discover_candidate_substrings(
    board: Board,
    prefixes: Trie,
    min_length: int = MIN_WORD_LENGTH,
    max_length: int = MAX_WORD_LENGTH,
) -> Set[str]:
    """
    Collect every string traceable on the board that could still be a word.

    Walks start from every cell and extend in all 8 directions without reusing
    a cell. Wildcards branch over all 26 letters. Walks stop at `max_length`
    characters or as soon as no word in `prefixes` starts with the string
    built so far. Every string of at least `min_length` characters reached is
    returned; callers still filter by dictionary membership and re-check each
    survivor with path search.
    """
    found: Set[str] = set()
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            _walk(board, row, col, "", set(), prefixes, found, min_length, max_length)
    return found


def _walk(
    board: Board,
    row: int,
    col: int,
    current: str,
    visited: Set[Tuple[int, int]],
    prefixes: Trie,
    found: Set[str],
    min_length: int,
    max_length: int,
) -> None:
    visited.add((row, col))

    tile = board.get_tile(row, col)
    letters = ALPHABET if tile.is_wildcard else tile.letter

    for letter in letters:
        candidate = current + letter
        if not prefixes.has_prefix(candidate):
            continue
        if len(candidate) >= min_length:
            found.add(candidate)
        if len(candidate) >= max_length:
            continue
        for next_row, next_col in board.neighbors(row, col):
            if (next_row, next_col) not in visited:
                _walk(board, next_row, next_col, candidate, visited, prefixes, found, min_length, max_length)

    visited.discard((row, col))
