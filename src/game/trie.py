"""Prefix tree used as the dictionary index."""

from pathlib import Path
from typing import Dict, Iterable


class Trie:
    """
    Prefix tree keyed by character.

    Words are stored exactly as given; callers lowercase before inserting
    and before querying.
    """

    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: Dict[str, "Trie"] = {}
        self.is_word = False

    def insert(self, word: str) -> None:
        node = self
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = Trie()
            node = child
        node.is_word = True

    def _find(self, prefix: str):
        node = self
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def contains(self, word: str) -> bool:
        """Exact membership test."""
        node = self._find(word)
        return node is not None and node.is_word

    def has_prefix(self, prefix: str) -> bool:
        """True if some inserted word starts with `prefix` (always true for '')."""
        return self._find(prefix) is not None

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return (1 if self.is_word else 0) + sum(len(c) for c in self.children.values())

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "Trie":
        trie = cls()
        for word in words:
            trie.insert(word)
        return trie

    @classmethod
    def from_file(cls, path: str | Path) -> "Trie":
        """
        Load a newline-delimited word list.

        Blank lines are skipped; surrounding whitespace is stripped.

        Raises:
            FileNotFoundError: If the word list does not exist
        """
        trie = cls()
        with open(Path(path), encoding="utf-8") as f:
            for line in f:
                word = line.strip()
                if word:
                    trie.insert(word)
        return trie
