"""Prefix trie storing whole words for prefix enumeration."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from prefixtree.constants import DEFAULT_CASE_FOLD


class TrieNode:
    """Single node in the prefix trie.

    ``word`` holds the inserted string that ends exactly here, or None.
    ``children`` keeps first-seen-character order, which fixes the order
    of ``Trie.match_prefix`` results.
    """

    __slots__ = ("children", "word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.word: str | None = None


class Trie:
    """Prefix trie with optional lower-case folding on insert."""

    def __init__(self, case_fold: bool = DEFAULT_CASE_FOLD):
        self.root = TrieNode()
        self.case_fold = case_fold

    def set_case_fold(self, enabled: bool) -> Trie:
        """Fold future insertions to lower case. Stored words are untouched."""
        self.case_fold = enabled
        return self

    def clear(self) -> Trie:
        self.root = TrieNode()
        return self

    def insert(self, word: str | None) -> Trie:
        """Store ``word``. The first insert of a given path wins."""
        if word is None:
            return self
        if self.case_fold:
            word = word.lower()
        node = self.root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = TrieNode()
            node = child
        if node.word is None:
            node.word = word
        return self

    def insert_all(self, words: Iterable[str | None]) -> Trie:
        for word in words:
            self.insert(word)
        return self

    def contains(self, word: str | None) -> bool:
        """True if exactly ``word`` was stored. The lookup is never folded."""
        if word is None:
            return False
        node = self._walk(word)
        return node is not None and node.word == word

    def is_prefix(self, prefix: str | None) -> bool:
        if prefix is None:
            return False
        return self._walk(prefix) is not None

    def match_prefix(self, prefix: str) -> list[str]:
        """All stored words under ``prefix``, depth-first, pre-order.

        A node's own word precedes its descendants; siblings come in the
        order their character was first inserted.
        """
        if prefix is None:
            raise ValueError("Prefix cannot be None")
        node = self._walk(prefix)
        if node is None:
            return []
        return list(self._iter_words(node))

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    @staticmethod
    def _iter_words(start: TrieNode) -> Iterator[str]:
        # explicit stack: word length is not bounded by the recursion limit
        stack = [start]
        while stack:
            node = stack.pop()
            if node.word is not None:
                yield node.word
            stack.extend(reversed(node.children.values()))

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return sum(1 for _ in self._iter_words(self.root))
