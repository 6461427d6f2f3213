"""Word list loaded from a line-oriented text source into a prefix trie."""

from __future__ import annotations

import logging

from prefixtree.constants import DEFAULT_CASE_FOLD, DEFAULT_WORDS_PATH
from prefixtree.trie import Trie

log = logging.getLogger("prefixtree")


def split_tokens(line: str) -> list[str]:
    """Split on single spaces, dropping trailing empty tokens.

    A line without any space comes back whole, so an empty line is ``[""]``.
    """
    tokens = line.split(" ")
    if len(tokens) > 1:
        while tokens and tokens[-1] == "":
            tokens.pop()
    return tokens


def load_words(trie: Trie, path: str) -> int:
    """Feed every space-separated token of ``path`` to ``trie``.

    Returns the number of tokens inserted, duplicates included.
    """
    count = 0
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, 1):
            tokens = split_tokens(line.rstrip("\r\n"))
            trie.insert_all(tokens)
            count += len(tokens)
            log.debug("%s:%d -> %d tokens", path, lineno, len(tokens))
    return count


class WordList:
    """Trie-backed word list with prefix search."""

    def __init__(self, path: str | None = None, case_fold: bool = DEFAULT_CASE_FOLD):
        self.path = path if path is not None else DEFAULT_WORDS_PATH
        self.trie = Trie(case_fold=case_fold)
        tokens = load_words(self.trie, self.path)
        log.info("Loaded %s words from %s", f"{len(self.trie):,}", self.path)
        log.debug("%d tokens read", tokens)

    def words_with_prefix(self, prefix: str) -> list[str]:
        return self.trie.match_prefix(prefix)

    def __contains__(self, word: str) -> bool:
        return word in self.trie
