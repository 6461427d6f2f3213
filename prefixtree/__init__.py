"""Prefix tree -- word storage with ordered prefix enumeration."""

from prefixtree.constants import DEFAULT_CASE_FOLD, DEFAULT_WORDS_PATH, SAMPLE_PREFIXES
from prefixtree.trie import Trie, TrieNode
from prefixtree.wordlist import WordList, load_words, split_tokens

__all__ = [
    "DEFAULT_CASE_FOLD",
    "DEFAULT_WORDS_PATH",
    "SAMPLE_PREFIXES",
    "Trie",
    "TrieNode",
    "WordList",
    "load_words",
    "split_tokens",
]
