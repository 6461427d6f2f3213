"""Terminal demo: load a word list and print prefix matches."""

from __future__ import annotations

import argparse
import logging

from prefixtree.constants import SAMPLE_PREFIXES
from prefixtree.wordlist import WordList

log = logging.getLogger("prefixtree")


def format_matches(prefix: str, words: list[str]) -> list[str]:
    """Header line plus one ``[prefix]rest`` line per word."""
    lines = [f'{len(words)} words starting with "{prefix}":']
    for word in words:
        lines.append(f"    [{prefix}]{word[len(prefix):]}")
    return lines


def print_words_with_prefix(word_list: WordList, prefix: str) -> None:
    for line in format_matches(prefix, word_list.words_with_prefix(prefix)):
        print(line)
    print()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Prefix tree demo -- lists stored words starting with each prefix",
    )
    parser.add_argument("prefixes", nargs="*", default=list(SAMPLE_PREFIXES),
                        help="Prefixes to look up (default: %(default)s)")
    parser.add_argument("--words", type=str, default=None,
                        help="Path to a word list file (space-separated words per line)")
    parser.add_argument("--case-sensitive", action="store_true",
                        help="Store words as given instead of lower-casing them")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        word_list = WordList(args.words, case_fold=not args.case_sensitive)
    except OSError as exc:
        log.error("Could not read word list: %s", exc)
        return 1

    for prefix in args.prefixes:
        print_words_with_prefix(word_list, prefix)
    return 0
