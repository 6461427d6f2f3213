"""Defaults for the prefix tree and its demo."""

from __future__ import annotations

import os

DEFAULT_CASE_FOLD = True

# Prefixes queried by the demo when none are given on the command line
SAMPLE_PREFIXES: tuple[str, ...] = ("l", "lo", "al")

DEFAULT_WORDS_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data", "lorem_ipsum")
