"""Alphabet and word-list settings."""

from __future__ import annotations

import os
import string

NUM_LETTERS = 26
ALPHABET = string.ascii_lowercase

# Default word list, one lowercase word per line
DICT_PATH = "words_alpha.txt"

DICT_SEARCH_PATHS: list[str] = [
    DICT_PATH,
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", DICT_PATH),
]
