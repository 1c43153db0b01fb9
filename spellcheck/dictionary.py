"""Spell checker backed by a prefix trie."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from spellcheck.constants import DICT_SEARCH_PATHS
from spellcheck.trie import Trie

log = logging.getLogger("spellcheck")


def find_dictionary(search_paths: Iterable[str] = DICT_SEARCH_PATHS) -> str:
    """First existing word list in ``search_paths``."""
    tried: list[str] = []
    for path in search_paths:
        if os.path.exists(path):
            return path
        tried.append(path)
    raise FileNotFoundError(f"No word list found (tried: {', '.join(tried)})")


class SpellChecker:
    """Word list held in a trie, queried case-insensitively."""

    def __init__(self, words: Iterable[str]):
        self.trie = Trie()
        self.word_count = 0
        skipped = 0
        for word in words:
            word = word.lower()
            if self.trie.is_word(word):
                continue
            if self.trie.insert(word):
                self.word_count += 1
            else:
                skipped += 1
                log.debug("Skipping %r: not a-z only", word)
        if skipped:
            log.warning("Skipped %d words with characters outside a-z", skipped)

    @classmethod
    def from_file(cls, path: str) -> SpellChecker:
        """Build from a word list with one word per line.

        Lines end only at LF, CR or CRLF. Raises OSError if the file is
        missing, unreadable or not valid UTF-8.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                lines = [line.rstrip("\n") for line in f]
        except UnicodeDecodeError as exc:
            raise OSError(f"{path} is not valid UTF-8: {exc}") from exc
        checker = cls(lines)
        log.info("Loaded %s words from %s", f"{checker.word_count:,}", path)
        return checker

    def is_word(self, word: str) -> bool:
        return self.trie.is_word(word.lower())

    def get_one_char_completions(self, word: str) -> list[str]:
        return self.trie.one_char_completions(word.lower())

    def get_one_char_end_corrections(self, word: str) -> list[str]:
        return self.trie.one_char_end_corrections(word.lower())

    def get_one_char_corrections(self, word: str) -> list[str]:
        return self.trie.one_char_corrections(word.lower())

    def __contains__(self, word: str) -> bool:
        return self.is_word(word)
