"""Prefix trie over a-z with single-edit lookups."""

from __future__ import annotations

from spellcheck.constants import ALPHABET, NUM_LETTERS


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal")

    def __init__(self):
        self.children: list[TrieNode | None] = [None] * NUM_LETTERS
        self.is_terminal: bool = False


class Trie:
    """Prefix trie keyed by lowercase ASCII letters.

    All methods expect already-normalized (lowercased) input. Characters
    outside a-z are never stored; during a walk they behave like a
    missing child.
    """

    def __init__(self):
        self.root = TrieNode()

    @staticmethod
    def letter_index(ch: str) -> int | None:
        idx = ord(ch) - ord("a")
        if 0 <= idx < NUM_LETTERS:
            return idx
        return None

    def insert(self, word: str) -> bool:
        """Add ``word``. Returns False (and changes nothing) if it has a
        character outside a-z."""
        indices = [self.letter_index(ch) for ch in word]
        if None in indices:
            return False

        node = self.root
        for idx in indices:
            if node.children[idx] is None:
                node.children[idx] = TrieNode()
            node = node.children[idx]
        node.is_terminal = True
        return True

    def is_word(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_terminal

    # single-edit queries

    def one_char_completions(self, word: str) -> list[str]:
        """Words formed by appending exactly one letter to ``word``."""
        node = self._walk(word)
        if node is None:
            return []
        return [word + letter for letter in self._terminal_letters(node)]

    def one_char_end_corrections(self, word: str) -> list[str]:
        """Words formed by replacing the last letter of ``word``.

        The replacement may equal the original letter, so ``word`` itself
        shows up when it is valid.
        """
        if not word:
            return []
        prefix = word[:-1]
        node = self._walk(prefix)
        if node is None:
            return []
        return [prefix + letter for letter in self._terminal_letters(node)]

    def one_char_corrections(self, word: str) -> list[str]:
        """Words differing from ``word`` in exactly one position.

        Ordered by position, then by replacement letter. Not deduplicated.
        """
        results: list[str] = []
        node: TrieNode | None = self.root
        for pos, original in enumerate(word):
            # node spells word[:pos]; once that path breaks no later
            # position can match either
            if node is None:
                break
            suffix = word[pos + 1:]
            for idx, letter in enumerate(ALPHABET):
                if letter == original:
                    continue
                child = node.children[idx]
                if child is None:
                    continue
                end = self._walk(suffix, child)
                if end is not None and end.is_terminal:
                    results.append(word[:pos] + letter + suffix)
            node = self._child(node, original)
        return results

    # traversal helpers

    def _child(self, node: TrieNode, ch: str) -> TrieNode | None:
        idx = self.letter_index(ch)
        if idx is None:
            return None
        return node.children[idx]

    def _walk(self, s: str, start: TrieNode | None = None) -> TrieNode | None:
        node = self.root if start is None else start
        for ch in s:
            node = self._child(node, ch)
            if node is None:
                return None
        return node

    @staticmethod
    def _terminal_letters(node: TrieNode) -> list[str]:
        return [
            ALPHABET[idx]
            for idx, child in enumerate(node.children)
            if child is not None and child.is_terminal
        ]
