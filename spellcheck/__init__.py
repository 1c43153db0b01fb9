"""Trie-backed spell checker."""

from spellcheck.constants import ALPHABET, DICT_PATH, NUM_LETTERS
from spellcheck.trie import Trie, TrieNode
from spellcheck.dictionary import SpellChecker, find_dictionary

__all__ = [
    "ALPHABET",
    "DICT_PATH",
    "NUM_LETTERS",
    "SpellChecker",
    "Trie",
    "TrieNode",
    "find_dictionary",
]
