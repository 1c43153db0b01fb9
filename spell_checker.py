#!/usr/bin/env python3
"""
Spell Checker

Looks a word up in a trie built from words_alpha.txt and prints whether
it is spelled correctly, its one-letter completions, or its one-letter
corrections.

Usage: python spell_checker.py <check|complete|correct> <word>
"""

import sys

from spellcheck.cli import main

if __name__ == "__main__":
    sys.exit(main())
