"""Command-line front end: check / complete / correct a single word."""

from __future__ import annotations

import argparse
import logging
import sys

from spellcheck.dictionary import SpellChecker, find_dictionary

log = logging.getLogger("spellcheck")

COMMANDS = ("check", "complete", "correct")


class _ArgumentParser(argparse.ArgumentParser):
    """argparse exits with status 2 on bad usage; this tool uses 1."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> _ArgumentParser:
    parser = _ArgumentParser(
        prog="spellcheck",
        description="Check a word against the dictionary or suggest one-letter fixes",
        add_help=False,
    )
    parser.add_argument("command", help=f"one of: {', '.join(COMMANDS)}")
    parser.add_argument("word", help="word to look up")
    return parser


def run_command(checker: SpellChecker, command: str, word: str) -> int:
    """Run one command and print its result. Returns the exit status."""
    if command == "check":
        print("correct" if checker.is_word(word) else "incorrect")
    elif command == "complete":
        for completion in checker.get_one_char_completions(word):
            print(completion)
    elif command == "correct":
        for correction in checker.get_one_char_corrections(word):
            print(correction)
    else:
        print(f"Unknown command: {command}", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if argv is None:
        argv = sys.argv[1:]
    # words may start with "-"; never read them as options
    args = build_parser().parse_args(["--", *argv])

    if args.command not in COMMANDS:
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return 1

    try:
        checker = SpellChecker.from_file(find_dictionary())
    except OSError as exc:
        log.error("Could not load dictionary: %s", exc)
        return 1

    return run_command(checker, args.command, args.word)
