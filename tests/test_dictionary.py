# test_dictionary.py - SpellChecker construction, loading and queries

import logging

import pytest

from spellcheck.dictionary import SpellChecker, find_dictionary


def test_round_trip():
    words = ["apple", "banana", "cherry", "a"]
    checker = SpellChecker(words)
    for w in words:
        assert checker.is_word(w)
    assert checker.word_count == 4


def test_negative_lookup_includes_prefixes():
    checker = SpellChecker(["apple"])
    assert not checker.is_word("app")
    assert not checker.is_word("apples")
    assert not checker.is_word("pear")


def test_case_insensitive():
    checker = SpellChecker(["Apple"])
    assert checker.is_word("apple")
    assert checker.is_word("APPLE")
    assert checker.is_word("Apple") == checker.is_word("apple")
    assert "ApPlE" in checker


def test_query_results_are_lowercase():
    checker = SpellChecker(["cat", "cats", "car"])
    assert checker.get_one_char_completions("CA") == ["car", "cat"]
    assert checker.get_one_char_corrections("CAR") == ["cat"]


def test_small_dictionary_examples():
    assert SpellChecker(["cat", "cats", "car"]).get_one_char_completions("ca") == ["car", "cat"]
    assert SpellChecker(["cat", "car", "can"]).get_one_char_end_corrections("cas") == ["can", "car", "cat"]
    assert SpellChecker(["cat", "bat", "cot"]).get_one_char_corrections("cat") == ["bat", "cot"]


def test_empty_inputs():
    checker = SpellChecker(["cat"])
    assert checker.get_one_char_corrections("") == []
    assert checker.get_one_char_end_corrections("") == []
    assert not checker.is_word("")
    assert SpellChecker(["cat", ""]).is_word("")


def test_alphabet_guard():
    checker = SpellChecker(["cat"])
    assert checker.is_word("c4t") is False


def test_duplicates_counted_once():
    checker = SpellChecker(["cat", "cat", "CAT"])
    assert checker.word_count == 1
    assert checker.is_word("cat")


def test_out_of_alphabet_words_are_skipped(caplog):
    with caplog.at_level(logging.WARNING, logger="spellcheck"):
        checker = SpellChecker(["don't", "cat", "naïve"])
    assert checker.word_count == 1
    assert not checker.is_word("don't")
    assert "Skipped 2 words" in caplog.text


def test_from_file(tmp_path, caplog):
    path = tmp_path / "words.txt"
    path.write_text("cat\r\nCar\ncan\n", encoding="utf-8")
    with caplog.at_level(logging.INFO, logger="spellcheck"):
        checker = SpellChecker.from_file(str(path))
    assert checker.get_one_char_end_corrections("cas") == ["can", "car", "cat"]
    assert not checker.is_word("")
    assert "Loaded 3 words" in caplog.text


def test_from_file_blank_line_is_a_word(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("cat\n\ndog\n", encoding="utf-8")
    assert SpellChecker.from_file(str(path)).is_word("")


def test_from_file_missing(tmp_path):
    with pytest.raises(OSError):
        SpellChecker.from_file(str(tmp_path / "nope.txt"))


def test_find_dictionary(tmp_path):
    present = tmp_path / "words_alpha.txt"
    present.write_text("a\n", encoding="utf-8")
    missing = tmp_path / "missing.txt"
    assert find_dictionary([str(missing), str(present)]) == str(present)
    with pytest.raises(FileNotFoundError):
        find_dictionary([str(missing)])


def test_from_file_not_utf8(tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes(b"cat\n\xff\xfe\n")
    with pytest.raises(OSError):
        SpellChecker.from_file(str(path))


def test_from_file_splits_on_line_breaks_only(tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes(b"ca\x0ct\rdog\r\nbird\n")
    checker = SpellChecker.from_file(str(path))
    assert checker.word_count == 2
    assert not checker.is_word("ca")
    assert not checker.is_word("t")
    assert checker.is_word("dog")
    assert checker.is_word("bird")
