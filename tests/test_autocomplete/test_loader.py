"""Tests for the vocabulary file reader."""

from __future__ import annotations

from pathlib import Path

import pytest

from termcomplete.autocomplete.loader import parse_vocabulary, read_vocabulary


class TestParseVocabulary:
    def test_basic(self):
        words, weights = parse_vocabulary(["3\tair", "2\tbat"])
        assert words == ["air", "bat"]
        assert weights == [3.0, 2.0]

    def test_count_line_skipped(self):
        words, _ = parse_vocabulary(["2", "3\tair", "2\tbat"])
        assert words == ["air", "bat"]

    def test_blank_and_comment_lines(self):
        words, _ = parse_vocabulary(["# cities", "", "  5.5\tnew york  ", "\n"])
        assert words == ["new york"]

    def test_words_keep_inner_whitespace(self):
        words, weights = parse_vocabulary(["1000\tthe quick fox"])
        assert words == ["the quick fox"]
        assert weights == [1000.0]

    def test_missing_tab(self):
        with pytest.raises(ValueError, match="vocab.txt:1"):
            parse_vocabulary(["3 air"], source="vocab.txt")

    def test_bad_weight(self):
        with pytest.raises(ValueError, match="bad weight"):
            parse_vocabulary(["x\tair"])

    def test_second_count_line_is_an_error(self):
        with pytest.raises(ValueError):
            parse_vocabulary(["2", "3"])


class TestReadVocabulary:
    def test_reads_file(self, vocab_file: Path):
        words, weights = read_vocabulary(vocab_file)
        assert words == ["air", "bat", "bell", "boy"]
        assert weights == [3.0, 2.0, 4.0, 1.0]

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            read_vocabulary(tmp_path / "nope.txt")
