"""Tests for the PrefixSuggester."""

from __future__ import annotations

from pathlib import Path

import pytest

from termcomplete.autocomplete.binary_search import BinarySearchAutocomplete
from termcomplete.autocomplete.suggester import PrefixSuggester, Suggestion
from termcomplete.config.settings import AutocompleteSettings


def _write(path: Path, entries: dict[str, float]) -> None:
    path.write_text(
        "".join(f"{w}\t{t}\n" for t, w in entries.items()), encoding="utf-8"
    )


@pytest.fixture
def vocab_dir(tmp_path: Path) -> Path:
    """Default vocabulary plus a smaller 'cities' vocabulary."""
    d = tmp_path / "vocabularies"
    d.mkdir()
    _write(d / "all.txt", {
        "python programming": 100,
        "pytorch tutorial": 80,
        "pylint tips": 30,
        "rust ownership": 50,
    })
    _write(d / "cities.txt", {"paris": 60, "prague": 40, "porto": 20})
    return d


@pytest.fixture(params=["trie", "binary"])
def suggester(request, vocab_dir: Path) -> PrefixSuggester:
    ac = AutocompleteSettings(backend=request.param, max_suggestions=5)
    return PrefixSuggester(ac_settings=ac, vocabularies_dir=vocab_dir)


class TestPrefixSuggester:
    def test_basic_suggest(self, suggester: PrefixSuggester):
        results = suggester.suggest("py")
        assert results == [
            Suggestion("python programming", 100.0),
            Suggestion("pytorch tutorial", 80.0),
            Suggestion("pylint tips", 30.0),
        ]

    def test_named_vocabulary(self, suggester: PrefixSuggester):
        results = suggester.suggest("p", vocabulary="cities")
        assert [r.term for r in results] == ["paris", "prague", "porto"]

    def test_fallback_to_default(self, suggester: PrefixSuggester):
        results = suggester.suggest("rust", vocabulary="nonexistent")
        assert [r.term for r in results] == ["rust ownership"]

    def test_no_vocabulary_returns_empty(self, tmp_path: Path):
        s = PrefixSuggester(ac_settings=AutocompleteSettings(), vocabularies_dir=tmp_path)
        assert s.suggest("anything") == []
        assert s.weight_of("anything") == 0.0

    def test_top_k_respected(self, suggester: PrefixSuggester):
        assert len(suggester.suggest("py", top_k=1)) == 1

    def test_default_top_k_from_settings(self, vocab_dir: Path):
        ac = AutocompleteSettings(max_suggestions=2)
        s = PrefixSuggester(ac_settings=ac, vocabularies_dir=vocab_dir)
        assert len(s.suggest("p")) == 2

    def test_weight_of(self, suggester: PrefixSuggester):
        assert suggester.weight_of("porto", vocabulary="cities") == 20.0
        assert suggester.weight_of("porto") == 0.0

    def test_cache_is_used(self, suggester: PrefixSuggester):
        suggester.suggest("py")
        assert suggester.loaded == ["all"]
        assert len(suggester.suggest("py")) == 3

    def test_available(self, suggester: PrefixSuggester):
        assert suggester.available() == ["all", "cities"]

    def test_register_prebuilt_index(self, tmp_path: Path):
        s = PrefixSuggester(ac_settings=AutocompleteSettings(), vocabularies_dir=tmp_path)
        s.register("all", BinarySearchAutocomplete(["air", "bell"], [3, 4]))
        assert [r.term for r in s.suggest("")] == ["bell", "air"]

    def test_invalid_vocabulary_file_raises(self, vocab_dir: Path):
        (vocab_dir / "broken.txt").write_text("3\tair\n3\tair\n", encoding="utf-8")
        s = PrefixSuggester(ac_settings=AutocompleteSettings(), vocabularies_dir=vocab_dir)
        with pytest.raises(ValueError, match="duplicates"):
            s.suggest("a", vocabulary="broken")


class TestVocabularyLabels:
    """Labels must name a file inside the vocabularies directory."""

    @pytest.fixture
    def outside_file(self, vocab_dir: Path) -> Path:
        path = vocab_dir.parent / "secret.txt"
        _write(path, {"secretword": 9})
        return path

    @pytest.mark.parametrize("label", ["../secret", "..", "sub/../../secret", "/etc/passwd", "a.b"])
    def test_path_like_label_falls_back_to_default(self, suggester, outside_file, label):
        results = suggester.suggest("s", vocabulary=label)
        assert "secretword" not in [r.term for r in results]
        assert suggester.weight_of("secretword", vocabulary=label) == 0.0
        assert label not in suggester.loaded

    def test_path_like_label_without_default_returns_empty(self, vocab_dir: Path, outside_file):
        (vocab_dir / "all.txt").unlink()
        s = PrefixSuggester(ac_settings=AutocompleteSettings(), vocabularies_dir=vocab_dir)
        assert s.suggest("s", vocabulary="../secret") == []

    def test_plain_labels_with_dash_and_underscore(self, vocab_dir: Path):
        _write(vocab_dir / "en_us-2024.txt", {"sunset": 5})
        s = PrefixSuggester(ac_settings=AutocompleteSettings(), vocabularies_dir=vocab_dir)
        assert [r.term for r in s.suggest("s", vocabulary="en_us-2024")] == ["sunset"]

    def test_available_skips_unusable_names(self, vocab_dir: Path):
        _write(vocab_dir / "v1.2.txt", {"x": 1})
        s = PrefixSuggester(ac_settings=AutocompleteSettings(), vocabularies_dir=vocab_dir)
        assert s.available() == ["all", "cities"]
