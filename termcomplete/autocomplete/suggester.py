"""
Prefix suggester — thin wrapper around vocabulary-backed indexes.

Loads a named vocabulary (or the default one) from the data directory,
builds the configured index once, and answers ranked prefix queries.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from termcomplete.autocomplete.backends import create_autocompletor
from termcomplete.autocomplete.base import Autocompletor
from termcomplete.autocomplete.loader import read_vocabulary
from termcomplete.config.settings import AutocompleteSettings, Settings, get_settings

logger = logging.getLogger(__name__)

# Labels name a file directly inside the vocabularies directory
_LABEL_RE = re.compile(r"[\w-]+")


@dataclass
class Suggestion:
    """A single autocomplete suggestion."""

    term: str
    score: float


class PrefixSuggester:
    """Load vocabularies and query their autocomplete indexes."""

    def __init__(
        self,
        ac_settings: Optional[AutocompleteSettings] = None,
        vocabularies_dir: Optional[Path] = None,
    ) -> None:
        settings: Settings = get_settings()
        self._ac = ac_settings or settings.autocomplete
        self._vocab_dir = vocabularies_dir or settings.vocabularies_dir
        self._cache: dict[str, Autocompletor] = {}

    @property
    def backend(self) -> str:
        return self._ac.backend

    @property
    def loaded(self) -> list[str]:
        """Labels of vocabularies already built."""
        return sorted(self._cache)

    def available(self) -> list[str]:
        """Labels of vocabulary files present on disk."""
        if not self._vocab_dir.is_dir():
            return []
        suffix = self._ac.vocabulary_suffix
        labels = (p.name[: -len(suffix)] for p in self._vocab_dir.glob(f"*{suffix}"))
        return sorted(label for label in labels if _LABEL_RE.fullmatch(label))

    def register(self, label: str, index: Autocompletor) -> None:
        """Serve an already-built index under *label*."""
        self._cache[label] = index

    def suggest(
        self,
        prefix: str,
        vocabulary: Optional[str] = None,
        top_k: Optional[int] = None,
    ) -> list[Suggestion]:
        """
        Return up to *top_k* suggestions starting with *prefix*.

        Uses the named vocabulary if it exists, otherwise falls back to
        the default vocabulary. No vocabulary at all yields no suggestions.
        """
        top_k = self._ac.max_suggestions if top_k is None else top_k
        index = self._resolve(vocabulary)
        if index is None:
            return []
        return [
            Suggestion(term=word, score=index.weight_of(word))
            for word in index.top_matches(prefix, top_k)
        ]

    def weight_of(self, term: str, vocabulary: Optional[str] = None) -> float:
        """Weight of *term* in the resolved vocabulary, 0.0 when unknown."""
        index = self._resolve(vocabulary)
        if index is None:
            return 0.0
        return index.weight_of(term)

    def _resolve(self, vocabulary: Optional[str]) -> Optional[Autocompletor]:
        default = self._ac.default_vocabulary
        label = vocabulary.strip() if vocabulary else default
        index = self._load(label)
        if index is None and label != default:
            index = self._load(default)
        return index

    def _load(self, label: str) -> Optional[Autocompletor]:
        if label in self._cache:
            return self._cache[label]
        if not _LABEL_RE.fullmatch(label):
            logger.warning("Rejected vocabulary label %r", label)
            return None

        path = self._vocab_dir / f"{label}{self._ac.vocabulary_suffix}"
        if not path.exists():
            return None

        words, weights = read_vocabulary(path)
        index = create_autocompletor(words, weights, backend=self._ac.backend)
        self._cache[label] = index
        logger.info(
            "Loaded vocabulary '%s' (%d terms, %s backend)", label, len(words), self._ac.backend
        )
        return index
