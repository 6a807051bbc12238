"""
Central configuration for termcomplete.

All tunables live here. Nothing is hardcoded in module code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path


def _project_root() -> Path:
    """Walk up from this file to find the project root (where pyproject.toml lives)."""
    current = Path(__file__).resolve().parent
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    return Path(__file__).resolve().parent.parent.parent


@dataclass(frozen=True)
class AutocompleteSettings:
    """Settings for building and querying autocomplete indexes."""

    # Index implementation: "trie" or "binary"
    backend: str = "trie"

    # Suggestions returned when the caller gives no k
    max_suggestions: int = 10

    # Vocabulary label used when none is requested or the requested one is missing
    default_vocabulary: str = "all"

    # File suffix of vocabulary files under data/vocabularies/
    vocabulary_suffix: str = ".txt"


@dataclass(frozen=True)
class ApiSettings:
    """Settings for the HTTP front end."""

    title: str = "termcomplete API"
    version: str = "0.1.0"

    # Maximum prefix length accepted by /autocomplete (characters)
    max_query_length: int = 200

    # Upper bound on top_k per request
    max_top_k: int = 50


@dataclass
class Settings:
    """
    Top-level settings container.

    Usage:
        settings = get_settings()
        print(settings.autocomplete.backend)
    """

    project_root: Path = field(default_factory=_project_root)
    autocomplete: AutocompleteSettings = field(default_factory=AutocompleteSettings)
    api: ApiSettings = field(default_factory=ApiSettings)

    @property
    def data_dir(self) -> Path:
        """Root directory for runtime data (vocabularies, logs)."""
        return self.project_root / "data"

    @property
    def vocabularies_dir(self) -> Path:
        """Directory scanned for ``<label>.txt`` vocabulary files."""
        return self.data_dir / "vocabularies"

    @property
    def logs_dir(self) -> Path:
        return self.data_dir / "logs"

    def ensure_dirs(self) -> None:
        """Create all required data directories if they don't exist."""
        self.vocabularies_dir.mkdir(parents=True, exist_ok=True)
        self.logs_dir.mkdir(parents=True, exist_ok=True)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return the shared Settings instance.

    Call this instead of constructing Settings() directly so the entire
    application shares one config object.
    """
    settings = Settings()
    settings.ensure_dirs()
    return settings
