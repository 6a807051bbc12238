"""Select an autocomplete index implementation by name."""

from __future__ import annotations

from typing import Optional, Sequence

from termcomplete.autocomplete.base import Autocompletor
from termcomplete.autocomplete.binary_search import BinarySearchAutocomplete
from termcomplete.autocomplete.trie import TrieAutocomplete

BACKENDS = {
    "binary": BinarySearchAutocomplete,
    "trie": TrieAutocomplete,
}


def create_autocompletor(
    terms: Optional[Sequence[str]],
    weights: Optional[Sequence[float]],
    backend: str = "trie",
) -> Autocompletor:
    """Build the index named *backend* over the given vocabulary."""
    try:
        cls = BACKENDS[backend]
    except KeyError:
        raise ValueError(
            f"Unknown backend {backend!r}; choose from {sorted(BACKENDS)}"
        ) from None
    return cls(terms, weights)
