"""
The autocompletion contract shared by every index implementation.

Callers depend on ``Autocompletor`` and never on a concrete index, so the
binary-search and trie backends can be swapped freely.
"""

from __future__ import annotations

import math
from typing import Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class Autocompletor(Protocol):
    """Weighted prefix autocompletion over a fixed vocabulary."""

    def top_matches(self, prefix: str, k: int) -> list[str]:
        """Up to *k* words starting with *prefix*, heaviest first."""
        ...

    def top_match(self, prefix: str) -> str:
        """The heaviest word starting with *prefix*, or ``""``."""
        ...

    def weight_of(self, term: str) -> float:
        """Weight of *term*, or 0.0 when it is not in the vocabulary."""
        ...


def validate_vocabulary(
    terms: Optional[Sequence[str]],
    weights: Optional[Sequence[float]],
) -> tuple[list[str], list[float]]:
    """
    Check a bulk-load vocabulary and return it as two lists.

    Raises ``TypeError`` for missing arguments and ``ValueError`` for
    mismatched lengths, duplicate or empty words and negative weights.
    Nothing is built until every entry has passed.
    """
    if terms is None or weights is None:
        raise TypeError("One or more arguments None")

    terms = list(terms)
    weights = [float(w) for w in weights]

    if len(terms) != len(weights):
        raise ValueError(
            f"terms and weights have different lengths ({len(terms)} != {len(weights)})"
        )
    if any(t is None for t in terms):
        raise TypeError("terms contain None")
    if any(t == "" for t in terms):
        raise ValueError("some terms are empty")
    if len(set(terms)) != len(terms):
        raise ValueError("some terms are duplicates")
    for w in weights:
        if math.isnan(w) or w < 0:
            raise ValueError(f"some weights are negative: {w}")

    return terms, weights


def check_query(prefix: Optional[str], k: int = 0) -> None:
    """Validate the arguments of a prefix query."""
    if k < 0:
        raise ValueError(f"Illegal value of k: {k}")
    if prefix is None:
        raise TypeError("prefix is None")
