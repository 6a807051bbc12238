"""
Vocabulary terms and the orderings used to search and rank them.

A ``Term`` is an immutable ``(word, weight)`` pair with a non-empty word.
A ``PrefixKey`` carries only the text being searched for, which may be
empty, and stands in for a term when searching a sorted list. Orderings are
plain comparators ``(a, b) -> int`` so they can drive both the binary searches
and ``functools.cmp_to_key`` sorts.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Term:
    """A single vocabulary entry."""

    word: str
    weight: float

    def __post_init__(self) -> None:
        if self.word is None:
            raise TypeError("word is required")
        if self.word == "":
            raise ValueError("word is empty")
        if self.weight is None:
            raise TypeError("weight is required")
        if math.isnan(self.weight) or self.weight < 0:
            raise ValueError(f"illegal weight: {self.weight}")


@dataclass(frozen=True)
class PrefixKey:
    """Search key for the prefix orderings; compared on ``word`` alone."""

    word: str

    def __post_init__(self) -> None:
        if self.word is None:
            raise TypeError("prefix is None")


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def weight_order(a: Term, b: Term) -> int:
    """Ascending by weight; the lightest term comes first."""
    return _cmp(a.weight, b.weight)


def reverse_weight_order(a: Term, b: Term) -> int:
    """Descending by weight; the heaviest term comes first."""
    return _cmp(b.weight, a.weight)


def lexicographic_order(a: Term, b: Term) -> int:
    """Ascending by word."""
    return _cmp(a.word, b.word)


class PrefixOrder:
    """
    Compare terms on their first ``r`` characters only.

    A word shorter than ``r`` is compared by its whole text, so it sorts
    before every word it is a prefix of and never equals an ``r``-long key.
    Truncation preserves lexicographic order, which keeps all terms equal
    to a key contiguous in a lexicographically sorted list.
    """

    def __init__(self, r: int) -> None:
        if r < 0:
            raise ValueError(f"illegal prefix length: {r}")
        self.r = r

    def __call__(self, a: Term | PrefixKey, b: Term | PrefixKey) -> int:
        return _cmp(a.word[: self.r], b.word[: self.r])

    def __repr__(self) -> str:
        return f"PrefixOrder(r={self.r})"
