"""
Sorted-array autocomplete index.

Terms are kept in lexicographic order, so every term sharing a prefix
sits in one contiguous run. Two binary searches find the run; a bounded
min-heap picks the heaviest terms inside it.
"""

from __future__ import annotations

import logging
from functools import cmp_to_key
from operator import attrgetter
from typing import Callable, Optional, Sequence

from termcomplete.autocomplete.base import check_query, validate_vocabulary
from termcomplete.autocomplete.ranking import TopK
from termcomplete.autocomplete.term import PrefixKey, PrefixOrder, Term, lexicographic_order

logger = logging.getLogger(__name__)

Comparator = Callable[[Term, Term | PrefixKey], int]

NOT_FOUND = -1


def first_index_of(terms: Sequence[Term], key: Term | PrefixKey, comparator: Comparator) -> int:
    """
    Index of the first element of *terms* equal to *key* under *comparator*.

    *terms* must be sorted consistently with *comparator*. Makes at most
    ``1 + ceil(log2 n)`` comparator calls. Returns ``NOT_FOUND`` (-1) when
    no element matches.
    """
    low, high = 0, len(terms) - 1
    found = NOT_FOUND
    while low <= high:
        mid = (low + high) // 2
        c = comparator(terms[mid], key)
        if c == 0:
            found = mid
            high = mid - 1
        elif c > 0:
            high = mid - 1
        else:
            low = mid + 1
    return found


def last_index_of(terms: Sequence[Term], key: Term | PrefixKey, comparator: Comparator) -> int:
    """Like ``first_index_of`` but returns the last matching index."""
    low, high = 0, len(terms) - 1
    found = NOT_FOUND
    while low <= high:
        mid = (low + high) // 2
        c = comparator(terms[mid], key)
        if c == 0:
            found = mid
            low = mid + 1
        elif c > 0:
            high = mid - 1
        else:
            low = mid + 1
    return found


class BinarySearchAutocomplete:
    """Autocompletor backed by a lexicographically sorted list of terms."""

    def __init__(
        self,
        terms: Optional[Sequence[str]],
        weights: Optional[Sequence[float]],
    ) -> None:
        words, values = validate_vocabulary(terms, weights)
        self._terms: list[Term] = sorted(
            (Term(w, v) for w, v in zip(words, values)),
            key=cmp_to_key(lexicographic_order),
        )
        logger.debug("Built binary-search index: %d terms", len(self._terms))

    def __len__(self) -> int:
        return len(self._terms)

    @property
    def terms(self) -> tuple[Term, ...]:
        """The sorted terms (read-only view)."""
        return tuple(self._terms)

    def _range(self, prefix: str) -> Optional[tuple[int, int]]:
        """Inclusive index range of terms starting with *prefix*, or None."""
        key = PrefixKey(prefix)
        order = PrefixOrder(len(prefix))
        first = first_index_of(self._terms, key, order)
        if first == NOT_FOUND:
            return None
        return first, last_index_of(self._terms, key, order)

    def top_matches(self, prefix: str, k: int) -> list[str]:
        """
        Return up to *k* words starting with *prefix*, heaviest first.

        Cost is O(m log k) for m matching terms, after two O(log n)
        searches to locate them.
        """
        check_query(prefix, k)
        span = self._range(prefix)
        if span is None or k == 0:
            return []

        first, last = span
        top: TopK[Term] = TopK(k, key=attrgetter("weight"))
        top.extend(self._terms[first : last + 1])
        return [t.word for t in top.drain_descending()]

    def top_match(self, prefix: str) -> str:
        """Return the heaviest word starting with *prefix*, or ``""``."""
        check_query(prefix)
        span = self._range(prefix)
        if span is None:
            return ""

        first, last = span
        best = self._terms[first]
        for term in self._terms[first + 1 : last + 1]:
            if term.weight > best.weight:
                best = term
        return best.word

    def weight_of(self, term: str) -> float:
        """Return the weight of *term*, or 0.0 if it is not stored."""
        if term is None:
            raise TypeError("term is None")
        span = self._range(term)
        if span is None:
            return 0.0
        # The exact word sorts first among the words it prefixes.
        match = self._terms[span[0]]
        return match.weight if match.word == term else 0.0
