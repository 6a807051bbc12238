"""
Prefix trie for weighted autocomplete.

Each node caches the heaviest weight found anywhere in its subtree. A
prefix query runs a best-first search over the subtree under the prefix,
always expanding the node with the largest cached maximum, and stops as
soon as no unexplored subtree can beat the k words already collected.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from dataclasses import dataclass, field
from operator import attrgetter
from typing import Optional, Sequence

from termcomplete.autocomplete.base import check_query, validate_vocabulary
from termcomplete.autocomplete.ranking import TopK

logger = logging.getLogger(__name__)


@dataclass
class TrieNode:
    """Single node in the trie."""

    character: str = ""
    children: dict[str, "TrieNode"] = field(default_factory=dict)
    is_word: bool = False
    word: str = ""
    weight: float = 0.0
    subtree_max_weight: float = 0.0

    def refresh_subtree_max(self) -> None:
        """Recompute the cached maximum from this node and its children."""
        best = self.weight if self.is_word else 0.0
        for child in self.children.values():
            if child.subtree_max_weight > best:
                best = child.subtree_max_weight
        self.subtree_max_weight = best


class TrieAutocomplete:
    """Autocompletor backed by a character trie with subtree maxima."""

    def __init__(
        self,
        terms: Optional[Sequence[str]],
        weights: Optional[Sequence[float]],
    ) -> None:
        words, values = validate_vocabulary(terms, weights)
        self._root = TrieNode()
        self._size = 0
        self._node_count = 1
        for word, weight in zip(words, values):
            self.add(word, weight)
        logger.debug(
            "Built trie index: %d terms, %d nodes", self._size, self._node_count
        )

    @property
    def size(self) -> int:
        """Number of distinct words stored."""
        return self._size

    @property
    def node_count(self) -> int:
        """Number of nodes, root included."""
        return self._node_count

    def add(self, word: str, weight: float) -> None:
        """
        Insert *word* with *weight*.

        Re-adding an existing word overwrites its weight without creating
        nodes. Every node on the path has its subtree maximum recomputed,
        so lowering a weight is reflected as well as raising one.
        """
        if word is None:
            raise TypeError("word is None")
        if word == "":
            raise ValueError("word is empty")
        if math.isnan(weight) or weight < 0:
            raise ValueError(f"illegal weight: {weight}")

        path = [self._root]
        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = TrieNode(character=ch)
                node.children[ch] = child
                self._node_count += 1
            node = child
            path.append(node)

        if not node.is_word:
            self._size += 1
        node.is_word = True
        node.word = word
        node.weight = float(weight)

        for visited in reversed(path):
            visited.refresh_subtree_max()

    def _find(self, prefix: str) -> Optional[TrieNode]:
        node = self._root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def top_matches(self, prefix: str, k: int) -> list[str]:
        """
        Return up to *k* words starting with *prefix*, heaviest first.

        Nodes come off the frontier in non-increasing order of subtree
        maximum. Once k words are held and the frontier's best maximum is
        no greater than the lightest of them, the search ends.
        """
        check_query(prefix, k)
        if k == 0:
            return []
        start = self._find(prefix)
        if start is None:
            return []

        top: TopK[TrieNode] = TopK(k, key=attrgetter("weight"))
        tiebreak = itertools.count()
        frontier = [(-start.subtree_max_weight, next(tiebreak), start)]

        while frontier:
            if top.is_full and -frontier[0][0] <= top.min_key:
                break
            _, _, node = heapq.heappop(frontier)
            if node.is_word:
                top.offer(node)
            for child in node.children.values():
                heapq.heappush(
                    frontier, (-child.subtree_max_weight, next(tiebreak), child)
                )

        return [n.word for n in top.drain_descending()]

    def top_match(self, prefix: str) -> str:
        """Return the heaviest word starting with *prefix*, or ``""``."""
        matches = self.top_matches(prefix, 1)
        return matches[0] if matches else ""

    def weight_of(self, term: str) -> float:
        """Return the weight of *term*, or 0.0 if it is not stored."""
        if term is None:
            raise TypeError("term is None")
        node = self._find(term)
        if node is None or not node.is_word:
            return 0.0
        return node.weight
