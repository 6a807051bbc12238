"""Bounded top-k selection shared by both index implementations."""

from __future__ import annotations

import heapq
import itertools
from collections import deque
from typing import Callable, Generic, Iterable, TypeVar

T = TypeVar("T")


class TopK(Generic[T]):
    """
    Min-heap holding at most ``capacity`` items ranked by ``key``.

    Offering an item beyond capacity evicts the current minimum, so the
    heap always holds the heaviest items seen so far. Among items with
    equal keys the earliest offered is kept and drained first.
    """

    def __init__(self, capacity: int, key: Callable[[T], float]) -> None:
        if capacity < 0:
            raise ValueError(f"Illegal value of k: {capacity}")
        self._capacity = capacity
        self._key = key
        self._heap: list[tuple[float, int, T]] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    @property
    def is_full(self) -> bool:
        return len(self._heap) >= self._capacity

    @property
    def min_key(self) -> float:
        """Key of the lightest item held. Raises IndexError when empty."""
        return self._heap[0][0]

    def offer(self, item: T) -> None:
        heapq.heappush(self._heap, (self._key(item), -next(self._counter), item))
        if len(self._heap) > self._capacity:
            heapq.heappop(self._heap)

    def extend(self, items: Iterable[T]) -> None:
        for item in items:
            self.offer(item)

    def drain_descending(self) -> list[T]:
        """Empty the heap, returning items heaviest first."""
        out: deque[T] = deque()
        while self._heap:
            out.appendleft(heapq.heappop(self._heap)[2])
        return list(out)
