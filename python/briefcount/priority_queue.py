"""A max priority queue used to order Counter keys by their counts."""

import heapq
import itertools
from typing import Generic, NamedTuple, TypeVar

T = TypeVar("T")


class _Entry(NamedTuple, Generic[T]):
    # heapq is a min-heap, so priorities are stored negated
    neg_priority: float
    # Insertion sequence breaks ties, keys themselves are never compared
    seq: int
    key: T


class PriorityQueue(Generic[T]):
    """A queue of keys drained by decreasing priority.

    The queue is its own iterator: iterating removes keys, so a drained queue
    has to be rebuilt to iterate again. Keys of equal priority come out in the
    order they were added.
    """

    def __init__(self) -> None:
        self._heap: list[_Entry[T]] = []
        self._seq = itertools.count()

    def add(self, key: T, priority: float) -> None:
        heapq.heappush(self._heap, _Entry(-priority, next(self._seq), key))

    def peek(self) -> T:
        """The key with the highest priority, without removing it."""
        return self._top().key

    def get_priority(self) -> float:
        """The priority of the key `peek` would return."""
        return -self._top().neg_priority

    def next(self) -> T:
        """Remove and return the key with the highest priority."""
        if not self._heap:
            raise IndexError("next() from an empty PriorityQueue")
        return heapq.heappop(self._heap).key

    def has_next(self) -> bool:
        return bool(self._heap)

    def size(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def _top(self) -> _Entry[T]:
        if not self._heap:
            raise IndexError("PriorityQueue is empty")
        return self._heap[0]

    def to_string(self, max_keys_to_print: int | None = None) -> str:
        """Render at most `max_keys_to_print` keys with their priorities.

        The format is `[key1 : priority1, key2 : priority2, ...]`; a trailing
        `...` marks keys left out. The queue itself is not drained."""
        if max_keys_to_print is None:
            max_keys_to_print = self.size()
        top = heapq.nsmallest(max(max_keys_to_print, 0), self._heap)
        parts = [f"{entry.key} : {-entry.neg_priority}" for entry in top]
        if len(top) < self.size():
            parts.append("...")
        return "[" + ", ".join(parts) + "]"

    def __str__(self) -> str:
        return self.to_string()

    def __iter__(self) -> "PriorityQueue[T]":
        return self

    def __next__(self) -> T:
        if not self._heap:
            raise StopIteration
        return heapq.heappop(self._heap).key

    def __len__(self) -> int:
        return self.size()
