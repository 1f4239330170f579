"""A weighted multiset mapping keys to float counts."""

import logging
import math
from collections.abc import (
    Callable,
    ItemsView,
    Iterable,
    Iterator,
    KeysView,
    Mapping,
    MutableMapping,
)
from typing import Generic, TypeVar, overload

from briefcount.priority_queue import PriorityQueue

logger = logging.getLogger(__name__)

MapFactory = Callable[[], MutableMapping]

T = TypeVar("T")


class EmptyCounterError(LookupError):
    """Raised when an extremum key is requested from an empty Counter."""


# A custom Counter for better extensibility
class Counter(Generic[T]):
    """A map from hashable keys to float counts.

    Keys not in the counter have a count of zero. The counter is backed by a
    `dict` (insertion ordered) unless another mapping is supplied through
    `map_factory`. Iterating a counter yields its keys by decreasing count.
    """

    @overload
    def __init__(self, *, map_factory: MapFactory = dict) -> None: ...

    @overload
    def __init__(
        self, source: "Counter[T] | Iterable[T]", *, map_factory: MapFactory = dict
    ) -> None: ...

    def __init__(
        self,
        source: "Counter[T] | Iterable[T] | None" = None,
        *,
        map_factory: MapFactory = dict,
    ) -> None:
        self.entries: MutableMapping[T, float] = map_factory()
        self._mod_count = 0
        # The cached total is trusted only while it matches _mod_count
        self._cache_mod_count = -1
        self._cache_total = 0.0

        match source:
            case None:
                pass
            case Counter():
                self.increment_all(source)
            case _:
                self.increment_all(source, 1.0)

    def get_count(self, key: T) -> float:
        "The count of elements not in the Counter is zero."
        return self.entries.get(key, 0.0)

    def set_count(self, key: T, count: float) -> None:
        """Set the count for the given key, clobbering any previous count."""
        self._mod_count += 1
        self.entries[key] = float(count)

    def increment_count(self, key: T, increment: float = 1.0) -> None:
        self.set_count(key, self.get_count(key) + increment)

    @overload
    def increment_all(self, other: "Counter[T] | Mapping[T, float]") -> None: ...

    @overload
    def increment_all(self, other: Iterable[T], increment: float = 1.0) -> None: ...

    def increment_all(self, other, increment: float = 1.0) -> None:
        """Add the counts of another Counter (or mapping) into this one, or
        increment every key of an iterable by `increment`.

        Zero counts in `other` still create the key here. Duplicated keys in
        an iterable accumulate, and a string counts its characters.

        `increment` only applies to iterables of keys; passing another value
        along with a Counter or mapping raises TypeError."""
        if increment != 1.0 and isinstance(other, Counter | Mapping):
            raise TypeError(
                f"increment={increment} cannot be combined with a {type(other).__name__}"
            )
        match other:
            case Counter():
                # Snapshot so that `c.increment_all(c)` is well defined
                for key, count in list(other.entries.items()):
                    self.increment_count(key, count)
            case Mapping():
                for key, count in list(other.items()):
                    self.increment_count(key, count)
            case Iterable():
                for key in other:
                    self.increment_count(key, increment)
            case _:
                raise TypeError(
                    f"Cannot increment a Counter from {type(other).__name__}"
                )

    def remove_key(self, key: T) -> float:
        """Remove a key and return its count, or zero if it was not present.

        Removing an absent key does not invalidate the cached total."""
        if key not in self.entries:
            return 0.0
        self._mod_count += 1
        return self.entries.pop(key)

    def contains_key(self, key: T) -> bool:
        """Whether the key is present. This is the way to tell a key stored
        with count zero apart from a missing one."""
        return key in self.entries

    def key_set(self) -> KeysView[T]:
        """The keys in the counter, in backing-mapping order.

        Use iteration over the counter itself for keys ordered by count."""
        return self.entries.keys()

    def items(self) -> ItemsView[T, float]:
        return self.entries.items()

    def size(self) -> int:
        """The number of entries (not the total count, see `total_count`)."""
        return len(self.entries)

    def is_empty(self) -> bool:
        """True if there are no entries. False does not imply a positive total."""
        return self.size() == 0

    def clear(self) -> None:
        self._mod_count = 0
        self._cache_mod_count = -1
        self._cache_total = 0.0
        self.entries.clear()

    def total_count(self) -> float:
        """The sum of all counts, recomputed only after a mutation."""
        if self._cache_mod_count != self._mod_count:
            self._cache_total = sum(self.entries.values(), 0.0)
            self._cache_mod_count = self._mod_count
        return self._cache_total

    def normalize(self) -> None:
        """Destructively scale the counts in place so that they sum to one.

        Raises ZeroDivisionError when a non-empty counter totals exactly zero.
        """
        total = self.total_count()
        if self.is_empty():
            return
        if total == 0.0:
            raise ZeroDivisionError(
                f"Cannot normalize a Counter of {self.size()} keys whose total is zero"
            )
        if not math.isfinite(total):
            logger.warning(f"Normalizing a Counter with non-finite total {total}")
        for key in list(self.entries):
            self.set_count(key, self.get_count(key) / total)

    def arg_max(self) -> T:
        """A key with maximum count. Linear in size, ties broken arbitrarily."""
        if self.is_empty():
            raise EmptyCounterError("arg_max() of an empty Counter")
        return max(self.entries.items(), key=lambda entry: entry[1])[0]

    def max(self) -> float:
        """The maximum count, or -inf for an empty counter."""
        return max(self.entries.values(), default=-math.inf)

    def arg_min(self) -> T:
        """A key with minimum count. Linear in size, ties broken arbitrarily."""
        if self.is_empty():
            raise EmptyCounterError("arg_min() of an empty Counter")
        return min(self.entries.items(), key=lambda entry: entry[1])[0]

    def min(self) -> float:
        """The minimum count, or +inf for an empty counter."""
        return min(self.entries.values(), default=math.inf)

    def as_priority_queue(self) -> PriorityQueue[T]:
        """A fresh queue of the keys, prioritized by their counts."""
        pq = PriorityQueue[T]()
        for key, count in self.entries.items():
            pq.add(key, count)
        return pq

    def to_string(self, max_keys_to_print: int | None = None) -> str:
        """At most `max_keys_to_print` entries, by decreasing count."""
        if max_keys_to_print is None:
            max_keys_to_print = self.size()
        return self.as_priority_queue().to_string(max_keys_to_print)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({dict(self.entries)!r})"

    def __iter__(self) -> Iterator[T]:
        return self.as_priority_queue()

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __getitem__(self, key: T) -> float:
        return self.get_count(key)

    def __setitem__(self, key: T, count: float) -> None:
        self.set_count(key, count)

    def __iadd__(self, other: "Counter[T] | Mapping[T, float]") -> "Counter[T]":
        self.increment_all(other)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Counter):
            return NotImplemented
        return dict(self.entries) == dict(other.entries)

    __hash__ = None  # type: ignore[assignment]
