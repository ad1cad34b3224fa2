"""Bucket queue, cached map lookup and sequence helpers."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, MutableMapping, Sequence
from typing import Any, Generic, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_UNSET = object()


class Dial(Generic[T]):
    """Priority queue with integer priorities in ``0..max_bucket``.

    Among elements of the same bucket the most recently pushed comes first.
    """

    def __init__(self, max_bucket: int, get_bucket: Callable[[T], int]) -> None:
        self._max_bucket = max_bucket
        self._get_bucket = get_bucket
        self._buckets: list[list[T]] = [[] for _ in range(max_bucket + 1)]
        self._current = 0
        self._size = 0

    def push(self, el: T) -> None:
        bucket = self._get_bucket(el)
        if not 0 <= bucket <= self._max_bucket:
            raise ValueError(f"bucket {bucket} outside 0..{self._max_bucket}")
        self._buckets[bucket].append(el)
        self._current = min(self._current, bucket)
        self._size += 1

    def _next_bucket(self) -> int:
        if self._size == 0:
            raise IndexError("dial is empty")
        bucket = self._current
        while not self._buckets[bucket]:
            bucket += 1
        return bucket

    def top(self) -> T:
        self._current = self._next_bucket()
        return self._buckets[self._current][-1]

    def pop(self) -> T:
        self._current = self._next_bucket()
        self._size -= 1
        return self._buckets[self._current].pop()

    def __len__(self) -> int:
        return self._size


class CachedLookup(Generic[K, V]):
    """Get-or-create access to a mapping that remembers the last key used."""

    def __init__(
        self,
        mapping: MutableMapping[K, V],
        default_factory: Callable[[], V] | None = None,
    ) -> None:
        self.mapping = mapping
        self._default_factory = default_factory
        self._prev_key: Any = _UNSET

    def __call__(self, key: K, create_fn: Callable[[], V] | None = None) -> V:
        if self._prev_key is _UNSET or self._prev_key != key:
            if key not in self.mapping:
                factory = create_fn or self._default_factory
                if factory is None:
                    raise KeyError(key)
                self.mapping[key] = factory()
            self._prev_key = key
        return self.mapping[key]


def linear_lb(items: Iterable[T], key: Any, cmp: Callable[[T, Any], bool]) -> int:
    """Index of the first item for which ``cmp(item, key)`` is false.

    Scans from the front; returns the number of items if there is none.
    """
    count = 0
    for i, item in enumerate(items):
        if not cmp(item, key):
            return i
        count = i + 1
    return count


def sort_by(order: Sequence[Any], *args: Sequence[Any]) -> tuple[list[Any], ...]:
    """Sort ``order`` and reorder every sequence in ``args`` the same way."""
    permutation = sorted(range(len(order)), key=order.__getitem__)
    return tuple(
        [seq[i] for i in permutation] for seq in (order, *args)
    )