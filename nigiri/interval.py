"""Half-open intervals ``[start, end[``."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, order=True)
class Interval(Generic[T]):
    """Half-open interval from ``start`` (inclusive) to ``end`` (exclusive)."""

    start: T
    end: T

    def contains(self, t: T) -> bool:
        return self.start <= t < self.end  # type: ignore[operator]

    def overlaps(self, other: Interval[T]) -> bool:
        return self.start < other.end and self.end > other.start  # type: ignore[operator]

    def clamp(self, x: T) -> T:
        """Limit ``x`` to ``[start, end]`` (both bounds inclusive)."""
        return min(max(x, self.start), self.end)  # type: ignore[type-var]

    def size(self) -> Any:
        return self.end - self.start  # type: ignore[operator]

    def shift(self, x: Any) -> Interval[T]:
        """Return the interval moved by ``x`` (may be negative)."""
        return Interval(self.start + x, self.end + x)  # type: ignore[operator]

    def __iter__(self) -> Iterator[T]:
        t = self.start
        while t < self.end:  # type: ignore[operator]
            yield t
            t = t + 1  # type: ignore[operator]

    def __reversed__(self) -> Iterator[T]:
        t = self.end
        while t > self.start:  # type: ignore[operator]
            t = t - 1  # type: ignore[operator]
            yield t

    def __getitem__(self, i: int) -> T:
        value = self.start + i  # type: ignore[operator]
        if i < 0 or not self.contains(value):
            raise IndexError(f"index {i} out of {self}")
        return value

    def __len__(self) -> int:
        return max(0, int(self.size()))

    def __str__(self) -> str:
        return f"[{self.start}, {self.end}["


def slice_by_interval(seq: Sequence[Any], interval: Interval[int]) -> Sequence[Any]:
    """Return the part of ``seq`` whose indices lie in ``interval``."""
    return seq[interval.start : interval.end]