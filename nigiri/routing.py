"""Routing queries, journeys and Pareto-optimal result sets."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Generic, Protocol, TypeVar, Union

from nigiri.clasz import all_clasz_allowed
from nigiri.delta import Direction
from nigiri.interval import Interval

MAX_TRANSFERS = 7
MAX_TRAVEL_TIME = timedelta(days=1)


class LocationMatchMode(enum.Enum):
    EXACT = "exact"  # only the given location
    ONLY_CHILDREN = "only_children"  # also its children (tracks)
    EQUIVALENT = "equivalent"  # equivalent locations, children included
    INTERMODAL = "intermodal"  # by coordinate


@dataclass(frozen=True)
class Offset:
    """Time to reach ``target`` using the transport mode ``type``."""

    target: int
    duration: timedelta
    type: int


StartTime = Union[datetime, Interval[datetime]]


@dataclass
class Query:
    start_time: StartTime
    start_match_mode: LocationMatchMode = LocationMatchMode.EXACT
    dest_match_mode: LocationMatchMode = LocationMatchMode.EXACT
    use_start_footpaths: bool = True
    start: list[Offset] = field(default_factory=list)
    destination: list[Offset] = field(default_factory=list)
    max_transfers: int = MAX_TRANSFERS
    min_connection_count: int = 0
    extend_interval_earlier: bool = False
    extend_interval_later: bool = False
    prf_idx: int = 0
    allowed_claszes: int = field(default_factory=all_clasz_allowed)


@dataclass(frozen=True)
class RunEnterExit:
    """A vehicle run used from one stop to another (inclusive)."""

    run: Any
    stop_range: Interval[int]

    @classmethod
    def create(cls, run: Any, a: int, b: int) -> RunEnterExit:
        return cls(run, Interval(min(a, b), max(a, b) + 1))


@dataclass(frozen=True)
class Leg:
    from_: int
    to: int
    dep_time: datetime
    arr_time: datetime
    uses: Any

    @classmethod
    def create(
        cls,
        direction: Direction,
        a: int,
        b: int,
        time_at_a: datetime,
        time_at_b: datetime,
        uses: Any,
    ) -> Leg:
        """Build a leg from search-order endpoints, oriented in travel order."""
        if direction is Direction.FORWARD:
            return cls(a, b, time_at_a, time_at_b, uses)
        return cls(b, a, time_at_b, time_at_a, uses)


@dataclass
class Journey:
    start_time: datetime
    dest_time: datetime
    dest: int
    transfers: int = 0
    legs: list[Leg] = field(default_factory=list)

    def dominates(self, other: Journey) -> bool:
        if self.start_time <= self.dest_time:
            return (
                self.transfers <= other.transfers
                and self.start_time >= other.start_time
                and self.dest_time <= other.dest_time
            )
        return (
            self.transfers <= other.transfers
            and self.start_time <= other.start_time
            and self.dest_time >= other.dest_time
        )

    def travel_time(self) -> timedelta:
        return abs(self.dest_time - self.start_time)

    def add(self, leg: Leg) -> None:
        self.legs.append(leg)


class _Dominating(Protocol):
    def dominates(self, other: Any) -> bool: ...


D = TypeVar("D", bound=_Dominating)


class ParetoSet(Generic[D]):
    """Elements none of which dominates another."""

    def __init__(self) -> None:
        self._els: list[D] = []

    def add(self, el: D) -> tuple[bool, int | None, int | None]:
        """Insert ``el`` unless it is dominated.

        Returns ``(added, index of el, None)`` on success and
        ``(False, None, index of a dominating element)`` otherwise.
        Elements dominated by ``el`` are removed.
        """
        for i, existing in enumerate(self._els):
            if existing.dominates(el):
                return False, None, i
        self._els = [x for x in self._els if not el.dominates(x)]
        self._els.append(el)
        return True, len(self._els) - 1, None

    def clear(self) -> None:
        self._els.clear()

    def remove_if(self, pred: Callable[[D], bool]) -> None:
        self._els = [x for x in self._els if not pred(x)]

    def sort(self, key: Callable[[D], Any]) -> None:
        self._els.sort(key=key)

    def __getitem__(self, i: int) -> D:
        return self._els[i]

    def __iter__(self) -> Iterator[D]:
        return iter(self._els)

    def __len__(self) -> int:
        return len(self._els)