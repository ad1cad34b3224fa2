"""Find where a service fits into a route's time-ordered service list."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from typing import Any

_MINUTES_PER_DAY = 1440


def _first_mam(service: Any) -> int:
    return service.utc_times[0] % _MINUTES_PER_DAY


def get_index(route_services: Sequence[Any], service: Any) -> int | None:
    """Insertion index for ``service`` that keeps every stop time ordered.

    Services expose ``utc_times``, a sequence of minutes. The index is found
    by the first time of day; ``None`` is returned if inserting there would
    make the services overtake each other at any stop.
    """
    index = bisect_left(route_services, _first_mam(service), key=_first_mam)
    for i, t in enumerate(service.utc_times):
        mam = t % _MINUTES_PER_DAY
        is_earlier = (
            index > 0
            and mam < route_services[index - 1].utc_times[i] % _MINUTES_PER_DAY
        )
        is_later = (
            index < len(route_services)
            and mam > route_services[index].utc_times[i] % _MINUTES_PER_DAY
        )
        if is_earlier or is_later:
            return None
    return index