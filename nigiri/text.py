"""Small text helpers and byte size units."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta


def indent(n: int) -> str:
    """Return ``n`` levels of two-space indentation."""
    return "  " * n


def _active_days(days: int | Iterable[bool]) -> Iterable[int]:
    if isinstance(days, int):
        i = 0
        while days:
            if days & 1:
                yield i
            days >>= 1
            i += 1
    else:
        yield from (i for i, active in enumerate(days) if active)


def format_day_list(days: int | Iterable[bool], base: date) -> str:
    """Render the active days of a bit field as ``{YYYY-MM-DD, ...}``.

    ``days`` is either an integer bit mask (bit ``i`` means ``base + i`` days)
    or an iterable of booleans indexed the same way.
    """
    dates = ((base + timedelta(days=i)).isoformat() for i in _active_days(days))
    return "{" + ", ".join(dates) + "}"


def kilobytes(v: int) -> int:
    """Number of bytes in ``v`` kB (1024 bytes each)."""
    return 1024 * v


def megabytes(v: int) -> int:
    """Number of bytes in ``v`` MB (1024 kB each)."""
    return 1024 * 1024 * v