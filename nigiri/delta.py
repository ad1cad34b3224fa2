"""Compact 16-bit minute offsets relative to a base day."""

from __future__ import annotations

import enum
from datetime import date, datetime, time, timedelta, timezone

DELTA_MIN = -(1 << 15)
DELTA_MAX = (1 << 15) - 1
MINUTES_PER_DAY = 1440

_MINUTE = timedelta(minutes=1)


class Direction(enum.Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


def invalid_delta(direction: Direction) -> int:
    """The value meaning "unreached" for a search in ``direction``."""
    return DELTA_MAX if direction is Direction.FORWARD else DELTA_MIN


def clamp(t: int) -> int:
    """Clamp ``t`` into the 16-bit delta range."""
    return max(DELTA_MIN, min(DELTA_MAX, int(t)))


def _midnight(base: date, tzinfo=timezone.utc) -> datetime:
    return datetime.combine(base, time(), tzinfo=tzinfo)


def unix_to_delta(base: date, t: datetime) -> int:
    """Minutes from midnight UTC of ``base`` to ``t``, clamped.

    Naive datetimes are taken to be UTC.
    """
    if t.tzinfo is None:
        t = t.replace(tzinfo=timezone.utc)
    return clamp((t - _midnight(base)) // _MINUTE)


def tt_to_delta(base: int, day: int, mam: int) -> int:
    """Delta for minute ``mam`` of day index ``day`` relative to day ``base``."""
    return clamp((day - base) * MINUTES_PER_DAY + mam)


def delta_to_unix(base: date, d: int) -> datetime:
    """UTC time ``d`` minutes after midnight of ``base``."""
    return _midnight(base) + d * _MINUTE


def split_day_mam(base: int, x: int) -> tuple[int, int]:
    """Split delta ``x`` into (day index, minutes after midnight)."""
    if x in (DELTA_MIN, DELTA_MAX):
        raise ValueError(f"cannot split invalid delta {x}")
    if x < 0:
        days_back = -x // MINUTES_PER_DAY + 1
        return base - days_back, x + days_back * MINUTES_PER_DAY
    return base + x // MINUTES_PER_DAY, x % MINUTES_PER_DAY