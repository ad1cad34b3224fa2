from datetime import date, datetime, timezone

import pytest

from nigiri.delta import (
    DELTA_MAX,
    DELTA_MIN,
    Direction,
    clamp,
    delta_to_unix,
    invalid_delta,
    split_day_mam,
    tt_to_delta,
    unix_to_delta,
)


def test_invalid_delta():
    assert invalid_delta(Direction.FORWARD) == DELTA_MAX
    assert invalid_delta(Direction.BACKWARD) == DELTA_MIN


def test_clamp():
    assert clamp(10**6) == DELTA_MAX
    assert clamp(-(10**6)) == DELTA_MIN
    assert clamp(123) == 123


@pytest.mark.parametrize("d", [-3000, -1, 0, 1, 59, 1440, 2881, 20000])
def test_unix_round_trip(d):
    base = date(2019, 5, 3)
    assert unix_to_delta(base, delta_to_unix(base, d)) == d


def test_naive_datetime_is_utc():
    base = date(2019, 5, 3)
    aware = datetime(2019, 5, 3, 2, 30, tzinfo=timezone.utc)
    assert unix_to_delta(base, aware) == unix_to_delta(base, aware.replace(tzinfo=None))


def test_delta_to_unix_zero_is_midnight():
    base = date(2023, 4, 1)
    t = delta_to_unix(base, 0)
    assert t.date() == base
    assert (t.hour, t.minute) == (0, 0)


def test_unix_to_delta_clamps():
    base = date(2019, 5, 3)
    far = datetime(2030, 1, 1, tzinfo=timezone.utc)
    assert unix_to_delta(base, far) == DELTA_MAX


@pytest.mark.parametrize("x", [-5000, -1440, -1, 0, 1, 1439, 1440, 30000])
def test_split_round_trip(x):
    day, mam = split_day_mam(10, x)
    assert 0 <= mam <= 1440
    assert tt_to_delta(10, day, mam) == x


def test_split_negative_minute():
    assert split_day_mam(10, -1) == (9, 1439)


def test_split_positive():
    assert split_day_mam(5, 0) == (5, 0)


@pytest.mark.parametrize("x", [DELTA_MIN, DELTA_MAX])
def test_split_rejects_invalid(x):
    with pytest.raises(ValueError):
        split_day_mam(0, x)