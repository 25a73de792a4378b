from datetime import datetime, timedelta, timezone

import pytest

from sysext.timeutil import (
    difference_in_minutes,
    difference_in_seconds,
    from_unix_time,
    remaining_minutes,
    remaining_seconds,
    to_unix_time,
    week_string,
)


def test_remaining_time_until_midnight() -> None:
    assert remaining_minutes(datetime(2024, 1, 1, 23, 0)) == 60.0
    assert remaining_seconds(datetime(2024, 1, 1)) == 86400.0
    assert remaining_seconds(datetime(2024, 1, 1, 12, 0, 30)) == 43170.0


def test_remaining_time_uses_wall_clock_of_aware_values() -> None:
    moment = datetime(2024, 1, 1, 22, 30, tzinfo=timezone(timedelta(hours=5)))

    assert remaining_minutes(moment) == 90.0


def test_differences_of_datetimes() -> None:
    start = datetime(2024, 1, 1, 1, 0)
    end = datetime(2024, 1, 1, 1, 30, 15)

    assert difference_in_minutes(end, start) == 30.25
    assert difference_in_seconds(end, start) == 1815.0
    assert difference_in_seconds(start, end) == -1815.0


def test_differences_of_timedeltas() -> None:
    assert difference_in_minutes(timedelta(hours=2), timedelta(minutes=30)) == 90.0
    assert difference_in_seconds(timedelta(seconds=5), timedelta(seconds=7)) == -2.0


@pytest.mark.parametrize(
    ("day", "expected"),
    [(1, "Monday"), (3, "Wednesday"), (7, "Sunday")],
)
def test_week_string(day: int, expected: str) -> None:
    assert week_string(datetime(2024, 1, day)) == expected


def test_to_unix_time() -> None:
    assert to_unix_time(datetime(1970, 1, 1, tzinfo=timezone.utc)) == 0
    assert to_unix_time(datetime(2001, 9, 9, 1, 46, 40, tzinfo=timezone.utc)) == 1_000_000_000
    assert to_unix_time(datetime(1970, 1, 1, 1, tzinfo=timezone(timedelta(hours=1)))) == 0


def test_to_unix_time_floors_fractions() -> None:
    assert to_unix_time(datetime(1970, 1, 1, 0, 0, 1, 900000, tzinfo=timezone.utc)) == 1
    assert to_unix_time(datetime(1969, 12, 31, 23, 59, 59, 500000, tzinfo=timezone.utc)) == -1


def test_to_unix_time_treats_naive_as_local() -> None:
    assert to_unix_time(datetime.fromtimestamp(1_000_000)) == 1_000_000


def test_from_unix_time() -> None:
    assert from_unix_time(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert to_unix_time(from_unix_time(1_700_000_000)) == 1_700_000_000
