# Copyright (c) 2022-2023 SiumLhahah
# Distributed under the MIT software license, see the accompanying
# file COPYING or http://www.opensource.org/licenses/mit-license.php.

"""
sysext.timeutil

Time helpers for datetime and timedelta.

"""

from datetime import datetime, timedelta, timezone, tzinfo
from math import floor
from .constants import DAY, WEEKDAY_NAMES

Moment = datetime | timedelta


def _time_of_day(moment: datetime) -> timedelta:
    return moment - moment.replace(hour=0, minute=0, second=0, microsecond=0)


def remaining_minutes(moment: datetime) -> float:
    """Minutes left until the next midnight."""
    return difference_in_minutes(DAY, _time_of_day(moment))


def remaining_seconds(moment: datetime) -> float:
    """Seconds left until the next midnight."""
    return difference_in_seconds(DAY, _time_of_day(moment))


def difference_in_minutes(first: Moment, second: Moment) -> float:
    """(first - second) in minutes."""
    return (first - second) / timedelta(minutes=1)


def difference_in_seconds(first: Moment, second: Moment) -> float:
    """(first - second) in seconds."""
    return (first - second) / timedelta(seconds=1)


def week_string(moment: datetime) -> str:
    """English name of the day of the week."""
    return WEEKDAY_NAMES[moment.weekday()]


def to_unix_time(moment: datetime) -> int:
    """Seconds since the epoch.

    Naive datetimes are taken as local time.

    """
    return floor(moment.timestamp())


def from_unix_time(seconds: float, tz: tzinfo | None = timezone.utc
                   ) -> datetime:
    """Datetime of the epoch seconds in tz, local time if tz is None."""
    return datetime.fromtimestamp(seconds, tz)
