"""Time conversion helpers used across panchangengine.

Two clocks are in play. Epoch arithmetic (the approximate lunar phase)
works on UTC instants, while calendar fields such as the weekday, the day
of the year or "06:30 on this date" are read from the caller's own wall
clock. Naive datetimes are interpreted as UTC throughout, and wall-clock
values derived from a naive input carry ``UTC``.
"""

from __future__ import annotations

import datetime as _dt
from typing import Final

__all__ = [
    "J2000_JD",
    "SECONDS_PER_DAY",
    "assume_utc",
    "at_clock",
    "day_of_year",
    "ensure_utc",
    "epoch_days",
    "format_hhmm",
    "from_julian_day",
    "julian_day",
    "to_zone_of",
]


SECONDS_PER_DAY: Final[float] = 86_400.0
J2000_JD: Final[float] = 2_451_545.0
_J2000_UTC: Final[_dt.datetime] = _dt.datetime(2000, 1, 1, 12, 0, tzinfo=_dt.UTC)


def ensure_utc(moment: _dt.datetime) -> _dt.datetime:
    """Return ``moment`` converted to UTC."""

    tzinfo = moment.tzinfo
    if tzinfo is None:
        return moment.replace(tzinfo=_dt.UTC)
    return moment.astimezone(_dt.UTC)


def assume_utc(moment: _dt.datetime) -> _dt.datetime:
    """Attach ``UTC`` to a naive ``moment``; aware values are returned as-is."""

    if moment.tzinfo is None:
        return moment.replace(tzinfo=_dt.UTC)
    return moment


def epoch_days(moment: _dt.datetime) -> float:
    """Return fractional days elapsed since the POSIX epoch."""

    return ensure_utc(moment).timestamp() / SECONDS_PER_DAY


def day_of_year(moment: _dt.datetime) -> int:
    """Return whole days between ``moment`` and 31 December of the prior year.

    The difference is taken on the wall clock so 1 January yields ``1``.
    """

    wall = moment.replace(tzinfo=None)
    year_zero = _dt.datetime(wall.year, 1, 1) - _dt.timedelta(days=1)
    return (wall - year_zero) // _dt.timedelta(days=1)


def at_clock(moment: _dt.datetime, hour: int, minute: int = 0) -> _dt.datetime:
    """Return ``moment`` with its wall clock set to ``hour:minute:00``."""

    return assume_utc(moment).replace(hour=hour, minute=minute, second=0, microsecond=0)


def to_zone_of(value: _dt.datetime, reference: _dt.datetime) -> _dt.datetime:
    """Express ``value`` in the timezone carried by ``reference``.

    Naive ``reference`` values are treated as UTC, in which case the result
    is an aware UTC datetime.
    """

    target = reference.tzinfo or _dt.UTC
    return ensure_utc(value).astimezone(target)


def format_hhmm(moment: _dt.datetime) -> str:
    """Return the 24-hour ``HH:MM`` rendering of ``moment``."""

    return moment.strftime("%H:%M")


def julian_day(moment: _dt.datetime) -> float:
    """Return the Julian day (UT) for ``moment``."""

    delta = ensure_utc(moment) - _J2000_UTC
    return J2000_JD + delta.total_seconds() / SECONDS_PER_DAY


def from_julian_day(jd_ut: float) -> _dt.datetime:
    """Return the aware UTC datetime for a Julian day number."""

    return _J2000_UTC + _dt.timedelta(days=float(jd_ut) - J2000_JD)
