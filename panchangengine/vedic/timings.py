"""Placeholder sun/moon timings, puja periods and window formatting."""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Final

from ..core.time import at_clock, epoch_days, format_hhmm
from ..utils.i18n import normalize_language, translate
from .models import MoonTimes, PujaTime, SunTimes
from .tithi import SYNODIC_MONTH_DAYS

__all__ = [
    "calculate_moon_times",
    "calculate_sun_times",
    "format_window",
    "get_shiva_puja_time",
    "puja_period",
]


_SUNRISE_CLOCK: Final[tuple[int, int]] = (6, 30)
_SUNSET_CLOCK: Final[tuple[int, int]] = (18, 15)


def format_window(start: datetime, duration: timedelta) -> str:
    """Render ``start`` and ``start + duration`` as ``"HH:MM - HH:MM"``."""

    return f"{format_hhmm(start)} - {format_hhmm(start + duration)}"


def calculate_sun_times(
    date: datetime,
    latitude: float | None = None,
    longitude: float | None = None,
) -> SunTimes:
    """Fixed 06:30 sunrise and 18:15 sunset on the wall clock of ``date``.

    The coordinates are accepted for signature parity with the ephemeris
    path and are not used.
    """

    return SunTimes(
        sunrise=at_clock(date, *_SUNRISE_CLOCK),
        sunset=at_clock(date, *_SUNSET_CLOCK),
    )


def _split_hours(hours: float) -> tuple[int, int]:
    whole = math.floor(hours)
    return whole, math.floor((hours - whole) * 60)


def calculate_moon_times(date: datetime) -> MoonTimes:
    """Approximate moonrise and moonset from the mean lunar phase."""

    phase = epoch_days(date) % SYNODIC_MONTH_DAYS
    rise_hour, rise_minute = _split_hours(6 + phase * 0.8)
    set_hour, set_minute = _split_hours(18 + phase * 0.5)

    # Moonrise past 24h lands on the next day; moonset wraps onto the same day.
    midnight = at_clock(date, 0)
    moonrise = midnight + timedelta(hours=rise_hour, minutes=rise_minute)
    moonset = at_clock(date, set_hour % 24, set_minute)
    return MoonTimes(moonrise=moonrise, moonset=moonset)


def puja_period(hour: int) -> str:
    """Return the puja period key for an hour of the day (0–23)."""

    if 4 <= hour < 6:
        return "brahma_muhurta"
    if 18 <= hour < 20:
        return "evening"
    if hour >= 23 or hour < 2:
        return "midnight"
    return "general"


def get_shiva_puja_time(date: datetime, language: str | None = "sanskrit") -> PujaTime:
    """Classify the wall-clock hour of ``date`` into a Shiva worship period."""

    language = normalize_language(language)
    period = puja_period(date.hour)
    return PujaTime(
        time=translate(f"puja.{period}.time", language),
        significance=translate(f"puja.{period}.significance", language),
    )
