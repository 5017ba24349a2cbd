"""Core angle and time helpers."""

from __future__ import annotations

from .angles import elongation, normalize_degrees
from .time import (
    assume_utc,
    at_clock,
    day_of_year,
    ensure_utc,
    epoch_days,
    format_hhmm,
    from_julian_day,
    julian_day,
    to_zone_of,
)

__all__ = [
    "assume_utc",
    "at_clock",
    "day_of_year",
    "elongation",
    "ensure_utc",
    "epoch_days",
    "format_hhmm",
    "from_julian_day",
    "julian_day",
    "normalize_degrees",
    "to_zone_of",
]
