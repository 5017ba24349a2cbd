"""Day-of-year nakshatra and yoga approximations.

Neither function consults the Moon's position. Both simply cycle through
the 27 names with the calendar day and are only meant as coarse labels.
"""

from __future__ import annotations

from datetime import datetime
from typing import Final

from ..core.time import day_of_year
from ..utils.i18n import normalize_language
from .models import NakshatraResult
from .tables import NAKSHATRAS, YOGAS

__all__ = [
    "NAKSHATRA_COUNT",
    "calculate_nakshatra",
    "calculate_yoga",
    "nakshatra_for_day",
    "yoga_for_day",
]


NAKSHATRA_COUNT: Final[int] = 27


def nakshatra_for_day(day: int, language: str | None = "sanskrit") -> NakshatraResult:
    """Return the nakshatra assigned to day-of-year ``day``."""

    number = (day % NAKSHATRA_COUNT) + 1
    return NakshatraResult(name=NAKSHATRAS[number - 1].get(language), number=number)


def yoga_for_day(day: int, language: str | None = "sanskrit") -> str:
    """Return the yoga name for ``day``; the index is 0-based."""

    return YOGAS[day % NAKSHATRA_COUNT].get(language)


def calculate_nakshatra(date: datetime, language: str | None = "sanskrit") -> NakshatraResult:
    return nakshatra_for_day(day_of_year(date), normalize_language(language))


def calculate_yoga(date: datetime, language: str | None = "sanskrit") -> str:
    return yoga_for_day(day_of_year(date), normalize_language(language))
