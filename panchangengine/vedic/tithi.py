"""Tithi (lunar day) calculators.

Two strategies coexist. :func:`calculate_tithi` is a coarse approximation
that only looks at the number of days since the POSIX epoch. The
``calculate_accurate_*`` functions derive the tithi from Moon–Sun
elongation supplied by an :class:`~panchangengine.providers.EphemerisProvider`
and fall back to the approximation whenever the provider fails.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import Final

from ..core.angles import elongation
from ..core.time import epoch_days
from ..providers import EphemerisProvider, resolve_provider
from ..utils.i18n import normalize_language, translate
from .models import TithiResult
from .tables import TITHIS

LOG = logging.getLogger(__name__)

__all__ = [
    "SYNODIC_MONTH_DAYS",
    "TITHI_ARC_DEGREES",
    "calculate_accurate_tithi",
    "calculate_accurate_tithi_at_time",
    "calculate_tithi",
    "paksha_for",
    "tithi_name",
    "tithi_from_longitudes",
]


SYNODIC_MONTH_DAYS: Final[float] = 29.53
"""Mean lunation length used by the epoch-based approximations."""

TITHI_ARC_DEGREES: Final[float] = 360.0 / 30.0
"""Angular span of a single tithi in degrees."""

_TITHIS_PER_PAKSHA: Final[int] = 15


def tithi_name(number: int, language: str | None = None) -> str:
    """Return the name for a 1-based tithi ``number`` (1–30)."""

    adjusted = number - _TITHIS_PER_PAKSHA if number > _TITHIS_PER_PAKSHA else number
    if not 1 <= adjusted <= len(TITHIS):
        adjusted = len(TITHIS)
    return TITHIS[adjusted - 1].get(language)


def paksha_for(number: int, language: str | None = None) -> str:
    """Shukla for tithis 1–15, Krishna above."""

    key = "paksha.shukla" if number <= _TITHIS_PER_PAKSHA else "paksha.krishna"
    return translate(key, language)


def _approximate_number(date: datetime) -> int:
    lunar_day = epoch_days(date) % SYNODIC_MONTH_DAYS
    return math.floor(lunar_day) + 1


def calculate_tithi(date: datetime, language: str | None = "sanskrit") -> TithiResult:
    """Approximate the tithi from the days elapsed since 1970-01-01 UTC.

    The returned ``number`` is the raw day of the mean lunation (1–30) and
    is not folded into a fortnight; ``paksha`` is left unset.
    """

    language = normalize_language(language)
    number = _approximate_number(date)
    return TithiResult(name=tithi_name(number, language), number=number)


def tithi_from_longitudes(
    moon_longitude: float,
    sun_longitude: float,
    language: str | None = "sanskrit",
) -> TithiResult:
    """Return the tithi for sidereal Moon and Sun longitudes in degrees."""

    language = normalize_language(language)
    delta = elongation(moon_longitude, sun_longitude)
    raw = math.floor(delta / TITHI_ARC_DEGREES) + 1
    number = ((raw - 1) % 30) + 1
    return TithiResult(
        name=tithi_name(number, language),
        number=number,
        paksha=paksha_for(number, language),
    )


def _fallback_tithi(date: datetime, language: str) -> TithiResult:
    number = _approximate_number(date)
    return TithiResult(
        name=tithi_name(number, language),
        number=number,
        paksha=paksha_for(number, language),
    )


def calculate_accurate_tithi(
    date: datetime,
    latitude: float,
    longitude: float,
    language: str | None = "sanskrit",
    *,
    provider: EphemerisProvider | None = None,
) -> TithiResult:
    """Return the tithi prevailing at sunrise of ``date`` at the given place.

    Provider failures are logged and answered with the epoch approximation,
    whose paksha is derived from the unreduced day number.
    """

    language = normalize_language(language)
    try:
        positions = resolve_provider(provider).sun_moon_positions(
            date, latitude, longitude, at_sunrise=True
        )
        return tithi_from_longitudes(
            positions.moon_longitude, positions.sun_longitude, language
        )
    except Exception:
        LOG.warning(
            "Accurate tithi unavailable; using approximation",
            exc_info=True,
            extra={"err_code": "EPHEMERIS_TITHI"},
        )
        return _fallback_tithi(date, language)


def calculate_accurate_tithi_at_time(
    date: datetime,
    latitude: float,
    longitude: float,
    specific_time: datetime,
    language: str | None = "sanskrit",
    *,
    provider: EphemerisProvider | None = None,
) -> TithiResult:
    """Return the tithi prevailing at ``specific_time``.

    On provider failure this degrades to :func:`calculate_accurate_tithi`
    for ``date``, which may in turn fall back to the approximation.
    """

    language = normalize_language(language)
    try:
        positions = resolve_provider(provider).sun_moon_positions(
            specific_time, latitude, longitude, at_sunrise=False
        )
        return tithi_from_longitudes(
            positions.moon_longitude, positions.sun_longitude, language
        )
    except Exception:
        LOG.warning(
            "Tithi at %s unavailable; using sunrise tithi",
            specific_time.isoformat(),
            exc_info=True,
            extra={"err_code": "EPHEMERIS_TITHI_AT"},
        )
        return calculate_accurate_tithi(
            date, latitude, longitude, language, provider=provider
        )
