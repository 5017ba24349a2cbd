"""Daily panchang composer."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Final

from ..config import get_settings
from ..core.angles import elongation
from ..core.time import assume_utc
from ..providers import EphemerisProvider, SunMoonPositions, resolve_provider
from ..utils.i18n import normalize_language, translate
from .models import AccurateData, PanchangData
from .nakshatra import calculate_nakshatra, calculate_yoga
from .timings import calculate_moon_times, calculate_sun_times, format_window
from .tithi import calculate_tithi, tithi_from_longitudes

LOG = logging.getLogger(__name__)

__all__ = [
    "ABHIJIT_WINDOW",
    "GULIKA_WINDOW",
    "calculate_accurate_panchang",
]


GULIKA_WINDOW: Final[str] = "15:00 - 16:30"
ABHIJIT_WINDOW: Final[str] = "11:48 - 12:36"

_RAHU_OFFSET: Final[timedelta] = timedelta(hours=4.5)
_YAMAGHANTA_OFFSET: Final[timedelta] = timedelta(hours=7.5)
_KAALAM_LENGTH: Final[timedelta] = timedelta(hours=1.5)
_MOON_OFFSET: Final[timedelta] = timedelta(hours=2)

# Placeholders used when no ephemeris data is available.
_FALLBACK_RAHU: Final[str] = "13:30 - 15:00"
_FALLBACK_YAMAGHANTA: Final[str] = "10:30 - 12:00"
_FALLBACK_ACCURATE_DATA: Final[AccurateData] = AccurateData(
    sun_longitude=45.0, moon_longitude=120.0, tithi_degrees=75.0
)


def _basic_panchang(
    date: datetime, latitude: float, longitude: float, language: str
) -> PanchangData:
    tithi = calculate_tithi(date, language)
    nakshatra = calculate_nakshatra(date, language)
    sun = calculate_sun_times(date, latitude, longitude)
    moon = calculate_moon_times(date)
    return PanchangData(
        tithi=tithi.name,
        tithi_number=tithi.number,
        nakshatra=nakshatra.name,
        nakshatra_number=nakshatra.number,
        yoga=calculate_yoga(date, language),
        karana=translate("karana.placeholder", language),
        sunrise=sun.sunrise,
        sunset=sun.sunset,
        moonrise=moon.moonrise,
        moonset=moon.moonset,
        rahu=_FALLBACK_RAHU,
        yamaghanta=_FALLBACK_YAMAGHANTA,
        gulika=GULIKA_WINDOW,
        abhijit=ABHIJIT_WINDOW,
        accurate_data=_FALLBACK_ACCURATE_DATA,
    )


def _ephemeris_panchang(
    date: datetime, positions: SunMoonPositions, language: str
) -> PanchangData:
    tithi = tithi_from_longitudes(
        positions.moon_longitude, positions.sun_longitude, language
    )
    nakshatra = calculate_nakshatra(date, language)
    sunrise, sunset = positions.sunrise, positions.sunset
    return PanchangData(
        tithi=tithi.name,
        tithi_number=tithi.number,
        nakshatra=nakshatra.name,
        nakshatra_number=nakshatra.number,
        yoga=calculate_yoga(date, language),
        karana=translate("karana.placeholder", language),
        sunrise=sunrise,
        sunset=sunset,
        moonrise=sunrise + _MOON_OFFSET,
        moonset=sunset + _MOON_OFFSET,
        rahu=format_window(sunrise + _RAHU_OFFSET, _KAALAM_LENGTH),
        yamaghanta=format_window(sunrise + _YAMAGHANTA_OFFSET, _KAALAM_LENGTH),
        gulika=GULIKA_WINDOW,
        abhijit=ABHIJIT_WINDOW,
        accurate_data=AccurateData(
            sun_longitude=positions.sun_longitude,
            moon_longitude=positions.moon_longitude,
            tithi_degrees=elongation(positions.moon_longitude, positions.sun_longitude),
        ),
    )


def calculate_accurate_panchang(
    date: datetime,
    latitude: float | None = None,
    longitude: float | None = None,
    language: str | None = "sanskrit",
    specific_time: datetime | None = None,
    *,
    provider: EphemerisProvider | None = None,
) -> PanchangData:
    """Compose the panchang for ``date`` at the given location.

    Longitudes are sampled at sunrise, or at ``specific_time`` when given,
    with a single provider request. Rahu kaal and yamaghanta are placed at
    fixed offsets from sunrise; moonrise and moonset are taken as two hours
    after sunrise and sunset. Any failure while building the ephemeris
    record, including incomplete provider data, is logged and the whole
    record is rebuilt from the placeholder approximations instead.
    """

    language = normalize_language(language)
    date = assume_utc(date)
    if specific_time is not None:
        specific_time = assume_utc(specific_time)
    if latitude is None or longitude is None:
        location = get_settings().location
        latitude = location.latitude if latitude is None else latitude
        longitude = location.longitude if longitude is None else longitude

    try:
        positions = resolve_provider(provider).sun_moon_positions(
            specific_time or date,
            latitude,
            longitude,
            at_sunrise=specific_time is None,
        )
        return _ephemeris_panchang(date, positions, language)
    except Exception:
        LOG.warning(
            "Ephemeris panchang unavailable for %s; using approximations",
            date.isoformat(),
            exc_info=True,
            extra={"err_code": "EPHEMERIS_PANCHANG"},
        )
        return _basic_panchang(date, latitude, longitude, language)
