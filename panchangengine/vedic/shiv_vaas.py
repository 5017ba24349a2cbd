"""Shiv Vaas classifiers.

Two unrelated notions share the name. :func:`calculate_accurate_shiv_vaas`
places Shiva in one of seven abodes using ``(tithi * 2 + 5) mod 7`` on the
ephemeris tithi; every day has such an abode. :func:`calculate_shiv_vaas`
flags weekday and tithi based fasting observances and may find none.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from datetime import datetime, timedelta
from types import MappingProxyType
from typing import Final

from ..core.time import at_clock
from ..providers import EphemerisProvider, resolve_provider
from ..utils.i18n import Bilingual, bilingual_table, normalize_language, translate
from .models import AccurateShivVaas, ShivVaasData
from .tables import SHIV_VAAS_LOCATIONS
from .timings import calculate_sun_times
from .tithi import calculate_accurate_tithi, calculate_accurate_tithi_at_time, calculate_tithi

LOG = logging.getLogger(__name__)

__all__ = [
    "OBSERVANCES",
    "calculate_accurate_shiv_vaas",
    "calculate_shiv_vaas",
    "shiv_vaas_index",
]


OBSERVANCES: Final[Mapping[str, Sequence[Bilingual]]] = MappingProxyType({
    "monday": bilingual_table(
        (
            ("सूर्योदय से सूर्यास्त तक उपवास", "Fast from sunrise to sunset"),
            ("शिव मंत्र जाप", "Shiva mantra chanting"),
            ("रुद्राभिषेक", "Rudrabhishek"),
            ("बिल्व पत्र अर्पण", "Bilva leaf offering"),
        )
    ),
    "shivaratri": bilingual_table(
        (
            ("रात्रि जागरण", "Night vigil"),
            ("निर्जला उपवास", "Nirjala fast"),
            ("शिव तांडव स्तोत्र", "Shiva Tandava Stotra"),
            ("महामृत्युंजय मंत्र", "Mahamrityunjaya Mantra"),
        )
    ),
    "pradosh": bilingual_table(
        (
            ("संध्या काल पूजा", "Evening worship"),
            ("शिव चालीसा पाठ", "Shiva Chalisa recitation"),
            ("नंदी दर्शन", "Nandi darshan"),
            ("धूप दीप अर्पण", "Incense and lamp offering"),
        )
    ),
})

_MONDAY: Final[int] = 0
_SHRAVAN_MONTHS: Final[frozenset[int]] = frozenset({7, 8})
_SHIVARATRI_TITHI: Final[int] = 14
_PRADOSH_TITHI: Final[int] = 13


def shiv_vaas_index(tithi_number: int) -> int:
    """Return the abode index 1–7 for a tithi number."""

    remainder = (tithi_number * 2 + 5) % 7
    return 7 if remainder == 0 else remainder


def _sunrise_for(
    moment: datetime,
    latitude: float,
    longitude: float,
    provider: EphemerisProvider | None,
) -> datetime:
    try:
        positions = resolve_provider(provider).sun_moon_positions(
            moment, latitude, longitude, at_sunrise=True
        )
        return positions.sunrise
    except Exception:
        LOG.warning(
            "Sunrise unavailable for Shiv Vaas; using placeholder sunrise",
            exc_info=True,
            extra={"err_code": "EPHEMERIS_SUNRISE"},
        )
        return calculate_sun_times(moment, latitude, longitude).sunrise


def calculate_accurate_shiv_vaas(
    date: datetime,
    latitude: float,
    longitude: float,
    language: str | None = "sanskrit",
    specific_time: datetime | None = None,
    *,
    provider: EphemerisProvider | None = None,
) -> AccurateShivVaas:
    """Return Shiva's abode for the tithi of ``date`` (or ``specific_time``).

    The abode holds from sunrise until the same instant on the next day.
    """

    language = normalize_language(language)
    if specific_time is not None:
        tithi = calculate_accurate_tithi_at_time(
            date, latitude, longitude, specific_time, language, provider=provider
        )
    else:
        tithi = calculate_accurate_tithi(
            date, latitude, longitude, language, provider=provider
        )
    sunrise = _sunrise_for(specific_time or date, latitude, longitude, provider)

    index = shiv_vaas_index(tithi.number)
    location = SHIV_VAAS_LOCATIONS[index]
    return AccurateShivVaas(
        is_shiv_vaas=True,
        type=f"{location.name.get(language)} ({location.name.english})",
        start_time=sunrise,
        end_time=sunrise + timedelta(days=1),
        significance=location.significance.get(language),
        observances=location.observances(language),
        shiv_vaas_index=index,
        location=location,
        sunrise_time=sunrise,
        tithi_details=tithi,
        is_auspicious=location.is_auspicious,
    )


def calculate_shiv_vaas(date: datetime, language: str | None = "sanskrit") -> ShivVaasData:
    """Flag Monday, Shivaratri, Pradosh and Shravan Monday observances.

    Rules are applied in that order and a later match replaces the labels
    of an earlier one. A Shravan Monday only relabels the Monday fast, its
    observances stay as they were.
    """

    language = normalize_language(language)
    tithi_number = calculate_tithi(date).number
    is_monday = date.weekday() == _MONDAY

    matched: str | None = None
    observances: tuple[str, ...] = ()
    if is_monday:
        matched = "monday"
    if tithi_number == _SHIVARATRI_TITHI:
        matched = "shivaratri"
    if tithi_number == _PRADOSH_TITHI:
        matched = "pradosh"
    if matched is not None:
        observances = tuple(item.get(language) for item in OBSERVANCES[matched])

    labels = matched
    if is_monday and date.month in _SHRAVAN_MONTHS:
        labels = "shravan_monday"

    if labels is None:
        type_, significance = "", ""
    else:
        type_ = translate(f"shiv_vaas.{labels}.type", language)
        significance = translate(f"shiv_vaas.{labels}.significance", language)

    start = at_clock(date, 5)
    end = at_clock(date + timedelta(days=1), 6)
    return ShivVaasData(
        is_shiv_vaas=matched is not None,
        type=type_,
        start_time=start,
        end_time=end,
        significance=significance,
        observances=observances,
    )
