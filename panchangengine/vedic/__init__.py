"""Panchang, tithi and Shiv Vaas calculators."""

from __future__ import annotations

from .models import (
    AccurateData,
    AccurateShivVaas,
    MoonTimes,
    NakshatraResult,
    PanchangData,
    PujaTime,
    ShivVaasData,
    SunTimes,
    TithiResult,
)
from .nakshatra import (
    calculate_nakshatra,
    calculate_yoga,
    nakshatra_for_day,
    yoga_for_day,
)
from .panchang import calculate_accurate_panchang
from .shiv_vaas import calculate_accurate_shiv_vaas, calculate_shiv_vaas, shiv_vaas_index
from .tables import NAKSHATRAS, SHIV_VAAS_LOCATIONS, TITHIS, YOGAS, ShivVaasLocation
from .timings import (
    calculate_moon_times,
    calculate_sun_times,
    format_window,
    get_shiva_puja_time,
)
from .tithi import (
    calculate_accurate_tithi,
    calculate_accurate_tithi_at_time,
    calculate_tithi,
    tithi_from_longitudes,
)

__all__ = [
    "AccurateData",
    "AccurateShivVaas",
    "MoonTimes",
    "NAKSHATRAS",
    "NakshatraResult",
    "PanchangData",
    "PujaTime",
    "SHIV_VAAS_LOCATIONS",
    "ShivVaasData",
    "ShivVaasLocation",
    "SunTimes",
    "TITHIS",
    "TithiResult",
    "YOGAS",
    "calculate_accurate_panchang",
    "calculate_accurate_shiv_vaas",
    "calculate_accurate_tithi",
    "calculate_accurate_tithi_at_time",
    "calculate_moon_times",
    "calculate_nakshatra",
    "calculate_shiv_vaas",
    "calculate_sun_times",
    "calculate_tithi",
    "calculate_yoga",
    "format_window",
    "get_shiva_puja_time",
    "nakshatra_for_day",
    "shiv_vaas_index",
    "tithi_from_longitudes",
    "yoga_for_day",
]
