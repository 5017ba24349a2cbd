"""Bilingual Hindu Panchang calculations.

The public calculators accept :class:`datetime.datetime` values (naive
values are read as UTC) and return frozen records. Functions that need
ephemeris data take an optional ``provider=`` keyword and degrade to
documented approximations when it fails.
"""

from __future__ import annotations

from .providers import (
    EphemerisProvider,
    ProviderError,
    SunMoonPositions,
    get_provider,
    register_provider,
)
from .vedic import (
    AccurateData,
    AccurateShivVaas,
    MoonTimes,
    NakshatraResult,
    PanchangData,
    PujaTime,
    ShivVaasData,
    SunTimes,
    TithiResult,
    calculate_accurate_panchang,
    calculate_accurate_shiv_vaas,
    calculate_accurate_tithi,
    calculate_accurate_tithi_at_time,
    calculate_moon_times,
    calculate_nakshatra,
    calculate_shiv_vaas,
    calculate_sun_times,
    calculate_tithi,
    calculate_yoga,
    get_shiva_puja_time,
)

__version__ = "0.1.0"

__all__ = [
    "AccurateData",
    "AccurateShivVaas",
    "EphemerisProvider",
    "MoonTimes",
    "NakshatraResult",
    "PanchangData",
    "ProviderError",
    "PujaTime",
    "ShivVaasData",
    "SunMoonPositions",
    "SunTimes",
    "TithiResult",
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
    "get_provider",
    "get_shiva_puja_time",
    "register_provider",
    "__version__",
]
