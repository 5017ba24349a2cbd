"""Result records returned by the panchang calculators."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .tables import ShivVaasLocation

__all__ = [
    "AccurateData",
    "AccurateShivVaas",
    "MoonTimes",
    "NakshatraResult",
    "PanchangData",
    "PujaTime",
    "ShivVaasData",
    "SunTimes",
    "TithiResult",
]


@dataclass(frozen=True)
class TithiResult:
    """Lunar day label with its public number.

    ``paksha`` is ``None`` for the coarse epoch-based approximation, which
    does not determine the lunar fortnight.
    """

    name: str
    number: int
    paksha: str | None = None

    def to_payload(self) -> dict[str, object]:
        return {"name": self.name, "number": self.number, "paksha": self.paksha}


@dataclass(frozen=True)
class NakshatraResult:
    name: str
    number: int

    def to_payload(self) -> dict[str, object]:
        return {"name": self.name, "number": self.number}


@dataclass(frozen=True)
class SunTimes:
    sunrise: datetime
    sunset: datetime

    def to_payload(self) -> dict[str, str]:
        return {"sunrise": self.sunrise.isoformat(), "sunset": self.sunset.isoformat()}


@dataclass(frozen=True)
class MoonTimes:
    moonrise: datetime
    moonset: datetime

    def to_payload(self) -> dict[str, str]:
        return {
            "moonrise": self.moonrise.isoformat(),
            "moonset": self.moonset.isoformat(),
        }


@dataclass(frozen=True)
class AccurateData:
    """Luminary longitudes (degrees) behind a panchang and their elongation."""

    sun_longitude: float
    moon_longitude: float
    tithi_degrees: float

    def to_payload(self) -> dict[str, float]:
        return {
            "sun_longitude": self.sun_longitude,
            "moon_longitude": self.moon_longitude,
            "tithi_degrees": self.tithi_degrees,
        }


@dataclass(frozen=True)
class PanchangData:
    """Daily panchang snapshot with auspicious and inauspicious windows."""

    tithi: str
    tithi_number: int
    nakshatra: str
    nakshatra_number: int
    yoga: str
    karana: str
    sunrise: datetime
    sunset: datetime
    moonrise: datetime
    moonset: datetime
    rahu: str
    yamaghanta: str
    gulika: str
    abhijit: str
    accurate_data: AccurateData

    def to_payload(self) -> dict[str, object]:
        return {
            "tithi": self.tithi,
            "tithi_number": self.tithi_number,
            "nakshatra": self.nakshatra,
            "nakshatra_number": self.nakshatra_number,
            "yoga": self.yoga,
            "karana": self.karana,
            "sunrise": self.sunrise.isoformat(),
            "sunset": self.sunset.isoformat(),
            "moonrise": self.moonrise.isoformat(),
            "moonset": self.moonset.isoformat(),
            "rahu": self.rahu,
            "yamaghanta": self.yamaghanta,
            "gulika": self.gulika,
            "abhijit": self.abhijit,
            "accurate_data": self.accurate_data.to_payload(),
        }


@dataclass(frozen=True)
class ShivVaasData:
    """Shiva observance classification for a day."""

    is_shiv_vaas: bool
    type: str
    start_time: datetime
    end_time: datetime
    significance: str
    observances: tuple[str, ...]

    def to_payload(self) -> dict[str, object]:
        return {
            "is_shiv_vaas": self.is_shiv_vaas,
            "type": self.type,
            "start_time": self.start_time.isoformat(),
            "end_time": self.end_time.isoformat(),
            "significance": self.significance,
            "observances": list(self.observances),
        }


@dataclass(frozen=True, kw_only=True)
class AccurateShivVaas(ShivVaasData):
    """Shiv Vaas abode derived from the ephemeris tithi at sunrise."""

    shiv_vaas_index: int
    location: ShivVaasLocation
    sunrise_time: datetime
    tithi_details: TithiResult
    is_auspicious: bool

    def to_payload(self) -> dict[str, object]:
        payload = super().to_payload()
        payload.update(
            {
                "shiv_vaas_index": self.shiv_vaas_index,
                "location": self.location.to_payload(),
                "sunrise_time": self.sunrise_time.isoformat(),
                "tithi_details": self.tithi_details.to_payload(),
                "is_auspicious": self.is_auspicious,
            }
        )
        return payload


@dataclass(frozen=True)
class PujaTime:
    time: str
    significance: str

    def to_payload(self) -> dict[str, str]:
        return {"time": self.time, "significance": self.significance}
