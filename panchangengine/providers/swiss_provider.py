from __future__ import annotations

import importlib
import logging
import math
import os
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Final

from ..config import get_settings
from ..core.angles import normalize_degrees
from ..core.time import from_julian_day, julian_day, to_zone_of
from . import PlanetaryPosition, ProviderError, SunMoonPositions

LOG = logging.getLogger(__name__)

__all__ = ["EPHE_PATH_ENV_KEYS", "SwissProvider", "ephemeris_data_path"]


_AYANAMSA_MODES: Final[dict[str, str]] = {
    "lahiri": "SIDM_LAHIRI",
    "fagan_bradley": "SIDM_FAGAN_BRADLEY",
    "krishnamurti": "SIDM_KRISHNAMURTI",
    "raman": "SIDM_RAMAN",
}

_PROVIDER_ID: Final[str] = "swiss_ephemeris"

EPHE_PATH_ENV_KEYS: Final[tuple[str, ...]] = (
    "PANCHANGENGINE_SE_EPHE_PATH",
    "SE_EPHE_PATH",
)

_swisseph: Any | None = None


def _load_swisseph() -> Any:
    """Import ``swisseph`` once, reporting a missing install as ``ProviderError``."""

    global _swisseph
    if _swisseph is None:
        try:
            _swisseph = importlib.import_module("swisseph")
        except ImportError as exc:
            raise ProviderError(
                "pyswisseph is not installed; install the 'pyswisseph' package",
                provider_id=_PROVIDER_ID,
            ) from exc
    return _swisseph


def ephemeris_data_path(
    explicit: str | os.PathLike[str] | None = None,
    configured: str | os.PathLike[str] | None = None,
) -> str | None:
    """Return the Swiss Ephemeris data directory to use, if any.

    Candidates are tried in the order ``explicit``, the environment
    variables in :data:`EPHE_PATH_ENV_KEYS`, then ``configured``; the first
    existing directory wins. ``None`` leaves pyswisseph on its built-in
    Moshier tables, which are ample for tithi-level precision.
    """

    candidates = [explicit, *(os.environ.get(key) for key in EPHE_PATH_ENV_KEYS), configured]
    for candidate in candidates:
        if not candidate:
            continue
        directory = Path(candidate).expanduser()
        if directory.is_dir():
            return str(directory)
        LOG.debug("Ignoring missing ephemeris directory %s", directory)
    return None


def _local_mean_midnight_jd(moment: datetime, longitude: float) -> float:
    """Julian day of local mean midnight for the wall-clock date of ``moment``."""

    civil = datetime(moment.year, moment.month, moment.day, tzinfo=UTC)
    return julian_day(civil) - float(longitude) / 360.0


class SwissProvider:
    """Sidereal Sun/Moon positions and solar rise/set from pyswisseph."""

    provider_id = _PROVIDER_ID

    def __init__(
        self,
        *,
        ayanamsa: str | None = None,
        ephemeris_path: str | None = None,
    ) -> None:
        self._swe = _load_swisseph()
        cfg = get_settings().ephemeris
        self.ayanamsa = (ayanamsa or cfg.ayanamsa).lower()
        try:
            mode_attr = _AYANAMSA_MODES[self.ayanamsa]
        except KeyError as exc:
            options = ", ".join(sorted(_AYANAMSA_MODES))
            raise ValueError(
                f"Unknown ayanamsa '{self.ayanamsa}'. Options: {options}"
            ) from exc
        self._sidereal_mode = int(getattr(self._swe, mode_attr))
        path = ephemeris_data_path(ephemeris_path, cfg.path)
        if path:
            self._swe.set_ephe_path(path)
            LOG.debug("Swiss ephemeris path set to %s", path)
        self._calc_flags = int(self._swe.FLG_SWIEPH) | int(self._swe.FLG_SIDEREAL)

    def _apply_sidereal_mode(self) -> None:
        self._swe.set_sid_mode(self._sidereal_mode, 0, 0)

    def _calc(self, jd_ut: float, body: int) -> tuple[float, ...]:
        self._apply_sidereal_mode()
        xx, _ret = self._swe.calc_ut(jd_ut, body, self._calc_flags)
        return tuple(float(value) for value in xx)

    def position(self, body: str, moment: datetime) -> PlanetaryPosition:
        """Return the sidereal position of ``"sun"`` or ``"moon"`` at ``moment``."""

        codes = {"sun": self._swe.SUN, "moon": self._swe.MOON}
        try:
            code = codes[body.lower()]
        except KeyError as exc:
            raise ProviderError(
                f"Unsupported body '{body}'", provider_id=_PROVIDER_ID
            ) from exc
        xx = self._calc(julian_day(moment), code)
        return PlanetaryPosition(
            longitude=normalize_degrees(xx[0]), latitude=xx[1], distance=xx[2]
        )

    def _solar_event(
        self,
        jd_start: float,
        latitude: float,
        longitude: float,
        *,
        event: str,
    ) -> float:
        rsmi = self._swe.CALC_RISE if event == "rise" else self._swe.CALC_SET
        geopos = (float(longitude), float(latitude), 0.0)
        swe = self._swe
        status, tret = swe.rise_trans(
            jd_start, swe.SUN, rsmi, geopos, 0.0, 0.0, int(swe.FLG_SWIEPH)
        )
        event_jd = tret[0] if tret else 0.0
        if status != 0 or not event_jd:
            raise ProviderError(
                f"Sun{event} could not be determined for supplied location",
                provider_id=_PROVIDER_ID,
                context={"latitude": latitude, "longitude": longitude, "status": status},
            )
        return float(event_jd)

    def solar_day(
        self, moment: datetime, latitude: float, longitude: float
    ) -> tuple[float, float]:
        """Return ``(sunrise_jd, sunset_jd)`` for the local day of ``moment``."""

        if not -90.0 <= float(latitude) <= 90.0 or not math.isfinite(float(longitude)):
            raise ProviderError(
                "Latitude must lie within [-90, 90] and longitude must be finite",
                provider_id=_PROVIDER_ID,
                context={"latitude": latitude, "longitude": longitude},
            )
        start = _local_mean_midnight_jd(moment, longitude)
        sunrise_jd = self._solar_event(start, latitude, longitude, event="rise")
        sunset_jd = self._solar_event(sunrise_jd, latitude, longitude, event="set")
        return sunrise_jd, sunset_jd

    def sun_moon_positions(
        self,
        moment: datetime,
        latitude: float,
        longitude: float,
        *,
        at_sunrise: bool = True,
    ) -> SunMoonPositions:
        sunrise_jd, sunset_jd = self.solar_day(moment, latitude, longitude)
        sample_jd = sunrise_jd if at_sunrise else julian_day(moment)
        sun = self._calc(sample_jd, self._swe.SUN)
        moon = self._calc(sample_jd, self._swe.MOON)
        return SunMoonPositions(
            sun_longitude=normalize_degrees(sun[0]),
            moon_longitude=normalize_degrees(moon[0]),
            sunrise=to_zone_of(from_julian_day(sunrise_jd), moment),
            sunset=to_zone_of(from_julian_day(sunset_jd), moment),
        )
