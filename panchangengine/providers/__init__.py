"""Ephemeris provider contract and registry.

Calculators never import an ephemeris directly. They accept any object
implementing :class:`EphemerisProvider` through their ``provider=``
keyword and, when none is supplied, resolve the configured default from
this registry.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Protocol

from ..config import get_settings

LOG = logging.getLogger(__name__)

__all__ = [
    "EphemerisProvider",
    "PlanetaryPosition",
    "ProviderError",
    "SunMoonPositions",
    "get_provider",
    "list_providers",
    "register_provider",
    "reset_providers",
    "resolve_provider",
]


class ProviderError(RuntimeError):
    """Structured error raised when a provider cannot satisfy a request."""

    def __init__(
        self,
        message: str,
        *,
        provider_id: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.provider_id = provider_id
        self.context = dict(context or {})


@dataclass(frozen=True)
class PlanetaryPosition:
    """Geocentric ecliptic coordinates of a body."""

    longitude: float
    latitude: float
    distance: float

    def to_payload(self) -> dict[str, float]:
        return {
            "longitude": self.longitude,
            "latitude": self.latitude,
            "distance": self.distance,
        }


@dataclass(frozen=True)
class SunMoonPositions:
    """Luminary longitudes (degrees) with the day's sunrise and sunset."""

    sun_longitude: float
    moon_longitude: float
    sunrise: datetime
    sunset: datetime

    def to_payload(self) -> dict[str, object]:
        return {
            "sun_longitude": self.sun_longitude,
            "moon_longitude": self.moon_longitude,
            "sunrise": self.sunrise.isoformat(),
            "sunset": self.sunset.isoformat(),
        }


class EphemerisProvider(Protocol):
    """Provider contract returning Sun/Moon data for a date and place."""

    def sun_moon_positions(
        self,
        moment: datetime,
        latitude: float,
        longitude: float,
        *,
        at_sunrise: bool = True,
    ) -> SunMoonPositions:
        """Return luminary longitudes with sunrise/sunset for ``moment``'s day.

        With ``at_sunrise`` the longitudes are sampled at that day's sunrise,
        otherwise at ``moment`` itself. Implementations raise on invalid
        input or when the location has no sunrise.
        """

        ...


_REGISTRY: dict[str, EphemerisProvider] = {}


def register_provider(
    name: str,
    provider: EphemerisProvider,
    *,
    overwrite: bool = False,
) -> None:
    """Register ``provider`` under ``name``."""

    key = name.strip().lower()
    if not overwrite and key in _REGISTRY:
        raise ValueError(f"provider '{key}' already registered")
    _REGISTRY[key] = provider


def list_providers() -> list[str]:
    """Return the names of registered providers."""

    return sorted(_REGISTRY)


def reset_providers() -> None:
    """For tests: drop every registered provider."""

    _REGISTRY.clear()


def get_provider(name: str | None = None) -> EphemerisProvider:
    """Return the provider registered as ``name`` (default from settings).

    The Swiss Ephemeris provider is instantiated and registered on first
    use. Failures are reported as :class:`ProviderError`.
    """

    key = (name or get_settings().ephemeris.source).strip().lower()
    provider = _REGISTRY.get(key)
    if provider is not None:
        return provider

    if key == "swiss":
        from .swiss_provider import SwissProvider

        provider = SwissProvider()
        _REGISTRY.setdefault(key, provider)
        LOG.debug("Registered Swiss Ephemeris provider")
        return _REGISTRY[key]

    raise ProviderError(
        f"Unknown ephemeris provider '{key}'",
        provider_id=key,
        context={"available": list_providers()},
    )


def resolve_provider(provider: EphemerisProvider | None = None) -> EphemerisProvider:
    """Return ``provider`` or, when ``None``, the configured default."""

    if provider is not None:
        return provider
    return get_provider()
