from __future__ import annotations

import importlib.util
import warnings
from dataclasses import dataclass, field
from datetime import UTC, datetime

import pytest

from panchangengine.config import use_settings
from panchangengine.providers import ProviderError, SunMoonPositions, reset_providers

if importlib.util.find_spec("swisseph") is None:
    warnings.warn(
        "pyswisseph not installed; Swiss-marked tests will be skipped.",
        RuntimeWarning,
        stacklevel=1,
    )


@dataclass
class FixedProvider:
    """Provider returning the same longitudes and solar day for every request."""

    sun_longitude: float = 10.0
    moon_longitude: float = 100.0
    sunrise: datetime = datetime(2024, 1, 15, 6, 0, tzinfo=UTC)
    sunset: datetime = datetime(2024, 1, 15, 18, 0, tzinfo=UTC)
    calls: list[tuple[datetime, float, float, bool]] = field(default_factory=list)

    def sun_moon_positions(
        self,
        moment: datetime,
        latitude: float,
        longitude: float,
        *,
        at_sunrise: bool = True,
    ) -> SunMoonPositions:
        self.calls.append((moment, latitude, longitude, at_sunrise))
        return SunMoonPositions(
            sun_longitude=self.sun_longitude,
            moon_longitude=self.moon_longitude,
            sunrise=self.sunrise,
            sunset=self.sunset,
        )


@dataclass
class FailingProvider:
    """Provider that raises for every request, or only off-sunrise ones."""

    only_specific_time: bool = False
    calls: int = 0

    def sun_moon_positions(
        self,
        moment: datetime,
        latitude: float,
        longitude: float,
        *,
        at_sunrise: bool = True,
    ) -> SunMoonPositions:
        self.calls += 1
        if self.only_specific_time and at_sunrise:
            return FixedProvider().sun_moon_positions(
                moment, latitude, longitude, at_sunrise=at_sunrise
            )
        raise ProviderError("ephemeris offline", provider_id="failing")


@pytest.fixture(autouse=True)
def _isolate_state(monkeypatch, tmp_path):
    monkeypatch.setenv("PANCHANGENGINE_HOME", str(tmp_path / "home"))
    reset_providers()
    use_settings(None)
    yield
    reset_providers()
    use_settings(None)


@pytest.fixture
def fixed_provider() -> FixedProvider:
    return FixedProvider()


@pytest.fixture
def failing_provider() -> FailingProvider:
    return FailingProvider()
