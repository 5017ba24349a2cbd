from __future__ import annotations

import json
import logging
from datetime import UTC, datetime, timedelta, timezone

import pytest

from panchangengine.config import LocationCfg, Settings, use_settings
from panchangengine.providers import register_provider
from panchangengine.vedic.panchang import (
    ABHIJIT_WINDOW,
    GULIKA_WINDOW,
    calculate_accurate_panchang,
)


def test_panchang_from_provider(fixed_provider) -> None:
    date = datetime(2024, 1, 15, tzinfo=UTC)

    snapshot = calculate_accurate_panchang(
        date, 28.6139, 77.2090, "english", provider=fixed_provider
    )

    assert snapshot.tithi == "Ashtami"
    assert snapshot.tithi_number == 8
    assert snapshot.nakshatra == "Vishakha"
    assert snapshot.nakshatra_number == 16
    assert snapshot.yoga == "Siddhi"
    assert snapshot.karana == "Bava"
    assert snapshot.sunrise == fixed_provider.sunrise
    assert snapshot.sunset == fixed_provider.sunset
    assert snapshot.moonrise == datetime(2024, 1, 15, 8, 0, tzinfo=UTC)
    assert snapshot.moonset == datetime(2024, 1, 15, 20, 0, tzinfo=UTC)
    assert snapshot.rahu == "10:30 - 12:00"
    assert snapshot.yamaghanta == "13:30 - 15:00"
    assert snapshot.gulika == GULIKA_WINDOW == "15:00 - 16:30"
    assert snapshot.abhijit == ABHIJIT_WINDOW == "11:48 - 12:36"
    assert snapshot.accurate_data.sun_longitude == pytest.approx(10.0)
    assert snapshot.accurate_data.moon_longitude == pytest.approx(100.0)
    assert snapshot.accurate_data.tithi_degrees == pytest.approx(90.0)


def test_panchang_makes_single_provider_call(fixed_provider) -> None:
    date = datetime(2024, 1, 15, tzinfo=UTC)

    calculate_accurate_panchang(date, 10.0, 20.0, provider=fixed_provider)

    assert fixed_provider.calls == [(date, 10.0, 20.0, True)]


def test_panchang_specific_time_samples_that_moment(fixed_provider) -> None:
    date = datetime(2024, 1, 15, tzinfo=UTC)
    at = datetime(2024, 1, 15, 19, 0, tzinfo=UTC)

    calculate_accurate_panchang(date, 10.0, 20.0, "english", at, provider=fixed_provider)

    assert fixed_provider.calls == [(at, 10.0, 20.0, False)]


def test_panchang_sanskrit_karana(fixed_provider) -> None:
    snapshot = calculate_accurate_panchang(
        datetime(2024, 1, 15, tzinfo=UTC), 0.0, 0.0, provider=fixed_provider
    )

    assert snapshot.karana == "बव"
    assert snapshot.tithi == "अष्टमी"


def test_windows_follow_provider_zone(fixed_provider) -> None:
    ist = timezone(timedelta(hours=5, minutes=30))
    fixed_provider.sunrise = datetime(2024, 1, 15, 7, 14, tzinfo=ist)
    fixed_provider.sunset = datetime(2024, 1, 15, 17, 50, tzinfo=ist)

    snapshot = calculate_accurate_panchang(
        datetime(2024, 1, 15, tzinfo=ist), 28.6139, 77.2090, provider=fixed_provider
    )

    assert snapshot.rahu == "11:44 - 13:14"
    assert snapshot.yamaghanta == "14:44 - 16:14"


def test_panchang_default_coordinates_from_settings(fixed_provider) -> None:
    calculate_accurate_panchang(datetime(2024, 1, 15, tzinfo=UTC), provider=fixed_provider)
    use_settings(Settings(location=LocationCfg(latitude=19.076, longitude=72.8777)))
    calculate_accurate_panchang(datetime(2024, 1, 15, tzinfo=UTC), provider=fixed_provider)

    assert [call[1:3] for call in fixed_provider.calls] == [
        (28.6139, 77.2090),
        (19.076, 72.8777),
    ]


def test_panchang_fallback(failing_provider, caplog) -> None:
    date = datetime(1970, 1, 11, tzinfo=UTC)

    with caplog.at_level(logging.WARNING, logger="panchangengine.vedic.panchang"):
        snapshot = calculate_accurate_panchang(
            date, 28.6139, 77.2090, "english", provider=failing_provider
        )

    assert snapshot.tithi_number == 11
    assert snapshot.tithi == "Ekadashi"
    assert snapshot.karana == "Bava"
    assert snapshot.sunrise == datetime(1970, 1, 11, 6, 30, tzinfo=UTC)
    assert snapshot.sunset == datetime(1970, 1, 11, 18, 15, tzinfo=UTC)
    assert snapshot.moonrise == datetime(1970, 1, 11, 14, 0, tzinfo=UTC)
    assert snapshot.moonset == datetime(1970, 1, 11, 23, 0, tzinfo=UTC)
    assert snapshot.rahu == "13:30 - 15:00"
    assert snapshot.yamaghanta == "10:30 - 12:00"
    assert snapshot.gulika == "15:00 - 16:30"
    assert snapshot.abhijit == "11:48 - 12:36"
    assert snapshot.accurate_data.to_payload() == {
        "sun_longitude": 45.0,
        "moon_longitude": 120.0,
        "tithi_degrees": 75.0,
    }
    assert [record.err_code for record in caplog.records] == ["EPHEMERIS_PANCHANG"]
    assert failing_provider.calls == 1


def test_panchang_incomplete_provider_data_falls_back(fixed_provider, caplog) -> None:
    fixed_provider.sunrise = None  # type: ignore[assignment]
    fixed_provider.sunset = None  # type: ignore[assignment]

    with caplog.at_level(logging.WARNING, logger="panchangengine.vedic.panchang"):
        snapshot = calculate_accurate_panchang(
            datetime(1970, 1, 11, tzinfo=UTC), 0.0, 0.0, "english", provider=fixed_provider
        )

    assert snapshot.rahu == "13:30 - 15:00"
    assert snapshot.sunrise == datetime(1970, 1, 11, 6, 30, tzinfo=UTC)
    assert snapshot.accurate_data.tithi_degrees == 75.0
    assert [record.err_code for record in caplog.records] == ["EPHEMERIS_PANCHANG"]


def test_naive_dates_yield_comparable_times(fixed_provider, failing_provider) -> None:
    date = datetime(2024, 1, 15)

    from_provider = calculate_accurate_panchang(
        date, 0.0, 0.0, "english", provider=fixed_provider
    )
    approximated = calculate_accurate_panchang(
        date, 0.0, 0.0, "english", provider=failing_provider
    )

    assert approximated.sunrise.tzinfo is UTC
    assert approximated.moonset.tzinfo is UTC
    assert from_provider.sunrise - approximated.sunrise == timedelta(minutes=-30)
    assert fixed_provider.calls[0][0] == datetime(2024, 1, 15, tzinfo=UTC)


def test_panchang_uses_registered_default_provider(fixed_provider) -> None:
    register_provider("swiss", fixed_provider)

    snapshot = calculate_accurate_panchang(datetime(2024, 1, 15, tzinfo=UTC), language="english")

    assert snapshot.tithi == "Ashtami"
    assert len(fixed_provider.calls) == 1


def test_panchang_payload_is_json(fixed_provider) -> None:
    snapshot = calculate_accurate_panchang(
        datetime(2024, 1, 15, tzinfo=UTC), 0.0, 0.0, "sanskrit", provider=fixed_provider
    )
    payload = snapshot.to_payload()

    assert payload["sunrise"] == "2024-01-15T06:00:00+00:00"
    assert payload["accurate_data"]["tithi_degrees"] == pytest.approx(90.0)
    assert json.loads(json.dumps(payload, ensure_ascii=False))["karana"] == "बव"
