from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from panchangengine.vedic.timings import (
    calculate_moon_times,
    calculate_sun_times,
    format_window,
    get_shiva_puja_time,
)

IST = timezone(timedelta(hours=5, minutes=30))


def test_sun_times_are_fixed_on_wall_clock() -> None:
    date = datetime(2024, 3, 10, 22, 17, 45, tzinfo=IST)

    times = calculate_sun_times(date, 28.6139, 77.2090)

    assert times.sunrise == datetime(2024, 3, 10, 6, 30, tzinfo=IST)
    assert times.sunset == datetime(2024, 3, 10, 18, 15, tzinfo=IST)


def test_sun_times_ignore_coordinates() -> None:
    date = datetime(2024, 3, 10, tzinfo=UTC)

    assert calculate_sun_times(date, 0.0, 0.0) == calculate_sun_times(date, 60.0, -120.0)


def test_naive_dates_give_utc_times() -> None:
    sun = calculate_sun_times(datetime(2024, 3, 10), 0.0, 0.0)
    moon = calculate_moon_times(datetime(1970, 1, 1))

    assert sun.sunrise == datetime(2024, 3, 10, 6, 30, tzinfo=UTC)
    assert moon.moonrise.tzinfo is UTC
    assert moon.moonset.tzinfo is UTC


def test_moon_times_at_new_phase() -> None:
    times = calculate_moon_times(datetime(1970, 1, 1, tzinfo=UTC))

    assert times.moonrise == datetime(1970, 1, 1, 6, 0, tzinfo=UTC)
    assert times.moonset == datetime(1970, 1, 1, 18, 0, tzinfo=UTC)


def test_moon_times_mid_phase() -> None:
    times = calculate_moon_times(datetime(1970, 1, 11, tzinfo=UTC))

    assert times.moonrise == datetime(1970, 1, 11, 14, 0, tzinfo=UTC)
    assert times.moonset == datetime(1970, 1, 11, 23, 0, tzinfo=UTC)


def test_moonrise_rolls_into_next_day_and_moonset_wraps() -> None:
    times = calculate_moon_times(datetime(1970, 1, 26, tzinfo=UTC))

    assert times.moonrise == datetime(1970, 1, 27, 2, 0, tzinfo=UTC)
    assert times.moonset == datetime(1970, 1, 26, 6, 30, tzinfo=UTC)


@pytest.mark.parametrize(
    ("hour", "english", "sanskrit"),
    [
        (4, "Brahma Muhurta", "ब्रह्म मुहूर्त"),
        (5, "Brahma Muhurta", "ब्रह्म मुहूर्त"),
        (6, "General Time", "सामान्य काल"),
        (10, "General Time", "सामान्य काल"),
        (18, "Evening Time", "संध्या काल"),
        (19, "Evening Time", "संध्या काल"),
        (20, "General Time", "सामान्य काल"),
        (23, "Midnight Time", "निशीथ काल"),
        (0, "Midnight Time", "निशीथ काल"),
        (1, "Midnight Time", "निशीथ काल"),
        (2, "General Time", "सामान्य काल"),
    ],
)
def test_puja_bands(hour: int, english: str, sanskrit: str) -> None:
    date = datetime(2024, 2, 8, hour, 30, tzinfo=IST)

    assert get_shiva_puja_time(date, "english").time == english
    assert get_shiva_puja_time(date, "sanskrit").time == sanskrit


def test_puja_significance() -> None:
    result = get_shiva_puja_time(datetime(2024, 2, 8, 5, 0), "english")

    assert result.to_payload() == {
        "time": "Brahma Muhurta",
        "significance": "Best worship time",
    }


def test_format_window() -> None:
    start = datetime(2024, 1, 15, 22, 45, tzinfo=UTC)

    assert format_window(start, timedelta(hours=1.5)) == "22:45 - 00:15"
