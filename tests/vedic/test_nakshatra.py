from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

from panchangengine.vedic.nakshatra import (
    calculate_nakshatra,
    calculate_yoga,
    nakshatra_for_day,
    yoga_for_day,
)
from panchangengine.vedic.tables import NAKSHATRAS, YOGAS


def test_tables_are_aligned() -> None:
    assert len(NAKSHATRAS) == 27
    assert len(YOGAS) == 27
    assert NAKSHATRAS[0].english == "Ashwini"
    assert NAKSHATRAS[26].sanskrit == "रेवती"
    assert YOGAS[26].english == "Vaidhriti"


def test_first_of_january_is_bharani() -> None:
    result = calculate_nakshatra(datetime(2024, 1, 1, 10, 0, tzinfo=UTC), "english")

    assert result.number == 2
    assert result.name == "Bharani"


def test_day_27_wraps_to_ashwini() -> None:
    result = calculate_nakshatra(datetime(2023, 1, 27, tzinfo=UTC), "sanskrit")

    assert result.number == 1
    assert result.name == "अश्विनी"


def test_yoga_index_is_zero_based() -> None:
    assert calculate_yoga(datetime(2024, 1, 1, tzinfo=UTC), "english") == "Preeti"
    assert yoga_for_day(0, "english") == "Vishkumbha"
    assert nakshatra_for_day(0, "english").name == "Ashwini"


def test_mid_january() -> None:
    date = datetime(2024, 1, 15, tzinfo=UTC)

    assert calculate_nakshatra(date, "english").name == "Vishakha"
    assert calculate_yoga(date, "english") == "Siddhi"


def test_day_of_year_uses_wall_clock() -> None:
    ist = timezone(timedelta(hours=5, minutes=30))
    # Still 31 December in UTC, already 1 January on the local clock.
    local = datetime(2024, 1, 1, 2, 0, tzinfo=ist)

    assert calculate_nakshatra(local, "english").number == 2


def test_nakshatra_cycle_period_is_27() -> None:
    for day in range(1, 340):
        assert nakshatra_for_day(day) == nakshatra_for_day(day + 27)
        assert yoga_for_day(day) == yoga_for_day(day + 27)
