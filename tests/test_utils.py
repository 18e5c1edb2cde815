"""Mini README: Tests for the date and rounding helpers."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from balancetracker.utils import clamp_to_today, days_between, parse_iso_date, round2, today_iso


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1.005, 1.01),
        (-1.005, -1.01),
        (2.675, 2.68),
        (0.1 + 0.2, 0.3),
        (175, 175.0),
        (-0.004, -0.0),
        (1234.5678, 1234.57),
    ],
)
def test_round2_rounds_half_away_from_zero(value: float, expected: float) -> None:
    assert round2(value) == expected


def test_days_between_counts_whole_days() -> None:
    assert days_between("2023-01-02", "2023-01-01") == 1
    assert days_between("2023-01-01", "2023-01-02") == -1
    assert days_between(date(2024, 3, 1), "2024-02-28") == 2


def test_parse_iso_date_accepts_dates_and_datetimes() -> None:
    assert parse_iso_date(datetime(2024, 5, 1, 12, 30)) == date(2024, 5, 1)
    assert parse_iso_date(" 2024-05-01 ") == date(2024, 5, 1)
    with pytest.raises(ValueError):
        parse_iso_date("next tuesday")
    with pytest.raises(ValueError):
        parse_iso_date(20240501)  # type: ignore[arg-type]


def test_clamp_to_today_only_moves_past_dates() -> None:
    today = date(2024, 5, 10)
    assert clamp_to_today("2024-05-01", today) == "2024-05-10"
    assert clamp_to_today("2024-06-01", today) == "2024-06-01"
    assert today_iso(today) == "2024-05-10"


def test_round2_handles_large_values_and_rejects_non_finite() -> None:
    assert round2(1e30) == 1e30
    assert round2(-1.5e300) == -1.5e300
    with pytest.raises(ValueError):
        round2(float("inf"))
    with pytest.raises(ValueError):
        round2(float("nan"))
