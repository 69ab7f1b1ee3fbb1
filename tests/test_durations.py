from __future__ import annotations

from datetime import date

import pytest

from core.services.common.durations import (
    calculate_duration_minutes,
    duration_to_string,
    format_duration,
    interval_minutes,
    minutes_to_hhmm,
    parse_duration_input,
    parse_hhmm,
)
from core.services.common.weeks import week_days, week_start


def test_parse_hhmm_is_strict():
    assert parse_hhmm("00:00") == 0
    assert parse_hhmm("23:59") == 23 * 60 + 59
    assert parse_hhmm(" 09:05 ") == 545
    for bad in ("9:00", "24:00", "12:60", "12.30", "", None):
        assert parse_hhmm(bad) is None


def test_raw_and_interval_durations():
    assert calculate_duration_minutes("09:00", "10:30") == 90
    assert calculate_duration_minutes("22:00", "02:00") == -1200
    assert calculate_duration_minutes("xx", "10:00") == 0

    assert interval_minutes("22:00", "02:00") == 240
    assert interval_minutes("10:00", "10:00") == 0
    assert interval_minutes("00:00", "23:59") == 1439


def test_minutes_to_hhmm_wraps_day():
    assert minutes_to_hhmm(690) == "11:30"
    assert minutes_to_hhmm(24 * 60 + 15) == "00:15"


def test_formatting():
    assert format_duration(0) == "0:00"
    assert format_duration(605) == "10:05"
    assert duration_to_string(45) == "45min"
    assert duration_to_string(120) == "2h"
    assert duration_to_string(95) == "1h 35min"


@pytest.mark.parametrize(
    "text, minutes",
    [
        ("1:30", 90),
        ("1h30m", 90),
        ("1h 30min", 90),
        ("2h", 120),
        ("1.5h", 90),
        ("90m", 90),
        ("90", 90),
        ("2 godz", 120),
    ],
)
def test_parse_duration_input(text, minutes):
    assert parse_duration_input(text) == minutes


@pytest.mark.parametrize("text", ["", "  ", "abc", "-5", "nan", "inf"])
def test_parse_duration_input_rejects_garbage(text):
    assert parse_duration_input(text) is None


def test_week_start_and_days():
    wednesday = date(2026, 2, 11)
    assert week_start(wednesday) == date(2026, 2, 9)
    assert week_start(wednesday, week_starts_on=6) == date(2026, 2, 8)
    assert week_start(date(2026, 2, 9)) == date(2026, 2, 9)

    days = week_days(wednesday)
    assert len(days) == 7
    assert days[-1] == date(2026, 2, 15)
