from __future__ import annotations

from datetime import date, datetime

from classgrid.timemath import (
    TimeRange,
    format_date_display,
    format_minutes_to_time,
    minutes_since_midnight,
    parse_time_range,
    parse_time_to_minutes,
)


def test_parse_both_separators() -> None:
    assert parse_time_to_minutes("07:30") == 450
    assert parse_time_to_minutes("07.30") == 450
    assert parse_time_to_minutes("7:05") == 425
    assert parse_time_to_minutes(" 18.20 ") == 1100


def test_parse_empty_and_garbage_is_zero() -> None:
    assert parse_time_to_minutes("") == 0
    assert parse_time_to_minutes(None) == 0
    assert parse_time_to_minutes("abc") == 0
    assert parse_time_to_minutes("25:00") == 0


def test_round_trip_on_zero_padded_values() -> None:
    for m in range(0, 1440, 7):
        text = format_minutes_to_time(m)
        assert parse_time_to_minutes(text) == m
        assert parse_time_to_minutes(text.replace(".", ":")) == m
    assert format_minutes_to_time(450) == "07.30"


def test_parse_time_range() -> None:
    assert parse_time_range("07:30 - 09:20") == TimeRange(450, 560)
    assert parse_time_range("07.30 - 09.20") == TimeRange(450, 560)
    assert parse_time_range("08:25-09:20") == TimeRange(505, 560)
    assert parse_time_range("07:30 - 09:20").is_valid


def test_parse_time_range_malformed() -> None:
    for text in ["", None, "07:30", "07:30 to 09:20", "- 09:20", "07:30 - "]:
        r = parse_time_range(text)
        assert not r.is_valid, text
    assert parse_time_range("07:30") == TimeRange(0, 0)
    assert parse_time_range("") == TimeRange(0, 0)


def test_minutes_since_midnight_and_display_date() -> None:
    assert minutes_since_midnight(datetime(2026, 1, 26, 8, 0)) == 480
    assert format_date_display("2026-01-26", "Monday") == "Senin, 26/01/26"
    assert format_date_display(date(2026, 1, 30), "Friday") == "Jumat, 30/01/26"
    assert format_date_display("2026-01-30", "Jumat") == "Jumat, 30/01/26"


def test_trailing_seconds_are_ignored() -> None:
    assert parse_time_to_minutes("07:30:00") == 450
    assert parse_time_to_minutes("18:20:59") == 1100
    assert parse_time_range("07:30:00 - 09:20:00") == TimeRange(450, 560)
    assert parse_time_to_minutes("07:30:00:00") == 0
