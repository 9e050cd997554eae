from __future__ import annotations

import json
from pathlib import Path

from classgrid.data.loader import load_schedule, parse_schedule
from classgrid.validate.checks import validate_schedule
from classgrid.validate.report import format_validation_report, write_validation_report

ROOT = Path(__file__).resolve().parents[1]


def test_sample_schedule_is_clean() -> None:
    report = validate_schedule(load_schedule(ROOT / "data" / "schedule.json"))
    assert report["day_count"] == 5
    assert report["session_count"] == 20
    for key in [
        "malformed_ranges",
        "unanchored_sessions",
        "overrunning_sessions",
        "duplicate_dates",
        "day_name_mismatches",
    ]:
        assert report[key] == [], key


def test_problems_are_reported() -> None:
    days = parse_schedule(
        [
            {
                "date": "2026-01-26",
                "day": "Tuesday",
                "sessions": [
                    {"title": "Broken", "timeRange": "soon"},
                    {"title": "Early", "timeRange": "06:00 - 07:00"},
                    {"title": "Late", "timeRange": "17:25 - 19:00"},
                ],
            },
            {"date": "2026-01-26", "day": "Senin"},
        ]
    )
    report = validate_schedule(days)
    assert report["malformed_ranges"] == ["2026-01-26 Broken: 'soon'"]
    assert report["unanchored_sessions"] == ["2026-01-26 Early: 06:00 - 07:00"]
    assert report["overrunning_sessions"] == ["2026-01-26 Late: 17:25 - 19:00"]
    assert report["duplicate_dates"] == ["2026-01-26"]
    # "Senin" is Monday in Indonesian, so only the first day is flagged
    assert report["day_name_mismatches"] == ["2026-01-26: Tuesday"]


def test_report_written_and_formatted(tmp_path: Path) -> None:
    report = validate_schedule(load_schedule(ROOT / "data" / "schedule.json"))
    path = write_validation_report(report, tmp_path)
    assert json.loads(path.read_text(encoding="utf-8"))["session_count"] == 20
    text = format_validation_report(report)
    assert "session_count: 20" in text
    assert "malformed_ranges: 0" in text
