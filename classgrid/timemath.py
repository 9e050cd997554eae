from __future__ import annotations

import re
from datetime import date, datetime
from typing import NamedTuple

# "07:30 - 09:20"; spacing around the hyphen varies in hand-entered data
RANGE_SEPARATOR = re.compile(r"\s*-\s*")

DAY_NAMES_ID = {
    "Monday": "Senin",
    "Tuesday": "Selasa",
    "Wednesday": "Rabu",
    "Thursday": "Kamis",
    "Friday": "Jumat",
    "Saturday": "Sabtu",
    "Sunday": "Minggu",
}


class TimeRange(NamedTuple):
    start: int
    end: int

    @property
    def is_valid(self) -> bool:
        return self.start < self.end

    @property
    def duration(self) -> int:
        return max(0, self.end - self.start)


EMPTY_RANGE = TimeRange(0, 0)


def parse_time_to_minutes(text: str | None) -> int:
    """Parse ``HH:MM`` or ``HH.MM`` into minutes since midnight.

    Empty input is the start-of-day sentinel 0; so is anything that is not a
    valid time of day.
    """
    if not text:
        return 0
    parts = text.strip().replace(".", ":", 1).split(":")
    # "07:30:00" carries seconds; only hours and minutes count
    if len(parts) not in (2, 3):
        return 0
    try:
        hours, minutes = int(parts[0]), int(parts[1])
    except ValueError:
        return 0
    if not (0 <= hours < 24 and 0 <= minutes < 60):
        return 0
    return hours * 60 + minutes


def parse_time_range(text: str | None) -> TimeRange:
    if not text:
        return EMPTY_RANGE
    parts = RANGE_SEPARATOR.split(text.strip(), maxsplit=1)
    if len(parts) != 2 or not all(parts):
        return EMPTY_RANGE
    return TimeRange(parse_time_to_minutes(parts[0]), parse_time_to_minutes(parts[1]))


def format_minutes_to_time(minutes: int) -> str:
    return f"{minutes // 60:02d}.{minutes % 60:02d}"


def minutes_since_midnight(moment: datetime) -> int:
    return moment.hour * 60 + moment.minute


def format_date_display(day: date | str, day_name: str) -> str:
    # "Senin, 26/01/26"
    if isinstance(day, str):
        day = date.fromisoformat(day)
    local_name = DAY_NAMES_ID.get(day_name, day_name)
    return f"{local_name}, {day:%d/%m/%y}"
