from __future__ import annotations

from collections import Counter
from typing import Callable, Dict, List, Sequence

from ..data.catalog import slots_for
from ..models.period import TimeSlot
from ..models.session import DaySchedule
from ..scheduler.mapper import session_start_slot_index

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
WEEKDAYS_ID = ["senin", "selasa", "rabu", "kamis", "jumat", "sabtu", "minggu"]


def validate_schedule(
    days: Sequence[DaySchedule],
    catalog_for: Callable[[str], Sequence[TimeSlot]] = slots_for,
) -> Dict[str, object]:
    report: Dict[str, object] = {}
    report["day_count"] = len(days)
    report["session_count"] = sum(len(d.sessions) for d in days)

    malformed: List[str] = []
    unanchored: List[str] = []
    overrunning: List[str] = []
    for d in days:
        catalog = catalog_for(d.day)
        last_end = catalog[-1].end if catalog else 0
        for s in d.sessions:
            key = f"{d.date.isoformat()} {s.title}"
            span = s.time_span
            if not span.is_valid:
                malformed.append(f"{key}: {s.time_range!r}")
                continue
            if session_start_slot_index(s, catalog) is None:
                unanchored.append(f"{key}: {s.time_range}")
            if span.end > last_end:
                overrunning.append(f"{key}: {s.time_range}")
    report["malformed_ranges"] = malformed
    report["unanchored_sessions"] = unanchored
    report["overrunning_sessions"] = overrunning

    # Same date listed more than once
    dates = Counter(d.date.isoformat() for d in days)
    report["duplicate_dates"] = sorted(k for k, c in dates.items() if c > 1)

    mismatches: List[str] = []
    for d in days:
        name = d.day.strip().lower()
        wd = d.date.weekday()
        if name not in (WEEKDAYS[wd], WEEKDAYS_ID[wd]):
            mismatches.append(f"{d.date.isoformat()}: {d.day}")
    report["day_name_mismatches"] = mismatches
    return report
