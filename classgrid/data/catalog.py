"""Daily bell schedule.

Thirteen contiguous slots from 07:30 to 18:20, including two coffee breaks
and the midday recess. Fridays move the recess: slot 6 becomes the Friday
prayer break (Soljum) and slot 7, a teaching slot on other days, becomes the
recess instead.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, List, Tuple

from ..models.period import TimeSlot
from ..timemath import parse_time_to_minutes


def _slot(sid: int, start: str, end: str, label: str | None = None) -> TimeSlot:
    return TimeSlot(
        id=sid,
        start=parse_time_to_minutes(start),
        end=parse_time_to_minutes(end),
        is_break=label is not None,
        label=label,
    )


TIME_SLOTS: Tuple[TimeSlot, ...] = (
    _slot(1, "07:30", "08:25"),
    _slot(2, "08:25", "09:20"),
    _slot(3, "09:20", "09:35", "Coffee break"),
    _slot(4, "09:35", "10:30"),
    _slot(5, "10:30", "11:25"),
    _slot(6, "11:25", "12:35", "Istirahat"),
    _slot(7, "12:35", "13:30"),
    _slot(8, "13:30", "14:25"),
    _slot(9, "14:25", "15:20"),
    _slot(10, "15:20", "15:35", "Coffee break"),
    _slot(11, "15:35", "16:30"),
    _slot(12, "16:30", "17:25"),
    _slot(13, "17:25", "18:20"),
)


@dataclass(frozen=True)
class SlotOverride:
    label: str | None
    is_break: bool


# Keyed by lower-cased day name; English and Indonesian names both appear in
# schedule data.
WEEKDAY_OVERRIDES: Dict[str, Dict[int, SlotOverride]] = {
    "friday": {
        6: SlotOverride(label="Soljum", is_break=True),
        7: SlotOverride(label="Istirahat", is_break=True),
    },
}
DAY_ALIASES = {"jumat": "friday", "jum'at": "friday"}


def _override_key(day_name: str | None) -> str:
    key = (day_name or "").strip().lower()
    return DAY_ALIASES.get(key, key)


def slots_for(day_name: str | None) -> List[TimeSlot]:
    overrides = WEEKDAY_OVERRIDES.get(_override_key(day_name), {})
    out: List[TimeSlot] = []
    for s in TIME_SLOTS:
        o = overrides.get(s.id)
        out.append(s if o is None else replace(s, label=o.label, is_break=o.is_break))
    return out


def teaching_slots(day_name: str | None) -> List[TimeSlot]:
    return [s for s in slots_for(day_name) if not s.is_break]


def break_slots(day_name: str | None) -> List[TimeSlot]:
    return [s for s in slots_for(day_name) if s.is_break]
