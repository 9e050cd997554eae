from __future__ import annotations

from typing import Sequence

from ..models.period import TimeSlot
from ..models.session import Session


def session_overlaps_slot(session: Session, slot: TimeSlot) -> bool:
    span = session.time_span
    if not span.is_valid:
        return False
    return span.start < slot.end and span.end > slot.start


def session_starts_in_slot(session: Session, slot: TimeSlot) -> bool:
    # The anchor slot is where the title is rendered; at most one per session
    span = session.time_span
    if not span.is_valid:
        return False
    return slot.start <= span.start < slot.end


def calculate_session_span(
    session: Session, start_slot_index: int, catalog: Sequence[TimeSlot]
) -> int:
    end = session.time_span.end
    span = 0
    for slot in catalog[start_slot_index:]:
        if slot.start < end:
            span += 1
        else:
            break
    return max(1, span)


def session_start_slot_index(session: Session, catalog: Sequence[TimeSlot]) -> int | None:
    for i, slot in enumerate(catalog):
        if session_starts_in_slot(session, slot):
            return i
    return None
