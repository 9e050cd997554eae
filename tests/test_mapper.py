from __future__ import annotations

from classgrid.data.catalog import TIME_SLOTS, slots_for
from classgrid.models import Session, TimeSlot
from classgrid.scheduler.mapper import (
    calculate_session_span,
    session_overlaps_slot,
    session_start_slot_index,
    session_starts_in_slot,
)

SLOT_A = TimeSlot(1, 450, 505)  # 07:30-08:25
SLOT_B = TimeSlot(2, 505, 560)  # 08:25-09:20


def s(time_range: str, title: str = "X") -> Session:
    return Session(title=title, timeRange=time_range)


def test_spanning_session_two_slots() -> None:
    session = s("07:30 - 09:20")
    catalog = [SLOT_A, SLOT_B]
    assert session_starts_in_slot(session, SLOT_A)
    assert not session_starts_in_slot(session, SLOT_B)
    assert session_overlaps_slot(session, SLOT_B)
    assert calculate_session_span(session, 0, catalog) == 2


def test_overlap_is_half_open() -> None:
    assert not session_overlaps_slot(s("08:25 - 09:20"), SLOT_A)
    assert not session_overlaps_slot(s("06:30 - 07:30"), SLOT_A)
    assert session_overlaps_slot(s("08:00 - 08:30"), SLOT_A)
    assert session_overlaps_slot(s("08:00 - 08:30"), SLOT_B)


def test_overlap_matches_interval_intersection() -> None:
    for start in range(420, 600, 5):
        for end in range(start + 5, 620, 15):
            session = s(f"{start // 60:02d}:{start % 60:02d} - {end // 60:02d}:{end % 60:02d}")
            for slot in TIME_SLOTS:
                expected = max(start, slot.start) < min(end, slot.end)
                assert session_overlaps_slot(session, slot) == expected


def test_anchor_is_unique() -> None:
    for text in ["07:30 - 09:20", "09:25 - 10:00", "12:00 - 13:00", "17:25 - 18:20"]:
        anchors = [slot for slot in TIME_SLOTS if session_starts_in_slot(s(text), slot)]
        assert len(anchors) == 1, text


def test_span_counts_breaks_it_runs_through() -> None:
    # 07:30-10:30 covers two teaching slots, the coffee break and slot 4
    assert calculate_session_span(s("07:30 - 10:30"), 0, TIME_SLOTS) == 4
    assert calculate_session_span(s("12:35 - 15:20"), 6, TIME_SLOTS) == 3
    assert calculate_session_span(s("17:25 - 19:00"), 12, TIME_SLOTS) == 1


def test_span_is_at_least_one() -> None:
    assert calculate_session_span(s(""), 0, TIME_SLOTS) == 1
    assert calculate_session_span(s("garbage"), 5, TIME_SLOTS) == 1
    assert calculate_session_span(s("07:30 - 09:20"), 13, TIME_SLOTS) == 1
    assert calculate_session_span(s("07:30 - 09:20"), 0, []) == 1


def test_malformed_range_overlaps_nothing() -> None:
    for text in ["", "07:30", "09:20 - 07:30", "08:00 - 08:00"]:
        session = s(text)
        for slot in TIME_SLOTS:
            assert not session_overlaps_slot(session, slot)
            assert not session_starts_in_slot(session, slot)
        assert session_start_slot_index(session, TIME_SLOTS) is None


def test_missing_time_range_field() -> None:
    session = Session(title="No time")
    assert session.time_range == ""
    assert session_start_slot_index(session, TIME_SLOTS) is None


def test_start_slot_index() -> None:
    assert session_start_slot_index(s("09:35 - 11:25"), TIME_SLOTS) == 3
    assert session_start_slot_index(s("12:40 - 13:30"), slots_for("Friday")) == 6
    assert session_start_slot_index(s("05:00 - 06:00"), TIME_SLOTS) is None
