from .grid import build_calendar_grid
from .mapper import (
    calculate_session_span,
    session_overlaps_slot,
    session_start_slot_index,
    session_starts_in_slot,
)
from .status import CurrentSessionTracker, SessionStatus, classify_session

__all__ = [
    "build_calendar_grid",
    "calculate_session_span",
    "session_overlaps_slot",
    "session_start_slot_index",
    "session_starts_in_slot",
    "CurrentSessionTracker",
    "SessionStatus",
    "classify_session",
]
