# Re-export common types
from .grid import DayGrid, GridCell
from .period import TimeSlot
from .session import DaySchedule, ScheduleDocument, Session

__all__ = [
    "TimeSlot",
    "Session",
    "DaySchedule",
    "ScheduleDocument",
    "GridCell",
    "DayGrid",
]
