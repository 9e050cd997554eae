from dataclasses import dataclass

from ..timemath import format_minutes_to_time


@dataclass(frozen=True)
class TimeSlot:
    id: int
    start: int  # minutes since midnight
    end: int
    is_break: bool = False
    label: str | None = None

    @property
    def start_text(self) -> str:
        return format_minutes_to_time(self.start)

    @property
    def end_text(self) -> str:
        return format_minutes_to_time(self.end)
