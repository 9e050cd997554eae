from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

from .period import TimeSlot
from .session import Session


@dataclass
class GridCell:
    slot_index: int
    slot: TimeSlot
    session: Session | None
    span: int = 1
    is_empty: bool = False
    is_break: bool = False


@dataclass
class DayGrid:
    date: str
    day: str
    display_date: str
    cells: List[GridCell] = field(default_factory=list)
    slots: List[TimeSlot] = field(default_factory=list)  # catalog the cells index into

    def sessions(self) -> Iterable[Session]:
        for c in self.cells:
            if c.session is not None:
                yield c.session

    def cell_at(self, slot_index: int) -> GridCell | None:
        for c in self.cells:
            if c.slot_index == slot_index:
                return c
        return None

    def last_slot(self, cell: GridCell) -> TimeSlot:
        if not self.slots:
            return cell.slot
        return self.slots[min(cell.slot_index + cell.span, len(self.slots)) - 1]
