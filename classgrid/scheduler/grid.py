from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Sequence

from ..data.catalog import slots_for
from ..models.grid import DayGrid, GridCell
from ..models.period import TimeSlot
from ..models.session import DaySchedule
from ..timemath import format_date_display
from .mapper import calculate_session_span, session_overlaps_slot, session_starts_in_slot

CatalogFor = Callable[[str], Sequence[TimeSlot]]


def build_day_cells(day: DaySchedule, catalog: Sequence[TimeSlot]) -> List[GridCell]:
    logger = logging.getLogger(__name__)
    cells: List[GridCell] = []
    skip_until = -1
    for idx, slot in enumerate(catalog):
        # Covered by a spanning session emitted earlier
        if idx < skip_until:
            continue
        session = next((s for s in day.sessions if session_starts_in_slot(s, slot)), None)
        if session is not None:
            span = calculate_session_span(session, idx, catalog)
            cells.append(GridCell(idx, slot, session, span, False, slot.is_break))
            skip_until = idx + span
            logger.debug(f"{day.date} slot {slot.id} -> {session.title} (span {span})")
            continue
        ongoing = next(
            (
                s
                for s in day.sessions
                if session_overlaps_slot(s, slot) and not session_starts_in_slot(s, slot)
            ),
            None,
        )
        if ongoing is not None:
            logger.debug(f"{day.date} slot {slot.id} covered by ongoing {ongoing.title}")
            continue
        cells.append(GridCell(idx, slot, None, 1, True, slot.is_break))
    return cells


def build_calendar_grid(
    days: Iterable[DaySchedule], catalog_for: CatalogFor = slots_for
) -> List[DayGrid]:
    grids: List[DayGrid] = []
    for day in days:
        catalog = catalog_for(day.day)
        grids.append(
            DayGrid(
                date=day.date.isoformat(),
                day=day.day,
                display_date=format_date_display(day.date, day.day),
                cells=build_day_cells(day, catalog),
                slots=list(catalog),
            )
        )
    return grids
