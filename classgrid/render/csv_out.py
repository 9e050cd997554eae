from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import List, Sequence

from ..models.grid import DayGrid, GridCell

HEADER = ["Date", "Day", "SlotStart", "SlotEnd", "Span", "Kind", "Title"]


def cell_kind(cell: GridCell) -> str:
    if cell.session is not None:
        return "session"
    if cell.is_break:
        return "break"
    return "empty"


def csv_rows(grids: Sequence[DayGrid]) -> List[List[str]]:
    rows: List[List[str]] = []
    for g in grids:
        for c in g.cells:
            if c.session is not None:
                title = c.session.title
            elif c.is_break:
                title = c.slot.label or "Break"
            else:
                title = ""
            # A spanning cell ends where its last covered slot ends
            end = g.last_slot(c).end_text
            rows.append([g.date, g.day, c.slot.start_text, end, str(c.span), cell_kind(c), title])
    return rows


def csv_text(grids: Sequence[DayGrid]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(HEADER)
    writer.writerows(csv_rows(grids))
    return buf.getvalue()


def write_csv(text: str, outputs_dir: Path) -> Path:
    outputs_dir.mkdir(parents=True, exist_ok=True)
    path = outputs_dir / "schedule.csv"
    with path.open("w", encoding="utf-8") as f:
        f.write(text)
    return path
