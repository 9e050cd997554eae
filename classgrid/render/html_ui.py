from __future__ import annotations

from datetime import datetime
from html import escape
from pathlib import Path
from typing import List, Sequence

from ..data.catalog import TIME_SLOTS
from ..models.grid import DayGrid, GridCell
from ..scheduler.status import SessionStatus, classify_session

STATUS_COLORS = {
    SessionStatus.ACTIVE: "#e6ffe6",
    SessionStatus.UPCOMING: "#e6f2ff",
    SessionStatus.PAST: "#f2f2f2",
}


def cell_html(grid: DayGrid, cell: GridCell, now: datetime | None) -> str:
    colspan = f" colspan='{cell.span}'" if cell.span > 1 else ""
    if cell.session is None:
        if cell.is_break:
            label = escape(cell.slot.label or "Break")
            return f"<td class='break'{colspan}><div class='vcenter'><strong>{label}</strong></div></td>"
        return f"<td class='empty'{colspan}></td>"
    s = cell.session
    status = classify_session(s, grid.date, now) if now is not None else None
    css = "session" + (f" {status.value}" if status is not None else "")
    bg = STATUS_COLORS.get(status, "#fafafa")
    code = f"<span class='code'>{escape(s.code)}</span><br/>" if s.code else ""
    lecturer = escape(s.lecturer or "")
    return (
        f"<td class='{css}'{colspan} style=\"background:{bg}\">"
        f"<div class='cell'>{code}<span class='title'>{escape(s.title)}</span><br/>"
        f"<span class='time'>{escape(s.time_range)}</span><br/>"
        f"<span class='lecturer'>{lecturer}</span></div>"
        f"</td>"
    )


def build_html(grids: Sequence[DayGrid], now: datetime | None = None) -> str:
    # Column headers follow the default catalog; Friday's relabeled slots show in the cells
    head_cells = "".join(
        f"<th>{s.id}<br/><span class='time'>{s.start_text}–{s.end_text}</span></th>"
        for s in TIME_SLOTS
    )
    rows_html: List[str] = []
    for g in grids:
        today = now is not None and g.date == now.date().isoformat()
        day_cls = "day today" if today else "day"
        row_cells = "".join(cell_html(g, c, now) for c in g.cells)
        rows_html.append(f"<tr><th class='{day_cls}'>{escape(g.display_date)}</th>{row_cells}</tr>")

    stamp = ""
    if now is not None:
        stamp = f"<p class='now'>Now: {now:%Y-%m-%d %H:%M} (GMT+7)</p>"

    style = """
    <style>
    body { font-family: system-ui, Arial, sans-serif; margin: 20px; color: #222; }
    .tt { border-collapse: collapse; width: 100%; table-layout: fixed; }
    .tt th, .tt td { border: 1px solid #ddd; padding: 6px; vertical-align: middle; text-align: center; }
    .tt thead th { background:#f7f7f7; font-weight:600; }
    .tt .day { background:#fafafa; width: 130px; text-align:left; padding-left:8px; }
    .tt .today { background:#fff4e6; }
    .time { font-size: 11px; color:#666; }
    .title { font-weight: 600; }
    .code { font-size: 11px; color:#0b4f6c; }
    .lecturer { font-size: 12px; color:#444; }
    .active { outline: 2px solid #117733; }
    .break { background:#000; color:#fff; }
    .break .vcenter { writing-mode: vertical-rl; transform: rotate(180deg); font-size: 12px; }
    .empty { background:#fbfbfb; }
    </style>
    """

    return (
        "<html><head><meta charset='utf-8'><title>Jadwal</title>" + style + "</head><body>"
        "<h1>Jadwal</h1>"
        + stamp
        + "<table class='tt'>"
        + f"<thead><tr><th class='day'></th>{head_cells}</tr></thead>"
        + f"<tbody>{''.join(rows_html)}</tbody>"
        + "</table></body></html>"
    )


def write_html_ui(grids: Sequence[DayGrid], outputs_dir: Path, now: datetime | None = None) -> Path:
    ui_dir = outputs_dir / "ui"
    ui_dir.mkdir(parents=True, exist_ok=True)
    out_path = ui_dir / "index.html"
    out_path.write_text(build_html(grids, now), encoding="utf-8")
    return out_path
