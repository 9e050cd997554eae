from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import List, Optional

import typer

from ..clock import ClockOverride, ClockProvider, MockDateStore, resolve_clock
from ..config import AppConfig, load_config, resolve_path
from ..data.loader import load_schedule
from ..errors import ClassgridError
from ..models.session import DaySchedule
from ..render.csv_out import csv_text, write_csv
from ..render.html_ui import write_html_ui
from ..scheduler.grid import build_calendar_grid
from ..scheduler.status import CurrentSessionTracker
from ..validate.checks import validate_schedule
from ..validate.report import format_validation_report, write_validation_report


def _setup_logging(project_root: Path, level: str = "INFO") -> None:
    logs_dir = project_root / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(logs_dir / "classgrid.log", encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )


def _project_root() -> Path:
    return Path(__file__).resolve().parents[2]


def build_clock(
    project_root: Path,
    cfg: AppConfig,
    mock_date: str | None = None,
    mock_time: str | None = None,
) -> ClockProvider:
    store = MockDateStore(resolve_path(project_root, cfg.state_path))
    explicit = ClockOverride(mock_date, mock_time or "00:00") if mock_date else None
    return resolve_clock(cfg.timezone, explicit=explicit, store=store)


def format_status(tracker: CurrentSessionTracker) -> str:
    lines: List[str] = [f"now: {tracker.current_time:%Y-%m-%d %H:%M %Z}"]
    today = tracker.today_schedule
    if today is None:
        lines.append("today: no schedule")
        return "\n".join(lines)
    lines.append(f"today: {today.day} ({len(today.sessions)} sessions)")
    active = tracker.active_session
    nxt = tracker.next_session
    lines.append(f"active: {active.title} [{active.time_range}]" if active else "active: -")
    lines.append(f"next: {nxt.title} [{nxt.time_range}]" if nxt else "next: -")
    return "\n".join(lines)


def run_pipeline(
    project_root: Path,
    *,
    outputs_dir: Path | None = None,
    clock: ClockProvider | None = None,
    days: List[DaySchedule] | None = None,
) -> tuple[str, str, str]:
    cfg = load_config(project_root)
    _setup_logging(project_root, cfg.log_level)
    logger = logging.getLogger(__name__)
    if days is None:
        days = load_schedule(resolve_path(project_root, cfg.schedule_path))
    if clock is None:
        clock = build_clock(project_root, cfg)
    out_dir = outputs_dir or resolve_path(project_root, cfg.outputs_dir)

    grids = build_calendar_grid(days)
    report = validate_schedule(days)
    tracker = CurrentSessionTracker(days, clock, cfg.tick_seconds)

    csv = csv_text(grids)
    write_csv(csv, out_dir)
    write_validation_report(report, out_dir)
    ui_path = write_html_ui(grids, out_dir, now=tracker.current_time)
    logger.info(f"Wrote {len(grids)} day grids to {out_dir} (ui: {ui_path})")

    return csv, format_validation_report(report), format_status(tracker)


app = typer.Typer(add_completion=False, help="Weekly class schedule grid (GMT+7)")
mock_app = typer.Typer(help="Simulated clock for testing and demos")
app.add_typer(mock_app, name="mock")


def _fail(e: ClassgridError) -> None:
    typer.echo(f"error: {e}", err=True)
    raise typer.Exit(code=1)


@app.command("grid")
def cli_grid(
    mock_date: Optional[str] = typer.Option(None, help="Override today (YYYY-MM-DD); persisted"),
    mock_time: Optional[str] = typer.Option(None, help="Override time of day (HH:MM)"),
) -> None:
    root = _project_root()
    try:
        clock = build_clock(root, load_config(root), mock_date, mock_time)
        csv, _, _ = run_pipeline(root, clock=clock)
    except ClassgridError as e:
        _fail(e)
    print(csv)


@app.command("status")
def cli_status(
    mock_date: Optional[str] = typer.Option(None, help="Override today (YYYY-MM-DD); persisted"),
    mock_time: Optional[str] = typer.Option(None, help="Override time of day (HH:MM)"),
) -> None:
    root = _project_root()
    cfg = load_config(root)
    _setup_logging(root, cfg.log_level)
    try:
        days = load_schedule(resolve_path(root, cfg.schedule_path))
        clock = build_clock(root, cfg, mock_date, mock_time)
    except ClassgridError as e:
        _fail(e)
    print(format_status(CurrentSessionTracker(days, clock, cfg.tick_seconds)))


@app.command("validate")
def cli_validate() -> None:
    root = _project_root()
    try:
        _, validation, _ = run_pipeline(root)
    except ClassgridError as e:
        _fail(e)
    print(validation)


@app.command("watch")
def cli_watch(
    ticks: Optional[int] = typer.Option(None, help="Stop after N ticks (default: run until Ctrl-C)"),
    interval: Optional[float] = typer.Option(None, help="Tick interval in seconds"),
) -> None:
    root = _project_root()
    cfg = load_config(root)
    _setup_logging(root, cfg.log_level)
    try:
        days = load_schedule(resolve_path(root, cfg.schedule_path))
        clock = build_clock(root, cfg)
    except ClassgridError as e:
        _fail(e)
    tick = interval if interval is not None else cfg.tick_seconds
    tracker = CurrentSessionTracker(days, clock, tick)
    tracker.subscribe(lambda t: print(format_status(t), end="\n\n"))
    print(format_status(tracker), end="\n\n")
    try:
        asyncio.run(tracker.run(ticks))
    except KeyboardInterrupt:
        logging.getLogger(__name__).info("Watch stopped")


@mock_app.command("set")
def cli_mock_set(date: str, time: str = typer.Argument("00:00")) -> None:
    root = _project_root()
    cfg = load_config(root)
    override = ClockOverride(date, time)
    try:
        override.to_datetime(cfg.timezone)
    except ClassgridError as e:
        _fail(e)
    MockDateStore(resolve_path(root, cfg.state_path)).save(override)
    print(f"mock date: {date} {time}")


@mock_app.command("clear")
def cli_mock_clear() -> None:
    root = _project_root()
    cfg = load_config(root)
    MockDateStore(resolve_path(root, cfg.state_path)).clear()
    print("mock date cleared")


if __name__ == "__main__":  # pragma: no cover
    app()
