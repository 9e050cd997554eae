"""Active / upcoming / past classification of sessions against a clock."""

from __future__ import annotations

import asyncio
import logging
from datetime import date, datetime
from enum import Enum
from typing import Callable, List, Sequence

from ..clock import ClockProvider
from ..models.session import DaySchedule, Session
from ..timemath import minutes_since_midnight


class SessionStatus(str, Enum):
    ACTIVE = "active"
    UPCOMING = "upcoming"
    PAST = "past"


def _as_date(value: date | str) -> date | None:
    # datetime is a date subclass; compare calendar days only
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        return None


def classify_session(
    session: Session | None, session_date: date | str, now: datetime
) -> SessionStatus | None:
    """Classify ``session`` on ``session_date`` relative to ``now``.

    Returns None for a session without a usable time range (or date); such a
    session is never active.
    """
    if session is None:
        return None
    span = session.time_span
    day = _as_date(session_date)
    if not span.is_valid or day is None:
        return None
    today = now.date()
    if day < today:
        return SessionStatus.PAST
    if day > today:
        return SessionStatus.UPCOMING
    minutes = minutes_since_midnight(now)
    if minutes < span.start:
        return SessionStatus.UPCOMING
    if minutes < span.end:
        return SessionStatus.ACTIVE
    return SessionStatus.PAST


def find_day(days: Sequence[DaySchedule], on: date) -> DaySchedule | None:
    return next((d for d in days if d.date == on), None)


def active_session(day: DaySchedule | None, now: datetime) -> Session | None:
    if day is None:
        return None
    for s in day.sessions:
        if classify_session(s, day.date, now) is SessionStatus.ACTIVE:
            return s
    return None


def next_session(day: DaySchedule | None, now: datetime) -> Session | None:
    if day is None or day.date != now.date():
        return None
    upcoming = [
        s for s in day.sessions if classify_session(s, day.date, now) is SessionStatus.UPCOMING
    ]
    # sorted() is stable: equal starts keep list order
    upcoming.sort(key=lambda s: s.time_span.start)
    return upcoming[0] if upcoming else None


Listener = Callable[["CurrentSessionTracker"], None]


class CurrentSessionTracker:
    """Tracks today's active and next session, refreshed on a periodic tick.

    The tick runs as an asyncio task on the caller's loop; ``stop()`` cancels
    it so a torn-down view does not leave a timer running.
    """

    def __init__(
        self,
        days: Sequence[DaySchedule],
        clock: ClockProvider,
        tick_seconds: float = 60.0,
    ):
        self.days = list(days)
        self.clock = clock
        self.tick_seconds = tick_seconds
        self.current_time: datetime = clock.now()
        self.today: date = self.current_time.date()
        self._listeners: List[Listener] = []
        self._task: asyncio.Task | None = None
        self.ticks = 0

    @property
    def today_schedule(self) -> DaySchedule | None:
        return find_day(self.days, self.today)

    @property
    def active_session(self) -> Session | None:
        return active_session(self.today_schedule, self.current_time)

    @property
    def next_session(self) -> Session | None:
        return next_session(self.today_schedule, self.current_time)

    def is_active(self, session: Session, on: date | str) -> bool:
        if _as_date(on) != self.today:
            return False
        return classify_session(session, on, self.current_time) is SessionStatus.ACTIVE

    def status_of(self, session: Session, on: date | str) -> SessionStatus | None:
        return classify_session(session, on, self.current_time)

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def refresh(self) -> None:
        self.current_time = self.clock.now()
        self.today = self.current_time.date()
        self.ticks += 1
        for listener in self._listeners:
            try:
                listener(self)
            except Exception:
                logging.getLogger(__name__).exception(
                    f"Listener {listener!r} failed on tick {self.ticks}"
                )

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def run(self, ticks: int | None = None) -> None:
        logger = logging.getLogger(__name__)
        done = 0
        while ticks is None or done < ticks:
            await asyncio.sleep(self.tick_seconds)
            self.refresh()
            done += 1
            logger.debug(f"Tick {self.ticks} at {self.current_time.isoformat()}")

    def start(self) -> asyncio.Task:
        if self.running:
            return self._task  # type: ignore[return-value]
        self._task = asyncio.get_running_loop().create_task(self.run())
        return self._task

    def stop(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None
