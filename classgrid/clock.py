"""Clock providers for the fixed institution timezone.

The status layer never reads the wall clock directly; it is handed a
``ClockProvider``. ``resolve_clock`` picks one with the precedence
explicit override > persisted override > real clock.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from pathlib import Path
from typing import Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import ClockOverrideError, TimezoneError

DEFAULT_TZ = "Asia/Jakarta"  # GMT+7

logger = logging.getLogger(__name__)


def zone(tz: str) -> ZoneInfo:
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise TimezoneError(f"Unknown timezone {tz!r}") from e


class ClockProvider(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    def __init__(self, tz: str = DEFAULT_TZ):
        self.tz = zone(tz)

    def now(self) -> datetime:
        return datetime.now(self.tz)


class FixedClock:
    def __init__(self, moment: datetime):
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


class OffsetClock:
    """Real clock shifted by a fixed offset; keeps ticking."""

    def __init__(self, offset: timedelta, base: ClockProvider | None = None):
        self.offset = offset
        self.base = base or SystemClock()

    def now(self) -> datetime:
        return self.base.now() + self.offset


@dataclass(frozen=True)
class ClockOverride:
    date: str  # YYYY-MM-DD
    time: str = "00:00"  # HH:MM

    def to_datetime(self, tz: str = DEFAULT_TZ) -> datetime:
        # Wall-clock time in the institution timezone
        try:
            d = date.fromisoformat(self.date)
            t = time.fromisoformat(self.time or "00:00")
        except ValueError as e:
            raise ClockOverrideError(f"Invalid mock date/time {self.date!r} {self.time!r}") from e
        return datetime.combine(d, t, tzinfo=zone(tz))


class MockDateStore:
    """Persists a clock override as JSON between runs."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> ClockOverride | None:
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable mock date file {self.path}: {e}")
            return None
        if not isinstance(data, dict) or not data.get("mockDate"):
            return None
        return ClockOverride(data["mockDate"], data.get("mockTime") or "00:00")

    def save(self, override: ClockOverride) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"mockDate": override.date, "mockTime": override.time}
        with self.path.open("w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
        logger.info(f"Mock date set to {override.date} {override.time}")

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()
        logger.info("Mock date cleared; using real time")


def resolve_clock(
    tz: str = DEFAULT_TZ,
    *,
    explicit: ClockOverride | None = None,
    store: MockDateStore | None = None,
) -> ClockProvider:
    if explicit is not None:
        moment = explicit.to_datetime(tz)
        if store is not None:
            store.save(explicit)
        logger.info(f"Mock date enabled (explicit): {moment.isoformat()}")
        return FixedClock(moment)
    persisted = store.load() if store is not None else None
    if persisted is not None:
        moment = persisted.to_datetime(tz)
        logger.info(f"Mock date enabled (persisted): {moment.isoformat()}")
        return FixedClock(moment)
    return SystemClock(tz)
