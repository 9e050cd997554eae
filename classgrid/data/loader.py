from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List

from pydantic import ValidationError

from ..errors import ScheduleDataError
from ..models.session import DaySchedule, ScheduleDocument


def load_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def parse_schedule(raw: Any) -> List[DaySchedule]:
    # Accept {"schedule": [...]} or a bare list of days
    if isinstance(raw, list):
        raw = {"schedule": raw}
    try:
        doc = ScheduleDocument.model_validate(raw)
    except ValidationError as e:
        raise ScheduleDataError(f"Invalid schedule data: {e}") from e
    return doc.schedule


def load_schedule(path: Path) -> List[DaySchedule]:
    logger = logging.getLogger(__name__)
    try:
        raw = load_json(path)
    except FileNotFoundError as e:
        raise ScheduleDataError(f"Schedule file not found: {path}") from e
    except (OSError, json.JSONDecodeError) as e:
        raise ScheduleDataError(f"Cannot read schedule {path}: {e}") from e
    days = parse_schedule(raw)
    logger.info(
        f"Loaded {len(days)} days, {sum(len(d.sessions) for d in days)} sessions from {path}"
    )
    return days
