"""Pydantic models for the schedule document.

Schedule data arrives as JSON and is validated once, at load time. Sessions
keep any extra keys the source carries so the render layer can use them.
"""

from __future__ import annotations

import datetime as dt
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..timemath import TimeRange, parse_time_range


class Session(BaseModel):
    """A scheduled activity: a title and a human-entered time range."""

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    title: str
    time_range: str = Field(default="", alias="timeRange")  # "07:30 - 09:20"
    code: str | None = None  # material code, e.g. "CTR"
    lecturer: str | None = None
    room: str | None = None

    @field_validator("time_range", mode="before")
    @classmethod
    def _none_is_blank(cls, value):
        # null in the source means "no time yet"
        return "" if value is None else value

    @property
    def time_span(self) -> TimeRange:
        return parse_time_range(self.time_range)


class DaySchedule(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: dt.date
    day: str
    sessions: List[Session] = Field(default_factory=list)


class ScheduleDocument(BaseModel):
    schedule: List[DaySchedule] = Field(default_factory=list)
