from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class OperatingDays(str, Enum):
    """Weekly day-type a timetable entry runs on (stop_details.json codes)."""

    WEEKDAY = "mon_fri"
    SATURDAY = "sat"
    SUNDAY = "sun"


class SchoolRestriction(str, Enum):
    NONE = "none"
    SCHOOL_ONLY = "school_only"
    FREE_DAY_ONLY = "free_day_only"


@dataclass(frozen=True, slots=True)
class TimetableEntry:
    """One scheduled departure at a stop.

    `departure_time` is kept as the raw wall-clock text (HH:MM, no date);
    it is parsed only when a board is built so that a malformed value
    excludes that single entry instead of the whole timetable.
    """

    departure_time: str
    line: str
    destination: str
    operating_days: OperatingDays
    school_restriction: SchoolRestriction = SchoolRestriction.NONE


@dataclass(frozen=True, slots=True)
class Departure:
    entry: TimetableEntry
    departs_at: datetime
