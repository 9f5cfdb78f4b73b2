from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class ServiceDayType(str, Enum):
    WEEKDAY = "weekday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"


DayMonth = tuple[int, int]


@dataclass(frozen=True, slots=True)
class ServiceDayCalendar:
    """Fixed (day, month) tables; the same dates apply every year."""

    holidays: frozenset[DayMonth]
    school_free_days: frozenset[DayMonth]


DEFAULT_CALENDAR = ServiceDayCalendar(
    holidays=frozenset(
        {
            (1, 1),
            (6, 1),
            (17, 4),
            (18, 4),
            (19, 4),
            (20, 4),
            (21, 4),
            (1, 5),
            (3, 5),
            (19, 6),
            (1, 11),
            (23, 12),
            (24, 12),
            (25, 12),
        }
    ),
    school_free_days=frozenset(
        {
            (26, 12),
            (27, 12),
            (30, 12),
            (31, 12),
            (2, 1),
            (3, 1),
            # winter break
            (3, 2),
            (4, 2),
            (5, 2),
            (6, 2),
            (7, 2),
            (10, 2),
            (11, 2),
            (12, 2),
            (13, 2),
            (14, 2),
            (22, 4),
        }
    ),
)


def classify_day(
    day: date, calendar: ServiceDayCalendar = DEFAULT_CALENDAR
) -> ServiceDayType:
    """Return the service day type for a calendar date.

    Holidays run Sunday service whatever the weekday, which also wins
    over the Saturday rule.
    """

    if (day.day, day.month) in calendar.holidays or day.isoweekday() == 7:
        return ServiceDayType.SUNDAY
    if day.isoweekday() == 6:
        return ServiceDayType.SATURDAY
    return ServiceDayType.WEEKDAY


def is_school_day(day: date, calendar: ServiceDayCalendar = DEFAULT_CALENDAR) -> bool:
    # Only meaningful for WEEKDAY service days.
    return (day.day, day.month) not in calendar.school_free_days
