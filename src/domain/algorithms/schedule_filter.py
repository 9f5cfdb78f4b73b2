from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Iterable

from src.domain.algorithms.service_calendar import (
    DEFAULT_CALENDAR,
    ServiceDayCalendar,
    ServiceDayType,
    classify_day,
    is_school_day,
)
from src.domain.models.timetable import (
    Departure,
    OperatingDays,
    SchoolRestriction,
    TimetableEntry,
)

DEFAULT_BOARD_LIMIT = 15

_OPERATING_DAYS_BY_TYPE: dict[ServiceDayType, OperatingDays] = {
    ServiceDayType.WEEKDAY: OperatingDays.WEEKDAY,
    ServiceDayType.SATURDAY: OperatingDays.SATURDAY,
    ServiceDayType.SUNDAY: OperatingDays.SUNDAY,
}


def parse_departure_time(raw: str) -> time | None:
    """Parse 'HH:MM' (24h). Returns None for anything else."""

    try:
        return datetime.strptime(raw.strip(), "%H:%M").time()
    except (AttributeError, TypeError, ValueError):
        return None


def _runs_on(
    entry: TimetableEntry, day: date, calendar: ServiceDayCalendar
) -> bool:
    day_type = classify_day(day, calendar)
    if entry.operating_days != _OPERATING_DAYS_BY_TYPE[day_type]:
        return False
    if day_type is not ServiceDayType.WEEKDAY:
        return True

    if entry.school_restriction is SchoolRestriction.FREE_DAY_ONLY:
        return not is_school_day(day, calendar)
    if entry.school_restriction is SchoolRestriction.SCHOOL_ONLY:
        return is_school_day(day, calendar)
    return True


def departures_on(
    timetable: Iterable[TimetableEntry],
    service_day: date,
    *,
    not_before: datetime | None = None,
    tzinfo=None,
    calendar: ServiceDayCalendar = DEFAULT_CALENDAR,
) -> list[Departure]:
    """Departures of one service day, sorted by concrete departure instant.

    Entries with an unparseable time are skipped. When `not_before` is
    given, departures strictly before it are dropped.
    """

    out: list[Departure] = []
    for entry in timetable:
        if not _runs_on(entry, service_day, calendar):
            continue
        clock = parse_departure_time(entry.departure_time)
        if clock is None:
            continue
        departs_at = datetime.combine(service_day, clock, tzinfo=tzinfo)
        if not_before is not None and departs_at < not_before:
            continue
        out.append(Departure(entry=entry, departs_at=departs_at))

    # list.sort is stable: equal times keep timetable order.
    out.sort(key=lambda d: d.departs_at)
    return out


def select_departures(
    timetable: Iterable[TimetableEntry],
    reference: datetime,
    limit: int = DEFAULT_BOARD_LIMIT,
    *,
    calendar: ServiceDayCalendar = DEFAULT_CALENDAR,
) -> list[Departure]:
    """Build the departure board for a stop.

    Upcoming departures of the reference day come first; if there are
    fewer than `limit`, the whole next service day is appended after
    them. The result is truncated to `limit`.
    """

    if limit <= 0:
        return []

    entries = tuple(timetable)
    board = departures_on(
        entries,
        reference.date(),
        not_before=reference,
        tzinfo=reference.tzinfo,
        calendar=calendar,
    )

    if len(board) < limit:
        next_day = (reference + timedelta(days=1)).date()
        board.extend(
            departures_on(
                entries, next_day, tzinfo=reference.tzinfo, calendar=calendar
            )
        )

    return board[:limit]
