from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from zoneinfo import ZoneInfo

from src.app.ports.output import ITimetableRepository
from src.domain.algorithms.schedule_filter import DEFAULT_BOARD_LIMIT, select_departures
from src.domain.algorithms.service_calendar import DEFAULT_CALENDAR, ServiceDayCalendar
from src.domain.exceptions import UnknownStop
from src.domain.models.timetable import Departure


@dataclass(slots=True)
class ScheduleBoardService:
    """Upcoming departures for a stop, computed on demand.

    Env vars:
      - SERVICE_TIMEZONE: IANA zone used for "now" (default: naive local time)
      - BOARD_LIMIT: default number of departures per board (default 15)
    """

    timetable_repository: ITimetableRepository
    timezone: str | None = None
    limit: int = DEFAULT_BOARD_LIMIT
    calendar: ServiceDayCalendar = DEFAULT_CALENDAR

    def __post_init__(self) -> None:
        if self.timezone is None:
            self.timezone = (os.getenv("SERVICE_TIMEZONE") or "").strip() or None
        if os.getenv("BOARD_LIMIT"):
            self.limit = int(os.environ["BOARD_LIMIT"])

    def now(self) -> datetime:
        if self.timezone:
            return datetime.now(ZoneInfo(self.timezone))
        return datetime.now()

    def resolve_reference(self, at: datetime | None = None) -> datetime:
        reference = at or self.now()
        if self.timezone:
            # Service days are local to the network, not to the caller.
            zone = ZoneInfo(self.timezone)
            if reference.tzinfo is None:
                return reference.replace(tzinfo=zone)
            return reference.astimezone(zone)
        return reference

    def board(
        self,
        *,
        stop_id: str,
        at: datetime | None = None,
        limit: int | None = None,
    ) -> list[Departure]:
        timetable = self.timetable_repository.timetable_for(stop_id=stop_id)
        if timetable is None:
            raise UnknownStop(f"Unknown stop: {stop_id}")

        reference = self.resolve_reference(at)
        return select_departures(
            timetable,
            reference,
            self.limit if limit is None else limit,
            calendar=self.calendar,
        )
