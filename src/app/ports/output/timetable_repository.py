from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models.timetable import TimetableEntry


class ITimetableRepository(ABC):
    """Port for the per-stop timetable source."""

    @abstractmethod
    def timetable_for(self, *, stop_id: str) -> tuple[TimetableEntry, ...] | None:
        """Return every entry of a stop, or None if the stop is unknown."""
