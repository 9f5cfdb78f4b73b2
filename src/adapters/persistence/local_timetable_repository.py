from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from src.adapters.persistence.local_json import data_dir, read_json, text
from src.app.ports.output import ITimetableRepository
from src.domain.models.timetable import (
    OperatingDays,
    SchoolRestriction,
    TimetableEntry,
)


def _parse_entry(row: Mapping[str, Any]) -> TimetableEntry | None:
    try:
        operating_days = OperatingDays(str(row["operating_days"]).strip())
        restriction = SchoolRestriction(
            str(row.get("school_restriction") or "none").strip()
        )
    except (KeyError, ValueError):
        return None

    # The time is validated later, when a board is built.
    return TimetableEntry(
        departure_time=str(row.get("time") or ""),
        line=text(row.get("line")) or "",
        destination=text(row.get("destination")) or "",
        operating_days=operating_days,
        school_restriction=restriction,
    )


@dataclass(slots=True)
class LocalTimetableRepository(ITimetableRepository):
    """Reads stop timetables from stop_details.json.

    Shape: {"<stop_id>": {"id": "<stop_id>", "buses": [{"time": "08:15",
    "line": "1", "destination": "...", "operating_days": "mon_fri",
    "school_restriction": "none"}, ...]}, ...}
    """

    base_path: str | Path | None = None

    _by_stop: dict[str, tuple[TimetableEntry, ...]] | None = field(
        default=None, init=False, repr=False
    )

    def _load(self) -> dict[str, tuple[TimetableEntry, ...]]:
        if self._by_stop is not None:
            return self._by_stop

        raw = read_json(data_dir(self.base_path) / "stop_details.json")
        by_stop: dict[str, tuple[TimetableEntry, ...]] = {}
        for stop_id, details in (raw or {}).items():
            if not isinstance(details, Mapping):
                continue
            entries: list[TimetableEntry] = []
            for row in details.get("buses") or ():
                if not isinstance(row, Mapping):
                    continue
                entry = _parse_entry(row)
                if entry is not None:
                    entries.append(entry)
            by_stop[str(stop_id)] = tuple(entries)

        self._by_stop = by_stop
        return by_stop

    def timetable_for(self, *, stop_id: str) -> tuple[TimetableEntry, ...] | None:
        return self._load().get(stop_id)
