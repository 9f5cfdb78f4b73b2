from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from src.adapters.persistence.local_json import data_dir, read_json, text
from src.app.ports.output import IStopRepository
from src.domain.models import GeoPoint, Stop


@dataclass(slots=True)
class LocalStopRepository(IStopRepository):
    """Reads stops.json: [{"id", "name", "city", "lat", "lon"}, ...]."""

    base_path: str | Path | None = None

    _stops_by_id: dict[str, Stop] | None = field(default=None, init=False, repr=False)

    def _load(self) -> dict[str, Stop]:
        if self._stops_by_id is not None:
            return self._stops_by_id

        stops_by_id: dict[str, Stop] = {}
        for row in read_json(data_dir(self.base_path) / "stops.json") or ():
            stop_id = text(row.get("id"))
            if not stop_id:
                continue
            try:
                location = GeoPoint(lat=float(row["lat"]), lon=float(row["lon"]))
            except (TypeError, ValueError, KeyError):
                continue
            stops_by_id[stop_id] = Stop(
                id=stop_id,
                name=text(row.get("name")) or stop_id,
                city=text(row.get("city")),
                location=location,
            )

        self._stops_by_id = stops_by_id
        return stops_by_id

    def list_stops(self) -> tuple[Stop, ...]:
        stops = list(self._load().values())
        stops.sort(key=lambda s: (s.city or "", s.name, s.id))
        return tuple(stops)

    def location_of(self, stop_id: str) -> GeoPoint | None:
        stop = self._load().get(stop_id)
        return stop.location if stop is not None else None
