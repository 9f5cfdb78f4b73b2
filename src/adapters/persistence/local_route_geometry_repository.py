from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from src.adapters.persistence.local_json import data_dir, read_json, text
from src.app.ports.output import IRouteGeometryRepository
from src.domain.models import GeoPoint, RouteCheckpoint


@dataclass(slots=True)
class LocalRouteGeometryRepository(IRouteGeometryRepository):
    """Reads routes.json: {"<route_id>": [{"id", "stop_id", "order", "lat", "lon"}]}.

    Checkpoints are returned in file order; the slicer compares
    `sequence_order` itself.
    """

    base_path: str | Path | None = None

    _by_route: dict[str, tuple[RouteCheckpoint, ...]] | None = field(
        default=None, init=False, repr=False
    )

    def _load(self) -> dict[str, tuple[RouteCheckpoint, ...]]:
        if self._by_route is not None:
            return self._by_route

        by_route: dict[str, tuple[RouteCheckpoint, ...]] = {}
        raw = read_json(data_dir(self.base_path) / "routes.json") or {}
        for route_id, rows in raw.items():
            checkpoints: list[RouteCheckpoint] = []
            for i, row in enumerate(rows or ()):
                stop_id = text(row.get("stop_id"))
                order = row.get("order")
                if not stop_id or order is None:
                    continue
                try:
                    location = GeoPoint(lat=float(row["lat"]), lon=float(row["lon"]))
                except (TypeError, ValueError, KeyError):
                    location = None
                checkpoints.append(
                    RouteCheckpoint(
                        id=text(row.get("id")) or f"{route_id}:{i}",
                        stop_id=stop_id,
                        sequence_order=order,
                        location=location,
                    )
                )
            by_route[str(route_id)] = tuple(checkpoints)

        self._by_route = by_route
        return by_route

    def checkpoints_for(self, *, route_id: str) -> tuple[RouteCheckpoint, ...]:
        return self._load().get(route_id, ())
