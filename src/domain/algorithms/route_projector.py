from __future__ import annotations

from typing import Callable, Sequence

from src.domain.models.geo import GeoPoint
from src.domain.models.realtime import VehiclePosition
from src.domain.models.route import RouteCheckpoint

StopLocationLookup = Callable[[str], GeoPoint | None]


def resolve_stop_location(
    lookup: StopLocationLookup, stop_id: str
) -> GeoPoint | None:
    """Resolve a stop id to a location, treating (0, 0) as unresolved."""

    location = lookup(stop_id)
    if location is None or location.is_origin:
        return None
    return location


def project_path(
    vehicle: VehiclePosition,
    ahead: Sequence[RouteCheckpoint],
    lookup: StopLocationLookup,
) -> list[GeoPoint]:
    """Polyline from the vehicle through every remaining stop.

    The first point is always the vehicle itself. Stops that cannot be
    resolved are left out of the path.
    """

    path: list[GeoPoint] = [vehicle.location]
    for checkpoint in ahead:
        location = resolve_stop_location(lookup, checkpoint.stop_id)
        if location is None:
            continue
        path.append(location)
    return path
