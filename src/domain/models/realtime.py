from __future__ import annotations

from dataclasses import dataclass

from .geo import GeoPoint


@dataclass(frozen=True, slots=True)
class VehiclePosition:
    """Latest snapshot of a live vehicle.

    Each poll produces a new object that fully replaces the previous one
    for the same `vehicle_id`.
    """

    vehicle_id: str
    location: GeoPoint
    route_id: str | None
    last_passed_stop_id: str | None
    line: str | None = None
    label: str | None = None
    destination: str | None = None
    deviation: str | None = None  # "+MM:SS" / "-HH:MM:SS"
    icon: str | None = None
