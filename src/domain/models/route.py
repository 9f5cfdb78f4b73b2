from __future__ import annotations

from dataclasses import dataclass

from .geo import GeoPoint


@dataclass(frozen=True, slots=True)
class RouteCheckpoint:
    """One ordered waypoint of a route, tied to a physical stop.

    `sequence_order` increases along the direction of travel. Some feeds
    send it as text, so consumers compare it numerically.
    """

    id: str
    stop_id: str
    sequence_order: int | str
    location: GeoPoint | None = None
