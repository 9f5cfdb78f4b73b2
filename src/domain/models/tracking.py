from __future__ import annotations

from dataclasses import dataclass

from .geo import GeoPoint


@dataclass(frozen=True, slots=True)
class Idle:
    """No vehicle has a projected path."""


@dataclass(frozen=True, slots=True)
class Tracking:
    vehicle_id: str
    path: tuple[GeoPoint, ...] = ()


TrackedRouteState = Idle | Tracking

IDLE = Idle()
