from .geo import GeoPoint
from .realtime import VehiclePosition
from .route import RouteCheckpoint
from .stop import Stop
from .timetable import Departure, OperatingDays, SchoolRestriction, TimetableEntry
from .tracking import IDLE, Idle, TrackedRouteState, Tracking

__all__ = [
    "GeoPoint",
    "VehiclePosition",
    "RouteCheckpoint",
    "Stop",
    "Departure",
    "OperatingDays",
    "SchoolRestriction",
    "TimetableEntry",
    "IDLE",
    "Idle",
    "TrackedRouteState",
    "Tracking",
]
