from .realtime_vehicle_provider import IVehicleTelemetryProvider
from .route_geometry_repository import IRouteGeometryRepository
from .stop_repository import IStopRepository
from .timetable_repository import ITimetableRepository

__all__ = [
    "ITimetableRepository",
    "IStopRepository",
    "IRouteGeometryRepository",
    "IVehicleTelemetryProvider",
]
