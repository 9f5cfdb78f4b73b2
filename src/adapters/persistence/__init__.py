from .local_route_geometry_repository import LocalRouteGeometryRepository
from .local_stop_repository import LocalStopRepository
from .local_timetable_repository import LocalTimetableRepository

__all__ = [
    "LocalRouteGeometryRepository",
    "LocalStopRepository",
    "LocalTimetableRepository",
]
