from __future__ import annotations

from functools import lru_cache

from src.adapters.persistence import (
    LocalRouteGeometryRepository,
    LocalStopRepository,
    LocalTimetableRepository,
)
from src.adapters.realtime.http_vehicle_telemetry_provider import (
    HttpVehicleTelemetryProvider,
)
from src.app.services.schedule_board_service import ScheduleBoardService
from src.app.services.vehicle_poller import VehiclePoller
from src.app.services.vehicle_registry import VehicleRegistry
from src.app.services.vehicle_tracking_service import VehicleTrackingService

# Registry, tracking state and poller are process-wide; everything else is
# cheap to share as well since the JSON files are read once per repository.


@lru_cache(maxsize=1)
def get_stop_repository() -> LocalStopRepository:
    return LocalStopRepository()


@lru_cache(maxsize=1)
def get_schedule_board_service() -> ScheduleBoardService:
    return ScheduleBoardService(timetable_repository=LocalTimetableRepository())


@lru_cache(maxsize=1)
def get_vehicle_registry() -> VehicleRegistry:
    return VehicleRegistry()


@lru_cache(maxsize=1)
def get_tracking_service() -> VehicleTrackingService:
    return VehicleTrackingService(
        registry=get_vehicle_registry(),
        route_repository=LocalRouteGeometryRepository(),
        stop_repository=get_stop_repository(),
    )


@lru_cache(maxsize=1)
def get_vehicle_poller() -> VehiclePoller:
    return VehiclePoller(
        provider=HttpVehicleTelemetryProvider(),
        registry=get_vehicle_registry(),
        tracking=get_tracking_service(),
    )
