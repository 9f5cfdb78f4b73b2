from __future__ import annotations

import logging
from dataclasses import dataclass, field

from src.app.ports.output import IRouteGeometryRepository, IStopRepository
from src.app.services.vehicle_registry import VehicleRegistry
from src.domain.algorithms.route_projector import project_path
from src.domain.algorithms.route_slicer import slice_ahead
from src.domain.exceptions import UnknownVehicle
from src.domain.models import GeoPoint, VehiclePosition
from src.domain.models.tracking import IDLE, TrackedRouteState, Tracking

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class VehicleTrackingService:
    """Keeps the projected path of the one vehicle the user is tracking.

    States: Idle -> Tracking(vehicle) on `start`, back to Idle on `stop`.
    Position updates for the tracked vehicle rebuild its path. `state` is
    only ever replaced as a whole, so readers never see a half-built path.
    """

    registry: VehicleRegistry
    route_repository: IRouteGeometryRepository
    stop_repository: IStopRepository
    state: TrackedRouteState = field(default=IDLE)

    def build_path(self, vehicle: VehiclePosition) -> tuple[GeoPoint, ...]:
        checkpoints = (
            self.route_repository.checkpoints_for(route_id=vehicle.route_id)
            if vehicle.route_id
            else ()
        )
        ahead = slice_ahead(checkpoints, vehicle.last_passed_stop_id)
        return tuple(project_path(vehicle, ahead, self.stop_repository.location_of))

    def start(self, vehicle_id: str) -> Tracking:
        # Drop the old path before building the new one; they never mix.
        self.state = IDLE

        vehicle = self.registry.get(vehicle_id)
        if vehicle is None:
            raise UnknownVehicle(f"Unknown vehicle: {vehicle_id}")

        tracking = Tracking(vehicle_id=vehicle_id, path=self.build_path(vehicle))
        self.state = tracking
        logger.info(
            "Tracking vehicle %s (%d path points)", vehicle_id, len(tracking.path)
        )
        return tracking

    def stop(self) -> None:
        if isinstance(self.state, Tracking):
            logger.info("Stopped tracking vehicle %s", self.state.vehicle_id)
        self.state = IDLE

    def on_position_update(self, vehicle: VehiclePosition) -> None:
        current = self.state
        if not isinstance(current, Tracking):
            return
        if current.vehicle_id != vehicle.vehicle_id:
            return
        refreshed = Tracking(
            vehicle_id=vehicle.vehicle_id, path=self.build_path(vehicle)
        )
        # A start/stop that landed during the build wins over this refresh.
        if self.state is current:
            self.state = refreshed
