from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException

from src.adapters.api.dependencies import get_tracking_service, get_vehicle_registry
from src.adapters.api.schemas.stops import GeoPointSchema
from src.adapters.api.schemas.vehicles import (
    TrackingSchema,
    VehicleSchema,
    VehiclesResponseSchema,
)
from src.app.services.vehicle_registry import VehicleRegistry
from src.app.services.vehicle_tracking_service import VehicleTrackingService
from src.domain.algorithms.geo_utils import path_length_m
from src.domain.exceptions import UnknownVehicle
from src.domain.models import TrackedRouteState, Tracking

router = APIRouter(tags=["vehicles"])


def _tracking_to_schema(state: TrackedRouteState) -> TrackingSchema:
    if not isinstance(state, Tracking):
        return TrackingSchema()
    return TrackingSchema(
        vehicle_id=state.vehicle_id,
        path=[GeoPointSchema(lat=p.lat, lon=p.lon) for p in state.path],
        remaining_distance_m=path_length_m(state.path),
    )


@router.get("/vehicles", response_model=VehiclesResponseSchema)
def list_vehicles(
    registry: VehicleRegistry = Depends(get_vehicle_registry),
) -> VehiclesResponseSchema:
    return VehiclesResponseSchema(
        fetched_at=datetime.now(timezone.utc),
        vehicles=[
            VehicleSchema(
                vehicle_id=v.vehicle_id,
                location=GeoPointSchema(lat=v.location.lat, lon=v.location.lon),
                route_id=v.route_id,
                last_passed_stop_id=v.last_passed_stop_id,
                line=v.line,
                label=v.label,
                destination=v.destination,
                deviation=v.deviation,
                icon=v.icon,
            )
            for v in registry.list_vehicles()
        ],
    )


@router.get("/tracking", response_model=TrackingSchema)
async def get_tracking(
    service: VehicleTrackingService = Depends(get_tracking_service),
) -> TrackingSchema:
    return _tracking_to_schema(service.state)


@router.put("/tracking/{vehicle_id}", response_model=TrackingSchema)
async def start_tracking(
    vehicle_id: str,
    service: VehicleTrackingService = Depends(get_tracking_service),
) -> TrackingSchema:
    try:
        state = service.start(vehicle_id)
    except UnknownVehicle as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _tracking_to_schema(state)


@router.delete("/tracking", response_model=TrackingSchema)
async def stop_tracking(
    service: VehicleTrackingService = Depends(get_tracking_service),
) -> TrackingSchema:
    service.stop()
    return _tracking_to_schema(service.state)
