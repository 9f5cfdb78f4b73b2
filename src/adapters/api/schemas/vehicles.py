from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from src.adapters.api.schemas.stops import GeoPointSchema


class VehicleSchema(BaseModel):
    vehicle_id: str
    location: GeoPointSchema
    route_id: str | None = None
    last_passed_stop_id: str | None = None
    line: str | None = None
    label: str | None = None
    destination: str | None = None
    deviation: str | None = None
    icon: str | None = None


class VehiclesResponseSchema(BaseModel):
    fetched_at: datetime
    vehicles: list[VehicleSchema]


class TrackingSchema(BaseModel):
    vehicle_id: str | None = None
    path: list[GeoPointSchema] = []
    remaining_distance_m: float | None = None
