from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class GeoPointSchema(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lon: float = Field(..., ge=-180.0, le=180.0)


class StopSchema(BaseModel):
    stop_id: str
    name: str
    city: str | None = None
    location: GeoPointSchema


class DepartureSchema(BaseModel):
    time: str
    line: str
    destination: str
    operating_days: Literal["mon_fri", "sat", "sun"]
    school_restriction: Literal["none", "school_only", "free_day_only"]
    departs_at: datetime


class DeparturesResponseSchema(BaseModel):
    stop_id: str
    reference: datetime
    departures: list[DepartureSchema]
