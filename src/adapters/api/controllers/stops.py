from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query

from src.adapters.api.dependencies import (
    get_schedule_board_service,
    get_stop_repository,
)
from src.adapters.api.schemas.stops import (
    DepartureSchema,
    DeparturesResponseSchema,
    GeoPointSchema,
    StopSchema,
)
from src.app.ports.output import IStopRepository
from src.app.services.schedule_board_service import ScheduleBoardService
from src.domain.exceptions import UnknownStop

router = APIRouter(prefix="/stops", tags=["stops"])


@router.get("", response_model=list[StopSchema])
def list_stops(
    repository: IStopRepository = Depends(get_stop_repository),
) -> list[StopSchema]:
    return [
        StopSchema(
            stop_id=s.id,
            name=s.name,
            city=s.city,
            location=GeoPointSchema(lat=s.location.lat, lon=s.location.lon),
        )
        for s in repository.list_stops()
    ]


@router.get("/{stop_id}/departures", response_model=DeparturesResponseSchema)
def get_departures(
    stop_id: str,
    limit: int | None = Query(default=None, ge=1, le=100),
    at: datetime | None = Query(default=None),
    service: ScheduleBoardService = Depends(get_schedule_board_service),
) -> DeparturesResponseSchema:
    reference = service.resolve_reference(at)
    try:
        departures = service.board(stop_id=stop_id, at=reference, limit=limit)
    except UnknownStop as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    return DeparturesResponseSchema(
        stop_id=stop_id,
        reference=reference,
        departures=[
            DepartureSchema(
                time=d.entry.departure_time.strip(),
                line=d.entry.line,
                destination=d.entry.destination,
                operating_days=d.entry.operating_days.value,
                school_restriction=d.entry.school_restriction.value,
                departs_at=d.departs_at,
            )
            for d in departures
        ],
    )
