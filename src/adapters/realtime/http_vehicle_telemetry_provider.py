from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

import httpx

from src.app.ports.output import IVehicleTelemetryProvider
from src.domain.models import GeoPoint, VehiclePosition


@dataclass(slots=True)
class HttpVehicleTelemetryProvider(IVehicleTelemetryProvider):
    """Fetches the ZPGSA bus feed (JSON list) over HTTP.

    Env vars:
      - VEHICLE_TELEMETRY_URL: URL returning the raw bus list
      - VEHICLE_TELEMETRY_TIMEOUT_S: request timeout (default 10)

    Notes:
      - If URL is not configured, returns an empty list.
      - No caching and no locking: concurrent polls each hit the upstream.
    """

    url: str | None = None
    timeout_s: float = 10.0

    def __post_init__(self) -> None:
        if self.url is None:
            self.url = os.getenv("VEHICLE_TELEMETRY_URL")
        if os.getenv("VEHICLE_TELEMETRY_TIMEOUT_S"):
            self.timeout_s = float(os.environ["VEHICLE_TELEMETRY_TIMEOUT_S"])

    async def list_vehicles(self) -> tuple[VehiclePosition, ...]:
        if not self.url:
            return ()

        async with httpx.AsyncClient(timeout=self.timeout_s) as client:
            resp = await client.get(self.url)
            resp.raise_for_status()
            payload = resp.json()

        return parse_zpgsa_buses(payload)


def format_deviation(deviation_ms: float) -> str:
    """Schedule deviation as '+MM:SS', or '+HH:MM:SS' from one hour up."""

    sign = "-" if deviation_ms < 0 else "+"
    total_s = int(abs(deviation_ms)) // 1000
    hours, rem = divmod(total_s, 3600)
    minutes, seconds = divmod(rem, 60)
    if hours > 0:
        return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"
    return f"{sign}{minutes:02d}:{seconds:02d}"


def deviation_icon(deviation_ms: float, *, control_man: bool = False) -> str:
    minutes = int(abs(deviation_ms)) // 60000
    if deviation_ms > 0:
        if control_man:
            return "bus-control-man"
        return "bus-late" if minutes >= 3 else "bus-on-time"
    return "bus-ahead" if minutes >= 1 else "bus-on-time"


def _first_token(raw: Any) -> str | None:
    parts = str(raw or "").split()
    return parts[0] if parts else None


def normalize_zpgsa_bus(raw: Mapping[str, Any]) -> VehiclePosition | None:
    """Map one raw feed record to a VehiclePosition; None if unusable."""

    vehicle_id = str(raw.get("id") or "").strip()
    if not vehicle_id:
        return None

    try:
        location = GeoPoint(lat=float(raw["lat"]), lon=float(raw["lon"]))
        deviation_ms = float(raw.get("deviation") or 0)
    except (TypeError, ValueError, KeyError):
        return None

    # "1234-A XYZ" -> "1234"
    label_token = _first_token(raw.get("label"))
    label = label_token.split("-")[0] if label_token else None

    return VehiclePosition(
        vehicle_id=vehicle_id,
        location=location,
        route_id=str(raw.get("route") or "").strip() or None,
        last_passed_stop_id=_first_token(raw.get("latestRouteStop")),
        line=str(raw.get("line") or "").strip() or None,
        label=label or None,
        destination=str(raw.get("destination") or "").strip() or None,
        deviation=format_deviation(deviation_ms),
        icon=deviation_icon(deviation_ms, control_man=bool(raw.get("controlMan"))),
    )


def parse_zpgsa_buses(payload: Any) -> tuple[VehiclePosition, ...]:
    if not isinstance(payload, list):
        return ()

    out: list[VehiclePosition] = []
    for raw in payload:
        if not isinstance(raw, Mapping):
            continue
        vehicle = normalize_zpgsa_bus(raw)
        if vehicle is not None:
            out.append(vehicle)
    return tuple(out)
