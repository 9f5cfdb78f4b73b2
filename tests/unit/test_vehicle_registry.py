from __future__ import annotations

from src.app.services.vehicle_registry import VehicleRegistry
from src.domain.models import GeoPoint, VehiclePosition


def _vehicle(vehicle_id: str, lat: float) -> VehiclePosition:
    return VehiclePosition(
        vehicle_id=vehicle_id,
        location=GeoPoint(lat=lat, lon=16.6),
        route_id="R1",
        last_passed_stop_id="A",
    )


def test_last_applied_snapshot_wins_per_vehicle() -> None:
    registry = VehicleRegistry()

    registry.apply([_vehicle("v1", 50.1), _vehicle("v2", 50.2)])
    registry.apply([_vehicle("v1", 50.3)])

    assert registry.get("v1") == _vehicle("v1", 50.3)
    # Missing from the second response: previous snapshot kept.
    assert registry.get("v2") == _vehicle("v2", 50.2)
    assert registry.get("v3") is None
    assert len(registry.list_vehicles()) == 2


def test_older_response_landing_late_still_overwrites() -> None:
    registry = VehicleRegistry()
    newer = _vehicle("v1", 50.9)
    older = _vehicle("v1", 50.1)

    registry.apply([newer])
    registry.apply([older])

    assert registry.get("v1") == older
