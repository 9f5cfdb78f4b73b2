from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from src.domain.models.realtime import VehiclePosition


@dataclass(slots=True)
class VehicleRegistry:
    """Latest known snapshot per vehicle id.

    Poll responses may complete out of order; whichever is applied last
    wins for each vehicle. Vehicles missing from a response keep their
    previous snapshot.
    """

    _by_id: dict[str, VehiclePosition] = field(default_factory=dict)

    def apply(self, vehicles: Iterable[VehiclePosition]) -> None:
        for v in vehicles:
            self._by_id[v.vehicle_id] = v

    def get(self, vehicle_id: str) -> VehiclePosition | None:
        return self._by_id.get(vehicle_id)

    def list_vehicles(self) -> tuple[VehiclePosition, ...]:
        return tuple(self._by_id.values())
