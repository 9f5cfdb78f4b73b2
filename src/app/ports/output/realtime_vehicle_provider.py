from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models.realtime import VehiclePosition


class IVehicleTelemetryProvider(ABC):
    """Port for obtaining normalized live vehicle positions."""

    @abstractmethod
    async def list_vehicles(self) -> tuple[VehiclePosition, ...]:
        raise NotImplementedError
