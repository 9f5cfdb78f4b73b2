from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import GeoPoint, Stop


class IStopRepository(ABC):
    """Port for stop metadata and the stop-coordinate lookup."""

    @abstractmethod
    def list_stops(self) -> tuple[Stop, ...]:
        raise NotImplementedError

    @abstractmethod
    def location_of(self, stop_id: str) -> GeoPoint | None:
        raise NotImplementedError
