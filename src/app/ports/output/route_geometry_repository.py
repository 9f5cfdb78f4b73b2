from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models.route import RouteCheckpoint


class IRouteGeometryRepository(ABC):
    """Port for the ordered checkpoints of each route."""

    @abstractmethod
    def checkpoints_for(self, *, route_id: str) -> tuple[RouteCheckpoint, ...]:
        raise NotImplementedError
