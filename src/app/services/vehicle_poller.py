from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass, field

import httpx

from src.app.ports.output import IVehicleTelemetryProvider
from src.app.services.vehicle_registry import VehicleRegistry
from src.app.services.vehicle_tracking_service import VehicleTrackingService

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class VehiclePoller:
    """Refreshes vehicle positions on a fixed timer.

    A tick is started every `interval_s` whether or not the previous one
    has finished. Overlapping fetches are not deduplicated or cancelled;
    each completed fetch is applied to the registry as it lands.

    Env vars:
      - VEHICLE_POLL_INTERVAL_S: seconds between ticks (default 0.5)
    """

    provider: IVehicleTelemetryProvider
    registry: VehicleRegistry
    tracking: VehicleTrackingService | None = None
    interval_s: float = 0.5

    _inflight: set[asyncio.Task[None]] = field(
        default_factory=set, init=False, repr=False
    )

    def __post_init__(self) -> None:
        if os.getenv("VEHICLE_POLL_INTERVAL_S"):
            self.interval_s = float(os.environ["VEHICLE_POLL_INTERVAL_S"])

    async def tick(self) -> None:
        try:
            vehicles = await self.provider.list_vehicles()
        except (httpx.HTTPError, ValueError) as exc:
            # Keep the previous snapshots until a later tick succeeds.
            logger.warning("Vehicle telemetry fetch failed: %s", exc)
            return

        self.registry.apply(vehicles)
        if self.tracking is not None:
            for v in vehicles:
                self.tracking.on_position_update(v)

    def _spawn(self) -> None:
        task = asyncio.create_task(self.tick())
        self._inflight.add(task)
        task.add_done_callback(self._on_tick_done)

    def _on_tick_done(self, task: asyncio.Task[None]) -> None:
        self._inflight.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Vehicle poll tick failed", exc_info=exc)

    async def run(self, *, max_ticks: int | None = None) -> None:
        ticks = 0
        while max_ticks is None or ticks < max_ticks:
            self._spawn()
            ticks += 1
            await asyncio.sleep(self.interval_s)

    async def drain(self) -> None:
        """Wait for ticks that are still in flight."""

        if self._inflight:
            await asyncio.gather(*self._inflight, return_exceptions=True)

    async def aclose(self) -> None:
        for task in tuple(self._inflight):
            task.cancel()
        await self.drain()
