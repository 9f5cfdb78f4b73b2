from __future__ import annotations

import asyncio
import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.stops import router as stops_router
from src.adapters.api.controllers.vehicles import router as vehicles_router
from src.adapters.api.dependencies import get_vehicle_poller


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run the vehicle poller for as long as the app is up.

    Only started when a telemetry URL is configured; without one the
    board endpoints still work and /vehicles stays empty.
    """

    poller = get_vehicle_poller()
    task: asyncio.Task[None] | None = None
    if os.getenv("VEHICLE_TELEMETRY_URL"):
        task = asyncio.create_task(poller.run())
    try:
        yield
    finally:
        if task is not None:
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)
        await poller.aclose()


app = FastAPI(title="StopBoard", lifespan=lifespan)
app.include_router(stops_router)
app.include_router(vehicles_router)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Ensure API errors are JSON so the map frontend can display them."""

    logging.getLogger("uvicorn.error").exception(
        "Unhandled exception", extra={"path": str(request.url.path)}
    )

    reveal = (os.getenv("TRANSIT_REVEAL_ERRORS") or "").strip().lower() in {
        "1",
        "true",
        "yes",
        "on",
    }

    if reveal or isinstance(exc, (FileNotFoundError, ValueError)):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
