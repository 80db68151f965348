"""Arena endpoints: read-only state and simulation controls."""

import logging
from typing import Optional

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse

from backend.models import CommandResponse, StatePayload, StatsPayload, StepRequest
from backend.simulation_runner import SimulationRunner

logger = logging.getLogger(__name__)

COMMANDS = ("pause", "resume", "reset", "step")


def setup_router(runner: SimulationRunner) -> APIRouter:
    """Create the arena router bound to one runner.

    Endpoints:
        GET  /api/state
        GET  /api/stats
        POST /api/control/{command}

    Runner calls wait on the simulation lock, so they go through the
    runner's executor wrappers rather than running on the event loop.
    """
    router = APIRouter(prefix="/api", tags=["arena"])

    @router.get("/state", response_model=StatePayload)
    async def get_state():
        """Every live agent with its kind and position."""
        return await runner.get_state_async()

    @router.get("/stats", response_model=StatsPayload)
    async def get_stats():
        """Population counts and conversion totals."""
        return await runner.get_stats_async()

    @router.post("/control/{command}", response_model=CommandResponse)
    async def control(command: str, body: Optional[StepRequest] = Body(default=None)):
        """Pause, resume, reset or step the simulation.

        ``step`` accepts ``{"frames": n, "dt": seconds}``; out-of-range
        values are rejected with 422 before the simulation is touched.
        """
        if command not in COMMANDS:
            return JSONResponse(
                {"error": f"Unknown command: {command}", "commands": list(COMMANDS)},
                status_code=404,
            )
        data = body.model_dump(exclude_none=True) if body is not None else None
        return await runner.handle_command_async(command, data)

    return router
