"""Application factory and context for the RPS Arena API.

We use an AppContext dataclass to hold all runtime state instead of
module-level globals, so each test gets a fresh context and the app has
no import-time side effects beyond the default instance in ``main``.

Usage:
------
    # For production (settings from environment)
    app = create_app()

    # For testing (custom configuration)
    context = AppContext(seed=7, start_paused=True)
    app = create_app(context=context)
"""

import logging
import os
import time
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.logging_config import configure_logging
from backend.simulation_runner import SimulationRunner
from rps.config.simulation_config import SimulationConfig

DEFAULT_API_PORT = 8000


def _env_seed() -> Optional[int]:
    raw = os.getenv("RPS_SEED")
    return int(raw) if raw else None


@dataclass
class AppContext:
    """Runtime context holding all application state."""

    config: SimulationConfig = field(default_factory=SimulationConfig)
    seed: Optional[int] = field(default_factory=_env_seed)
    start_paused: bool = False

    api_port: int = field(
        default_factory=lambda: int(os.getenv("RPS_API_PORT", str(DEFAULT_API_PORT)))
    )
    production_mode: bool = field(
        default_factory=lambda: os.getenv("PRODUCTION", "false").lower() == "true"
    )
    allowed_origins: list = field(
        default_factory=lambda: os.getenv("ALLOWED_ORIGINS", "*").split(",")
    )

    server_start_time: float = field(default_factory=time.time)
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("backend"))

    # Created by create_app()
    runner: Optional[SimulationRunner] = None


def create_app(
    *,
    production_mode: Optional[bool] = None,
    context: Optional[AppContext] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        production_mode: Override production mode (default: from PRODUCTION env var)
        context: Pre-configured AppContext (for testing). If None, creates a new one.

    Returns:
        Configured FastAPI application with context attached as app.state.context
    """
    logger = configure_logging(extra_loggers=("backend", "rps"))

    if context is None:
        context = AppContext()
    if production_mode is not None:
        context.production_mode = production_mode
    context.logger = logger

    if context.runner is None:
        context.runner = SimulationRunner(context.config, seed=context.seed)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Start the simulation thread on startup and stop it on shutdown."""
        ctx = app.state.context
        ctx.runner.start(start_paused=ctx.start_paused)
        ctx.logger.info("LIFESPAN: Simulation runner started (paused=%s)", ctx.start_paused)
        try:
            yield
        finally:
            ctx.logger.info("LIFESPAN: Stopping simulation runner")
            ctx.runner.stop()

    app = FastAPI(
        title="RPS Arena Simulation API",
        lifespan=lifespan,
        docs_url=None if context.production_mode else "/docs",
        redoc_url=None if context.production_mode else "/redoc",
    )
    app.state.context = context

    app.add_middleware(
        CORSMiddleware,
        allow_origins=context.allowed_origins if context.production_mode else ["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    _setup_routers(app, context)
    return app


def _setup_routers(app: FastAPI, ctx: AppContext) -> None:
    """Setup and include all API routers."""
    from backend.routers import arena

    @app.get("/health")
    async def health():
        return {
            "status": "ok",
            "uptime_seconds": time.time() - ctx.server_start_time,
            "running": ctx.runner.running,
        }

    app.include_router(arena.setup_router(ctx.runner))
    ctx.logger.info("API routers configured successfully")
