"""Background simulation runner thread."""

import asyncio
import logging
import threading
import time
from typing import Any, Dict, Optional

from backend.models import (
    AgentData,
    ArenaData,
    CommandResponse,
    StatePayload,
    StatsPayload,
    StepRequest,
)
from rps.config.simulation_config import SimulationConfig
from rps.simulation.engine import SimulationEngine

logger = logging.getLogger(__name__)

# Frame time above this is treated as a stall and capped, so a paused
# debugger or a slow host does not teleport agents across the arena.
MAX_FRAME_DT = 0.25


class SimulationRunner:
    """Runs the simulation in a background thread and provides state snapshots.

    Every engine access happens under ``self.lock``, so a state snapshot
    always sees a completed frame.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.engine = SimulationEngine(config, seed=seed)
        self.engine.setup()
        self.frame_time = 1.0 / self.engine.config.timing.frame_rate
        self.lock = threading.Lock()
        self.running = False
        self.thread: Optional[threading.Thread] = None
        self.current_actual_fps: float = 0.0

    def start(self, start_paused: bool = False) -> None:
        """Start the simulation in a background thread."""
        if self.running:
            return
        self.engine.paused = start_paused
        self.running = True
        self.thread = threading.Thread(target=self._run_loop, name="rps-simulation", daemon=True)
        self.thread.start()

    def stop(self) -> None:
        """Stop the simulation loop and wait for the thread to exit."""
        self.running = False
        if self.thread:
            self.thread.join(timeout=2.0)
            self.thread = None

    def _run_loop(self) -> None:
        """Main simulation loop with drift-corrected frame pacing."""
        logger.info("Simulation loop: Starting")
        next_frame_start_time = time.perf_counter()
        last_frame_time = next_frame_start_time
        fps_frame_count = 0
        last_fps_time = next_frame_start_time

        while self.running:
            next_frame_start_time += self.frame_time
            now = time.perf_counter()
            dt = min(now - last_frame_time, MAX_FRAME_DT)
            last_frame_time = now

            with self.lock:
                try:
                    self.engine.update(dt)
                except Exception as e:
                    logger.error(
                        "Simulation loop: Error updating frame %d: %s",
                        self.engine.frame_count,
                        e,
                        exc_info=True,
                    )

            fps_frame_count += 1
            if now - last_fps_time >= 5.0:
                self.current_actual_fps = fps_frame_count / (now - last_fps_time)
                fps_frame_count = 0
                last_fps_time = now
                logger.debug("Simulation loop: %.1f fps", self.current_actual_fps)

            sleep_for = next_frame_start_time - time.perf_counter()
            if sleep_for > 0:
                time.sleep(sleep_for)
            else:
                # Fell behind; resync instead of trying to catch up.
                next_frame_start_time = time.perf_counter()

        logger.info("Simulation loop: Stopped")

    def get_state(self) -> StatePayload:
        with self.lock:
            engine = self.engine
            config = engine.config
            return StatePayload(
                frame=engine.frame_count,
                elapsed=engine.elapsed,
                paused=engine.paused,
                arena=ArenaData(
                    width=config.arena.width,
                    height=config.arena.height,
                    agent_size=config.agents.size,
                ),
                counts={kind.value: n for kind, n in engine.registry.counts().items()},
                agents=[
                    AgentData(id=int(view.agent_id), kind=view.kind.value, x=view.x, y=view.y)
                    for view in engine.snapshot()
                ],
            )

    def get_stats(self) -> StatsPayload:
        with self.lock:
            stats = self.engine.get_stats()
        return StatsPayload(**{k: v for k, v in stats.items() if k in StatsPayload.model_fields})

    def handle_command(self, command: str, data: Optional[Dict[str, Any]] = None) -> CommandResponse:
        """Apply a control command.

        Supported commands: ``pause``, ``resume``, ``reset``, ``step``.

        Raises:
            pydantic.ValidationError: If ``step`` data is out of range
        """
        step = StepRequest(**(data or {})) if command == "step" else None
        with self.lock:
            engine = self.engine
            message = ""
            if command == "pause":
                engine.paused = True
            elif command == "resume":
                engine.paused = False
            elif command == "reset":
                engine.setup()
                message = f"Respawned {len(engine.registry)} agents"
            elif command == "step":
                frames = step.frames
                dt = step.dt if step.dt is not None else engine.config.timing.headless_frame_dt
                was_paused = engine.paused
                engine.paused = False
                try:
                    for _ in range(frames):
                        engine.update(dt)
                finally:
                    engine.paused = was_paused
                message = f"Stepped {frames} frame(s)"
            else:
                return CommandResponse(
                    command=command,
                    success=False,
                    paused=engine.paused,
                    frame=engine.frame_count,
                    message=f"Unknown command: {command}",
                )
            logger.info("Command %s applied at frame %d", command, engine.frame_count)
            return CommandResponse(
                command=command,
                success=True,
                paused=engine.paused,
                frame=engine.frame_count,
                message=message,
            )

    # Async wrappers keep lock waits and multi-frame steps off the event loop.

    async def get_state_async(self) -> StatePayload:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.get_state)

    async def get_stats_async(self) -> StatsPayload:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.get_stats)

    async def handle_command_async(
        self, command: str, data: Optional[Dict[str, Any]] = None
    ) -> CommandResponse:
        """Async wrapper to route commands off the event loop thread."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.handle_command, command, data)
