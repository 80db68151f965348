"""Simulation engine: the orchestrator for one arena.

Design Decisions:
-----------------
1. The engine is a COORDINATOR, not a DOER. It owns the registry, the
   bounds, the rng and the systems; the systems hold the logic.

2. Two timelines share one registry. Decisions run on a fixed-rate clock
   fed by frame time; movement and collision run every frame. Within a
   frame the phases never interleave:

       ENTITY_THINK (0..n decision passes, each complete)
       ENTITY_ACT   (one movement pass)
       COLLISION    (one conversion pass)
       FRAME_END    (population sample, optional invariant checks)

3. Arena dimensions are fixed once the first tick has run.
"""

import logging
import random
import time
import uuid
from typing import Any, Dict, List, Optional

from rps.agents import AgentView
from rps.arena import ArenaBounds
from rps.config.simulation_config import SimulationConfig
from rps.exceptions import ConfigurationError, InvariantViolationError, SimulationError
from rps.population import PopulationTracker
from rps.registry import AgentRegistry
from rps.simulation import diagnostics
from rps.spawning import place_initial_population
from rps.systems.base import BaseSystem, SystemResult
from rps.systems.collision import CollisionSystem
from rps.systems.decision import DecisionSystem
from rps.systems.movement import MovementSystem
from rps.time_system import FixedRateClock
from rps.update_phases import PHASE_DESCRIPTIONS, UpdatePhase

logger = logging.getLogger(__name__)


class SimulationEngine:
    """A headless simulation engine for the rock-paper-scissors arena.

    Architecture:
        SimulationEngine (coordinator)
        ├── AgentRegistry (agent records)
        ├── FixedRateClock (decision timeline)
        ├── Systems (DecisionSystem, MovementSystem, CollisionSystem)
        └── PopulationTracker (counts and conversions)

    Attributes:
        config: Simulation configuration
        registry: Live agents
        bounds: Arena interior
        frame_count: Frames stepped so far
        decision_count: Decision passes run so far
        elapsed: Simulated seconds
        paused: Whether update() is a no-op
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        *,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        """Initialize the simulation engine.

        Args:
            config: Aggregate simulation configuration
            rng: Shared random number generator for deterministic runs
            seed: Optional seed (used if rng is not provided)

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = config or SimulationConfig()
        self.config.validate()

        # RNG handling: prefer explicit rng, then seed, then fresh RNG
        if rng is not None:
            self.rng: random.Random = rng
            self.seed = None
        elif seed is not None:
            self.rng = random.Random(seed)
            self.seed = seed
        else:
            self.rng = random.Random()
            self.seed = None

        self.run_id: str = str(uuid.uuid4())
        logger.info("SimulationEngine initialized with run_id=%s", self.run_id)

        self.registry = AgentRegistry()
        self.bounds = self._build_bounds()
        self.population = PopulationTracker(self.config.history_length)
        self.decision_clock = FixedRateClock(
            self.config.timing.decision_rate_hz, fire_immediately=True
        )

        self.frame_count: int = 0
        self.decision_count: int = 0
        self.elapsed: float = 0.0
        self.frame_dt: float = 0.0
        self.paused: bool = False
        self.start_time: float = time.time()
        self._started: bool = False
        self._is_setup: bool = False

        self.decision_system = DecisionSystem(self)
        self.movement_system = MovementSystem(self)
        self.collision_system = CollisionSystem(self)
        self._systems: List[BaseSystem] = [
            self.decision_system,
            self.movement_system,
            self.collision_system,
        ]

        self._current_phase: Optional[UpdatePhase] = None
        self.last_results: Dict[str, SystemResult] = {}

    def _build_bounds(self) -> ArenaBounds:
        return ArenaBounds.from_dimensions(
            self.config.arena.width, self.config.arena.height, self.config.agents.size
        )

    # =========================================================================
    # Setup
    # =========================================================================

    def setup(self) -> None:
        """Place the initial population.

        Raises:
            SpawnPlacementError: If the arena cannot hold the population
        """
        if self._is_setup:
            self.reset()
        place_initial_population(
            self.registry,
            self.bounds,
            self.config.agents.count_per_kind,
            self.rng,
            threshold=self.config.agents.collision_threshold,
            max_attempts=self.config.agents.spawn_max_attempts,
        )
        self.population.sample(self.frame_count, self.registry.counts())
        self._is_setup = True

    def reset(self) -> None:
        """Discard every agent and all counters; call ``setup()`` to repopulate."""
        self.registry.clear()
        self.population.reset()
        self.decision_clock = FixedRateClock(
            self.config.timing.decision_rate_hz, fire_immediately=True
        )
        self.frame_count = 0
        self.decision_count = 0
        self.elapsed = 0.0
        self.frame_dt = 0.0
        self._started = False
        self._is_setup = False
        self.last_results = {}
        logger.info("Simulation %s reset", self.run_id)

    def resize(self, width: float, height: float) -> None:
        """Change the arena size before the first tick.

        Raises:
            SimulationError: If ticks have already run
            ConfigurationError: If the new size is invalid
        """
        if self._started:
            raise SimulationError("Arena cannot be resized once the simulation has started")
        arena = self.config.arena
        old_size = (arena.width, arena.height)
        arena.width, arena.height = width, height
        try:
            self.config.validate()
        except ConfigurationError:
            arena.width, arena.height = old_size
            raise
        self.bounds = self._build_bounds()
        for agent in self.registry:
            agent.pos = self.bounds.clamp_inside(agent.pos)
        logger.info("Arena resized to %.0fx%.0f", width, height)

    # =========================================================================
    # Systems and phases
    # =========================================================================

    def get_systems(self) -> List[BaseSystem]:
        """Get all systems in execution order."""
        return list(self._systems)

    def get_system(self, name: str) -> Optional[BaseSystem]:
        for system in self._systems:
            if system.name == name:
                return system
        return None

    def set_system_enabled(self, name: str, enabled: bool) -> bool:
        system = self.get_system(name)
        if system is None:
            return False
        system.enabled = enabled
        return True

    def get_current_phase(self) -> Optional[UpdatePhase]:
        """Get the current update phase (None if not in update loop)."""
        return self._current_phase

    def get_phase_description(self, phase: Optional[UpdatePhase] = None) -> str:
        if phase is None:
            phase = self._current_phase
        if phase is None:
            return "Not in update loop"
        return PHASE_DESCRIPTIONS.get(phase, phase.name)

    # =========================================================================
    # Stepping
    # =========================================================================

    def update(self, dt: float) -> None:
        """Advance one frame of ``dt`` seconds.

        Runs every decision pass the fixed-rate clock has come due for, then
        one movement pass and one collision pass.

        Raises:
            SimulationError: If ``dt`` is negative
        """
        if self.paused:
            return
        if dt < 0:
            raise SimulationError(f"Elapsed time must be non-negative, got {dt}")

        due = self.decision_clock.advance(dt)
        for _ in range(due):
            self.step_decision()
        self.step_frame(dt)

    def step_decision(self) -> SystemResult:
        """Run one complete decision pass."""
        self._started = True
        self._current_phase = UpdatePhase.ENTITY_THINK
        try:
            result = self.decision_system.update(self.frame_count)
            if not result.skipped:
                self.decision_count += 1
            self.last_results[self.decision_system.name] = result
            return result
        finally:
            self._current_phase = None

    def step_frame(self, dt: float) -> SystemResult:
        """Run one movement pass followed by one collision pass.

        Returns:
            The collision system's result for this frame
        """
        if dt < 0:
            raise SimulationError(f"Elapsed time must be non-negative, got {dt}")
        self._started = True
        self.frame_count += 1
        self.frame_dt = dt
        self.elapsed += dt
        population_before = len(self.registry)

        try:
            self._current_phase = UpdatePhase.ENTITY_ACT
            self.last_results[self.movement_system.name] = self.movement_system.update(
                self.frame_count
            )

            self._current_phase = UpdatePhase.COLLISION
            collision_result = self.collision_system.update(self.frame_count)
            self.last_results[self.collision_system.name] = collision_result

            self._current_phase = UpdatePhase.FRAME_END
            self.population.sample(self.frame_count, self.registry.counts())
            if self.config.debug_invariants:
                self.check_invariants(population_before)
        finally:
            self._current_phase = None

        return collision_result

    def check_invariants(self, expected_population: Optional[int] = None) -> None:
        """Verify containment, intent shape and (optionally) population size.

        Raises:
            InvariantViolationError: On the first violation found
        """
        where = f"frame {self.frame_count}, {self.get_phase_description()}"
        if expected_population is not None and len(self.registry) != expected_population:
            raise InvariantViolationError(
                f"Population changed from {expected_population} to {len(self.registry)} "
                f"({where})"
            )
        for agent in self.registry:
            if not self.bounds.contains_closed(agent.pos):
                raise InvariantViolationError(f"{agent!r} is outside the arena interior ({where})")
            if agent.intent is not None and abs(agent.intent.length() - 1.0) > 1e-6:
                raise InvariantViolationError(
                    f"{agent!r} has a non-unit intent {agent.intent!r} ({where})"
                )

    # =========================================================================
    # Read-only views
    # =========================================================================

    def snapshot(self) -> List[AgentView]:
        """``(identity, kind, position)`` for every live agent."""
        return self.registry.views()

    def get_stats(self) -> Dict[str, Any]:
        """Get current simulation statistics."""
        stats: Dict[str, Any] = {
            "run_id": self.run_id,
            "frame_count": self.frame_count,
            "decision_count": self.decision_count,
            "elapsed_sim_time": round(self.elapsed, 6),
            "paused": self.paused,
            "arena": {"width": self.config.arena.width, "height": self.config.arena.height},
        }
        stats.update(self.population.get_stats())
        stats["last_decision_goals"] = {
            goal.value: n for goal, n in self.decision_system.last_goals.items()
        }
        return stats

    def get_debug_info(self) -> Dict[str, Any]:
        """Current phase plus each system's debug info."""
        phase = self.get_current_phase()
        return {
            "frame_count": self.frame_count,
            "phase": phase.name if phase else None,
            "phase_description": self.get_phase_description(),
            "systems": [system.get_debug_info() for system in self._systems],
        }

    def export_stats_json(self, filename: str) -> None:
        diagnostics.export_stats_json(self, filename)

    def log_stats(self) -> None:
        diagnostics.log_simulation_stats(self)

    # =========================================================================
    # Run Methods
    # =========================================================================

    def run_headless(
        self,
        max_frames: int = 3600,
        stats_interval: int = 300,
        export_json: Optional[str] = None,
        stop_on_monoculture: bool = False,
    ) -> Dict[str, Any]:
        """Run with a fixed frame dt and no visualization.

        Returns:
            Final statistics
        """
        sep = self.config.separator_width
        dt = self.config.timing.headless_frame_dt
        logger.info("=" * sep)
        logger.info("HEADLESS RPS ARENA SIMULATION")
        logger.info("=" * sep)
        logger.info(
            "Running for %d frames (%.1f seconds of sim time)", max_frames, max_frames * dt
        )
        logger.info("=" * sep)

        if not self._is_setup:
            self.setup()

        for frame in range(max_frames):
            self.update(dt)

            if stats_interval and frame > 0 and frame % stats_interval == 0:
                self.log_stats()
            if stop_on_monoculture and self.population.is_monoculture():
                logger.info("Stopping early at frame %d: one kind left", self.frame_count)
                break

        logger.info("=" * sep)
        logger.info("SIMULATION COMPLETE - Final Statistics")
        logger.info("=" * sep)
        self.log_stats()

        if export_json:
            self.export_stats_json(export_json)

        return self.get_stats()

    def run_collect_stats(self, max_frames: int = 100) -> Dict[str, Any]:
        """Run the engine for ``max_frames`` frames and return final stats."""
        if not self._is_setup:
            self.setup()
        dt = self.config.timing.headless_frame_dt
        for _ in range(max_frames):
            self.update(dt)
        return self.get_stats()
