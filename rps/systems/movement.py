"""Movement integration.

Each frame, every agent with an intent advances by
``intent * speed * dt`` and is then clamped into the arena interior.
Agents may overlap after moving; overlap is the collision resolver's
business, not the integrator's.
"""

import logging
from typing import TYPE_CHECKING

from rps.agents import Agent
from rps.arena import ArenaBounds
from rps.config.simulation import AGENT_SPEED
from rps.exceptions import SimulationError
from rps.registry import AgentRegistry
from rps.systems.base import BaseSystem, SystemResult
from rps.update_phases import UpdatePhase, runs_in_phase

if TYPE_CHECKING:
    from rps.simulation.engine import SimulationEngine

logger = logging.getLogger(__name__)

__all__ = ["MovementSystem", "integrate", "run_movement_pass"]


def integrate(agent: Agent, dt: float, bounds: ArenaBounds, speed: float = AGENT_SPEED) -> bool:
    """Advance one agent; returns True if it had an intent to follow."""
    if agent.intent is None:
        return False
    step = speed * dt
    candidate = agent.pos + agent.intent * step
    agent.pos = bounds.clamp_inside(candidate)
    return True


def run_movement_pass(
    registry: AgentRegistry, dt: float, bounds: ArenaBounds, speed: float = AGENT_SPEED
) -> int:
    """Move every agent once and return how many moved.

    Raises:
        SimulationError: If ``dt`` is negative
    """
    if dt < 0:
        raise SimulationError(f"Elapsed time must be non-negative, got {dt}")
    moved = 0
    for agent in registry:
        if integrate(agent, dt, bounds, speed):
            moved += 1
    return moved


@runs_in_phase(UpdatePhase.ENTITY_ACT)
class MovementSystem(BaseSystem):
    """System integrating positions with the engine's current frame dt."""

    def __init__(self, engine: "SimulationEngine") -> None:
        super().__init__(engine, "Movement")

    def _do_update(self, frame: int) -> SystemResult:
        engine = self._engine
        moved = run_movement_pass(
            engine.registry, engine.frame_dt, engine.bounds, engine.config.agents.speed
        )
        return SystemResult(entities_affected=moved, details={"moved": moved})
