"""Functional tick API for host applications.

These functions drive the core without an engine object: the host owns
the registry and the clocks, and calls ``decision_tick`` at its fixed
decision rate and ``movement_tick`` once per frame.

    registry = initialize(800, 600, 10, rng=random.Random(7))
    decision_tick(registry, rng)
    report = movement_tick(registry, 1 / 60, 800, 600)
"""

import copy
import random
from typing import Iterator, Optional, Tuple

from rps.arena import ArenaBounds
from rps.config.simulation_config import SimulationConfig
from rps.entity_ids import AgentId
from rps.kinds import Kind
from rps.math_utils import Vector2
from rps.registry import AgentRegistry
from rps.spawning import place_initial_population
from rps.systems.collision import ConversionReport, resolve_collisions
from rps.systems.decision import run_decision_pass
from rps.systems.movement import run_movement_pass

__all__ = ["decision_tick", "initialize", "iter_agents", "movement_tick"]


def initialize(
    arena_width: float,
    arena_height: float,
    agent_count_per_kind: int,
    rng: Optional[random.Random] = None,
    config: Optional[SimulationConfig] = None,
) -> AgentRegistry:
    """Create a registry populated by spawn placement.

    Raises:
        ConfigurationError: If the arena is invalid
        SpawnPlacementError: If the population does not fit the arena
    """
    if config is None:
        config = SimulationConfig.for_arena(arena_width, arena_height, agent_count_per_kind)
    else:
        config = copy.deepcopy(config)
        config.arena.width = arena_width
        config.arena.height = arena_height
        config.agents.count_per_kind = agent_count_per_kind
    config.validate()

    bounds = ArenaBounds.from_dimensions(arena_width, arena_height, config.agents.size)
    registry = AgentRegistry()
    place_initial_population(
        registry,
        bounds,
        agent_count_per_kind,
        rng or random,
        threshold=config.agents.collision_threshold,
        max_attempts=config.agents.spawn_max_attempts,
    )
    return registry


def decision_tick(registry: AgentRegistry, rng: Optional[random.Random] = None) -> None:
    """Run one complete decision pass over the registry."""
    run_decision_pass(registry, rng or random)


def movement_tick(
    registry: AgentRegistry,
    dt: float,
    arena_width: float,
    arena_height: float,
    config: Optional[SimulationConfig] = None,
) -> ConversionReport:
    """Move every agent, then resolve collisions, once."""
    config = config or SimulationConfig()
    bounds = ArenaBounds.from_dimensions(arena_width, arena_height, config.agents.size)
    run_movement_pass(registry, dt, bounds, config.agents.speed)
    return resolve_collisions(registry, config.agents.collision_threshold)


def iter_agents(registry: AgentRegistry) -> Iterator[Tuple[AgentId, Kind, Vector2]]:
    """Read-only ``(identity, kind, position)`` iteration for presentation."""
    for view in registry.views():
        yield view.agent_id, view.kind, Vector2(view.x, view.y)
