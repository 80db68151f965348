"""Initial population placement.

Candidates are drawn uniformly over the whole arena rectangle and rejected
until one lies strictly inside the interior and is farther than the
collision threshold from every position already accepted in the batch.

Rejection sampling has no natural termination if the arena is too crowded,
so each agent gets ``max_attempts`` draws before placement fails with a
``SpawnPlacementError``.
"""

import logging
import random
from typing import List, Sequence

from rps.agents import Agent
from rps.arena import ArenaBounds
from rps.config.simulation import COLLISION_THRESHOLD, SPAWN_MAX_ATTEMPTS
from rps.exceptions import SpawnPlacementError
from rps.kinds import Kind
from rps.math_utils import Vector2
from rps.registry import AgentRegistry

logger = logging.getLogger(__name__)

__all__ = ["SPAWN_ORDER", "find_spawn_position", "place_initial_population"]

SPAWN_ORDER = (Kind.ROCK, Kind.PAPER, Kind.SCISSORS)


def _is_clear(candidate: Vector2, accepted: Sequence[Vector2], threshold: float) -> bool:
    threshold_sq = threshold * threshold
    return all(candidate.distance_squared_to(pos) > threshold_sq for pos in accepted)


def find_spawn_position(
    bounds: ArenaBounds,
    accepted: Sequence[Vector2],
    rng: random.Random,
    *,
    threshold: float = COLLISION_THRESHOLD,
    max_attempts: int = SPAWN_MAX_ATTEMPTS,
) -> Vector2:
    """Draw candidates until one fits, or raise after ``max_attempts`` draws.

    Raises:
        SpawnPlacementError: If no candidate was accepted
    """
    for _ in range(max_attempts):
        candidate = bounds.random_point(rng)
        if bounds.is_inside(candidate) and _is_clear(candidate, accepted, threshold):
            return candidate
    raise SpawnPlacementError(
        f"No free spawn position after {max_attempts} attempts "
        f"(arena {bounds.width}x{bounds.height}, {len(accepted)} already placed, "
        f"spacing {threshold})"
    )


def place_initial_population(
    registry: AgentRegistry,
    bounds: ArenaBounds,
    count_per_kind: int,
    rng: random.Random,
    *,
    threshold: float = COLLISION_THRESHOLD,
    max_attempts: int = SPAWN_MAX_ATTEMPTS,
) -> List[Agent]:
    """Place ``count_per_kind`` agents of every kind without overlap.

    Kinds are placed round-robin (Rock, Paper, Scissors, repeated) so the
    batch stays population-balanced while it fills. Every agent starts with
    no movement intent.

    Args:
        registry: Registry receiving the new agents
        bounds: Arena interior and extent
        count_per_kind: Agents per kind (N); 3N agents are created
        rng: Random source for candidate positions
        threshold: Minimum spacing between any two placed agents
        max_attempts: Draws allowed per agent before giving up

    Returns:
        The created agents in placement order

    Raises:
        SpawnPlacementError: If the arena cannot hold the population
    """
    accepted: List[Vector2] = []
    created: List[Agent] = []

    for index in range(count_per_kind):
        for kind in SPAWN_ORDER:
            try:
                pos = find_spawn_position(
                    bounds, accepted, rng, threshold=threshold, max_attempts=max_attempts
                )
            except SpawnPlacementError as e:
                raise SpawnPlacementError(f"Cannot place {kind.name} #{index}: {e}") from e
            accepted.append(pos)
            created.append(registry.spawn(kind, pos))

    logger.info(
        "Placed %d agents (%d per kind) in %.0fx%.0f arena",
        len(created),
        count_per_kind,
        bounds.width,
        bounds.height,
    )
    return created
