"""Decision engine: choose wander, attack or flee for every agent.

For an agent of kind K the engine looks at the nearest agent of
``prey(K)`` within the kind's attack radius and the nearest agent of
``predator(K)`` within its flee radius, all in squared distance:

- neither in range: wander in a random direction
- only prey in range: attack (move toward it)
- only a predator in range: flee (move directly away)
- both in range: attack if the prey is strictly closer, otherwise flee

Agents of the acting agent's own kind are never candidates. The pass only
overwrites intents; it never creates or destroys agents.
"""

import logging
import random
from collections import Counter
from enum import Enum
from typing import TYPE_CHECKING, Optional, Tuple

from rps.agents import Agent
from rps.kinds import Kind, predator, prey
from rps.math_utils import Vector2
from rps.registry import AgentRegistry
from rps.systems.base import BaseSystem, SystemResult
from rps.update_phases import UpdatePhase, runs_in_phase

if TYPE_CHECKING:
    from rps.simulation.engine import SimulationEngine

logger = logging.getLogger(__name__)

__all__ = [
    "Goal",
    "DecisionSystem",
    "decide_intent",
    "nearest_of_kind",
    "run_decision_pass",
    "wander_direction",
]


class Goal(Enum):
    """The movement goal chosen by a decision."""

    WANDER = "wander"
    ATTACK = "attack"
    FLEE = "flee"


def nearest_of_kind(
    agent: Agent, registry: AgentRegistry, kind: Kind
) -> Tuple[Optional[Agent], float]:
    """Return the closest live agent of ``kind`` and its squared distance.

    Returns ``(None, inf)`` when no agent of that kind is alive.
    """
    best: Optional[Agent] = None
    best_dist_sq = float("inf")
    origin = agent.pos
    for other in registry.iter_kind(kind):
        if other is agent:
            continue
        dist_sq = origin.distance_squared_to(other.pos)
        if dist_sq < best_dist_sq:
            best = other
            best_dist_sq = dist_sq
    return best, best_dist_sq


def wander_direction(rng: random.Random) -> Optional[Vector2]:
    """Random unit direction, or ``None`` for the exact-zero draw."""
    direction = Vector2(rng.random() - 0.5, rng.random() - 0.5)
    if direction.is_zero():
        return None
    return direction.normalize()


def decide_intent(
    agent: Agent, registry: AgentRegistry, rng: random.Random
) -> Tuple[Goal, Optional[Vector2]]:
    """Compute the goal and intent for one agent from the current registry."""
    kind_profile = agent.profile

    target, target_dist_sq = nearest_of_kind(agent, registry, prey(agent.kind))
    if target is not None and target_dist_sq >= kind_profile.attack_radius_sq:
        target = None

    threat, threat_dist_sq = nearest_of_kind(agent, registry, predator(agent.kind))
    if threat is not None and threat_dist_sq >= kind_profile.flee_radius_sq:
        threat = None

    if target is not None and (threat is None or target_dist_sq < threat_dist_sq):
        goal = Goal.ATTACK
        difference = target.pos - agent.pos
    elif threat is not None:
        goal = Goal.FLEE
        difference = agent.pos - threat.pos
    else:
        return Goal.WANDER, wander_direction(rng)

    if difference.is_zero():
        # Coincident with the target: no direction to take, so wander instead.
        logger.debug("%r coincides with its %s target; wandering", agent, goal.value)
        return Goal.WANDER, wander_direction(rng)

    return goal, difference.normalize()


def run_decision_pass(registry: AgentRegistry, rng: random.Random) -> Counter:
    """Overwrite the intent of every live agent.

    Intents are computed from positions as they stand at the start of the
    pass; no movement happens in between.

    Returns:
        Counter of goals chosen this pass
    """
    goals: Counter = Counter()
    for agent in registry.agents():
        goal, intent = decide_intent(agent, registry, rng)
        agent.set_intent(intent)
        goals[goal] += 1
    return goals


@runs_in_phase(UpdatePhase.ENTITY_THINK)
class DecisionSystem(BaseSystem):
    """System running one complete decision pass per update.

    The engine calls ``update()`` once for every decision tick that the
    fixed-rate clock reports as due.
    """

    def __init__(self, engine: "SimulationEngine") -> None:
        super().__init__(engine, "Decision")
        self.last_goals: Counter = Counter()
        self.total_goals: Counter = Counter()

    def _do_update(self, frame: int) -> SystemResult:
        goals = run_decision_pass(self._engine.registry, self._engine.rng)
        self.last_goals = goals
        self.total_goals.update(goals)
        logger.debug(
            "Decision tick at frame %d: %s",
            frame,
            ", ".join(f"{goal.value}={n}" for goal, n in goals.items()),
        )
        return SystemResult(
            entities_affected=sum(goals.values()),
            details={goal.value: goals[goal] for goal in Goal},
        )

    def get_debug_info(self):
        info = super().get_debug_info()
        info["last_goals"] = {goal.value: self.last_goals[goal] for goal in Goal}
        return info
