"""Collision detection and conversion.

Architecture Notes:
- One pass per predator kind, in ``COLLISION_ORDER``. Each pass takes a
  fresh snapshot of the registry, so a replacement created by an earlier
  pass in the same frame can be caught by a later one. Such cascades are
  part of the population dynamics and are kept.
- A conversion destroys the prey record and spawns a new predator-kind
  record at the same position with no intent: population is conserved
  one-for-one.
- Destroyed identities go into an explicit set scoped to one resolution
  call. A prey already converted is skipped by every later predator, so
  no identity is destroyed twice in a frame.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Sequence, Set

from rps.config.simulation import COLLISION_THRESHOLD
from rps.entity_ids import AgentId
from rps.kinds import COLLISION_ORDER, Kind, prey
from rps.math_utils import Vector2
from rps.registry import AgentRegistry
from rps.systems.base import BaseSystem, SystemResult
from rps.update_phases import UpdatePhase, runs_in_phase

if TYPE_CHECKING:
    from rps.simulation.engine import SimulationEngine

logger = logging.getLogger(__name__)

__all__ = [
    "Conversion",
    "ConversionReport",
    "CollisionSystem",
    "is_colliding",
    "resolve_collisions",
]


@dataclass(frozen=True)
class Conversion:
    """One prey agent replaced by an agent of its predator's kind."""

    destroyed_id: AgentId
    created_id: AgentId
    from_kind: Kind
    to_kind: Kind
    x: float
    y: float


@dataclass
class ConversionReport:
    """Everything the resolver did in one frame."""

    conversions: List[Conversion] = field(default_factory=list)
    pairs_checked: int = 0

    @property
    def count(self) -> int:
        return len(self.conversions)

    @property
    def destroyed_ids(self) -> List[AgentId]:
        return [c.destroyed_id for c in self.conversions]

    @property
    def created_ids(self) -> List[AgentId]:
        return [c.created_id for c in self.conversions]

    def by_transition(self) -> Dict[str, int]:
        """Conversion counts keyed ``"paper->rock"`` style."""
        counts: Dict[str, int] = {}
        for c in self.conversions:
            key = f"{c.from_kind.value}->{c.to_kind.value}"
            counts[key] = counts.get(key, 0) + 1
        return counts


def is_colliding(src: Vector2, target: Vector2, threshold: float = COLLISION_THRESHOLD) -> bool:
    """Centres closer than ``threshold`` are touching."""
    return src.distance_squared_to(target) < threshold * threshold


def resolve_collisions(
    registry: AgentRegistry,
    threshold: float = COLLISION_THRESHOLD,
    order: Sequence[Kind] = COLLISION_ORDER,
) -> ConversionReport:
    """Convert every prey agent touched by a predator, at most once each.

    Args:
        registry: Registry to resolve against (mutated in place)
        threshold: Centre distance below which two agents collide
        order: Predator kinds, one pass each

    Returns:
        ConversionReport listing every conversion in order
    """
    report = ConversionReport()
    destroyed: Set[AgentId] = set()

    for hunter_kind in order:
        hunted_kind = prey(hunter_kind)
        hunters = registry.of_kind(hunter_kind)
        targets = registry.of_kind(hunted_kind)
        if not hunters or not targets:
            continue

        for hunter in hunters:
            for target in targets:
                if target.agent_id in destroyed:
                    continue
                report.pairs_checked += 1
                if not is_colliding(hunter.pos, target.pos, threshold):
                    continue

                registry.destroy(target.agent_id)
                destroyed.add(target.agent_id)
                replacement = registry.spawn(hunter_kind, target.pos)
                report.conversions.append(
                    Conversion(
                        destroyed_id=target.agent_id,
                        created_id=replacement.agent_id,
                        from_kind=hunted_kind,
                        to_kind=hunter_kind,
                        x=target.pos.x,
                        y=target.pos.y,
                    )
                )
                logger.debug(
                    "%s caught %s at (%.1f, %.1f) -> %s",
                    hunter.agent_id,
                    target.agent_id,
                    target.pos.x,
                    target.pos.y,
                    replacement.agent_id,
                )

    return report


@runs_in_phase(UpdatePhase.COLLISION)
class CollisionSystem(BaseSystem):
    """System resolving predator-prey collisions after movement.

    Cumulative counters cover the whole run; ``last_report`` holds the most
    recent frame's conversions.
    """

    def __init__(self, engine: "SimulationEngine") -> None:
        super().__init__(engine, "Collision")
        self.last_report: ConversionReport = ConversionReport()
        self._pairs_checked: int = 0
        self._conversions: int = 0

    def _do_update(self, frame: int) -> SystemResult:
        report = resolve_collisions(
            self._engine.registry, self._engine.config.agents.collision_threshold
        )
        self.last_report = report
        self._pairs_checked += report.pairs_checked
        self._conversions += report.count
        if report.count:
            self._engine.population.record_conversions(report.conversions)

        return SystemResult(
            entities_affected=report.count,
            entities_spawned=report.count,
            entities_removed=report.count,
            details={
                "pairs_checked": report.pairs_checked,
                "conversions": report.count,
            },
        )

    def get_debug_info(self):
        info = super().get_debug_info()
        info.update(
            {
                "pairs_checked": self._pairs_checked,
                "conversions": self._conversions,
            }
        )
        return info
