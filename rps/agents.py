"""Agent records.

An agent is a kind, a position and a movement intent. There is no velocity
or acceleration: intent is rewritten by every decision pass and consumed
by every movement pass.
"""

from dataclasses import dataclass
from typing import NamedTuple, Optional

from rps.entity_ids import AgentId
from rps.kinds import Kind, KindProfile, profile
from rps.math_utils import Vector2

__all__ = ["Agent", "AgentView"]


class AgentView(NamedTuple):
    """Read-only ``(identity, kind, position)`` snapshot for presentation."""

    agent_id: AgentId
    kind: Kind
    x: float
    y: float


@dataclass(eq=False)
class Agent:
    """A live agent.

    ``kind`` is fixed for the lifetime of the record. A conversion destroys
    the record and spawns a new one so the kind-bound constants are bound
    afresh.

    Attributes:
        agent_id: Stable identity assigned by the registry
        kind: Rock, Paper or Scissors
        pos: Arena-local position (origin at the arena centre)
        intent: ``None`` for no movement, otherwise a unit vector
    """

    agent_id: AgentId
    kind: Kind
    pos: Vector2
    intent: Optional[Vector2] = None

    @property
    def profile(self) -> KindProfile:
        return profile(self.kind)

    def set_intent(self, direction: Optional[Vector2]) -> None:
        """Store a direction, normalized; zero-length directions mean no movement."""
        if direction is None or direction.is_zero():
            self.intent = None
        else:
            self.intent = direction.normalize()

    def view(self) -> AgentView:
        return AgentView(self.agent_id, self.kind, self.pos.x, self.pos.y)

    def __repr__(self) -> str:
        return f"Agent({self.agent_id}, {self.kind.name}, pos=({self.pos.x:.1f}, {self.pos.y:.1f}))"
