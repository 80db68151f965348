"""Agent registry: the authoritative collection of live agents.

Design Decisions:
-----------------
1. One store keyed by ``AgentId`` owns every record. Per-kind indices are
   views over the same records, so "all agents of kind X" never needs a
   scan and destroy is O(1).

2. Iteration order is insertion order (dicts preserve it), which keeps
   seeded runs reproducible.

3. Accessors that other systems iterate over (``of_kind``, ``agents``)
   return list snapshots, so callers may destroy or spawn while walking
   them.
"""

import logging
from typing import Dict, Iterator, List, Optional

from rps.agents import Agent, AgentView
from rps.entity_ids import AgentId, AgentIdAllocator
from rps.exceptions import AgentNotFoundError
from rps.kinds import Kind
from rps.math_utils import Vector2

logger = logging.getLogger(__name__)

__all__ = ["AgentRegistry"]


class AgentRegistry:
    """Manages agent creation, destruction and per-kind lookup.

    Attributes:
        total_created: Records created since construction
        total_destroyed: Records destroyed since construction

    Example:
        registry = AgentRegistry()
        rock = registry.spawn(Kind.ROCK, Vector2(0, 0))
        registry.count(Kind.ROCK)  # 1
        registry.destroy(rock.agent_id)
    """

    def __init__(self) -> None:
        self._ids = AgentIdAllocator()
        self._agents: Dict[AgentId, Agent] = {}
        self._by_kind: Dict[Kind, Dict[AgentId, Agent]] = {kind: {} for kind in Kind}
        self.total_created: int = 0
        self.total_destroyed: int = 0

    def spawn(self, kind: Kind, pos: Vector2, intent: Optional[Vector2] = None) -> Agent:
        """Create a new agent record with a fresh identity."""
        agent = Agent(agent_id=self._ids.next_id(), kind=kind, pos=pos.copy())
        agent.set_intent(intent)
        self._agents[agent.agent_id] = agent
        self._by_kind[kind][agent.agent_id] = agent
        self.total_created += 1
        return agent

    def destroy(self, agent_id: AgentId) -> Agent:
        """Remove an agent record and return it.

        Raises:
            AgentNotFoundError: If the identity is not live
        """
        agent = self._agents.pop(agent_id, None)
        if agent is None:
            raise AgentNotFoundError(f"{agent_id} is not in the registry")
        del self._by_kind[agent.kind][agent_id]
        self.total_destroyed += 1
        return agent

    def get(self, agent_id: AgentId) -> Optional[Agent]:
        return self._agents.get(agent_id)

    def of_kind(self, kind: Kind) -> List[Agent]:
        """Snapshot of the live agents of one kind."""
        return list(self._by_kind[kind].values())

    def iter_kind(self, kind: Kind) -> Iterator[Agent]:
        """Iterate one kind without copying; do not mutate while iterating."""
        return iter(self._by_kind[kind].values())

    def agents(self) -> List[Agent]:
        """Snapshot of every live agent."""
        return list(self._agents.values())

    def count(self, kind: Kind) -> int:
        return len(self._by_kind[kind])

    def counts(self) -> Dict[Kind, int]:
        return {kind: len(members) for kind, members in self._by_kind.items()}

    def views(self) -> List[AgentView]:
        """Read-only ``(identity, kind, position)`` records for presentation."""
        return [agent.view() for agent in self._agents.values()]

    def clear(self) -> None:
        """Drop every record (identities are not reused afterwards)."""
        removed = len(self._agents)
        self._agents.clear()
        for members in self._by_kind.values():
            members.clear()
        self.total_destroyed += removed
        logger.debug("Registry cleared (%d agents removed)", removed)

    def __contains__(self, agent_id: object) -> bool:
        return agent_id in self._agents

    def __iter__(self) -> Iterator[Agent]:
        return iter(self._agents.values())

    def __len__(self) -> int:
        return len(self._agents)

    def __repr__(self) -> str:
        counts = ", ".join(f"{kind.name}={n}" for kind, n in self.counts().items())
        return f"AgentRegistry({counts})"
