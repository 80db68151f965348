"""Type-safe agent identifiers.

Identities are opaque and stable for an agent's lifetime. A conversion
never reuses the defeated agent's identity: the replacement gets a fresh
one from the registry's allocator.

Usage:
------
    allocator = AgentIdAllocator()
    first = allocator.next_id()   # Agent#1
    second = allocator.next_id()  # Agent#2

    # IDs are hashable and comparable
    destroyed = {first}
    if first in destroyed:
        ...

Design Notes:
- IDs are immutable (frozen dataclass)
- IDs compare equal to raw ints for debugging convenience
- Allocation is monotonic and never wraps
"""

from dataclasses import dataclass
from typing import Any

__all__ = ["AgentId", "AgentIdAllocator"]


@dataclass(frozen=True, order=True)
class AgentId:
    """Identity of one agent record."""

    value: int

    def __post_init__(self) -> None:
        """Validate the ID value."""
        if not isinstance(self.value, int):
            raise TypeError(f"ID value must be int, got {type(self.value).__name__}")
        if self.value < 0:
            raise ValueError(f"ID value must be non-negative, got {self.value}")

    def __str__(self) -> str:
        return f"Agent#{self.value}"

    def __repr__(self) -> str:
        return f"AgentId({self.value})"

    def __eq__(self, other: Any) -> bool:
        """Compare to same type or raw int."""
        if isinstance(other, AgentId):
            return self.value == other.value
        if isinstance(other, int):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __int__(self) -> int:
        return self.value


class AgentIdAllocator:
    """Monotonic identity source owned by a registry."""

    def __init__(self, start: int = 1) -> None:
        self._start = start
        self._next = start

    def next_id(self) -> AgentId:
        agent_id = AgentId(self._next)
        self._next += 1
        return agent_id

    @property
    def allocated(self) -> int:
        """Number of identities handed out so far."""
        return self._next - self._start
