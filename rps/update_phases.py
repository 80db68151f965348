"""Update phase definitions for explicit execution ordering.

A frame runs its phases in enum order. The decision phase only executes
on frames where the fixed-rate decision clock has come due, but it always
completes before movement begins, and movement always completes before
collision resolution.

Usage:
------
    @runs_in_phase(UpdatePhase.COLLISION)
    class CollisionSystem(BaseSystem):
        ...

    get_system_phase(collision_system)  # UpdatePhase.COLLISION
"""

from enum import Enum, auto
from typing import TYPE_CHECKING, Callable, Dict, Optional

__all__ = [
    "UpdatePhase",
    "PHASE_DESCRIPTIONS",
    "runs_in_phase",
    "get_system_phase",
]

if TYPE_CHECKING:
    from rps.systems.base import BaseSystem


class UpdatePhase(Enum):
    """Phases of a simulation frame, in execution order."""

    ENTITY_THINK = auto()  # Fixed-rate decisions (intent)
    ENTITY_ACT = auto()  # Movement integration
    COLLISION = auto()  # Collision detection and conversion
    FRAME_END = auto()  # Statistics, invariant checks


PHASE_DESCRIPTIONS: Dict[UpdatePhase, str] = {
    UpdatePhase.ENTITY_THINK: "Agents choosing wander, attack or flee",
    UpdatePhase.ENTITY_ACT: "Agents moving along their intent",
    UpdatePhase.COLLISION: "Converting caught prey",
    UpdatePhase.FRAME_END: "Recording population statistics",
}


def runs_in_phase(phase: UpdatePhase) -> Callable:
    """Decorator to declare which phase a system runs in.

    Example:
        @runs_in_phase(UpdatePhase.COLLISION)
        class CollisionSystem(BaseSystem):
            def _do_update(self, frame: int) -> None:
                ...
    """

    def decorator(cls):
        cls._phase = phase
        return cls

    return decorator


def get_system_phase(system: "BaseSystem") -> Optional[UpdatePhase]:
    """Get the phase a system is declared to run in."""
    return getattr(system, "_phase", None)
