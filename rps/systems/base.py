"""Shared base for the frame systems.

A system owns one step of the frame (decide, move or collide). It reads
the registry, bounds and rng from the engine it belongs to and reports
what it did as a ``SystemResult``. The phase a system runs in is declared
with ``@runs_in_phase`` and used for diagnostics; the engine itself calls
the systems in a fixed order.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from rps.simulation.engine import SimulationEngine
    from rps.update_phases import UpdatePhase

__all__ = ["BaseSystem", "SystemResult"]


@dataclass
class SystemResult:
    """Outcome of one system update.

    Attributes:
        entities_affected: Agents whose intent or position was written
        entities_spawned: Replacement agents created
        entities_removed: Agents destroyed
        skipped: True when the system was disabled
        details: Per-system counters, e.g. ``{"conversions": 2}``
    """

    entities_affected: int = 0
    entities_spawned: int = 0
    entities_removed: int = 0
    skipped: bool = False
    details: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def skipped_result() -> "SystemResult":
        return SystemResult(skipped=True)


class BaseSystem(ABC):
    """A named, switchable frame step.

    Subclasses implement ``_do_update()``; ``update()`` handles the enabled
    flag and counts runs.
    """

    # Set by @runs_in_phase
    _phase: Optional["UpdatePhase"] = None

    def __init__(self, engine: "SimulationEngine", name: str) -> None:
        self._engine = engine
        self._name = name
        self.enabled = True
        self._update_count = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def engine(self) -> "SimulationEngine":
        return self._engine

    @property
    def update_count(self) -> int:
        return self._update_count

    @property
    def phase(self) -> Optional["UpdatePhase"]:
        return self._phase

    def update(self, frame: int) -> SystemResult:
        """Run the system for ``frame`` unless it is disabled."""
        if not self.enabled:
            return SystemResult.skipped_result()
        result = self._do_update(frame)
        self._update_count += 1
        return result

    @abstractmethod
    def _do_update(self, frame: int) -> SystemResult:
        ...

    def get_debug_info(self) -> Dict[str, Any]:
        return {
            "name": self._name,
            "enabled": self.enabled,
            "update_count": self._update_count,
            "phase": self._phase.name if self._phase else None,
        }

    def __repr__(self) -> str:
        phase = self._phase.name if self._phase else "-"
        return f"{type(self).__name__}({self._name!r}, phase={phase}, enabled={self.enabled})"
