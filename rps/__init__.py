"""Rock-paper-scissors arena simulation core.

This package contains the pure simulation logic with no UI dependencies.
Key modules include:

- kinds: the three kinds, their radii and the cyclic prey/predator relation
- registry: the authoritative collection of live agents
- spawning: initial non-overlapping placement
- systems: decision, movement and collision/conversion passes
- simulation: the functional tick API and the SimulationEngine

Use direct imports from submodules for internal helpers.
"""

from rps.kinds import Kind, predator, prey
from rps.registry import AgentRegistry
from rps.simulation import (
    SimulationEngine,
    decision_tick,
    initialize,
    iter_agents,
    movement_tick,
)

__all__ = [
    "AgentRegistry",
    "Kind",
    "SimulationEngine",
    "decision_tick",
    "initialize",
    "iter_agents",
    "movement_tick",
    "predator",
    "prey",
]
