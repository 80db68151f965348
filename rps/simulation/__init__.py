"""Simulation drivers: the functional tick API and the engine."""

from rps.simulation.engine import SimulationEngine
from rps.simulation.ticks import decision_tick, initialize, iter_agents, movement_tick

__all__ = [
    "SimulationEngine",
    "decision_tick",
    "initialize",
    "iter_agents",
    "movement_tick",
]
