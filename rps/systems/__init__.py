"""Simulation systems, one per frame step."""

from rps.systems.base import BaseSystem, SystemResult
from rps.systems.collision import CollisionSystem, ConversionReport, resolve_collisions
from rps.systems.decision import DecisionSystem, Goal, run_decision_pass
from rps.systems.movement import MovementSystem, run_movement_pass

__all__ = [
    "BaseSystem",
    "CollisionSystem",
    "ConversionReport",
    "DecisionSystem",
    "Goal",
    "MovementSystem",
    "SystemResult",
    "resolve_collisions",
    "run_decision_pass",
    "run_movement_pass",
]
