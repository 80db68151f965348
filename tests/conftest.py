"""Pytest configuration and fixtures for RPS arena tests."""

import random

import pytest


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def registry():
    """Provide an empty agent registry."""
    from rps.registry import AgentRegistry

    return AgentRegistry()


@pytest.fixture
def bounds():
    """Interior of an 800x600 arena for agents of size 52."""
    from rps.arena import ArenaBounds

    return ArenaBounds.from_dimensions(800, 600, 52)


@pytest.fixture
def simulation_engine():
    """Setup a simulation engine for testing with deterministic seed."""
    from rps.config.simulation_config import SimulationConfig
    from rps.simulation.engine import SimulationEngine

    config = SimulationConfig.for_arena(800, 600, count_per_kind=10)
    config.debug_invariants = True
    engine = SimulationEngine(config, seed=42)
    engine.setup()

    return engine
