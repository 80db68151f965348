"""Tests for initial population placement."""

import itertools
import random

import pytest

from rps.arena import ArenaBounds
from rps.exceptions import ConfigurationError, SpawnPlacementError
from rps.kinds import Kind
from rps.math_utils import Vector2
from rps.spawning import SPAWN_ORDER, find_spawn_position, place_initial_population


class TestPlaceInitialPopulation:
    def test_creates_three_n_agents(self, registry, bounds, seeded_rng):
        created = place_initial_population(registry, bounds, 10, seeded_rng)
        assert len(created) == 30
        assert registry.counts() == {Kind.ROCK: 10, Kind.PAPER: 10, Kind.SCISSORS: 10}

    def test_round_robin_order(self, registry, bounds, seeded_rng):
        created = place_initial_population(registry, bounds, 3, seeded_rng)
        kinds = [agent.kind for agent in created]
        assert kinds == list(SPAWN_ORDER) * 3

    def test_no_overlap(self, registry, bounds, seeded_rng):
        created = place_initial_population(registry, bounds, 15, seeded_rng)
        for a, b in itertools.combinations(created, 2):
            assert a.pos.distance_to(b.pos) >= 52

    def test_every_agent_inside_interior(self, registry, bounds, seeded_rng):
        created = place_initial_population(registry, bounds, 15, seeded_rng)
        assert all(bounds.is_inside(agent.pos) for agent in created)

    def test_agents_start_without_intent(self, registry, bounds, seeded_rng):
        created = place_initial_population(registry, bounds, 2, seeded_rng)
        assert all(agent.intent is None for agent in created)

    def test_zero_count_places_nothing(self, registry, bounds, seeded_rng):
        assert place_initial_population(registry, bounds, 0, seeded_rng) == []
        assert len(registry) == 0

    def test_same_seed_same_positions(self, bounds):
        from rps.registry import AgentRegistry

        first = place_initial_population(AgentRegistry(), bounds, 5, random.Random(9))
        second = place_initial_population(AgentRegistry(), bounds, 5, random.Random(9))
        assert [a.pos.as_tuple() for a in first] == [a.pos.as_tuple() for a in second]


class TestPlacementFailure:
    def test_crowded_arena_fails_fast(self, registry, seeded_rng):
        """A 120x120 arena cannot hold 30 agents 52 apart."""
        tiny = ArenaBounds.from_dimensions(120, 120, 52)
        with pytest.raises(SpawnPlacementError):
            place_initial_population(registry, tiny, 10, seeded_rng, max_attempts=500)

    def test_placement_error_is_a_configuration_error(self, registry, seeded_rng):
        tiny = ArenaBounds.from_dimensions(120, 120, 52)
        with pytest.raises(ConfigurationError):
            place_initial_population(registry, tiny, 10, seeded_rng, max_attempts=500)

    def test_find_spawn_position_reports_attempts(self, bounds, seeded_rng):
        # One agent at the centre with a threshold larger than the arena.
        with pytest.raises(SpawnPlacementError, match="after 25 attempts"):
            find_spawn_position(
                bounds, [Vector2(0, 0)], seeded_rng, threshold=10_000, max_attempts=25
            )
