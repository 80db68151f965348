"""Tests for the decision engine."""

import random

import pytest

from rps.kinds import Kind
from rps.math_utils import Vector2
from rps.systems.decision import (
    Goal,
    decide_intent,
    nearest_of_kind,
    run_decision_pass,
    wander_direction,
)


class FixedRandom(random.Random):
    """Random source returning a scripted sequence from random()."""

    def __init__(self, values):
        super().__init__(0)
        self._values = list(values)

    def random(self):
        return self._values.pop(0)


class TestWander:
    def test_wander_is_unit_vector(self, seeded_rng):
        for _ in range(50):
            direction = wander_direction(seeded_rng)
            assert direction is not None
            assert direction.length() == pytest.approx(1.0)

    def test_exact_zero_draw_means_no_movement(self):
        assert wander_direction(FixedRandom([0.5, 0.5])) is None

    def test_lone_agent_wanders(self, registry, seeded_rng):
        agent = registry.spawn(Kind.ROCK, Vector2(0, 0))
        goal, intent = decide_intent(agent, registry, seeded_rng)
        assert goal is Goal.WANDER
        assert intent.length() == pytest.approx(1.0)

    def test_far_apart_agents_wander(self, registry, seeded_rng):
        rock = registry.spawn(Kind.ROCK, Vector2(-1000, 0))
        registry.spawn(Kind.SCISSORS, Vector2(1000, 0))
        registry.spawn(Kind.PAPER, Vector2(0, 1000))
        for agent in registry.agents():
            goal, intent = decide_intent(agent, registry, seeded_rng)
            assert goal is Goal.WANDER, agent
            assert intent is None or intent.length() == pytest.approx(1.0)
        assert rock.kind is Kind.ROCK

    def test_rock_and_scissors_just_out_of_range_both_wander(self, registry, seeded_rng):
        """400 apart is beyond rock's attack radius and scissors' flee radius (both 300)."""
        rock = registry.spawn(Kind.ROCK, Vector2(0, 0))
        scissors = registry.spawn(Kind.SCISSORS, Vector2(400, 0))

        rock_goal, rock_intent = decide_intent(rock, registry, seeded_rng)
        scissors_goal, scissors_intent = decide_intent(scissors, registry, seeded_rng)

        assert rock_goal is Goal.WANDER
        assert scissors_goal is Goal.WANDER
        for intent in (rock_intent, scissors_intent):
            assert intent is None or intent.length() == pytest.approx(1.0)


class TestAttackAndFlee:
    def test_attack_prey_in_range(self, registry, seeded_rng):
        rock = registry.spawn(Kind.ROCK, Vector2(0, 0))
        registry.spawn(Kind.SCISSORS, Vector2(100, 0))
        goal, intent = decide_intent(rock, registry, seeded_rng)
        assert goal is Goal.ATTACK
        assert intent == Vector2(1, 0)

    def test_prey_outside_attack_radius_ignored(self, registry, seeded_rng):
        rock = registry.spawn(Kind.ROCK, Vector2(0, 0))
        registry.spawn(Kind.SCISSORS, Vector2(350, 0))
        goal, _ = decide_intent(rock, registry, seeded_rng)
        assert goal is Goal.WANDER

    def test_prey_exactly_at_radius_ignored(self, registry, seeded_rng):
        rock = registry.spawn(Kind.ROCK, Vector2(0, 0))
        registry.spawn(Kind.SCISSORS, Vector2(300, 0))
        goal, _ = decide_intent(rock, registry, seeded_rng)
        assert goal is Goal.WANDER

    def test_flee_predator_in_range(self, registry, seeded_rng):
        rock = registry.spawn(Kind.ROCK, Vector2(0, 0))
        registry.spawn(Kind.PAPER, Vector2(0, 450))
        goal, intent = decide_intent(rock, registry, seeded_rng)
        assert goal is Goal.FLEE
        assert intent == Vector2(0, -1)

    def test_attack_when_prey_closer(self, registry, seeded_rng):
        rock = registry.spawn(Kind.ROCK, Vector2(0, 0))
        registry.spawn(Kind.SCISSORS, Vector2(-100, 0))
        registry.spawn(Kind.PAPER, Vector2(200, 0))
        goal, intent = decide_intent(rock, registry, seeded_rng)
        assert goal is Goal.ATTACK
        assert intent == Vector2(-1, 0)

    def test_flee_when_predator_closer(self, registry, seeded_rng):
        rock = registry.spawn(Kind.ROCK, Vector2(0, 0))
        registry.spawn(Kind.SCISSORS, Vector2(-200, 0))
        registry.spawn(Kind.PAPER, Vector2(100, 0))
        goal, intent = decide_intent(rock, registry, seeded_rng)
        assert goal is Goal.FLEE
        assert intent == Vector2(-1, 0)

    def test_tie_goes_to_flee(self, registry, seeded_rng):
        paper = registry.spawn(Kind.PAPER, Vector2(0, 0))
        registry.spawn(Kind.ROCK, Vector2(150, 0))
        registry.spawn(Kind.SCISSORS, Vector2(0, 150))
        goal, intent = decide_intent(paper, registry, seeded_rng)
        assert goal is Goal.FLEE
        assert intent == Vector2(0, -1)

    def test_nearest_prey_is_chosen(self, registry, seeded_rng):
        scissors = registry.spawn(Kind.SCISSORS, Vector2(0, 0))
        registry.spawn(Kind.PAPER, Vector2(0, 300))
        registry.spawn(Kind.PAPER, Vector2(0, -200))
        goal, intent = decide_intent(scissors, registry, seeded_rng)
        assert goal is Goal.ATTACK
        assert intent == Vector2(0, -1)

    def test_same_kind_is_never_a_candidate(self, registry, seeded_rng):
        rock = registry.spawn(Kind.ROCK, Vector2(0, 0))
        registry.spawn(Kind.ROCK, Vector2(10, 0))
        other, dist_sq = nearest_of_kind(rock, registry, Kind.ROCK)
        assert other is not None and other is not rock
        goal, _ = decide_intent(rock, registry, seeded_rng)
        assert goal is Goal.WANDER

    def test_coincident_target_falls_back_to_wander(self, registry, seeded_rng):
        rock = registry.spawn(Kind.ROCK, Vector2(0, 0))
        registry.spawn(Kind.SCISSORS, Vector2(0, 0))
        goal, intent = decide_intent(rock, registry, seeded_rng)
        assert goal is Goal.WANDER
        assert intent is None or intent.length() == pytest.approx(1.0)

    def test_nearest_of_missing_kind(self, registry):
        rock = registry.spawn(Kind.ROCK, Vector2(0, 0))
        other, dist_sq = nearest_of_kind(rock, registry, Kind.PAPER)
        assert other is None
        assert dist_sq == float("inf")


class TestDecisionPass:
    def test_pass_sets_every_intent(self, registry, seeded_rng):
        registry.spawn(Kind.ROCK, Vector2(0, 0))
        registry.spawn(Kind.SCISSORS, Vector2(100, 0))
        registry.spawn(Kind.PAPER, Vector2(-2000, 0))
        goals = run_decision_pass(registry, seeded_rng)
        assert sum(goals.values()) == 3
        assert all(agent.intent is not None for agent in registry)

    def test_pass_does_not_move_or_create(self, registry, seeded_rng):
        rock = registry.spawn(Kind.ROCK, Vector2(0, 0))
        registry.spawn(Kind.SCISSORS, Vector2(10, 0))
        run_decision_pass(registry, seeded_rng)
        assert len(registry) == 2
        assert rock.pos == Vector2(0, 0)

    def test_intents_use_positions_from_pass_start(self, registry, seeded_rng):
        """Rock and scissors pick mirrored intents from the same snapshot."""
        rock = registry.spawn(Kind.ROCK, Vector2(0, 0))
        scissors = registry.spawn(Kind.SCISSORS, Vector2(100, 0))
        goals = run_decision_pass(registry, seeded_rng)
        assert goals[Goal.ATTACK] == 1
        assert goals[Goal.FLEE] == 1
        assert rock.intent == Vector2(1, 0)
        assert scissors.intent == Vector2(1, 0)
