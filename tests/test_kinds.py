"""Tests for the kind set and the cyclic beats relation."""

import pytest

from rps.kinds import COLLISION_ORDER, KIND_PROFILES, Kind, predator, prey, profile


class TestBeatsRelation:
    def test_prey_cycle(self):
        assert prey(Kind.ROCK) is Kind.SCISSORS
        assert prey(Kind.SCISSORS) is Kind.PAPER
        assert prey(Kind.PAPER) is Kind.ROCK

    @pytest.mark.parametrize("kind", list(Kind))
    def test_predator_inverts_prey(self, kind):
        assert predator(prey(kind)) is kind
        assert prey(predator(kind)) is kind

    @pytest.mark.parametrize("kind", list(Kind))
    def test_three_step_cycle_returns_to_start(self, kind):
        assert prey(prey(prey(kind))) is kind

    @pytest.mark.parametrize("kind", list(Kind))
    def test_no_kind_preys_on_itself(self, kind):
        assert prey(kind) is not kind
        assert predator(kind) is not kind


class TestProfiles:
    def test_reference_radii(self):
        """Rock is cautious, scissors aggressive, paper balanced."""
        assert (profile(Kind.ROCK).attack_radius, profile(Kind.ROCK).flee_radius) == (300, 500)
        assert (profile(Kind.PAPER).attack_radius, profile(Kind.PAPER).flee_radius) == (400, 400)
        assert (
            profile(Kind.SCISSORS).attack_radius,
            profile(Kind.SCISSORS).flee_radius,
        ) == (500, 300)

    def test_squared_radii(self):
        rock = profile(Kind.ROCK)
        assert rock.attack_radius_sq == 300 * 300
        assert rock.flee_radius_sq == 500 * 500

    def test_every_kind_has_a_profile(self):
        assert set(KIND_PROFILES) == set(Kind)

    def test_labels_are_distinct(self):
        labels = {p.label for p in KIND_PROFILES.values()}
        assert len(labels) == 3

    def test_collision_order_covers_every_kind_once(self):
        assert COLLISION_ORDER == (Kind.ROCK, Kind.SCISSORS, Kind.PAPER)

    def test_str_is_value(self):
        assert str(Kind.PAPER) == "paper"
