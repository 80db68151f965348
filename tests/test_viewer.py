"""Tests for the pygame viewer that do not open a window."""

import pytest

pytest.importorskip("pygame")

from arena_viewer import ArenaViewer  # noqa: E402
from rps.config.simulation_config import SimulationConfig  # noqa: E402
from rps.simulation.engine import SimulationEngine  # noqa: E402


@pytest.fixture
def viewer():
    config = SimulationConfig.for_arena(800, 600, count_per_kind=2)
    config.timing.frame_rate = 30
    return ArenaViewer(SimulationEngine(config, seed=1))


class TestArenaViewer:
    def test_uses_configured_frame_rate(self, viewer):
        assert viewer.frame_rate == 30

    def test_to_screen_centres_origin_and_flips_y(self, viewer):
        assert viewer.to_screen(0, 0) == (400, 300)
        assert viewer.to_screen(100, 50) == (500, 250)
        assert viewer.to_screen(-400, -300) == (0, 600)
