"""Tests for simulation configuration and the command-line entry point."""

import json

import pytest

from rps.config.simulation_config import SimulationConfig
from rps.exceptions import ConfigurationError


class TestSimulationConfig:
    def test_defaults_are_valid(self):
        SimulationConfig().validate()

    def test_for_arena(self):
        config = SimulationConfig.for_arena(640, 480, count_per_kind=3)
        assert (config.arena.width, config.arena.height) == (640, 480)
        assert config.agents.count_per_kind == 3
        assert config.agents.collision_threshold == config.agents.size == 52

    @pytest.mark.parametrize(
        "section, field, value",
        [
            ("arena", "width", 0),
            ("arena", "height", -5),
            ("arena", "width", 52),
            ("agents", "size", 0),
            ("agents", "speed", -1),
            ("agents", "collision_threshold", 0),
            ("agents", "count_per_kind", -1),
            ("agents", "spawn_max_attempts", 0),
            ("timing", "decision_rate_hz", 0),
            ("timing", "headless_frame_dt", 0),
        ],
    )
    def test_invalid_values(self, section, field, value):
        config = SimulationConfig()
        setattr(getattr(config, section), field, value)
        with pytest.raises(ConfigurationError):
            config.validate()

    def test_with_overrides(self):
        config = SimulationConfig().with_overrides(debug_invariants=True)
        assert config.debug_invariants is True

    def test_to_dict(self):
        data = SimulationConfig().to_dict()
        assert data["agents"]["speed"] == 150
        assert data["timing"]["decision_rate_hz"] == 5


class TestCommandLine:
    def test_headless_run(self, tmp_path):
        import main

        out = tmp_path / "stats.json"
        code = main.main(
            [
                "--headless",
                "--max-frames",
                "30",
                "--seed",
                "1",
                "--agents-per-kind",
                "3",
                "--width",
                "800",
                "--height",
                "600",
                "--export-stats",
                str(out),
            ]
        )
        assert code == 0
        assert json.loads(out.read_text())["frame_count"] == 30

    def test_bad_arena_reports_configuration_error(self):
        import main

        assert main.main(["--headless", "--width", "10", "--max-frames", "1"]) == 2
