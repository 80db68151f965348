"""Tests for the fixed-rate decision clock."""

import pytest

from rps.exceptions import ConfigurationError, SimulationError
from rps.time_system import FixedRateClock


class TestFixedRateClock:
    def test_accumulates_until_step(self):
        clock = FixedRateClock(4.0)
        assert clock.advance(0.125) == 0
        assert clock.advance(0.125) == 1
        assert clock.pending == 0.0

    def test_large_dt_reports_several_steps(self):
        clock = FixedRateClock(4.0)
        assert clock.advance(1.0) == 4
        assert clock.ticks == 4

    def test_remainder_carries_over(self):
        clock = FixedRateClock(4.0)
        assert clock.advance(0.375) == 1
        assert clock.pending == pytest.approx(0.125)
        assert clock.advance(0.125) == 1

    def test_fire_immediately(self):
        clock = FixedRateClock(4.0, fire_immediately=True)
        assert clock.advance(0.0) == 1
        assert clock.advance(0.125) == 0

    def test_rate_is_independent_of_frame_size(self):
        coarse = FixedRateClock(4.0)
        fine = FixedRateClock(4.0)
        coarse_total = sum(coarse.advance(0.5) for _ in range(4))
        fine_total = sum(fine.advance(0.0625) for _ in range(32))
        assert coarse_total == fine_total == 8

    def test_reset(self):
        clock = FixedRateClock(4.0)
        clock.advance(0.6)
        clock.reset()
        assert clock.ticks == 0
        assert clock.pending == 0.0

    def test_invalid_rate(self):
        with pytest.raises(ConfigurationError):
            FixedRateClock(0)

    def test_negative_dt(self):
        with pytest.raises(SimulationError):
            FixedRateClock(5.0).advance(-0.01)
