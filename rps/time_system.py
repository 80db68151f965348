"""Fixed-rate clock for the decision timeline.

Decisions run at a fixed rate regardless of the frame rate. The clock
accumulates per-frame elapsed time and reports how many whole decision
steps have come due, carrying the remainder into the next frame.
"""

from rps.exceptions import ConfigurationError, SimulationError


class FixedRateClock:
    """Accumulator that converts variable frame time into fixed steps.

    Attributes:
        rate_hz: Steps per second
        step: Seconds per step
        ticks: Total steps reported so far
    """

    def __init__(self, rate_hz: float, fire_immediately: bool = False) -> None:
        """Initialize the clock.

        Args:
            rate_hz: Steps per second
            fire_immediately: Report one step on the very first advance
        """
        if rate_hz <= 0:
            raise ConfigurationError(f"rate_hz must be positive, got {rate_hz}")
        self.rate_hz = rate_hz
        self.step = 1.0 / rate_hz
        self.ticks = 0
        self._accumulator = self.step if fire_immediately else 0.0

    def advance(self, dt: float) -> int:
        """Add ``dt`` seconds and return the number of steps now due."""
        if dt < 0:
            raise SimulationError(f"Elapsed time must be non-negative, got {dt}")
        self._accumulator += dt
        due = int(self._accumulator // self.step)
        if due:
            self._accumulator -= due * self.step
            self.ticks += due
        return due

    @property
    def pending(self) -> float:
        """Seconds accumulated toward the next step."""
        return self._accumulator

    def reset(self) -> None:
        self._accumulator = 0.0
        self.ticks = 0
