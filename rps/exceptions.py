"""RPS Arena exception hierarchy.

Centralised base classes so callers can catch narrowly and failures
are easier to diagnose.
"""


class RpsError(Exception):
    """Root of all RPS Arena domain exceptions."""


class SimulationError(RpsError):
    """Errors during simulation execution (engine, systems, registry)."""


class AgentNotFoundError(SimulationError, KeyError):
    """An agent identity is not present in the registry."""


class InvariantViolationError(SimulationError):
    """A registry or arena invariant was broken (indicates a defect)."""


class ConfigurationError(RpsError):
    """Invalid or missing configuration."""


class SpawnPlacementError(ConfigurationError):
    """The arena cannot accommodate the requested population at the required spacing."""
