"""Lightweight simulation configuration helpers."""

from dataclasses import asdict, dataclass, field, replace
from typing import Any, Dict, Optional

from rps.config.display import ARENA_HEIGHT, ARENA_WIDTH, FRAME_RATE, SEPARATOR_WIDTH
from rps.config.simulation import (
    AGENT_SIZE,
    AGENT_SPEED,
    AGENTS_PER_KIND,
    COLLISION_THRESHOLD,
    DECISION_RATE_HZ,
    HEADLESS_FRAME_DT,
    POPULATION_HISTORY_LENGTH,
    SPAWN_MAX_ATTEMPTS,
)
from rps.exceptions import ConfigurationError


@dataclass
class ArenaConfig:
    """Arena dimensions in arena-local units (origin at the centre)."""

    width: float = ARENA_WIDTH
    height: float = ARENA_HEIGHT


@dataclass
class AgentConfig:
    """Shared agent parameters."""

    size: float = AGENT_SIZE
    speed: float = AGENT_SPEED
    collision_threshold: float = COLLISION_THRESHOLD
    count_per_kind: int = AGENTS_PER_KIND
    spawn_max_attempts: int = SPAWN_MAX_ATTEMPTS


@dataclass
class TimingConfig:
    """Clock rates for the two simulation timelines."""

    decision_rate_hz: float = DECISION_RATE_HZ
    frame_rate: int = FRAME_RATE
    headless_frame_dt: float = HEADLESS_FRAME_DT


@dataclass
class SimulationConfig:
    """Configuration for simulation runtime behavior.

    Attributes:
        arena: Arena dimensions
        agents: Agent geometry, speed and population
        timing: Decision and frame clocks
        debug_invariants: Check containment and conservation after every frame
        history_length: Population samples retained by the tracker
        separator_width: Width of separator lines in console output
    """

    arena: ArenaConfig = field(default_factory=ArenaConfig)
    agents: AgentConfig = field(default_factory=AgentConfig)
    timing: TimingConfig = field(default_factory=TimingConfig)
    debug_invariants: bool = False
    history_length: int = POPULATION_HISTORY_LENGTH
    separator_width: int = SEPARATOR_WIDTH

    @classmethod
    def for_arena(
        cls,
        width: float,
        height: float,
        count_per_kind: Optional[int] = None,
    ) -> "SimulationConfig":
        """Build a default configuration for the given arena size."""
        agents = AgentConfig()
        if count_per_kind is not None:
            agents.count_per_kind = count_per_kind
        return cls(arena=ArenaConfig(width=width, height=height), agents=agents)

    def with_overrides(self, **overrides: Any) -> "SimulationConfig":
        """Return a copy with top-level fields replaced."""
        return replace(self, **overrides)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def validate(self) -> None:
        """Validate configuration parameters.

        Raises:
            ConfigurationError: If any parameter is invalid
        """
        if self.arena.width <= 0 or self.arena.height <= 0:
            raise ConfigurationError(
                f"Arena dimensions must be positive, got {self.arena.width}x{self.arena.height}"
            )
        if self.agents.size <= 0:
            raise ConfigurationError(f"Agent size must be positive, got {self.agents.size}")
        if self.arena.width <= self.agents.size or self.arena.height <= self.agents.size:
            raise ConfigurationError(
                f"Arena {self.arena.width}x{self.arena.height} has no interior "
                f"for agents of size {self.agents.size}"
            )
        if self.agents.speed < 0:
            raise ConfigurationError(f"Agent speed must be non-negative, got {self.agents.speed}")
        if self.agents.collision_threshold <= 0:
            raise ConfigurationError("collision_threshold must be positive")
        if self.agents.count_per_kind < 0:
            raise ConfigurationError(
                f"count_per_kind must be non-negative, got {self.agents.count_per_kind}"
            )
        if self.agents.spawn_max_attempts < 1:
            raise ConfigurationError("spawn_max_attempts must be at least 1")
        if self.timing.decision_rate_hz <= 0:
            raise ConfigurationError("decision_rate_hz must be positive")
        if self.timing.frame_rate <= 0:
            raise ConfigurationError("frame_rate must be positive")
        if self.timing.headless_frame_dt <= 0:
            raise ConfigurationError("headless_frame_dt must be positive")
        if self.history_length < 1:
            raise ConfigurationError("history_length must be at least 1")
