"""Agent kinds and the cyclic "beats" relation.

The kind set is closed: Rock beats Scissors, Scissors beats Paper, Paper
beats Rock. Per-kind behavior is a lookup into ``KIND_PROFILES`` rather
than a class hierarchy.

The radii are deliberately asymmetric. Rock is cautious (flees from far,
hunts close), Scissors is aggressive (hunts from far, flees late) and Paper
sits in between. Changing them shifts the population balance.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

__all__ = [
    "Kind",
    "KindProfile",
    "KIND_PROFILES",
    "COLLISION_ORDER",
    "prey",
    "predator",
    "profile",
]


class Kind(Enum):
    """The three agent kinds."""

    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class KindProfile:
    """Behavior and presentation constants bound to a kind.

    Attributes:
        attack_radius: Max distance at which the kind pursues its prey
        flee_radius: Max distance at which the kind flees its predator
        color: RGB colour used by presentation shells
        label: Single-letter label used by presentation shells
    """

    attack_radius: float
    flee_radius: float
    color: Tuple[int, int, int]
    label: str

    @property
    def attack_radius_sq(self) -> float:
        return self.attack_radius * self.attack_radius

    @property
    def flee_radius_sq(self) -> float:
        return self.flee_radius * self.flee_radius


KIND_PROFILES: Dict[Kind, KindProfile] = {
    Kind.ROCK: KindProfile(attack_radius=300.0, flee_radius=500.0, color=(140, 140, 150), label="R"),
    Kind.PAPER: KindProfile(attack_radius=400.0, flee_radius=400.0, color=(235, 230, 205), label="P"),
    Kind.SCISSORS: KindProfile(attack_radius=500.0, flee_radius=300.0, color=(220, 70, 70), label="S"),
}

_PREY: Dict[Kind, Kind] = {
    Kind.ROCK: Kind.SCISSORS,
    Kind.SCISSORS: Kind.PAPER,
    Kind.PAPER: Kind.ROCK,
}

_PREDATOR: Dict[Kind, Kind] = {target: hunter for hunter, target in _PREY.items()}

# Predator passes per frame follow the prey chain starting at Rock.
COLLISION_ORDER: Tuple[Kind, ...] = (Kind.ROCK, Kind.SCISSORS, Kind.PAPER)


def prey(kind: Kind) -> Kind:
    """Return the kind that ``kind`` beats (its attack target)."""
    return _PREY[kind]


def predator(kind: Kind) -> Kind:
    """Return the kind that beats ``kind`` (its flee threat)."""
    return _PREDATOR[kind]


def profile(kind: Kind) -> KindProfile:
    return KIND_PROFILES[kind]
