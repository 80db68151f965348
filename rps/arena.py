"""Arena geometry.

The arena is a ``width x height`` rectangle centred on the origin. Agents
are discs of diameter ``footprint``; the interior is the region their
centres may occupy without the disc leaving the arena.
"""

import random
from dataclasses import dataclass

from rps.math_utils import Vector2

__all__ = ["ArenaBounds"]


@dataclass(frozen=True)
class ArenaBounds:
    """Interior rectangle for agent centres plus the full arena extent."""

    width: float
    height: float
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @classmethod
    def from_dimensions(cls, width: float, height: float, footprint: float) -> "ArenaBounds":
        """Compute the interior ``[-W/2+D/2, W/2-D/2] x [-H/2+D/2, H/2-D/2]``."""
        half_w = width / 2.0
        half_h = height / 2.0
        radius = footprint / 2.0
        return cls(
            width=width,
            height=height,
            min_x=-half_w + radius,
            max_x=half_w - radius,
            min_y=-half_h + radius,
            max_y=half_h - radius,
        )

    def is_inside(self, pos: Vector2) -> bool:
        """Strict containment test against the interior."""
        return self.min_x < pos.x < self.max_x and self.min_y < pos.y < self.max_y

    def contains_closed(self, pos: Vector2) -> bool:
        """Inclusive containment; clamped positions may sit on the edge."""
        return self.min_x <= pos.x <= self.max_x and self.min_y <= pos.y <= self.max_y

    def clamp_inside(self, pos: Vector2) -> Vector2:
        """Clamp each axis to the interior independently."""
        return Vector2(
            min(max(pos.x, self.min_x), self.max_x),
            min(max(pos.y, self.min_y), self.max_y),
        )

    def random_point(self, rng: random.Random) -> Vector2:
        """Uniform point over the full arena rectangle (not just the interior)."""
        return Vector2(
            rng.uniform(-self.width / 2.0, self.width / 2.0),
            rng.uniform(-self.height / 2.0, self.height / 2.0),
        )
