"""Centralized math utilities for the simulation.

This module provides pure Python mathematical utilities for the simulation,
including a Vector2 implementation for 2D vector operations.
"""

from __future__ import annotations

import math


class Vector2:
    """A 2D vector class for mathematical operations."""

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x: float = float(x)
        self.y: float = float(y)

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def distance_to(self, other: "Vector2") -> float:
        return math.sqrt(self.distance_squared_to(other))

    def distance_squared_to(self, other: "Vector2") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0

    def normalize(self) -> "Vector2":
        length = math.sqrt(self.x * self.x + self.y * self.y)
        if length == 0:
            return Vector2(0, 0)
        return Vector2(self.x / length, self.y / length)

    def copy(self) -> "Vector2":
        """Return a copy of this vector."""
        return Vector2(self.x, self.y)

    def as_tuple(self) -> tuple:
        return (self.x, self.y)

    def __eq__(self, other: object) -> bool:
        """Check if two vectors are equal."""
        if other.__class__ is not Vector2:
            return False
        return abs(self.x - other.x) < 1e-9 and abs(self.y - other.y) < 1e-9

    def __ne__(self, other: object) -> bool:
        """Check if two vectors are not equal."""
        return not self.__eq__(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector2({self.x}, {self.y})"


__all__ = ["Vector2"]
