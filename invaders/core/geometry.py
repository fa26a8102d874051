"""
Geometry primitives - immutable positions and rectangular bounds.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """An on-screen coordinate. Both components are non-negative."""
    x: int
    y: int

    def __post_init__(self):
        if self.x < 0 or self.y < 0:
            raise ValueError(
                f"Position coordinates must be non-negative, got ({self.x}, {self.y})"
            )

    def add(self, dx: int, dy: int) -> "Position":
        """Return a new position offset by (dx, dy)."""
        return Position(self.x + dx, self.y + dy)

    def distance_to(self, other: "Position") -> float:
        """Euclidean distance to another position."""
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class ScreenBounds:
    """Closed rectangle; both edges are inside the bounds."""
    min_x: int
    min_y: int
    max_x: int
    max_y: int

    def contains(self, pos: Position) -> bool:
        """Inclusive membership test."""
        return self.contains_point(pos.x, pos.y)

    def contains_point(self, x: int, y: int) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def clamp(self, x: int, y: int) -> Position:
        """Clamp raw coordinates into the bounds."""
        return Position(
            max(self.min_x, min(x, self.max_x)),
            max(self.min_y, min(y, self.max_y)),
        )

    def expand(self, margin: int) -> "ScreenBounds":
        """Return bounds grown by margin on every side."""
        return ScreenBounds(
            self.min_x - margin,
            self.min_y - margin,
            self.max_x + margin,
            self.max_y + margin,
        )

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y
