"""
Circular movement - bosses orbit their spawn point.
"""

import math

from ..core.geometry import Position, ScreenBounds
from .base import MovementStrategy

TWO_PI = 2 * math.pi


class CircularMovementStrategy(MovementStrategy):
    """Orbits a fixed center; the angle wraps back into [0, 2π)."""

    def __init__(self, center: Position, radius: int = 50, angular_speed: float = 0.05):
        self.center = center
        self.radius = max(10, radius)
        self.angular_speed = angular_speed
        self.current_angle = 0.0

    def calculate_next_position(self, position: Position, bounds: ScreenBounds) -> Position:
        self.current_angle += self.angular_speed
        if self.current_angle >= TWO_PI:
            self.current_angle -= TWO_PI

        new_x = self.center.x + int(self.radius * math.cos(self.current_angle))
        new_y = self.center.y + int(self.radius * math.sin(self.current_angle))
        return bounds.clamp(new_x, new_y)

    @property
    def name(self) -> str:
        return f"Circular Movement (Radius: {self.radius}, Speed: {self.angular_speed})"
