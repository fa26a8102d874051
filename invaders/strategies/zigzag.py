"""
Zigzag movement - scouts drift sideways on a sine wave.
"""

import math

from ..core.geometry import Position, ScreenBounds
from .base import MovementStrategy

FREQUENCY = 0.1


class ZigzagMovementStrategy(MovementStrategy):
    """Advances X by a fixed speed and oscillates Y around the current row."""

    def __init__(self, speed: int = 3, amplitude: int = 15):
        self.speed = max(1, speed)
        self.amplitude = max(5, amplitude)
        self.frequency = FREQUENCY
        self.tick = 0

    def calculate_next_position(self, position: Position, bounds: ScreenBounds) -> Position:
        self.tick += 1
        new_x = position.x + self.speed
        oscillation = int(self.amplitude * math.sin(self.tick * self.frequency))
        return bounds.clamp(new_x, position.y + oscillation)

    @property
    def name(self) -> str:
        return f"Zigzag Movement (Speed: {self.speed}, Amplitude: {self.amplitude})"
