"""
Aggressive movement - hunters chase a tracked target.
"""

import math
from typing import Optional

from ..core.geometry import Position, ScreenBounds
from .base import MovementStrategy

AGGRESSION_FACTOR = 0.8
HOLD_DISTANCE = 5


class AggressiveMovementStrategy(MovementStrategy):
    """
    Steps toward the target along the normalized direction vector.

    Holds position when there is no target or it is closer than
    HOLD_DISTANCE units.
    """

    def __init__(self, speed: int = 2, target: Optional[Position] = None):
        self.speed = max(1, speed)
        self.target = target
        self.aggression_factor = AGGRESSION_FACTOR

    def calculate_next_position(self, position: Position, bounds: ScreenBounds) -> Position:
        if self.target is None:
            return position

        delta_x = self.target.x - position.x
        delta_y = self.target.y - position.y
        distance = math.hypot(delta_x, delta_y)

        if distance < HOLD_DISTANCE:
            return position

        step = self.speed * self.aggression_factor
        new_x = position.x + int(delta_x / distance * step)
        new_y = position.y + int(delta_y / distance * step)
        return bounds.clamp(new_x, new_y)

    def update_target(self, target: Position) -> None:
        """Point the hunter at a new target position."""
        self.target = target

    @property
    def name(self) -> str:
        return f"Aggressive Movement (Speed: {self.speed}, Aggression: {self.aggression_factor})"
