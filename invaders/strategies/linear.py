"""
Linear movement - classic invader march for basic enemies.
"""

from ..core.geometry import Position, ScreenBounds
from .base import MovementStrategy

DESCENT_STEP = 30


class LinearMovementStrategy(MovementStrategy):
    """
    Moves horizontally; on reaching either edge it reverses, holds X for
    that tick and drops by DESCENT_STEP.
    """

    def __init__(self, speed: int = 2):
        self.speed = max(1, speed)
        self.direction = 1  # 1 = right, -1 = left
        self._descended = False

    def calculate_next_position(self, position: Position, bounds: ScreenBounds) -> Position:
        new_x = position.x + self.speed * self.direction
        new_y = position.y

        if new_x <= bounds.min_x or new_x >= bounds.max_x:
            self.direction *= -1
            new_x = position.x
            new_y += DESCENT_STEP
            self._descended = True

        return bounds.clamp(new_x, new_y)

    def consume_descended(self) -> bool:
        """Return whether the entity dropped since the last call, then reset."""
        descended = self._descended
        self._descended = False
        return descended

    @property
    def name(self) -> str:
        return f"Linear Movement (Speed: {self.speed})"
