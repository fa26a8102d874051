"""
Enemy - moved each tick by its movement strategy, fires at random.
"""

import random
from typing import Dict, Any, Optional, TYPE_CHECKING

from ..core.geometry import ScreenBounds
from ..strategies.base import MovementStrategy
from .base import GameEntity, DEFAULT_SCREEN_BOUNDS, monotonic_ms
from .projectile import Projectile, FLIGHT_MARGIN

if TYPE_CHECKING:
    from ..factories.enemy_type import EnemyType

SHOT_PROBABILITY = 0.002
SHOT_COOLDOWN_MS = 1000
SHOT_VELOCITY = 3
SHOT_SPRITE = "🔻"
OFF_SCREEN_MARGIN = 50


class Enemy(GameEntity):
    """An invader. Its movement strategy can be swapped at any time."""

    def __init__(
        self,
        name: str,
        x: int,
        y: int,
        health: int,
        damage: int,
        movement_strategy: Optional[MovementStrategy],
        sprite: str,
        enemy_type: Optional["EnemyType"] = None,
        screen_bounds: ScreenBounds = DEFAULT_SCREEN_BOUNDS,
        shot_probability: float = SHOT_PROBABILITY,
        shot_cooldown_ms: int = SHOT_COOLDOWN_MS,
    ):
        super().__init__(x, y, health, sprite)
        self.name = name
        self.damage = damage
        self.movement_strategy = movement_strategy
        self.enemy_type = enemy_type
        self.screen_bounds = screen_bounds
        self.shot_probability = shot_probability
        self.shot_cooldown_ms = shot_cooldown_ms
        self.last_shot_ms: Optional[float] = None

    def update(self) -> None:
        if self.alive and self.movement_strategy is not None:
            new_position = self.movement_strategy.calculate_next_position(
                self.position, self.screen_bounds
            )
            self.set_position(new_position.x, new_position.y)
            self.movement_strategy.update()

    def render(self) -> str:
        health_bar = "▓" * max(1, int(self.health_percentage * 5))
        return f"{self.name} {self.sprite} at ({self.x}, {self.y}) {health_bar}"

    def shoot(
        self,
        now_ms: Optional[float] = None,
        rng: Optional[random.Random] = None,
    ) -> Optional[Projectile]:
        """
        Maybe fire a shot downward.

        Returns None while the cooldown is running or when the random
        gate fails.
        """
        now_ms = monotonic_ms() if now_ms is None else now_ms
        if self.last_shot_ms is not None and now_ms - self.last_shot_ms < self.shot_cooldown_ms:
            return None

        if (rng or random).random() > self.shot_probability:
            return None

        self.last_shot_ms = now_ms
        return Projectile(
            self.x,
            self.y + 10,
            velocity_x=0,
            velocity_y=SHOT_VELOCITY,
            damage=self.damage,
            sprite=SHOT_SPRITE,
            from_player=False,
            flight_bounds=self.screen_bounds.expand(FLIGHT_MARGIN),
        )

    def is_off_screen(self) -> bool:
        return (
            self.y > self.screen_bounds.max_y + OFF_SCREEN_MARGIN
            or self.x < self.screen_bounds.min_x - OFF_SCREEN_MARGIN
            or self.x > self.screen_bounds.max_x + OFF_SCREEN_MARGIN
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({
            "name": self.name,
            "damage": self.damage,
            "type": self.enemy_type.name if self.enemy_type is not None else None,
            "strategy": self.movement_strategy.name if self.movement_strategy else None,
        })
        return data
