"""
Projectile - a shot travelling at a fixed velocity.
"""

from typing import Dict, Any, Optional

from ..core.geometry import Position, ScreenBounds
from .base import GameEntity, DEFAULT_SCREEN_BOUNDS

FLIGHT_MARGIN = 50


class Projectile(GameEntity):
    """
    A shot fired by the player or an enemy.

    Health is always 1 and only serves as the in-flight flag: any damage
    consumes the projectile. Coordinates are kept raw (not floored at
    zero) so shots can travel past the top edge and leave the flight area.
    """

    def __init__(
        self,
        x: int,
        y: int,
        velocity_x: int,
        velocity_y: int,
        damage: int,
        sprite: str,
        from_player: bool,
        flight_bounds: Optional[ScreenBounds] = None,
    ):
        super().__init__(x, y, 1, sprite)
        self.velocity_x = velocity_x
        self.velocity_y = velocity_y
        self.damage = damage
        self.from_player = from_player
        self.flight_bounds = flight_bounds or DEFAULT_SCREEN_BOUNDS.expand(FLIGHT_MARGIN)

    def update(self) -> None:
        if not self.alive:
            return

        self.x += self.velocity_x
        self.y += self.velocity_y

        if not self.flight_bounds.contains_point(self.x, self.y):
            self.alive = False

    def render(self) -> str:
        return f"Projectile {self.sprite} at ({self.x}, {self.y})"

    @property
    def position(self) -> Position:
        # Nearest on-screen point while the shot is in the off-screen margin
        return Position(max(0, self.x), max(0, self.y))

    def set_position(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def can_collide_with(self, entity: GameEntity) -> bool:
        """Friendly-fire rule: shots never hit other shots or their own side."""
        from .player import Player
        from .enemy import Enemy

        if isinstance(entity, Projectile):
            return False
        if isinstance(entity, Player) and self.from_player:
            return False
        if isinstance(entity, Enemy) and not self.from_player:
            return False
        return True

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({
            "velocity_x": self.velocity_x,
            "velocity_y": self.velocity_y,
            "damage": self.damage,
            "from_player": self.from_player,
        })
        return data
