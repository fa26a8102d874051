"""
Player ship - moves only on command and fires upward.
"""

from typing import Dict, Any, Optional

from ..core.geometry import ScreenBounds
from .base import GameEntity, DEFAULT_SCREEN_BOUNDS, monotonic_ms
from .projectile import Projectile, FLIGHT_MARGIN

PLAYER_HEALTH = 100
PLAYER_SPEED = 5
SHOT_COOLDOWN_MS = 250
SHOT_VELOCITY = -8
SHOT_DAMAGE = 25
SHOT_SPRITE = "🔸"


class Player(GameEntity):
    """The player's ship."""

    def __init__(
        self,
        x: int,
        y: int,
        speed: int = PLAYER_SPEED,
        health: int = PLAYER_HEALTH,
        shot_cooldown_ms: int = SHOT_COOLDOWN_MS,
        screen_bounds: ScreenBounds = DEFAULT_SCREEN_BOUNDS,
        score: int = 0,
    ):
        super().__init__(x, y, health, "🚀")
        self.speed = speed
        self.score = score
        self.shot_cooldown_ms = shot_cooldown_ms
        self.screen_bounds = screen_bounds
        self.last_shot_ms: Optional[float] = None

    def update(self) -> None:
        # The player only moves in response to commands
        pass

    def render(self) -> str:
        health_bar = "❤" * max(0, self.health // 20)
        return f"Player {self.sprite} at ({self.x}, {self.y}) {health_bar} Score: {self.score}"

    def _move(self, dx: int, dy: int) -> None:
        pos = self.screen_bounds.clamp(self.x + dx, self.y + dy)
        self.set_position(pos.x, pos.y)

    def move_left(self) -> bool:
        if self.x > self.screen_bounds.min_x:
            self._move(-self.speed, 0)
            return True
        return False

    def move_right(self) -> bool:
        if self.x < self.screen_bounds.max_x:
            self._move(self.speed, 0)
            return True
        return False

    def move_up(self) -> bool:
        if self.y > self.screen_bounds.min_y:
            self._move(0, -self.speed)
            return True
        return False

    def move_down(self) -> bool:
        # Keep clear of the bottom strip
        if self.y < self.screen_bounds.max_y - 50:
            self._move(0, self.speed)
            return True
        return False

    def can_shoot(self, now_ms: Optional[float] = None) -> bool:
        if self.last_shot_ms is None:
            return True
        now_ms = monotonic_ms() if now_ms is None else now_ms
        return now_ms - self.last_shot_ms >= self.shot_cooldown_ms

    def remaining_cooldown(self, now_ms: Optional[float] = None) -> float:
        """Milliseconds until the next shot is allowed."""
        if self.last_shot_ms is None:
            return 0.0
        now_ms = monotonic_ms() if now_ms is None else now_ms
        return max(0.0, self.shot_cooldown_ms - (now_ms - self.last_shot_ms))

    def shoot(self, now_ms: Optional[float] = None) -> Optional[Projectile]:
        """Fire a shot straight up, or return None while reloading."""
        now_ms = monotonic_ms() if now_ms is None else now_ms
        if not self.can_shoot(now_ms):
            return None

        self.last_shot_ms = now_ms
        return Projectile(
            self.x,
            self.y - 10,
            velocity_x=0,
            velocity_y=SHOT_VELOCITY,
            damage=SHOT_DAMAGE,
            sprite=SHOT_SPRITE,
            from_player=True,
            flight_bounds=self.screen_bounds.expand(FLIGHT_MARGIN),
        )

    def add_score(self, points: int) -> None:
        if points < 0:
            raise ValueError("Points cannot be negative")
        self.score += points

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({"speed": self.speed, "score": self.score})
        return data
