"""
Base entity - shared attributes, damage handling and collision test.
"""

import itertools
import math
import time
from abc import ABC, abstractmethod
from typing import Dict, Any

from ..core.geometry import Position, ScreenBounds

# Fixed hit radius, not size-aware
COLLISION_RADIUS = 25

DEFAULT_SCREEN_BOUNDS = ScreenBounds(0, 0, 800, 600)

_id_counter = itertools.count(1)


def monotonic_ms() -> float:
    """Milliseconds from a monotonic clock, used for shot cooldowns."""
    return time.monotonic() * 1000.0


class GameEntity(ABC):
    """
    Anything that lives on the playfield.

    Each entity gets a unique, increasing id. Health never drops below
    zero and the entity is dead once it reaches zero.
    """

    def __init__(self, x: int, y: int, health: int, sprite: str):
        self.id = next(_id_counter)
        self.x = x
        self.y = y
        self.health = health
        self.max_health = health
        self.alive = True
        self.sprite = sprite
        self.created_at = time.time()

    @abstractmethod
    def update(self) -> None:
        """Advance the entity by one tick."""
        pass

    @abstractmethod
    def render(self) -> str:
        """One-line text description for console output."""
        pass

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)

    def set_position(self, x: int, y: int) -> None:
        """Move the entity, flooring both coordinates at zero."""
        self.x = max(0, x)
        self.y = max(0, y)

    def take_damage(self, amount: int) -> None:
        """
        Reduce health, flooring at zero.

        Raises:
            ValueError: If amount is negative
        """
        if amount < 0:
            raise ValueError("Damage cannot be negative")

        self.health = max(0, self.health - amount)
        if self.health <= 0:
            self.alive = False

    def heal(self, amount: int) -> None:
        """
        Restore health up to max_health.

        Raises:
            ValueError: If amount is negative
        """
        if amount < 0:
            raise ValueError("Heal amount cannot be negative")

        self.health = min(self.max_health, self.health + amount)

    @property
    def health_percentage(self) -> float:
        return self.health / self.max_health if self.max_health > 0 else 0.0

    def distance_to(self, other: "GameEntity") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def check_collision(self, other: "GameEntity") -> bool:
        """True when both entities are alive and their centers are within the hit radius."""
        if other is None or not other.alive or not self.alive:
            return False
        return self.distance_to(other) < COLLISION_RADIUS

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "kind": type(self).__name__.lower(),
            "x": self.x,
            "y": self.y,
            "health": self.health,
            "max_health": self.max_health,
            "alive": self.alive,
            "sprite": self.sprite,
        }

    def __eq__(self, other: object) -> bool:
        return isinstance(other, GameEntity) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id}, pos=({self.x},{self.y}), health={self.health})"
