"""
Game entities: the player's ship, enemies and projectiles.
"""

from .base import GameEntity, COLLISION_RADIUS, DEFAULT_SCREEN_BOUNDS
from .player import Player
from .enemy import Enemy
from .projectile import Projectile

__all__ = [
    'GameEntity',
    'Player',
    'Enemy',
    'Projectile',
    'COLLISION_RADIUS',
    'DEFAULT_SCREEN_BOUNDS',
]
