"""
Movement strategies for enemies.

Each strategy computes the next position of an entity from its current
position and the screen bounds, keeping any state it needs internally.
"""

from .base import MovementStrategy
from .linear import LinearMovementStrategy
from .zigzag import ZigzagMovementStrategy
from .circular import CircularMovementStrategy
from .aggressive import AggressiveMovementStrategy
from .factory import StrategyType, create_strategy

__all__ = [
    'MovementStrategy',
    'LinearMovementStrategy',
    'ZigzagMovementStrategy',
    'CircularMovementStrategy',
    'AggressiveMovementStrategy',
    'StrategyType',
    'create_strategy',
]
