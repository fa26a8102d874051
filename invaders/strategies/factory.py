"""
Strategy factory - build a movement strategy from its kind and parameters.
"""

from enum import Enum
from typing import Optional

from ..core.geometry import Position
from .base import MovementStrategy
from .linear import LinearMovementStrategy
from .zigzag import ZigzagMovementStrategy
from .circular import CircularMovementStrategy
from .aggressive import AggressiveMovementStrategy


class StrategyType(Enum):
    """Available movement algorithms."""
    LINEAR = "linear"
    ZIGZAG = "zigzag"
    AGGRESSIVE = "aggressive"
    CIRCULAR = "circular"


DEFAULT_TARGET = Position(400, 500)
DEFAULT_CENTER = Position(400, 200)


def create_strategy(
    kind: StrategyType,
    speed: Optional[int] = None,
    amplitude: int = 15,
    target: Optional[Position] = None,
    center: Optional[Position] = None,
    radius: int = 50,
    angular_speed: float = 0.05,
) -> MovementStrategy:
    """
    Create a movement strategy.

    Args:
        kind: Which algorithm to build
        speed: Step size (defaults: linear 2, zigzag 3, aggressive 2)
        amplitude: Zigzag oscillation height
        target: Aggressive pursuit target
        center: Circular orbit center
        radius: Circular orbit radius
        angular_speed: Circular angle increment per tick

    Returns:
        A fresh strategy instance
    """
    if kind == StrategyType.LINEAR:
        return LinearMovementStrategy(speed if speed is not None else 2)
    if kind == StrategyType.ZIGZAG:
        return ZigzagMovementStrategy(speed if speed is not None else 3, amplitude)
    if kind == StrategyType.AGGRESSIVE:
        return AggressiveMovementStrategy(
            speed if speed is not None else 2,
            target if target is not None else DEFAULT_TARGET,
        )
    if kind == StrategyType.CIRCULAR:
        return CircularMovementStrategy(
            center if center is not None else DEFAULT_CENTER,
            radius,
            angular_speed,
        )
    raise ValueError(f"Unknown strategy type: {kind}")
