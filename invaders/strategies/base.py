"""
Abstract movement strategy.
"""

from abc import ABC, abstractmethod

from ..core.geometry import Position, ScreenBounds


class MovementStrategy(ABC):
    """
    Pluggable algorithm that moves an entity once per tick.

    Implementations must always return a position inside the bounds they
    were given; clamping happens after the move is computed.
    """

    @abstractmethod
    def calculate_next_position(self, position: Position, bounds: ScreenBounds) -> Position:
        """
        Compute the next position.

        Args:
            position: Current position of the entity
            bounds: Area the entity must stay within

        Returns:
            The new position, inside bounds
        """
        pass

    def update(self) -> None:
        """Optional per-tick hook called after the entity has moved."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable description of the strategy and its parameters."""
        pass

    def __str__(self) -> str:
        return self.name
