"""
Abstract renderer interface for Invaders.

Every renderer consumes the snapshot produced by
SpaceInvadersGame.get_state() and turns it into user-facing output.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Tuple


class RendererInterface(ABC):
    """
    Abstract renderer for game visualization.

    Renderers must treat the snapshot as read-only; it reflects the tick
    it was taken on and nothing later.
    """

    @abstractmethod
    def render(self, game_state: Dict[str, Any]) -> Any:
        """
        Render a game state snapshot.

        Args:
            game_state: Dictionary returned by SpaceInvadersGame.get_state()
        """
        pass

    @abstractmethod
    def get_preferred_size(self) -> Tuple[int, int]:
        """
        Get the preferred render size.

        Returns:
            Tuple of (width, height) in the renderer's own units
        """
        pass

    def close(self) -> None:
        """Release any resources held by the renderer."""
        pass
