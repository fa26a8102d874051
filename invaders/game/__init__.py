"""
Space Invaders simulation: configuration, commands, the tick loop and
the real-time session driver.
"""

from .config import SpaceInvadersConfig
from .commands import Command, CommandQueue, InputListener, parse_command
from .game import SpaceInvadersGame
from .scoring import points_for, rank_for
from .session import GameSession

__all__ = [
    "SpaceInvadersConfig",
    "Command",
    "CommandQueue",
    "InputListener",
    "parse_command",
    "SpaceInvadersGame",
    "GameSession",
    "points_for",
    "rank_for",
]
