"""
Shared game state: score, lives, level and the running/over flags.
"""

from .game_manager import GameState, GameStats, GameManager, get_game_manager

__all__ = [
    'GameState',
    'GameStats',
    'GameManager',
    'get_game_manager',
]
