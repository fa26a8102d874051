"""
Kill points and end-of-game ranking.
"""

from typing import Sequence, Tuple

from ..entities.enemy import Enemy

DEFAULT_POINTS = 50


def points_for(enemy: Enemy) -> int:
    """Points awarded for destroying an enemy; untyped enemies are worth DEFAULT_POINTS."""
    if enemy.enemy_type is None:
        return DEFAULT_POINTS
    return enemy.enemy_type.points


def rank_for(score: int, thresholds: Sequence[Tuple[int, str]]) -> str:
    """
    Title for a final score.

    Args:
        score: Final score
        thresholds: (minimum score, title) pairs, highest first

    Returns:
        The first title whose minimum the score reaches
    """
    for minimum, title in thresholds:
        if score >= minimum:
            return title
    return thresholds[-1][1] if thresholds else ""
