"""
Enemy construction: the enemy catalogue and the factory that builds
single enemies and whole waves from it.
"""

from .enemy_type import EnemyType
from .enemy_factory import (
    EnemyConfig,
    create_enemy,
    create_enemy_of_type,
    create_hunter_enemy,
    create_enemy_wave,
    default_strategy_for,
    describe_enemy_type,
)

__all__ = [
    'EnemyType',
    'EnemyConfig',
    'create_enemy',
    'create_enemy_of_type',
    'create_hunter_enemy',
    'create_enemy_wave',
    'default_strategy_for',
    'describe_enemy_type',
]
