"""
Enemy factory - build enemies from the catalogue and lay out waves.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..core.geometry import Position
from ..entities.enemy import Enemy
from ..strategies.base import MovementStrategy
from ..strategies.aggressive import AggressiveMovementStrategy
from ..strategies.factory import StrategyType, create_strategy, DEFAULT_TARGET
from .enemy_type import EnemyType

logger = logging.getLogger(__name__)

# Wave layout
WAVE_ROWS = 3
WAVE_COLS = 8
WAVE_START_X = 100
WAVE_START_Y = 50
WAVE_COL_SPACING = 60
WAVE_ROW_SPACING = 40
ROW_TYPES = (EnemyType.BASIC, EnemyType.SCOUT, EnemyType.HEAVY)
BOSS_POSITION = Position(400, 100)
HUNTER_START_X = 200
HUNTER_SPACING = 200
HUNTER_Y = 150

_DESCRIPTIONS = {
    EnemyType.BASIC: "Basic enemy with predictable linear movement",
    EnemyType.SCOUT: "Fast scout with zigzag movement",
    EnemyType.HEAVY: "Heavy enemy, slow but tough",
    EnemyType.BOSS: "Boss with circular movement and high resistance",
    EnemyType.HUNTER: "Aggressive hunter that chases the player",
}


@dataclass
class EnemyConfig:
    """Everything needed to build one enemy. Validated on construction."""
    enemy_type: EnemyType
    position: Position
    movement_strategy: Optional[MovementStrategy] = None
    health_multiplier: int = 1
    damage_multiplier: int = 1

    def __post_init__(self):
        if self.enemy_type is None or self.position is None:
            raise ValueError("Type and position are required")
        if self.health_multiplier <= 0 or self.damage_multiplier <= 0:
            raise ValueError("Multipliers must be positive")


def default_strategy_for(enemy_type: EnemyType, position: Position) -> MovementStrategy:
    """Movement strategy an enemy of this type gets when none is supplied."""
    if enemy_type == EnemyType.BASIC:
        return create_strategy(StrategyType.LINEAR, speed=2)
    if enemy_type == EnemyType.SCOUT:
        return create_strategy(StrategyType.ZIGZAG, speed=3, amplitude=15)
    if enemy_type == EnemyType.HEAVY:
        return create_strategy(StrategyType.LINEAR, speed=1)
    if enemy_type == EnemyType.BOSS:
        return create_strategy(
            StrategyType.CIRCULAR, center=position, radius=50, angular_speed=0.05
        )
    if enemy_type == EnemyType.HUNTER:
        return create_strategy(StrategyType.AGGRESSIVE, speed=2, target=DEFAULT_TARGET)
    raise ValueError(f"Unknown enemy type: {enemy_type}")


def create_enemy(config: EnemyConfig) -> Enemy:
    """Build an enemy with scaled stats from a validated config."""
    strategy = config.movement_strategy
    if strategy is None:
        strategy = default_strategy_for(config.enemy_type, config.position)

    return Enemy(
        name=config.enemy_type.label,
        x=config.position.x,
        y=config.position.y,
        health=config.enemy_type.health * config.health_multiplier,
        damage=config.enemy_type.damage * config.damage_multiplier,
        movement_strategy=strategy,
        sprite=config.enemy_type.sprite,
        enemy_type=config.enemy_type,
    )


def create_enemy_of_type(enemy_type: EnemyType, x: int, y: int) -> Enemy:
    """Build an unscaled enemy with its default strategy."""
    return create_enemy(EnemyConfig(enemy_type, Position(x, y)))


def create_hunter_enemy(x: int, y: int, target: Position) -> Enemy:
    """Build a hunter pursuing the given target."""
    strategy = AggressiveMovementStrategy(2, target)
    return create_enemy(EnemyConfig(EnemyType.HUNTER, Position(x, y), strategy))


def create_enemy_wave(level: int) -> List[Enemy]:
    """
    Build the enemy wave for a level.

    A 3x8 grid (basic, scout, heavy rows) scaled by level, a boss every
    third level and level // 5 hunters past level 5.

    Args:
        level: Level number, starting at 1

    Returns:
        Enemies in grid row-major order, then the boss, then hunters
    """
    if level < 1:
        raise ValueError(f"Level must be at least 1, got {level}")

    health_multiplier = max(1, level // 2)
    damage_multiplier = max(1, level // 3)
    enemies: List[Enemy] = []

    for row in range(WAVE_ROWS):
        for col in range(WAVE_COLS):
            position = Position(
                WAVE_START_X + col * WAVE_COL_SPACING,
                WAVE_START_Y + row * WAVE_ROW_SPACING,
            )
            enemies.append(create_enemy(EnemyConfig(
                ROW_TYPES[row],
                position,
                health_multiplier=health_multiplier,
                damage_multiplier=damage_multiplier,
            )))

    if level % 3 == 0:
        enemies.append(create_enemy(EnemyConfig(
            EnemyType.BOSS,
            BOSS_POSITION,
            health_multiplier=level,
            damage_multiplier=level,
        )))

    if level > 5:
        for i in range(level // 5):
            enemies.append(create_hunter_enemy(
                HUNTER_START_X + i * HUNTER_SPACING, HUNTER_Y, DEFAULT_TARGET
            ))

    logger.debug("Created wave for level %d with %d enemies", level, len(enemies))
    return enemies


def describe_enemy_type(enemy_type: EnemyType) -> str:
    return _DESCRIPTIONS[enemy_type]
