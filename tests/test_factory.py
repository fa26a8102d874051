"""
Tests for the enemy catalogue and wave construction.
"""

from collections import Counter

import pytest

from invaders.core import Position
from invaders.factories import (
    EnemyConfig,
    EnemyType,
    create_enemy,
    create_enemy_of_type,
    create_enemy_wave,
    create_hunter_enemy,
    describe_enemy_type,
)
from invaders.strategies import (
    AggressiveMovementStrategy,
    CircularMovementStrategy,
    LinearMovementStrategy,
    ZigzagMovementStrategy,
)


class TestEnemyConfig:
    """Validation of enemy build requests."""

    def test_requires_type_and_position(self):
        """Test missing type or position is rejected."""
        with pytest.raises(ValueError):
            EnemyConfig(None, Position(0, 0))
        with pytest.raises(ValueError):
            EnemyConfig(EnemyType.BASIC, None)

    def test_multipliers_must_be_positive(self):
        """Test zero or negative multipliers are rejected."""
        with pytest.raises(ValueError):
            EnemyConfig(EnemyType.BASIC, Position(0, 0), health_multiplier=0)
        with pytest.raises(ValueError):
            EnemyConfig(EnemyType.BASIC, Position(0, 0), damage_multiplier=-1)


class TestCreateEnemy:
    """Single enemy construction."""

    def test_stats_scale_with_multipliers(self):
        """Test health and damage are base stats times the multipliers."""
        enemy = create_enemy(EnemyConfig(
            EnemyType.HEAVY, Position(10, 20), health_multiplier=2, damage_multiplier=3
        ))

        assert enemy.health == 400
        assert enemy.damage == 75
        assert enemy.name == "Heavy Invader"
        assert enemy.position == Position(10, 20)

    @pytest.mark.parametrize("enemy_type,strategy_cls", [
        (EnemyType.BASIC, LinearMovementStrategy),
        (EnemyType.SCOUT, ZigzagMovementStrategy),
        (EnemyType.HEAVY, LinearMovementStrategy),
        (EnemyType.BOSS, CircularMovementStrategy),
        (EnemyType.HUNTER, AggressiveMovementStrategy),
    ])
    def test_default_strategy(self, enemy_type, strategy_cls):
        """Test each type gets its default movement."""
        enemy = create_enemy_of_type(enemy_type, 100, 100)

        assert isinstance(enemy.movement_strategy, strategy_cls)
        assert enemy.enemy_type == enemy_type

    def test_heavy_moves_slowly(self):
        """Test heavy invaders march at speed 1."""
        assert create_enemy_of_type(EnemyType.HEAVY, 0, 0).movement_strategy.speed == 1

    def test_boss_orbits_spawn_point(self):
        """Test the boss circles where it was created."""
        boss = create_enemy_of_type(EnemyType.BOSS, 300, 120)

        assert boss.movement_strategy.center == Position(300, 120)

    def test_explicit_strategy_kept(self):
        """Test a supplied strategy overrides the default."""
        strategy = LinearMovementStrategy(speed=9)
        enemy = create_enemy(EnemyConfig(EnemyType.SCOUT, Position(0, 0), strategy))

        assert enemy.movement_strategy is strategy

    def test_hunter_targets(self):
        """Test a hunter chases the target it was given."""
        hunter = create_hunter_enemy(200, 150, Position(400, 550))

        assert hunter.movement_strategy.target == Position(400, 550)
        assert hunter.health == 150


class TestEnemyWave:
    """Wave layout per level."""

    def test_level_one_grid(self):
        """Test a 3x8 grid of basic, scout and heavy rows."""
        wave = create_enemy_wave(1)

        assert len(wave) == 24
        assert [e.enemy_type for e in wave[:8]] == [EnemyType.BASIC] * 8
        assert [e.enemy_type for e in wave[8:16]] == [EnemyType.SCOUT] * 8
        assert [e.enemy_type for e in wave[16:]] == [EnemyType.HEAVY] * 8
        assert wave[0].position == Position(100, 50)
        assert wave[-1].position == Position(520, 130)

    def test_level_three_adds_boss(self):
        """Test level 3 has 24 grid enemies plus one boss, unscaled."""
        wave = create_enemy_wave(3)
        counts = Counter(e.enemy_type for e in wave)

        assert len(wave) == 25
        assert counts[EnemyType.BOSS] == 1
        assert wave[0].health == EnemyType.BASIC.health
        assert wave[0].damage == EnemyType.BASIC.damage

    def test_level_six_boss_and_hunter(self):
        """Test level 6 includes a boss and exactly one hunter."""
        wave = create_enemy_wave(6)
        counts = Counter(e.enemy_type for e in wave)

        assert counts[EnemyType.BOSS] == 1
        assert counts[EnemyType.HUNTER] == 1
        assert len(wave) == 26
        assert wave[0].health == EnemyType.BASIC.health * 3
        assert wave[0].damage == EnemyType.BASIC.damage * 2

    def test_level_ten_hunters_without_boss(self):
        """Test hunters scale with level // 5."""
        counts = Counter(e.enemy_type for e in create_enemy_wave(10))

        assert counts[EnemyType.BOSS] == 0
        assert counts[EnemyType.HUNTER] == 2

    def test_invalid_level(self):
        """Test levels start at 1."""
        with pytest.raises(ValueError):
            create_enemy_wave(0)


class TestEnemyType:
    """Catalogue entries."""

    def test_points(self):
        """Test kill points per type."""
        assert EnemyType.BASIC.points == 100
        assert EnemyType.SCOUT.points == 150
        assert EnemyType.HEAVY.points == 200
        assert EnemyType.HUNTER.points == 300
        assert EnemyType.BOSS.points == 1000

    def test_every_type_described(self):
        """Test each type has a description."""
        for enemy_type in EnemyType:
            assert describe_enemy_type(enemy_type)
