"""
Tests for the player, enemies and projectiles.
"""

import random

import pytest

from invaders.core import Position, ScreenBounds
from invaders.entities import COLLISION_RADIUS, Enemy, Player, Projectile
from invaders.factories import EnemyType
from invaders.strategies import LinearMovementStrategy


def make_enemy(x=100, y=100, health=100, strategy=None, **kwargs):
    return Enemy(
        "Basic Invader", x, y, health, 10, strategy, "👾",
        enemy_type=EnemyType.BASIC, **kwargs
    )


def make_shot(x, y, from_player, velocity_y=-8, damage=25):
    return Projectile(x, y, 0, velocity_y, damage, "🔸", from_player)


class TestHealth:
    """Damage and healing rules shared by every entity."""

    def test_damage_floors_at_zero(self):
        """Test health never drops below zero and the entity dies at zero."""
        enemy = make_enemy(health=30)
        enemy.take_damage(20)

        assert enemy.health == 10
        assert enemy.alive

        enemy.take_damage(500)

        assert enemy.health == 0
        assert not enemy.alive

    def test_exact_damage_kills(self):
        """Test reaching exactly zero health kills."""
        player = Player(400, 550)
        player.take_damage(100)

        assert player.health == 0
        assert not player.alive

    def test_negative_damage_rejected_without_change(self):
        """Test negative damage raises and leaves health alone."""
        enemy = make_enemy(health=50)

        with pytest.raises(ValueError):
            enemy.take_damage(-5)
        assert enemy.health == 50
        assert enemy.alive

    def test_heal_caps_at_max(self):
        """Test healing never exceeds max health."""
        player = Player(400, 550)
        player.take_damage(40)
        player.heal(100)

        assert player.health == player.max_health

    def test_negative_heal_rejected(self):
        """Test negative heal raises."""
        with pytest.raises(ValueError):
            Player(400, 550).heal(-1)

    def test_health_percentage(self):
        """Test health as a fraction of max."""
        enemy = make_enemy(health=200)
        enemy.take_damage(50)

        assert enemy.health_percentage == 0.75


class TestEntityBasics:
    """Identity, position and collision."""

    def test_ids_are_unique_and_increasing(self):
        """Test every new entity gets a larger id."""
        first = make_enemy()
        second = make_enemy()

        assert second.id > first.id
        assert first != second

    def test_set_position_floors_at_zero(self):
        """Test coordinates never go negative."""
        enemy = make_enemy()
        enemy.set_position(-10, 20)

        assert enemy.position == Position(0, 20)

    def test_collision_radius(self):
        """Test hits register strictly inside the radius."""
        player = Player(100, 100)

        assert make_enemy(100, 100 + COLLISION_RADIUS - 1).check_collision(player)
        assert not make_enemy(100, 100 + COLLISION_RADIUS).check_collision(player)

    def test_dead_entities_do_not_collide(self):
        """Test collisions need both entities alive."""
        player = Player(100, 100)
        enemy = make_enemy(100, 100)
        enemy.take_damage(enemy.health)

        assert not enemy.check_collision(player)

    def test_to_dict(self):
        """Test the snapshot fields."""
        data = make_enemy(120, 80).to_dict()

        assert data["kind"] == "enemy"
        assert data["x"] == 120
        assert data["y"] == 80
        assert data["type"] == "BASIC"
        assert data["alive"] is True


class TestPlayer:
    """Tests for the player's ship."""

    def test_moves_by_speed(self):
        """Test each move shifts by speed."""
        player = Player(400, 300, speed=5)
        player.move_left()
        player.move_up()

        assert player.position == Position(395, 295)

    def test_moves_clamp_to_bounds(self):
        """Test moving past an edge stops at the edge."""
        player = Player(798, 300, speed=5)

        assert player.move_right() is True
        assert player.x == 800
        assert player.move_right() is False

    def test_cannot_enter_bottom_strip(self):
        """Test moving down stops 50 units above the bottom edge."""
        player = Player(400, 550)

        assert player.move_down() is False
        assert player.y == 550

    def test_shot_starts_above_ship(self):
        """Test the shot origin, direction and owner."""
        shot = Player(400, 550).shoot(now_ms=1000)

        assert shot.position == Position(400, 540)
        assert shot.velocity_y < 0
        assert shot.from_player

    def test_shot_cooldown(self):
        """Test a second shot waits for the cooldown."""
        player = Player(400, 550, shot_cooldown_ms=250)

        assert player.shoot(now_ms=1000) is not None
        assert player.shoot(now_ms=1100) is None
        assert player.remaining_cooldown(now_ms=1100) == 150
        assert player.shoot(now_ms=1250) is not None

    def test_score(self):
        """Test score accumulation and validation."""
        player = Player(400, 550, score=100)
        player.add_score(50)

        assert player.score == 150
        with pytest.raises(ValueError):
            player.add_score(-1)


class TestEnemy:
    """Tests for enemies."""

    def test_update_uses_strategy(self):
        """Test the strategy moves the enemy."""
        enemy = make_enemy(100, 50, strategy=LinearMovementStrategy(speed=2))
        enemy.update()

        assert enemy.position == Position(102, 50)

    def test_swap_strategy(self):
        """Test a new strategy takes effect on the next update."""
        enemy = make_enemy(100, 50, strategy=LinearMovementStrategy(speed=2))
        enemy.movement_strategy = LinearMovementStrategy(speed=10)
        enemy.update()

        assert enemy.x == 110

    def test_without_strategy_stays_put(self):
        """Test an enemy with no strategy does not move."""
        enemy = make_enemy(100, 50)
        enemy.update()

        assert enemy.position == Position(100, 50)

    def test_shoots_down_with_own_damage(self):
        """Test a certain shot goes downward and carries the enemy's damage."""
        enemy = make_enemy(200, 100, shot_probability=1.0)
        shot = enemy.shoot(now_ms=5000, rng=random.Random(1))

        assert shot is not None
        assert shot.position == Position(200, 110)
        assert shot.velocity_y > 0
        assert shot.damage == enemy.damage
        assert not shot.from_player

    def test_shot_cooldown(self):
        """Test enemy fire respects the cooldown."""
        enemy = make_enemy(shot_probability=1.0, shot_cooldown_ms=1000)
        rng = random.Random(1)

        assert enemy.shoot(now_ms=5000, rng=rng) is not None
        assert enemy.shoot(now_ms=5500, rng=rng) is None
        assert enemy.shoot(now_ms=6000, rng=rng) is not None

    def test_zero_probability_never_fires(self):
        """Test the random gate."""
        enemy = make_enemy(shot_probability=0.0)
        rng = random.Random(7)

        assert all(enemy.shoot(now_ms=t * 2000, rng=rng) is None for t in range(100))

    def test_off_screen(self):
        """Test the off-screen check."""
        bounds = ScreenBounds(0, 0, 800, 600)

        assert not make_enemy(400, 640, screen_bounds=bounds).is_off_screen()
        assert make_enemy(400, 660, screen_bounds=bounds).is_off_screen()


class TestProjectile:
    """Tests for projectiles."""

    def test_moves_by_velocity(self):
        """Test one update step."""
        shot = make_shot(100, 300, True)
        shot.update()

        assert (shot.x, shot.y) == (100, 292)

    def test_dies_after_leaving_flight_area(self):
        """Test an upward shot dies once past the margin above the screen."""
        shot = make_shot(100, 10, True)
        for _ in range(7):
            shot.update()
        assert shot.alive
        assert shot.position == Position(100, 0)

        shot.update()
        assert not shot.alive

    def test_friendly_fire_rule(self):
        """Test shots only hit the opposing side."""
        player = Player(400, 550)
        enemy = make_enemy()
        player_shot = make_shot(400, 550, True)
        enemy_shot = make_shot(400, 550, False, velocity_y=3)

        assert not player_shot.can_collide_with(player)
        assert player_shot.can_collide_with(enemy)
        assert not enemy_shot.can_collide_with(enemy)
        assert enemy_shot.can_collide_with(player)
        assert not player_shot.can_collide_with(enemy_shot)
