"""
Space Invaders Game Core - the per-tick simulation loop.

Each tick drains the queued player commands, then advances the player,
enemies and projectiles, resolves hits and checks the end conditions.
All mutation happens on the thread that calls step().
"""

import logging
import random
from collections import Counter
from typing import Any, Callable, Dict, List, Optional

import numpy as np

from ..core.geometry import ScreenBounds
from ..entities.base import COLLISION_RADIUS, monotonic_ms
from ..entities.enemy import Enemy
from ..entities.player import Player
from ..entities.projectile import Projectile
from ..factories.enemy_factory import create_enemy_wave
from ..state.game_manager import GameManager, get_game_manager
from ..strategies.aggressive import AggressiveMovementStrategy
from .commands import Command, CommandQueue, parse_command
from .config import SpaceInvadersConfig
from .scoring import points_for, rank_for

logger = logging.getLogger(__name__)


class SpaceInvadersGame:
    """
    Core Space Invaders simulation.

    The game owns the player, the enemy wave and both projectile lists.
    Score, lives and level live in a GameManager, which defaults to the
    process-wide one.
    """

    def __init__(
        self,
        config: Optional[SpaceInvadersConfig] = None,
        game_manager: Optional[GameManager] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], float]] = None,
    ):
        """
        Initialize the game.

        Args:
            config: Game configuration (defaults to SpaceInvadersConfig())
            game_manager: State manager to drive (defaults to the shared one)
            rng: Random source for enemy fire
            clock: Millisecond clock used for shot cooldowns
        """
        self.config = config or SpaceInvadersConfig()
        self.manager = game_manager or get_game_manager()
        self.rng = rng or random.Random()
        self.clock = clock or monotonic_ms

        self.bounds = ScreenBounds(0, 0, self.config.screen_width, self.config.screen_height)
        self.flight_bounds = self.bounds.expand(self.config.projectile_margin)
        self.commands = CommandQueue()

        # Game state (initialized in reset)
        self.player: Player = self._spawn_player()
        self.enemies: List[Enemy] = []
        self.player_projectiles: List[Projectile] = []
        self.enemy_projectiles: List[Projectile] = []
        self.frame_count: int = 0
        self.failed_ticks: int = 0
        self.events: List[str] = []
        self.queries: List[str] = []

        self.reset()

    # Session lifecycle

    def reset(self) -> Dict[str, Any]:
        """
        Reset the session and build the first wave.

        Returns:
            Dictionary containing the initial game state
        """
        self.manager.reset()
        self.commands.drain()

        self.player = self._spawn_player()
        self.player_projectiles = []
        self.enemy_projectiles = []
        self.frame_count = 0
        self.failed_ticks = 0
        self.events = []
        self.queries = []

        self._spawn_wave()
        return self.get_state()

    def start(self) -> None:
        self.manager.start()

    def end(self) -> None:
        self.manager.end()

    @property
    def running(self) -> bool:
        return self.manager.is_game_running

    def submit(self, token: str) -> None:
        """Queue a raw command token. Safe to call from any thread."""
        self.commands.put(token)

    # Tick

    def step(self) -> Dict[str, Any]:
        """
        Run one tick.

        Nothing happens while the game is not running. An unexpected
        error aborts the rest of the tick only; the committed game state
        is left as it was.

        Returns:
            Snapshot of the game after the tick
        """
        if not self.manager.is_game_running:
            return self.get_state()

        self.frame_count += 1
        self.events = []
        self.queries = []

        try:
            now = self.clock()
            self._process_commands(now)
            if self.manager.is_game_running:
                self._update_entities(now)
                self._resolve_player_shots()
                self._resolve_enemy_shots()
                self._check_game_conditions()
        except Exception:
            self.failed_ticks += 1
            logger.exception("Tick %d aborted", self.frame_count)
            self.events.append(f"Tick {self.frame_count} aborted by an internal error")

        return self.get_state()

    def _process_commands(self, now: float) -> None:
        for token in self.commands.drain():
            command = parse_command(token)
            if command is None:
                self._report(f"Unknown command: '{token}'. Type 'help' for the list of commands")
                continue

            self._apply_command(command, now)
            if not self.manager.is_game_running:
                break

    def _apply_command(self, command: Command, now: float) -> None:
        if command == Command.MOVE_LEFT:
            self.player.move_left()
        elif command == Command.MOVE_RIGHT:
            self.player.move_right()
        elif command == Command.MOVE_UP:
            self.player.move_up()
        elif command == Command.MOVE_DOWN:
            self.player.move_down()
        elif command == Command.SHOOT:
            shot = self.player.shoot(now)
            if shot is not None:
                shot.flight_bounds = self.flight_bounds
                self.player_projectiles.append(shot)
                logger.debug("Player fired from (%d, %d)", shot.x, shot.y)
            else:
                self._report(f"Reloading... ({self.player.remaining_cooldown(now):.0f}ms)")
        elif command == Command.QUIT:
            self.manager.end()
            self._report("Leaving the game...")
        elif command == Command.QUERY_HELP:
            self.queries.append("help")
        elif command == Command.QUERY_STATS:
            self.queries.append("stats")

    def _update_entities(self, now: float) -> None:
        self.player.update()

        for enemy in self.enemies:
            strategy = enemy.movement_strategy
            if self.config.hunters_track_player and isinstance(strategy, AggressiveMovementStrategy):
                strategy.update_target(self.player.position)
            enemy.update()

            shot = enemy.shoot(now, self.rng)
            if shot is not None:
                shot.flight_bounds = self.flight_bounds
                self.enemy_projectiles.append(shot)

        self.player_projectiles = self._advance_projectiles(self.player_projectiles)
        self.enemy_projectiles = self._advance_projectiles(self.enemy_projectiles)
        self.enemies = [e for e in self.enemies if e.alive and not e.is_off_screen()]

    @staticmethod
    def _advance_projectiles(projectiles: List[Projectile]) -> List[Projectile]:
        for projectile in projectiles:
            projectile.update()
        return [p for p in projectiles if p.alive]

    def _resolve_player_shots(self) -> None:
        """Each player shot damages the first alive enemy in range and is consumed."""
        if not self.player_projectiles or not self.enemies:
            return

        shots = np.array([(p.x, p.y) for p in self.player_projectiles], dtype=float)
        targets = np.array([(e.x, e.y) for e in self.enemies], dtype=float)
        offsets = shots[:, np.newaxis, :] - targets[np.newaxis, :, :]
        in_range = np.hypot(offsets[..., 0], offsets[..., 1]) < COLLISION_RADIUS

        for i, projectile in enumerate(self.player_projectiles):
            for j in np.flatnonzero(in_range[i]):
                enemy = self.enemies[j]
                # An earlier shot this tick may already have killed it
                if not enemy.alive or not projectile.can_collide_with(enemy):
                    continue

                enemy.take_damage(projectile.damage)
                projectile.take_damage(projectile.health)
                if not enemy.alive:
                    self._award_kill(enemy)
                break

        self.player_projectiles = [p for p in self.player_projectiles if p.alive]
        self.enemies = [e for e in self.enemies if e.alive]

    def _award_kill(self, enemy: Enemy) -> None:
        points = points_for(enemy)
        self.manager.add_score(points)
        self.player.add_score(points)
        self._report(f"{enemy.name} destroyed! +{points} points")

    def _resolve_enemy_shots(self) -> None:
        """At most one enemy shot lands on the player per tick."""
        for projectile in self.enemy_projectiles:
            if not projectile.check_collision(self.player):
                continue
            if not projectile.can_collide_with(self.player):
                continue

            self.player.take_damage(projectile.damage)
            projectile.take_damage(projectile.health)
            if self.player.alive:
                self._report(f"Player hit! Health: {self.player.health}")
            else:
                self._handle_player_death()
            break

        self.enemy_projectiles = [p for p in self.enemy_projectiles if p.alive]

    def _handle_player_death(self) -> None:
        self.manager.lose_life()
        if self.manager.can_continue():
            self.player = self._spawn_player(score=self.player.score)
            self._report(f"Player destroyed! Life lost, {self.manager.lives} left. Respawning...")
        else:
            self._report("Player destroyed! No lives left")

    def _check_game_conditions(self) -> None:
        if not self.manager.is_game_running:
            return

        if not self.enemies:
            self.manager.next_level()
            self._report(f"Level complete! Preparing level {self.manager.level}...")
            self._spawn_wave()

        invasion_line = self.config.screen_height - self.config.invasion_margin
        if any(enemy.y > invasion_line for enemy in self.enemies):
            self.manager.end()
            self._report("The invaders have reached Earth!")

    # Spawning

    def _spawn_player(self, score: int = 0) -> Player:
        x, y = self.config.spawn_point
        return Player(
            x,
            y,
            speed=self.config.player_speed,
            health=self.config.player_health,
            shot_cooldown_ms=self.config.player_shot_cooldown_ms,
            screen_bounds=self.bounds,
            score=score,
        )

    def _spawn_wave(self) -> None:
        level = self.manager.level
        enemies = create_enemy_wave(level)
        for enemy in enemies:
            enemy.screen_bounds = self.bounds
            enemy.shot_probability = self.config.enemy_shot_probability
            enemy.shot_cooldown_ms = self.config.enemy_shot_cooldown_ms
        self.enemies = enemies

        counts = Counter(enemy.name for enemy in enemies)
        breakdown = ", ".join(f"{name}: {count}" for name, count in counts.items())
        self._report(f"{len(enemies)} enemies created for level {level} ({breakdown})")

    def _report(self, message: str) -> None:
        self.events.append(message)
        logger.info(message)

    # Queries

    def get_state(self) -> Dict[str, Any]:
        """Snapshot of the game for rendering. Safe to keep; never updated in place."""
        state = self.manager.state
        enemies = [e.to_dict() for e in self.enemies if e.alive]
        return {
            "player": self.player.to_dict(),
            "enemies": enemies,
            "player_projectiles": [p.to_dict() for p in self.player_projectiles if p.alive],
            "enemy_projectiles": [p.to_dict() for p in self.enemy_projectiles if p.alive],
            "score": state.score,
            "lives": state.lives,
            "level": state.level,
            "game_running": state.game_running,
            "game_over": state.game_over,
            "status": state.status,
            "frame": self.frame_count,
            "events": list(self.events),
            "queries": list(self.queries),
            "width": self.config.screen_width,
            "height": self.config.screen_height,
            "enemies_alive": len(enemies),
            "failed_ticks": self.failed_ticks,
            "rank": self.get_rank(),
            "stats": self.manager.get_stats(),
        }

    def get_score(self) -> int:
        return self.manager.score

    def get_rank(self) -> str:
        return rank_for(self.manager.score, self.config.rank_thresholds)
