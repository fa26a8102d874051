"""
Game state manager.

GameState is an immutable value; every transition returns a new one.
GameManager owns the current value and swaps it atomically, so readers
always see a complete snapshot. A process-wide manager is available from
get_game_manager(); the simulation can also be handed its own.
"""

import logging
import threading
import time
from dataclasses import dataclass, replace
from typing import Optional

logger = logging.getLogger(__name__)

STARTING_LIVES = 3


@dataclass(frozen=True)
class GameState:
    """Score, lives, level and session flags. Validated on construction."""
    score: int = 0
    lives: int = STARTING_LIVES
    level: int = 1
    game_running: bool = False
    game_over: bool = False

    def __post_init__(self):
        if self.lives < 0:
            raise ValueError("Lives cannot be negative")
        if self.level < 1:
            raise ValueError("Level must be positive")
        if self.score < 0:
            raise ValueError("Score cannot be negative")

    def add_score(self, points: int) -> "GameState":
        if points <= 0:
            raise ValueError("Points must be positive")
        return replace(self, score=self.score + points)

    def lose_life(self) -> "GameState":
        lives = max(0, self.lives - 1)
        game_over = lives <= 0
        return replace(
            self,
            lives=lives,
            game_running=self.game_running and not game_over,
            game_over=game_over,
        )

    def next_level(self) -> "GameState":
        return replace(self, level=self.level + 1)

    def start(self) -> "GameState":
        return replace(self, game_running=True, game_over=False)

    def end(self) -> "GameState":
        return replace(self, game_running=False, game_over=True)

    def reset(self) -> "GameState":
        return GameState()

    @property
    def status(self) -> str:
        """Formatted one-line status."""
        if self.game_running and not self.game_over:
            return f"Playing - Level: {self.level}, Lives: {self.lives}, Score: {self.score}"
        if not self.game_running and self.game_over:
            return f"Game Over - Final score: {self.score}"
        if not self.game_running and not self.game_over:
            return f"Paused - Level: {self.level}, Lives: {self.lives}, Score: {self.score}"
        return "Unknown state"


@dataclass(frozen=True)
class GameStats:
    """Summary of the current session."""
    total_score: int
    current_level: int
    lives_remaining: int
    status: str
    session_seconds: float


class GameManager:
    """
    Owns the current GameState.

    Only the tick thread should call the mutating methods; any thread may
    read `state` and treat it as a snapshot.
    """

    def __init__(self):
        self._state = GameState()
        self._lock = threading.Lock()
        self._session_start = time.time()

    def _transition(self, new_state: GameState) -> None:
        with self._lock:
            self._state = new_state

    @property
    def state(self) -> GameState:
        return self._state

    # Transitions

    def start(self) -> None:
        self._transition(self._state.start())
        self._session_start = time.time()
        logger.info("Game started! Level: %d", self._state.level)

    def end(self) -> None:
        self._transition(self._state.end())
        logger.info("Game over! Final score: %d", self._state.score)

    def add_score(self, points: int) -> None:
        self._transition(self._state.add_score(points))
        logger.debug("Score: %d", self._state.score)

    def lose_life(self) -> None:
        self._transition(self._state.lose_life())
        if self._state.game_over:
            logger.info("No lives left! Game over")
        else:
            logger.info("Life lost, %d remaining", self._state.lives)

    def next_level(self) -> None:
        self._transition(self._state.next_level())
        logger.info("Level complete! Advancing to level %d", self._state.level)

    def reset(self) -> None:
        self._transition(self._state.reset())
        self._session_start = time.time()
        logger.info("Game reset")

    # Queries

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def lives(self) -> int:
        return self._state.lives

    @property
    def level(self) -> int:
        return self._state.level

    @property
    def is_game_running(self) -> bool:
        return self._state.game_running

    @property
    def is_game_over(self) -> bool:
        return self._state.game_over

    @property
    def status(self) -> str:
        return self._state.status

    def can_continue(self) -> bool:
        return self._state.lives > 0 and not self._state.game_over

    def get_stats(self) -> GameStats:
        state = self._state
        return GameStats(
            total_score=state.score,
            current_level=state.level,
            lives_remaining=state.lives,
            status=state.status,
            session_seconds=time.time() - self._session_start,
        )

    def __repr__(self) -> str:
        return f"GameManager(state={self._state}, status='{self.status}')"


_instance: Optional[GameManager] = None
_instance_lock = threading.Lock()


def get_game_manager() -> GameManager:
    """Return the process-wide GameManager, creating it on first use."""
    global _instance
    if _instance is None:
        with _instance_lock:
            if _instance is None:
                _instance = GameManager()
    return _instance
