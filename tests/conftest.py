"""
Pytest configuration and fixtures for Invaders tests.

Pygame runs against SDL's dummy drivers so renderer tests need no
display or audio device.
"""

import os
import random
import sys
from pathlib import Path

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from invaders.game import SpaceInvadersConfig, SpaceInvadersGame  # noqa: E402
from invaders.state import GameManager  # noqa: E402


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: float = 10_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def project_root():
    return PROJECT_ROOT


@pytest.fixture
def manager():
    """A fresh GameManager, independent of the process-wide one."""
    return GameManager()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def quiet_config():
    """Default settings with enemy fire switched off."""
    return SpaceInvadersConfig(enemy_shot_probability=0.0)


@pytest.fixture
def game(quiet_config, manager, rng, clock):
    """A reset game with deterministic input sources."""
    return SpaceInvadersGame(
        config=quiet_config,
        game_manager=manager,
        rng=rng,
        clock=clock,
    )


@pytest.fixture
def running_game(game):
    """A game that has been started."""
    game.start()
    return game
