"""
Tests for the real-time session driver.
"""

import io
from typing import Any, Dict, List, Tuple

from invaders.core import RendererInterface
from invaders.game import GameSession, SpaceInvadersConfig, SpaceInvadersGame


class RecordingRenderer(RendererInterface):
    """Keeps every snapshot it is given."""

    def __init__(self):
        self.frames: List[Dict[str, Any]] = []

    def render(self, game_state: Dict[str, Any]) -> None:
        self.frames.append(game_state)

    def get_preferred_size(self) -> Tuple[int, int]:
        return (0, 0)


def make_game(manager, rng, clock, frame_delay_ms=0):
    config = SpaceInvadersConfig(enemy_shot_probability=0.0, frame_delay_ms=frame_delay_ms)
    return SpaceInvadersGame(config, manager, rng, clock)


class TestGameSession:
    """Tests for GameSession.run()."""

    def test_stops_after_max_ticks(self, manager, rng, clock):
        """Test the tick limit without ending the game."""
        renderer = RecordingRenderer()
        session = GameSession(
            make_game(manager, rng, clock), renderer=renderer, render_interval=1, max_ticks=3
        )

        state = session.run()

        assert state["frame"] == 3
        assert state["game_running"]
        # One render per tick plus the final one
        assert len(renderer.frames) == 4

    def test_render_interval(self, manager, rng, clock):
        """Test quiet ticks are only rendered every N frames."""
        renderer = RecordingRenderer()
        session = GameSession(
            make_game(manager, rng, clock), renderer=renderer, render_interval=5, max_ticks=10
        )

        session.run()

        assert [f["frame"] for f in renderer.frames] == [5, 10, 10]

    def test_quit_from_input_stream(self, manager, rng, clock):
        """Test a typed quit command ends the session."""
        game = make_game(manager, rng, clock, frame_delay_ms=10)
        session = GameSession(game, input_stream=io.StringIO("left\nq\n"), max_ticks=500)

        state = session.run()

        assert state["game_over"]
        assert state["frame"] < 500
        assert not session.listener.is_running
