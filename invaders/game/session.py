"""
Game Session - runs the simulation in real time.

Paces ticks at the configured frame delay, feeds typed commands from a
background input listener, and hands snapshots to a renderer.
"""

import logging
import time
from typing import Any, Dict, IO, Optional

from ..core.renderer_interface import RendererInterface
from .commands import InputListener
from .game import SpaceInvadersGame

logger = logging.getLogger(__name__)


class GameSession:
    """
    Drives one game from start to finish.

    The session thread is the only one that steps the game; the input
    listener only queues tokens.
    """

    def __init__(
        self,
        game: SpaceInvadersGame,
        renderer: Optional[RendererInterface] = None,
        input_stream: Optional[IO[str]] = None,
        render_interval: int = 5,
        max_ticks: Optional[int] = None,
    ):
        """
        Initialize the session.

        Args:
            game: The game to run
            renderer: Optional renderer that receives snapshots
            input_stream: Text stream to read commands from (e.g. sys.stdin)
            render_interval: Render every N ticks (ticks with events or
                queries are always rendered)
            max_ticks: Stop after this many ticks (None = until the game ends)
        """
        self.game = game
        self.renderer = renderer
        self.render_interval = max(1, render_interval)
        self.max_ticks = max_ticks
        self.listener = (
            InputListener(game.commands, input_stream) if input_stream is not None else None
        )
        self.tick_seconds = game.config.frame_delay_ms / 1000.0

    def run(self) -> Dict[str, Any]:
        """
        Play until the game stops running or max_ticks is reached.

        Returns:
            The final game state snapshot
        """
        self.game.start()
        if self.listener is not None:
            self.listener.start()

        ticks = 0
        try:
            while self.game.running:
                if self.max_ticks is not None and ticks >= self.max_ticks:
                    logger.info("Stopping after %d ticks", ticks)
                    break

                tick_start = time.perf_counter()
                state = self.game.step()
                ticks += 1

                if self.renderer is not None and self._should_render(state):
                    self.renderer.render(state)

                elapsed = time.perf_counter() - tick_start
                if self.tick_seconds > elapsed:
                    time.sleep(self.tick_seconds - elapsed)
        except KeyboardInterrupt:
            logger.info("Interrupted")
            self.game.end()
        finally:
            if self.listener is not None:
                self.listener.stop()

        state = self.game.get_state()
        if self.renderer is not None:
            self.renderer.render(state)
        logger.info(
            "Session finished: score %d, level %d, rank %s",
            state["score"], state["level"], self.game.get_rank(),
        )
        return state

    def _should_render(self, state: Dict[str, Any]) -> bool:
        if state["events"] or state["queries"]:
            return True
        return state["frame"] % self.render_interval == 0
