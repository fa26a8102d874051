"""
Tests for GameState and GameManager.
"""

import threading

import pytest

from invaders.state import GameManager, GameState, get_game_manager


class TestGameState:
    """Tests for the immutable state value."""

    def test_defaults(self):
        """Test a new state is level 1 with 3 lives and not running."""
        state = GameState()

        assert (state.score, state.lives, state.level) == (0, 3, 1)
        assert not state.game_running
        assert not state.game_over

    @pytest.mark.parametrize("kwargs", [
        {"lives": -1},
        {"level": 0},
        {"score": -10},
    ])
    def test_invalid_construction(self, kwargs):
        """Test invariant violations fail at construction."""
        with pytest.raises(ValueError):
            GameState(**kwargs)

    def test_add_score_requires_positive_points(self):
        """Test zero or negative points are rejected."""
        with pytest.raises(ValueError):
            GameState().add_score(0)

    def test_transitions_return_new_values(self):
        """Test transitions leave the old value untouched."""
        state = GameState()
        scored = state.add_score(100)

        assert state.score == 0
        assert scored.score == 100

    def test_losing_all_lives(self):
        """Test reset, score 100 and three lost lives ends the game."""
        state = GameState().start().reset().start().add_score(100)
        for _ in range(3):
            state = state.lose_life()

        assert state.game_over
        assert not state.game_running
        assert state.lives == 0
        assert state.score == 100

    def test_lose_life_floors_at_zero(self):
        """Test lives never go negative."""
        state = GameState(lives=0, game_over=True)

        assert state.lose_life().lives == 0

    def test_status(self):
        """Test the formatted status line in each phase."""
        state = GameState()
        assert state.status.startswith("Paused")

        running = state.start().add_score(50)
        assert running.status == "Playing - Level: 1, Lives: 3, Score: 50"

        assert running.end().status == "Game Over - Final score: 50"
        assert GameState(game_running=True, game_over=True).status == "Unknown state"


class TestGameManager:
    """Tests for the state owner."""

    def test_lifecycle(self, manager):
        """Test start, scoring, levels and end."""
        manager.start()
        manager.add_score(150)
        manager.next_level()

        assert manager.is_game_running
        assert manager.score == 150
        assert manager.level == 2

        manager.end()

        assert not manager.is_game_running
        assert manager.is_game_over

    def test_reset(self, manager):
        """Test reset restores the defaults."""
        manager.start()
        manager.add_score(100)
        manager.lose_life()
        manager.reset()

        assert manager.state == GameState()

    def test_can_continue(self, manager):
        """Test continuation needs lives and no game over."""
        manager.start()
        assert manager.can_continue()

        for _ in range(3):
            manager.lose_life()

        assert not manager.can_continue()
        assert manager.is_game_over

    def test_invalid_points_leave_state_unchanged(self, manager):
        """Test a rejected transition does not change the state."""
        before = manager.state

        with pytest.raises(ValueError):
            manager.add_score(-5)
        assert manager.state is before

    def test_snapshots_are_stable(self, manager):
        """Test a state read earlier is not changed by later transitions."""
        snapshot = manager.state
        manager.start()
        manager.add_score(100)

        assert snapshot.score == 0
        assert not snapshot.game_running

    def test_stats(self, manager):
        """Test the session summary."""
        manager.start()
        manager.add_score(300)
        stats = manager.get_stats()

        assert stats.total_score == 300
        assert stats.current_level == 1
        assert stats.lives_remaining == 3
        assert stats.status.startswith("Playing")
        assert stats.session_seconds >= 0


class TestSharedManager:
    """Tests for the process-wide manager."""

    def test_same_instance(self):
        """Test every caller gets the same manager."""
        assert get_game_manager() is get_game_manager()

    def test_same_instance_across_threads(self):
        """Test concurrent first use creates only one manager."""
        results = []
        threads = [
            threading.Thread(target=lambda: results.append(get_game_manager()))
            for _ in range(8)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert all(m is results[0] for m in results)
