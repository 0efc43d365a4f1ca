"""
Tests for the match engine and its presentation callbacks
"""

import numpy as np

from trash_pong.ai.opponent import StillOpponent
from trash_pong.core.entities import MatchPhase, Side
from trash_pong.core.game_engine import MatchEngine
from trash_pong.gui.taunts import LOSING_SIDE_TAUNTS, WINNING_SIDE_TAUNTS


def make_engine(presentation, seed: int = 0) -> MatchEngine:
    return MatchEngine(
        presentation=presentation, opponent=StillOpponent(), rng=np.random.default_rng(seed)
    )


class TestMatchEngine:
    """Engine wiring between the match loop and the presentation"""

    def test_initial_state(self, presentation):
        engine = make_engine(presentation)
        assert engine.state.score.to_tuple() == (0, 0)
        assert engine.is_game_over is False
        assert engine.get_winner() is None

    def test_update_advances_frame(self, presentation):
        engine = make_engine(presentation)
        events = engine.update(16)

        assert engine.state.frame == 1
        assert engine.last_events is events
        assert engine.stats["frames"] == 1
        assert presentation.taunts == []

    def test_left_velocity_from_input(self, presentation):
        engine = make_engine(presentation)
        start_y = engine.state.left_paddle.y

        engine.set_left_velocity(-6)
        engine.update(16)

        assert engine.state.left_paddle.y == start_y - 6

    def test_computer_point_shows_losing_taunt(self, presentation):
        engine = make_engine(presentation)
        engine.state.ball.x = 4
        engine.state.ball.dx = -5

        events = engine.update(16)

        assert events.scored is Side.RIGHT
        assert len(presentation.taunts) == 1
        side, message = presentation.taunts[0]
        assert side is Side.RIGHT
        assert message in LOSING_SIDE_TAUNTS
        assert engine.stats["points"] == 1

    def test_player_point_shows_winning_taunt(self, presentation):
        engine = make_engine(presentation)
        engine.state.ball.x = 748
        engine.state.ball.dx = 5

        engine.update(16)

        side, message = presentation.taunts[0]
        assert side is Side.LEFT
        assert message in WINNING_SIDE_TAUNTS

    def test_game_over_notifies_presentation(self, presentation):
        engine = make_engine(presentation)
        engine.state.score.left = 6
        engine.state.ball.x = 748
        engine.state.ball.dx = 5

        engine.update(16)

        assert engine.is_game_over
        assert engine.get_winner() is Side.LEFT
        assert presentation.game_over_calls == 1
        assert engine.stats["matches_finished"] == 1

        # Still running afterwards, the match is only counted once
        engine.update(16)
        assert presentation.game_over_calls == 2
        assert engine.stats["matches_finished"] == 1

    def test_restart(self, presentation):
        engine = make_engine(presentation)
        engine.state.score.right = 7
        engine.update(16)
        assert engine.get_winner() is Side.RIGHT

        engine.restart()

        assert engine.state.phase is MatchPhase.PLAYING
        assert engine.state.score.to_tuple() == (0, 0)
        assert (engine.state.ball.dx, engine.state.ball.dy) == (2, 2)
        assert presentation.playing_calls == 1

    def test_without_presentation(self):
        engine = MatchEngine(rng=np.random.default_rng(3))
        engine.state.ball.x = 4
        engine.state.ball.dx = -5
        events = engine.update(16)
        assert events.scored is Side.RIGHT

    def test_get_game_state(self, presentation):
        engine = make_engine(presentation)
        snapshot = engine.get_game_state()

        assert snapshot["ball_position"] == (375, 292.5)
        assert snapshot["ball_velocity"] == (5, -5)
        assert snapshot["score"] == (0, 0)
        assert snapshot["phase"] == "playing"
        assert snapshot["ball_resetting"] is False
