"""
Trash Pong match engine
"""

from typing import Any

import numpy as np

from trash_pong.ai.opponent import TrackingOpponent
from trash_pong.core.entities import MatchPhase, MatchState, Side, new_match_state
from trash_pong.core.interfaces import Opponent, Presentation
from trash_pong.core.physics import FrameEvents, restart_match, step_match
from trash_pong.gui.taunts import pick_taunt
from trash_pong.utils.config import GameConfig
from trash_pong.utils.config import game_config


class MatchEngine:
    """Holds the current match and forwards its events to the presentation layer"""

    def __init__(
        self,
        presentation: Presentation | None = None,
        opponent: Opponent | None = None,
        rng: np.random.Generator | None = None,
        config: GameConfig | None = None,
    ):
        self.config = config or game_config
        self.presentation = presentation
        self.opponent = opponent or TrackingOpponent(
            miss_outcomes=self.config.OPPONENT_MISS_OUTCOMES
        )
        self.rng = rng if rng is not None else np.random.default_rng()
        self.state: MatchState = new_match_state(self.config)
        self.last_events = FrameEvents()

        # Statistics
        self.stats = {
            "frames": 0,
            "points": 0,
            "paddle_hits": 0,
            "matches_finished": 0,
        }

    @property
    def is_game_over(self) -> bool:
        return self.state.phase is MatchPhase.GAME_OVER

    def set_left_velocity(self, dy: float) -> None:
        """Written by the input listener between frames"""
        self.state.left_paddle.dy = dy

    def update(self, elapsed_ms: float) -> FrameEvents:
        """
        Runs one frame of the match

        Args:
            elapsed_ms: Wall time since the previous frame in milliseconds

        Returns:
            Events of the frame, with its draw commands
        """
        was_over = self.is_game_over
        self.state, events = step_match(
            self.state, elapsed_ms, self.rng, self.opponent, self.config
        )
        self.last_events = events

        self.stats["frames"] += 1
        if events.paddle_hit is not None:
            self.stats["paddle_hits"] += 1
        if events.scored is not None:
            self.stats["points"] += 1
            self._on_point(events.scored)
        if events.game_over:
            if not was_over:
                self.stats["matches_finished"] += 1
            if self.presentation is not None:
                self.presentation.show_game_over()

        return events

    def _on_point(self, side: Side) -> None:
        if self.presentation is None:
            return
        self.presentation.show_taunt(side, pick_taunt(side, self.rng))

    def restart(self) -> None:
        """Starts a new match after game over"""
        self.state = restart_match(self.state, self.config)
        if self.presentation is not None:
            self.presentation.show_playing()

    def get_winner(self) -> Side | None:
        """Returns the side that reached the winning score, if any"""
        if self.state.score.left >= self.config.WINNING_SCORE:
            return Side.LEFT
        elif self.state.score.right >= self.config.WINNING_SCORE:
            return Side.RIGHT
        return None

    def get_game_state(self) -> dict[str, Any]:
        """Returns a snapshot of the match, for display and debugging"""
        ball = self.state.ball
        return {
            "ball_position": (ball.x, ball.y),
            "ball_velocity": (ball.dx, ball.dy),
            "ball_resetting": ball.resetting,
            "left_paddle_y": self.state.left_paddle.y,
            "right_paddle_y": self.state.right_paddle.y,
            "score": self.state.score.to_tuple(),
            "phase": self.state.phase.value,
            "frame": self.state.frame,
        }
