"""
Scripted opponents for Trash Pong
"""

import numpy as np

from trash_pong.core.entities import Ball
from trash_pong.utils.config import game_config


class TrackingOpponent:
    """
    Copies the ball's vertical velocity, except on a losing roll where it freezes.

    Each frame rolls one of `miss_outcomes` equally likely outcomes; outcome 0
    freezes the paddle for that frame. Nothing carries over between frames.
    """

    def __init__(self, name: str = "Tracking AI", miss_outcomes: int | None = None):
        self.name = name
        self.miss_outcomes = miss_outcomes or game_config.OPPONENT_MISS_OUTCOMES

    def decide(self, ball: Ball, rng: np.random.Generator) -> float:
        """Returns the paddle velocity for the next frame"""
        if int(rng.integers(self.miss_outcomes)) == 0:
            return 0.0
        return ball.dy


class StillOpponent:
    """Opponent that never moves"""

    def __init__(self, name: str = "Still AI"):
        self.name = name

    def decide(self, ball: Ball, rng: np.random.Generator) -> float:
        return 0.0


def create_opponent(kind: str = "tracking") -> TrackingOpponent | StillOpponent:
    """Factory for the opponents selectable from the command line"""
    if kind == "tracking":
        return TrackingOpponent()
    elif kind == "still":
        return StillOpponent()
    raise ValueError(f"Unknown opponent: {kind}")
