"""
Opponent protocol - defines interface for paddle controllers driven by the match loop
"""

from typing import Protocol

import numpy as np

from trash_pong.core.entities import Ball


class Opponent(Protocol):
    """
    Protocol for computer-controlled paddles.

    Called once per frame, after drawing; the returned velocity is applied
    on the next frame.
    """

    name: str

    def decide(self, ball: Ball, rng: np.random.Generator) -> float:
        """
        Choose the paddle's vertical velocity for the next frame.

        Args:
            ball: Ball after this frame's collisions
            rng: Random source of the match

        Returns:
            Vertical velocity in pixels per frame
        """
        ...
