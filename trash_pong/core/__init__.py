"""
Core module of the Trash Pong game
"""

from trash_pong.core.entities import Ball
from trash_pong.core.entities import MatchPhase
from trash_pong.core.entities import MatchState
from trash_pong.core.entities import Paddle
from trash_pong.core.entities import Score
from trash_pong.core.entities import Side
from trash_pong.core.entities import new_match_state

__all__ = [
    "Ball",
    "Paddle",
    "Score",
    "Side",
    "MatchPhase",
    "MatchState",
    "new_match_state",
]
