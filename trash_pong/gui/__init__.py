"""
GUI module for Trash Pong - PyGame interface

The application itself lives in `trash_pong.gui.game_app`.
"""

from trash_pong.gui.human_player import KeyboardController
from trash_pong.gui.overlay import OverlayState
from trash_pong.gui.pygame_renderer import PygameRenderer
from trash_pong.gui.taunts import LOSING_SIDE_TAUNTS, WINNING_SIDE_TAUNTS, pick_taunt

__all__ = [
    "PygameRenderer",
    "KeyboardController",
    "OverlayState",
    "LOSING_SIDE_TAUNTS",
    "WINNING_SIDE_TAUNTS",
    "pick_taunt",
]
