"""
Utility module of the Trash Pong game
"""

from trash_pong.utils.config import GameConfig
from trash_pong.utils.config import game_config

__all__ = ["game_config", "GameConfig"]
