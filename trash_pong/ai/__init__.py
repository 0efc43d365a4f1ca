"""
Computer opponents for Trash Pong
"""

from trash_pong.ai.opponent import StillOpponent, TrackingOpponent, create_opponent

__all__ = ["TrackingOpponent", "StillOpponent", "create_opponent"]
