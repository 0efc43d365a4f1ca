"""
Core interfaces and protocols for Trash Pong

This module defines abstract interfaces that components must implement,
enabling loose coupling and easier testing/extension.
"""

from trash_pong.core.interfaces.opponent import Opponent
from trash_pong.core.interfaces.presentation import Presentation

__all__ = ["Opponent", "Presentation"]
