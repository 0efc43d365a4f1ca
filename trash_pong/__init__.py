"""
Trash Pong - Pong against a scripted opponent that talks back
"""

__version__ = "1.0.0"
