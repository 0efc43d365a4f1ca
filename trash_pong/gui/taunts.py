"""
Taunts shown in the banner after each point
"""

import numpy as np

from trash_pong.core.entities import Side

# Shown when the computer (right side) scores
LOSING_SIDE_TAUNTS = (
    "I remember the first time I played pong",
    "Does your paddle have a hole in it?",
    "Let me know when you start trying",
    "Your mom is cheering for me",
    "Maybe you should reevaluate your life",
    "You can do better than that",
    "You better pick it up",
    "Don't let Dr. Matta down",
    "I've seen better swings in a backyard",
    "Can you even see the ball?",
)

# Shown when the player (left side) scores
WINNING_SIDE_TAUNTS = (
    "Nice swing",
    "This game will be over in no time",
    "Keep it up",
    "You're a professional",
    "Good work",
    "Great point",
    "Comin' in hot!",
    "Dr. Matta would be proud",
    "Serena Williams in the house",
    "You got this",
)


def taunts_for(side: Side) -> tuple[str, ...]:
    """Catalogue used when `side` scores"""
    return WINNING_SIDE_TAUNTS if side is Side.LEFT else LOSING_SIDE_TAUNTS


def pick_taunt(side: Side, rng: np.random.Generator) -> str:
    """Picks one taunt uniformly for the side that scored"""
    catalogue = taunts_for(side)
    return catalogue[int(rng.integers(len(catalogue)))]
