"""
Match loop for Trash Pong

`step_match` advances a match by one display frame. It never mutates the
state it is given: it works on a copy and returns it along with what
happened during the frame.
"""

import copy
from dataclasses import dataclass
from dataclasses import field

import numpy as np

from trash_pong.ai.opponent import TrackingOpponent
from trash_pong.core.collision import check_ball_paddles, check_ball_walls
from trash_pong.core.drawing import (
    Clear,
    DrawCommand,
    ball_commands,
    field_commands,
    paddle_commands,
    score_commands,
)
from trash_pong.core.entities import MatchPhase, MatchState, Side
from trash_pong.core.interfaces import Opponent
from trash_pong.utils.config import GameConfig
from trash_pong.utils.config import game_config


@dataclass
class FrameEvents:
    """What happened during one frame"""

    scored: Side | None = None
    game_over: bool = False
    wall_bounce: str | None = None
    paddle_hit: Side | None = None
    recentered: bool = False
    commands: list[DrawCommand] = field(default_factory=list)


def advance_recenter_timer(state: MatchState, elapsed_ms: float) -> bool:
    """
    Counts down a pending re-center and puts the ball back in the middle when it expires.

    Only the position and the resetting flag change, the velocity is kept.
    Returns True when the ball was re-centered.
    """
    ball = state.ball
    if ball.recenter_in_ms is None:
        return False

    ball.recenter_in_ms -= elapsed_ms
    if ball.recenter_in_ms > 0:
        return False

    ball.x, ball.y = state.center
    ball.resetting = False
    ball.recenter_in_ms = None
    return True


def move_paddles(state: MatchState) -> None:
    """Moves both paddles by their velocity, then clamps them between the walls"""
    for paddle in (state.left_paddle, state.right_paddle):
        paddle.advance()
        paddle.clamp(state.min_paddle_y, state.max_paddle_y)


def check_out_of_bounds(state: MatchState, reset_delay_ms: float) -> Side | None:
    """
    Awards a point when the ball leaves the field on the left or right.

    Nothing happens while the ball is already waiting to be re-centered, so a
    ball lingering past the edge is counted once.
    """
    ball = state.ball
    if ball.resetting or 0 <= ball.x <= state.field_width:
        return None

    ball.resetting = True
    ball.recenter_in_ms = reset_delay_ms

    scorer = Side.RIGHT if ball.x < 0 else Side.LEFT
    state.score.add_point(scorer)
    return scorer


def is_match_over(state: MatchState, winning_score: int) -> bool:
    return state.score.left >= winning_score or state.score.right >= winning_score


def step_match(
    state: MatchState,
    elapsed_ms: float,
    rng: np.random.Generator,
    opponent: Opponent | None = None,
    config: GameConfig | None = None,
) -> tuple[MatchState, FrameEvents]:
    """
    Advances the match by one frame.

    Args:
        state: Current match state (left untouched)
        elapsed_ms: Wall time since the previous frame, drives the re-center delay
        rng: Random source for the opponent
        opponent: Controller of the right paddle, a tracking opponent by default
        config: Game configuration, the global one by default

    Returns:
        The new state and the frame's events, including its draw commands
    """
    config = config or game_config
    if opponent is None:
        opponent = TrackingOpponent(miss_outcomes=config.OPPONENT_MISS_OUTCOMES)

    state = copy.deepcopy(state)
    events = FrameEvents()
    events.commands.append(Clear(state.field_width, state.field_height))

    # The deferred re-center runs between frames
    events.recentered = advance_recenter_timer(state, elapsed_ms)

    move_paddles(state)
    events.commands.extend(paddle_commands(state, config))

    state.ball.advance()
    events.wall_bounce = check_ball_walls(state.ball, state.field_height, state.grid)

    # Scores are drawn before this frame's point is counted
    events.commands.extend(score_commands(state, config))

    events.scored = check_out_of_bounds(state, config.RESET_DELAY_MS)

    events.paddle_hit = check_ball_paddles(state.ball, state.left_paddle, state.right_paddle)

    events.commands.extend(ball_commands(state, config))
    events.commands.extend(field_commands(state, config))

    state.right_paddle.dy = opponent.decide(state.ball, rng)

    # The loop keeps running after the match ends, only the phase changes
    if is_match_over(state, config.WINNING_SCORE):
        state.phase = MatchPhase.GAME_OVER
        events.game_over = True

    state.frame += 1
    return state, events


def restart_match(state: MatchState, config: GameConfig | None = None) -> MatchState:
    """
    Starts a new match from a finished one.

    Scores go back to zero and the ball gets the slower restart velocity.
    Positions and a pending re-center are kept.
    """
    config = config or game_config
    state = copy.deepcopy(state)
    state.score.reset()
    state.ball.dx = config.RESTART_BALL_SPEED
    state.ball.dy = config.RESTART_BALL_SPEED
    state.phase = MatchPhase.PLAYING
    return state
