"""
Backend-free drawing commands emitted by the match loop
"""

from dataclasses import dataclass

from trash_pong.core.entities import MatchState
from trash_pong.utils.config import GameConfig
from trash_pong.utils.config import game_config

Color = tuple[int, int, int]


@dataclass(frozen=True)
class Clear:
    """Clears the whole play surface"""

    width: float
    height: float


@dataclass(frozen=True)
class FillRect:
    """Filled rectangle at (x, y)"""

    x: float
    y: float
    width: float
    height: float
    color: Color


@dataclass(frozen=True)
class FillText:
    """Text drawn with its baseline at (x, y)"""

    text: str
    x: float
    y: float
    font_size: int
    color: Color


DrawCommand = Clear | FillRect | FillText


def paddle_commands(state: MatchState, config: GameConfig | None = None) -> list[DrawCommand]:
    config = config or game_config
    return [
        FillRect(*state.left_paddle.get_rect(), color=config.PADDLE_COLOR),
        FillRect(*state.right_paddle.get_rect(), color=config.PADDLE_COLOR),
    ]


def score_commands(state: MatchState, config: GameConfig | None = None) -> list[DrawCommand]:
    config = config or game_config
    (left_x, left_y), (right_x, right_y) = config.SCORE_TEXT_POSITIONS
    return [
        FillText(str(state.score.left), left_x, left_y, config.SCORE_FONT_SIZE, config.TEXT_COLOR),
        FillText(
            str(state.score.right), right_x, right_y, config.SCORE_FONT_SIZE, config.TEXT_COLOR
        ),
    ]


def ball_commands(state: MatchState, config: GameConfig | None = None) -> list[DrawCommand]:
    config = config or game_config
    return [FillRect(*state.ball.get_rect(), color=config.BALL_COLOR)]


def field_commands(state: MatchState, config: GameConfig | None = None) -> list[DrawCommand]:
    """Top and bottom walls plus the dashed center line"""
    config = config or game_config
    grid = state.grid
    width = state.field_width
    height = state.field_height

    commands: list[DrawCommand] = [
        FillRect(0, 0, width, grid, config.WALL_COLOR),
        FillRect(0, height - grid, width, grid, config.WALL_COLOR),
    ]

    y = grid
    while y < height - grid:
        commands.append(FillRect(width / 2 - grid / 2, y, grid, grid, config.WALL_COLOR))
        y += grid * 2

    return commands


def build_frame(state: MatchState, config: GameConfig | None = None) -> list[DrawCommand]:
    """Full frame for a state, in the order the match loop emits it"""
    return [
        Clear(state.field_width, state.field_height),
        *paddle_commands(state, config),
        *score_commands(state, config),
        *ball_commands(state, config),
        *field_commands(state, config),
    ]
