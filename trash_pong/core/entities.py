"""
Trash Pong game entities: paddles, ball, score and match state
"""

from dataclasses import dataclass
from dataclasses import field
from enum import Enum

from trash_pong.utils.config import GameConfig
from trash_pong.utils.config import game_config


class Side(Enum):
    """Side of the playfield"""

    LEFT = "left"
    RIGHT = "right"

    @property
    def opponent(self) -> "Side":
        return Side.RIGHT if self is Side.LEFT else Side.LEFT


class MatchPhase(Enum):
    """Match lifecycle"""

    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class Paddle:
    """Player paddle, moves vertically only"""

    x: float
    y: float
    width: float
    height: float
    dy: float = 0.0

    def advance(self) -> None:
        """Moves the paddle by its velocity"""
        self.y += self.dy

    def clamp(self, min_y: float, max_y: float) -> None:
        """Keeps the paddle between the walls (hard floor and ceiling, no bounce)"""
        if self.y < min_y:
            self.y = min_y
        elif self.y > max_y:
            self.y = max_y

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision rectangle properties (x, y, width, height)"""
        return (self.x, self.y, self.width, self.height)


@dataclass
class Ball:
    """Game ball, a grid-sized square"""

    x: float
    y: float
    width: float
    height: float
    dx: float
    dy: float
    # Set between leaving the field and being re-centered
    resetting: bool = False
    recenter_in_ms: float | None = None

    def advance(self) -> None:
        """Moves the ball by its velocity"""
        self.x += self.dx
        self.y += self.dy

    def bounce_vertical(self) -> None:
        """Vertical bounce (top/bottom walls)"""
        self.dy = -self.dy

    def bounce_horizontal(self) -> None:
        """Horizontal bounce (paddles)"""
        self.dx = -self.dx

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision rectangle properties (x, y, width, height)"""
        return (self.x, self.y, self.width, self.height)


@dataclass
class Score:
    """Points of both sides for the current match"""

    left: int = 0
    right: int = 0

    def add_point(self, side: Side) -> None:
        if side is Side.LEFT:
            self.left += 1
        else:
            self.right += 1

    def reset(self) -> None:
        self.left = 0
        self.right = 0

    def to_tuple(self) -> tuple[int, int]:
        return (self.left, self.right)


@dataclass
class MatchState:
    """Complete state of a match, owned by the match loop"""

    field_width: float
    field_height: float
    grid: float
    left_paddle: Paddle
    right_paddle: Paddle
    ball: Ball
    score: Score = field(default_factory=Score)
    phase: MatchPhase = MatchPhase.PLAYING
    frame: int = 0

    @property
    def min_paddle_y(self) -> float:
        return self.grid

    @property
    def max_paddle_y(self) -> float:
        return self.field_height - self.grid - self.left_paddle.height

    @property
    def center(self) -> tuple[float, float]:
        return (self.field_width / 2, self.field_height / 2)


def new_match_state(config: GameConfig | None = None) -> MatchState:
    """Builds the opening state: paddles centered vertically, ball in the middle heading up-right"""
    config = config or game_config
    grid = config.GRID
    paddle_height = config.paddle_height
    paddle_y = config.FIELD_HEIGHT / 2 - paddle_height / 2

    left_paddle = Paddle(x=grid * 2, y=paddle_y, width=grid, height=paddle_height)
    right_paddle = Paddle(
        x=config.FIELD_WIDTH - grid * 3, y=paddle_y, width=grid, height=paddle_height
    )
    ball = Ball(
        x=config.FIELD_WIDTH / 2,
        y=config.FIELD_HEIGHT / 2,
        width=grid,
        height=grid,
        dx=config.BALL_SPEED,
        dy=-config.BALL_SPEED,
    )

    return MatchState(
        field_width=config.FIELD_WIDTH,
        field_height=config.FIELD_HEIGHT,
        grid=grid,
        left_paddle=left_paddle,
        right_paddle=right_paddle,
        ball=ball,
    )
