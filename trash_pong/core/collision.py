"""
Collision detection for Trash Pong

Axis-aligned bounding boxes only. A ball moving further than a paddle's
width in one frame can pass through it; at the game's speeds it does not.
"""

from trash_pong.core.entities import Ball, Paddle, Side

Rect = tuple[float, float, float, float]


def rects_overlap(a: Rect, b: Rect) -> bool:
    """Strict AABB overlap test, touching edges do not collide"""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def collides(ball: Ball, paddle: Paddle) -> bool:
    """Checks whether the ball overlaps a paddle"""
    return rects_overlap(ball.get_rect(), paddle.get_rect())


def check_ball_walls(ball: Ball, field_height: float, grid: float) -> str | None:
    """Bounces the ball off the top or bottom wall, returns which one was hit"""
    if ball.y < grid:
        ball.y = grid
        ball.bounce_vertical()
        return "top"
    elif ball.y + grid > field_height - grid:
        ball.y = field_height - grid * 2
        ball.bounce_vertical()
        return "bottom"
    return None


def apply_paddle_bounce(ball: Ball, paddle: Paddle, side: Side) -> None:
    """
    Sends the ball back and moves it next to the paddle.

    The ball is placed flush against the paddle face, otherwise the overlap
    would be detected again on the next frame. Vertical velocity is kept.
    """
    ball.bounce_horizontal()
    if side is Side.LEFT:
        ball.x = paddle.x + paddle.width
    else:
        ball.x = paddle.x - ball.width


def check_ball_paddles(ball: Ball, left_paddle: Paddle, right_paddle: Paddle) -> Side | None:
    """Resolves a paddle hit, left paddle first; returns the side that hit the ball"""
    if collides(ball, left_paddle):
        apply_paddle_bounce(ball, left_paddle, Side.LEFT)
        return Side.LEFT
    elif collides(ball, right_paddle):
        apply_paddle_bounce(ball, right_paddle, Side.RIGHT)
        return Side.RIGHT
    return None
