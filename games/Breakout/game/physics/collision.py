"""Collision detection and response for Breakout.

Handles ball-wall, ball-paddle, and ball-brick collisions. Bounces are
perfectly elastic: a velocity component changes sign, never magnitude.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, TYPE_CHECKING

from .geometry import circle_intersects_rect

if TYPE_CHECKING:
    from ..entities.ball import Ball
    from ..entities.paddle import Paddle
    from ..entities.brick import Brick, BrickGrid


@dataclass(frozen=True)
class WallContact:
    """Which arena boundaries the ball touched this step."""

    side: bool = False
    ceiling: bool = False
    fell_below: bool = False


def check_wall_collision(
    ball: 'Ball',
    screen_width: float,
    screen_height: float,
) -> Tuple['Ball', WallContact]:
    """Check and handle ball-wall collisions.

    Side walls and ceiling clamp the ball back inside and reflect the
    matching velocity component. The floor does not bounce: it only
    reports that the ball's top edge has dropped below the arena.

    Args:
        ball: Ball to check
        screen_width: Arena width in pixels
        screen_height: Arena height in pixels

    Returns:
        Tuple of (updated ball, contacts)
    """
    new_ball = ball
    side = False
    ceiling = False

    # Left wall
    if new_ball.x - new_ball.radius <= 0:
        new_ball = new_ball.set_position(new_ball.radius, new_ball.y).bounce_horizontal()
        side = True

    # Right wall
    if new_ball.x + new_ball.radius >= screen_width:
        new_ball = new_ball.set_position(screen_width - new_ball.radius, new_ball.y).bounce_horizontal()
        side = True

    # Ceiling
    if new_ball.y - new_ball.radius <= 0:
        new_ball = new_ball.set_position(new_ball.x, new_ball.radius).bounce_vertical()
        ceiling = True

    # Floor (ball lost once fully below)
    fell_below = new_ball.y - new_ball.radius > screen_height

    return new_ball, WallContact(side=side, ceiling=ceiling, fell_below=fell_below)


def check_paddle_collision(ball: 'Ball', paddle: 'Paddle') -> bool:
    """Check if ball collides with paddle.

    Only returns True if ball is moving downward, so a ball already
    bouncing away cannot be caught a second time.

    Args:
        ball: Ball to check
        paddle: Paddle to check against

    Returns:
        True if ball hits paddle
    """
    if ball.vy <= 0:
        return False

    return circle_intersects_rect(ball.x, ball.y, ball.radius, *paddle.rect)


def check_brick_collision(ball: 'Ball', brick: 'Brick') -> bool:
    """Check if ball touches an alive brick."""
    if not brick.alive:
        return False

    return circle_intersects_rect(ball.x, ball.y, ball.radius, *brick.rect)


def find_brick_collision(ball: 'Ball', grid: 'BrickGrid') -> Optional['Brick']:
    """Find the first alive brick the ball touches, in row-major order.

    Args:
        ball: Ball to check
        grid: Brick grid to scan

    Returns:
        The first brick hit, or None
    """
    for brick in grid:
        if check_brick_collision(ball, brick):
            return brick
    return None
