"""Breakout physics and collision detection."""

from .geometry import clamp, circle_intersects_rect
from .collision import (
    WallContact,
    check_wall_collision,
    check_paddle_collision,
    check_brick_collision,
    find_brick_collision,
)

__all__ = [
    'clamp',
    'circle_intersects_rect',
    'WallContact',
    'check_wall_collision',
    'check_paddle_collision',
    'check_brick_collision',
    'find_brick_collision',
]
