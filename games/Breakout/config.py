"""Configuration for Breakout.

Gameplay geometry and rules are fixed constants. Driver settings (frame
rate, random seed) may be overridden from a .env file next to this module.
"""

import os
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_int(key: str, default: int) -> int:
    """Get integer from environment, default if unset or empty."""
    val = os.getenv(key, '').strip()
    return int(val) if val else default


def _get_optional_int(key: str) -> Optional[int]:
    """Get integer from environment, None if unset or empty."""
    val = os.getenv(key, '').strip()
    return int(val) if val else None


# Arena (playfield) dimensions
ARENA_WIDTH: int = 500
ARENA_HEIGHT: int = 640

# Driver
FPS: int = _get_int('BREAKOUT_FPS', 60)
SEED: Optional[int] = _get_optional_int('BREAKOUT_SEED')

# Rules
START_LIVES: int = 3
BRICK_POINTS: int = 10

# Paddle (speeds are pixels per tick)
PADDLE_WIDTH: float = 110.0
PADDLE_HEIGHT: float = 14.0
PADDLE_SPEED: float = 7.0
PADDLE_BOTTOM_OFFSET: float = 30.0  # paddle top = arena height - offset

# Ball
BALL_RADIUS: float = 7.0
BALL_SPEED: float = 5.0
BALL_DOCK_GAP: float = 1.0           # gap between docked ball and paddle top
PADDLE_SPIN: float = 1.1             # vx = hit offset * speed * spin
MAX_VX_FACTOR: float = 1.4           # |vx| <= speed * factor after paddle hit

# Launch arc, as fractions of pi
LAUNCH_ANGLE_MIN: float = 0.15
LAUNCH_ANGLE_SPAN: float = 0.9

# Brick grid
BRICK_ROWS: int = 7
BRICK_COLS: int = 8
BRICK_WIDTH: float = 48.0
BRICK_HEIGHT: float = 18.0
BRICK_PADDING: float = 10.0
BRICK_OFFSET_LEFT: float = 22.0
BRICK_OFFSET_TOP: float = 70.0

# Visual
BACKGROUND_COLOR: Tuple[int, int, int] = (11, 16, 32)
PADDLE_COLOR: Tuple[int, int, int] = (219, 231, 255)
BALL_COLOR: Tuple[int, int, int] = (255, 255, 255)
HUD_COLOR: Tuple[int, int, int] = (219, 231, 255)
OVERLAY_COLOR: Tuple[int, int, int] = (255, 255, 255)
BRICK_BASE_HUE: float = 210.0
BRICK_HUE_STEP: float = 5.0         # per row
BRICK_SATURATION: float = 70.0
BRICK_LIGHTNESS: float = 55.0
BRICK_CORNER_RADIUS: int = 6
PADDLE_CORNER_RADIUS: int = 8
