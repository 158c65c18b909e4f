"""Paddle entity driven by held left/right intents.

The paddle moves a fixed distance per tick in the held direction and is
clamped so it never leaves the arena.
"""

from dataclasses import dataclass
from typing import Tuple

from ...config import PADDLE_WIDTH, PADDLE_HEIGHT, PADDLE_SPEED, PADDLE_BOTTOM_OFFSET
from ..physics.geometry import clamp


@dataclass
class PaddleConfig:
    """Paddle configuration (defaults from config)."""

    width: float = PADDLE_WIDTH
    height: float = PADDLE_HEIGHT
    speed: float = PADDLE_SPEED               # pixels per tick
    bottom_offset: float = PADDLE_BOTTOM_OFFSET  # paddle top sits this far above the floor

    def __post_init__(self):
        """Validate dimensions."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f'Paddle size must be positive, got {self.width}x{self.height}')
        if self.speed < 0:
            raise ValueError(f'Paddle speed must be non-negative, got {self.speed}')


class Paddle:
    """Horizontally moving paddle at a fixed height.

    Position is tracked by the LEFT edge. The invariant
    0 <= x <= screen_width - width holds after every move.
    """

    def __init__(
        self,
        config: PaddleConfig,
        screen_width: float,
        screen_height: float,
    ):
        """Initialize paddle centered horizontally.

        Args:
            config: Paddle configuration
            screen_width: Arena width in pixels
            screen_height: Arena height in pixels
        """
        if config.width > screen_width:
            raise ValueError(
                f'Paddle width {config.width} exceeds arena width {screen_width}'
            )
        self._config = config
        self._screen_width = screen_width
        self._y = screen_height - config.bottom_offset
        self._x = self._center_x_position()
        self._direction = 0

    def _center_x_position(self) -> float:
        return (self._screen_width - self._config.width) / 2

    @property
    def x(self) -> float:
        """Get paddle left edge X."""
        return self._x

    @property
    def y(self) -> float:
        """Get paddle top Y."""
        return self._y

    @property
    def width(self) -> float:
        """Get paddle width."""
        return self._config.width

    @property
    def height(self) -> float:
        """Get paddle height."""
        return self._config.height

    @property
    def speed(self) -> float:
        """Get paddle speed in pixels per tick."""
        return self._config.speed

    @property
    def direction(self) -> int:
        """Direction applied on the last move: -1, 0 or +1."""
        return self._direction

    @property
    def center_x(self) -> float:
        """Get paddle center X."""
        return self._x + self._config.width / 2

    @property
    def max_x(self) -> float:
        """Largest legal left-edge X."""
        return self._screen_width - self._config.width

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get paddle bounding rectangle (x, y, width, height)."""
        return (self._x, self._y, self._config.width, self._config.height)

    def move(self, direction: int) -> None:
        """Move one tick in the given direction, then clamp into the arena.

        Args:
            direction: -1 (left), 0 (stay) or +1 (right)
        """
        self._direction = direction
        self._x = clamp(self._x + direction * self._config.speed, 0.0, self.max_x)

    def reset(self) -> None:
        """Center the paddle and stop it."""
        self._x = self._center_x_position()
        self._direction = 0
