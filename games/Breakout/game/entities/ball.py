"""Ball entity with per-tick velocity physics.

The ball is immutable: every operation returns a new Ball. Velocities
are in pixels per tick, so one update() is exactly one fixed step.
"""

from dataclasses import dataclass
import math

from ...config import BALL_RADIUS, BALL_SPEED, BALL_DOCK_GAP, PADDLE_SPIN, MAX_VX_FACTOR
from ..physics.geometry import clamp


@dataclass
class BallConfig:
    """Ball configuration (defaults from config)."""

    radius: float = BALL_RADIUS
    speed: float = BALL_SPEED           # Base speed in pixels/tick
    dock_gap: float = BALL_DOCK_GAP     # Gap above the paddle while docked
    spin: float = PADDLE_SPIN           # Paddle hit offset -> vx multiplier
    max_vx_factor: float = MAX_VX_FACTOR

    def __post_init__(self):
        """Validate size and speed."""
        if self.radius <= 0:
            raise ValueError(f'Ball radius must be positive, got {self.radius}')
        if self.speed <= 0:
            raise ValueError(f'Ball speed must be positive, got {self.speed}')

    @property
    def max_vx(self) -> float:
        """Horizontal speed ceiling after a paddle hit."""
        return self.speed * self.max_vx_factor


class Ball:
    """Ball with velocity-based movement and bouncing physics."""

    def __init__(
        self,
        config: BallConfig,
        x: float,
        y: float,
        vx: float = 0.0,
        vy: float = 0.0,
    ):
        """Initialize ball.

        Args:
            config: Ball configuration
            x: Center X position
            y: Center Y position
            vx: X velocity (pixels/tick)
            vy: Y velocity (pixels/tick)
        """
        self._config = config
        self._x = x
        self._y = y
        self._vx = vx
        self._vy = vy

    @property
    def x(self) -> float:
        """Get ball center X."""
        return self._x

    @property
    def y(self) -> float:
        """Get ball center Y."""
        return self._y

    @property
    def vx(self) -> float:
        """Get X velocity."""
        return self._vx

    @property
    def vy(self) -> float:
        """Get Y velocity."""
        return self._vy

    @property
    def radius(self) -> float:
        """Get ball radius."""
        return self._config.radius

    @property
    def speed(self) -> float:
        """Get base speed scalar (launch speed)."""
        return self._config.speed

    @property
    def config(self) -> BallConfig:
        """Get ball configuration."""
        return self._config

    def dock(self, paddle_center_x: float, paddle_top: float) -> 'Ball':
        """Rest the ball on the paddle.

        Args:
            paddle_center_x: Paddle center X
            paddle_top: Paddle top Y

        Returns:
            New stationary Ball centered just above the paddle
        """
        return Ball(
            self._config,
            paddle_center_x,
            paddle_top - self._config.radius - self._config.dock_gap,
        )

    def launch(self, angle: float) -> 'Ball':
        """Launch ball along an angle, always upward.

        Args:
            angle: Launch angle in radians (0 = right, pi/2 = straight up)

        Returns:
            New Ball with velocity set; vy is never positive
        """
        vx = self._config.speed * math.cos(angle)
        vy = -abs(self._config.speed * math.sin(angle))
        return Ball(self._config, self._x, self._y, vx, vy)

    def update(self) -> 'Ball':
        """Advance one fixed step (explicit Euler, no sub-stepping).

        Returns:
            New Ball with updated position
        """
        return Ball(
            self._config,
            self._x + self._vx,
            self._y + self._vy,
            self._vx,
            self._vy,
        )

    def set_position(self, x: float, y: float) -> 'Ball':
        """Set ball position.

        Returns:
            New Ball at new position
        """
        return Ball(self._config, x, y, self._vx, self._vy)

    def bounce_horizontal(self) -> 'Ball':
        """Bounce off vertical surface (reverse X velocity)."""
        return Ball(self._config, self._x, self._y, -self._vx, self._vy)

    def bounce_vertical(self) -> 'Ball':
        """Bounce off horizontal surface (reverse Y velocity)."""
        return Ball(self._config, self._x, self._y, self._vx, -self._vy)

    def bounce_off_paddle(
        self,
        paddle_center_x: float,
        paddle_width: float,
        paddle_top: float,
    ) -> 'Ball':
        """Bounce up off the paddle with spin from the hit position.

        The ball is lifted to rest just above the paddle and sent upward.
        Its horizontal speed comes from where it struck: the offset from
        the paddle center, normalized by half the paddle width, is nominally
        in [-1, 1] (the ball's radius lets it exceed that at the very edges),
        scaled by speed * spin and then capped at speed * max_vx_factor.

        Args:
            paddle_center_x: Paddle center X
            paddle_width: Paddle width
            paddle_top: Paddle top Y

        Returns:
            New Ball moving upward with spin applied
        """
        offset = (self._x - paddle_center_x) / (paddle_width / 2)
        max_vx = self._config.max_vx
        vx = clamp(offset * self._config.speed * self._config.spin, -max_vx, max_vx)
        vy = -abs(self._vy)
        y = paddle_top - self._config.radius - self._config.dock_gap
        return Ball(self._config, self._x, y, vx, vy)

    def __repr__(self) -> str:
        return (f"Ball(x={self._x:.2f}, y={self._y:.2f}, "
                f"vx={self._vx:.2f}, vy={self._vy:.2f})")
