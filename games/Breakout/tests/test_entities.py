"""
Tests for the Breakout entities: Paddle, Ball, Brick and BrickGrid.
"""

import math
import random

import pytest

from games.Breakout.game.entities import (
    Ball,
    BallConfig,
    Brick,
    BrickGrid,
    BrickLayout,
    Paddle,
    PaddleConfig,
)


# ============================================================================
# Paddle
# ============================================================================


class TestPaddleConfig:
    """Test PaddleConfig validation."""

    def test_defaults(self):
        config = PaddleConfig()
        assert config.width == 110
        assert config.height == 14
        assert config.speed == 7

    def test_zero_width_rejected(self):
        with pytest.raises(ValueError):
            PaddleConfig(width=0)

    def test_negative_speed_rejected(self):
        with pytest.raises(ValueError):
            PaddleConfig(speed=-1)


class TestPaddle:
    """Test Paddle movement and bounds."""

    @pytest.fixture
    def paddle(self):
        return Paddle(PaddleConfig(), 500, 640)

    def test_initial_position(self, paddle):
        """Test paddle starts centered, 30px above the floor."""
        assert paddle.x == 195
        assert paddle.y == 610
        assert paddle.center_x == 250
        assert paddle.rect == (195, 610, 110, 14)

    def test_too_wide_for_arena(self):
        with pytest.raises(ValueError):
            Paddle(PaddleConfig(width=600), 500, 640)

    def test_move(self, paddle):
        paddle.move(1)
        assert paddle.x == 202
        assert paddle.direction == 1
        paddle.move(-1)
        paddle.move(-1)
        assert paddle.x == 188

    def test_stay(self, paddle):
        paddle.move(0)
        assert paddle.x == 195

    def test_clamped_left(self, paddle):
        for _ in range(100):
            paddle.move(-1)
        assert paddle.x == 0

    def test_clamped_right(self, paddle):
        for _ in range(100):
            paddle.move(1)
        assert paddle.x == 390
        assert paddle.x == paddle.max_x

    def test_stays_in_bounds_under_random_input(self, paddle):
        """Test 0 <= x <= W - width after every move."""
        rng = random.Random(7)
        for _ in range(2000):
            paddle.move(rng.choice((-1, 0, 1)))
            assert 0 <= paddle.x <= paddle.max_x

    def test_reset(self, paddle):
        paddle.move(1)
        paddle.reset()
        assert paddle.x == 195
        assert paddle.direction == 0


# ============================================================================
# Ball
# ============================================================================


class TestBallConfig:
    """Test BallConfig validation."""

    def test_max_vx(self):
        assert BallConfig().max_vx == pytest.approx(7.0)

    def test_zero_radius_rejected(self):
        with pytest.raises(ValueError):
            BallConfig(radius=0)

    def test_zero_speed_rejected(self):
        with pytest.raises(ValueError):
            BallConfig(speed=0)


class TestBall:
    """Test Ball physics."""

    @pytest.fixture
    def config(self):
        return BallConfig()

    def test_immutable_update(self, config):
        """Test update returns a new ball and leaves the original."""
        ball = Ball(config, 100, 100, 3, 4)
        moved = ball.update()
        assert (moved.x, moved.y) == (103, 104)
        assert (ball.x, ball.y) == (100, 100)

    def test_dock(self, config):
        """Test the docked ball rests centered just above the paddle."""
        ball = Ball(config, 10, 10, 3, -4).dock(250, 610)
        assert (ball.x, ball.y) == (250, 602)
        assert (ball.vx, ball.vy) == (0, 0)

    def test_launch_straight_up(self, config):
        ball = Ball(config, 250, 602).launch(math.pi / 2)
        assert ball.vx == pytest.approx(0.0, abs=1e-9)
        assert ball.vy == pytest.approx(-5.0)

    @pytest.mark.parametrize("angle", [0.15 * math.pi, 0.5 * math.pi, 1.05 * math.pi])
    def test_launch_always_upward(self, config, angle):
        """Test vy <= 0 and speed is preserved for any launch angle."""
        ball = Ball(config, 250, 602).launch(angle)
        assert ball.vy <= 0
        assert abs(ball.vx) <= config.speed
        assert math.hypot(ball.vx, ball.vy) == pytest.approx(config.speed)

    def test_bounces(self, config):
        ball = Ball(config, 0, 0, 3, 4)
        assert (ball.bounce_horizontal().vx, ball.bounce_horizontal().vy) == (-3, 4)
        assert (ball.bounce_vertical().vx, ball.bounce_vertical().vy) == (3, -4)

    def test_paddle_center_hit(self, config):
        """Test a center hit goes straight up from just above the paddle."""
        ball = Ball(config, 250, 605, 2, 5).bounce_off_paddle(250, 110, 610)
        assert ball.vx == pytest.approx(0.0)
        assert ball.vy == -5
        assert ball.y == 602

    def test_paddle_offset_hit(self, config):
        """Test vx grows with distance from the paddle center."""
        ball = Ball(config, 305, 605, 0, 5).bounce_off_paddle(250, 110, 610)
        assert ball.vx == pytest.approx(5.5)
        left = Ball(config, 195, 605, 0, 5).bounce_off_paddle(250, 110, 610)
        assert left.vx == pytest.approx(-5.5)

    def test_paddle_hit_vx_capped(self):
        """Test vx never exceeds speed * max_vx_factor."""
        config = BallConfig(spin=2.0)
        ball = Ball(config, 305, 605, 0, 5).bounce_off_paddle(250, 110, 610)
        assert ball.vx == pytest.approx(7.0)
        left = Ball(config, 195, 605, 0, 5).bounce_off_paddle(250, 110, 610)
        assert left.vx == pytest.approx(-7.0)

    def test_paddle_hit_always_upward(self, config):
        ball = Ball(config, 250, 605, 0, -3).bounce_off_paddle(250, 110, 610)
        assert ball.vy == -3


# ============================================================================
# Bricks
# ============================================================================


class TestBrickLayout:
    """Test BrickLayout."""

    def test_defaults(self):
        layout = BrickLayout()
        assert (layout.rows, layout.cols) == (7, 8)

    def test_cell_rect(self):
        """Test the layout formula."""
        layout = BrickLayout()
        assert layout.cell_rect(0, 0) == (22, 70, 48, 18)
        assert layout.cell_rect(2, 3) == (22 + 3 * 58, 70 + 2 * 28, 48, 18)

    def test_default_grid_fits_arena(self):
        """Test the last column ends inside a 500px arena."""
        x, _, w, _ = BrickLayout().cell_rect(6, 7)
        assert x + w <= 500

    def test_empty_grid_rejected(self):
        with pytest.raises(ValueError):
            BrickLayout(rows=0)


class TestBrick:
    """Test Brick."""

    def test_destroy(self):
        brick = Brick(10, 20, 48, 18, grid_position=(1, 2))
        assert brick.alive
        brick.destroy()
        assert not brick.alive
        assert (brick.row, brick.col) == (1, 2)
        assert brick.rect == (10, 20, 48, 18)


class TestBrickGrid:
    """Test BrickGrid."""

    def test_full_grid(self):
        grid = BrickGrid(BrickLayout())
        assert len(grid) == 56
        assert grid.remaining() == 56

    def test_row_major_iteration(self):
        grid = BrickGrid(BrickLayout(rows=2, cols=3))
        positions = [brick.grid_position for brick in grid]
        assert positions == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]

    def test_remaining_counts_alive(self):
        grid = BrickGrid(BrickLayout(rows=2, cols=2))
        grid.cell(1, 0).destroy()
        assert grid.remaining() == 3
        assert grid.cell(1, 0) not in grid.alive_bricks()

    def test_reset_revives_everything(self):
        grid = BrickGrid(BrickLayout(rows=2, cols=2))
        for brick in grid:
            brick.destroy()
        assert grid.remaining() == 0
        grid.reset()
        assert grid.remaining() == 4
