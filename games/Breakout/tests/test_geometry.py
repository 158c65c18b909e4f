"""
Tests for geometry helpers and collision checks.

Tests cover:
- clamp
- Circle vs rectangle overlap (touching counts)
- Wall, ceiling and floor contacts
- Paddle and brick hit tests
"""

import pytest

from games.Breakout.game.entities import Ball, BallConfig, BrickGrid, BrickLayout, Paddle, PaddleConfig
from games.Breakout.game.physics import (
    clamp,
    circle_intersects_rect,
    check_wall_collision,
    check_paddle_collision,
    check_brick_collision,
    find_brick_collision,
)


@pytest.fixture
def ball_config():
    return BallConfig()


# ============================================================================
# Geometry
# ============================================================================


class TestClamp:
    """Test clamp helper."""

    def test_inside(self):
        assert clamp(5, 0, 10) == 5

    def test_below(self):
        assert clamp(-3, 0, 10) == 0

    def test_above(self):
        assert clamp(12.5, 0, 10) == 10

    def test_degenerate_range(self):
        """Test lo == hi always returns that value."""
        assert clamp(7, 3, 3) == 3

    def test_inverted_range_rejected(self):
        """Test lo > hi raises ValueError."""
        with pytest.raises(ValueError):
            clamp(1, 10, 0)


class TestCircleIntersectsRect:
    """Test circle vs axis-aligned rectangle."""

    def test_center_inside(self):
        assert circle_intersects_rect(5, 5, 1, 0, 0, 10, 10)

    def test_far_away(self):
        assert not circle_intersects_rect(50, 50, 5, 0, 0, 10, 10)

    def test_touching_edge_counts(self):
        """Test a circle exactly touching an edge intersects."""
        assert circle_intersects_rect(15, 5, 5, 0, 0, 10, 10)

    def test_near_corner_miss(self):
        """Test a circle inside both edge bands but outside the corner."""
        # Closest point is the corner (10, 10); distance sqrt(32) > 5
        assert not circle_intersects_rect(14, 14, 5, 0, 0, 10, 10)

    def test_near_corner_hit(self):
        assert circle_intersects_rect(13, 13, 5, 0, 0, 10, 10)


# ============================================================================
# Walls
# ============================================================================


class TestWallCollision:
    """Test wall, ceiling and floor contacts."""

    def test_open_space(self, ball_config):
        ball = Ball(ball_config, 250, 300, 3, -4)
        result, contact = check_wall_collision(ball, 500, 640)
        assert (result.x, result.y, result.vx, result.vy) == (250, 300, 3, -4)
        assert not (contact.side or contact.ceiling or contact.fell_below)

    def test_left_wall(self, ball_config):
        """Test the ball is pushed inside and vx flips."""
        ball = Ball(ball_config, 5, 300, -5, 2)
        result, contact = check_wall_collision(ball, 500, 640)
        assert contact.side
        assert result.x == 7
        assert result.vx == 5
        assert result.vy == 2

    def test_right_wall(self, ball_config):
        ball = Ball(ball_config, 495, 300, 5, 2)
        result, contact = check_wall_collision(ball, 500, 640)
        assert contact.side
        assert result.x == 493
        assert result.vx == -5

    def test_touching_wall_bounces(self, ball_config):
        """Test touching exactly (x - r == 0) counts."""
        ball = Ball(ball_config, 7, 300, -5, 2)
        result, contact = check_wall_collision(ball, 500, 640)
        assert contact.side
        assert result.vx == 5

    def test_ceiling(self, ball_config):
        ball = Ball(ball_config, 200, 5, 1, -5)
        result, contact = check_wall_collision(ball, 500, 640)
        assert contact.ceiling
        assert result.y == 7
        assert result.vy == 5
        assert result.vx == 1

    def test_fell_below(self, ball_config):
        """Test the ball is out only once fully past the floor."""
        touching = Ball(ball_config, 200, 647, 0, 3)
        _, contact = check_wall_collision(touching, 500, 640)
        assert not contact.fell_below

        gone = Ball(ball_config, 200, 647.5, 0, 3)
        _, contact = check_wall_collision(gone, 500, 640)
        assert contact.fell_below


# ============================================================================
# Paddle and bricks
# ============================================================================


class TestPaddleCollision:
    """Test paddle hit test."""

    @pytest.fixture
    def paddle(self):
        # x 195..305, top 610
        return Paddle(PaddleConfig(), 500, 640)

    def test_hit_while_descending(self, ball_config, paddle):
        assert check_paddle_collision(Ball(ball_config, 250, 605, 0, 5), paddle)

    def test_ignored_while_rising(self, ball_config, paddle):
        """Test a rising ball passes through the paddle."""
        assert not check_paddle_collision(Ball(ball_config, 250, 609, 0, -3), paddle)

    def test_miss_beside_paddle(self, ball_config, paddle):
        assert not check_paddle_collision(Ball(ball_config, 100, 612, 0, 5), paddle)


class TestBrickCollision:
    """Test brick hit tests."""

    @pytest.fixture
    def grid(self):
        # (0,0) spans x 90..138, (0,1) spans x 148..196, both y 95..113
        return BrickGrid(BrickLayout(rows=1, cols=2, left=90, top=95))

    def test_hit_alive_brick(self, ball_config, grid):
        assert check_brick_collision(Ball(ball_config, 103, 104), grid.cell(0, 0))

    def test_dead_brick_ignored(self, ball_config, grid):
        brick = grid.cell(0, 0)
        brick.destroy()
        assert not check_brick_collision(Ball(ball_config, 103, 104), brick)

    def test_first_hit_in_row_major_order(self, ball_config, grid):
        """Test a ball touching two bricks reports the first."""
        ball = Ball(ball_config, 143, 104)
        assert check_brick_collision(ball, grid.cell(0, 1))
        assert find_brick_collision(ball, grid) is grid.cell(0, 0)

    def test_skips_dead_bricks(self, ball_config, grid):
        grid.cell(0, 0).destroy()
        assert find_brick_collision(Ball(ball_config, 143, 104), grid) is grid.cell(0, 1)

    def test_no_hit(self, ball_config, grid):
        assert find_brick_collision(Ball(ball_config, 250, 400), grid) is None
