"""
Tests for the shared primitive models (Point2D, Resolution, Rectangle).

Tests cover:
- Validation of dimensions
- Tuple conversion for drawing
- Immutability (frozen models)
"""

import pytest
from pydantic import ValidationError

from models import Point2D, Resolution, Rectangle


class TestPoint2D:
    """Test Point2D model."""

    def test_create(self):
        """Test creating a point."""
        p = Point2D(x=1.5, y=-2.0)
        assert p.x == 1.5
        assert p.y == -2.0

    def test_int_coerced_to_float(self):
        """Test integer coordinates are accepted."""
        p = Point2D(x=3, y=4)
        assert isinstance(p.x, float)

    def test_frozen(self):
        """Test points cannot be mutated."""
        p = Point2D(x=0.0, y=0.0)
        with pytest.raises(ValidationError):
            p.x = 5.0


class TestResolution:
    """Test Resolution model."""

    def test_create(self):
        """Test creating a resolution."""
        arena = Resolution(width=500, height=640)
        assert (arena.width, arena.height) == (500, 640)

    @pytest.mark.parametrize("width,height", [(0, 480), (640, 0), (-1, 480)])
    def test_non_positive_rejected(self, width, height):
        """Test zero or negative sizes are rejected."""
        with pytest.raises(ValidationError):
            Resolution(width=width, height=height)


class TestRectangle:
    """Test Rectangle model."""

    def test_as_tuple(self):
        """Test pygame-style tuple."""
        rect = Rectangle(x=1.0, y=2.0, width=3.0, height=4.0)
        assert rect.as_tuple == (1.0, 2.0, 3.0, 4.0)

    def test_frozen(self):
        """Test rectangles cannot be mutated."""
        rect = Rectangle(x=1.0, y=2.0, width=3.0, height=4.0)
        with pytest.raises(ValidationError):
            rect.width = 10.0

    def test_zero_width_rejected(self):
        """Test zero width is rejected."""
        with pytest.raises(ValidationError):
            Rectangle(x=0.0, y=0.0, width=0.0, height=10.0)

    def test_negative_height_rejected(self):
        """Test negative height is rejected."""
        with pytest.raises(ValidationError):
            Rectangle(x=0.0, y=0.0, width=10.0, height=-1.0)
