"""
Unified models library for Playfield games.

This package provides the Pydantic data models shared across the system:
- Primitives: Basic geometric types (Point2D, Resolution, Rectangle)
- Breakout: Read-only game snapshots for renderers

Usage:
    >>> from models import Point2D, Rectangle
    >>> from models.breakout import GameSnapshot, Outcome
"""

# ============================================================================
# Primitives (basic types used everywhere)
# ============================================================================
from .primitives import (
    Point2D,
    Resolution,
    Rectangle,
)

__all__ = [
    'Point2D',
    'Resolution',
    'Rectangle',
]
