"""Breakout skins for rendering."""

from .base import BreakoutSkin
from .geometric import GeometricSkin

__all__ = [
    'BreakoutSkin',
    'GeometricSkin',
]
