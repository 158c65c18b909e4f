"""
Breakout-specific models package.

Read-only views of a Breakout world, handed to renderers and tests.
"""

from .enums import (
    GameState,  # Re-exported from playfield.games.game_state
    Outcome,
)

from .models import (
    BallView,
    BrickView,
    GameSnapshot,
)

__all__ = [
    'GameState',
    'Outcome',
    'BallView',
    'BrickView',
    'GameSnapshot',
]
