"""
Breakout-specific enumerations.
"""

from enum import Enum

# Import common GameState so consumers can get both from one place
from playfield.games.game_state import GameState


class Outcome(str, Enum):
    """How a game stands, derived from the game-over flag and bricks left.

    Win and loss share the same terminal game-over flag internally; the
    number of bricks still alive tells them apart.

    Attributes:
        IN_PROGRESS: Game not over yet
        WON: Game over with every brick destroyed
        LOST: Game over with bricks remaining (lives exhausted)
    """
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"

    @classmethod
    def from_flags(cls, game_over: bool, remaining_bricks: int) -> 'Outcome':
        """Derive the outcome from the terminal flag and brick count."""
        if not game_over:
            return cls.IN_PROGRESS
        return cls.WON if remaining_bricks == 0 else cls.LOST
