"""
Playfield Game Framework.

Provides:
- base_game: BaseGame class that all games should inherit from
- game_state: Standard GameState enum for platform compatibility
- input: Intent events, keyboard source and input manager
"""

from playfield.games.game_state import GameState
from playfield.games.base_game import BaseGame

__all__ = [
    'GameState',
    'BaseGame',
]
