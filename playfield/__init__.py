"""
Playfield - shared platform code for frame-driven pygame games.

Provides:
- logging: Per-module logger configured from code or environment
- games: BaseGame, the standard GameState enum, and keyboard input handling
"""

__version__ = "1.0.0"
