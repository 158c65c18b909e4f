"""Common GameState enum for all Playfield games.

All games must report one of these standard states via their `state`
property so drivers and renderers can choose overlays without knowing
the game's internals.

Games can keep whatever internal flags they like, but must map them to
these standard states in `_get_internal_state()`.
"""
from enum import Enum


class GameState(Enum):
    """Standard lifecycle states used by the Playfield platform.

    States:
        NOT_STARTED: Waiting for the player to launch (ball docked, etc.)
        PLAYING: Active gameplay in progress
        PAUSED: Game temporarily paused by the player
        GAME_OVER: Terminal state, win or loss; only a restart leaves it

    Usage in game_mode.py:
        from playfield.games import GameState

        class MyGameMode(BaseGame):
            def _get_internal_state(self) -> GameState:
                if self._finished:
                    return GameState.GAME_OVER
                if not self._launched:
                    return GameState.NOT_STARTED
                return GameState.PAUSED if self._paused else GameState.PLAYING
    """
    NOT_STARTED = "not_started"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"
