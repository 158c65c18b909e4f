"""Input sources - backends that turn raw device events into intents."""

from playfield.games.input.sources.base import InputSource
from playfield.games.input.sources.keyboard import KeyboardInputSource, DEFAULT_KEY_MAP

__all__ = ['InputSource', 'KeyboardInputSource', 'DEFAULT_KEY_MAP']
