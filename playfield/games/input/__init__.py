"""
Input abstraction layer for Playfield games.

Turns raw key events into logical intents so games never look at
physical key identities.
"""

from playfield.games.input.input_event import Intent, InputEvent, ControlState
from playfield.games.input.input_manager import InputManager

__all__ = ['Intent', 'InputEvent', 'ControlState', 'InputManager']
