"""
Input Manager - Collects input from the active source.

This is a shared module used by all games.
"""
from typing import List, Optional

from playfield.games.input.input_event import ControlState, InputEvent
from playfield.games.input.sources.base import InputSource


class InputManager:
    """Manages input sources and collects events.

    The InputManager lets a driver swap input sources (keyboard, scripted
    playback in tests) at runtime without changing game logic.
    """

    def __init__(self, source: Optional[InputSource] = None):
        """Initialize with an optional input source."""
        self._source = source

    def set_source(self, source: InputSource) -> None:
        """Set the input source."""
        self._source = source

    def get_source(self) -> Optional[InputSource]:
        """Get the currently active input source."""
        return self._source

    def has_source(self) -> bool:
        """Check if an input source is currently active."""
        return self._source is not None

    def update(self, dt: float) -> None:
        """Update the active input source.

        Args:
            dt: Delta time in seconds since last update.
        """
        if self._source is not None:
            self._source.update(dt)

    def get_events(self) -> List[InputEvent]:
        """Get collected edge-triggered events since last poll."""
        if self._source is None:
            return []
        return self._source.poll_events()

    def controls(self) -> ControlState:
        """Get the held movement intents, or neutral if no source."""
        if self._source is None:
            return ControlState()
        return self._source.controls()

    def clear_events(self) -> None:
        """Clear any pending events from the active source."""
        if self._source is not None:
            self._source.poll_events()
