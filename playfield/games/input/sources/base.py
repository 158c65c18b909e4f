"""
Base Input Source - Abstract interface for input backends.

This is a shared module used by all games.
"""
from abc import ABC, abstractmethod
from typing import List

from playfield.games.input.input_event import ControlState, InputEvent


class InputSource(ABC):
    """Abstract base class for input sources.

    Sources expose two views of input: a queue of edge-triggered events
    (drained by poll_events) and the level-triggered held state (read by
    controls). Both are read once per tick by the game.
    """

    @abstractmethod
    def poll_events(self) -> List[InputEvent]:
        """Poll for new edge-triggered input events.

        Returns:
            List of InputEvent objects since last poll.
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update the input source, collecting events.

        Args:
            dt: Delta time in seconds since last update.
        """
        pass

    @abstractmethod
    def controls(self) -> ControlState:
        """Get the currently held movement intents."""
        pass
