"""
Keyboard Input Source - Maps pygame key events to logical intents.

This is a shared module used by all games.
"""
import time
from typing import Dict, List, Optional, Set

import pygame

from playfield.games.input.input_event import ControlState, Intent, InputEvent
from playfield.games.input.sources.base import InputSource

# Physical key -> logical intent
DEFAULT_KEY_MAP: Dict[int, Intent] = {
    pygame.K_LEFT: Intent.MOVE_LEFT,
    pygame.K_a: Intent.MOVE_LEFT,
    pygame.K_RIGHT: Intent.MOVE_RIGHT,
    pygame.K_d: Intent.MOVE_RIGHT,
    pygame.K_SPACE: Intent.LAUNCH_OR_PAUSE,
    pygame.K_r: Intent.RESTART,
}

_HELD_INTENTS = (Intent.MOVE_LEFT, Intent.MOVE_RIGHT)


class KeyboardInputSource(InputSource):
    """Keyboard input source.

    Tracks the set of currently held keys for movement intents and queues
    an InputEvent on key-down for edge-triggered intents. Key events the
    map does not cover, and all non-key events, are left for the main loop.
    """

    def __init__(self, key_map: Optional[Dict[int, Intent]] = None):
        """Initialize the keyboard input source.

        Args:
            key_map: Key code -> Intent mapping (defaults to DEFAULT_KEY_MAP)
        """
        self._key_map = dict(key_map) if key_map is not None else dict(DEFAULT_KEY_MAP)
        self._held_keys: Set[int] = set()
        self._event_queue: List[InputEvent] = []

    @property
    def held_keys(self) -> Set[int]:
        """Copy of the key codes currently held."""
        return set(self._held_keys)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Feed a single pygame event to the source.

        Args:
            event: Raw pygame event

        Returns:
            True if the event was consumed by this source
        """
        if event.type == pygame.WINDOWFOCUSLOST:
            # Key-up events are not delivered while unfocused
            self._held_keys.clear()
            return False

        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return False

        intent = self._key_map.get(event.key)
        if intent is None:
            return False

        if event.type == pygame.KEYUP:
            self._held_keys.discard(event.key)
            return True

        self._held_keys.add(event.key)
        if intent not in _HELD_INTENTS:
            self._event_queue.append(InputEvent(
                intent=intent,
                timestamp=time.monotonic(),
            ))
        return True

    def poll_events(self) -> List[InputEvent]:
        """Get edge-triggered events since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def controls(self) -> ControlState:
        """Derive held movement intents from the held-key set."""
        held = {self._key_map[key] for key in self._held_keys}
        return ControlState(
            move_left=Intent.MOVE_LEFT in held,
            move_right=Intent.MOVE_RIGHT in held,
        )

    def update(self, dt: float) -> None:
        """Process pygame events and collect key intents."""
        for event in pygame.event.get():
            if not self.handle_event(event):
                # Re-post unhandled events for the main loop to handle
                pygame.event.post(event)

    def clear(self) -> None:
        """Clear queued events and held keys."""
        self._event_queue.clear()
        self._held_keys.clear()
