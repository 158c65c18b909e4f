"""
Input Event - Logical intents produced by input sources.

This is a shared module used by all games.
Uses dataclass for immutability.
"""
from dataclasses import dataclass
from enum import Enum


class Intent(str, Enum):
    """Normalized logical input signals, decoupled from physical keys.

    Attributes:
        MOVE_LEFT: Held; move the player left while active
        MOVE_RIGHT: Held; move the player right while active
        LAUNCH_OR_PAUSE: Edge-triggered action key (launch, else pause toggle)
        RESTART: Edge-triggered full reset
    """
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    LAUNCH_OR_PAUSE = "launch_or_pause"
    RESTART = "restart"


@dataclass(frozen=True)
class InputEvent:
    """Immutable edge-triggered intent from any source.

    Attributes:
        intent: The logical intent that fired
        timestamp: Time when the event occurred (seconds, from monotonic clock)
    """
    intent: Intent
    timestamp: float

    def __post_init__(self):
        """Validate timestamp is non-negative."""
        if self.timestamp < 0:
            raise ValueError(f'Timestamp must be non-negative, got {self.timestamp}')

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"InputEvent(intent={self.intent.value}, t={self.timestamp:.3f})"


@dataclass(frozen=True)
class ControlState:
    """Level-triggered movement intents held at the start of a tick.

    Attributes:
        move_left: MOVE_LEFT is currently held
        move_right: MOVE_RIGHT is currently held
    """
    move_left: bool = False
    move_right: bool = False

    @property
    def direction(self) -> int:
        """Horizontal direction: -1, 0 or +1. Both held cancel out."""
        return (1 if self.move_right else 0) - (1 if self.move_left else 0)
