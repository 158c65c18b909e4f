"""Breakout - classic brick-breaking game for Playfield.

Features:
- Keyboard paddle: hold left/right to move
- Space launches the docked ball, then toggles pause
- R restarts from any state
- Deterministic fixed-step simulation with a seedable launch angle
"""

import random
from typing import List, Optional

import pygame

from playfield.games import BaseGame, GameState
from playfield.games.input import ControlState, Intent, InputEvent
from playfield.logging import get_logger
from models.breakout import GameSnapshot, Outcome

from .game.simulation import StepEvent, launch_ball, step
from .game.skins import BreakoutSkin, GeometricSkin
from .game.world import BreakoutConfig, GameWorld

log = get_logger('breakout')


class BreakoutMode(BaseGame):
    """Breakout game mode.

    Owns the GameWorld and is its only mutator. Each tick the driver
    hands over input (handle_input), advances one step (update) and
    asks for a frame (render).
    """

    # Game metadata
    NAME = "Breakout"
    DESCRIPTION = "Deflect the ball with the paddle and clear every brick."
    VERSION = "1.0.0"
    AUTHOR = "Playfield Team"

    # CLI arguments
    ARGUMENTS = [
        {
            'name': '--seed',
            'type': int,
            'default': None,
            'help': 'Random seed for launch angles (reproducible games)'
        },
        {
            'name': '--skin',
            'type': str,
            'default': 'geometric',
            'choices': ['geometric'],
            'help': 'Visual skin'
        },
    ]

    # Skin registry
    SKINS = {
        'geometric': GeometricSkin,
    }

    def __init__(
        self,
        skin: str = 'geometric',
        seed: Optional[int] = None,
        config: Optional[BreakoutConfig] = None,
        rng: Optional[random.Random] = None,
        **kwargs,
    ):
        """Initialize Breakout.

        Args:
            skin: Visual skin to use
            seed: Seed for the launch-angle random source
            config: World configuration (defaults to the standard game)
            rng: Explicit random source (overrides seed)
            **kwargs: Extra driver arguments (ignored)
        """
        self._world = GameWorld(config=config, rng=rng, seed=seed)
        self._controls = ControlState()

        skin_class = self.SKINS.get(skin, GeometricSkin)
        self._skin: BreakoutSkin = skin_class()

        log.info("Breakout ready: %dx%d arena, %d bricks, seed=%s",
                 self._world.arena_width, self._world.arena_height,
                 self._world.remaining_bricks, seed)

    @property
    def world(self) -> GameWorld:
        """The world this mode owns (read it, don't mutate it)."""
        return self._world

    @property
    def outcome(self) -> Outcome:
        """Won/lost/in-progress."""
        return self._world.outcome

    def _get_internal_state(self) -> GameState:
        """Get current lifecycle state."""
        return self._world.lifecycle

    def get_score(self) -> int:
        """Get current score."""
        return self._world.status.score

    @property
    def lives(self) -> int:
        return self._world.status.lives

    def handle_input(
        self,
        events: List[InputEvent],
        controls: Optional[ControlState] = None,
    ) -> None:
        """Apply this tick's input.

        Edge-triggered intents act immediately; held movement is stored
        and read by the next update.

        Args:
            events: Edge-triggered intents since last tick
            controls: Held movement intents
        """
        if controls is not None:
            self._controls = controls

        for event in events:
            if event.intent == Intent.RESTART:
                self.reset()
            elif event.intent == Intent.LAUNCH_OR_PAUSE:
                self._launch_or_pause()

    def _launch_or_pause(self) -> None:
        """Launch if docked, otherwise toggle pause. Ignored once over."""
        status = self._world.status
        if status.game_over:
            return

        if not status.started:
            launch_ball(self._world)
            log.info("ball launched")
        else:
            status.paused = not status.paused
            log.info("paused" if status.paused else "resumed")

    def update(self, dt: float) -> None:
        """Advance one fixed simulation step unless paused.

        Args:
            dt: Delta time in seconds (unused: one call is one step)
        """
        if self._world.status.paused:
            return

        events = step(self._world, self._controls)
        if events:
            self._log_events(events)

    def _log_events(self, events: List[StepEvent]) -> None:
        status = self._world.status
        for event in events:
            if event == StepEvent.LIFE_LOST:
                log.info("life lost, %d left", status.lives)
            elif event == StepEvent.GAME_LOST:
                log.info("game over, final score %d", status.score)
            elif event == StepEvent.GAME_WON:
                log.info("all bricks cleared, final score %d", status.score)
            else:
                log.debug("%s (score %d)", event.value, status.score)

    def snapshot(self) -> GameSnapshot:
        """Read-only view of the current state."""
        return self._world.snapshot()

    def render(self, screen: pygame.Surface) -> None:
        """Render the game.

        Args:
            screen: Pygame surface to draw on
        """
        self._skin.render(self.snapshot(), screen)

    def reset(self) -> None:
        """Reset game to initial state."""
        super().reset()
        self._world.full_reset()
        log.info("game restarted")
