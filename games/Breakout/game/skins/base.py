"""Base class for Breakout skins.

Skins handle ALL rendering - the game only manages state. A skin sees
nothing but the per-tick GameSnapshot and never mutates the game.
"""

from abc import ABC, abstractmethod
from typing import Optional

import pygame

from models.breakout import BallView, BrickView, GameSnapshot, GameState, Outcome
from models.primitives import Rectangle


class BreakoutSkin(ABC):
    """Base class for game skins."""

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    def render(self, snapshot: GameSnapshot, screen: pygame.Surface) -> None:
        """Render a full frame from a snapshot.

        Args:
            snapshot: Read-only game state for this tick
            screen: Pygame surface to draw on
        """
        self.render_background(screen)
        for brick in snapshot.bricks:
            self.render_brick(brick, screen)
        self.render_paddle(snapshot.paddle, screen)
        self.render_ball(snapshot.ball, screen)
        self.render_hud(screen, snapshot.score, snapshot.lives)

        message = self.overlay_message(snapshot)
        if message:
            self.render_overlay(screen, message)

    def overlay_message(self, snapshot: GameSnapshot) -> Optional[str]:
        """Pick the centered overlay text for the current state, if any."""
        if snapshot.state == GameState.NOT_STARTED:
            return "Press SPACE to launch"
        if snapshot.state == GameState.PAUSED:
            return "Paused (SPACE to resume)"
        if snapshot.state == GameState.GAME_OVER:
            result = "You Win!" if snapshot.outcome == Outcome.WON else "Game Over"
            return f"{result}  (R to restart)"
        return None

    @abstractmethod
    def render_background(self, screen: pygame.Surface) -> None:
        """Clear the screen."""
        pass

    @abstractmethod
    def render_paddle(self, paddle: Rectangle, screen: pygame.Surface) -> None:
        """Render the paddle.

        Args:
            paddle: Paddle rectangle
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_ball(self, ball: BallView, screen: pygame.Surface) -> None:
        """Render the ball.

        Args:
            ball: Ball center and radius
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_brick(self, brick: BrickView, screen: pygame.Surface) -> None:
        """Render one alive brick.

        Args:
            brick: Brick cell and rectangle
            screen: Pygame surface to draw on
        """
        pass

    def render_hud(
        self,
        screen: pygame.Surface,
        score: int,
        lives: int,
    ) -> None:
        """Render the heads-up display (score, lives).

        Args:
            screen: Pygame surface to draw on
            score: Current score
            lives: Remaining lives
        """
        pass

    def render_overlay(self, screen: pygame.Surface, message: str) -> None:
        """Render a centered status message.

        Args:
            screen: Pygame surface to draw on
            message: Text to show
        """
        pass
