"""Geometric skin - flat rounded shapes on a dark background."""

from typing import Dict, Optional, Tuple

import pygame

from .base import BreakoutSkin
from ...config import (
    BACKGROUND_COLOR, PADDLE_COLOR, BALL_COLOR, HUD_COLOR, OVERLAY_COLOR,
    BRICK_BASE_HUE, BRICK_HUE_STEP, BRICK_SATURATION, BRICK_LIGHTNESS,
    BRICK_CORNER_RADIUS, PADDLE_CORNER_RADIUS,
)
from models.breakout import BallView, BrickView
from models.primitives import Rectangle


class GeometricSkin(BreakoutSkin):
    """Renders the game using simple geometric shapes.

    - Bricks: Rounded rectangles, hue shifting slightly per row
    - Paddle: Pale blue rounded rectangle
    - Ball: White circle
    - HUD: Score top-left, lives top-right
    """

    NAME = "geometric"
    DESCRIPTION = "Flat rounded shapes"

    HUD_FONT_SIZE = 20
    OVERLAY_FONT_SIZE = 26
    HUD_MARGIN = 14

    def __init__(self):
        """Initialize geometric skin."""
        self._hud_font: Optional[pygame.font.Font] = None
        self._overlay_font: Optional[pygame.font.Font] = None
        self._row_colors: Dict[int, pygame.Color] = {}

    def _ensure_fonts(self) -> None:
        """Ensure fonts are initialized."""
        if self._hud_font is None:
            pygame.font.init()
            self._hud_font = pygame.font.Font(None, self.HUD_FONT_SIZE)
            self._overlay_font = pygame.font.Font(None, self.OVERLAY_FONT_SIZE)
            self._overlay_font.set_bold(True)

    def brick_color(self, row: int) -> pygame.Color:
        """Get the fill color for a brick row (cached)."""
        if row not in self._row_colors:
            color = pygame.Color(0, 0, 0)
            hue = (BRICK_BASE_HUE + row * BRICK_HUE_STEP) % 360
            color.hsla = (hue, BRICK_SATURATION, BRICK_LIGHTNESS, 100)
            self._row_colors[row] = color
        return self._row_colors[row]

    def render_background(self, screen: pygame.Surface) -> None:
        screen.fill(BACKGROUND_COLOR)

    def render_paddle(self, paddle: Rectangle, screen: pygame.Surface) -> None:
        """Render paddle as a rounded rectangle."""
        pygame.draw.rect(
            screen,
            PADDLE_COLOR,
            pygame.Rect(paddle.as_tuple),
            border_radius=PADDLE_CORNER_RADIUS,
        )

    def render_ball(self, ball: BallView, screen: pygame.Surface) -> None:
        """Render ball as a filled circle."""
        pos = (round(ball.center.x), round(ball.center.y))
        pygame.draw.circle(screen, BALL_COLOR, pos, round(ball.radius))

    def render_brick(self, brick: BrickView, screen: pygame.Surface) -> None:
        """Render brick as a rounded rectangle colored by row."""
        pygame.draw.rect(
            screen,
            self.brick_color(brick.row),
            pygame.Rect(brick.rect.as_tuple),
            border_radius=BRICK_CORNER_RADIUS,
        )

    def render_hud(
        self,
        screen: pygame.Surface,
        score: int,
        lives: int,
    ) -> None:
        """Render HUD with score and lives."""
        self._ensure_fonts()

        score_text = self._hud_font.render(f"Score: {score}", True, HUD_COLOR)
        screen.blit(score_text, (self.HUD_MARGIN, self.HUD_MARGIN))

        lives_text = self._hud_font.render(f"Lives: {lives}", True, HUD_COLOR)
        lives_rect = lives_text.get_rect()
        lives_rect.topright = (screen.get_width() - self.HUD_MARGIN, self.HUD_MARGIN)
        screen.blit(lives_text, lives_rect)

    def render_overlay(self, screen: pygame.Surface, message: str) -> None:
        """Render message centered horizontally, a little below mid-screen."""
        self._ensure_fonts()

        text = self._overlay_font.render(message, True, OVERLAY_COLOR)
        center: Tuple[int, int] = (screen.get_width() // 2, int(screen.get_height() * 0.55))
        screen.blit(text, text.get_rect(center=center))
