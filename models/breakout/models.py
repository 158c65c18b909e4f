"""
Breakout view models.

Frozen pydantic snapshots of the simulation, built once per tick by the
game mode. Renderers only ever see these.
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field

from ..primitives import Point2D, Rectangle, Resolution
from .enums import GameState, Outcome


class BallView(BaseModel):
    """Ball as the renderer sees it."""
    center: Point2D
    radius: float = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)


class BrickView(BaseModel):
    """An alive brick: its grid cell and the screen rectangle derived from it."""
    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)
    rect: Rectangle

    model_config = ConfigDict(frozen=True)


class GameSnapshot(BaseModel):
    """Everything a renderer needs for one frame.

    Attributes:
        arena: Playfield size
        paddle: Paddle rectangle
        ball: Ball center and radius
        bricks: Alive bricks only, row-major
        score: Current score
        lives: Lives left
        state: Lifecycle state (NOT_STARTED/PLAYING/PAUSED/GAME_OVER)
        remaining_bricks: Alive brick count
    """
    arena: Resolution
    paddle: Rectangle
    ball: BallView
    bricks: Tuple[BrickView, ...] = ()
    score: int = Field(..., ge=0)
    lives: int = Field(..., ge=0)
    state: GameState
    remaining_bricks: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def outcome(self) -> Outcome:
        """Won/lost/in-progress, so consumers need not recompute it."""
        return Outcome.from_flags(
            self.state == GameState.GAME_OVER,
            self.remaining_bricks,
        )
