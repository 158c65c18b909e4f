"""The Breakout world: every piece of mutable game state in one place.

A GameWorld owns the status flags, paddle, ball, brick grid and the
random source used for launches. One controller owns the world and is
the only thing that mutates it; renderers get a GameSnapshot instead.
"""

import math
import random
from dataclasses import dataclass, field
from typing import Optional

from playfield.games.game_state import GameState
from playfield.logging import get_logger
from models.primitives import Point2D, Rectangle, Resolution
from models.breakout import BallView, BrickView, GameSnapshot, Outcome

from ..config import (
    ARENA_WIDTH, ARENA_HEIGHT, START_LIVES, BRICK_POINTS,
    LAUNCH_ANGLE_MIN, LAUNCH_ANGLE_SPAN,
)
from .entities import Ball, BallConfig, BrickGrid, BrickLayout, Paddle, PaddleConfig

log = get_logger('breakout.world')


@dataclass
class BreakoutConfig:
    """Arena, entity configs and rules needed to build a world."""

    arena_width: int = ARENA_WIDTH
    arena_height: int = ARENA_HEIGHT
    paddle: PaddleConfig = field(default_factory=PaddleConfig)
    ball: BallConfig = field(default_factory=BallConfig)
    bricks: BrickLayout = field(default_factory=BrickLayout)
    start_lives: int = START_LIVES
    brick_points: int = BRICK_POINTS
    launch_angle_min: float = LAUNCH_ANGLE_MIN * math.pi    # radians
    launch_angle_span: float = LAUNCH_ANGLE_SPAN * math.pi  # radians

    def __post_init__(self):
        """Validate arena and rules."""
        if self.arena_width <= 0 or self.arena_height <= 0:
            raise ValueError(
                f'Arena size must be positive, got {self.arena_width}x{self.arena_height}'
            )
        if self.start_lives <= 0:
            raise ValueError(f'Starting lives must be positive, got {self.start_lives}')
        if self.brick_points < 0:
            raise ValueError(f'Brick points must be non-negative, got {self.brick_points}')


@dataclass
class GameStatus:
    """Score, lives and lifecycle flags.

    Invariant: game_over implies paused. Win and loss share game_over;
    the number of bricks left tells them apart.
    """

    score: int = 0
    lives: int = START_LIVES
    paused: bool = False
    started: bool = False     # ball in flight (False = docked on paddle)
    game_over: bool = False   # terminal, only a full reset clears it

    def end_game(self) -> None:
        """Enter the terminal state."""
        self.game_over = True
        self.paused = True


class GameWorld:
    """Aggregate of all game state for one Breakout session."""

    def __init__(
        self,
        config: Optional[BreakoutConfig] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        """Create a world in its initial state.

        Args:
            config: World configuration (defaults to the standard game)
            rng: Random source for launch angles
            seed: Seed for a new random source when rng is not given
        """
        self.config = config or BreakoutConfig()
        self.rng = rng if rng is not None else random.Random(seed)

        self.status = GameStatus(lives=self.config.start_lives)
        self.paddle = Paddle(
            self.config.paddle,
            self.config.arena_width,
            self.config.arena_height,
        )
        self.bricks = BrickGrid(self.config.bricks)
        self.ball = Ball(self.config.ball, self.paddle.center_x, self.paddle.y)
        self.reset_ball_on_paddle()

    @property
    def arena_width(self) -> int:
        return self.config.arena_width

    @property
    def arena_height(self) -> int:
        return self.config.arena_height

    # =========================================================================
    # Reset / lifecycle operations
    # =========================================================================

    def reset_bricks(self) -> None:
        """Reallocate the full brick grid, every brick alive."""
        self.bricks.reset()

    def reset_ball_on_paddle(self) -> None:
        """Dock the ball above the paddle's current position and stop it."""
        self.ball = self.ball.dock(self.paddle.center_x, self.paddle.y)
        self.status.started = False

    def full_reset(self) -> None:
        """Return to the initial state from any state, including game over."""
        self.status.score = 0
        self.status.lives = self.config.start_lives
        self.status.paused = False
        self.status.started = False
        self.status.game_over = False
        self.paddle.reset()
        self.reset_bricks()
        self.reset_ball_on_paddle()
        log.debug("world reset: %d bricks, %d lives",
                  self.remaining_bricks, self.status.lives)

    # =========================================================================
    # Derived state
    # =========================================================================

    @property
    def remaining_bricks(self) -> int:
        """Count of bricks still alive."""
        return self.bricks.remaining()

    @property
    def lifecycle(self) -> GameState:
        """Map the status flags to the standard lifecycle state."""
        if self.status.game_over:
            return GameState.GAME_OVER
        if not self.status.started:
            return GameState.NOT_STARTED
        if self.status.paused:
            return GameState.PAUSED
        return GameState.PLAYING

    @property
    def outcome(self) -> Outcome:
        """Won/lost/in-progress, from game_over plus bricks left."""
        return Outcome.from_flags(self.status.game_over, self.remaining_bricks)

    def snapshot(self) -> GameSnapshot:
        """Build a read-only view of the world for renderers."""
        return GameSnapshot(
            arena=Resolution(width=self.arena_width, height=self.arena_height),
            paddle=Rectangle(
                x=self.paddle.x,
                y=self.paddle.y,
                width=self.paddle.width,
                height=self.paddle.height,
            ),
            ball=BallView(
                center=Point2D(x=self.ball.x, y=self.ball.y),
                radius=self.ball.radius,
            ),
            bricks=tuple(
                BrickView(
                    row=brick.row,
                    col=brick.col,
                    rect=Rectangle(
                        x=brick.x, y=brick.y, width=brick.width, height=brick.height,
                    ),
                )
                for brick in self.bricks.alive_bricks()
            ),
            score=self.status.score,
            lives=self.status.lives,
            state=self.lifecycle,
            remaining_bricks=self.remaining_bricks,
        )
