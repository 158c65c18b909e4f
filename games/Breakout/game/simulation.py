"""Fixed-step Breakout simulation.

step() advances a GameWorld by exactly one tick. The order of the phases
matters and is part of the game's behavior:

1. Paddle follows the held direction, clamped into the arena
2. A docked ball tracks the paddle and nothing else happens
3. Ball moves by its velocity (explicit Euler, no sub-stepping)
4. Side walls reflect vx
5. Ceiling reflects vy
6. Falling below the floor costs a life and ends the step
7. Paddle bounce, only while the ball is moving down
8. At most one brick is destroyed, the first hit in row-major order

One step per tick with no sub-stepping means a fast enough ball can pass
through thin geometry between ticks. At the configured speeds it cannot.
"""

from enum import Enum
from typing import List, Optional

from playfield.games.input import ControlState
from playfield.logging import get_logger

from .physics.collision import (
    check_wall_collision,
    check_paddle_collision,
    find_brick_collision,
)
from .world import GameWorld

log = get_logger('breakout.simulation')


class StepEvent(str, Enum):
    """Things that happened during a step, for logging and feedback."""
    WALL_BOUNCE = "wall_bounce"
    CEILING_BOUNCE = "ceiling_bounce"
    PADDLE_HIT = "paddle_hit"
    BRICK_DESTROYED = "brick_destroyed"
    LIFE_LOST = "life_lost"
    GAME_LOST = "game_lost"
    GAME_WON = "game_won"


def launch_ball(world: GameWorld) -> bool:
    """Launch the docked ball upward at a random angle.

    The angle is drawn uniformly from the configured arc using the
    world's random source; vy always comes out non-positive and
    |vx| never exceeds the ball's base speed.

    Args:
        world: World to launch in

    Returns:
        True if the ball was launched, False if it was not docked or the
        game is over
    """
    status = world.status
    if status.started or status.game_over:
        return False

    config = world.config
    angle = world.rng.random() * config.launch_angle_span + config.launch_angle_min
    status.started = True
    world.ball = world.ball.launch(angle)
    log.debug("launched at %.3f rad: vx=%.2f vy=%.2f", angle, world.ball.vx, world.ball.vy)
    return True


def step(world: GameWorld, controls: Optional[ControlState] = None) -> List[StepEvent]:
    """Advance the world by one fixed step.

    Args:
        world: World to advance (mutated in place)
        controls: Held movement intents for this tick

    Returns:
        Events that occurred this step, in order
    """
    controls = controls or ControlState()
    status = world.status
    events: List[StepEvent] = []

    # Paddle
    world.paddle.move(controls.direction)

    # Docked ball follows the paddle
    if not status.started:
        world.reset_ball_on_paddle()
        return events

    # Integrate
    world.ball = world.ball.update()

    # Walls and ceiling
    world.ball, contact = check_wall_collision(
        world.ball,
        world.arena_width,
        world.arena_height,
    )
    if contact.side:
        events.append(StepEvent.WALL_BOUNCE)
    if contact.ceiling:
        events.append(StepEvent.CEILING_BOUNCE)

    # Floor
    if contact.fell_below:
        status.lives -= 1
        events.append(StepEvent.LIFE_LOST)
        if status.lives <= 0:
            status.end_game()
            events.append(StepEvent.GAME_LOST)
        else:
            world.reset_ball_on_paddle()
        return events

    # Paddle
    if check_paddle_collision(world.ball, world.paddle):
        world.ball = world.ball.bounce_off_paddle(
            world.paddle.center_x,
            world.paddle.width,
            world.paddle.y,
        )
        events.append(StepEvent.PADDLE_HIT)
        log.trace("paddle hit: vx=%.2f", world.ball.vx)

    # Bricks (one per step)
    brick = find_brick_collision(world.ball, world.bricks)
    if brick is not None:
        brick.destroy()
        status.score += world.config.brick_points
        world.ball = world.ball.bounce_vertical()
        events.append(StepEvent.BRICK_DESTROYED)
        log.trace("brick %s destroyed, score %d", brick.grid_position, status.score)

        if world.remaining_bricks == 0:
            status.end_game()
            events.append(StepEvent.GAME_WON)

    return events
