#!/usr/bin/env python3
"""Breakout - Standalone Entry Point.

Usage:
    python -m games.Breakout.main
    python -m games.Breakout.main --seed 42
    python -m games.Breakout.main --fps 30
"""

import argparse
import sys
from typing import List, Optional

import pygame

from playfield.games.input import InputManager
from playfield.games.input.sources import KeyboardInputSource
from playfield.logging import get_logger
from games.Breakout.game_mode import BreakoutMode
from games.Breakout.config import FPS, SEED

log = get_logger('breakout.main')


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser from the game's declared arguments."""
    parser = argparse.ArgumentParser(description=f"{BreakoutMode.NAME} - Standalone")
    for arg in BreakoutMode.get_arguments():
        arg = dict(arg)
        name = arg.pop('name')
        parser.add_argument(name, **arg)
    parser.set_defaults(fps=FPS, seed=SEED)
    return parser


def run(game: BreakoutMode, fps: int) -> None:
    """Drive the game: one input poll, step and render per frame.

    Args:
        game: Game to run
        fps: Target frame rate
    """
    screen = pygame.display.set_mode((game.world.arena_width, game.world.arena_height))
    pygame.display.set_caption(game.NAME)

    keyboard = KeyboardInputSource()
    input_manager = InputManager(keyboard)
    clock = pygame.time.Clock()
    running = True

    while running:
        dt = clock.tick(fps) / 1000.0

        # Key intents first; anything else is re-posted for us
        input_manager.update(dt)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False

        game.handle_input(input_manager.get_events(), input_manager.controls())
        game.update(dt)

        game.render(screen)
        pygame.display.flip()


def main(argv: Optional[List[str]] = None) -> int:
    """Run Breakout standalone."""
    args = build_parser().parse_args(argv)

    pygame.init()
    pygame.font.init()

    print("\n" + "=" * 50)
    print("BREAKOUT")
    print("=" * 50)
    print("Controls:")
    print("  - Left/Right or A/D to move the paddle")
    print("  - SPACE to launch, then to pause/resume")
    print("  - R to restart")
    print("  - ESC to quit")
    print("=" * 50 + "\n")

    try:
        game = BreakoutMode(skin=args.skin, seed=args.seed)
        run(game, args.fps)
    except Exception:
        log.exception("Breakout crashed")
        return 1
    finally:
        pygame.quit()

    return 0


if __name__ == "__main__":
    sys.exit(main())
