#!/usr/bin/env python3
"""
Ghost Volley - Standalone entry point.

Run this to play Ghost Volley with the mouse.

Usage:
    python games/GhostVolley/main.py
    python games/GhostVolley/main.py --fullscreen
    python games/GhostVolley/main.py --width 1920 --height 1080 --seed 7
"""

import argparse
import os
import sys
import time

import pygame

# Support running from any directory - add project root to path
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from volley.games import GameState
from volley.games.input import InputManager, MouseInputSource
from volley.logging import (
    close_all_sinks,
    configure_logging,
    create_sink_for_environment,
    get_logger,
    register_sink,
)
from games.GhostVolley.config import (
    MAX_PIXEL_RATIO,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SHOW_FPS,
    TARGET_FPS,
)
from games.GhostVolley.game_mode import GhostVolleyMode, RECORD_MODULE
from games.GhostVolley.skin import GhostVolleySkin
from games.GhostVolley.sprites import load_assets

log = get_logger('ghost_volley.main')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=GhostVolleyMode.DESCRIPTION)
    parser.add_argument('--width', type=int, default=SCREEN_WIDTH, help='Window width')
    parser.add_argument('--height', type=int, default=SCREEN_HEIGHT, help='Window height')
    parser.add_argument('--fullscreen', action='store_true', help='Run fullscreen')
    for arg in GhostVolleyMode.get_arguments():
        options = {k: v for k, v in arg.items() if k != 'name'}
        parser.add_argument(arg['name'], **options)
    return parser


def main(argv=None) -> int:
    """Run Ghost Volley."""
    args = build_parser().parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)
    register_sink(RECORD_MODULE, create_sink_for_environment(RECORD_MODULE))

    pygame.init()

    if args.fullscreen:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    else:
        screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)

    assets = load_assets()
    pygame.display.set_caption(GhostVolleyMode.NAME)
    pygame.display.set_icon(pygame.transform.smoothscale(assets.icon, (64, 64)))

    # Window pixels are device pixels; the world should match them exactly
    ratio = min(max(args.pixel_ratio, 1e-3), MAX_PIXEL_RATIO)
    width, height = screen.get_size()

    skin = GhostVolleySkin(assets)
    game = GhostVolleyMode(
        width=width / ratio,
        height=height / ratio,
        pixel_ratio=ratio,
        assets=assets,
        seed=args.seed,
        skin=skin,
    )

    input_manager = InputManager(MouseInputSource())
    clock = pygame.time.Clock()
    font = pygame.font.Font(None, 24)
    running = True

    log.info("Ghost Volley ready (%dx%d)", width, height)

    while running:
        dt = clock.tick(TARGET_FPS) / 1000.0

        input_manager.update(dt)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE and not args.fullscreen:
                screen = pygame.display.set_mode(event.size, pygame.RESIZABLE)
                game.resize(event.w / ratio, event.h / ratio, ratio)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in (pygame.K_SPACE, pygame.K_RETURN):
                    if game.state in (GameState.IDLE, GameState.GAME_OVER):
                        game.start_new()
                elif event.key == pygame.K_p:
                    game.toggle_pause()

        game.handle_input(input_manager.get_events())
        game.tick(time.monotonic())

        game.render(screen)
        if SHOW_FPS:
            fps = font.render(f"{clock.get_fps():.0f} fps", True, (120, 120, 140))
            screen.blit(fps, (10, screen.get_height() - 24))
        pygame.display.flip()

    if game.state != GameState.IDLE:
        summary = game.summary()
        log.info("Final score %d (wave %d, accuracy %.0f%%)",
                 summary.score, summary.wave, summary.accuracy * 100)

    close_all_sinks()
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
