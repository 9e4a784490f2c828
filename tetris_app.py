"""pygame host: forwards keys and timer ticks to the engine and draws the result"""
import argparse
import logging
import sys

import pygame

from tetris import new_game, tick, apply_command
from tetris_config import CONFIG
from tetris_input import command_for
from tetris_layout import compute_dims
from tetris_overlay import Overlay
from tetris_render import RenderAssets

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Tetris")
    parser.add_argument("--seed", type=int, default=CONFIG["BAG_SEED"], help="Bag seed for a reproducible piece sequence")
    parser.add_argument("--tick-ms", type=int, default=CONFIG["TICK_MS"], help="Milliseconds per gravity tick")
    parser.add_argument("--cell-size", type=int, default=CONFIG["CELL_SIZE"], help="Cell size in pixels")
    parser.add_argument("--log-level", type=str, default=CONFIG["LOG_LEVEL"], help="Logging level")
    return parser.parse_args(argv)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main(argv=None):
    args = parse_args(argv)
    CONFIG.update(BAG_SEED=args.seed, TICK_MS=args.tick_ms,
                  CELL_SIZE=args.cell_size, LOG_LEVEL=args.log_level.upper())
    logging.basicConfig(
        level=CONFIG["LOG_LEVEL"],
        format='[%(asctime)s] %(levelname)s: %(message)s'
    )

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    render = RenderAssets(dims, font)
    overlay = Overlay(big_font, font)
    clock = pygame.time.Clock()

    game = new_game(CONFIG["BAG_SEED"])
    logger.info("new game, first pieces %s and %s",
                game.current_tetromino.block_kind, game.next_tetromino.block_kind)
    acc = 0

    while True:
        acc += clock.tick(60)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type != pygame.KEYDOWN:
                continue
            if e.key == pygame.K_ESCAPE:
                pygame.quit(); sys.exit()
            if e.key == pygame.K_r:
                game = new_game(CONFIG["BAG_SEED"]); acc = 0; overlay.paused = False
                logger.info("restarted")
                continue
            if e.key == pygame.K_p:
                overlay.toggle(); continue
            command = command_for(e)
            if command and not overlay.paused:
                game = apply_command(game, command)

        tick_ms = CONFIG["TICK_MS"]
        if overlay.paused or game.game_over:
            acc = 0
        while acc >= tick_ms:
            acc -= tick_ms
            game = tick(game)

        render.draw_game(screen, game)
        overlay.draw(screen, game, dims)
        pygame.display.flip()


if __name__ == '__main__':
    main()
