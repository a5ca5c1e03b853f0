import argparse
import logging
import sys
from typing import Optional

import pygame
from tetris_config import CONFIG
from tetris_game import Game
from tetris_input import action_for_key
from tetris_layout import compute_dims
from tetris_overlay import Overlay
from tetris_render import RenderAssets
from tetris_rng import UniformRandom, SequenceSource

logger = logging.getLogger(__name__)


def setup_logger(level: str = 'INFO', file: Optional[str] = None):
    log_format = '%(asctime)s %(levelname)s [%(name)s] %(message)s'
    logging.basicConfig(level=level.upper(), format=log_format,
                        filename=file)


def build_parser():
    parser = argparse.ArgumentParser(description='Falling-block puzzle game')
    parser.add_argument('--seed', type=int, default=CONFIG["SEED"],
                        help='seed for the piece randomizer')
    parser.add_argument('--sequence', default='',
                        help='fixed piece order to replay, e.g. ITOSZJL')
    parser.add_argument('--cell-size', type=int, default=CONFIG["CELL_SIZE"])
    parser.add_argument('--log-level', default=CONFIG["LOG_LEVEL"])
    parser.add_argument('--log-file', default='')
    return parser


def make_source(parser, args):
    if not args.sequence:
        return UniformRandom(args.seed)
    try:
        return SequenceSource(args.sequence.upper())
    except ValueError as e:
        parser.error('--sequence: {}'.format(e))


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main(args=None):
    parser = build_parser()
    args = parser.parse_args(args)
    CONFIG["SEED"] = args.seed
    CONFIG["CELL_SIZE"] = args.cell_size
    CONFIG["LOG_LEVEL"] = args.log_level
    setup_logger(args.log_level, args.log_file or None)

    source = make_source(parser, args)
    if isinstance(source, UniformRandom):
        logger.info('piece source: uniform random, seed=%s', source.seed)
    else:
        logger.info('piece source: fixed sequence %s', ''.join(source.types))

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

    game = Game(source)

    while True:
        dt = clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                logger.info('quit: score=%d lines=%d', game.score, game.lines)
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                action = action_for_key(e.key)
                if action:
                    game.handle_action(action)

        game.tick(dt)

        snap = game.snapshot()
        render.draw(screen, snap)
        overlay.draw(screen, snap.status, render.board_rect)
        pygame.display.flip()


if __name__ == '__main__':
    main()
