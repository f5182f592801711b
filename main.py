import argparse
import logging
import sys

import pygame
from tetris_config import CONFIG
from tetris_engine import GameEngine
from tetris_input import dispatch
from tetris_layout import compute_dims
from tetris_overlay import GameOverDialog
from tetris_render import RenderAssets

TICK_EVENT = pygame.USEREVENT + 1


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Falling-block puzzle")
    ap.add_argument("--seed", type=int, default=CONFIG["SEED"])
    ap.add_argument("--tick-ms", type=int, default=CONFIG["TICK_MS"], help="auto-drop period")
    ap.add_argument("--cell-size", type=int, default=CONFIG["CELL_SIZE"])
    ap.add_argument("--log-level", default=CONFIG["LOG_LEVEL"])
    return ap.parse_args(argv)


def apply_args(args):
    CONFIG["SEED"] = args.seed
    CONFIG["TICK_MS"] = args.tick_ms
    CONFIG["CELL_SIZE"] = args.cell_size
    CONFIG["LOG_LEVEL"] = args.log_level.upper()


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main(argv=None):
    apply_args(parse_args(argv))
    logging.basicConfig(level=CONFIG["LOG_LEVEL"],
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, TICK_EVENT])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 26)
    big_font = pygame.font.SysFont(None, 48)

    render = RenderAssets(dims, font)
    clock = pygame.time.Clock()

    engine = GameEngine()
    dialog = GameOverDialog()
    pygame.time.set_timer(TICK_EVENT, CONFIG["TICK_MS"])

    while True:
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if dialog.handle(engine, e):
                continue
            if e.type == TICK_EVENT:
                engine.tick()
            elif e.type == pygame.KEYDOWN:
                dispatch(engine, e)

        snap = engine.snapshot()
        dialog.sync(snap)
        render.draw(screen, snap)
        dialog.draw(screen, font, big_font, dims.total_w, dims.total_h, snap.score)
        pygame.display.flip()
        clock.tick(60)


if __name__ == '__main__':
    main()
