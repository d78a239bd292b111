import logging
import sys

import pygame
from tetris_config import CONFIG
from tetris_engine import new_game, step, command, render as compose
from tetris_grid import COLS, ROWS
from tetris_input import command_for_key
from tetris_layout import compute_dims
from tetris_render import RenderAssets
from tetris_rng import PieceRandom

logger = logging.getLogger(__name__)

TICK = pygame.USEREVENT + 1


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, TICK])

    dims = compute_dims(COLS, ROWS)
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    render = RenderAssets(dims, COLS, ROWS, font)
    clock = pygame.time.Clock()

    rng = PieceRandom(CONFIG["SEED"])
    state = new_game(rng, COLS, ROWS)
    pygame.time.set_timer(TICK, CONFIG["TICK_MS"])
    logger.info("new game, seed=%s tick=%dms", CONFIG["SEED"], CONFIG["TICK_MS"])

    while True:
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.time.set_timer(TICK, 0)
                pygame.quit(); sys.exit()
            if e.type == TICK:
                state = step(state, rng)
                if state.over:
                    # Stop gravity; R restarts
                    pygame.time.set_timer(TICK, 0)
                    logger.info("game over")
            if e.type == pygame.KEYDOWN:
                if state.over:
                    if e.key == pygame.K_r:
                        rng.reset()
                        state = new_game(rng, COLS, ROWS)
                        pygame.time.set_timer(TICK, CONFIG["TICK_MS"])
                    continue
                cmd = command_for_key(e.key)
                if cmd is not None:
                    state = command(state, cmd)

        render.draw_view(screen, compose(state.grid, state.piece))
        if state.over:
            render.draw_message(screen, "GAME OVER (R to Restart)", big_font)
        pygame.display.flip()
        clock.tick(60)


if __name__ == '__main__':
    main()
