import logging
import time

import pygame

import config as cfg
from board_view import BoardView, BUTTON_MODES, RESET
from game_session import GameSession

logger = logging.getLogger(__name__)

MODE_KEYS = {
    pygame.K_1: cfg.HUMAN_VS_HUMAN,
    pygame.K_2: cfg.HUMAN_VS_COMPUTER,
}


def handle_click(session, view, pos, now):
    cell = view.cell_at(pos)
    if cell is not None:
        session.click(cell, now)
        return

    button = view.button_at(pos)
    if button == RESET:
        session.reset()
    elif button in BUTTON_MODES:
        session.select_mode(BUTTON_MODES[button])


def main():
    logging.basicConfig(
        level=cfg.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode((cfg.WIN_W, cfg.WIN_H))
    pygame.display.set_caption(cfg.TITLE)
    clock = pygame.time.Clock()
    font_big = pygame.font.SysFont(None, 140)
    font_small = pygame.font.SysFont(None, 30)

    view = BoardView(cfg.WIN_W, cfg.WIN_H)
    session = GameSession()
    logger.info("Starting in %s mode", cfg.DEFAULT_MODE)
    session.select_mode(cfg.DEFAULT_MODE)

    running = True
    while running:
        clock.tick(cfg.FPS)
        now = time.monotonic()

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_q:
                    running = False
                elif event.key == pygame.K_r:
                    session.reset()
                elif event.key in MODE_KEYS:
                    session.select_mode(MODE_KEYS[event.key])

            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                handle_click(session, view, event.pos, now)

        # Deferred computer reply, if one is due this frame.
        session.tick(now)

        view.draw(screen, session, font_big, font_small)
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
