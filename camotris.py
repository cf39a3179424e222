"""
camotris: time attack falling blocks for Pygame
==============================================

Clear as many rows as you can before the two minute countdown runs out.
Several rows cleared by one piece score double for each extra row
(10, 30, 70, 150).

Controls: Left/Right move, Down drops one row, Q rotates counter-clockwise,
W or Up rotates clockwise, R restarts after the game is over. The buttons
in the side panel can be clicked too.

Tested with: Python 3.10+ and pygame 2.5+
"""
import logging
import sys

import pygame

from camotris_clock import COUNTDOWN_EVENT, Countdown, advance_gravity
from camotris_config import CONFIG
from camotris_input import apply, command_for_event
from camotris_layout import compute_dims
from camotris_render import RenderAssets
from camotris_session import Session

log = logging.getLogger("camotris")


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def new_game(countdown: Countdown) -> Session:
    countdown.cancel()
    session = Session.new()
    countdown.start()
    return session


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN, COUNTDOWN_EVENT])
    pygame.key.set_repeat(CONFIG["KEY_REPEAT_DELAY_MS"], CONFIG["KEY_REPEAT_INTERVAL_MS"])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("camotris - Time Attack")
    font = pygame.font.SysFont(None, 24)
    big_font = pygame.font.SysFont("couriernew", 48)

    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()
    countdown = Countdown()
    session = new_game(countdown)

    while True:
        dt = clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                countdown.cancel()
                pygame.quit(); sys.exit()
            if countdown.handle(e, session):
                continue
            if session.over:
                if e.type == pygame.KEYDOWN and e.key == pygame.K_r:
                    log.info("restart")
                    session = new_game(countdown)
                continue
            cmd = command_for_event(e, dims)
            if cmd is not None:
                apply(session, cmd)

        if session.over:
            countdown.cancel()
        else:
            advance_gravity(session, dt)

        render.draw(screen, session)
        pygame.display.flip()


if __name__ == '__main__':
    main()
