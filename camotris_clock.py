"""Gravity accumulator and countdown timer"""
import logging
import pygame

log = logging.getLogger(__name__)

COUNTDOWN_EVENT = pygame.USEREVENT + 1


def advance_gravity(session, dt_ms: int) -> bool:
    """Add elapsed frame time; drop the piece once the interval is exceeded."""
    if session.over:
        return False
    session.drop_counter += dt_ms
    if session.drop_counter > session.drop_interval:
        session.drop()
        return True
    return False


def tick_countdown(session) -> bool:
    if session.over:
        return False
    session.time_left -= 1
    if session.time_left <= 0:
        session.game_over("time up")
    return True


class Countdown:
    """Once-per-second timer event posted to the pygame queue."""
    def __init__(self, interval_ms: int = 1000, event_type: int = COUNTDOWN_EVENT):
        self.interval_ms = interval_ms
        self.event_type = event_type
        self.running = False

    def start(self):
        pygame.time.set_timer(self.event_type, self.interval_ms)
        self.running = True

    def cancel(self):
        if self.running:
            pygame.time.set_timer(self.event_type, 0)
            self.running = False
            log.debug("countdown cancelled")

    def handle(self, event, session) -> bool:
        """Apply a countdown tick if event is ours; cancel once the game ends."""
        if event.type != self.event_type:
            return False
        tick_countdown(session)
        if session.over:
            self.cancel()
        return True
