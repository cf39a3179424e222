"""Keyboard and on-screen button controller"""
from enum import Enum
from typing import Optional
import pygame
from camotris_layout import Dims

class Command(Enum):
    LEFT = "left"
    RIGHT = "right"
    DROP = "drop"
    ROTATE_CCW = "rotate_ccw"
    ROTATE_CW = "rotate_cw"

KEYMAP = {
    pygame.K_LEFT: Command.LEFT,
    pygame.K_RIGHT: Command.RIGHT,
    pygame.K_DOWN: Command.DROP,
    pygame.K_q: Command.ROTATE_CCW,
    pygame.K_w: Command.ROTATE_CW,
    pygame.K_UP: Command.ROTATE_CW,
}

BUTTON_COMMANDS = {
    "left": Command.LEFT,
    "right": Command.RIGHT,
    "down": Command.DROP,
    "rotate": Command.ROTATE_CW,
}

def command_for_event(event, dims: Dims) -> Optional[Command]:
    if event.type == pygame.KEYDOWN:
        return KEYMAP.get(event.key)
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        for name, rect in dims.buttons.items():
            if pygame.Rect(rect).collidepoint(event.pos):
                return BUTTON_COMMANDS[name]
    return None

def apply(session, command: Command) -> bool:
    """Run command against the session and pass back the session's result.

    Moves and rotations report whether they took effect, a drop reports
    whether the piece locked. Nothing happens once the game is over.
    """
    if session.over:
        return False
    if command is Command.LEFT: return session.move(-1)
    if command is Command.RIGHT: return session.move(1)
    if command is Command.DROP: return session.drop()
    if command is Command.ROTATE_CCW: return session.rotate(-1)
    if command is Command.ROTATE_CW: return session.rotate(1)
    raise ValueError(f"unknown command {command!r}")
