import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from camotris_board import new_board
from camotris_piece import Piece


@pytest.fixture(scope="session", autouse=True)
def pygame_headless():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def board():
    return new_board()


class FixedRandom:
    """Randomizer stand-in that always yields the same shape."""
    def __init__(self, type_id):
        self.type_id = type_id
        self.seed = 0

    def next_type(self):
        return self.type_id


@pytest.fixture
def fixed_rng():
    return FixedRandom


@pytest.fixture
def o_piece():
    return Piece.spawn(2)
