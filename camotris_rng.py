
"""Uniform piece randomizer"""
import random
from typing import Optional
from camotris_piece import N_SHAPES

class PieceRandom:
    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = random.randrange(1 << 32)
        self.seed = seed
        self._rand = random.Random(seed)

    def next_type(self) -> int:
        return self._rand.randint(1, N_SHAPES)
