"""Seedable piece randomizer"""
import random
from typing import Optional

from tetris_grid import Cell


class PieceRandom:
    """Uniform choice over the seven families.

    Pass a seed to replay the same piece sequence; ``None`` seeds from
    the OS like ``random.Random`` does.
    """
    PIECES = [Cell.I, Cell.J, Cell.L, Cell.O, Cell.S, Cell.T, Cell.Z]

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_piece(self) -> Cell:
        return self._rng.choice(self.PIECES)

    def reset(self):
        self._rng.seed(self.seed)
