
"""Piece sources: anything with next_piece() -> type tag"""
import random
from typing import Iterable, Optional
from tetris_piece import PIECES

class UniformRandom:
    """Independent uniform draw over the seven types, no bag."""
    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_piece(self) -> str:
        return self._rng.choice(PIECES)

class SequenceSource:
    """Replays a fixed list of types, wrapping around at the end."""
    def __init__(self, types: Iterable[str]):
        self.types = list(types)
        if not self.types:
            raise ValueError("sequence needs at least one piece type")
        unknown = [t for t in self.types if t not in PIECES]
        if unknown:
            raise ValueError(f"unknown piece types: {unknown}")
        self.index = 0

    def next_piece(self) -> str:
        t = self.types[self.index % len(self.types)]
        self.index += 1
        return t
