
"""Piece randomizers; the engine takes any object with next_piece()"""
import random
from typing import Iterable, Optional
from tetris_piece import Piece, PIECES

class UniformRandom:
    """Uniform draw with replacement over the 7 pieces. Repeats are allowed."""
    def __init__(self, seed: Optional[int] = None):
        self.rand = random.Random(seed)

    def next_index(self) -> int:
        return self.rand.randrange(len(PIECES))

    def next_piece(self) -> Piece:
        return PIECES[self.next_index()]

class SequenceRandom:
    """Replays a fixed list of piece indices, cycling when exhausted."""
    def __init__(self, indices: Iterable[int]):
        self.indices = list(indices)
        if not self.indices:
            raise ValueError("SequenceRandom needs at least one index")
        for i in self.indices:
            if not 0 <= i < len(PIECES):
                raise ValueError(f"piece index out of range: {i}")
        self.pos = 0

    def next_index(self) -> int:
        i = self.indices[self.pos]
        self.pos = (self.pos + 1) % len(self.indices)
        return i

    def next_piece(self) -> Piece:
        return PIECES[self.next_index()]
