
"""Piece model, canonical shapes, rotation"""
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

COLS, ROWS = 10, 20
SPAWN_ROW, SPAWN_COL = 0, COLS // 2 - 2

Shape = Tuple[Tuple[int, ...], ...]

# cell value of a locked block is its index here + 1
COLOR_NAMES = ["cyan", "blue", "orange", "yellow", "green", "purple", "red"]

SHAPES: List[Shape] = [
    ((1,1,1,1),),            # I
    ((1,0,0),(1,1,1)),       # J
    ((0,0,1),(1,1,1)),       # L
    ((1,1),(1,1)),           # O
    ((0,1,1),(1,1,0)),       # S
    ((0,1,0),(1,1,1)),       # T
    ((1,1,0),(0,1,1)),       # Z
]

def rotate_cw(m: Sequence[Sequence[int]]) -> Shape:
    """Transpose, then reverse each row."""
    return tuple(tuple(r[::-1]) for r in zip(*m))

@dataclass(frozen=True)
class Piece:
    shape: Shape
    color: str

    @staticmethod
    def canonical(i: int) -> "Piece":
        return Piece(SHAPES[i], COLOR_NAMES[i])

    @property
    def cell_value(self) -> int:
        return COLOR_NAMES.index(self.color) + 1

    @property
    def width(self) -> int:
        return len(self.shape[0])

    @property
    def height(self) -> int:
        return len(self.shape)

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Yield (y, x) offsets of the filled sub-cells."""
        for y, row in enumerate(self.shape):
            for x, v in enumerate(row):
                if v: yield y, x

    def rotated(self) -> "Piece":
        return Piece(rotate_cw(self.shape), self.color)

PIECES: List[Piece] = [Piece.canonical(i) for i in range(len(SHAPES))]
