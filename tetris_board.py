
"""Board helpers: collides, merge, sweep"""
from typing import List, Tuple
from tetris_piece import Piece, COLS, ROWS

Grid = List[List[int]]
Pos = Tuple[int, int]

def empty_grid() -> Grid:
    return [[0]*COLS for _ in range(ROWS)]

def collides(grid: Grid, piece: Piece, pos: Pos) -> bool:
    row, col = pos
    for y, x in piece.cells():
        by, bx = row+y, col+x
        if bx<0 or bx>=COLS or by>=ROWS: return True
        # rows above the top are open space
        if by>=0 and grid[by][bx]: return True
    return False

def merge(grid: Grid, piece: Piece, pos: Pos) -> Grid:
    """Return a new grid with the piece written in; touched rows are copies."""
    row, col = pos
    out = list(grid)
    copied = set()
    v = piece.cell_value
    for y, x in piece.cells():
        by = row+y
        if by<0: continue
        if by not in copied:
            out[by] = out[by][:]
            copied.add(by)
        out[by][col+x] = v
    return out

def sweep(grid: Grid) -> Tuple[Grid, int]:
    """Clear full rows bottom-up; return the new grid and the cleared count."""
    g = list(grid)
    c = 0; y = ROWS-1
    while y>=0:
        if all(g[y]):
            del g[y]; g.insert(0, [0]*COLS); c+=1
        else: y-=1
    return g, c
