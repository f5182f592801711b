
"""
Game state engine: grid, active/next piece, gravity, lock, line clear, score.

The engine is the only owner of game state. Callers drive it with commands
(move, rotate, tick, reset) and read it back through immutable snapshots.
It has no clock of its own; a host timer calls tick() at a fixed period and
soft drop calls the very same tick().
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import NamedTuple, Tuple

from tetris_config import CONFIG
from tetris_piece import Piece, SPAWN_ROW, SPAWN_COL
from tetris_board import Grid, empty_grid, collides, merge, sweep
from tetris_rng import UniformRandom

log = logging.getLogger(__name__)

POINTS_PER_LINE = 100


class Position(NamedTuple):
    row: int
    col: int


SPAWN = Position(SPAWN_ROW, SPAWN_COL)


@dataclass(frozen=True)
class Snapshot:
    """Read-only view handed to the renderer and dialogs."""
    grid: Tuple[Tuple[int, ...], ...]
    piece: Piece
    position: Position
    next_piece: Piece
    score: int
    game_over: bool


class GameEngine:
    """
    Two states: running and game over. Game over is entered when a freshly
    spawned piece collides at the spawn position and is left only by reset().
    While game over every other command is a no-op returning False.
    """

    def __init__(self, randomizer=None):
        self.randomizer = randomizer if randomizer is not None else UniformRandom(CONFIG["SEED"])
        self.reset()

    # ---------- commands ----------
    def reset(self) -> None:
        self.grid: Grid = empty_grid()
        self.piece: Piece = self.randomizer.next_piece()
        self.next_piece: Piece = self.randomizer.next_piece()
        self.position = SPAWN
        self._score = 0
        self._game_over = False
        log.info("new game: %s, next %s", self.piece.color, self.next_piece.color)

    def tick(self) -> bool:
        """Drop one row, or lock and spawn if blocked. True if the piece moved."""
        if self._game_over:
            return False
        below = Position(self.position.row + 1, self.position.col)
        if not collides(self.grid, self.piece, below):
            self.position = below
            return True
        self._lock()
        return False

    def move(self, direction: int) -> bool:
        if isinstance(direction, bool) or not isinstance(direction, int) or direction not in (-1, 1):
            raise ValueError(f"direction must be -1 or 1, got {direction!r}")
        if self._game_over:
            return False
        target = Position(self.position.row, self.position.col + direction)
        if collides(self.grid, self.piece, target):
            return False
        self.position = target
        return True

    def move_left(self) -> bool:
        return self.move(-1)

    def move_right(self) -> bool:
        return self.move(1)

    def soft_drop(self) -> bool:
        return self.tick()

    def rotate(self) -> bool:
        """Rotate clockwise in place; rejected if blocked (no kicks)."""
        if self._game_over:
            return False
        turned = self.piece.rotated()
        if collides(self.grid, turned, self.position):
            return False
        self.piece = turned
        return True

    # ---------- queries ----------
    @property
    def score(self) -> int:
        return self._score

    @property
    def game_over(self) -> bool:
        return self._game_over

    def snapshot(self) -> Snapshot:
        return Snapshot(
            grid=tuple(tuple(r) for r in self.grid),
            piece=self.piece,
            position=self.position,
            next_piece=self.next_piece,
            score=self._score,
            game_over=self._game_over,
        )

    # ---------- lock / spawn ----------
    def _lock(self) -> None:
        grid = merge(self.grid, self.piece, self.position)
        grid, cleared = sweep(grid)
        self.grid = grid
        if cleared:
            self._score += cleared * POINTS_PER_LINE
            log.debug("cleared %d line(s), score %d", cleared, self._score)
        log.debug("locked %s at %s", self.piece.color, tuple(self.position))

        if collides(self.grid, self.next_piece, SPAWN):
            self._game_over = True
            log.info("game over, score %d", self._score)
            return
        self.piece = self.next_piece
        self.next_piece = self.randomizer.next_piece()
        self.position = SPAWN
