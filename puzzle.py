# puzzle.py — the bookshelf puzzle definition and search node
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from config import CFG
from grid import Grid
from models import Piece
from pool import Pool

GRID_W = 7
GRID_H = 7

# Bottom two shelves are walled off except for column 3.
BLOCKED_CELLS: List[Tuple[int, int]] = [
    (x, y) for y in (5, 6) for x in (0, 1, 2, 4, 5, 6)
]

# (w, h, x, y, color); pre-placed and never moved.
FIXED_PIECE: Tuple[int, int, int, int, int] = (1, 4, 3, 3, 12)

# Total pieces in the puzzle; 12 is the fixed 1x4.
INVENTORY: Dict[str, List[int]] = {
    "2x1": [1, 2],
    "3x1": [3, 4, 5, 6],
    "4x1": [7],
    "1x3": [8, 9, 10],
    "1x4": [11],
}


@dataclass
class PuzzleNode:
    grid: Grid
    pool: Pool

    def copy(self) -> "PuzzleNode":
        return PuzzleNode(self.grid.copy(), self.pool.copy())

    @property
    def description(self) -> str:
        return f"{self.grid.description}\n{self.pool.description}"


def initial_puzzle_state() -> PuzzleNode:
    g = Grid(GRID_W, GRID_H)
    g.fill_cells(BLOCKED_CELLS, CFG.BLOCKED_COLOR)

    w, h, x, y, color = FIXED_PIECE
    g.place(Piece.of(w, h, color), x, y)

    return PuzzleNode(grid=g, pool=Pool.from_mapping(INVENTORY))


__all__ = ["PuzzleNode", "initial_puzzle_state", "BLOCKED_CELLS", "FIXED_PIECE", "INVENTORY"]
