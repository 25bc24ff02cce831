# solver/backtrack.py
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from grid import FilledCell, Grid, GridError, OutOfBounds
from puzzle import PuzzleNode

log = logging.getLogger(__name__)


@dataclass
class SearchStats:
    nodes: int = 0
    placements: int = 0
    out_of_bounds: int = 0
    filled_cell: int = 0
    max_depth: int = 0

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def depth_first_search(
    node: PuzzleNode,
    stats: Optional[SearchStats] = None,
    _depth: int = 0,
) -> Optional[Grid]:
    """Return the first grid reachable from ``node`` that uses every piece.

    Sizes are tried in ascending order; for each size the next piece of that
    size is tried at every anchor, x outer and y inner.  Each attempt works on
    its own copy of the grid, so a rejected or failed branch leaves nothing
    behind.  Success means the pool is empty; whether every free cell got
    covered depends on the inventory's total area.
    """
    if stats is not None:
        stats.nodes += 1
        if _depth > stats.max_depth:
            stats.max_depth = _depth

    pool = node.pool
    if pool.is_empty:
        return node.grid

    grid = node.grid
    for size in pool.sizes_available():
        reduced = pool.copy()
        piece = reduced.take_one(size)
        limit_w = grid.w - piece.size.w
        limit_h = grid.h - piece.size.h
        if limit_w < 0 or limit_h < 0:
            continue
        for x in range(limit_w + 1):
            for y in range(limit_h + 1):
                branch = grid.copy()
                try:
                    branch.place(piece, x, y)
                except GridError as e:
                    if stats is not None:
                        if isinstance(e, OutOfBounds):
                            stats.out_of_bounds += 1
                        elif isinstance(e, FilledCell):
                            stats.filled_cell += 1
                    continue
                if stats is not None:
                    stats.placements += 1
                result = depth_first_search(PuzzleNode(branch, reduced), stats, _depth + 1)
                if result is not None:
                    if _depth == 0:
                        log.debug("Solved with %s first at (%d, %d)", piece.description, x, y)
                    return result
        if _depth == 0:
            log.debug("Exhausted %s as first piece", size.description)
    return None


__all__ = ["SearchStats", "depth_first_search"]
