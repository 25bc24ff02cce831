# solver/orchestrator.py
from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional, Tuple

from config import CFG
from grid import Grid
from puzzle import PuzzleNode, initial_puzzle_state
from solver.backtrack import SearchStats, depth_first_search
from progress import (
    set_nodes,
    set_pieces_total,
    set_placed_count,
    set_status,
    start_timer,
)

log = logging.getLogger(__name__)

SOLVED_REASON = "Solved"
NO_SOLUTION_REASON = "No solution found."


def solve_orchestrator(node: Optional[PuzzleNode] = None) -> Tuple[bool, Optional[Grid], str, Dict[str, Any]]:
    """
    Run one search and report it.

    Returns: (ok, grid, reason, meta). ``meta`` carries the search counters,
    elapsed seconds and the piece count of the starting pool.
    """
    if node is None:
        node = initial_puzzle_state()

    pieces_total = node.pool.piece_count()
    set_status("Solving")
    set_pieces_total(pieces_total)
    start_timer()
    log.info(
        "Search started: %dx%d grid, %d pieces (%s)",
        node.grid.w, node.grid.h, pieces_total, node.pool.description or "empty pool",
    )

    stats = SearchStats()
    t0 = time.time()
    solution = depth_first_search(node.copy(), stats)
    elapsed = time.time() - t0

    ok = solution is not None
    reason = SOLVED_REASON if ok else NO_SOLUTION_REASON
    set_nodes(stats.nodes)
    set_placed_count(pieces_total if ok else 0)

    meta: Dict[str, Any] = {
        "stats": stats.as_dict(),
        "elapsed_sec": elapsed,
        "pieces_total": pieces_total,
        "reason": reason,
    }
    log.info("Search finished: %s after %d nodes in %.2fs", reason, stats.nodes, elapsed)
    if CFG.LOG_SEARCH:
        log.info("Search stats: %s", stats.as_dict())
    return ok, solution, reason, meta


__all__ = ["solve_orchestrator", "SOLVED_REASON", "NO_SOLUTION_REASON"]
