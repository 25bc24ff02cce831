# config.py
import os

# ======= Puzzle cells =======
# Sentinel color written into cells that can never hold a piece ('z').
BLOCKED_COLOR = int(os.getenv("PZ_BLOCKED_COLOR", "26"))

# ======= Search diagnostics =======
# When enabled the orchestrator logs per-run search counters at INFO.
LOG_SEARCH = int(os.getenv("PZ_LOG_SEARCH", "0")) != 0

# ======= Rendering =======
CELL_PX = int(os.getenv("PZ_CELL_PX", "40"))

# ======= Output names =======
SOLUTION_OUT = os.getenv("PZ_SOLUTION_OUT", "solution.txt")
LAYOUT_HTML  = os.getenv("PZ_LAYOUT_HTML", "layout_view.html")


class CFG:
    BLOCKED_COLOR = BLOCKED_COLOR

    LOG_SEARCH = LOG_SEARCH

    CELL_PX = CELL_PX

    SOLUTION_OUT = SOLUTION_OUT
    LAYOUT_HTML  = LAYOUT_HTML


__all__ = ["CFG", "BLOCKED_COLOR"]
