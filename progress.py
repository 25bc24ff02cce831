# progress.py — in-memory run state shared by the web routes and the CLI
from __future__ import annotations

import logging
import threading
import time
from pathlib import Path
from typing import Any, Dict, Optional

PROGRESS_LOCK = threading.Lock()

RUN_LOG_PATH = Path(__file__).resolve().parent / "logs" / "solver_runs.log"


def _init_logger() -> logging.Logger:
    logger = logging.getLogger("solver.run_log")
    if logger.handlers:
        return logger
    try:
        RUN_LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(RUN_LOG_PATH, encoding="utf-8")
    except OSError:
        # No handler means _emit_log does nothing.
        return logger
    handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    return logger


RUN_LOGGER = _init_logger()


def _emit_log(event: str, **fields: Any) -> None:
    if not RUN_LOGGER.handlers:
        return
    extras = " ".join(f"{k}={v}" for k, v in fields.items() if v not in (None, ""))
    try:
        if extras:
            RUN_LOGGER.info("%s | %s", event, extras)
        else:
            RUN_LOGGER.info("%s", event)
    except Exception:
        # A broken log handler must not fail a solve.
        pass


def fmt_elapsed(seconds: Any) -> str:
    """Human readable duration shared by the result page and /progress."""
    try:
        seconds = max(0.0, float(seconds))
    except (TypeError, ValueError):
        seconds = 0.0
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    m, s = divmod(int(seconds), 60)
    if m == 0:
        return f"{s}s"
    h, m = divmod(m, 60)
    if h == 0:
        return f"{m}m {s}s"
    return f"{h}h {m}m {s}s"


def _blank_state(run_id: int) -> Dict[str, Any]:
    return {
        "status": "Idle",        # Idle | Solving | Solved | No solution | Error
        "pieces_total": 0,       # pieces in the pool when the run started
        "placed_count": 0,       # pieces placed in the returned grid
        "nodes": 0,              # search nodes visited
        "started_at": None,      # time.time() when the search began
        "elapsed": 0.0,          # seconds; frozen once the run is done
        "message": "",
        "done": False,
        "ok": None,
        "result_url": "",
        "run_id": run_id,
    }


PROGRESS: Dict[str, Any] = _blank_state(0)


def _elapsed_locked() -> float:
    started = PROGRESS["started_at"]
    if started is None or PROGRESS["done"]:
        return float(PROGRESS["elapsed"])
    return max(0.0, time.time() - started)


def reset() -> None:
    with PROGRESS_LOCK:
        PROGRESS.update(_blank_state(int(PROGRESS["run_id"]) + 1))
        run_id = PROGRESS["run_id"]
    _emit_log("Progress reset", run_id=run_id)


def start_timer() -> None:
    with PROGRESS_LOCK:
        PROGRESS["started_at"] = time.time()
        PROGRESS["elapsed"] = 0.0
        run_id = PROGRESS["run_id"]
    _emit_log("Search started", run_id=run_id)


def set_status(v: Any) -> None:
    with PROGRESS_LOCK:
        PROGRESS["status"] = str(v)


def _set_count(key: str, n: Any) -> None:
    try:
        value = max(0, int(n))
    except (TypeError, ValueError):
        value = 0
    with PROGRESS_LOCK:
        PROGRESS[key] = value


def set_pieces_total(n: Any) -> None:
    _set_count("pieces_total", n)


def set_placed_count(n: Any) -> None:
    _set_count("placed_count", n)


def set_nodes(n: Any) -> None:
    _set_count("nodes", n)


def set_elapsed(seconds: Any) -> None:
    try:
        value = max(0.0, float(seconds))
    except (TypeError, ValueError):
        value = 0.0
    with PROGRESS_LOCK:
        PROGRESS["elapsed"] = value


def set_result_url(url: Any) -> None:
    with PROGRESS_LOCK:
        PROGRESS["result_url"] = "" if url is None else str(url)


def set_done(ok: Optional[bool] = None, *, reason: Any = None) -> None:
    """Close the current run.

    A given ``ok`` picks ``Solved`` or ``No solution``; without it the status
    already set (e.g. ``Error``) is kept.  ``reason`` becomes the message.
    """
    with PROGRESS_LOCK:
        PROGRESS["elapsed"] = _elapsed_locked()
        PROGRESS["done"] = True
        if ok is not None:
            PROGRESS["ok"] = bool(ok)
            PROGRESS["status"] = "Solved" if ok else "No solution"
        if reason is not None:
            PROGRESS["message"] = str(reason)
        fields = {
            "run_id": PROGRESS["run_id"],
            "status": PROGRESS["status"],
            "nodes": PROGRESS["nodes"],
            "placed": f"{PROGRESS['placed_count']}/{PROGRESS['pieces_total']}",
            "duration": fmt_elapsed(PROGRESS["elapsed"]),
            "message": PROGRESS["message"],
        }
    _emit_log("Run finished", **fields)


def snapshot() -> Dict[str, Any]:
    with PROGRESS_LOCK:
        snap = {k: v for k, v in PROGRESS.items() if k != "started_at"}
        snap["elapsed"] = _elapsed_locked()
    snap["elapsed_str"] = fmt_elapsed(snap["elapsed"])
    return snap


def as_json() -> Dict[str, Any]:
    # Alias used by /progress
    return snapshot()
