# app.py — web front end for the bookshelf solver
from __future__ import annotations
import os
import time
from typing import Any, Dict, Tuple

from flask import Flask, request, render_template, send_from_directory, jsonify, url_for

from solver.orchestrator import solve_orchestrator
from puzzle import initial_puzzle_state
from config import CFG
from io_files import write_solution, write_layout_view_html
from render import render_result

from progress import (
    reset as progress_reset,
    as_json as progress_json,
    fmt_elapsed, set_status, set_elapsed, set_done, set_result_url,
)

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
OUTPUT_DIR = BASE_DIR


def _resolve_output_paths(configured: str, fallback: str) -> Tuple[str, str]:
    name = (configured or "").strip() or fallback
    if os.path.isabs(name):
        full_path = name
    else:
        full_path = os.path.abspath(os.path.join(OUTPUT_DIR, name))
    directory = os.path.dirname(full_path) or OUTPUT_DIR
    filename = os.path.basename(full_path) or fallback
    return directory, filename


LAST_RESULT: Dict[str, Any] = {
    "ok": False,
    "reason": "Not solved yet.",
    "W": 0,
    "H": 0,
    "placed_count": 0,
    "pieces_total": 0,
    "nodes": 0,
    "elapsed_str": "0s",
    "grid_text": "",
    "svg": "",
    "legend": "",
    "solution_filename": "",
    "layout_filename": "",
}

app = Flask(__name__, template_folder="templates")


@app.after_request
def _no_cache_progress(resp):
    if request.path == "/progress":
        resp.headers["Cache-Control"] = "no-store, max-age=0"
        resp.headers["Pragma"] = "no-cache"
        resp.headers["Expires"] = "0"
    return resp


@app.route("/")
def index():
    node = initial_puzzle_state()
    return render_template(
        "index.html",
        grid_text=node.grid.render(),
        pool_text=node.pool.description,
        pieces_total=node.pool.piece_count(),
    )


@app.route("/result/latest")
def result_latest():
    return render_template("result.html", **LAST_RESULT)


def _finalize_solver_progress(ok_flag: bool, reason_text: str) -> None:
    set_status("Solved" if ok_flag else "No solution")
    set_done(ok_flag, reason=reason_text)


@app.route("/solve", methods=["POST"])
def solve():
    progress_reset()
    t0 = time.time()

    node = initial_puzzle_state()
    try:
        ok, grid, reason, meta = solve_orchestrator(node)
    except Exception as e:
        app.logger.exception("Solver failed")
        reason = f"solver exception: {type(e).__name__}: {e}"
        set_status("Error"); set_done(reason=reason)
        LAST_RESULT.update({
            "ok": False,
            "reason": reason,
            "W": node.grid.w, "H": node.grid.h,
            "placed_count": 0,
            "pieces_total": node.pool.piece_count(),
            "nodes": 0,
            "elapsed_str": fmt_elapsed(time.time() - t0),
            "grid_text": "",
            "svg": "",
            "legend": "",
            "solution_filename": "",
            "layout_filename": "",
        })
        set_result_url(url_for("result_latest"))
        return render_template("result.html", **LAST_RESULT), 500

    _finalize_solver_progress(ok, reason)
    set_elapsed(time.time() - t0)

    _, solution_name = _resolve_output_paths(CFG.SOLUTION_OUT, "solution.txt")
    _, layout_name = _resolve_output_paths(CFG.LAYOUT_HTML, "layout_view.html")
    write_solution(grid, OUTPUT_DIR)

    svg_markup = legend_html = ""
    if grid is not None:
        svg_markup, legend_html = render_result(grid)
        write_layout_view_html(svg_markup, legend_html, OUTPUT_DIR)
    else:
        layout_name = ""

    LAST_RESULT.update({
        "ok": ok,
        "reason": reason,
        "W": node.grid.w,
        "H": node.grid.h,
        "placed_count": meta["pieces_total"] if ok else 0,
        "pieces_total": meta["pieces_total"],
        "nodes": meta["stats"]["nodes"],
        "elapsed_str": fmt_elapsed(time.time() - t0),
        "grid_text": grid.render() if grid is not None else "",
        "svg": svg_markup,
        "legend": legend_html,
        "solution_filename": solution_name,
        "layout_filename": layout_name,
    })
    set_result_url(url_for("result_latest"))
    return render_template("result.html", **LAST_RESULT)


@app.route("/download/solution")
def download_solution():
    directory, filename = _resolve_output_paths(CFG.SOLUTION_OUT, "solution.txt")
    return send_from_directory(directory, filename, as_attachment=True)


@app.route("/download/html")
def download_html():
    directory, filename = _resolve_output_paths(CFG.LAYOUT_HTML, "layout_view.html")
    return send_from_directory(directory, filename, as_attachment=True)


@app.route("/progress")
def progress():
    return jsonify(progress_json())


if __name__ == "__main__":
    app.run(debug=False)
