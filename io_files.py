"""Helpers for writing solver outputs to disk."""

from __future__ import annotations

import os
from typing import Optional

from config import CFG
from grid import Grid
from models import color_letter


def _resolve_output_path(base_dir: str, configured_name: str, fallback: str) -> str:
    """Return the absolute path where an output artifact should be written."""

    name = (configured_name or "").strip() or fallback
    if os.path.isabs(name):
        return name
    return os.path.join(base_dir, name)


def write_solution(grid: Optional[Grid], base_dir: str) -> str:
    """Write the solved grid and its placement list to the configured text file."""

    path = _resolve_output_path(base_dir, CFG.SOLUTION_OUT, "solution.txt")
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        if grid is None:
            f.write("No solution found.\n")
        else:
            f.write(grid.render())
            f.write("\n")
            for p in grid.placements(skip=(CFG.BLOCKED_COLOR,)):
                x, y, w, h = p.to_tuple()
                f.write(f"{color_letter(p.piece.color)} @ ({x},{y}) size ({w}×{h})\n")
    return path


def write_layout_view_html(svg: str, legend_html: str, base_dir: str) -> str:
    """Write the rendered SVG/legend preview to the configured HTML file."""

    path = _resolve_output_path(base_dir, CFG.LAYOUT_HTML, "layout_view.html")
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)

    with open(path, "w", encoding="utf-8") as vf:
        vf.write(
            f"""<!doctype html>
<html><head><meta charset='utf-8'><title>Layout View</title>
<style>.swatch{{display:inline-block;width:12px;height:12px;margin-right:6px}}</style></head>
<body>
<h1>Layout View</h1>
<section>{svg}</section>
<section><h3>Legend</h3><ul>{legend_html}</ul></section>
</body></html>"""
        )
    return path


__all__ = ["write_solution", "write_layout_view_html"]
