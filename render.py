import random
from typing import Dict, Tuple

from config import CFG
from grid import Grid
from models import EMPTY, color_letter

BLOCKED_FILL = "rgb(120,120,120)"

def _color(letter: str) -> str:
    rng = random.Random(f"piece-{letter}")
    r = rng.randint(40, 200)
    g = rng.randint(40, 200)
    b = rng.randint(40, 200)
    return f"rgb({r},{g},{b})"

def render_result(grid: Grid) -> Tuple[str, str]:
    palette: Dict[str, str] = {}
    blocked = CFG.BLOCKED_COLOR
    for c in sorted(set(grid.d)):
        if c == EMPTY or c == blocked:
            continue
        letter = color_letter(c)
        palette.setdefault(letter, _color(letter))

    scale = CFG.CELL_PX
    svg_w = grid.w * scale + 2
    svg_h = grid.h * scale + 2

    rects = []
    for y, row in enumerate(grid.rows()):
        for x, c in enumerate(row):
            if c == EMPTY:
                continue
            px = x * scale + 1
            py = y * scale + 1
            if c == blocked:
                rects.append(
                    f'<rect x="{px}" y="{py}" width="{scale}" height="{scale}" fill="{BLOCKED_FILL}"/>'
                )
                continue
            letter = color_letter(c)
            rects.append(
                f'<rect x="{px}" y="{py}" width="{scale}" height="{scale}" fill="{palette[letter]}" stroke="black" stroke-width="1"/>'
                f'<text x="{px + scale // 2 - 4}" y="{py + scale // 2 + 5}" font-size="14" fill="black">{letter}</text>'
            )
    frame = f'<rect x="1" y="1" width="{svg_w-2}" height="{svg_h-2}" fill="none" stroke="black" stroke-width="2"/>'
    svg = (
        f'<svg class="layout-svg" xmlns="http://www.w3.org/2000/svg" '
        f'width="{svg_w}" height="{svg_h}" '
        f'viewBox="0 0 {svg_w} {svg_h}" preserveAspectRatio="xMinYMin meet">'
        f'{"".join(rects)}{frame}</svg>'
    )

    legend = "".join(f"<li><span class='swatch' style='background:{c}'></span>{n}</li>" for n, c in palette.items())
    return svg, legend
