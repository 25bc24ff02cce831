# grid.py
from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from models import EMPTY, Color, Piece, Placed, Size, color_letter


class GridError(Exception):
    """Placement rejected by the grid."""

    def __init__(self, x: int, y: int):
        super().__init__(x, y)
        self.x = x
        self.y = y

    def __str__(self) -> str:
        return f"{type(self).__name__}(x={self.x}, y={self.y})"


class OutOfBounds(GridError):
    """The footprint leaves the grid; (x, y) is the anchor."""


class FilledCell(GridError):
    """The footprint overlaps an occupied cell; (x, y) is the first one found."""


class Grid:
    """A ``w × h`` array of colors stored row-major in a bytearray."""

    def __init__(self, w: int = 7, h: int = 7):
        if w <= 0 or h <= 0:
            raise ValueError(f"grid dimensions must be positive, got {w}x{h}")
        self.w = w
        self.h = h
        self.d = bytearray(w * h)

    def copy(self) -> "Grid":
        clone = Grid.__new__(Grid)
        clone.w = self.w
        clone.h = self.h
        clone.d = bytearray(self.d)
        return clone

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.w and 0 <= y < self.h):
            raise IndexError(f"cell ({x}, {y}) outside {self.w}x{self.h} grid")
        return x + self.w * y

    def cell_at(self, x: int, y: int) -> Color:
        return self.d[self._index(x, y)]

    def set_cell(self, x: int, y: int, color: Color) -> None:
        self.d[self._index(x, y)] = color

    def fill_cells(self, cells: Iterable[Tuple[int, int]], color: Color) -> None:
        for x, y in cells:
            self.set_cell(x, y, color)

    def place(self, piece: Piece, x: int, y: int) -> None:
        """Write ``piece`` with its top-left corner at (x, y).

        Raises ``OutOfBounds`` or ``FilledCell``; nothing is written unless the
        whole footprint is empty.
        """
        pw = piece.size.w
        ph = piece.size.h
        if x < 0 or y < 0 or x + pw > self.w or y + ph > self.h:
            raise OutOfBounds(x, y)
        d = self.d
        w = self.w
        for yy in range(y, y + ph):
            start = x + w * yy
            row = d[start:start + pw]
            if row.count(EMPTY) != pw:
                for xx in range(pw):
                    if row[xx] != EMPTY:
                        raise FilledCell(x + xx, yy)
        run = bytes((piece.color,)) * pw
        for yy in range(y, y + ph):
            start = x + w * yy
            d[start:start + pw] = run

    def count(self, color: Color) -> int:
        return self.d.count(color)

    def is_full(self) -> bool:
        return EMPTY not in self.d

    def rows(self) -> List[List[Color]]:
        return [list(self.d[y * self.w:(y + 1) * self.w]) for y in range(self.h)]

    def placements(self, skip: Iterable[Color] = ()) -> List[Placed]:
        """Recover one ``Placed`` per color from the cells' bounding boxes."""
        skipped = set(skip)
        boxes: Dict[Color, List[int]] = {}
        for y in range(self.h):
            for x in range(self.w):
                c = self.d[x + self.w * y]
                if c == EMPTY or c in skipped:
                    continue
                box = boxes.get(c)
                if box is None:
                    boxes[c] = [x, y, x, y]
                else:
                    box[0] = min(box[0], x)
                    box[1] = min(box[1], y)
                    box[2] = max(box[2], x)
                    box[3] = max(box[3], y)
        return [
            Placed(x0, y0, Piece(Size(x1 - x0 + 1, y1 - y0 + 1), color))
            for color, (x0, y0, x1, y1) in sorted(boxes.items())
        ]

    def render(self) -> str:
        lines = []
        for y in range(self.h):
            lines.append("".join(color_letter(c) for c in self.d[y * self.w:(y + 1) * self.w]))
        return "".join(line + "\n" for line in lines)

    @property
    def description(self) -> str:
        return self.render()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.w == other.w and self.h == other.h and self.d == other.d

    def __repr__(self) -> str:
        return f"Grid({self.w}x{self.h})"


__all__ = ["Grid", "GridError", "OutOfBounds", "FilledCell"]
