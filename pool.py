# pool.py
from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from models import Color, Piece, Size, check_color, color_letter

_NUM = r"\d+"
_SIZE_RE = re.compile(
    rf"^\s*(?P<w>{_NUM})\s*[x×]\s*(?P<h>{_NUM})\s*$",
    re.IGNORECASE,
)

SizeKey = Union[Size, Tuple[int, int], str]


def parse_size(key: SizeKey) -> Size:
    """Accept ``Size``, ``(w, h)`` or ``"WxH"`` and return a ``Size``."""
    if isinstance(key, Size):
        return key
    if isinstance(key, tuple) and len(key) == 2:
        return Size(int(key[0]), int(key[1]))
    m = _SIZE_RE.match(str(key))
    if not m:
        raise ValueError(f"unrecognised piece size: {key!r}")
    return Size(int(m.group("w")), int(m.group("h")))


class Pool:
    """Pieces still waiting to be placed, keyed by size.

    Every key maps to a non-empty list of colors; ``take_one`` always hands out
    the earliest remaining color so piece identity is stable across a search.
    """

    def __init__(self, pieces: Optional[Mapping[SizeKey, Iterable[Color]]] = None):
        self.pieces: Dict[Size, List[Color]] = {}
        for key, colors in (pieces or {}).items():
            size = parse_size(key)
            seq = [check_color(int(c)) for c in colors]
            if not seq:
                raise ValueError(f"no colors given for size {size.description}")
            self.pieces[size] = seq

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Iterable[Color]]) -> "Pool":
        merged: Dict[Size, List[Color]] = {}
        for raw_key, colors in mapping.items():
            size = parse_size(raw_key)
            merged.setdefault(size, []).extend(int(c) for c in colors)
        return cls(merged)

    def copy(self) -> "Pool":
        clone = Pool()
        clone.pieces = {size: list(colors) for size, colors in self.pieces.items()}
        return clone

    @property
    def is_empty(self) -> bool:
        return not self.pieces

    def sizes_available(self) -> List[Size]:
        return sorted(self.pieces)

    def take_one(self, size: Size) -> Piece:
        colors = self.pieces[size]
        color = colors.pop(0)
        if not colors:
            del self.pieces[size]
        return Piece(size, color)

    def piece_count(self) -> int:
        return sum(len(colors) for colors in self.pieces.values())

    def total_area(self) -> int:
        return sum(size.area * len(colors) for size, colors in self.pieces.items())

    def pieces_list(self) -> List[Piece]:
        return [
            Piece(size, color)
            for size in self.sizes_available()
            for color in self.pieces[size]
        ]

    @property
    def description(self) -> str:
        return ", ".join(
            f"{size.description}: [" + ", ".join(color_letter(c) for c in self.pieces[size]) + "]"
            for size in self.sizes_available()
        )

    def __len__(self) -> int:
        return self.piece_count()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pool):
            return NotImplemented
        return self.pieces == other.pieces

    def __repr__(self) -> str:
        return f"Pool({self.description})"


__all__ = ["Pool", "parse_size"]
