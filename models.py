from dataclasses import dataclass

# 0 is an empty cell; 1..26 label pieces and render as 'a'..'z'.
Color = int
EMPTY: Color = 0
MAX_COLOR: Color = 255


def check_color(color: Color) -> Color:
    """Return ``color`` if it can label a piece, else raise ``ValueError``."""
    if not EMPTY < color <= MAX_COLOR:
        raise ValueError(f"piece color must be in 1..{MAX_COLOR}, got {color}")
    return color


def color_char(color: Color) -> str:
    return chr(96 + color)


def color_letter(color: Color) -> str:
    """Printable label for a color; empty cells render as a space."""
    if color <= EMPTY:
        return " "
    return color_char(color)


@dataclass(frozen=True, order=True)
class Size:
    w: int
    h: int

    def __post_init__(self):
        if self.w <= 0 or self.h <= 0:
            raise ValueError(f"piece size must be positive, got {self.w}x{self.h}")

    @property
    def area(self) -> int:
        return self.w * self.h

    @property
    def description(self) -> str:
        return f"{self.w}x{self.h}"


@dataclass(frozen=True)
class Piece:
    size: Size
    color: Color

    def __post_init__(self):
        check_color(self.color)

    @classmethod
    def of(cls, w: int, h: int, color: Color) -> "Piece":
        return cls(Size(w, h), color)

    @property
    def description(self) -> str:
        return f"{self.size.description}'{color_letter(self.color)}'"


@dataclass
class Placed:
    x: int
    y: int
    piece: Piece

    def to_tuple(self):
        return (self.x, self.y, self.piece.size.w, self.piece.size.h)
