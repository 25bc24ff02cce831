import pytest

from grid import FilledCell, Grid, GridError, OutOfBounds
from models import Piece, Size


def test_new_grid_is_empty():
    g = Grid(7, 7)
    assert all(g.cell_at(x, y) == 0 for x in range(7) for y in range(7))
    assert g.render() == ("       \n" * 7)


def test_place_writes_color_into_footprint():
    g = Grid(7, 7)
    g.place(Piece.of(3, 2, 4), 1, 2)
    filled = {(x, y) for x in range(7) for y in range(7) if g.cell_at(x, y)}
    assert filled == {(1, 2), (2, 2), (3, 2), (1, 3), (2, 3), (3, 3)}
    assert g.cell_at(2, 3) == 4


def test_place_rejects_footprint_past_right_edge():
    g = Grid(7, 7)
    with pytest.raises(OutOfBounds) as exc:
        g.place(Piece.of(4, 1, 7), 5, 0)
    assert (exc.value.x, exc.value.y) == (5, 0)
    assert g == Grid(7, 7)


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (0, 5), (6, 6)])
def test_place_rejects_other_out_of_bounds_anchors(x, y):
    g = Grid(7, 7)
    with pytest.raises(OutOfBounds):
        g.place(Piece.of(2, 3, 1), x, y)


def test_place_reports_first_colliding_cell_in_row_major_order():
    g = Grid(7, 7)
    g.set_cell(4, 2, 9)
    g.set_cell(2, 3, 9)
    before = g.copy()
    with pytest.raises(FilledCell) as exc:
        g.place(Piece.of(3, 3, 1), 2, 1)
    assert (exc.value.x, exc.value.y) == (4, 2)
    assert g == before


def test_failed_placement_leaves_no_partial_writes():
    g = Grid(4, 1)
    g.set_cell(3, 0, 5)
    with pytest.raises(GridError):
        g.place(Piece.of(4, 1, 2), 0, 0)
    assert g.rows() == [[0, 0, 0, 5]]


def test_copy_is_independent():
    g = Grid(3, 3)
    clone = g.copy()
    clone.place(Piece.of(1, 1, 1), 0, 0)
    assert g.cell_at(0, 0) == 0
    assert clone.cell_at(0, 0) == 1


def test_cell_at_outside_grid_raises_index_error():
    g = Grid(3, 3)
    with pytest.raises(IndexError):
        g.cell_at(3, 0)
    with pytest.raises(IndexError):
        g.cell_at(0, -1)


def test_render_uses_letters_and_spaces():
    g = Grid(3, 2)
    g.place(Piece.of(2, 1, 1), 0, 0)
    g.set_cell(2, 1, 26)
    assert g.render() == "aa \n  z\n"


def test_placements_recovers_bounding_boxes():
    g = Grid(3, 2)
    g.place(Piece.of(2, 1, 1), 0, 0)
    g.place(Piece.of(1, 2, 2), 2, 0)
    g.set_cell(0, 1, 26)
    placed = g.placements(skip=(26,))
    assert [(p.to_tuple(), p.piece.color) for p in placed] == [
        ((0, 0, 2, 1), 1),
        ((2, 0, 1, 2), 2),
    ]
    assert placed[1].piece.size == Size(1, 2)


def test_grid_error_str_names_kind_and_cell():
    assert str(FilledCell(1, 2)) == "FilledCell(x=1, y=2)"
    assert str(OutOfBounds(5, 0)) == "OutOfBounds(x=5, y=0)"
