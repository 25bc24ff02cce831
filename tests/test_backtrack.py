from collections import Counter

import pytest

from grid import Grid
from models import Piece
from pool import Pool
from puzzle import PuzzleNode, initial_puzzle_state
from solver.backtrack import SearchStats, depth_first_search

# First solution of the bookshelf puzzle for sizes ascending, anchors x-outer/y-inner.
BOOKSHELF_SOLUTION = (
    "hijgggg\n"
    "hijeeek\n"
    "hijfffk\n"
    "ccclaak\n"
    "dddlbbk\n"
    "zzzlzzz\n"
    "zzzlzzz\n"
)


def _node(w, h, inventory, blocked=()):
    g = Grid(w, h)
    g.fill_cells(blocked, 26)
    return PuzzleNode(g, Pool.from_mapping(inventory))


def _assert_valid_tiling(start: PuzzleNode, solution: Grid):
    """Every piece appears once as a solid rectangle of its own size."""
    expected = {p.color: p.size for p in start.pool.pieces_list()}
    seen = Counter(c for c in solution.d)
    for color, size in expected.items():
        assert seen[color] == size.area
    for placed in solution.placements(skip=(26,)):
        if placed.piece.color not in expected:
            continue
        assert placed.piece.size == expected[placed.piece.color]
    # Cells that were occupied before the search keep their color.
    for i, c in enumerate(start.grid.d):
        if c:
            assert solution.d[i] == c


def test_empty_pool_returns_grid_unchanged():
    node = _node(3, 3, {})
    node.grid.set_cell(1, 1, 5)
    result = depth_first_search(node)
    assert result is node.grid
    assert result.rows() == [[0, 0, 0], [0, 5, 0], [0, 0, 0]]


def test_pool_exhaustion_is_success_even_with_uncovered_cells():
    node = _node(2, 2, {"1x1": [1]})
    result = depth_first_search(node)
    assert result is not None
    assert result.render() == "a \n  \n"
    assert not result.is_full()


def test_small_puzzle_is_solved_in_documented_order():
    node = _node(3, 2, {"2x1": [1], "1x2": [2], "1x1": [3, 4]})
    stats = SearchStats()
    result = depth_first_search(node, stats)
    assert result is not None
    assert result.render() == "cdb\naab\n"
    assert result.is_full()
    assert stats.nodes == 10
    assert stats.max_depth == 4
    _assert_valid_tiling(node, result)


def test_search_does_not_mutate_the_starting_node():
    node = _node(3, 2, {"2x1": [1], "1x2": [2], "1x1": [3, 4]})
    grid_before = node.grid.copy()
    pool_before = node.pool.copy()
    depth_first_search(node)
    assert node.grid == grid_before
    assert node.pool == pool_before


def test_piece_larger_than_grid_yields_no_solution():
    node = _node(2, 2, {"3x1": [1]})
    stats = SearchStats()
    assert depth_first_search(node, stats) is None
    assert stats.placements == 0
    assert stats.nodes == 1


def test_exhausted_search_returns_none():
    # Three dominoes can never fit in four cells.
    node = _node(2, 2, {"2x1": [1, 2, 3]})
    stats = SearchStats()
    assert depth_first_search(node, stats) is None
    assert stats.filled_cell > 0
    assert stats.out_of_bounds == 0


def test_two_pieces_never_share_one_cell():
    node = _node(1, 1, {"1x1": [1, 2]})
    assert depth_first_search(node) is None


def test_blocked_cells_are_respected():
    node = _node(3, 3, {"1x3": [1, 2], "1x2": [3]}, blocked=[(1, 2)])
    result = depth_first_search(node)
    assert result is not None
    assert result.cell_at(1, 2) == 26
    _assert_valid_tiling(node, result)


def test_search_is_deterministic():
    inventory = {"2x1": [1, 2], "1x2": [3], "1x1": [4, 5]}
    first = depth_first_search(_node(4, 2, inventory))
    second = depth_first_search(_node(4, 2, inventory))
    assert first is not None
    assert first == second


def test_stats_are_optional_and_do_not_change_result():
    inventory = {"2x1": [1, 2], "1x2": [3], "1x1": [4, 5]}
    assert depth_first_search(_node(4, 2, inventory)) == depth_first_search(
        _node(4, 2, inventory), SearchStats()
    )


@pytest.fixture(scope="module")
def bookshelf():
    start = initial_puzzle_state()
    stats = SearchStats()
    result = depth_first_search(start, stats)
    return start, result, stats


def test_bookshelf_puzzle_solution(bookshelf):
    start, result, stats = bookshelf
    assert result is not None
    assert result.render() == BOOKSHELF_SOLUTION
    assert result.is_full()
    assert stats.nodes == 192700
    assert stats.max_depth == start.pool.piece_count()


def test_bookshelf_solution_places_every_piece_once(bookshelf):
    start, result, _ = bookshelf
    _assert_valid_tiling(start, result)
    used = {p.piece.color for p in result.placements(skip=(26, 12))}
    assert used == {p.color for p in start.pool.pieces_list()}
    assert Piece.of(1, 4, 12) in [p.piece for p in result.placements()]
