from hive.connectivity import articulation_points, is_connected, is_gated
from hive.hexgrid import Direction, HivePosition, ORIGIN
from hive.tiles import Tile
from scenarios.positions import (
    BRIDGE,
    GRASSHOPPER_RUN,
    PINNED_LINE,
    QUEEN_PAIR,
    add_to_board,
)


def test_pair_has_no_cut_vertex(layout_board):
    board = layout_board(QUEEN_PAIR)
    assert articulation_points(board) == set()
    assert not board.is_pinned(Tile.wQ)


def test_line_pins_inner_tiles(layout_board):
    board = layout_board(GRASSHOPPER_RUN)
    assert board.pinned_positions == {HivePosition(1, 0), HivePosition(2, 0)}
    assert not board.is_pinned(Tile.wG1)
    assert board.is_pinned(Tile.bQ)
    assert board.is_pinned(Tile.wQ)


def test_bridge_unpins(layout_board):
    board = layout_board(PINNED_LINE)
    assert board.is_pinned(Tile.bQ)
    assert board.pinned_positions == {HivePosition(1, 0)}

    add_to_board(board, [BRIDGE])
    assert not board.is_pinned(Tile.bQ)
    assert board.pinned_positions == frozenset()


def test_root_without_queens(layout_board):
    # no queen in play: the search starts from the first tile placed
    board = layout_board([("wA1", 0, 0), ("bA1", 1, 0), ("wG1", -1, 0)])
    assert board.pinned_positions == {ORIGIN}


def test_stacked_tiles_are_never_pinned(layout_board):
    board = layout_board(GRASSHOPPER_RUN + [("wB1", 1, 0)])
    assert board.is_pinned(HivePosition(1, 0))
    assert not board.is_pinned(Tile.wB1)


def test_is_connected_ignores_the_excluded_cell(layout_board):
    board = layout_board(QUEEN_PAIR)
    cell = HivePosition(1, -1)
    assert is_connected(board, cell, None)
    assert is_connected(board, cell, ORIGIN)
    # (-1, 0) only touches the queen at the origin
    assert is_connected(board, HivePosition(-1, 0), None)
    assert not is_connected(board, HivePosition(-1, 0), ORIGIN)


def test_ground_gate_needs_exactly_one_flank(layout_board):
    # no flanks: sliding east would leave the hive
    board = layout_board([("wQ", 0, 0), ("bQ", -1, 0)])
    assert is_gated(board, ORIGIN, Direction.E)

    # one flank
    board = layout_board([("wQ", 0, 0), ("bQ", 1, -1)])
    assert not is_gated(board, ORIGIN, Direction.E)

    # both flanks close the gap
    board = layout_board([("wQ", 0, 0), ("bQ", 1, -1), ("wA1", 0, 1)])
    assert is_gated(board, ORIGIN, Direction.E)
    # unless one of them is the cell being vacated
    assert not is_gated(board, ORIGIN, Direction.E, HivePosition(0, 1))


def test_above_ground_gate_needs_both_flanks(layout_board):
    above = HivePosition(0, 0, 1)

    board = layout_board([("wQ", 0, 0), ("bQ", -1, 0)])
    assert not is_gated(board, above, Direction.E)

    # ground level flanks do not reach up to a beetle
    board = layout_board([("wQ", 0, 0), ("bQ", 1, -1), ("wA1", 0, 1)])
    assert not is_gated(board, above, Direction.E)

    add_to_board(board, [("bB1", 1, -1)])
    assert not is_gated(board, above, Direction.E)

    add_to_board(board, [("wB1", 0, 1)])
    assert is_gated(board, above, Direction.E)
