import pytest

from hive.hexgrid import Direction, HivePosition, NEIGHBOUR_OFFSETS, ORIGIN
from hive.tiles import BugType, Colour, Tile, queen_of, tiles_for_colour


def test_direction_opposites_and_rotation():
    assert Direction.NE.opposite() == Direction.SW
    assert Direction.W.opposite() == Direction.E
    assert Direction.NW.clockwise() == Direction.NE
    assert Direction.NE.counter_clockwise() == Direction.NW
    assert Direction.E.clockwise(2) == Direction.SW


def test_above_has_no_rotation():
    with pytest.raises(ValueError):
        Direction.ABOVE.opposite()
    with pytest.raises(ValueError):
        Direction.ABOVE.clockwise()


def test_offsets_are_symmetric():
    for d in Direction:
        if d == Direction.ABOVE:
            continue
        assert NEIGHBOUR_OFFSETS[d] + NEIGHBOUR_OFFSETS[d.opposite()] == ORIGIN


def test_distance_ignores_height():
    assert ORIGIN.distance_to(HivePosition(2, -1)) == 2
    assert HivePosition(-3, 3).distance_to(ORIGIN) == 3
    assert HivePosition(1, 1, 2).distance_to(ORIGIN) == 2


def test_neighbours_keep_height():
    pos = HivePosition(2, -1, 1)
    assert pos.neighbour_at(Direction.E) == HivePosition(3, -1, 1)
    assert all(n.h == 1 for n in pos.neighbours())
    assert pos.grounded() == HivePosition(2, -1, 0)


def test_tile_identity():
    t = Tile.from_uhp("wA2")
    assert t == Tile.wA2
    assert t.colour == Colour.WHITE
    assert t.bug_type == BugType.ANT
    assert t.ordinal == 2
    assert Tile.bP.colour == Colour.BLACK
    assert Tile.bP.bug_type == BugType.PILLBUG


def test_tile_from_parts():
    assert Tile.from_parts(Colour.BLACK, BugType.SPIDER, 2) == Tile.bS2
    assert Tile.from_parts(Colour.WHITE, BugType.QUEEN) == Tile.wQ
    with pytest.raises(ValueError):
        Tile.from_parts(Colour.WHITE, BugType.QUEEN, 2)


def test_unknown_uhp_names_rejected():
    for name in ("wQ1", "bA4", "xA1", ""):
        with pytest.raises(ValueError):
            Tile.from_uhp(name)


def test_catalog_per_colour():
    white = tiles_for_colour(Colour.WHITE)
    assert len(white) == 14
    assert all(t.colour == Colour.WHITE for t in white)
    assert queen_of(Colour.BLACK) == Tile.bQ
    assert Colour.BLACK.opposite() == Colour.WHITE
