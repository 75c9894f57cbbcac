# hive/tiles.py

from __future__ import annotations

from enum import Enum, IntEnum


class BugType(IntEnum):
    QUEEN = 0
    ANT = 1
    GRASSHOPPER = 2
    SPIDER = 3
    BEETLE = 4
    MOSQUITO = 5
    LADYBUG = 6
    PILLBUG = 7


NUM_BUG_TYPES = len(BugType)
BUG_COUNTS: tuple[int, ...] = (1, 3, 3, 2, 2, 1, 1, 1)
EXPANSION_BUG_TYPES: tuple[BugType, ...] = (BugType.MOSQUITO, BugType.LADYBUG, BugType.PILLBUG)


class Colour(Enum):
    """Tile colour. Player 0 always plays white."""

    WHITE = "w"
    BLACK = "b"

    def opposite(self) -> Colour:
        return Colour.BLACK if self == Colour.WHITE else Colour.WHITE

    @property
    def player(self) -> int:
        return 0 if self == Colour.WHITE else 1

    @property
    def label(self) -> str:
        return "White" if self == Colour.WHITE else "Black"

    @staticmethod
    def from_player(player: int) -> Colour:
        if player not in (0, 1):
            raise ValueError(f"Player must be 0 or 1, got {player}")
        return Colour.WHITE if player == 0 else Colour.BLACK


class Tile(IntEnum):
    """Every physical tile in the game, named as in the Universal Hive Protocol.

    The value is a dense index (0..27) into the board's per-tile tables, so a
    Tile is only ever a lookup key, never an owner of state.
    """

    wQ = 0
    wA1 = 1
    wA2 = 2
    wA3 = 3
    wG1 = 4
    wG2 = 5
    wG3 = 6
    wS1 = 7
    wS2 = 8
    wB1 = 9
    wB2 = 10
    wM = 11
    wL = 12
    wP = 13
    bQ = 14
    bA1 = 15
    bA2 = 16
    bA3 = 17
    bG1 = 18
    bG2 = 19
    bG3 = 20
    bS1 = 21
    bS2 = 22
    bB1 = 23
    bB2 = 24
    bM = 25
    bL = 26
    bP = 27

    @property
    def colour(self) -> Colour:
        return Colour.WHITE if self < TILES_PER_COLOUR else Colour.BLACK

    @property
    def bug_type(self) -> BugType:
        return _TILE_BUG_TYPES[self]

    @property
    def ordinal(self) -> int:
        return _TILE_ORDINALS[self]

    @property
    def uhp(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name

    @staticmethod
    def from_parts(colour: Colour, bug_type: BugType, ordinal: int = 1) -> Tile:
        if not 1 <= ordinal <= BUG_COUNTS[bug_type]:
            raise ValueError(f"{bug_type.name} has no ordinal {ordinal}")
        base = 0 if colour == Colour.WHITE else TILES_PER_COLOUR
        return Tile(base + sum(BUG_COUNTS[:bug_type]) + ordinal - 1)

    @staticmethod
    def from_uhp(name: str) -> Tile:
        tile = UHP_TO_TILE.get(name)
        if tile is None:
            raise ValueError(f"Unknown tile: {name!r}")
        return tile


MAX_TILE_COUNT = len(Tile)
TILES_PER_COLOUR = MAX_TILE_COUNT // 2


def _build_tables() -> tuple[tuple[BugType, ...], tuple[int, ...]]:
    types: list[BugType] = []
    ordinals: list[int] = []
    for _ in Colour:
        for bug_type in BugType:
            for ordinal in range(1, BUG_COUNTS[bug_type] + 1):
                types.append(bug_type)
                ordinals.append(ordinal)
    return tuple(types), tuple(ordinals)


_TILE_BUG_TYPES, _TILE_ORDINALS = _build_tables()

UHP_TO_TILE: dict[str, Tile] = {t.name: t for t in Tile}

TILES_BY_COLOUR: dict[Colour, tuple[Tile, ...]] = {
    Colour.WHITE: tuple(Tile(i) for i in range(TILES_PER_COLOUR)),
    Colour.BLACK: tuple(Tile(i) for i in range(TILES_PER_COLOUR, MAX_TILE_COUNT)),
}


def tiles_for_colour(colour: Colour) -> tuple[Tile, ...]:
    return TILES_BY_COLOUR[colour]


def queen_of(colour: Colour) -> Tile:
    return Tile.wQ if colour == Colour.WHITE else Tile.bQ
