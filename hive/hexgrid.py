# hive/hexgrid.py

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Direction(IntEnum):
    """Neighbour directions (0..5) plus ABOVE for stacking.

    Cardinal directions start at the top-right neighbour and rotate
    clockwise. The numeric value doubles as the protocol direction code
    and as the index into NEIGHBOUR_OFFSETS.
    """

    NE = 0
    E = 1
    SE = 2
    SW = 3
    W = 4
    NW = 5
    ABOVE = 6

    @property
    def is_cardinal(self) -> bool:
        return self != Direction.ABOVE

    def _require_cardinal(self) -> None:
        if not self.is_cardinal:
            raise ValueError("ABOVE has no rotation")

    def opposite(self) -> Direction:
        self._require_cardinal()
        return Direction((int(self) + 3) % 6)

    def clockwise(self, steps: int = 1) -> Direction:
        """Rotate clockwise by `steps`."""
        self._require_cardinal()
        return Direction((int(self) + (steps % 6)) % 6)

    def counter_clockwise(self, steps: int = 1) -> Direction:
        """Rotate counter-clockwise by `steps`."""
        self._require_cardinal()
        return Direction((int(self) - (steps % 6)) % 6)


CARDINAL_DIRECTIONS: tuple[Direction, ...] = tuple(d for d in Direction if d.is_cardinal)
NUM_ALL_DIRECTIONS = 7


@dataclass(frozen=True, slots=True)
class HivePosition:
    """Axial hex coordinate (q, r) plus a height above the hive.

    h == 0 is the ground; h > 0 sits on top of other tiles.
    See https://www.redblobgames.com/grids/hexagons/#coordinates-axial
    """

    q: int
    r: int
    h: int = 0

    def __add__(self, other: HivePosition) -> HivePosition:
        return HivePosition(self.q + other.q, self.r + other.r, self.h + other.h)

    def __sub__(self, other: HivePosition) -> HivePosition:
        return HivePosition(self.q - other.q, self.r - other.r, self.h - other.h)

    def __repr__(self) -> str:
        return f"({self.q}, {self.r}, {self.h})"

    def distance_to(self, other: HivePosition) -> int:
        # height is ignored: a stacked tile is as far out as its column
        dq = self.q - other.q
        dr = self.r - other.r
        return (abs(dq) + abs(dq + dr) + abs(dr)) // 2

    def neighbour_at(self, direction: Direction) -> HivePosition:
        return self + NEIGHBOUR_OFFSETS[direction]

    def neighbours(self) -> list[HivePosition]:
        """The six cardinal neighbours, at this position's height, in Direction order."""
        return [self + NEIGHBOUR_OFFSETS[d] for d in CARDINAL_DIRECTIONS]

    def grounded(self) -> HivePosition:
        return HivePosition(self.q, self.r, 0)

    def with_height(self, h: int) -> HivePosition:
        return HivePosition(self.q, self.r, h)


NEIGHBOUR_OFFSETS: tuple[HivePosition, ...] = (
    HivePosition(1, -1),    # NE
    HivePosition(1, 0),     # E
    HivePosition(0, 1),     # SE
    HivePosition(-1, 1),    # SW
    HivePosition(-1, 0),    # W
    HivePosition(0, -1),    # NW
    HivePosition(0, 0, 1),  # ABOVE
)

ORIGIN = HivePosition(0, 0, 0)
NULL_POSITION = HivePosition(0, 0, -1)

