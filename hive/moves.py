from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from hive.hexgrid import Direction
from hive.tiles import Tile


@dataclass(frozen=True, slots=True)
class Move:
    """A single turn, relative to a reference tile.

    The destination is never stored: it is the reference tile's position
    plus the direction offset. No reference means the opening placement at
    the origin; Direction.ABOVE means stacking on top of the reference.
    A move with no tile is a pass.
    """

    tile: Optional[Tile]
    reference: Optional[Tile] = None
    direction: Direction = Direction.ABOVE

    @property
    def is_pass(self) -> bool:
        return self.tile is None

    @property
    def is_opening(self) -> bool:
        return self.tile is not None and self.reference is None

    def __str__(self) -> str:
        # local import: notation depends on this module
        from hive.notation import move_to_string

        return move_to_string(self)


PASS_MOVE = Move(tile=None, reference=None, direction=Direction.ABOVE)
