# hive/board.py

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Set, Tuple, Union

from hive.config import DEFAULT_BOARD_RADIUS, MAX_BOARD_RADIUS
from hive.connectivity import articulation_points
from hive.hexgrid import (
    Direction,
    HivePosition,
    NEIGHBOUR_OFFSETS,
    NULL_POSITION,
    ORIGIN,
)
from hive.moves import Move
from hive.tiles import Colour, MAX_TILE_COUNT, Tile, queen_of

logger = logging.getLogger(__name__)

# at most six tiles can sit under the highest beetle/mosquito stack
COVERED_SLOTS = 7

_ABOVE = NEIGHBOUR_OFFSETS[Direction.ABOVE]


class HiveBoard:
    """Board store for one game.

    The position table (tile -> coordinate) is the source of truth. The grid
    only caches the top tile of each column, and tiles buried under a stack
    live in a small covered list until they are uncovered again.
    """

    def __init__(self, board_radius: int = DEFAULT_BOARD_RADIUS):
        if board_radius < 1:
            raise ValueError(f"board_radius must be >= 1, got {board_radius}")
        self.radius = min(board_radius, MAX_BOARD_RADIUS)
        self.side = 2 * self.radius + 1

        self._grid: List[Optional[Tile]] = [None] * (self.side * self.side)
        self._positions: List[HivePosition] = [NULL_POSITION] * MAX_TILE_COUNT
        self._covered: List[Optional[Tile]] = [None] * COVERED_SLOTS
        self._influence: Dict[Colour, Set[HivePosition]] = {Colour.WHITE: set(), Colour.BLACK: set()}
        self._pinned: Set[HivePosition] = set()
        self._played: List[Tile] = []

        self._last_moved: Optional[Tile] = None
        self._last_moved_from: HivePosition = NULL_POSITION
        self.largest_radius = 0

    # ---------------------------------------------------------------------
    # Queries
    # ---------------------------------------------------------------------

    def _index(self, pos: HivePosition) -> int:
        return (pos.q + self.radius) + (pos.r + self.radius) * self.side

    def in_bounds(self, pos: HivePosition) -> bool:
        return pos.distance_to(ORIGIN) <= self.radius

    def get_top_tile_at(self, pos: HivePosition) -> Optional[Tile]:
        if not self.in_bounds(pos):
            return None
        return self._grid[self._index(pos)]

    def is_occupied(self, pos: HivePosition) -> bool:
        return self.get_top_tile_at(pos) is not None

    def position_of(self, tile: Tile) -> HivePosition:
        return self._positions[tile]

    def is_in_play(self, tile: Tile) -> bool:
        return self._positions[tile] != NULL_POSITION

    @property
    def played_tiles(self) -> Tuple[Tile, ...]:
        """Tiles in play, in the order they were placed."""
        return tuple(self._played)

    @property
    def last_moved_tile(self) -> Optional[Tile]:
        return self._last_moved

    @property
    def last_moved_from(self) -> HivePosition:
        return self._last_moved_from

    @property
    def covered_tiles(self) -> Tuple[Tile, ...]:
        return tuple(t for t in self._covered if t is not None)

    @property
    def pinned_positions(self) -> frozenset[HivePosition]:
        return frozenset(self._pinned)

    def neighbours_of(self, pos: HivePosition) -> List[Tile]:
        """Top tiles of the occupied columns around pos, in Direction order."""
        out = []
        for n in pos.grounded().neighbours():
            top = self.get_top_tile_at(n)
            if top is not None:
                out.append(top)
        return out

    def tile_below(self, pos: HivePosition) -> Optional[Tile]:
        if pos.h <= 0:
            return None
        below = pos - _ABOVE
        top = self.get_top_tile_at(below)
        if top is not None and self._positions[top] == below:
            return top
        for tile in self._covered:
            if tile is not None and self._positions[tile] == below:
                return tile
        return None

    def stack_at(self, pos: HivePosition) -> List[Tile]:
        """Every tile in the column at pos, bottom first."""
        top = self.get_top_tile_at(pos)
        if top is None:
            return []
        buried = [
            t for t in self._covered
            if t is not None and self._positions[t].q == pos.q and self._positions[t].r == pos.r
        ]
        buried.sort(key=lambda t: self._positions[t].h)
        return buried + [top]

    def is_pinned(self, item: Union[Tile, HivePosition]) -> bool:
        pos = self._positions[item] if isinstance(item, Tile) else item
        return pos in self._pinned

    def is_covered(self, item: Union[Tile, HivePosition]) -> bool:
        if isinstance(item, Tile):
            return item in self._covered
        return any(t is not None and self._positions[t] == item for t in self._covered)

    def is_queen_surrounded(self, colour: Colour) -> bool:
        pos = self._positions[queen_of(colour)]
        if pos == NULL_POSITION:
            return False
        return all(self.is_occupied(n) for n in pos.grounded().neighbours())

    def influence(self, colour: Colour) -> frozenset[HivePosition]:
        return frozenset(self._influence[colour])

    def is_placeable(self, colour: Colour, pos: HivePosition) -> bool:
        return (
            pos in self._influence[colour]
            and pos not in self._influence[colour.opposite()]
            and not self.is_occupied(pos)
        )

    # ---------------------------------------------------------------------
    # Mutation
    # ---------------------------------------------------------------------

    def destination_of(self, move: Move) -> HivePosition:
        """Where `move` would land on the current board."""
        if move.is_pass:
            raise ValueError("A pass has no destination")
        if move.reference is None:
            return ORIGIN

        ref_pos = self._positions[move.reference]
        if ref_pos == NULL_POSITION:
            raise ValueError(f"Reference tile {move.reference} is not in play")

        new_pos = ref_pos + NEIGHBOUR_OFFSETS[move.direction]
        if new_pos.h > 0:
            # fall onto whatever is at the top of the column, or to the ground
            top = self.get_top_tile_at(new_pos)
            new_pos = new_pos.with_height(self._positions[top].h + 1 if top is not None else 0)
        return new_pos

    def move_tile(self, move: Move) -> bool:
        """
        Apply a placement or movement. Returns False, leaving the board
        untouched, when the destination lies outside the board radius.
        """
        tile = move.tile
        new_pos = self.destination_of(move)

        distance = new_pos.distance_to(ORIGIN)
        self.largest_radius = max(self.largest_radius, distance)
        if distance > self.radius:
            logger.warning(
                "Move %s lands %d cells from the origin, board radius is %d",
                move, distance, self.radius,
            )
            return False

        old_pos = self._positions[tile]
        if old_pos == NULL_POSITION:
            self._played.append(tile)
        if new_pos != old_pos:
            self._last_moved_from = old_pos

        # bury the current top of the destination column
        top = self.get_top_tile_at(new_pos)
        if top is not None:
            slot = self._covered.index(None)
            self._covered[slot] = top

        self._grid[self._index(new_pos)] = tile
        self._positions[tile] = new_pos
        self._last_moved = tile

        if old_pos.h > 0:
            # uncover the highest tile left in the vacated column
            for i in range(len(self._covered) - 1, -1, -1):
                below = self._covered[i]
                if below is None:
                    continue
                below_pos = self._positions[below]
                if below_pos.q == old_pos.q and below_pos.r == old_pos.r:
                    self._grid[self._index(old_pos)] = below
                    del self._covered[i]
                    self._covered.append(None)
                    break
        elif old_pos != NULL_POSITION:
            self._grid[self._index(old_pos)] = None

        colour = tile.colour
        self._update_influence(colour)
        if old_pos.h > 0 or new_pos.h > 0:
            self._update_influence(colour.opposite())

        self._pinned = articulation_points(self)
        return True

    def pass_turn(self) -> None:
        self._last_moved = None
        self._last_moved_from = NULL_POSITION

    def _update_influence(self, colour: Colour) -> None:
        cells: Set[HivePosition] = set()
        for tile in self._played:
            if tile.colour != colour or tile in self._covered:
                continue
            for n in self._positions[tile].grounded().neighbours():
                cells.add(n)
        self._influence[colour] = cells

    # ---------------------------------------------------------------------
    # Copying
    # ---------------------------------------------------------------------

    def clone(self) -> HiveBoard:
        other = HiveBoard.__new__(HiveBoard)
        other.radius = self.radius
        other.side = self.side
        other._grid = list(self._grid)
        other._positions = list(self._positions)
        other._covered = list(self._covered)
        other._influence = {c: set(cells) for c, cells in self._influence.items()}
        other._pinned = set(self._pinned)
        other._played = list(self._played)
        other._last_moved = self._last_moved
        other._last_moved_from = self._last_moved_from
        other.largest_radius = self.largest_radius
        return other
