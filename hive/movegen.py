# hive/movegen.py

from __future__ import annotations

from typing import Callable, Dict, Iterable, List

from hive.board import HiveBoard
from hive.config import HiveConfig
from hive.connectivity import is_connected, is_gated
from hive.hexgrid import CARDINAL_DIRECTIONS, Direction, HivePosition, NEIGHBOUR_OFFSETS
from hive.moves import Move
from hive.tiles import BugType, Colour, Tile, queen_of, tiles_for_colour

_ABOVE = NEIGHBOUR_OFFSETS[Direction.ABOVE]

# by move 6/7 (each side's fourth turn) the queen must be down
QUEEN_DEADLINE_MOVES = (6, 7)
QUEEN_DEADLINE_PASSED = 8


# ---------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------

def generate_all_moves(board: HiveBoard, colour: Colour, move_number: int, config: HiveConfig) -> List[Move]:
    """
    Every legal move for `colour`, placements first. Tiles on the board may
    only move once that side's queen is in play, and the tile the opponent
    just moved (or threw) sits out a turn.
    """
    moves = generate_placement_moves(board, colour, move_number, config)

    if board.is_in_play(queen_of(colour)):
        last_moved = board.last_moved_tile
        for tile in board.played_tiles:
            if tile.colour == colour and tile != last_moved:
                moves.extend(generate_moves_for(board, tile, tile.bug_type, colour))

    return list(dict.fromkeys(moves))


def generate_moves_for(board: HiveBoard, tile: Tile, acting_type: BugType, colour: Colour) -> List[Move]:
    """Moves for one tile, moving by the rules of `acting_type`."""
    if board.is_covered(tile):
        return []

    start = board.position_of(tile)

    if acting_type == BugType.MOSQUITO:
        return _mosquito_moves(board, tile, start, colour)
    if acting_type == BugType.PILLBUG:
        moves = _pillbug_special_moves(board, tile, start)
        if not board.is_pinned(tile):
            moves = _destinations_to_moves(board, tile, start, _step_destinations(board, start)) + moves
        return moves

    if board.is_pinned(tile):
        return []
    generator = _DESTINATION_GENERATORS[acting_type]
    return _destinations_to_moves(board, tile, start, generator(board, start))


# ---------------------------------------------------------------------
# Placement
# ---------------------------------------------------------------------

def generate_placement_moves(board: HiveBoard, colour: Colour, move_number: int, config: HiveConfig) -> List[Move]:
    hand = [
        t for t in tiles_for_colour(colour)
        if config.bug_type_enabled(t.bug_type) and not board.is_in_play(t)
    ]

    # white opens at the origin, with no reference tile
    if move_number == 0:
        return [Move(t, None, Direction.ABOVE) for t in hand if t.bug_type != BugType.QUEEN]

    # black's first tile is the only one ever placed touching the opponent
    if move_number == 1:
        first = board.played_tiles[0]
        return [
            Move(t, first, d)
            for t in hand if t.bug_type != BugType.QUEEN
            for d in CARDINAL_DIRECTIONS
        ]

    queen = queen_of(colour)
    queen_placed = move_number >= QUEEN_DEADLINE_PASSED or board.is_in_play(queen)
    if move_number in QUEEN_DEADLINE_MOVES and not queen_placed:
        hand = [t for t in hand if t == queen]

    cells = sorted(
        (p for p in board.influence(colour) if board.is_placeable(colour, p)),
        key=lambda p: (p.r, p.q),
    )

    moves: List[Move] = []
    for tile in hand:
        for cell in cells:
            for d in CARDINAL_DIRECTIONS:
                neighbour = board.get_top_tile_at(cell.neighbour_at(d))
                if neighbour is not None:
                    moves.append(Move(tile, neighbour, d.opposite()))
    return moves


# ---------------------------------------------------------------------
# Ground movement
# ---------------------------------------------------------------------

def _can_slide(board: HiveBoard, frm: HivePosition, d: Direction, start: HivePosition) -> bool:
    """One ground step from frm, treating the mover's start cell as empty."""
    to = frm.neighbour_at(d)
    return (
        not board.is_occupied(to)
        and not is_gated(board, frm, d, start)
        and is_connected(board, to, start)
    )


def _step_destinations(board: HiveBoard, start: HivePosition) -> List[HivePosition]:
    return [start.neighbour_at(d) for d in CARDINAL_DIRECTIONS if _can_slide(board, start, d, start)]


def _ant_destinations(board: HiveBoard, start: HivePosition) -> List[HivePosition]:
    seen = {start}
    found: List[HivePosition] = []
    stack = [start]
    while stack:
        pos = stack.pop()
        for d in CARDINAL_DIRECTIONS:
            to = pos.neighbour_at(d)
            if to in seen or not _can_slide(board, pos, d, start):
                continue
            seen.add(to)
            found.append(to)
            stack.append(to)
    return found


def _spider_destinations(board: HiveBoard, start: HivePosition) -> List[HivePosition]:
    found: List[HivePosition] = []
    stack = [(start, (start,))]
    while stack:
        pos, path = stack.pop()
        if len(path) == 4:
            found.append(pos)
            continue
        for d in CARDINAL_DIRECTIONS:
            to = pos.neighbour_at(d)
            if to not in path and _can_slide(board, pos, d, start):
                stack.append((to, path + (to,)))
    return list(dict.fromkeys(found))


def _grasshopper_destinations(board: HiveBoard, start: HivePosition) -> List[HivePosition]:
    found: List[HivePosition] = []
    for d in CARDINAL_DIRECTIONS:
        pos = start.grounded().neighbour_at(d)
        jumped = 0
        while board.is_occupied(pos):
            pos = pos.neighbour_at(d)
            jumped += 1
        if jumped:
            found.append(pos)
    return found


# ---------------------------------------------------------------------
# Climbing
# ---------------------------------------------------------------------

def _climb_destinations(board: HiveBoard, start: HivePosition) -> List[HivePosition]:
    """One step up, across or down the hive from start (which may be stacked)."""
    found: List[HivePosition] = []
    for d in CARDINAL_DIRECTIONS:
        column = start.grounded().neighbour_at(d)
        top = board.get_top_tile_at(column)
        if top is not None:
            to = board.position_of(top) + _ABOVE
            # the doorway is checked at the higher of the two layers
            gate_at = start.with_height(to.h) if to.h > start.h else start
            if not is_gated(board, gate_at, d):
                found.append(to)
        elif start.h > 0 and not is_gated(board, start, d):
            found.append(column)
    return found


def _beetle_destinations(board: HiveBoard, start: HivePosition) -> List[HivePosition]:
    found = _climb_destinations(board, start)
    if start.h == 0:
        found.extend(_step_destinations(board, start))
    return found


def _ladybug_destinations(board: HiveBoard, start: HivePosition) -> List[HivePosition]:
    first = _climb_destinations(board, start)

    above_start = start + _ABOVE
    second: Dict[HivePosition, None] = {}
    for pos in first:
        for to in _climb_destinations(board, pos):
            if to.h > 0 and to != above_start:
                second[to] = None

    found: List[HivePosition] = []
    for pos in second:
        found.extend(to for to in _climb_destinations(board, pos) if to.h == 0)
    return list(dict.fromkeys(found))


# ---------------------------------------------------------------------
# Mosquito / Pillbug
# ---------------------------------------------------------------------

def _mosquito_moves(board: HiveBoard, tile: Tile, start: HivePosition, colour: Colour) -> List[Move]:
    if start.h > 0:
        return generate_moves_for(board, tile, BugType.BEETLE, colour)

    copied = {t.bug_type for t in board.neighbours_of(start)}
    copied.discard(BugType.MOSQUITO)
    if BugType.ANT in copied:
        # any queen or spider destination is also an ant destination
        copied -= {BugType.QUEEN, BugType.SPIDER}

    moves: List[Move] = []
    for bug_type in sorted(copied):
        moves.extend(generate_moves_for(board, tile, bug_type, colour))
    return moves


def _pillbug_special_moves(board: HiveBoard, pillbug: Tile, start: HivePosition) -> List[Move]:
    """
    Lift an adjacent unpinned ground tile over the pillbug onto an empty
    neighbouring cell. The pillbug itself stays put, so it may be pinned.
    """
    above = start + _ABOVE
    last_moved = board.last_moved_tile

    targets: List[Tile] = []
    landing: List[HivePosition] = []
    for d in CARDINAL_DIRECTIONS:
        if is_gated(board, above, d):
            continue
        cell = start.neighbour_at(d)
        top = board.get_top_tile_at(cell)
        if top is None:
            landing.append(cell)
        elif (
            not board.is_pinned(top)
            and not board.is_covered(top)
            and top != last_moved
            and board.position_of(top).h == 0
        ):
            targets.append(top)

    moves: List[Move] = []
    for target in targets:
        for cell in landing:
            for d in CARDINAL_DIRECTIONS:
                reference = board.get_top_tile_at(cell.neighbour_at(d))
                if reference is not None and reference != target:
                    moves.append(Move(target, reference, d.opposite()))
    return moves


# ---------------------------------------------------------------------
# Destinations -> Moves
# ---------------------------------------------------------------------

def _destinations_to_moves(
    board: HiveBoard,
    tile: Tile,
    start: HivePosition,
    destinations: Iterable[HivePosition],
) -> List[Move]:
    moves: List[Move] = []
    for to in destinations:
        if to.h > 0:
            moves.append(Move(tile, board.get_top_tile_at(to), Direction.ABOVE))
            continue

        for d in CARDINAL_DIRECTIONS:
            neighbour = board.get_top_tile_at(to.neighbour_at(d))
            if neighbour is None:
                continue
            if neighbour == tile:
                # a ground mover leaves its cell empty; a stacked one uncovers a tile
                if start.h == 0:
                    continue
                neighbour = board.tile_below(start)
            moves.append(Move(tile, neighbour, d.opposite()))
    return moves


_DESTINATION_GENERATORS: Dict[BugType, Callable[[HiveBoard, HivePosition], List[HivePosition]]] = {
    BugType.QUEEN: _step_destinations,
    BugType.ANT: _ant_destinations,
    BugType.GRASSHOPPER: _grasshopper_destinations,
    BugType.SPIDER: _spider_destinations,
    BugType.BEETLE: _beetle_destinations,
    BugType.LADYBUG: _ladybug_destinations,
}
