# hive/connectivity.py

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Set, Tuple

from hive.hexgrid import Direction, HivePosition, NEIGHBOUR_OFFSETS
from hive.tiles import Tile

if TYPE_CHECKING:
    from hive.board import HiveBoard


def _occupied_neighbours(board: HiveBoard, pos: HivePosition) -> Iterator[HivePosition]:
    for n in pos.neighbours():
        if board.is_occupied(n):
            yield n


def _search_root(board: HiveBoard) -> Optional[HivePosition]:
    for queen in (Tile.wQ, Tile.bQ):
        if board.is_in_play(queen):
            return board.position_of(queen).grounded()
    played = board.played_tiles
    if not played:
        return None
    return board.position_of(played[0]).grounded()


def articulation_points(board: HiveBoard) -> Set[HivePosition]:
    """
    Ground cells whose removal would split the hive (Tarjan's cut vertices).

    Iterative depth-first search over occupied columns:
      - discovery order and low link per cell
      - a non-root cell is a cut vertex if some child's low link >= its order
      - the root is a cut vertex if it has more than one DFS child
    """
    root = _search_root(board)
    if root is None:
        return set()

    order: Dict[HivePosition, int] = {root: 0}
    low: Dict[HivePosition, int] = {root: 0}
    points: Set[HivePosition] = set()
    root_children = 0
    counter = 1

    stack: List[Tuple[HivePosition, Optional[HivePosition], Iterator[HivePosition]]] = [
        (root, None, _occupied_neighbours(board, root))
    ]
    while stack:
        node, parent, pending = stack[-1]

        descended = False
        for n in pending:
            if n == parent:
                continue
            if n in order:
                low[node] = min(low[node], order[n])
                continue
            order[n] = low[n] = counter
            counter += 1
            stack.append((n, node, _occupied_neighbours(board, n)))
            descended = True
            break
        if descended:
            continue

        stack.pop()
        if parent is None:
            continue
        low[parent] = min(low[parent], low[node])
        if parent == root:
            root_children += 1
        elif low[node] >= order[parent]:
            points.add(parent)

    if root_children > 1:
        points.add(root)
    return points


def _same_column(a: HivePosition, b: Optional[HivePosition]) -> bool:
    return b is not None and a.q == b.q and a.r == b.r


def is_connected(board: HiveBoard, pos: HivePosition, excluding: Optional[HivePosition]) -> bool:
    """True if some column around pos, other than `excluding`, holds a tile."""
    for n in pos.grounded().neighbours():
        if _same_column(n, excluding):
            continue
        if board.is_occupied(n):
            return True
    return False


def is_gated(
    board: HiveBoard,
    pos: HivePosition,
    direction: Direction,
    excluding: Optional[HivePosition] = None,
) -> bool:
    """
    Freedom-to-move check for leaving pos towards `direction`.

    The two flanking cells count when they rise to at least pos.h. On the
    ground a slide needs exactly one flank (two close the gap, none leaves
    the hive); above the ground only two flanks block the way.
    """
    cw = pos + NEIGHBOUR_OFFSETS[direction.clockwise()]
    ccw = pos + NEIGHBOUR_OFFSETS[direction.counter_clockwise()]
    cw_exists = _flank_exists(board, cw, pos.h, excluding)
    ccw_exists = _flank_exists(board, ccw, pos.h, excluding)

    if pos.h == 0:
        return cw_exists == ccw_exists
    return cw_exists and ccw_exists


def _flank_exists(board: HiveBoard, cell: HivePosition, height: int, excluding: Optional[HivePosition]) -> bool:
    if _same_column(cell, excluding):
        return False
    top = board.get_top_tile_at(cell)
    top_height = board.position_of(top).h if top is not None else -1
    return top_height >= height
