# hive/actions.py

from __future__ import annotations

from hive.hexgrid import Direction, NUM_ALL_DIRECTIONS
from hive.moves import Move, PASS_MOVE
from hive.tiles import MAX_TILE_COUNT, Tile

# as if indexing a 3d array [tile][reference][direction]
ACTIONS_SHAPE = (MAX_TILE_COUNT, MAX_TILE_COUNT, NUM_ALL_DIRECTIONS)
NUM_DISTINCT_ACTIONS = MAX_TILE_COUNT * MAX_TILE_COUNT * NUM_ALL_DIRECTIONS + 1
PASS_ACTION = NUM_DISTINCT_ACTIONS - 1

_TILE_STRIDE = MAX_TILE_COUNT * NUM_ALL_DIRECTIONS


def move_to_action(move: Move) -> int:
    if move.is_pass:
        return PASS_ACTION

    tile = int(move.tile)
    # the opening placement has no reference: encode it as the tile on top of itself
    if move.reference is None:
        return tile * _TILE_STRIDE + tile * NUM_ALL_DIRECTIONS + Direction.ABOVE

    return tile * _TILE_STRIDE + int(move.reference) * NUM_ALL_DIRECTIONS + int(move.direction)


def action_to_move(action: int) -> Move:
    if action < 0 or action >= NUM_DISTINCT_ACTIONS:
        raise ValueError(f"Action {action} out of range 0..{NUM_DISTINCT_ACTIONS - 1}")
    if action == PASS_ACTION:
        return PASS_MOVE

    direction = Direction(action % NUM_ALL_DIRECTIONS)
    reference = (action // NUM_ALL_DIRECTIONS) % MAX_TILE_COUNT
    tile = action // _TILE_STRIDE

    if tile == reference and direction == Direction.ABOVE:
        return Move(Tile(tile), None, Direction.ABOVE)
    return Move(Tile(tile), Tile(reference), direction)
