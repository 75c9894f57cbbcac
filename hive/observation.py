# hive/observation.py

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from hive.board import HiveBoard
from hive.config import HiveConfig
from hive.hexgrid import HivePosition
from hive.tiles import BugType, Colour
from hive.turn_engine import HiveState

# planes after the 2 * num_bug_types bug-type planes
NUM_EXTRA_PLANES = 6


def observation_shape(config: HiveConfig) -> Tuple[int, int, int]:
    side = config.square_dimensions
    return (2 * config.num_bug_types + NUM_EXTRA_PLANES, side, side)


def _bug_type_index(config: HiveConfig, bug_type: BugType) -> int:
    return config.enabled_bug_types().index(bug_type)


def _cell(board: HiveBoard, pos: HivePosition) -> Tuple[int, int]:
    return pos.r + board.radius, pos.q + board.radius


def observation_tensor(state: HiveState, player: Optional[int] = None) -> np.ndarray:
    """
    Player-relative one-hot planes, shape (2n + 6, 2R + 1, 2R + 1):
      0 .. n-1     own tiles by bug type
      n .. 2n-1    opponent tiles by bug type
      2n, 2n+1     pinned (own, opponent)
      2n+2, 2n+3   placeable (own, opponent; own wins a tie)
      2n+4, 2n+5   covered (own, opponent)
    """
    config = state.config
    board = state.board
    if player is None:
        player = state.current_colour.player
    own = Colour.from_player(player)
    opponent = own.opposite()

    n = config.num_bug_types
    pinned_idx = 2 * n
    placeable_idx = pinned_idx + 2
    covered_idx = placeable_idx + 2

    features = np.zeros(observation_shape(config), dtype=np.float32)

    for tile in board.played_tiles:
        pos = board.position_of(tile)
        row, col = _cell(board, pos)
        side = 1 if tile.colour == opponent else 0

        features[side * n + _bug_type_index(config, tile.bug_type), row, col] = 1.0
        if board.is_pinned(pos):
            features[pinned_idx + side, row, col] = 1.0
        if board.is_covered(tile):
            features[covered_idx + side, row, col] = 1.0

    radius = board.radius
    for r in range(-radius, radius + 1):
        for q in range(-radius, radius + 1):
            pos = HivePosition(q, r)
            row, col = _cell(board, pos)
            if board.is_placeable(own, pos):
                features[placeable_idx, row, col] = 1.0
            elif board.is_placeable(opponent, pos):
                features[placeable_idx + 1, row, col] = 1.0

    return features
