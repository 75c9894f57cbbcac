from typing import Optional, Sequence, Tuple

from hive.board import HiveBoard
from hive.config import DEFAULT_BOARD_RADIUS, HiveConfig
from hive.hexgrid import CARDINAL_DIRECTIONS, Direction, HivePosition, ORIGIN
from hive.moves import Move
from hive.tiles import Tile
from hive.turn_engine import HiveState

# (uhp name, q, r); a name on an occupied cell is stacked on top of it
Layout = Sequence[Tuple[str, int, int]]

# wQ-bQ pair, the smallest legal hive
QUEEN_PAIR: Layout = [("wQ", 0, 0), ("bQ", 1, 0)]

# a tile of each kind tucked against the west side of the queen pair
ANT_BESIDE_PAIR: Layout = QUEEN_PAIR + [("wA1", -1, 0)]
SPIDER_BESIDE_PAIR: Layout = QUEEN_PAIR + [("wS1", -1, 0)]
BEETLE_BESIDE_PAIR: Layout = QUEEN_PAIR + [("wB1", -1, 0)]
LADYBUG_BESIDE_PAIR: Layout = QUEEN_PAIR + [("wL", -1, 0)]
MOSQUITO_BESIDE_QUEEN: Layout = QUEEN_PAIR + [("wM", -1, 0)]

# beetle sitting on its own queen
BEETLE_ON_QUEEN: Layout = QUEEN_PAIR + [("wB1", 0, 0)]

# mosquito touching an ant and a queen
MOSQUITO_ANT_QUEEN: Layout = [("wQ", 0, 0), ("bA1", 1, 0), ("wM", 0, 1)]

# mosquito whose only neighbour is the other mosquito
MOSQUITO_PAIR: Layout = [("wQ", 0, 0), ("bM", 1, 0), ("wM", 2, 0)]

# grasshopper at the end of a straight run of three
GRASSHOPPER_RUN: Layout = [("wG1", 0, 0), ("bQ", 1, 0), ("wQ", 2, 0), ("bA1", 3, 0)]

# bQ joins the two others; adding BRIDGE closes the ring around it
PINNED_LINE: Layout = [("wQ", 0, 0), ("bQ", 1, 0), ("wA1", 1, 1)]
BRIDGE: Tuple[str, int, int] = ("bA1", 0, 1)

# pillbug holding the hive together, with a loose tile on each side
PILLBUG_BRIDGE: Layout = [("wP", 0, 0), ("wQ", -1, 0), ("bQ", 1, 0)]

# pillbug next to a queen that is itself a cut vertex
PILLBUG_PINNED_NEIGHBOUR: Layout = [("wQ", 0, 0), ("wP", -1, 0), ("bQ", 1, 0), ("bA1", 2, 0)]

# white queen pinned between black ants with nowhere to place: white must pass
WHITE_STUCK: Layout = [("bA1", 0, 0), ("wQ", 1, 0), ("bA2", 2, 0)]

# white queen with all six neighbours filled
SURROUNDED_WHITE_QUEEN: Layout = [
    ("wQ", 0, 0),
    ("bQ", 1, 0),
    ("bA1", 1, -1),
    ("wA1", 0, 1),
    ("bA2", -1, 1),
    ("wA2", -1, 0),
    ("bG1", 0, -1),
]

# both queens side by side with every surrounding cell filled
BOTH_QUEENS_SURROUNDED: Layout = [
    ("wQ", 0, 0),
    ("bQ", 1, 0),
    ("wA1", 1, -1),
    ("wA2", 2, -1),
    ("wA3", 2, 0),
    ("wG1", 1, 1),
    ("bA1", 0, 1),
    ("bA2", -1, 1),
    ("bA3", -1, 0),
    ("bG1", 0, -1),
]


def move_to_cell(board: HiveBoard, tile: Tile, cell: HivePosition) -> Move:
    """Any move that drops `tile` onto the column at `cell`."""
    top = board.get_top_tile_at(cell)
    if top is not None:
        return Move(tile, top, Direction.ABOVE)
    if not board.played_tiles:
        if cell.grounded() != ORIGIN:
            raise ValueError(f"First tile must go to the origin, not {cell}")
        return Move(tile, None, Direction.ABOVE)

    for d in CARDINAL_DIRECTIONS:
        neighbour = board.get_top_tile_at(cell.neighbour_at(d))
        if neighbour is not None and neighbour != tile:
            return Move(tile, neighbour, d.opposite())
    raise ValueError(f"{cell} does not touch the hive")


def build_board(layout: Layout, radius: int = DEFAULT_BOARD_RADIUS, clear_last_moved: bool = True) -> HiveBoard:
    board = HiveBoard(radius)
    add_to_board(board, layout)
    if clear_last_moved:
        board.pass_turn()
    return board


def add_to_board(board: HiveBoard, layout: Layout) -> None:
    for name, q, r in layout:
        move = move_to_cell(board, Tile.from_uhp(name), HivePosition(q, r))
        if not board.move_tile(move):
            raise ValueError(f"{name} at ({q}, {r}) is outside the board")


def build_state(layout: Layout, move_number: int = 2, config: Optional[HiveConfig] = None) -> HiveState:
    """A game whose board is `layout`, with `move_number` moves notionally played."""
    state = HiveState(config)
    state.board = build_board(layout, state.config.board_radius)
    state.move_number = move_number
    return state
