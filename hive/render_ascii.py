# hive/render_ascii.py

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Set

from hive.hexgrid import HivePosition
from hive.movegen import generate_moves_for
from hive.tiles import Colour, Tile

if TYPE_CHECKING:
    from hive.turn_engine import HiveState

CELL_WIDTH = 5
INDENT_PER_ROW = 2.5

ANSI_WHITE = "\033[38;5;223m"
ANSI_RED = "\033[1;31m"
ANSI_RESET = "\033[1;39m"


def _highlight_cells(state: HiveState, tile: Optional[Tile]) -> Set[HivePosition]:
    """Ground cells the highlighted tile could move to this turn."""
    if tile is None or tile.colour != state.current_colour or not state.board.is_in_play(tile):
        return set()
    board = state.board
    moves = generate_moves_for(board, tile, tile.bug_type, state.current_colour)
    return {board.destination_of(m).grounded() for m in moves}


def _paint(text: str, colour: Optional[Colour], ansi: bool) -> str:
    if not ansi:
        return text
    if colour is None:
        return f"{ANSI_RESET}{text}{ANSI_RESET}"
    code = ANSI_WHITE if colour == Colour.WHITE else ANSI_RED
    return f"{code}{text}{ANSI_RESET}"


def _tile_cell(state: HiveState, tile: Tile, ansi: bool) -> str:
    board = state.board
    label = tile.uhp
    if board.position_of(tile).h > 0:
        label = "^" + label

    left = (CELL_WIDTH - len(label)) // 2
    right = CELL_WIDTH - len(label) - left
    if tile == board.last_moved_tile:
        label += "*"
        right -= 1
    return _paint(" " * left + label + " " * max(right, 0), tile.colour, ansi)


def render_board(state: HiveState, highlight: Optional[Tile] = None, ansi: Optional[bool] = None) -> str:
    """
    Draw the board as a hexagon, one text row per r.

    Tiles show their UHP name (^ when stacked, * when just moved), the cell a
    tile just left shows *, and X marks where `highlight` could go.
    Stacks are listed underneath, top first.
    """
    board = state.board
    if ansi is None:
        ansi = state.config.ansi_color_output
    targets = _highlight_cells(state, highlight)
    last_moved = board.last_moved_tile

    lines: List[str] = [""]
    stacked: List[Tile] = []
    radius = board.radius
    for r in range(-radius, radius + 1):
        row = " " * int(abs(r) * INDENT_PER_ROW)
        for q in range(max(-radius, -r - radius), min(radius, -r + radius) + 1):
            pos = HivePosition(q, r)
            tile = board.get_top_tile_at(pos)
            if tile is not None:
                if board.position_of(tile).h > 0:
                    stacked.append(tile)
                row += _tile_cell(state, tile, ansi)
            elif last_moved is not None and board.last_moved_from == pos:
                row += _paint("  *  ", last_moved.colour, ansi)
            elif pos in targets:
                row += _paint("  X  ", None, ansi)
            else:
                row += _paint("  -  ", None, ansi)
        lines.append(row.rstrip())
        lines.append("")

    for tile in stacked:
        column = board.stack_at(board.position_of(tile))
        lines.append(" > ".join(t.uhp for t in reversed(column)))

    return "\n".join(lines) + "\n"
