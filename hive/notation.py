# hive/notation.py
#
# Universal Hive Protocol move strings, e.g. "wS1", "bG1 wS1-", "wQ \bA1",
# "wB1 bQ" (beetle on top of bQ) and "pass".
# https://github.com/jonthysell/Mzinga/wiki/UniversalHiveProtocol

from __future__ import annotations

from hive.actions import action_to_move, move_to_action
from hive.hexgrid import Direction
from hive.moves import Move, PASS_MOVE
from hive.tiles import Tile

PASS_STRING = "pass"

# glyph placed before the reference tile name
_PREFIX_GLYPHS = {
    Direction.NW: "\\",
    Direction.W: "-",
    Direction.SW: "/",
}
# glyph placed after it
_SUFFIX_GLYPHS = {
    Direction.NE: "/",
    Direction.E: "-",
    Direction.SE: "\\",
}
_PREFIX_DIRECTIONS = {v: k for k, v in _PREFIX_GLYPHS.items()}
_SUFFIX_DIRECTIONS = {v: k for k, v in _SUFFIX_GLYPHS.items()}
_GLYPHS = "\\-/"


def move_to_string(move: Move) -> str:
    if move.is_pass:
        return PASS_STRING
    if move.reference is None:
        return move.tile.uhp

    ref = move.reference.uhp
    if move.direction in _PREFIX_GLYPHS:
        ref = _PREFIX_GLYPHS[move.direction] + ref
    elif move.direction in _SUFFIX_GLYPHS:
        ref = ref + _SUFFIX_GLYPHS[move.direction]
    return f"{move.tile.uhp} {ref}"


def string_to_move(text: str) -> Move:
    parts = text.split()
    if not parts:
        raise ValueError("Empty move string")
    if len(parts) == 1 and parts[0].lower() == PASS_STRING:
        return PASS_MOVE
    if len(parts) > 2:
        raise ValueError(f"Invalid move string: {text!r}")

    tile = Tile.from_uhp(parts[0])
    if len(parts) == 1:
        return Move(tile, None, Direction.ABOVE)

    ref = parts[1]
    direction = Direction.ABOVE
    if ref[0] in _PREFIX_DIRECTIONS:
        direction = _PREFIX_DIRECTIONS[ref[0]]
        name = ref[1:]
    elif ref[-1] in _SUFFIX_DIRECTIONS:
        direction = _SUFFIX_DIRECTIONS[ref[-1]]
        name = ref[:-1]
    else:
        name = ref

    if not name or any(c in _GLYPHS for c in name):
        raise ValueError(f"Invalid reference in move string: {text!r}")

    return Move(tile, Tile.from_uhp(name), direction)


def action_to_string(action: int) -> str:
    return move_to_string(action_to_move(action))


def string_to_action(text: str) -> int:
    return move_to_action(string_to_move(text))
