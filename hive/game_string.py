# hive/game_string.py
#
# UHP GameString: "<GameType>;<GameState>;<Turn>[;<move>...]", e.g.
#   Base+MLP;InProgress;White[3];wS1;bG1 wS1-;wQ -wS1;bQ bG1-

from __future__ import annotations

from hive.actions import action_to_move
from hive.config import HiveConfig
from hive.notation import string_to_action
from hive.turn_engine import HiveState

SEPARATOR = ";"


def _is_legal(state: HiveState, action: int) -> bool:
    """
    Legal by landing cell, so a stacked tile stepping down may name itself
    as the reference ("wB1 /wB1") instead of the tile it uncovers.
    """
    if action in state.legal_actions():
        return True
    move = action_to_move(action)
    if move.is_pass:
        return False
    board = state.board
    try:
        to = board.destination_of(move)
    except ValueError:
        return False
    return any(
        m.tile == move.tile and board.destination_of(m) == to
        for m in state.legal_moves()
        if not m.is_pass
    )


def serialize(state: HiveState) -> str:
    parts = [state.config.game_type_string(), state.progress_string(), state.turn_string()]
    moves = state.moves_string()
    if moves:
        parts.append(moves)
    return SEPARATOR.join(parts)


def deserialize(text: str, validate: bool = True, **config_overrides) -> HiveState:
    """
    Rebuild a game by replaying its moves from the start.

    A bare game type ("Base+MLP") yields a fresh game. With `validate`, every
    replayed move must be legal and the recorded state and turn strings must
    match the replayed game.
    """
    fields = [f.strip() for f in text.strip().split(SEPARATOR)]
    if not fields or not fields[0]:
        raise ValueError("Empty game string")

    config = HiveConfig.from_game_type(fields[0], **config_overrides)
    state = HiveState(config)
    if len(fields) == 1:
        return state
    if len(fields) < 3:
        raise ValueError(f"Game string needs a game state and a turn: {text!r}")

    progress, turn, moves = fields[1], fields[2], fields[3:]
    for i, move_str in enumerate(moves):
        if not move_str:
            raise ValueError(f"Empty move at position {i} in game string")
        action = string_to_action(move_str)
        if validate and not _is_legal(state, action):
            raise ValueError(f"Illegal move {move_str!r} at position {i} in game string")
        state.apply_action(action)

    if state.turn_string() != turn:
        raise ValueError(f"Turn {turn!r} does not match replayed game ({state.turn_string()})")
    if validate and state.progress_string() != progress:
        raise ValueError(f"Game state {progress!r} does not match replayed game ({state.progress_string()})")
    return state
