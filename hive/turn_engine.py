# hive/turn_engine.py

from __future__ import annotations

import logging
from typing import List, Optional

from hive.actions import PASS_ACTION, action_to_move, move_to_action
from hive.board import HiveBoard
from hive.config import HiveConfig
from hive.moves import Move
from hive.movegen import generate_all_moves
from hive.notation import move_to_string, string_to_move
from hive.render_ascii import render_board
from hive.tiles import Colour

logger = logging.getLogger(__name__)

NUM_PLAYERS = 2
WHITE_PLAYER = 0
BLACK_PLAYER = 1
TERMINAL_PLAYER = -4

# UHP GameStateString values
NOT_STARTED = "NotStarted"
IN_PROGRESS = "InProgress"
DRAW = "Draw"
WHITE_WINS = "WhiteWins"
BLACK_WINS = "BlackWins"


class HiveState:
    def __init__(self, config: Optional[HiveConfig] = None):
        self.config = config or HiveConfig()
        self.board = HiveBoard(self.config.board_radius)

        self.move_number = 0
        self.history: List[int] = []
        self.force_terminal = False

        # human-readable event log (placements, moves, passes, game end)
        self.log: List[str] = []

    # ---------------------------------------------------------------------
    # Turn bookkeeping
    # ---------------------------------------------------------------------

    @property
    def current_player(self) -> int:
        return TERMINAL_PLAYER if self.is_terminal() else self.move_number % NUM_PLAYERS

    @property
    def current_colour(self) -> Colour:
        return Colour.from_player(self.move_number % NUM_PLAYERS)

    def legal_moves(self) -> List[Move]:
        if self.is_terminal():
            return []
        return generate_all_moves(self.board, self.current_colour, self.move_number, self.config)

    def legal_actions(self) -> List[int]:
        if self.is_terminal():
            return []
        actions = sorted({move_to_action(m) for m in self.legal_moves()})
        # a side with nothing to do must pass
        return actions or [PASS_ACTION]

    def apply_action(self, action: int) -> None:
        if self.is_terminal():
            raise ValueError(f"Game is over ({self.progress_string()}), cannot apply action {action}")

        move = action_to_move(action)
        colour = self.current_colour

        if move.is_pass:
            self.board.pass_turn()
            self.log.append(f"PASS {colour.label}")
        else:
            placing = not self.board.is_in_play(move.tile)
            old_pos = self.board.position_of(move.tile)
            if self.board.move_tile(move):
                new_pos = self.board.position_of(move.tile)
                if placing:
                    self.log.append(f"PLACE {move.tile} at {new_pos}")
                else:
                    self.log.append(f"MOVE {move.tile} from {old_pos} to {new_pos}")
            else:
                # out of room: the game ends as a draw
                self.force_terminal = True
                self.log.append(f"OVERFLOW {move_to_string(move)} exceeds radius {self.board.radius}")
                logger.warning("Forcing the game to end after %s overflowed the board", move_to_string(move))

        self.history.append(action)
        self.move_number += 1

        if self.is_terminal():
            self.log.append(f"END {self.progress_string()}")

    def apply_move(self, move: Move) -> None:
        self.apply_action(move_to_action(move))

    def apply_move_string(self, text: str) -> None:
        self.apply_move(string_to_move(text))

    # ---------------------------------------------------------------------
    # Results
    # ---------------------------------------------------------------------

    def win_condition_met(self, player: int) -> bool:
        """True if `player` has surrounded the opponent's queen."""
        return self.board.is_queen_surrounded(Colour.from_player(player).opposite())

    def is_terminal(self) -> bool:
        return (
            self.win_condition_met(WHITE_PLAYER)
            or self.win_condition_met(BLACK_PLAYER)
            or self.move_number >= self.config.max_game_length
            or self.force_terminal
        )

    def returns(self) -> List[float]:
        white = self.win_condition_met(WHITE_PLAYER)
        black = self.win_condition_met(BLACK_PLAYER)
        if white != black:
            return [1.0, -1.0] if white else [-1.0, 1.0]
        return [0.0, 0.0]

    def progress_string(self) -> str:
        if self.move_number == 0:
            return NOT_STARTED

        white = self.win_condition_met(WHITE_PLAYER)
        black = self.win_condition_met(BLACK_PLAYER)
        if white != black:
            return WHITE_WINS if white else BLACK_WINS
        if white and black:
            return DRAW
        if self.move_number >= self.config.max_game_length or self.force_terminal:
            return DRAW
        return IN_PROGRESS

    def turn_string(self) -> str:
        label = self.current_colour.label
        return f"{label}[{(self.move_number + 2) // 2}]"

    def moves_string(self) -> str:
        return ";".join(move_to_string(action_to_move(a)) for a in self.history)

    # ---------------------------------------------------------------------
    # Copying / display
    # ---------------------------------------------------------------------

    def clone(self) -> HiveState:
        other = HiveState.__new__(HiveState)
        other.config = self.config
        other.board = self.board.clone()
        other.move_number = self.move_number
        other.history = list(self.history)
        other.force_terminal = self.force_terminal
        other.log = list(self.log)
        return other

    def __str__(self) -> str:
        return render_board(self)
