import pytest

from hive.hexgrid import HivePosition
from hive.turn_engine import HiveState
from scenarios.opening_game import build_game
from scenarios.positions import build_board, build_state


def _destinations(board, moves):
    return {board.destination_of(m) for m in moves}


def _ground_columns_connected(board) -> bool:
    columns = {HivePosition(p.q, p.r) for p in (board.position_of(t) for t in board.played_tiles)}
    if not columns:
        return True
    start = next(iter(columns))
    seen = {start}
    stack = [start]
    while stack:
        pos = stack.pop()
        for n in pos.neighbours():
            if n in columns and n not in seen:
                seen.add(n)
                stack.append(n)
    return seen == columns


@pytest.fixture
def state():
    """A fresh game with every expansion enabled."""
    return HiveState()


@pytest.fixture
def opening():
    """Four moves in: wS1 (0,0), bS1 (1,0), wQ (-1,0), bQ (2,0)."""
    return build_game()


@pytest.fixture
def layout_board():
    return build_board


@pytest.fixture
def layout_state():
    return build_state


@pytest.fixture
def destinations():
    return _destinations


@pytest.fixture
def hive_connected():
    return _ground_columns_connected

