import pytest

from hive.actions import (
    ACTIONS_SHAPE,
    NUM_DISTINCT_ACTIONS,
    PASS_ACTION,
    action_to_move,
    move_to_action,
)
from hive.hexgrid import Direction
from hive.moves import Move, PASS_MOVE
from hive.notation import action_to_string, move_to_string, string_to_action, string_to_move
from hive.tiles import Tile


@pytest.mark.parametrize(
    "text, move",
    [
        ("wS1", Move(Tile.wS1, None, Direction.ABOVE)),
        ("bG1 wS1-", Move(Tile.bG1, Tile.wS1, Direction.E)),
        ("wQ -wS1", Move(Tile.wQ, Tile.wS1, Direction.W)),
        ("wQ \\wS1", Move(Tile.wQ, Tile.wS1, Direction.NW)),
        ("wA1 /bQ", Move(Tile.wA1, Tile.bQ, Direction.SW)),
        ("bA2 bQ\\", Move(Tile.bA2, Tile.bQ, Direction.SE)),
        ("wA1 wQ/", Move(Tile.wA1, Tile.wQ, Direction.NE)),
        ("wB1 bQ", Move(Tile.wB1, Tile.bQ, Direction.ABOVE)),
        ("pass", PASS_MOVE),
    ],
)
def test_uhp_strings(text, move):
    assert string_to_move(text) == move
    assert move_to_string(move) == text


@pytest.mark.parametrize("text", ["", "   ", "wX1", "wA1 bQ -wQ", "wA1 -", "wA1 -bQ-", "wA1 bZ"])
def test_malformed_move_strings(text):
    with pytest.raises(ValueError):
        string_to_move(text)


def test_move_str_uses_notation():
    assert str(Move(Tile.bG1, Tile.wS1, Direction.E)) == "bG1 wS1-"
    assert str(PASS_MOVE) == "pass"


def test_action_layout():
    assert ACTIONS_SHAPE == (28, 28, 7)
    assert NUM_DISTINCT_ACTIONS == 5489
    assert PASS_ACTION == 5488
    assert move_to_action(PASS_MOVE) == PASS_ACTION
    assert action_to_move(PASS_ACTION).is_pass


def test_opening_is_encoded_on_itself():
    move = Move(Tile.wA1, None, Direction.ABOVE)
    action = move_to_action(move)
    assert action == Tile.wA1 * 196 + Tile.wA1 * 7 + Direction.ABOVE
    assert action_to_move(action) == move


def test_every_action_id_round_trips():
    for action in range(NUM_DISTINCT_ACTIONS):
        assert move_to_action(action_to_move(action)) == action


def test_out_of_range_actions_rejected():
    with pytest.raises(ValueError):
        action_to_move(-1)
    with pytest.raises(ValueError):
        action_to_move(NUM_DISTINCT_ACTIONS)


def test_action_strings():
    action = string_to_action("bG1 wS1-")
    assert action == Tile.bG1 * 196 + Tile.wS1 * 7 + Direction.E
    assert action_to_string(action) == "bG1 wS1-"
    assert action_to_string(PASS_ACTION) == "pass"
