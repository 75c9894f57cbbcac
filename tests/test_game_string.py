import pytest

from hive.game_string import deserialize, serialize
from hive.hexgrid import HivePosition
from hive.tiles import Tile
from scenarios.opening_game import OPENING_GAME, OPENING_MOVES


def test_serialize_new_game(state):
    assert serialize(state) == "Base+MLP;NotStarted;White[1]"


def test_serialize_opening(opening):
    assert serialize(opening) == OPENING_GAME
    assert opening.moves_string() == ";".join(OPENING_MOVES)


def test_round_trip(opening):
    restored = deserialize(serialize(opening))
    assert restored.history == opening.history
    assert restored.turn_string() == opening.turn_string()
    for t in Tile:
        assert restored.board.position_of(t) == opening.board.position_of(t)


def test_bare_game_type_is_new_game():
    state = deserialize("Base")
    assert state.move_number == 0
    assert not state.config.uses_pillbug
    assert len(state.legal_moves()) == 10


def test_config_overrides():
    state = deserialize(OPENING_GAME, board_radius=4)
    assert state.board.radius == 4
    assert state.config.game_type_string() == "Base+MLP"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "Base+MLP;InProgress",
        # turn does not match the replayed moves
        "Base+MLP;InProgress;Black[3];wS1;bS1 wS1-;wQ -wS1;bQ bS1-",
        # queen cannot open
        "Base+MLP;InProgress;Black[1];wQ",
        # pillbug is not in the base game
        "Base;InProgress;Black[1];wP",
        # recorded result disagrees
        "Base+MLP;WhiteWins;White[3];wS1;bS1 wS1-;wQ -wS1;bQ bS1-",
        "Base+MLP;InProgress;White[2];wS1;;bS1 wS1-",
        "Base+MLP;InProgress;White[2];wS1;bS1 wS1+",
    ],
)
def test_bad_game_strings(text):
    with pytest.raises(ValueError):
        deserialize(text)


def test_unvalidated_replay_accepts_any_order():
    # placing the queen first is not legal, but replays when asked to skip checks
    state = deserialize("Base+MLP;InProgress;Black[1];wQ", validate=False)
    assert state.board.is_in_play(Tile.wQ)


def test_stacked_beetle_may_name_itself_when_stepping_down():
    # wB1 climbs onto wQ, then steps down south-west of its own cell
    text = (
        "Base;InProgress;Black[5];wS1;bS1 wS1-;wQ -wS1;bQ bS1-;"
        "wB1 -wQ;bB1 bQ-;wB1 wQ;bB1 bQ;wB1 /wB1"
    )
    state = deserialize(text)
    assert state.board.position_of(Tile.wB1) == HivePosition(-2, 1)
    assert serialize(state) == text
