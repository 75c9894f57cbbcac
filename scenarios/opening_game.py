from hive.game_string import deserialize
from hive.turn_engine import HiveState

# spiders first, queens on the second turn, all along the q axis
OPENING_MOVES = ["wS1", "bS1 wS1-", "wQ -wS1", "bQ bS1-"]
OPENING_GAME = "Base+MLP;InProgress;White[3];" + ";".join(OPENING_MOVES)

# three turns each without a queen: white must place it now
QUEENLESS_MOVES = ["wS1", "bS1 wS1-", "wA1 -wS1", "bA1 bS1-", "wG1 -wA1", "bG1 bA1-"]
QUEENLESS_GAME = "Base+MLP;InProgress;White[4];" + ";".join(QUEENLESS_MOVES)


def build_game() -> HiveState:
    return deserialize(OPENING_GAME)


def build_queenless_game() -> HiveState:
    return deserialize(QUEENLESS_GAME)
