from hive.game_string import deserialize
from hive.turn_engine import HiveState

# Mid-game positions, each with some of the moves that must be legal in it.
# The pillbug game passes while white still has moves, so the games replay
# without legality checks.
REFERENCE_GAMES = {
    "queen": (
        "Base+MLP;InProgress;White[12];wG1;bG1 wG1-;wQ \\wG1;bQ bG1-;wG2 /wG1;bA1 bQ/;wG3 /wG2;bA1 bQ-;wB1 -wG3;bA1 bQ/;wB2 \\wB1;bA1 bQ-;wS1 \\wB2;bA1 bQ/;wS2 wS1/;bA1 bQ-;wA1 \\wS2;bA1 bQ/;wA2 wA1/;bA1 bQ-;wA3 wA2/;bA1 wA3-",
        "wQ \\bG1;wQ -wG1",
    ),
    "grasshopper": (
        "Base+MLP;InProgress;White[11];wG1;bG1 wG1-;wQ /wG1;bQ bG1-;wS1 wQ\\;bA1 bQ-;wB1 /wS1;bA1 -wQ;wB1 wS1\\;bA2 bQ-;wB1 /wS1;bA2 wG1\\;wB1 wS1\\;bA3 bQ-;wB1 /wS1;bS1 bQ\\;wB1 wS1;bS1 wB1\\;wB1 /wB1;bA3 -wB1",
        "wG1 bQ-;wG1 bA2\\;wG1 bA1\\;wG2 \\wG1;wS2 \\wG1;wA1 \\wG1;wB2 \\wG1",
    ),
    "ant": (
        "Base+MLP;InProgress;White[13];wS1;bB1 wS1-;wQ -wS1;bQ bB1-;wB1 \\wQ;bG1 bQ/;wB2 \\wB1;bG2 bG1/;wS2 \\wB2;bS1 bG2/;wA1 \\wS1;bB2 bS1/;wA2 \\wS2;bG3 \\bB2;wA1 -bG1;bA1 \\bG3;wG1 wA2/;bS2 -bA1;wG2 wG1/;bA2 -bS2;wA3 wG2-;bA3 bS2\\;wG3 wA3\\;bA3 wG3\\",
        "wA1 -bG2;wA1 -bS1;wA1 /bG3;wA1 bS2\\;wA1 bA2\\;wA1 /bA2;wA1 bA3-;wA1 bA3\\;wA1 /bA3;wA1 /wG3;wA1 wG2\\;wA1 wG1\\;wA1 wB2/;wA1 wB1/;wA1 \\wS1;wA1 \\bB1",
    ),
    "spider": (
        "Base+MLP;InProgress;White[12];wG1;bA1 wG1-;wS1 \\wG1;bQ bA1-;wQ /wG1;bG1 bQ\\;wG2 wQ\\;bB1 /bG1;wB1 /wG2;bG2 bG1\\;wG3 /wB1;bG2 -bB1;wB2 wG3\\;bA1 bG1\\;wA1 wB2-;bA1 bB1\\;wA2 wA1/;bA1 bG1-;wS2 wA2-;bA1 bG1\\;wA3 wS2\\;bA1 wA3-",
        "wS1 \\bQ;wS1 /bQ;wS1 wG1\\;wS1 /wQ",
    ),
    "spider_second": (
        "Base+MLP;InProgress;White[12];wG1;bA1 wG1/;wB1 /wG1;bA2 bA1-;wQ wB1\\;bQ bA2\\;wB2 /wQ;bG1 bQ\\;wS1 wG1\\;bB1 /bG1;wG2 /wB2;bG2 bG1\\;wG3 wG2\\;bG2 wS1\\;wA1 wG3-;bA1 -wB1;wS2 wA1/;bA3 bG1\\;wA2 wS2-;bA2 \\wG1;wA3 wA2\\;bA3 wA3-",
        "wS1 bA2/;wS1 bQ/;wS1 wG1/;wS1 \\bQ",
    ),
    "beetle": (
        "Base+MLP;InProgress;White[12];wB1;bB1 wB1-;wQ \\wB1;bQ bB1/;wG1 /wB1;bB2 bB1\\;wA1 /wG1;bA1 bQ\\;wG2 -wA1;bQ \\bB1;wB2 /wG2;bA2 \\bA1;wG3 wB2\\;bA2 \\wQ;wA2 wG3-;bB2 wB1\\;wS1 wA2\\;bA1 bB1\\;wS2 wS1-;bA1 bB1-;wA3 wS2/;bA1 \\wA3",
        "wB1 wQ;wB1 bQ;wB1 bB1;wB1 bB2;wB1 wG1",
    ),
    "mosquito": (
        "Base+M;InProgress;White[13];wM;bG1 wM-;wS1 /wM;bQ bG1-;wQ /wS1;bB1 bG1\\;wB1 /wQ;bB1 wM\\;wS2 /wB1;bA1 bQ-;wB2 wS2\\;bA1 bQ\\;wG1 wB2-;bA1 bQ-;wG2 wG1/;bA1 bQ\\;wG3 wG2/;bA1 bQ-;wA1 wG3-;bA1 bQ/;wA2 wA1-;bA1 bQ-;wA3 wA2\\;bA1 /wA3",
        "wM bQ-;wM bB1\\;wM /wS2;wM \\bG1;wM bG1;wM bB1;wM wS1;wM \\wS1;wM bQ/;wM -wQ",
    ),
    "ladybug": (
        "Base+L;InProgress;White[14];wL;bL wL/;wQ -wL;bQ bL/;wQ -bL;bA1 bQ/;wB1 \\wQ;bA1 bQ-;wS1 \\wB1;bA1 bQ/;wB2 \\wS1;bA1 bQ-;wS2 wB2/;bA1 bQ/;wA1 wS2-;bA1 bQ-;wG1 wA1/;bA1 bQ/;wG2 wG1-;bA1 bQ-;wA2 wG2\\;bA1 bQ/;wA3 wA2-;bA1 bQ-;wG3 wA3/;bA1 \\wG3",
        "wL wB1/;wL -bQ;wL /wB1;wL /wS1;wL bQ\\;wL bL\\;wL \\bQ;wL bQ/;wL bQ-;wL /wQ",
    ),
    # white passes and bQ moves next to wP: bQ cannot be thrown straight back
    "pillbug_last_moved": (
        "Base+P;InProgress;White[15];wP;bS1 wP-;wQ /wP;bQ bS1-;wB1 -wQ;bB1 bS1\\;wG1 wB1\\;bB1 wP\\;wS1 wG1\\;bQ bS1/;wB1 -wP;bB1 wQ;wG2 wS1\\;bB1 wB1;wG3 wG2\\;bA1 bQ\\;wS2 wG3-;bA1 bS1\\;wA1 wS2/;bA1 bQ\\;wA2 wA1/;bA1 bS1\\;wA3 wA2/;bA1 bQ\\;wB2 wA3/;bA1 wB2/;pass;bQ \\bS1",
        "bS1 -bQ;bS1 wP\\",
    ),
}


def build_reference_game(name: str) -> HiveState:
    game, _ = REFERENCE_GAMES[name]
    return deserialize(game, validate=False)


def reference_moves(name: str) -> list[str]:
    _, moves = REFERENCE_GAMES[name]
    return moves.split(";")
