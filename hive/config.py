from __future__ import annotations

from dataclasses import dataclass, replace

from hive.tiles import EXPANSION_BUG_TYPES, BugType

DEFAULT_BOARD_RADIUS = 8
MAX_BOARD_RADIUS = 14
DEFAULT_MAX_GAME_LENGTH = 1000

BASE_GAME_TYPE = "Base"
EXPANSION_LETTERS = {
    BugType.MOSQUITO: "M",
    BugType.LADYBUG: "L",
    BugType.PILLBUG: "P",
}


@dataclass(frozen=True, slots=True)
class HiveConfig:
    """Rules configuration for one game.

    board_radius:
      - hard limit on how far from the origin a tile may ever be placed
      - values above MAX_BOARD_RADIUS are clamped
    uses_*:
      - which expansion bugs are in the box; disabled bugs are never placeable
    max_game_length:
      - move ceiling, reaching it is a draw
    """

    board_radius: int = DEFAULT_BOARD_RADIUS
    uses_mosquito: bool = True
    uses_ladybug: bool = True
    uses_pillbug: bool = True
    max_game_length: int = DEFAULT_MAX_GAME_LENGTH
    ansi_color_output: bool = False

    def __post_init__(self) -> None:
        if self.board_radius < 1:
            raise ValueError(f"board_radius must be >= 1, got {self.board_radius}")
        if self.board_radius > MAX_BOARD_RADIUS:
            object.__setattr__(self, "board_radius", MAX_BOARD_RADIUS)
        if self.max_game_length < 1:
            raise ValueError(f"max_game_length must be >= 1, got {self.max_game_length}")

    # ---------------------------------------------------------------------
    # Bug types
    # ---------------------------------------------------------------------

    def bug_type_enabled(self, bug_type: BugType) -> bool:
        if bug_type == BugType.MOSQUITO:
            return self.uses_mosquito
        if bug_type == BugType.LADYBUG:
            return self.uses_ladybug
        if bug_type == BugType.PILLBUG:
            return self.uses_pillbug
        return True

    def enabled_bug_types(self) -> list[BugType]:
        return [t for t in BugType if self.bug_type_enabled(t)]

    @property
    def num_bug_types(self) -> int:
        return len(self.enabled_bug_types())

    @property
    def square_dimensions(self) -> int:
        return 2 * self.board_radius + 1

    # ---------------------------------------------------------------------
    # UHP game type
    # ---------------------------------------------------------------------

    def game_type_string(self) -> str:
        letters = "".join(EXPANSION_LETTERS[t] for t in EXPANSION_BUG_TYPES if self.bug_type_enabled(t))
        if not letters:
            return BASE_GAME_TYPE
        return f"{BASE_GAME_TYPE}+{letters}"

    @staticmethod
    def from_game_type(game_type: str, **overrides) -> HiveConfig:
        """Parse a UHP GameTypeString such as "Base", "Base+M" or "Base+PLM"."""
        base, sep, letters = game_type.strip().partition("+")
        if base != BASE_GAME_TYPE:
            raise ValueError(f"Unsupported game type: {game_type!r}")
        if sep and not letters:
            raise ValueError(f"Missing expansions after '+': {game_type!r}")

        known = {v: k for k, v in EXPANSION_LETTERS.items()}
        enabled: set[BugType] = set()
        for ch in letters:
            bug_type = known.get(ch)
            if bug_type is None or bug_type in enabled:
                raise ValueError(f"Invalid expansion {ch!r} in game type {game_type!r}")
            enabled.add(bug_type)

        config = HiveConfig(
            uses_mosquito=BugType.MOSQUITO in enabled,
            uses_ladybug=BugType.LADYBUG in enabled,
            uses_pillbug=BugType.PILLBUG in enabled,
        )
        return replace(config, **overrides) if overrides else config
