"""Built-in level presets for the demo front-end."""

from dataclasses import dataclass
from typing import Final

from hex_puzzle.boards.difficulty import Difficulty


@dataclass(frozen=True)
class LevelSpec:
    """A playable level: odd-row offset matrix plus difficulty."""

    level_id: str
    matrix: tuple[tuple[int, ...], ...]
    difficulty: Difficulty


LEVEL_HONEYCOMB: Final[LevelSpec] = LevelSpec(
    level_id="honeycomb",
    matrix=(
        (0, 1, 1, 1, 0),
        (1, 1, 1, 1, 0),
        (1, 1, 1, 1, 1),
        (1, 1, 1, 1, 0),
        (0, 1, 1, 1, 0),
    ),
    difficulty=Difficulty.EASY,
)

LEVEL_RIBBON: Final[LevelSpec] = LevelSpec(
    level_id="ribbon",
    matrix=(
        (1, 1, 1, 1, 1, 1, 1),
        (1, 1, 1, 1, 1, 1),
        (1, 1, 1, 1, 1, 1, 1),
    ),
    difficulty=Difficulty.MEDIUM,
)

LEVEL_CROWN: Final[LevelSpec] = LevelSpec(
    level_id="crown",
    matrix=(
        (1, 0, 1, 0, 1, 0, 1),
        (1, 1, 1, 1, 1, 1, 0),
        (1, 1, 1, 1, 1, 1, 1),
        (1, 1, 1, 1, 1, 1, 0),
        (0, 1, 1, 1, 1, 1, 0),
        (0, 1, 1, 1, 1, 0, 0),
    ),
    difficulty=Difficulty.HARD,
)

LEVELS: Final[tuple[LevelSpec, ...]] = (LEVEL_HONEYCOMB, LEVEL_RIBBON, LEVEL_CROWN)

__all__ = [
    "LevelSpec",
    "LEVEL_HONEYCOMB",
    "LEVEL_RIBBON",
    "LEVEL_CROWN",
    "LEVELS",
]
