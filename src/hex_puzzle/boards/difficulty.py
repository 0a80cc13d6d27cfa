"""Difficulty levels and their piece-size ranges."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Final

from hex_puzzle.config import FALLBACK_SIZE_MAX, FALLBACK_SIZE_MIN


class Difficulty(IntEnum):
    VERY_EASY = 0
    EASY = 1
    MEDIUM = 2
    HARD = 3
    VERY_HARD = 4


@dataclass(frozen=True)
class SizeRange:
    """Inclusive [min, max] target size of a generated piece."""

    min: int
    max: int

    def __post_init__(self):
        if self.min < 1 or self.max < 1:
            raise ValueError("piece size range must be positive")
        if self.max < self.min:
            raise ValueError(f"piece size range has min ({self.min}) greater than max ({self.max})")


SIZE_RANGES: Final[dict[Difficulty, SizeRange]] = {
    Difficulty.VERY_EASY: SizeRange(5, 7),
    Difficulty.EASY: SizeRange(4, 7),
    Difficulty.MEDIUM: SizeRange(3, 5),
    Difficulty.HARD: SizeRange(3, 5),
    Difficulty.VERY_HARD: SizeRange(2, 4),
}

FALLBACK_SIZE_RANGE: Final[SizeRange] = SizeRange(FALLBACK_SIZE_MIN, FALLBACK_SIZE_MAX)


def size_range_for(difficulty) -> SizeRange:
    """Look up the size range; unknown values fall back to 2-4."""

    try:
        return SIZE_RANGES[Difficulty(difficulty)]
    except (ValueError, KeyError):
        return FALLBACK_SIZE_RANGE


__all__ = [
    "Difficulty",
    "SizeRange",
    "SIZE_RANGES",
    "FALLBACK_SIZE_RANGE",
    "size_range_for",
]
