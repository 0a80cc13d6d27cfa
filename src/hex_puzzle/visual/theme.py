"""Colour constants used by the puzzle front-end."""

from typing import Final

COLOR_CHARCOAL: Final[tuple[int, int, int]] = (45, 45, 45)
COLOR_NEAR_BLACK: Final[tuple[int, int, int]] = (20, 20, 20)
COLOR_SLATE_GRAY: Final[tuple[int, int, int]] = (80, 90, 100)
COLOR_FOG_GRAY: Final[tuple[int, int, int]] = (200, 200, 200)
COLOR_SOFT_WHITE: Final[tuple[int, int, int]] = (240, 240, 240)
COLOR_AQUA: Final[tuple[int, int, int]] = (50, 215, 200)
COLOR_AMBER: Final[tuple[int, int, int]] = (255, 190, 60)
COLOR_HINT_BLUE: Final[tuple[int, int, int]] = (0, 170, 255)
