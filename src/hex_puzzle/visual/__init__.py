"""Visual constants for the arcade front-end."""

from .theme import (
    COLOR_AMBER,
    COLOR_AQUA,
    COLOR_CHARCOAL,
    COLOR_FOG_GRAY,
    COLOR_HINT_BLUE,
    COLOR_NEAR_BLACK,
    COLOR_SLATE_GRAY,
    COLOR_SOFT_WHITE,
)

__all__ = [
    "COLOR_AMBER",
    "COLOR_AQUA",
    "COLOR_CHARCOAL",
    "COLOR_FOG_GRAY",
    "COLOR_HINT_BLUE",
    "COLOR_NEAR_BLACK",
    "COLOR_SLATE_GRAY",
    "COLOR_SOFT_WHITE",
]
