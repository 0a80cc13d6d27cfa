"""Runtime helpers for the hex puzzle."""

from .helpers import configure_logging

try:
    from .arcade_runtime import ArcadeFrameClock, ArcadeWindowController, MouseEvent, TextCache
except ModuleNotFoundError:
    pass

__all__ = [
    "ArcadeFrameClock",
    "ArcadeWindowController",
    "MouseEvent",
    "TextCache",
    "configure_logging",
]
