"""Interactive puzzle logic: scene state, occupancy, drag-snap and assisted play."""

from .scene import Layer, PieceNode, Scene, Transform
from .occupancy import GridOccupancy
from .events import PuzzleListener
from .animation import InstantAnimator, TweenAnimator
from .session import GameplaySession, LevelSessionStats
from .drag import DragSnapController
from .orchestrator import PuzzleOrchestrator, PuzzleState

__all__ = [
    "DragSnapController",
    "GameplaySession",
    "GridOccupancy",
    "InstantAnimator",
    "Layer",
    "LevelSessionStats",
    "PieceNode",
    "PuzzleListener",
    "PuzzleOrchestrator",
    "PuzzleState",
    "Scene",
    "Transform",
    "TweenAnimator",
]
