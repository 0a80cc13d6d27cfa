"""Output collaborator interface.

Rendering, audio and scoring layers subclass `PuzzleListener` and override
what they care about. Every hook defaults to a no-op.
"""

from __future__ import annotations

from hex_puzzle.boards.piece import ClusterPiece
from hex_puzzle.hex_coords import Coord


class PuzzleListener:
    def on_preview(self, cells: list[Coord], color: tuple[int, int, int]):
        pass

    def on_preview_cleared(self):
        pass

    def on_piece_placed(self, piece: ClusterPiece, cells: list[Coord]):
        pass

    def on_piece_removed(self, piece: ClusterPiece, cells: list[Coord]):
        pass

    def on_piece_returned(self, piece: ClusterPiece):
        pass

    def on_hint(self, cells: list[Coord]):
        pass

    def on_hint_cleared(self, cells: list[Coord]):
        pass

    def on_level_complete(self, stats):
        pass


__all__ = ["PuzzleListener"]
