"""Puzzle piece shapes produced by cluster generation."""

from __future__ import annotations

from dataclasses import dataclass

from hex_puzzle.hex_coords import Coord, translate


@dataclass(frozen=True)
class ClusterPiece:
    """Shape, solution anchor and colour of one draggable piece.

    `coords` are relative to the piece origin; min q and min r are both 0.
    `piece_id` is the identity used by occupancy.
    """

    piece_id: int
    coords: tuple[Coord, ...]
    root_pos: Coord
    color: tuple[int, int, int]

    @property
    def size(self) -> int:
        return len(self.coords)

    def cells_at(self, anchor: Coord) -> list[Coord]:
        return translate(self.coords, anchor)

    def solution_cells(self) -> list[Coord]:
        return self.cells_at(self.root_pos)


__all__ = ["ClusterPiece"]
