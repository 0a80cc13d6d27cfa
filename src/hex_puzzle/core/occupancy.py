"""Which board cell is covered by which piece."""

from __future__ import annotations

import logging
from typing import Iterable

from hex_puzzle.boards.board import cell_key
from hex_puzzle.boards.piece import ClusterPiece
from hex_puzzle.hex_coords import Coord

logger = logging.getLogger(__name__)


class GridOccupancy:
    """Single source of truth for board coverage.

    Keys are always board cells. Pieces are matched by `piece_id`, so a
    piece can be removed even if the caller no longer knows its cells.
    """

    def __init__(self, board_cells: Iterable[Coord]):
        self._board_cells = frozenset(board_cells)
        self._occupants: dict[Coord, ClusterPiece] = {}

    @property
    def total_cells(self) -> int:
        return len(self._board_cells)

    @property
    def occupied_count(self) -> int:
        return len(self._occupants)

    def is_board_cell(self, q: int, r: int) -> bool:
        return (q, r) in self._board_cells

    def can_fit(self, target_cells: Iterable[Coord]) -> bool:
        for q, r in target_cells:
            cell = (q, r)
            if cell not in self._board_cells or cell in self._occupants:
                return False
        return True

    def place_piece(self, piece: ClusterPiece, target_cells: Iterable[Coord]):
        """Record `piece` on every target cell. Callers check `can_fit` first."""

        for q, r in target_cells:
            self._occupants[(q, r)] = piece

    def remove_piece(self, piece: ClusterPiece) -> list[Coord]:
        removed = [cell for cell, occupant in self._occupants.items() if occupant.piece_id == piece.piece_id]
        for cell in removed:
            del self._occupants[cell]
        if removed:
            logger.debug("Freed %d cells of piece %d", len(removed), piece.piece_id)
        return removed

    def get_occupant_at(self, q: int, r: int) -> ClusterPiece | None:
        return self._occupants.get((q, r))

    def cells_of(self, piece: ClusterPiece) -> list[Coord]:
        return sorted(cell for cell, occupant in self._occupants.items() if occupant.piece_id == piece.piece_id)

    def is_full(self) -> bool:
        return len(self._occupants) == len(self._board_cells)

    def clear(self):
        self._occupants.clear()

    def snapshot(self) -> dict[str, int]:
        """JSON-friendly `"q,r" -> piece_id` view."""

        return {cell_key(q, r): occupant.piece_id for (q, r), occupant in sorted(self._occupants.items())}


__all__ = ["GridOccupancy"]
