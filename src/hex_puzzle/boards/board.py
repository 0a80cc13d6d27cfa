"""Board cells and the level matrix codec."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from hex_puzzle.hex_coords import Coord, axial_to_offset, offset_to_axial

Matrix = list[list[int]]


def cell_key(q: int, r: int) -> str:
    return f"{q},{r}"


def parse_cell_key(key: str) -> Coord:
    q, r = key.split(",")
    return int(q), int(r)


def matrix_to_axial(matrix) -> list[Coord]:
    """Axial coordinates of every `1` in an odd-row offset matrix.

    Rows may have different lengths; any value other than 1 is empty.
    Cells come out in row-major matrix order.
    """

    cells = []
    for r, row in enumerate(matrix or ()):
        for q_offset, value in enumerate(row):
            if value == 1:
                cells.append(offset_to_axial(q_offset, r))
    return cells


def axial_to_matrix(cells: Iterable[Coord]) -> Matrix:
    """Crop a set of axial cells to the smallest offset matrix holding them."""

    offsets = [axial_to_offset(q, r) for q, r in set(cells)]
    if not offsets:
        return [[1]]

    min_col = min(col for col, _ in offsets)
    max_col = max(col for col, _ in offsets)
    min_row = min(row for _, row in offsets)
    max_row = max(row for _, row in offsets)

    # Rows keep their parity so the odd-row stagger survives the crop.
    if min_row % 2 != 0:
        min_row -= 1

    matrix = [[0] * (max_col - min_col + 1) for _ in range(max_row - min_row + 1)]
    for col, row in offsets:
        matrix[row - min_row][col - min_col] = 1
    return matrix


@dataclass(frozen=True)
class HexBoard:
    """Immutable set of playable cells for one level."""

    cells: frozenset[Coord]

    @classmethod
    def from_matrix(cls, matrix) -> "HexBoard":
        return cls(frozenset(matrix_to_axial(matrix)))

    @property
    def cell_count(self) -> int:
        return len(self.cells)

    def contains(self, q: int, r: int) -> bool:
        return (q, r) in self.cells

    def keys(self) -> list[str]:
        return sorted(cell_key(q, r) for q, r in self.cells)

    def to_matrix(self) -> Matrix:
        return axial_to_matrix(self.cells)


__all__ = [
    "HexBoard",
    "Matrix",
    "axial_to_matrix",
    "cell_key",
    "matrix_to_axial",
    "parse_cell_key",
]
