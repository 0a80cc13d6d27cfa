"""Screen-fit layout for the board and the piece tray."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from hex_puzzle.boards.piece import ClusterPiece
from hex_puzzle.config import (
    AREA_FILL_RATIO,
    BOARD_MAX_SCALE,
    HEX_SIZE,
    TRAY_HORIZONTAL_SPACING_PX,
    TRAY_MAX_ROW_WIDTH_PX,
    TRAY_MAX_SCALE,
    TRAY_ROW_GAP_PX,
)
from hex_puzzle.hex_coords import Coord, pixel_bounds

Bounds = tuple[float, float, float, float]


@dataclass
class Transform:
    """Translate + uniform scale from layer-local to global pixels."""

    x: float = 0.0
    y: float = 0.0
    scale: float = 1.0

    def __post_init__(self):
        if self.scale <= 0:
            raise ValueError(f"layer scale must be positive, got {self.scale}")

    def to_global(self, local_x: float, local_y: float) -> tuple[float, float]:
        return self.x + local_x * self.scale, self.y + local_y * self.scale

    def to_local(self, global_x: float, global_y: float) -> tuple[float, float]:
        return (global_x - self.x) / self.scale, (global_y - self.y) / self.scale


@dataclass(frozen=True)
class Area:
    """Axis-aligned screen rectangle in top-left pixel space."""

    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2


@dataclass(frozen=True)
class TrayLayout:
    """Home positions (tray-local) keyed by piece id, plus their joint bounds."""

    homes: dict[int, tuple[float, float]]
    bounds: Bounds


def fit_transform(bounds: Bounds, area: Area, max_scale: float) -> Transform:
    """Scale `bounds` into `area` and centre it there."""

    min_x, min_y, max_x, max_y = bounds
    width = max_x - min_x
    height = max_y - min_y
    if width <= 0 or height <= 0:
        scale = max_scale
    else:
        scale = min(
            area.width * AREA_FILL_RATIO / width,
            area.height * AREA_FILL_RATIO / height,
            max_scale,
        )

    pivot_x = (min_x + max_x) / 2
    pivot_y = (min_y + max_y) / 2
    center_x, center_y = area.center
    return Transform(center_x - pivot_x * scale, center_y - pivot_y * scale, scale)


def fit_board_transform(
    cells: Iterable[Coord],
    area: Area,
    hex_size: float = HEX_SIZE,
    max_scale: float = BOARD_MAX_SCALE,
) -> Transform:
    """Centre the rendered board cells in `area`, never upscaling past `max_scale`."""

    return fit_transform(pixel_bounds(cells, hex_size), area, max_scale)


def layout_tray(
    pieces: list[ClusterPiece],
    hex_size: float = HEX_SIZE,
    max_row_width: float = TRAY_MAX_ROW_WIDTH_PX,
    spacing: float = TRAY_HORIZONTAL_SPACING_PX,
    row_gap: float = TRAY_ROW_GAP_PX,
) -> TrayLayout:
    """Arrange pieces in centred rows that wrap at `max_row_width`.

    The whole group is centred vertically on y == 0.
    """

    rows: list[list[tuple[ClusterPiece, Bounds]]] = [[]]
    row_width = 0.0
    for piece in pieces:
        bounds = pixel_bounds(piece.coords, hex_size)
        width = bounds[2] - bounds[0]
        if row_width + width + spacing > max_row_width and rows[-1]:
            rows.append([])
            row_width = 0.0
        rows[-1].append((piece, bounds))
        row_width += width + spacing

    homes: dict[int, tuple[float, float]] = {}
    cursor_y = 0.0
    for row in rows:
        if not row:
            continue
        total_width = sum(b[2] - b[0] for _, b in row) + spacing * (len(row) - 1)
        row_height = max(b[3] - b[1] for _, b in row)
        cursor_x = -total_width / 2
        for piece, b in row:
            homes[piece.piece_id] = (cursor_x - b[0], cursor_y - b[1])
            cursor_x += (b[2] - b[0]) + spacing
        cursor_y += row_height + row_gap

    if not homes:
        return TrayLayout(homes={}, bounds=(0.0, 0.0, 0.0, 0.0))

    total_height = cursor_y - row_gap
    shift_y = total_height / 2
    homes = {piece_id: (x, y - shift_y) for piece_id, (x, y) in homes.items()}

    min_x = min_y = float("inf")
    max_x = max_y = float("-inf")
    for piece in pieces:
        hx, hy = homes[piece.piece_id]
        b = pixel_bounds(piece.coords, hex_size)
        min_x = min(min_x, hx + b[0])
        min_y = min(min_y, hy + b[1])
        max_x = max(max_x, hx + b[2])
        max_y = max(max_y, hy + b[3])
    return TrayLayout(homes=homes, bounds=(min_x, min_y, max_x, max_y))


def fit_tray_transform(tray: TrayLayout, area: Area, max_scale: float = TRAY_MAX_SCALE) -> Transform:
    return fit_transform(tray.bounds, area, max_scale)


__all__ = [
    "Area",
    "Transform",
    "TrayLayout",
    "fit_board_transform",
    "fit_transform",
    "fit_tray_transform",
    "layout_tray",
]
