"""Axial/offset coordinate helpers for pointy-top hex boards.

Boards are stored as odd-row offset matrices but every piece of geometry
(board cells, piece shapes, occupancy keys) is addressed in axial form.
Pixel space uses the pointy-top axial projection exclusively; the inverse
`pixel_to_axial` is the only way a pixel position is turned back into a cell.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from hex_puzzle.config import HEX_SIZE

Coord = tuple[int, int]

_SQRT3 = math.sqrt(3)

AXIAL_DIRECTIONS: tuple[Coord, ...] = (
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
)


@dataclass(frozen=True)
class HexSteps:
    """Pixel deltas derived from the canonical projection."""

    step_x: float
    step_y: float
    odd_row_offset_x: float


_STEP_CACHE: dict[float, HexSteps] = {}


def axial_to_offset(q: int, r: int) -> Coord:
    """Axial -> odd-row offset."""

    return q + r // 2, r


def offset_to_axial(q: int, r: int) -> Coord:
    """Odd-row offset -> axial."""

    return q - r // 2, r


def offset_to_pixel(q: int, r: int, size: float = HEX_SIZE) -> tuple[float, float]:
    """Project an axial cell to the pixel centre of its pointy-top hex.

    The name is kept from the level format, but the input is axial.
    """

    x = size * (_SQRT3 * q + _SQRT3 / 2 * r)
    y = size * (3 / 2 * r)
    return x, y


def pixel_to_axial(x: float, y: float, size: float = HEX_SIZE) -> Coord:
    """Return the axial cell whose hex contains the pixel (x, y)."""

    q = (_SQRT3 / 3 * x - 1 / 3 * y) / size
    r = (2 / 3 * y) / size
    return hex_round(q, r)


def hex_round(q: float, r: float) -> Coord:
    """Round fractional axial coordinates to the nearest cell.

    The component with the largest rounding error is rebuilt from the other
    two so the cube constraint q + r + s == 0 still holds.
    """

    s = -q - r
    rq = _round_half_up(q)
    rr = _round_half_up(r)
    rs = _round_half_up(s)

    q_diff = abs(rq - q)
    r_diff = abs(rr - r)
    s_diff = abs(rs - s)

    if q_diff > r_diff and q_diff > s_diff:
        rq = -rr - rs
    elif r_diff > s_diff:
        rr = -rq - rs
    return rq, rr


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def hex_steps(size: float = HEX_SIZE) -> HexSteps:
    """Cached column/row steps measured from `offset_to_pixel` itself."""

    cached = _STEP_CACHE.get(size)
    if cached is not None:
        return cached

    x00, y00 = offset_to_pixel(0, 0, size)
    x10, _ = offset_to_pixel(1, 0, size)
    x01, y01 = offset_to_pixel(0, 1, size)
    steps = HexSteps(
        step_x=x10 - x00,
        step_y=y01 - y00,
        odd_row_offset_x=x01 - x00,
    )
    _STEP_CACHE[size] = steps
    return steps


def neighbor_coords(q: int, r: int) -> list[Coord]:
    """Return the six axial neighbours without bounds filtering."""

    return [(q + dq, r + dr) for dq, dr in AXIAL_DIRECTIONS]


def translate(coords: Iterable[Coord], anchor: Coord) -> list[Coord]:
    """Shift relative coordinates so their origin lands on `anchor`."""

    aq, ar = anchor
    return [(aq + q, ar + r) for q, r in coords]


def hex_corners(cx: float, cy: float, size: float = HEX_SIZE) -> tuple[tuple[float, float], ...]:
    """Corner points of a pointy-top hex centred on (cx, cy)."""

    return tuple(
        (
            cx + size * math.cos(math.radians(60 * i - 30)),
            cy + size * math.sin(math.radians(60 * i - 30)),
        )
        for i in range(6)
    )


def pixel_bounds(coords: Iterable[Coord], size: float = HEX_SIZE) -> tuple[float, float, float, float]:
    """Return (min_x, min_y, max_x, max_y) of the rendered hexes.

    Widths come from the cached `hex_steps`, so layout and hit-testing
    follow the projection.

    An empty input yields a zero-size box at the origin.
    """

    half_width = hex_steps(size).step_x / 2
    min_x = min_y = math.inf
    max_x = max_y = -math.inf
    for q, r in coords:
        x, y = offset_to_pixel(q, r, size)
        min_x = min(min_x, x - half_width)
        max_x = max(max_x, x + half_width)
        min_y = min(min_y, y - size)
        max_y = max(max_y, y + size)

    if min_x == math.inf:
        return 0.0, 0.0, 0.0, 0.0
    return min_x, min_y, max_x, max_y


__all__ = [
    "AXIAL_DIRECTIONS",
    "Coord",
    "HexSteps",
    "axial_to_offset",
    "hex_corners",
    "hex_round",
    "hex_steps",
    "neighbor_coords",
    "offset_to_axial",
    "offset_to_pixel",
    "pixel_bounds",
    "pixel_to_axial",
    "translate",
]
