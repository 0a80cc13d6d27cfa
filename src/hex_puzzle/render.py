"""Arcade-based rendering for the hex puzzle."""

from __future__ import annotations

import arcade

from hex_puzzle.config import (
    BB_HEIGHT,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    UI_GRID_LINE_WIDTH_PX,
    UI_PIECE_LINE_WIDTH_PX,
    UI_PREVIEW_ALPHA,
    UI_STATUS_SEPARATOR,
)
from hex_puzzle.core import Layer, PuzzleState
from hex_puzzle.hex_coords import hex_corners, offset_to_pixel
from hex_puzzle.runtime import TextCache
from hex_puzzle.visual import (
    COLOR_AMBER,
    COLOR_AQUA,
    COLOR_CHARCOAL,
    COLOR_FOG_GRAY,
    COLOR_HINT_BLUE,
    COLOR_NEAR_BLACK,
    COLOR_SLATE_GRAY,
    COLOR_SOFT_WHITE,
)

_TEXT_CACHE = TextCache(max_entries=512)
_LAYER_DRAW_ORDER = (Layer.TRAY, Layer.BOARD, Layer.DRAG)


def load_font_spec(size_px: int, family: str) -> dict[str, object]:
    return {"name": family, "size": int(size_px)}


def draw_frame(window, font_bar, puzzle, view):
    """Draw board, pieces, overlays and the status bar for one frame."""

    window.clear(COLOR_CHARCOAL)
    scene = puzzle.scene
    board = scene.transform(Layer.BOARD)
    board_radius = scene.hex_size * board.scale

    for q, r in sorted(puzzle.board.cells):
        _draw_hex(board.to_global(*offset_to_pixel(q, r, scene.hex_size)), board_radius, COLOR_SLATE_GRAY)

    if view.preview_cells:
        preview_color = (*view.preview_color, int(UI_PREVIEW_ALPHA))
        for q, r in view.preview_cells:
            _draw_hex(board.to_global(*offset_to_pixel(q, r, scene.hex_size)), board_radius, preview_color)

    for layer in _LAYER_DRAW_ORDER:
        for node in puzzle.nodes:
            if node.layer is layer:
                _draw_node(scene, node)

    if view.hint_visible:
        for q, r in view.hint_cells:
            center = board.to_global(*offset_to_pixel(q, r, scene.hex_size))
            points = _to_arcade_points(hex_corners(center[0], center[1], board_radius))
            arcade.draw_polygon_outline(points, COLOR_HINT_BLUE, int(UI_GRID_LINE_WIDTH_PX) + 2)

    draw_bottom_bar(font_bar, puzzle, view)


def draw_bottom_bar(font, puzzle, view):
    arcade.draw_lbwh_rectangle_filled(0, 0, SCREEN_WIDTH, BB_HEIGHT, COLOR_NEAR_BLACK)

    separator = UI_STATUS_SEPARATOR if UI_STATUS_SEPARATOR else " / "
    occupancy = puzzle.occupancy
    segments = [
        (f"Level: {puzzle.level_id}", COLOR_SOFT_WHITE),
        (separator, COLOR_SOFT_WHITE),
        (f"Moves: {puzzle.session.moves}", COLOR_SOFT_WHITE),
        (separator, COLOR_SOFT_WHITE),
        (f"{occupancy.occupied_count}/{occupancy.total_cells}", COLOR_AQUA),
        (separator, COLOR_SOFT_WHITE),
        _status_segment(puzzle, view),
    ]
    _draw_centered_status_segments(
        segments=segments,
        font_name=str(font["name"]),
        font_size=int(font["size"]),
        bar_height=BB_HEIGHT,
    )


def _status_segment(puzzle, view):
    if view.completed_stats is not None:
        return f"Solved in {view.completed_stats.duration_seconds:.0f}s", COLOR_AMBER
    if puzzle.state is PuzzleState.ORCHESTRATING:
        return "Solving...", COLOR_AMBER
    return "H hint  S solve  A auto  R reset  N next", COLOR_FOG_GRAY


def _draw_centered_status_segments(segments, font_name: str, font_size: int, bar_height: int):
    text_objects = []
    total_width = 0.0
    for text, color in segments:
        text_obj = _TEXT_CACHE.get_text(
            text=text,
            color=color,
            font_size=font_size,
            font_name=font_name,
            anchor_x="left",
            anchor_y="center",
        )
        text_objects.append(text_obj)
        total_width += float(text_obj.content_width)

    cursor_x = (SCREEN_WIDTH - total_width) / 2.0
    center_y = bar_height / 2.0
    for text_obj in text_objects:
        text_obj.x = cursor_x
        text_obj.y = center_y
        text_obj.draw()
        cursor_x += float(text_obj.content_width)


def _draw_node(scene, node):
    radius = scene.hex_size * scene.global_scale(node)
    for q, r in node.piece.coords:
        center = scene.node_to_global(node, *offset_to_pixel(q, r, scene.hex_size))
        _draw_hex(center, radius, node.piece.color, outline=COLOR_NEAR_BLACK, line_width=UI_PIECE_LINE_WIDTH_PX)


def _draw_hex(center, radius, fill, outline=COLOR_CHARCOAL, line_width=UI_GRID_LINE_WIDTH_PX):
    points = _to_arcade_points(hex_corners(center[0], center[1], radius))
    arcade.draw_polygon_filled(points, fill)
    arcade.draw_polygon_outline(points, outline, max(1, int(line_width)))


def _to_arcade_y(y_top: float) -> float:
    return SCREEN_HEIGHT - y_top


def _to_arcade_points(points):
    return [(px, _to_arcade_y(py)) for px, py in points]
