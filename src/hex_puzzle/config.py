"""Tuning constants for the hex puzzle."""

from typing import Final

# Geometry
HEX_SIZE: Final[float] = 50.0
HIT_RADIUS_PX: Final[float] = 60.0

# Generation
GENERATION_MAX_ATTEMPTS: Final[int] = 10
GIANT_PIECE_SLACK: Final[int] = 2
FALLBACK_SIZE_MIN: Final[int] = 2
FALLBACK_SIZE_MAX: Final[int] = 4

PIECE_PALETTE: Final[tuple[tuple[int, int, int], ...]] = (
    (255, 87, 51),
    (51, 255, 87),
    (51, 87, 255),
    (243, 51, 255),
    (255, 243, 51),
    (0, 206, 209),
)

# Tray layout
TRAY_MAX_ROW_WIDTH_PX: Final[float] = 1200.0
TRAY_HORIZONTAL_SPACING_PX: Final[float] = 60.0
TRAY_ROW_GAP_PX: Final[float] = 50.0
TRAY_MAX_SCALE: Final[float] = 0.8
BOARD_MAX_SCALE: Final[float] = 1.0
AREA_FILL_RATIO: Final[float] = 0.9

# Assisted play
MOVE_DURATION_SECONDS: Final[float] = 0.5
HINT_BLINK_INTERVAL_SECONDS: Final[float] = 0.2
HINT_BLINK_COUNT: Final[int] = 6

# Window
SCREEN_WIDTH: Final[int] = 900
SCREEN_HEIGHT: Final[int] = 1000
BB_HEIGHT: Final[int] = 36
FPS: Final[int] = 60
WINDOW_TITLE: Final[str] = "Hex Puzzle"

# Areas in top-left screen space: (x, y, width, height)
GRID_AREA: Final[tuple[float, float, float, float]] = (40.0, 40.0, 820.0, 520.0)
TRAY_AREA: Final[tuple[float, float, float, float]] = (40.0, 580.0, 820.0, 370.0)

FONT_NAME_BAR: Final[str] = "Arial"
FONT_SIZE_BAR: Final[int] = 16
UI_GRID_LINE_WIDTH_PX: Final[int] = 2
UI_PIECE_LINE_WIDTH_PX: Final[int] = 2
UI_PREVIEW_ALPHA: Final[int] = 150
UI_STATUS_SEPARATOR: Final[str] = "   /   "
