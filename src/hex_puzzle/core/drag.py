"""Pointer-driven pick-up, snap preview and release of puzzle pieces."""

from __future__ import annotations

import logging
import math

from hex_puzzle.config import HIT_RADIUS_PX
from hex_puzzle.core.events import PuzzleListener
from hex_puzzle.core.occupancy import GridOccupancy
from hex_puzzle.core.scene import Layer, PieceNode, Scene
from hex_puzzle.hex_coords import Coord

logger = logging.getLogger(__name__)


class DragSnapController:
    """Turns continuous pointer motion into a legal-or-illegal placement.

    At most one piece is held at a time. Picking a piece up from the board
    frees its cells immediately, so occupancy never includes the held piece.
    Pointer positions are in global space.
    """

    def __init__(
        self,
        scene: Scene,
        occupancy: GridOccupancy,
        nodes: list[PieceNode],
        listener: PuzzleListener | None = None,
        hit_radius: float = HIT_RADIUS_PX,
    ):
        if hit_radius <= 0:
            raise ValueError("hit_radius must be positive")
        self.scene = scene
        self.occupancy = occupancy
        self.nodes = nodes
        self.listener = listener or PuzzleListener()
        self.hit_radius = float(hit_radius)
        self.enabled = True

        self.held: PieceNode | None = None
        self.drag_offset = (0.0, 0.0)
        self.last_anchor: Coord | None = None

    @property
    def is_holding(self) -> bool:
        return self.held is not None

    def set_enabled(self, enabled: bool):
        self.enabled = bool(enabled)
        if not self.enabled:
            self.force_release()

    def pick_node(self, global_x: float, global_y: float) -> PieceNode | None:
        """Nearest tray/board piece whose visual centre is within the hit radius."""

        closest = None
        best = self.hit_radius
        for node in self.nodes:
            if node.layer is Layer.DRAG:
                continue
            cx, cy = self.scene.visual_center_global(node)
            dist = math.hypot(global_x - cx, global_y - cy)
            if dist < best:
                best = dist
                closest = node
        return closest

    def pointer_down(self, global_x: float, global_y: float) -> bool:
        if not self.enabled or self.held is not None:
            return False

        node = self.pick_node(global_x, global_y)
        if node is None or node.busy:
            return False

        if node.layer is Layer.BOARD:
            freed = self.occupancy.remove_piece(node.piece)
            if freed:
                self.listener.on_piece_removed(node.piece, freed)

        self.scene.reparent(node, Layer.DRAG)
        node.scale = self.scene.transform(Layer.BOARD).scale / self.scene.transform(Layer.DRAG).scale

        layer_x, layer_y = self.scene.transform(Layer.DRAG).to_local(global_x, global_y)
        self.drag_offset = (layer_x - node.x, layer_y - node.y)
        self.held = node
        self.last_anchor = None
        logger.debug("Picked up piece %d", node.piece_id)
        return True

    def pointer_move(self, global_x: float, global_y: float) -> list[Coord] | None:
        """Move the held piece; return the previewed footprint if it fits."""

        node = self.held
        if node is None:
            return None

        self._follow_pointer(node, global_x, global_y)
        cells = self._candidate_cells(node)
        if self.occupancy.can_fit(cells):
            self.listener.on_preview(cells, node.piece.color)
            return cells

        self.listener.on_preview_cleared()
        return None

    def pointer_up(self, global_x: float, global_y: float) -> bool:
        """Drop the held piece. Returns True if it was committed to the board."""

        node = self.held
        if node is None:
            return False

        self._follow_pointer(node, global_x, global_y)
        cells = self._candidate_cells(node)
        anchor = self.last_anchor
        placed = False
        if anchor is not None and self.occupancy.can_fit(cells):
            self.scene.place_on_board(node, anchor)
            self.occupancy.place_piece(node.piece, cells)
            self.listener.on_piece_placed(node.piece, cells)
            logger.debug("Placed piece %d at %s", node.piece_id, anchor)
            placed = True
        else:
            logger.debug("Piece %d does not fit at %s", node.piece_id, anchor)
            self.return_to_tray(node)

        self.listener.on_preview_cleared()
        self._clear_hold()
        return placed

    def force_release(self) -> bool:
        """Send the held piece back to the tray without touching occupancy."""

        node = self.held
        if node is None:
            return False

        self.return_to_tray(node)
        self.listener.on_preview_cleared()
        self._clear_hold()
        logger.debug("Drag of piece %d cancelled", node.piece_id)
        return True

    def return_to_tray(self, node: PieceNode):
        self.scene.send_home(node)
        self.listener.on_piece_returned(node.piece)

    def _follow_pointer(self, node: PieceNode, global_x: float, global_y: float):
        layer_x, layer_y = self.scene.transform(Layer.DRAG).to_local(global_x, global_y)
        node.x = layer_x - self.drag_offset[0]
        node.y = layer_y - self.drag_offset[1]

    def _candidate_cells(self, node: PieceNode) -> list[Coord]:
        anchor = self.scene.anchor_cell(node)
        self.last_anchor = anchor
        return node.piece.cells_at(anchor)

    def _clear_hold(self):
        self.held = None
        self.drag_offset = (0.0, 0.0)
        self.last_anchor = None


__all__ = ["DragSnapController"]
