"""Scene graph state for pieces: which layer holds them and where.

Three layers share one global (screen) space: the tray, the drag layer and
the board. Each layer maps its local pixels to global pixels through a
`Transform`. A piece node's local origin is the centre of its relative
(0, 0) tile, which is also the point snapped to a board cell.
"""

from __future__ import annotations

from enum import Enum

from hex_puzzle.boards.piece import ClusterPiece
from hex_puzzle.config import HEX_SIZE
from hex_puzzle.hex_coords import Coord, offset_to_pixel, pixel_bounds, pixel_to_axial
from hex_puzzle.layout import Transform


class Layer(Enum):
    TRAY = "tray"
    DRAG = "drag"
    BOARD = "board"


class PieceNode:
    """Live placement state of one piece."""

    def __init__(self, piece: ClusterPiece, hex_size: float = HEX_SIZE):
        self.piece = piece
        self.layer = Layer.TRAY
        self.x = 0.0
        self.y = 0.0
        self.scale = 1.0
        self.home_x = 0.0
        self.home_y = 0.0
        self.busy = False

        min_x, min_y, max_x, max_y = pixel_bounds(piece.coords, hex_size)
        self.local_bounds = (min_x, min_y, max_x, max_y)
        self.visual_center = ((min_x + max_x) / 2, (min_y + max_y) / 2)

    @property
    def piece_id(self) -> int:
        return self.piece.piece_id

    def __repr__(self):
        return f"PieceNode(id={self.piece_id}, layer={self.layer.value}, pos=({self.x:.1f}, {self.y:.1f}))"


class Scene:
    def __init__(
        self,
        board: Transform | None = None,
        tray: Transform | None = None,
        hex_size: float = HEX_SIZE,
    ):
        self.hex_size = hex_size
        self._transforms = {
            Layer.BOARD: board or Transform(),
            Layer.TRAY: tray or Transform(),
            Layer.DRAG: Transform(),
        }

    def transform(self, layer: Layer) -> Transform:
        return self._transforms[layer]

    def set_transform(self, layer: Layer, transform: Transform):
        self._transforms[layer] = transform

    def node_to_global(self, node: PieceNode, local_x: float = 0.0, local_y: float = 0.0) -> tuple[float, float]:
        """Global position of a point given in the node's own pixel space."""

        parent = self.transform(node.layer)
        return parent.to_global(node.x + local_x * node.scale, node.y + local_y * node.scale)

    def global_scale(self, node: PieceNode) -> float:
        return self.transform(node.layer).scale * node.scale

    def visual_center_global(self, node: PieceNode) -> tuple[float, float]:
        return self.node_to_global(node, *node.visual_center)

    def reparent(self, node: PieceNode, layer: Layer):
        """Move a node to another layer without changing where it is drawn."""

        global_x, global_y = self.node_to_global(node)
        world_scale = self.global_scale(node)
        target = self.transform(layer)
        node.layer = layer
        node.x, node.y = target.to_local(global_x, global_y)
        node.scale = world_scale / target.scale

    def anchor_cell(self, node: PieceNode) -> Coord:
        """Board cell under the node's origin, wherever the node lives."""

        global_x, global_y = self.node_to_global(node)
        board_x, board_y = self.transform(Layer.BOARD).to_local(global_x, global_y)
        return pixel_to_axial(board_x, board_y, self.hex_size)

    def grid_position_of(self, node: PieceNode) -> Coord | None:
        """Anchor cell of a node snapped to the board, None for any other layer."""

        if node.layer is not Layer.BOARD:
            return None
        return self.anchor_cell(node)

    def cell_center_in(self, cell: Coord, layer: Layer) -> tuple[float, float]:
        """Centre of a board cell expressed in another layer's local space."""

        board_x, board_y = offset_to_pixel(cell[0], cell[1], self.hex_size)
        global_x, global_y = self.transform(Layer.BOARD).to_global(board_x, board_y)
        return self.transform(layer).to_local(global_x, global_y)

    def place_on_board(self, node: PieceNode, anchor: Coord):
        node.layer = Layer.BOARD
        node.scale = 1.0
        node.x, node.y = offset_to_pixel(anchor[0], anchor[1], self.hex_size)

    def send_home(self, node: PieceNode):
        node.layer = Layer.TRAY
        node.scale = 1.0
        node.x, node.y = node.home_x, node.home_y


__all__ = ["Layer", "PieceNode", "Scene", "Transform"]
