"""Level lifecycle, pointer routing and assisted play.

The orchestrator owns one level at a time: its board, generated pieces,
scene layers, occupancy and drag controller. Hints, solve-one-piece and
auto-complete inspect occupancy against each piece's solution anchor and
move pieces with the same placement primitives the drag controller uses.
"""

from __future__ import annotations

import asyncio
import logging
import random
from enum import Enum

from hex_puzzle.boards.board import HexBoard
from hex_puzzle.boards.cluster_generation import generate_clusters
from hex_puzzle.boards.piece import ClusterPiece
from hex_puzzle.config import GRID_AREA, HEX_SIZE, HIT_RADIUS_PX, TRAY_AREA
from hex_puzzle.core.animation import InstantAnimator
from hex_puzzle.core.drag import DragSnapController
from hex_puzzle.core.events import PuzzleListener
from hex_puzzle.core.occupancy import GridOccupancy
from hex_puzzle.core.scene import Layer, PieceNode, Scene
from hex_puzzle.core.session import GameplaySession
from hex_puzzle.hex_coords import Coord
from hex_puzzle.layout import Area, fit_board_transform, fit_tray_transform, layout_tray

logger = logging.getLogger(__name__)


class PuzzleState(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"
    ORCHESTRATING = "orchestrating"


class PuzzleOrchestrator:
    def __init__(
        self,
        listener: PuzzleListener | None = None,
        animator=None,
        rng: random.Random | None = None,
        hit_radius: float = HIT_RADIUS_PX,
        hex_size: float = HEX_SIZE,
        grid_area: Area | None = None,
        tray_area: Area | None = None,
        session: GameplaySession | None = None,
    ):
        self.listener = listener or PuzzleListener()
        self.animator = animator or InstantAnimator()
        self.rng = rng or random.Random()
        self.hit_radius = hit_radius
        self.hex_size = hex_size
        self.grid_area = grid_area or Area(*GRID_AREA)
        self.tray_area = tray_area or Area(*TRAY_AREA)
        self.session = session or GameplaySession()

        self.state = PuzzleState.IDLE
        self.level_id = ""
        self.matrix = None
        self.difficulty = None
        self.active_hint: list[Coord] | None = None
        self._input_enabled = True
        self._completed = False
        self._install(HexBoard(frozenset()), [])

    def start_level(self, matrix, difficulty, level_id: str = "level", pieces: list[ClusterPiece] | None = None):
        """Build a level from a matrix; `pieces` skips generation when given.

        Ignored while an assisted move is running.
        """

        if self.state is PuzzleState.ORCHESTRATING:
            return
        self.teardown()
        self.level_id = level_id
        self.matrix = matrix
        self.difficulty = difficulty

        board = HexBoard.from_matrix(matrix)
        if pieces is None:
            pieces = generate_clusters(matrix, difficulty, rng=self.rng)
        self._install(board, list(pieces))
        self.session.start(level_id)
        logger.info(
            "Level %s started: %d cells, %d pieces",
            level_id,
            board.cell_count,
            len(self.pieces),
        )

    def restart_level(self):
        if self.matrix is None or self.state is PuzzleState.ORCHESTRATING:
            return
        self.start_level(self.matrix, self.difficulty, self.level_id)

    def reset_board(self):
        """Send every piece back to the tray, keeping the generated set."""

        if self.state is PuzzleState.ORCHESTRATING:
            return
        self.stop_hint()
        self.controller.force_release()
        self.state = PuzzleState.IDLE
        for node in self.nodes:
            if node.layer is Layer.BOARD:
                freed = self.occupancy.remove_piece(node.piece)
                self.listener.on_piece_removed(node.piece, freed)
                self.controller.return_to_tray(node)
        self._completed = False

    def teardown(self):
        if self.state is PuzzleState.ORCHESTRATING:
            return
        self.stop_hint()
        self.controller.force_release()
        self.state = PuzzleState.IDLE
        self._install(HexBoard(frozenset()), [])
        self._completed = False

    def _install(self, board: HexBoard, pieces: list[ClusterPiece]):
        self.board = board
        self.pieces = pieces
        self.nodes = [PieceNode(piece, self.hex_size) for piece in pieces]
        self._nodes_by_id = {node.piece_id: node for node in self.nodes}

        tray = layout_tray(pieces, self.hex_size)
        self.scene = Scene(
            board=fit_board_transform(board.cells, self.grid_area, self.hex_size),
            tray=fit_tray_transform(tray, self.tray_area),
            hex_size=self.hex_size,
        )
        for node in self.nodes:
            node.home_x, node.home_y = tray.homes[node.piece_id]
            self.scene.send_home(node)

        self.occupancy = GridOccupancy(board.cells)
        self.controller = DragSnapController(
            self.scene,
            self.occupancy,
            self.nodes,
            listener=self.listener,
            hit_radius=self.hit_radius,
        )
        self.controller.set_enabled(self._input_enabled)

    @property
    def input_enabled(self) -> bool:
        return self._input_enabled

    def set_input_enabled(self, enabled: bool):
        """Host toggle; disabling mid-drag sends the held piece home."""

        self._input_enabled = bool(enabled)
        if self.state is PuzzleState.ORCHESTRATING:
            return
        self.controller.set_enabled(self._input_enabled)
        if not self._input_enabled and self.state is PuzzleState.DRAGGING:
            self.state = PuzzleState.IDLE

    def pointer_down(self, x: float, y: float) -> bool:
        if self.state is not PuzzleState.IDLE:
            return False
        if not self.controller.pointer_down(x, y):
            return False
        self.state = PuzzleState.DRAGGING
        self.stop_hint()
        return True

    def pointer_move(self, x: float, y: float) -> list[Coord] | None:
        if self.state is not PuzzleState.DRAGGING:
            return None
        return self.controller.pointer_move(x, y)

    def pointer_up(self, x: float, y: float) -> bool:
        if self.state is not PuzzleState.DRAGGING:
            return False
        placed = self.controller.pointer_up(x, y)
        self.state = PuzzleState.IDLE
        if placed:
            self.session.record_move()
            self._check_completion()
        return placed

    def node_for(self, piece: ClusterPiece) -> PieceNode:
        return self._nodes_by_id[piece.piece_id]

    def is_correct(self, node: PieceNode) -> bool:
        return self.scene.grid_position_of(node) == node.piece.root_pos

    def incorrect_nodes(self) -> list[PieceNode]:
        return [node for node in self.nodes if not self.is_correct(node)]

    @property
    def is_complete(self) -> bool:
        return self.board.cell_count > 0 and self.occupancy.is_full()

    def show_hint(self) -> list[Coord] | None:
        """Blink the solution cells of one random misplaced piece."""

        if self.state is PuzzleState.ORCHESTRATING:
            return None
        incorrect = self.incorrect_nodes()
        if not incorrect:
            return None

        node = self.rng.choice(incorrect)
        cells = node.piece.solution_cells()
        self.stop_hint()
        self.active_hint = cells
        self.listener.on_hint(cells)
        logger.debug("Hint for piece %d", node.piece_id)
        return cells

    def stop_hint(self):
        if self.active_hint is None:
            return
        cells = self.active_hint
        self.active_hint = None
        self.listener.on_hint_cleared(cells)

    async def solve_one_piece(self) -> ClusterPiece | None:
        """Move one random misplaced piece into its solution slot."""

        if self.state is PuzzleState.ORCHESTRATING:
            return None

        self._begin_orchestration()
        try:
            incorrect = self.incorrect_nodes()
            if not incorrect:
                return None
            node = self.rng.choice(incorrect)
            await self._move_to_solution(node)
            logger.info("Solved piece %d", node.piece_id)
            return node.piece
        finally:
            self._end_orchestration()

    async def auto_complete(self) -> bool:
        """Move every misplaced piece home, one at a time."""

        if self.state is PuzzleState.ORCHESTRATING:
            return False

        self._begin_orchestration()
        moved = 0
        try:
            for node in list(self.nodes):
                if self.is_correct(node):
                    continue
                await self._move_to_solution(node)
                moved += 1
        finally:
            self._end_orchestration()
        logger.info("Auto-complete moved %d pieces", moved)
        return True

    def _begin_orchestration(self):
        self.controller.set_enabled(False)
        self.state = PuzzleState.ORCHESTRATING

    def _end_orchestration(self):
        self.state = PuzzleState.IDLE
        self.controller.set_enabled(self._input_enabled)

    async def _move_to_solution(self, node: PieceNode):
        piece = node.piece
        target_cells = piece.solution_cells()

        evicted: dict[int, ClusterPiece] = {}
        for q, r in target_cells:
            occupant = self.occupancy.get_occupant_at(q, r)
            if occupant is not None and occupant.piece_id != piece.piece_id:
                evicted[occupant.piece_id] = occupant
        for occupant in evicted.values():
            freed = self.occupancy.remove_piece(occupant)
            self.listener.on_piece_removed(occupant, freed)
            self.controller.return_to_tray(self.node_for(occupant))

        freed = self.occupancy.remove_piece(piece)
        if freed:
            self.listener.on_piece_removed(piece, freed)

        self.scene.reparent(node, Layer.DRAG)
        target_x, target_y = self.scene.cell_center_in(piece.root_pos, Layer.DRAG)
        target_scale = self.scene.transform(Layer.BOARD).scale / self.scene.transform(Layer.DRAG).scale
        node.busy = True
        try:
            await self.animator.move(node, target_x, target_y, target_scale)
        except asyncio.CancelledError:
            self.controller.return_to_tray(node)
            raise
        finally:
            node.busy = False

        self.scene.place_on_board(node, piece.root_pos)
        self.occupancy.place_piece(piece, target_cells)
        self.listener.on_piece_placed(piece, target_cells)
        self._check_completion()

    def _check_completion(self):
        if self._completed or not self.is_complete:
            return
        self._completed = True
        stats = self.session.complete()
        logger.info("Level %s complete in %d moves", stats.level_id, stats.moves)
        self.listener.on_level_complete(stats)


__all__ = ["PuzzleOrchestrator", "PuzzleState"]
