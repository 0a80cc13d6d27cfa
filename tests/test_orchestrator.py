import asyncio
import random

import pytest

from hex_puzzle.boards import LEVELS, Difficulty
from hex_puzzle.core import Layer, PuzzleOrchestrator, PuzzleState, TweenAnimator

from puzzle_helpers import RecordingListener, drag_to, grab


def _generated_puzzle(listener=None, seed=3, spec=LEVELS[0]):
    puzzle = PuzzleOrchestrator(listener=listener, rng=random.Random(seed))
    puzzle.start_level(spec.matrix, spec.difficulty, spec.level_id)
    return puzzle


def _scramble(puzzle):
    """Put pieces on non-solution anchors wherever they fit."""

    placed = 0
    for node in puzzle.nodes:
        for anchor in sorted(puzzle.board.cells):
            cells = node.piece.cells_at(anchor)
            if anchor != node.piece.root_pos and puzzle.occupancy.can_fit(cells):
                puzzle.scene.place_on_board(node, anchor)
                puzzle.occupancy.place_piece(node.piece, cells)
                placed += 1
                break
    return placed


def _all_correct(puzzle):
    return all(puzzle.is_correct(node) for node in puzzle.nodes)


def test_start_level_lays_out_tray():
    puzzle = _generated_puzzle()
    assert puzzle.level_id == LEVELS[0].level_id
    assert puzzle.nodes
    assert all(node.layer is Layer.TRAY for node in puzzle.nodes)
    assert puzzle.occupancy.total_cells == puzzle.board.cell_count
    assert puzzle.incorrect_nodes() == puzzle.nodes
    assert puzzle.session.moves == 0


def test_start_level_with_empty_matrix():
    puzzle = PuzzleOrchestrator(rng=random.Random(0))
    puzzle.start_level([[0, 0]], Difficulty.EASY, "empty")
    assert puzzle.nodes == []
    assert not puzzle.is_complete
    assert puzzle.show_hint() is None


def test_hint_targets_an_incorrect_piece(puzzle, listener):
    cells = puzzle.show_hint()
    solutions = [node.piece.solution_cells() for node in puzzle.nodes]
    assert cells in solutions
    assert listener.named("hint") == [("hint", tuple(cells))]
    assert puzzle.occupancy.occupied_count == 0


def test_new_hint_replaces_old_one(puzzle, listener):
    puzzle.show_hint()
    puzzle.show_hint()
    assert len(listener.named("hint")) == 2
    assert len(listener.named("hint_cleared")) == 1

    puzzle.stop_hint()
    puzzle.stop_hint()
    assert len(listener.named("hint_cleared")) == 2
    assert puzzle.active_hint is None


def test_picking_up_a_piece_stops_the_hint(puzzle, listener):
    puzzle.show_hint()
    assert grab(puzzle, puzzle.nodes[0])
    assert puzzle.active_hint is None
    assert listener.named("hint_cleared")


def test_hint_ignores_correct_pieces(puzzle):
    first, second = puzzle.nodes
    assert drag_to(puzzle, first, (0, 0))
    for _ in range(5):
        assert puzzle.show_hint() == second.piece.solution_cells()


def test_solve_one_piece_evicts_and_places(puzzle, listener):
    first = puzzle.nodes[0]
    assert drag_to(puzzle, first, (2, 0))

    solved = asyncio.run(puzzle.solve_one_piece())
    assert solved is not None
    assert puzzle.is_correct(puzzle.node_for(solved))
    assert puzzle.occupancy.cells_of(solved) == sorted(solved.solution_cells())

    asyncio.run(puzzle.solve_one_piece())
    assert _all_correct(puzzle)
    assert puzzle.is_complete
    assert len(listener.named("complete")) == 1
    assert listener.named("complete")[0][1].moves == 1
    assert asyncio.run(puzzle.solve_one_piece()) is None
    assert puzzle.state is PuzzleState.IDLE


class _PickLast:
    def choice(self, seq):
        return seq[-1]


def test_solve_one_piece_returns_evicted_occupant_to_tray(puzzle, listener):
    first, second = puzzle.nodes
    assert drag_to(puzzle, first, (2, 0))
    puzzle.rng = _PickLast()

    assert asyncio.run(puzzle.solve_one_piece()) == second.piece
    assert puzzle.is_correct(second)
    assert first.layer is Layer.TRAY
    assert puzzle.occupancy.cells_of(first.piece) == []
    assert ("removed", 0) in listener.events
    assert ("returned", 0) in listener.events
    assert not puzzle.is_complete


def test_auto_complete_from_tray():
    listener = RecordingListener()
    puzzle = _generated_puzzle(listener)

    assert asyncio.run(puzzle.auto_complete()) is True
    assert _all_correct(puzzle)
    assert puzzle.occupancy.is_full()
    assert len(listener.named("complete")) == 1
    assert listener.named("complete")[0][1].moves == 0
    assert puzzle.show_hint() is None
    assert puzzle.state is PuzzleState.IDLE
    assert puzzle.controller.enabled


def test_auto_complete_from_scrambled_board():
    for seed, spec in [(1, LEVELS[0]), (2, LEVELS[1]), (5, LEVELS[2])]:
        listener = RecordingListener()
        puzzle = _generated_puzzle(listener, seed=seed, spec=spec)
        assert _scramble(puzzle) > 0

        asyncio.run(puzzle.auto_complete())
        assert _all_correct(puzzle)
        assert puzzle.is_complete
        assert len(listener.named("complete")) == 1
        for node in puzzle.nodes:
            assert puzzle.occupancy.cells_of(node.piece) == sorted(node.piece.solution_cells())


def test_auto_complete_is_not_reentrant(puzzle, listener):
    animator = TweenAnimator(duration=0.5)
    puzzle.animator = animator

    async def scenario():
        first = asyncio.create_task(puzzle.auto_complete())
        await asyncio.sleep(0)

        assert puzzle.state is PuzzleState.ORCHESTRATING
        assert not puzzle.controller.enabled
        assert puzzle.nodes[0].busy
        assert await puzzle.auto_complete() is False
        assert await puzzle.solve_one_piece() is None
        assert puzzle.show_hint() is None
        assert not grab(puzzle, puzzle.nodes[1])
        puzzle.reset_board()
        assert puzzle.nodes[0].layer is Layer.DRAG

        while not first.done():
            animator.update(0.25)
            await asyncio.sleep(0)
        return first.result()

    assert asyncio.run(scenario()) is True
    assert _all_correct(puzzle)
    assert not any(node.busy for node in puzzle.nodes)
    assert len(listener.named("complete")) == 1


def test_level_lifecycle_waits_for_assisted_moves(puzzle):
    animator = TweenAnimator(duration=0.5)
    puzzle.animator = animator

    async def scenario():
        task = asyncio.create_task(puzzle.auto_complete())
        await asyncio.sleep(0)

        puzzle.start_level([[0, 0, 0], [0, 0, 1]], Difficulty.EASY, "other")
        puzzle.teardown()
        puzzle.restart_level()
        assert puzzle.state is PuzzleState.ORCHESTRATING
        assert puzzle.level_id == "strip"
        assert puzzle.board.cell_count == 4

        while not task.done():
            animator.update(0.25)
            await asyncio.sleep(0)
        return task.result()

    assert asyncio.run(scenario()) is True
    assert set(puzzle.occupancy.snapshot()) == set(puzzle.board.keys())
    assert _all_correct(puzzle)
    assert puzzle.is_complete


def test_cancelled_move_sends_piece_home(puzzle, listener):
    animator = TweenAnimator(duration=0.5)
    puzzle.animator = animator

    async def scenario():
        task = asyncio.create_task(puzzle.solve_one_piece())
        await asyncio.sleep(0)
        assert any(node.layer is Layer.DRAG for node in puzzle.nodes)

        animator.cancel_all()
        with pytest.raises(asyncio.CancelledError):
            await task

    asyncio.run(scenario())
    assert puzzle.state is PuzzleState.IDLE
    assert all(node.layer is Layer.TRAY for node in puzzle.nodes)
    assert not any(node.busy for node in puzzle.nodes)
    assert listener.named("returned")
    assert puzzle.occupancy.snapshot() == {}
    assert grab(puzzle, puzzle.nodes[0])


def test_input_flag_survives_orchestration(puzzle):
    puzzle.set_input_enabled(False)
    asyncio.run(puzzle.auto_complete())
    assert not puzzle.input_enabled
    assert not puzzle.controller.enabled

    puzzle.set_input_enabled(True)
    assert puzzle.controller.enabled


def test_reset_board_returns_everything_to_tray(puzzle, listener):
    asyncio.run(puzzle.auto_complete())
    puzzle.reset_board()

    assert puzzle.occupancy.occupied_count == 0
    for node in puzzle.nodes:
        assert node.layer is Layer.TRAY
        assert (node.x, node.y) == (node.home_x, node.home_y)
    assert [p.piece_id for p in puzzle.pieces] == [0, 1]

    asyncio.run(puzzle.auto_complete())
    assert len(listener.named("complete")) == 2


def test_restart_level_regenerates_pieces():
    puzzle = _generated_puzzle()
    first = puzzle.nodes[0]
    asyncio.run(puzzle.auto_complete())

    puzzle.restart_level()
    assert puzzle.level_id == LEVELS[0].level_id
    assert puzzle.occupancy.occupied_count == 0
    assert puzzle.nodes[0] is not first
    assert puzzle.session.moves == 0


def test_teardown_drops_the_level(puzzle):
    puzzle.show_hint()
    puzzle.teardown()

    assert puzzle.nodes == []
    assert puzzle.active_hint is None
    assert puzzle.show_hint() is None
    assert asyncio.run(puzzle.auto_complete()) is True
    assert not puzzle.is_complete
