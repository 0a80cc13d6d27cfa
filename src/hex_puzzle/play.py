if __package__ is None or __package__ == "":
    import sys
    from pathlib import Path

    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import asyncio
import logging
import random

import arcade

from hex_puzzle.boards import LEVELS
from hex_puzzle.config import (
    FONT_NAME_BAR,
    FONT_SIZE_BAR,
    FPS,
    HINT_BLINK_COUNT,
    HINT_BLINK_INTERVAL_SECONDS,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    WINDOW_TITLE,
)
import hex_puzzle.render as ui
from hex_puzzle.core import PuzzleListener, PuzzleOrchestrator, PuzzleState, TweenAnimator
from hex_puzzle.runtime import ArcadeFrameClock, ArcadeWindowController, configure_logging

logger = logging.getLogger(__name__)


class PuzzleView(PuzzleListener):
    """Overlay state the renderer needs: preview, blinking hint, completion."""

    def __init__(self):
        self.preview_cells = []
        self.preview_color = (255, 255, 255)
        self.hint_cells = []
        self.hint_elapsed = 0.0
        self.completed_stats = None

    def reset(self):
        self.preview_cells = []
        self.hint_cells = []
        self.hint_elapsed = 0.0
        self.completed_stats = None

    @property
    def hint_visible(self) -> bool:
        if not self.hint_cells:
            return False
        return int(self.hint_elapsed / HINT_BLINK_INTERVAL_SECONDS) % 2 == 0

    def update(self, dt_seconds: float, puzzle: PuzzleOrchestrator):
        if not self.hint_cells:
            return
        self.hint_elapsed += dt_seconds
        if self.hint_elapsed >= HINT_BLINK_INTERVAL_SECONDS * HINT_BLINK_COUNT:
            puzzle.stop_hint()

    def on_preview(self, cells, color):
        self.preview_cells = list(cells)
        self.preview_color = color

    def on_preview_cleared(self):
        self.preview_cells = []

    def on_hint(self, cells):
        self.hint_cells = list(cells)
        self.hint_elapsed = 0.0

    def on_hint_cleared(self, cells):
        self.hint_cells = []

    def on_level_complete(self, stats):
        self.completed_stats = stats


def play_puzzle():
    configure_logging(logging.INFO)
    window_controller = ArcadeWindowController(
        SCREEN_WIDTH,
        SCREEN_HEIGHT,
        WINDOW_TITLE,
        enabled=True,
        queue_input_events=True,
        vsync=False,
    )
    if window_controller.window is None:
        return

    try:
        asyncio.run(_run(window_controller))
    finally:
        window_controller.close()


async def _run(window_controller: ArcadeWindowController):
    window = window_controller.window
    frame_clock = ArcadeFrameClock()
    font_bar = ui.load_font_spec(FONT_SIZE_BAR, FONT_NAME_BAR)
    animator = TweenAnimator()
    view = PuzzleView()
    puzzle = PuzzleOrchestrator(listener=view, animator=animator, rng=random.Random())
    tasks: set[asyncio.Task] = set()

    def start_level(index: int):
        spec = LEVELS[index % len(LEVELS)]
        view.reset()
        puzzle.start_level(spec.matrix, spec.difficulty, spec.level_id)

    def spawn(coro):
        task = asyncio.create_task(coro)
        tasks.add(task)
        task.add_done_callback(_finish_task)

    def _finish_task(task: asyncio.Task):
        tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error("Assisted move failed", exc_info=task.exception())

    level_index = 0
    start_level(level_index)

    while True:
        dt_seconds = frame_clock.tick(FPS)
        if window_controller.poll_events():
            break

        orchestrating = puzzle.state is PuzzleState.ORCHESTRATING
        for symbol in window_controller.consume_key_presses():
            if symbol == arcade.key.H:
                puzzle.show_hint()
            elif symbol == arcade.key.S and not orchestrating:
                spawn(puzzle.solve_one_piece())
            elif symbol == arcade.key.A and not orchestrating:
                spawn(puzzle.auto_complete())
            elif symbol == arcade.key.R and not orchestrating:
                view.reset()
                puzzle.reset_board()
            elif symbol == arcade.key.N and not orchestrating:
                level_index += 1
                start_level(level_index)

        for press in window_controller.consume_mouse_presses():
            if press.button == arcade.MOUSE_BUTTON_LEFT:
                puzzle.pointer_down(press.x, window_controller.to_top_left_y(press.y))

        motion = window_controller.consume_mouse_motion()
        if motion is not None:
            puzzle.pointer_move(motion[0], window_controller.to_top_left_y(motion[1]))

        for release in window_controller.consume_mouse_releases():
            if release.button == arcade.MOUSE_BUTTON_LEFT:
                puzzle.pointer_up(release.x, window_controller.to_top_left_y(release.y))

        animator.update(dt_seconds)
        view.update(dt_seconds, puzzle)
        await asyncio.sleep(0)

        ui.draw_frame(window, font_bar, puzzle, view)
        window_controller.flip()

    animator.cancel_all()
    for task in list(tasks):
        task.cancel()


if __name__ == "__main__":
    play_puzzle()
