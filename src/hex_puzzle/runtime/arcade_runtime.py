"""Thin arcade wrappers: a manually pumped window and a frame clock."""

from __future__ import annotations

import time
from dataclasses import dataclass

import arcade


@dataclass(frozen=True)
class MouseEvent:
    x: float
    y: float
    button: int


class _QueueingWindow(arcade.Window):
    """Window that queues input instead of handling it in callbacks."""

    def __init__(self, width: int, height: int, title: str, vsync: bool = False):
        super().__init__(width, height, title, vsync=vsync)
        self.close_requested = False
        self.mouse_presses: list[MouseEvent] = []
        self.mouse_releases: list[MouseEvent] = []
        self.mouse_motion: tuple[float, float] | None = None
        self.key_presses: list[int] = []

    def on_mouse_press(self, x, y, button, modifiers):
        self.mouse_presses.append(MouseEvent(x, y, button))

    def on_mouse_release(self, x, y, button, modifiers):
        self.mouse_releases.append(MouseEvent(x, y, button))

    def on_mouse_motion(self, x, y, dx, dy):
        self.mouse_motion = (x, y)

    def on_mouse_drag(self, x, y, dx, dy, buttons, modifiers):
        self.mouse_motion = (x, y)

    def on_key_press(self, symbol, modifiers):
        self.key_presses.append(symbol)

    def on_close(self):
        self.close_requested = True


class ArcadeWindowController:
    def __init__(
        self,
        width: int,
        height: int,
        title: str,
        enabled: bool = True,
        queue_input_events: bool = True,
        vsync: bool = False,
    ):
        self.height = int(height)
        self.queue_input_events = bool(queue_input_events)
        self.window: _QueueingWindow | None = None
        if enabled:
            self.window = _QueueingWindow(int(width), int(height), title, vsync=vsync)

    def poll_events(self) -> bool:
        """Pump the OS event queue. Returns True once the window wants to close."""

        if self.window is None:
            return True
        self.window.dispatch_events()
        if not self.queue_input_events:
            self.window.mouse_presses.clear()
            self.window.mouse_releases.clear()
            self.window.key_presses.clear()
            self.window.mouse_motion = None
        return self.window.close_requested

    def consume_mouse_presses(self) -> list[MouseEvent]:
        return self._drain("mouse_presses")

    def consume_mouse_releases(self) -> list[MouseEvent]:
        return self._drain("mouse_releases")

    def consume_mouse_motion(self) -> tuple[float, float] | None:
        if self.window is None:
            return None
        motion = self.window.mouse_motion
        self.window.mouse_motion = None
        return motion

    def consume_key_presses(self) -> list[int]:
        return self._drain("key_presses")

    def to_top_left_y(self, y: float) -> float:
        return self.height - y

    def flip(self):
        if self.window is not None:
            self.window.flip()

    def close(self):
        if self.window is not None:
            self.window.close()
            self.window = None

    def _drain(self, name: str) -> list:
        if self.window is None:
            return []
        queue = getattr(self.window, name)
        events = list(queue)
        queue.clear()
        return events


class ArcadeFrameClock:
    """Caps the frame rate and reports elapsed seconds per frame."""

    def __init__(self):
        self._last = time.perf_counter()

    def tick(self, fps: int) -> float:
        if fps > 0:
            frame_budget = 1.0 / fps
            remaining = frame_budget - (time.perf_counter() - self._last)
            if remaining > 0:
                time.sleep(remaining)
        now = time.perf_counter()
        dt_seconds = now - self._last
        self._last = now
        return dt_seconds


class TextCache:
    """Reuses `arcade.Text` objects keyed by their content and style."""

    def __init__(self, max_entries: int = 1024):
        self.max_entries = int(max_entries)
        self._entries: dict[tuple, arcade.Text] = {}

    def get_text(self, text, color, font_size, font_name, anchor_x="left", anchor_y="baseline") -> arcade.Text:
        key = (text, tuple(color), int(font_size), font_name, anchor_x, anchor_y)
        cached = self._entries.get(key)
        if cached is not None:
            return cached
        if len(self._entries) >= self.max_entries:
            self._entries.clear()
        text_obj = arcade.Text(
            text,
            0,
            0,
            color,
            font_size,
            font_name=font_name,
            anchor_x=anchor_x,
            anchor_y=anchor_y,
        )
        self._entries[key] = text_obj
        return text_obj
