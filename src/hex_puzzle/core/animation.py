"""Awaitable piece moves used by assisted play.

An animator moves a node, already parented to the drag layer, to a target
position and scale in that layer. The orchestrator awaits each move before
committing occupancy, so a move in flight is a suspension point.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from hex_puzzle.config import MOVE_DURATION_SECONDS
from hex_puzzle.core.scene import PieceNode

logger = logging.getLogger(__name__)


class InstantAnimator:
    """Jumps straight to the target and yields once to the event loop."""

    async def move(self, node: PieceNode, x: float, y: float, scale: float):
        node.x = x
        node.y = y
        node.scale = scale
        await asyncio.sleep(0)


def ease_out_quad(t: float) -> float:
    return 1.0 - (1.0 - t) * (1.0 - t)


@dataclass
class _Tween:
    node: PieceNode
    start: tuple[float, float, float]
    target: tuple[float, float, float]
    done: asyncio.Future
    elapsed: float = 0.0


class TweenAnimator:
    """Frame-driven tweens; the host calls `update(dt)` once per frame."""

    def __init__(self, duration: float = MOVE_DURATION_SECONDS):
        self.duration = max(0.0, float(duration))
        self._tweens: list[_Tween] = []

    @property
    def active(self) -> bool:
        return bool(self._tweens)

    async def move(self, node: PieceNode, x: float, y: float, scale: float):
        done = asyncio.get_running_loop().create_future()
        self._tweens.append(
            _Tween(
                node=node,
                start=(node.x, node.y, node.scale),
                target=(x, y, scale),
                done=done,
            )
        )
        await done

    def update(self, dt_seconds: float):
        for tween in list(self._tweens):
            tween.elapsed += max(0.0, dt_seconds)
            t = 1.0 if self.duration <= 0 else min(1.0, tween.elapsed / self.duration)
            eased = ease_out_quad(t)
            sx, sy, ss = tween.start
            tx, ty, ts = tween.target
            tween.node.x = sx + (tx - sx) * eased
            tween.node.y = sy + (ty - sy) * eased
            tween.node.scale = ss + (ts - ss) * eased

            if t >= 1.0:
                self._tweens.remove(tween)
                if not tween.done.done():
                    tween.done.set_result(None)

    def cancel_all(self):
        for tween in self._tweens:
            if not tween.done.done():
                tween.done.cancel()
        if self._tweens:
            logger.debug("Cancelled %d running tweens", len(self._tweens))
        self._tweens.clear()


__all__ = ["InstantAnimator", "TweenAnimator", "ease_out_quad"]
