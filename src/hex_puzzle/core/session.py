"""Per-level play statistics."""

from __future__ import annotations

import time
from dataclasses import dataclass


@dataclass(frozen=True)
class LevelSessionStats:
    level_id: str
    moves: int
    started_at: float
    duration_seconds: float


class GameplaySession:
    def __init__(self, clock=time.time):
        self._clock = clock
        self.level_id = ""
        self.moves = 0
        self.started_at = 0.0

    def start(self, level_id: str):
        self.level_id = level_id
        self.moves = 0
        self.started_at = self._clock()

    def record_move(self):
        self.moves += 1

    def complete(self) -> LevelSessionStats:
        return LevelSessionStats(
            level_id=self.level_id,
            moves=self.moves,
            started_at=self.started_at,
            duration_seconds=max(0.0, self._clock() - self.started_at),
        )


__all__ = ["GameplaySession", "LevelSessionStats"]
