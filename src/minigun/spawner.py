# src/minigun/spawner.py
from __future__ import annotations
from dataclasses import dataclass

from .config import (
    SPAWN_INTERVAL_MS, SPAWN_INTERVAL_FLOOR_MS, SPAWN_INTERVAL_STEP_MS, DIFFICULTY_SCORE_DIV,
)


def difficulty(score: float) -> float:
    return 1.0 + score / DIFFICULTY_SCORE_DIV


@dataclass
class Spawner:
    """
    Spawn cadence in milliseconds.

    Notes
    - The effective interval is interval_ms / difficulty(score), so a higher
      score spawns faster.
    - Every spawn tightens interval_ms by step_ms down to floor_ms; it never
      loosens again within a run.
    """
    interval_ms: float = SPAWN_INTERVAL_MS
    floor_ms: float = SPAWN_INTERVAL_FLOOR_MS
    step_ms: float = SPAWN_INTERVAL_STEP_MS
    timer_ms: float = 0.0
    spawned: int = 0

    def effective_interval(self, score: float) -> float:
        return self.interval_ms / difficulty(score)

    def update(self, dt: float, score: float) -> bool:
        """Accumulate dt; returns True when one zombie should spawn this frame."""
        self.timer_ms += dt * 1000.0
        if self.timer_ms < self.effective_interval(score):
            return False
        self.timer_ms = 0.0
        self.interval_ms = max(self.floor_ms, self.interval_ms - self.step_ms)
        self.spawned += 1
        return True
