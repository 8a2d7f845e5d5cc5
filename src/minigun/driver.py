# src/minigun/driver.py
from __future__ import annotations
from typing import Optional

from .clock import FrameClock
from .input_state import InputState
from .snapshot import WorldSnapshot
from .world import World


class Simulation:
    """Owns a World and a FrameClock: one clamped update per tick, then a snapshot to draw."""

    def __init__(self, world: Optional[World] = None, clock: Optional[FrameClock] = None):
        self.world = world if world is not None else World()
        self.clock = clock if clock is not None else FrameClock()
        self.last_dt = 0.0

    def step(self, inp: InputState) -> WorldSnapshot:
        self.last_dt = self.clock.tick()
        self.world.update(self.last_dt, inp)
        return self.world.snapshot()

    def restart(self, seed: Optional[int] = None) -> WorldSnapshot:
        self.world.reset(seed)
        self.clock.restart()
        return self.world.snapshot()
