# src/minigun/snapshot.py
"""Read-only views handed to rendering, UI and the agent observation builder."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from .level import Platform


@dataclass(frozen=True)
class ProjectileView:
    x: float
    y: float
    r: float


@dataclass(frozen=True)
class ZombieView:
    x: float
    y: float
    w: float
    h: float
    health: float
    tough: bool


@dataclass(frozen=True)
class PlayerView:
    x: float
    y: float
    w: float
    h: float
    vx: float
    vy: float
    facing: int
    grounded: bool
    aim_x: float
    aim_y: float


@dataclass(frozen=True)
class WorldSnapshot:
    platforms: Tuple[Platform, ...]
    projectiles: Tuple[ProjectileView, ...]
    zombies: Tuple[ZombieView, ...]
    player: PlayerView
    score: int
    health: int          # clamped at 0 for display
    game_over: bool
    seed: int

    @property
    def aim(self) -> Tuple[float, float]:
        return self.player.aim_x, self.player.aim_y

    @property
    def final_score(self):
        return self.score if self.game_over else None
