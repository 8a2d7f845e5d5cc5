# src/minigun/zombie.py
from __future__ import annotations
import random
from dataclasses import dataclass
from typing import Sequence

from .config import (
    HEIGHT, G_ABS, ZOMBIE_W, ZOMBIE_H,
    ZOMBIE_SPEED_MIN, ZOMBIE_SPEED_MAX, ZOMBIE_HEALTH_BASE, ZOMBIE_HEALTH_SPREAD,
    TOUGH_CHANCE, TOUGH_SPEED_MUL, TOUGH_HEALTH_MUL, ZOMBIE_SNAP_TOL,
    KNOCKBACK_PX, KNOCKBACK_DAMPING,
)
from .geometry import horizontal_overlap
from .level import Platform


@dataclass
class Zombie:
    x: float
    y: float
    vx: float
    health: float
    speed_mul: float = 1.0
    w: int = ZOMBIE_W
    h: int = ZOMBIE_H
    grounded: bool = False

    @classmethod
    def spawn(cls, x: float, y: float, rng: random.Random) -> "Zombie":
        """Random walker heading left; 15% come out tough-fast."""
        vx = -rng.uniform(ZOMBIE_SPEED_MIN, ZOMBIE_SPEED_MAX)
        health = ZOMBIE_HEALTH_BASE + round(rng.uniform(0, ZOMBIE_HEALTH_SPREAD))
        z = cls(x=x, y=y, vx=vx, health=float(health))
        if rng.random() < TOUGH_CHANCE:
            z.speed_mul = TOUGH_SPEED_MUL
            z.health *= TOUGH_HEALTH_MUL
        return z

    @property
    def tough(self) -> bool:
        return self.speed_mul > 1.0

    @property
    def alive(self) -> bool:
        return self.health > 0

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def update(self, dt: float, platforms: Sequence[Platform], world_h: float = HEIGHT):
        self.x += self.vx * self.speed_mul * dt

        # rest on a platform when the feet are within the tolerance band above its top
        self.grounded = False
        for p in platforms:
            if horizontal_overlap(self, p) and self.bottom <= p.top and self.bottom + ZOMBIE_SNAP_TOL >= p.top:
                self.y = p.top - self.h
                self.grounded = True

        if not self.grounded:
            # constant fall rate, zombies never jump
            self.y += G_ABS * dt
            if self.bottom >= world_h:
                self.y = world_h - self.h

    def knock_back(self):
        """Shove away from the walking direction and slow down."""
        self.x += KNOCKBACK_PX * (1 if self.vx < 0 else -1)
        self.vx *= KNOCKBACK_DAMPING
