# src/minigun/projectile.py
from __future__ import annotations
import math
from dataclasses import dataclass

from .config import BULLET_SPEED, BULLET_RADIUS, BULLET_LIFE_S, BULLET_MARGIN


@dataclass
class Projectile:
    x: float
    y: float
    vx: float
    vy: float
    r: float = BULLET_RADIUS
    life: float = BULLET_LIFE_S   # seconds left

    @classmethod
    def aimed(cls, ox: float, oy: float, tx: float, ty: float,
              speed: float = BULLET_SPEED) -> "Projectile":
        """Bullet leaving (ox, oy) toward (tx, ty). A zero-length aim falls back to length 1."""
        dx, dy = tx - ox, ty - oy
        length = math.hypot(dx, dy) or 1.0
        return cls(x=ox, y=oy, vx=dx / length * speed, vy=dy / length * speed)

    def step(self, dt: float):
        self.life -= dt
        self.x += self.vx * dt
        self.y += self.vy * dt

    @property
    def expired(self) -> bool:
        return self.life <= 0.0

    def out_of_bounds(self, width: float, height: float, margin: float = BULLET_MARGIN) -> bool:
        return (self.x < -margin or self.x > width + margin or
                self.y < -margin or self.y > height + margin)
