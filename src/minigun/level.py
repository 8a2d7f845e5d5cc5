# src/minigun/level.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from .config import WIDTH, HEIGHT, GROUND_THICKNESS, BANK_THICKNESS, BANKS


@dataclass(frozen=True)
class Platform:
    """Static axis-aligned slab. Only the top face is solid."""
    x: float
    y: float
    w: float
    h: float

    @property
    def top(self) -> float:
        return self.y


def build_level(width: int = WIDTH, height: int = HEIGHT) -> Tuple[Platform, ...]:
    """Ground slab across the bottom plus the floating banks from config.BANKS."""
    platforms = [Platform(0.0, float(height - GROUND_THICKNESS), float(width), float(GROUND_THICKNESS))]
    for x, rise, w in BANKS:
        platforms.append(Platform(float(x), float(height - rise), float(w), float(BANK_THICKNESS)))
    return tuple(platforms)
