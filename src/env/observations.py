# src/env/observations.py
from __future__ import annotations
from typing import List, Tuple
import numpy as np

from src.minigun.config import WIDTH, HEIGHT, PLAYER_W, PLAYER_H, PLAYER_SPEED, PLAYER_MAX_HEALTH, HEALTH_BAR_FULL
from src.minigun.snapshot import WorldSnapshot

N_ZOMBIES = 4          # nearest zombies encoded, padded with absent slots
MAX_VY = 1200.0        # |vy| used for normalisation (clipped beyond)
PLAYER_FEATS = 7
ZOMBIE_FEATS = 4
OBS_SIZE = PLAYER_FEATS + ZOMBIE_FEATS * N_ZOMBIES


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else (1.0 if x > 1.0 else x)


def _clamp11(x: float) -> float:
    return -1.0 if x < -1.0 else (1.0 if x > 1.0 else x)


def observation_bounds() -> Tuple[np.ndarray, np.ndarray]:
    low = np.array([0.0, 0.0, -1.0, -1.0, 0.0, 0.0, -1.0] + [-1.0, -1.0, 0.0, 0.0] * N_ZOMBIES, dtype=np.float32)
    high = np.array([1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0] + [1.0, 1.0, 1.0, 1.0] * N_ZOMBIES, dtype=np.float32)
    return low, high


def build_observation(snap: WorldSnapshot) -> np.ndarray:
    """
    Returns a fixed (23,) float32 vector:
      [ x_norm, y_norm, vx_norm, vy_norm, health_norm, grounded, facing,
        (dx, dy, health_norm, present) x 4 nearest zombies ]
    - dx/dy are zombie centre minus player centre over WIDTH/HEIGHT, clipped to [-1,1]
    - missing zombie slots are all zeros (present = 0)
    """
    p = snap.player
    feats: List[float] = [
        _clamp01(p.x / max(1, WIDTH - PLAYER_W)),
        _clamp01(p.y / max(1, HEIGHT - PLAYER_H)),
        _clamp11(p.vx / PLAYER_SPEED),
        _clamp11(p.vy / MAX_VY),
        _clamp01(snap.health / PLAYER_MAX_HEALTH),
        1.0 if p.grounded else 0.0,
        float(p.facing),
    ]

    pcx, pcy = p.x + p.w / 2, p.y + p.h / 2
    rel = []
    for z in snap.zombies:
        dx = (z.x + z.w / 2) - pcx
        dy = (z.y + z.h / 2) - pcy
        rel.append((dx * dx + dy * dy, dx, dy, z.health))
    rel.sort(key=lambda t: t[0])

    for i in range(N_ZOMBIES):
        if i < len(rel):
            _, dx, dy, hp = rel[i]
            feats.extend([_clamp11(dx / WIDTH), _clamp11(dy / HEIGHT),
                          _clamp01(hp / (HEALTH_BAR_FULL * 1.6)), 1.0])
        else:
            feats.extend([0.0, 0.0, 0.0, 0.0])

    return np.asarray(feats, dtype=np.float32)
