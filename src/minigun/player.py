# src/minigun/player.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Sequence, Union

from .config import (
    WIDTH, HEIGHT, G_ABS,
    PLAYER_START_X, PLAYER_START_Y, PLAYER_W, PLAYER_H,
    PLAYER_SPEED, JUMP_VY, PLAYER_MAX_HEALTH,
    FIRE_RATE_S, FIRE_EPS,
)
from .geometry import horizontal_overlap
from .input_state import InputState
from .level import Platform
from .projectile import Projectile


@dataclass(frozen=True)
class Idle:
    """Trigger released. The next press fires on its first frame."""


@dataclass(frozen=True)
class Cooling:
    """Trigger held; `remaining` seconds until the next bullet (<= 0 means fire now)."""
    remaining: float


FireState = Union[Idle, Cooling]
IDLE = Idle()


@dataclass
class Player:
    """
    Side-view runner-and-gunner:
    - free horizontal movement clamped to the world
    - one-sided platforms (land from above only)
    - held trigger = continuous fire at `fire_rate`
    """
    x: float = PLAYER_START_X
    y: float = PLAYER_START_Y
    vx: float = 0.0
    vy: float = 0.0
    w: int = PLAYER_W
    h: int = PLAYER_H
    facing: int = 1           # +1 right, -1 left
    grounded: bool = False
    health: float = PLAYER_MAX_HEALTH
    fire: FireState = IDLE
    fire_rate: float = FIRE_RATE_S
    aim_x: float = WIDTH / 2
    aim_y: float = HEIGHT / 2
    world_w: float = field(default=WIDTH, repr=False)
    world_h: float = field(default=HEIGHT, repr=False)

    @property
    def center(self):
        return self.x + self.w / 2, self.y + self.h / 2

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def try_jump(self) -> bool:
        """Jump only when grounded. Returns True if performed."""
        if self.grounded:
            self.vy = JUMP_VY
            self.grounded = False
            return True
        return False

    def update(self, dt: float, inp: InputState, platforms: Sequence[Platform]) -> List[Projectile]:
        """Advance one frame. Returns the bullets fired this frame (0 or 1)."""
        # Controls
        self.vx = inp.move_axis * PLAYER_SPEED
        if inp.move_axis != 0:
            self.facing = 1 if inp.move_axis > 0 else -1
        if inp.jump_held:
            self.try_jump()

        # Integrate
        self.vy += G_ABS * dt
        self.x += self.vx * dt
        self.y += self.vy * dt

        # World bounds horizontally
        if self.x < 0:
            self.x = 0.0
        if self.x + self.w > self.world_w:
            self.x = self.world_w - self.w

        self.resolve_platforms(dt, platforms)

        # Floor
        if self.bottom >= self.world_h:
            self.y = self.world_h - self.h
            self.vy = 0.0
            self.grounded = True

        return self._update_weapon(dt, inp)

    def resolve_platforms(self, dt: float, platforms: Sequence[Platform]) -> bool:
        """
        Landing only: did the bottom edge cross a platform top this frame?
        The previous position is rebuilt as y - vy*dt, so a step large enough to
        jump past the whole slab tunnels through it.
        """
        self.grounded = False
        for p in platforms:
            if not horizontal_overlap(self, p):
                continue
            prev_y = self.y - self.vy * dt
            if prev_y + self.h <= p.top and self.bottom >= p.top:
                self.y = p.top - self.h
                self.vy = 0.0
                self.grounded = True
        return self.grounded

    def _update_weapon(self, dt: float, inp: InputState) -> List[Projectile]:
        self.aim_x, self.aim_y = inp.aim_x, inp.aim_y
        if not inp.fire_held:
            # no idle build-up: the next press fires straight away
            self.fire = IDLE
            return []

        remaining = self.fire.remaining if isinstance(self.fire, Cooling) else 0.0
        remaining -= dt
        shots: List[Projectile] = []
        if remaining <= FIRE_EPS:
            cx, cy = self.center
            shots.append(Projectile.aimed(cx, cy, inp.aim_x, inp.aim_y))
            remaining = self.fire_rate
        self.fire = Cooling(remaining)
        return shots
