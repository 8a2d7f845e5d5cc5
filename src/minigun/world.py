# src/minigun/world.py
from __future__ import annotations
import logging
import random
from typing import List, Optional, Sequence

from .config import (
    WIDTH, HEIGHT, ZOMBIE_H, GROUND_THICKNESS, ZOMBIE_SPAWN_OFFSET, ZOMBIE_DESPAWN_MARGIN,
    HIT_DAMAGE_MIN, HIT_DAMAGE_MAX, SCORE_HIT, SCORE_KILL, CONTACT_DAMAGE,
)
from .clock import clamp_dt
from .geometry import boxes_overlap, circle_hits_box
from .input_state import InputState, IDLE_INPUT
from .level import Platform, build_level
from .player import Player
from .projectile import Projectile
from .snapshot import WorldSnapshot, PlayerView, ZombieView, ProjectileView
from .spawner import Spawner
from .zombie import Zombie

logger = logging.getLogger(__name__)


class World:
    """
    Whole simulation state for one run: level, player, bullets, zombies, score.

    update(dt, inp) is the only writer. Pipeline order per frame:
      spawn -> player -> bullets -> zombies -> bullet hits -> contact damage
      -> despawn. Once game_over is set, update() is a no-op until reset().
    """

    def __init__(self, seed: Optional[int] = None, platforms: Optional[Sequence[Platform]] = None,
                 width: int = WIDTH, height: int = HEIGHT):
        self.width = width
        self.height = height
        self._custom_level = tuple(platforms) if platforms is not None else None
        self.reset(seed)

    # -------------------- Lifecycle --------------------

    def reset(self, seed: Optional[int] = None):
        """Back to the initial state. Keeps the current seed unless a new one is given."""
        if seed is None:
            seed = getattr(self, "seed", None)
        if seed is None:
            seed = random.randrange(0, 2**32 - 1)
        self.seed = seed
        self.rng = random.Random(seed)

        self.platforms = self._custom_level if self._custom_level is not None else build_level(self.width, self.height)
        self.player = Player(world_w=self.width, world_h=self.height)
        self.projectiles: List[Projectile] = []
        self.zombies: List[Zombie] = []
        self.spawner = Spawner()
        self.score = 0
        self.game_over = False
        self.frames = 0
        logger.info("World reset (seed=%s)", self.seed)

    # -------------------- Frame --------------------

    def update(self, dt: float, inp: InputState = IDLE_INPUT):
        if self.game_over:
            return
        dt = clamp_dt(dt)
        self.frames += 1

        if self.spawner.update(dt, self.score):
            self.spawn_zombie()

        self.projectiles.extend(self.player.update(dt, inp, self.platforms))

        for b in self.projectiles:
            b.step(dt)
        self.projectiles = [b for b in self.projectiles
                            if not b.expired and not b.out_of_bounds(self.width, self.height)]

        for z in self.zombies:
            z.update(dt, self.platforms, self.height)

        self._resolve_bullet_hits()
        self._resolve_contacts()

        self.zombies = [z for z in self.zombies if z.x + z.w >= -ZOMBIE_DESPAWN_MARGIN]

    def spawn_zombie(self) -> Zombie:
        """New zombie just past the right edge, standing on a random platform (or the ground)."""
        x = self.width + ZOMBIE_SPAWN_OFFSET
        if self.platforms:
            p = self.platforms[self.rng.randrange(len(self.platforms))]
            y = p.top - ZOMBIE_H
        else:
            y = self.height - ZOMBIE_H - GROUND_THICKNESS
        z = Zombie.spawn(x, y, self.rng)
        self.zombies.append(z)
        logger.debug("spawn #%d at y=%.0f tough=%s next_interval=%.0fms",
                     self.spawner.spawned, y, z.tough, self.spawner.interval_ms)
        return z

    def _roll_damage(self) -> float:
        return self.rng.uniform(HIT_DAMAGE_MIN, HIT_DAMAGE_MAX)

    def _resolve_bullet_hits(self):
        """
        Each bullet hits at most one zombie (newest first) and is consumed.
        Dead zombies are skipped for the rest of the pass and compacted after.
        """
        kept: List[Projectile] = []
        for b in reversed(self.projectiles):
            target = None
            for z in reversed(self.zombies):
                if z.alive and circle_hits_box(b.x, b.y, b.r, z):
                    target = z
                    break
            if target is None:
                kept.append(b)
                continue
            target.health -= self._roll_damage()
            if target.health <= 0:
                self.score += SCORE_KILL
                logger.debug("kill -> score %d", self.score)
            else:
                self.score += SCORE_HIT
        kept.reverse()
        self.projectiles = kept
        self.zombies = [z for z in self.zombies if z.alive]

    def _resolve_contacts(self):
        p = self.player
        for z in reversed(self.zombies):
            if not boxes_overlap(p, z):
                continue
            p.health -= CONTACT_DAMAGE
            z.knock_back()
            if p.health <= 0 and not self.game_over:
                self.game_over = True
                logger.info("Game over: score=%d frames=%d seed=%s", self.score, self.frames, self.seed)

    # -------------------- Views --------------------

    @property
    def health(self) -> int:
        return max(0, int(self.player.health))

    def snapshot(self) -> WorldSnapshot:
        p = self.player
        return WorldSnapshot(
            platforms=tuple(self.platforms),
            projectiles=tuple(ProjectileView(b.x, b.y, b.r) for b in self.projectiles),
            zombies=tuple(ZombieView(z.x, z.y, z.w, z.h, z.health, z.tough) for z in self.zombies),
            player=PlayerView(p.x, p.y, p.w, p.h, p.vx, p.vy, p.facing, p.grounded, p.aim_x, p.aim_y),
            score=int(self.score),
            health=self.health,
            game_over=self.game_over,
            seed=self.seed,
        )
