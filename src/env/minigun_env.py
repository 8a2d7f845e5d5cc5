# src/env/minigun_env.py
from __future__ import annotations
import math
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame

from src.minigun.config import WIDTH, HEIGHT
from src.minigun.input_state import InputState
from src.minigun.render import Renderer
from src.minigun.world import World
from src.env.observations import build_observation, observation_bounds

AIM_SECTORS = 16
AIM_RADIUS = 400.0
DAMAGE_PENALTY = 0.25   # reward lost per point of health


def action_to_input(action, player_center) -> InputState:
    """(move 0/1/2, jump 0/1, fire 0/1, aim sector) -> InputState."""
    move, jump, fire, sector = (int(a) for a in action)
    ang = 2.0 * math.pi * sector / AIM_SECTORS
    cx, cy = player_center
    return InputState(
        move_axis=move - 1,
        jump_held=bool(jump),
        aim_x=cx + AIM_RADIUS * math.cos(ang),
        aim_y=cy + AIM_RADIUS * math.sin(ang),
        fire_held=bool(fire),
    )


class MinigunEnv(gym.Env):
    """
    Minigun Zombies Gymnasium environment (vector observations).
    - Simulation at 60 Hz (internal, fixed dt).
    - Agent acts every `frame_skip` frames (default 4) -> 15 decisions/sec.
    - Action: MultiDiscrete([3, 2, 2, 16]) = move, jump, fire, aim sector.
    - Observation: shape (23,), float32 (see observations.build_observation).
    - Reward: score gained minus DAMAGE_PENALTY * health lost.
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 4,
                 time_limit_seconds: Optional[float] = 60.0):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)

        self.sim_fps = 60
        self.dt = 1.0 / self.sim_fps

        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            self.time_limit_decisions = int(self.sim_fps * time_limit_seconds / self.frame_skip)

        self.action_space = gym.spaces.MultiDiscrete([3, 2, 2, AIM_SECTORS])
        low, high = observation_bounds()
        self.observation_space = gym.spaces.Box(low=low, high=high, dtype=np.float32)

        self.world: Optional[World] = None
        self.timestep: int = 0

        self.screen = None
        self.clock = None
        self.renderer: Optional[Renderer] = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)  # initializes self.np_random

        # Seeding policy:
        # - If a seed is provided, the World uses it directly (strict reproducibility).
        # - If not, the World draws a random seed itself (recorded in info["seed"]).
        world_seed = int(seed) if seed is not None else None
        self.world = World(seed=world_seed)
        self.timestep = 0
        return self._get_obs(), self._info()

    def step(self, action):
        assert self.action_space.contains(np.asarray(action, dtype=np.int64)), f"Invalid action {action}"
        assert self.world is not None, "Call reset() before step()"
        w = self.world

        score0, health0 = w.score, w.health
        for _ in range(self.frame_skip):
            inp = action_to_input(action, w.player.center)
            w.update(self.dt, inp)
            if w.game_over:
                break

        reward = float(w.score - score0) - DAMAGE_PENALTY * float(health0 - w.health)

        self.timestep += 1
        terminated = w.game_over
        truncated = False
        if (self.time_limit_decisions is not None) and (self.timestep >= self.time_limit_decisions):
            truncated = True

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._info()

    # -------------------- Helpers --------------------

    def _get_obs(self) -> np.ndarray:
        assert self.world is not None
        return build_observation(self.world.snapshot())

    def _info(self) -> Dict[str, Any]:
        w = self.world
        return {
            "seed": w.seed,
            "score": w.score,
            "health": w.health,
            "zombies": len(w.zombies),
            "timestep": self.timestep,
        }

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.world is None:
            return None

        if self.renderer is None:
            pygame.font.init()
            self.renderer = Renderer(pygame.font.SysFont("jetbrainsmono", 22))

        canvas = self.renderer.draw(self.world.snapshot())

        if self.render_mode == "human":
            if self.screen is None:
                pygame.init()
                self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
                pygame.display.set_caption("Minigun Zombies — Gym Env")
                self.clock = pygame.time.Clock()
            # Pump the event queue so the OS doesn't think we're hung
            pygame.event.pump()
            self.screen.blit(canvas, (0, 0))
            pygame.display.flip()
            self.clock.tick(self.metadata["render_fps"])
            return None

        # rgb_array: (H, W, 3) uint8
        arr = pygame.surfarray.array3d(canvas)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.screen is not None:
            pygame.display.quit()
            pygame.quit()
            self.screen = None
            self.clock = None
