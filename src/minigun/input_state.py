# src/minigun/input_state.py
from __future__ import annotations
from dataclasses import dataclass

from .config import WIDTH, HEIGHT


@dataclass(frozen=True)
class InputState:
    """
    One frame of player intent, already in world coordinates.
    Produced by controls.read_input (keyboard/mouse) or by the agent env.
    """
    move_axis: int = 0        # -1 left, 0 idle, +1 right
    jump_held: bool = False
    aim_x: float = WIDTH / 2
    aim_y: float = HEIGHT / 2
    fire_held: bool = False

    def __post_init__(self):
        if self.move_axis not in (-1, 0, 1):
            raise ValueError(f"move_axis must be -1, 0 or 1, got {self.move_axis!r}")


IDLE_INPUT = InputState()
