# src/minigun/controls.py
from __future__ import annotations
from typing import Sequence, Tuple

import pygame

from .config import WIDTH, HEIGHT
from .input_state import InputState

LEFT_KEYS = (pygame.K_a, pygame.K_LEFT)
RIGHT_KEYS = (pygame.K_d, pygame.K_RIGHT)
JUMP_KEYS = (pygame.K_w, pygame.K_UP, pygame.K_SPACE)


def window_to_world(pos: Tuple[int, int], window_size: Tuple[int, int]) -> Tuple[float, float]:
    """Map a window pixel to virtual-resolution world coordinates."""
    ww, wh = window_size
    return pos[0] * WIDTH / max(1, ww), pos[1] * HEIGHT / max(1, wh)


def read_input(keys: Sequence[bool], mouse_pos: Tuple[int, int], mouse_buttons: Sequence[bool],
               window_size: Tuple[int, int] = (WIDTH, HEIGHT)) -> InputState:
    """
    keys: pygame.key.get_pressed() result
    mouse_buttons: pygame.mouse.get_pressed() result (left button fires)
    """
    move = 0
    if any(keys[k] for k in LEFT_KEYS):
        move -= 1
    if any(keys[k] for k in RIGHT_KEYS):
        move += 1
    aim_x, aim_y = window_to_world(mouse_pos, window_size)
    return InputState(
        move_axis=move,
        jump_held=any(keys[k] for k in JUMP_KEYS),
        aim_x=aim_x,
        aim_y=aim_y,
        fire_held=bool(mouse_buttons[0]),
    )
