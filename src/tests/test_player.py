# src/tests/test_player.py
"""
Player physics and weapon tests.

Usage (from repo root):
  python -m pytest src/tests/test_player.py
  python -m src.tests.test_player
"""
from __future__ import annotations
import pytest

from src.minigun.config import WIDTH, HEIGHT, G_ABS, JUMP_VY, PLAYER_W, PLAYER_H, BULLET_SPEED
from src.minigun.input_state import InputState
from src.minigun.level import build_level
from src.minigun.player import Player, Cooling, IDLE

PLATFORMS = build_level()
GROUND = PLATFORMS[0]
BANK = PLATFORMS[1]          # x 140..400, top = HEIGHT - 180
NOOP = InputState()


def grounded_player(x: float = 160.0) -> Player:
    return Player(x=x, y=GROUND.top - PLAYER_H, grounded=True)


def test_rests_on_ground():
    p = grounded_player()
    for _ in range(30):
        p.update(1 / 60, NOOP, PLATFORMS)
    assert p.grounded
    assert p.vy == 0.0
    assert p.y == pytest.approx(GROUND.top - PLAYER_H)


def test_try_jump_only_when_grounded():
    p = Player(grounded=True, vy=250.0)
    assert p.try_jump()
    assert p.grounded is False
    assert p.vy == JUMP_VY
    # airborne: no double jump
    assert not p.try_jump()


def test_jump_through_update_same_tick():
    p = grounded_player()
    dt = 1 / 60
    p.update(dt, InputState(jump_held=True), PLATFORMS)
    assert p.grounded is False
    assert p.vy == pytest.approx(JUMP_VY + G_ABS * dt)
    assert p.y < GROUND.top - PLAYER_H


def test_lands_on_platform_from_above():
    p = Player(x=200.0, y=BANK.top - PLAYER_H - 10, vy=600.0)
    p.update(1 / 60, NOOP, PLATFORMS)
    assert p.grounded
    assert p.vy == 0.0
    assert p.y == pytest.approx(BANK.top - PLAYER_H)


def test_passes_up_through_platform():
    # starts below the bank top and moves up: one-sided, no landing
    p = Player(x=200.0, y=BANK.top - 40, vy=-700.0)
    p.update(1 / 60, NOOP, PLATFORMS)
    assert not p.grounded
    assert p.vy < 0


def test_landing_uses_end_of_frame_x():
    # Overlaps the bank's left edge at the start of the frame, crosses its top while
    # sliding off it. Only the end-of-frame rectangle is tested, so no landing.
    p = Player(x=100.0, y=BANK.top - PLAYER_H - 5, vy=300.0)
    p.update(1 / 30, InputState(move_axis=-1), PLATFORMS)
    assert p.x + p.w < BANK.x
    assert p.y + p.h > BANK.top
    assert not p.grounded


def test_floor_clamp_without_platforms():
    p = Player(x=600.0, y=HEIGHT - PLAYER_H - 1, vy=900.0)
    p.update(1 / 30, NOOP, [])
    assert p.grounded
    assert p.y == HEIGHT - PLAYER_H
    assert p.vy == 0.0


def test_horizontal_clamp_to_world():
    p = grounded_player(x=5.0)
    p.update(1 / 30, InputState(move_axis=-1), PLATFORMS)
    assert p.x == 0.0

    p = grounded_player(x=WIDTH - PLAYER_W - 1.0)
    p.update(1 / 30, InputState(move_axis=1), PLATFORMS)
    assert p.x == WIDTH - PLAYER_W


def test_facing_only_changes_on_move():
    p = grounded_player(x=600.0)
    p.update(1 / 60, InputState(move_axis=-1), PLATFORMS)
    assert p.facing == -1
    assert p.vx == -420.0
    p.update(1 / 60, NOOP, PLATFORMS)
    assert p.facing == -1
    assert p.vx == 0.0


def test_fire_held_one_second_gives_25_bullets():
    p = grounded_player()
    fire = InputState(aim_x=1000.0, aim_y=300.0, fire_held=True)
    shots = []
    for _ in range(100):
        shots.extend(p.update(0.01, fire, PLATFORMS))
    assert len(shots) == 25


def test_release_returns_to_idle_and_refires_immediately():
    p = grounded_player()
    fire = InputState(aim_x=1000.0, aim_y=300.0, fire_held=True)
    assert len(p.update(1 / 60, fire, PLATFORMS)) == 1
    assert isinstance(p.fire, Cooling)
    assert len(p.update(1 / 60, fire, PLATFORMS)) == 0

    p.update(1 / 60, NOOP, PLATFORMS)
    assert p.fire == IDLE
    # no idle build-up: a long release still just means "fire now"
    for _ in range(30):
        p.update(1 / 60, NOOP, PLATFORMS)
    assert len(p.update(1 / 60, fire, PLATFORMS)) == 1
    assert len(p.update(1 / 60, fire, PLATFORMS)) == 0


def test_bullet_aims_from_center():
    p = grounded_player(x=600.0)
    cx, cy = p.center
    (b,) = p.update(1 / 60, InputState(aim_x=cx + 500.0, aim_y=cy, fire_held=True), PLATFORMS)
    assert (b.x, b.y) == pytest.approx((cx, cy))
    assert b.vx == pytest.approx(BULLET_SPEED)
    assert b.vy == pytest.approx(0.0)


def test_zero_length_aim_does_not_crash():
    p = grounded_player(x=600.0)
    cx, cy = p.center
    (b,) = p.update(1 / 60, InputState(aim_x=cx, aim_y=cy, fire_held=True), PLATFORMS)
    assert (b.vx, b.vy) == (0.0, 0.0)


def main():
    raise SystemExit(pytest.main([__file__, "-q"]))


if __name__ == "__main__":
    main()
