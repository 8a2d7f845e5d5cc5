# src/tests/test_world.py
"""
World pipeline tests: spawning, bullet hits, contact damage, game over, reset.

Usage (from repo root):
  python -m pytest src/tests/test_world.py
  python -m src.tests.test_world
"""
from __future__ import annotations
import logging
import pytest

from src.minigun.config import (
    WIDTH, HEIGHT, G_ABS, MAX_DT, ZOMBIE_H, PLAYER_H, GROUND_THICKNESS, ZOMBIE_SPAWN_OFFSET,
)
from src.minigun.input_state import InputState
from src.minigun.projectile import Projectile
from src.minigun.world import World
from src.minigun.zombie import Zombie

DT = 1 / 60
FLOOR_Y = HEIGHT - ZOMBIE_H        # zombies walk on the world floor


def floor_zombie(x: float = 800.0, health: float = 50.0, vx: float = 0.0) -> Zombie:
    return Zombie(x=x, y=FLOOR_Y, vx=vx, health=health)


def bullet_at(z: Zombie) -> Projectile:
    return Projectile(x=z.x + z.w / 2, y=z.y + z.h / 2, vx=0.0, vy=0.0)


@pytest.fixture
def world():
    return World(seed=42)


def fixed_damage(monkeypatch, world, *amounts):
    rolls = iter(amounts)
    monkeypatch.setattr(world, "_roll_damage", lambda: next(rolls))


def put_player_on_ground(w: World, x: float = 160.0):
    ground = w.platforms[0]
    w.player.x = x
    w.player.y = ground.top - PLAYER_H
    w.player.grounded = True


# -------------------- Bullet hits --------------------

def test_hit_to_exactly_zero_kills_same_tick_for_five(world, monkeypatch):
    z = floor_zombie(health=18.0)
    world.zombies = [z]
    world.projectiles = [bullet_at(z)]
    fixed_damage(monkeypatch, world, 18.0)

    world.update(DT)
    assert world.zombies == []
    assert world.projectiles == []
    assert world.score == 5


def test_two_hits_non_lethal_then_lethal(world, monkeypatch):
    z = floor_zombie(health=36.0)
    world.zombies = [z]
    fixed_damage(monkeypatch, world, 18.0, 18.0)

    world.projectiles = [bullet_at(z)]
    world.update(DT)
    assert world.zombies == [z]
    assert z.health == 18.0
    assert world.score == 1

    world.projectiles = [bullet_at(z)]
    world.update(DT)
    assert world.zombies == []
    assert world.score == 1 + 5


def test_bullet_hits_newest_zombie_only(world, monkeypatch):
    old = floor_zombie(health=50.0)
    new = floor_zombie(health=50.0)
    world.zombies = [old, new]
    world.projectiles = [bullet_at(new)]
    fixed_damage(monkeypatch, world, 15.0)

    world.update(DT)
    assert old.health == 50.0
    assert new.health == 35.0
    assert world.score == 1
    assert world.projectiles == []


def test_dead_zombie_not_hit_twice_in_one_frame(world, monkeypatch):
    z = floor_zombie(health=10.0)
    world.zombies = [z]
    world.projectiles = [bullet_at(z), bullet_at(z)]
    fixed_damage(monkeypatch, world, 15.0, 15.0)

    world.update(DT)
    assert world.zombies == []
    assert world.score == 5
    # the second bullet found nothing alive and keeps flying
    assert len(world.projectiles) == 1


def test_damage_roll_range(world):
    rolls = [world._roll_damage() for _ in range(500)]
    assert all(12.0 <= r < 20.0 for r in rolls)


# -------------------- Bullet lifecycle --------------------

def test_expired_bullet_removed_for_good(world):
    world.projectiles = [Projectile(x=600.0, y=300.0, vx=100.0, vy=0.0, life=0.05)]
    for _ in range(4):
        world.update(DT)
    assert world.projectiles == []
    for _ in range(30):
        world.update(DT)
        assert world.projectiles == []


def test_bullet_leaving_world_is_culled(world):
    world.projectiles = [Projectile(x=WIDTH + 45.0, y=300.0, vx=1200.0, vy=0.0)]
    world.update(DT)
    assert world.projectiles == []


def test_held_fire_adds_bullets(world):
    fire = InputState(aim_x=WIDTH, aim_y=300.0, fire_held=True)
    for _ in range(30):
        world.update(DT, fire)
    assert 10 <= len(world.projectiles) <= 13


# -------------------- Contact damage --------------------

def test_contact_damages_player_and_knocks_zombie_back(world):
    put_player_on_ground(world)
    z = floor_zombie(x=170.0, vx=-60.0)
    world.zombies = [z]

    world.update(DT)
    assert world.player.health == 88.0
    assert z.x == pytest.approx(170.0 - 1.0 + 40.0)
    assert z.vx == pytest.approx(-36.0)
    assert not world.game_over


def test_game_over_once_and_then_halts(world, caplog):
    caplog.set_level(logging.INFO, logger="src.minigun.world")
    put_player_on_ground(world)
    world.player.health = 12.0
    world.zombies = [floor_zombie(x=170.0, vx=-60.0), floor_zombie(x=165.0, vx=-60.0)]

    world.update(DT)
    assert world.game_over
    assert world.player.health == -12.0
    assert world.health == 0
    snap = world.snapshot()
    assert snap.health == 0
    assert snap.final_score == 0
    assert sum("Game over" in r.getMessage() for r in caplog.records) == 1

    frames = world.frames
    for _ in range(10):
        world.update(DT, InputState(fire_held=True))
    assert world.frames == frames
    assert world.snapshot() == snap


def test_zombie_past_left_edge_removed_without_score(world):
    world.zombies = [floor_zombie(x=-200.0, vx=-10.0)]
    world.update(DT)
    assert world.zombies == []
    assert world.score == 0


def test_zombie_inside_despawn_margin_kept(world):
    world.zombies = [floor_zombie(x=-150.0, vx=0.0)]
    world.update(DT)
    assert len(world.zombies) == 1


# -------------------- Spawning --------------------

def test_spawn_on_a_platform_height(world):
    z = world.spawn_zombie()
    assert z.x == WIDTH + ZOMBIE_SPAWN_OFFSET
    assert z.y + z.h in {p.top for p in world.platforms}


def test_spawn_without_platforms_uses_ground_height():
    w = World(seed=1, platforms=[])
    z = w.spawn_zombie()
    assert z.y == HEIGHT - ZOMBIE_H - GROUND_THICKNESS


def test_update_spawns_when_timer_elapses(world):
    world.spawner.timer_ms = 1590.0
    world.update(DT)
    assert len(world.zombies) == 1
    assert world.spawner.interval_ms == 1580.0
    assert world.spawner.timer_ms == 0.0


# -------------------- Time step --------------------

def test_update_clamps_large_dt(world):
    y0 = world.player.y
    world.update(0.5)
    assert world.player.vy == pytest.approx(G_ABS * MAX_DT)
    assert world.player.y == pytest.approx(y0 + G_ABS * MAX_DT * MAX_DT)


# -------------------- Reset / determinism --------------------

def test_reset_matches_fresh_world(world):
    fresh = World(seed=42).snapshot()
    busy = InputState(move_axis=1, jump_held=True, aim_x=900.0, aim_y=200.0, fire_held=True)
    for _ in range(240):
        world.update(DT, busy)
    world.reset()
    assert world.snapshot() == fresh
    assert world.score == 0
    assert world.zombies == [] and world.projectiles == []
    assert world.spawner.interval_ms == 1600.0 and world.spawner.timer_ms == 0.0
    assert world.rng.random() == World(seed=42).rng.random()


def test_reset_with_new_seed():
    w = World(seed=1)
    w.reset(seed=2)
    assert w.seed == 2
    assert w.snapshot() == World(seed=2).snapshot()


def test_same_seed_same_run():
    inputs = [InputState(move_axis=(i // 50) % 3 - 1, jump_held=(i % 90 == 0),
                         aim_x=1200.0, aim_y=600.0 - (i % 200), fire_held=(i % 7 != 0))
              for i in range(900)]
    a, b = World(seed=7), World(seed=7)
    for inp in inputs:
        a.update(DT, inp)
        b.update(DT, inp)
    assert a.snapshot() == b.snapshot()


def test_snapshot_publishes_aim_and_ints(world):
    world.update(DT, InputState(aim_x=321.0, aim_y=123.0))
    snap = world.snapshot()
    assert snap.aim == (321.0, 123.0)
    assert isinstance(snap.score, int) and isinstance(snap.health, int)
    assert snap.final_score is None
    assert len(snap.platforms) == 6


def main():
    raise SystemExit(pytest.main([__file__, "-q"]))


if __name__ == "__main__":
    main()
