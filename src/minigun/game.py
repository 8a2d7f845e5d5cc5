# src/minigun/game.py
import sys, argparse, logging, random
import pygame
from pygame import K_ESCAPE, K_r, K_n

from .config import FPS, WINDOW_W, WINDOW_H, SEED_DEFAULT, DEBUG_OVERLAY, COLOR_FG
from .controls import read_input, window_to_world
from .driver import Simulation
from .render import Renderer, RESTART_BTN
from .world import World


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Minigun Zombies — platforms, a minigun, endless zombies.")
    p.add_argument("--seed", type=int, default=None,
                   help="Run seed. Omit for SEED_DEFAULT, use -1 for random each launch.")
    p.add_argument("--fps", type=int, default=FPS, help="Frame-rate cap.")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Console log level.")
    return p.parse_args(argv)


def resolve_seed(seed_arg):
    """None -> SEED_DEFAULT; -1 -> fresh random seed."""
    if seed_arg is None:
        return SEED_DEFAULT
    if seed_arg == -1:
        return random.randrange(0, 2**32 - 1)
    return seed_arg


def run(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    pygame.display.set_caption("Minigun Zombies")
    window = pygame.display.set_mode((WINDOW_W, WINDOW_H), pygame.RESIZABLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("jetbrainsmono", 22)
    renderer = Renderer(font)

    sim = Simulation(World(seed=resolve_seed(args.seed)))

    while True:
        # frame cap only; dt is sampled and clamped by the Simulation's own clock
        pg_clock.tick(args.fps)
        game_over = sim.world.game_over

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if event.type == pygame.KEYDOWN:
                if event.key == K_ESCAPE:
                    pygame.quit(); sys.exit()
                if event.key == K_r and game_over:
                    # Restart SAME seed
                    sim.restart()
                if event.key == K_n and game_over:
                    sim.restart(resolve_seed(-1))
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and game_over:
                wx, wy = window_to_world(event.pos, window.get_size())
                if RESTART_BTN.collidepoint(wx, wy):
                    sim.restart()

        inp = read_input(pygame.key.get_pressed(), pygame.mouse.get_pos(),
                         pygame.mouse.get_pressed(), window.get_size())
        snap = sim.step(inp)

        # --- Render ---
        renderer.present(window, snap)
        if DEBUG_OVERLAY:
            msg = (f"seed={snap.seed} dt={sim.last_dt * 1000:.1f}ms fps={pg_clock.get_fps():.0f} "
                   f"zombies={len(snap.zombies)} bullets={len(snap.projectiles)} "
                   f"interval={sim.world.spawner.interval_ms:.0f}ms")
            window.blit(font.render(msg, True, COLOR_FG), (12, window.get_height() - 30))
        pygame.display.flip()


if __name__ == "__main__":
    run()
