# src/minigun/render.py
from __future__ import annotations
import math
from typing import Optional, Tuple

import pygame

from .config import (
    WIDTH, HEIGHT, HEALTH_BAR_FULL,
    COLOR_BG, COLOR_BG_BAND, COLOR_FG, COLOR_PLAT, COLOR_PLAT_LIP,
    COLOR_BULLET, COLOR_BULLET_GLOW, COLOR_PLAYER, COLOR_PLAYER_HEAD,
    COLOR_BARREL, COLOR_MUZZLE, COLOR_ZOMBIE, COLOR_ZOMBIE_HEAD, COLOR_ZOMBIE_TOUGH,
    COLOR_HEALTH_BAR, COLOR_SHADOW, COLOR_CROSSHAIR,
)
from .geometry import clamp
from .snapshot import WorldSnapshot, PlayerView, ZombieView

RESTART_BTN = pygame.Rect((WIDTH - 220) // 2, (HEIGHT - 80) // 2 + 40, 220, 80)


def _r(x, y, w, h) -> pygame.Rect:
    return pygame.Rect(int(x), int(y), int(w), int(h))


def draw_platforms(surf: pygame.Surface, snap: WorldSnapshot):
    for p in snap.platforms:
        pygame.draw.rect(surf, COLOR_PLAT, _r(p.x, p.y, p.w, p.h))
        pygame.draw.rect(surf, COLOR_PLAT_LIP, _r(p.x, p.y + p.h - 6, p.w, 6))


def draw_projectiles(surf: pygame.Surface, snap: WorldSnapshot, glow: pygame.Surface):
    for b in snap.projectiles:
        g = int(b.r * 2.8)
        surf.blit(glow, (int(b.x) - g, int(b.y) - g))
        pygame.draw.circle(surf, COLOR_BULLET, (int(b.x), int(b.y)), int(b.r))


def draw_zombie(surf: pygame.Surface, z: ZombieView, shadow: pygame.Surface):
    x, y = int(z.x), int(z.y)
    w, h = int(z.w), int(z.h)
    surf.blit(shadow, (x + 6, y + h - 6))
    pygame.draw.rect(surf, COLOR_ZOMBIE_TOUGH if z.tough else COLOR_ZOMBIE, (x, y + 8, w, h - 12))
    pygame.draw.rect(surf, COLOR_ZOMBIE_HEAD, (x + 8, y - 6, w - 16, 22))
    # eyes
    pygame.draw.rect(surf, (0, 0, 0), (x + w // 2 - 10, y - 2, 6, 6))
    pygame.draw.rect(surf, (0, 0, 0), (x + w // 2 + 4, y - 2, 6, 6))
    # health bar
    pygame.draw.rect(surf, (20, 20, 20), (x, y - 14, w, 5))
    bar = clamp(z.health / HEALTH_BAR_FULL * w, 0, w)
    pygame.draw.rect(surf, COLOR_HEALTH_BAR, (x, y - 14, int(bar), 5))


def draw_player(surf: pygame.Surface, p: PlayerView, shadow: pygame.Surface):
    x, y = int(p.x), int(p.y)
    w, h = int(p.w), int(p.h)
    surf.blit(shadow, (x + 6, y + h - 6))
    pygame.draw.rect(surf, COLOR_PLAYER, (x, y + 8, w, h - 16))
    pygame.draw.ellipse(surf, COLOR_PLAYER_HEAD, (x + w // 2 - 16, y - 4, 32, 28))

    # minigun barrel rotated toward the aim point
    cx, cy = p.x + p.w / 2, p.y + p.h / 2
    ang = math.atan2(p.aim_y - cy, p.aim_x - cx)
    ca, sa = math.cos(ang), math.sin(ang)

    def quad(x0, x1, half):
        pts = [(x0, -half), (x1, -half), (x1, half), (x0, half)]
        return [(cx + px * ca - py * sa, cy + px * sa + py * ca) for px, py in pts]

    pygame.draw.polygon(surf, COLOR_BARREL, quad(0, 36, 6))
    pygame.draw.polygon(surf, COLOR_MUZZLE, quad(36, 44, 4))


def draw_crosshair(surf: pygame.Surface, aim: Tuple[float, float]):
    ax, ay = int(aim[0]), int(aim[1])
    layer = pygame.Surface((17, 17), pygame.SRCALPHA)
    pygame.draw.line(layer, COLOR_CROSSHAIR, (0, 8), (16, 8))
    pygame.draw.line(layer, COLOR_CROSSHAIR, (8, 0), (8, 16))
    surf.blit(layer, (ax - 8, ay - 8))


def draw_hud(surf: pygame.Surface, snap: WorldSnapshot, font: pygame.font.Font):
    surf.blit(font.render(f"Score: {snap.score}", True, COLOR_FG), (16, 12))
    surf.blit(font.render(f"Health: {snap.health}", True, COLOR_FG), (16, 36))


def draw_game_over(surf: pygame.Surface, snap: WorldSnapshot, font: pygame.font.Font):
    veil = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
    veil.fill((0, 0, 0, 140))
    surf.blit(veil, (0, 0))

    title = font.render("You died", True, COLOR_FG)
    score = font.render(f"Score: {snap.score}", True, COLOR_FG)
    surf.blit(title, (WIDTH // 2 - title.get_width() // 2, HEIGHT // 2 - 70))
    surf.blit(score, (WIDTH // 2 - score.get_width() // 2, HEIGHT // 2 - 40))

    pygame.draw.rect(surf, (40, 60, 90), RESTART_BTN, border_radius=10)
    pygame.draw.rect(surf, (90, 130, 180), RESTART_BTN, width=2, border_radius=10)
    btn_txt = font.render("Restart (R)", True, (220, 235, 255))
    surf.blit(btn_txt, (RESTART_BTN.centerx - btn_txt.get_width() // 2,
                        RESTART_BTN.centery - btn_txt.get_height() // 2))


class Renderer:
    """Draws a WorldSnapshot onto a WIDTH x HEIGHT surface. Needs no display."""

    def __init__(self, font: Optional[pygame.font.Font] = None):
        self.font = font
        self.canvas = pygame.Surface((WIDTH, HEIGHT))
        self._shadow = pygame.Surface((36, 6), pygame.SRCALPHA)
        self._shadow.fill(COLOR_SHADOW)
        g = int(6 * 2.8)
        self._glow = pygame.Surface((2 * g, 2 * g), pygame.SRCALPHA)
        pygame.draw.circle(self._glow, COLOR_BULLET_GLOW, (g, g), g)

    def draw(self, snap: WorldSnapshot) -> pygame.Surface:
        surf = self.canvas
        surf.fill(COLOR_BG)
        pygame.draw.rect(surf, COLOR_BG_BAND, (0, HEIGHT - 120, WIDTH, 120))

        draw_platforms(surf, snap)
        draw_projectiles(surf, snap, self._glow)
        for z in snap.zombies:
            draw_zombie(surf, z, self._shadow)
        draw_player(surf, snap.player, self._shadow)
        draw_crosshair(surf, snap.aim)

        if self.font is not None:
            draw_hud(surf, snap, self.font)
            if snap.game_over:
                draw_game_over(surf, snap, self.font)
        return surf

    def present(self, window: pygame.Surface, snap: WorldSnapshot):
        """Draw at virtual resolution and scale onto the window."""
        canvas = self.draw(snap)
        if window.get_size() == canvas.get_size():
            window.blit(canvas, (0, 0))
        else:
            window.blit(pygame.transform.smoothscale(canvas, window.get_size()), (0, 0))
