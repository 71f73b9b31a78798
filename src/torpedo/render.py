# render.py
from typing import Tuple

import pygame # type: ignore

from .config import (
    HUD_H, CELL_SIZE,
    BG, GRID_LINE, HEAD, HEAD_EDGE, NOSE, LIGHTS, SEGMENT, ITEM, ITEM_CORE,
    TEXT, ACCENT, DANGER,
    UP, DOWN, LEFT,
)
from .progression import speed_fraction
from .session import Phase, Snapshot


# ---------- Helpers ----------
def cell_rect(gx: int, gy: int, inset: int = 1) -> pygame.Rect:
    return pygame.Rect(
        gx * CELL_SIZE + inset,
        HUD_H + gy * CELL_SIZE + inset,
        CELL_SIZE - 2 * inset,
        CELL_SIZE - 2 * inset,
    )

def fade(color: Tuple[int, int, int], intensity: float) -> Tuple[int, int, int]:
    return tuple(int(BG[i] + (color[i] - BG[i]) * intensity) for i in range(3))

def nose_points(rect: pygame.Rect, heading) -> list:
    cx, cy = rect.center
    if heading == UP:
        return [(cx, rect.top), (cx - 4, rect.top + 6), (cx + 4, rect.top + 6)]
    if heading == DOWN:
        return [(cx, rect.bottom), (cx - 4, rect.bottom - 6), (cx + 4, rect.bottom - 6)]
    if heading == LEFT:
        return [(rect.left, cy), (rect.left + 6, cy - 4), (rect.left + 6, cy + 4)]
    return [(rect.right, cy), (rect.right - 6, cy - 4), (rect.right - 6, cy + 4)]


# ---------- Board ----------
def draw_board(screen: pygame.Surface, size: int) -> None:
    px = size * CELL_SIZE
    screen.fill(BG)
    for i in range(size + 1):
        p = i * CELL_SIZE
        pygame.draw.line(screen, GRID_LINE, (p, HUD_H), (p, HUD_H + px))
        pygame.draw.line(screen, GRID_LINE, (0, HUD_H + p), (px, HUD_H + p))

def draw_torpedo(screen: pygame.Surface, snap: Snapshot) -> None:
    n = len(snap.body)
    # tail first so the head is drawn on top
    for index in range(n - 1, 0, -1):
        x, y = snap.body[index]
        intensity = max(0.3, 1 - (n - index) * 0.1)
        rect = cell_rect(x, y)
        pygame.draw.rect(screen, fade(SEGMENT, intensity), rect, border_radius=4)
        pygame.draw.rect(screen, fade(HEAD_EDGE, intensity), rect, 1, border_radius=4)

    rect = cell_rect(*snap.body[0])
    pygame.draw.rect(screen, HEAD, rect, border_radius=8)
    pygame.draw.rect(screen, HEAD_EDGE, rect, 2, border_radius=8)
    pygame.draw.polygon(screen, NOSE, nose_points(rect, snap.heading))
    pygame.draw.circle(screen, LIGHTS, rect.center, 2)

def draw_item(screen: pygame.Surface, snap: Snapshot, t_ms: int) -> None:
    if snap.item is None:
        return
    rect = cell_rect(*snap.item)
    pulse = 1 + 2 * ((t_ms // 100) % 2)
    pygame.draw.circle(screen, ITEM, rect.center, CELL_SIZE // 2 - 3 + pulse // 2)
    pygame.draw.circle(screen, ITEM_CORE, rect.center, 2)


# ---------- HUD / overlays ----------
def draw_hud(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot, cfg) -> None:
    items = [
        f"Energy {snap.score}",
        f"Record {snap.best_score}",
        f"Boost {snap.level}",
        f"Size {snap.length}",
    ]
    x = 8
    for label in items:
        surf = font.render(label, True, TEXT)
        screen.blit(surf, (x, 6))
        x += surf.get_width() + 18

    speed = font.render(f"{snap.moves_per_second} moves/sec", True, TEXT)
    screen.blit(speed, (8, 30))
    width = cfg.grid_size * CELL_SIZE
    bar = pygame.Rect(speed.get_width() + 20, 34, width - speed.get_width() - 30, 10)
    pygame.draw.rect(screen, GRID_LINE, bar, border_radius=5)
    frac = speed_fraction(snap.interval_ms, cfg.initial_interval_ms, cfg.min_interval_ms)
    if frac > 0:
        filled = bar.copy()
        filled.width = max(1, int(bar.width * frac))
        pygame.draw.rect(screen, ACCENT, filled, border_radius=5)

def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot, px: int) -> None:
    if snap.phase is Phase.PLAYING:
        return

    overlay = pygame.Surface((px, px), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 170))
    screen.blit(overlay, (0, HUD_H))

    if snap.phase is Phase.MENU:
        lines = [("Initialize Torpedo?", ACCENT), ("Press SPACE or ENTER to launch", TEXT)]
    elif snap.phase is Phase.PAUSED:
        lines = [("TORPEDO SUSPENDED", ACCENT), ("Press SPACE to resume", TEXT)]
    else:
        lines = [
            ("TORPEDO DESTROYED", DANGER),
            (f"Energy collected: {snap.score}", TEXT),
            (f"Size: {snap.length}   Boost: {snap.level}", TEXT),
        ]
        if snap.new_best:
            lines.append(("NEW HIGH SCORE!", ACCENT))
        lines.append(("Press R to try again", TEXT))

    cy = HUD_H + px // 2 - (len(lines) * 28) // 2
    for text, color in lines:
        surf = font.render(text, True, color)
        screen.blit(surf, surf.get_rect(center=(px // 2, cy)))
        cy += 28

def draw_frame(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot, cfg, t_ms: int) -> None:
    draw_board(screen, cfg.grid_size)
    draw_item(screen, snap, t_ms)
    draw_torpedo(screen, snap)
    draw_hud(screen, font, snap, cfg)
    draw_overlay(screen, font, snap, cfg.grid_size * CELL_SIZE)
