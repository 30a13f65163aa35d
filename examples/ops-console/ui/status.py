"""Health orb panel and bottom status bar."""
from __future__ import annotations

import pygame
from opsviz_scenes import HealthOrb

from ui.constants import (
    BORDER,
    PANEL_BG,
    SCREEN_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
    VIEW_H,
    rgb,
)


def draw_health(
    surface: pygame.Surface,
    font: pygame.font.Font,
    rect: pygame.Rect,
    orb: HealthOrb,
    clock_text: str,
    countdown: int | None,
    test_state: str,
    pulses: int = 0,
) -> None:
    """Draw the health orb, wall clock, deploy countdown, and test run state."""
    pygame.draw.rect(surface, PANEL_BG, rect)
    pygame.draw.line(surface, BORDER, rect.topleft, rect.topright)

    arena = orb.scene.arena
    glow = arena.get(orb.glow_id)
    core = arena.get(orb.core_id)
    sweep = arena.get(orb.sweep_id)
    color = rgb(orb.color)

    cx, cy = rect.x + 50, rect.centery
    radius = 32
    glow_surface = pygame.Surface((radius * 3, radius * 3), pygame.SRCALPHA)
    glow_surface.fill((0, 0, 0, 0))
    pygame.draw.circle(
        glow_surface,
        (*color, int(glow.opacity * 255)),
        (radius * 3 // 2, radius * 3 // 2),
        int(radius * glow.scale * 1.2),
    )
    surface.blit(glow_surface, (cx - radius * 3 // 2, cy - radius * 3 // 2))
    core_color = tuple(int(c * core.opacity) for c in color)
    pygame.draw.circle(surface, core_color, (cx, cy), int(radius * 0.6))

    # Radar sweep: clockwise from 12 o'clock.
    end = pygame.math.Vector2(0, -radius).rotate_rad(sweep.angle)
    pygame.draw.line(surface, color, (cx, cy), (cx + end.x, cy + end.y), 2)

    x = rect.x + 100
    y = rect.y + 10
    surface.blit(font.render(f"{orb.text}  ({pulses} pulses)", True, color), (x, y))
    y += 20
    surface.blit(font.render(clock_text, True, TEXT_COLOR), (x, y))
    y += 20
    deploy = f"Deploy in {countdown}" if countdown is not None else "Deploy: ready"
    surface.blit(font.render(deploy, True, TEXT_COLOR if countdown else TEXT_DIM), (x, y))
    y += 20
    surface.blit(font.render(f"Test run: {test_state}", True, TEXT_DIM), (x, y))


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font, fps: float) -> None:
    """Draw bottom key-bindings bar."""
    y = VIEW_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    pygame.draw.line(surface, BORDER, (0, y), (SCREEN_W, y))

    text = "[</>] Scene  [R] Regenerate  [H] Health  [D] Deploy  [T] Test  [Esc] Quit"
    label = font.render(text, True, TEXT_DIM)
    surface.blit(label, (8, y + STATUS_H // 2 - label.get_height() // 2))
    rate = font.render(f"{fps:.0f} fps", True, TEXT_DIM)
    surface.blit(rate, (SCREEN_W - rate.get_width() - 8, y + STATUS_H // 2 - rate.get_height() // 2))
