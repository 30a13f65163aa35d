"""Draw the visual-state arena of the mounted scene."""
from __future__ import annotations

import math

import pygame
from opsviz import VisualArena

from ui.constants import BORDER, VIEW_BG, VIEW_H, VIEW_W, rgb
from ui.projection import project, world_position

# Kinds drawn as a segment along their in-plane angle.
_SEGMENT_KINDS = {"joint", "blade"}


def _shade(color: str, intensity: float, opacity: float) -> tuple[int, int, int]:
    """Brighten by intensity, then blend toward the background by opacity."""
    r, g, b = rgb(color)
    boost = 0.6 + min(max(intensity, 0.0), 2.0) * 0.4
    alpha = min(max(opacity, 0.0), 1.0)
    br, bg, bb = VIEW_BG
    return (
        int(br + (min(r * boost, 255) - br) * alpha),
        int(bg + (min(g * boost, 255) - bg) * alpha),
        int(bb + (min(b * boost, 255) - bb) * alpha),
    )


def draw_scene(surface: pygame.Surface, arena: VisualArena, font: pygame.font.Font, title: str) -> None:
    pygame.draw.rect(surface, VIEW_BG, (0, 0, VIEW_W, VIEW_H))
    center = (VIEW_W // 2, VIEW_H // 2)

    placed: dict[int, tuple[int, int, float]] = {}
    depth: dict[int, float] = {}
    for eid, _ in arena.query():
        x, y, z = world_position(arena, eid)
        point = project(x, y, z, center)
        if point is not None:
            placed[eid] = point
            depth[eid] = z

    for _, record in arena.query("connection-line"):
        if record.ends is None:
            continue
        a, b = record.ends
        if a in placed and b in placed:
            color = _shade(record.color, 1.0, record.opacity)
            pygame.draw.line(surface, color, placed[a][:2], placed[b][:2], 1)

    # Far to near, so nearer entities overdraw.
    for eid in sorted(placed, key=lambda e: depth[e]):
        record = arena.get(eid)
        if record.kind == "connection-line":
            continue
        sx, sy, scale = placed[eid]
        color = _shade(record.color, record.intensity, record.opacity)
        size = max(record.size * record.scale * scale * 0.5, 1.0)
        if record.kind in _SEGMENT_KINDS:
            ex = sx + math.sin(record.angle) * size * 2
            ey = sy - math.cos(record.angle) * size * 2
            pygame.draw.line(surface, color, (sx, sy), (ex, ey), 3)
        elif record.kind == "body":
            rect = pygame.Rect(0, 0, size * 2, max(size * 0.6, 2))
            rect.center = (sx, sy)
            pygame.draw.rect(surface, color, rect, 1)
        else:
            pygame.draw.circle(surface, color, (sx, sy), int(size))

    label = font.render(title, True, (200, 200, 210))
    surface.blit(label, (10, 8))
    pygame.draw.line(surface, BORDER, (VIEW_W, 0), (VIEW_W, VIEW_H))
