"""Parent transform composition and a flat perspective projection."""
from __future__ import annotations

import math

from opsviz import VisualArena

from ui.constants import CAMERA_DISTANCE, CAMERA_HEIGHT, FOCAL, NEAR


def world_position(arena: VisualArena, entity_id: int) -> tuple[float, float, float]:
    """Position of an entity after applying every ancestor's transform.

    A child's offset is rolled by the parent's ``angle`` (about z), turned
    by its ``heading`` (about y), then moved to the parent's position.
    """
    record = arena.get(entity_id)
    x, y, z = record.x, record.y, record.z
    parent = record.parent
    while parent is not None and arena.alive(parent):
        p = arena.get(parent)
        ca, sa = math.cos(p.angle), math.sin(p.angle)
        x, y = x * ca - y * sa, x * sa + y * ca
        ch, sh = math.cos(p.heading), math.sin(p.heading)
        x, z = x * ch + z * sh, -x * sh + z * ch
        x, y, z = x + p.x, y + p.y, z + p.z
        parent = p.parent
    return x, y, z


def project(
    x: float, y: float, z: float, center: tuple[int, int]
) -> tuple[int, int, float] | None:
    """Screen (sx, sy) and pixels-per-unit for a world point, or None if behind."""
    depth = CAMERA_DISTANCE - z
    if depth < NEAR:
        return None
    scale = FOCAL / depth
    sx = center[0] + x * scale
    sy = center[1] - (y - CAMERA_HEIGHT * 0.3) * scale
    return int(sx), int(sy), scale
