"""Moving-vehicle scenes: warehouse shelf robot and hovering aircraft."""
from __future__ import annotations

import math

from opsviz import FrameScheduler, Scene
from opsviz_motion import Bank, Bob, Compose, Drift, GatedBob, Pulse, Static

from opsviz_scenes.common import AMBER, BLUE, GRAPHITE, NIGHT, STEEL, new_scene

SHELVES_PER_ROW = 5


def _shelf_rows() -> list[tuple[float, float, float]]:
    rows = []
    for i in range(SHELVES_PER_ROW):
        rows.append((-5.0, -4 + i * 1.8, math.pi / 2))
        rows.append((5.0, -4 + i * 1.8, -math.pi / 2))
        rows.append((-4 + i * 1.8, 5.0, math.pi))
    return rows


def build_warehouse(seed: int | None = None, scheduler: FrameScheduler | None = None) -> Scene:
    """Shelving with a robot shuttling along the aisle, lifting now and then."""
    scene, rng = new_scene("warehouse", seed, scheduler)
    still = Static()
    for x, z, heading in _shelf_rows():
        stocked = rng.random() > 0.3
        scene.add_entity(
            "body",
            still,
            x=x,
            z=z,
            heading=heading,
            size=1.5,
            color=AMBER if stocked else STEEL,
            intensity=0.3,
        )
    scene.add_entity(
        "shelf-robot",
        Compose(
            Drift(amplitude_x=4.0, freq_x=0.5),
            GatedBob(rest=0.5, amplitude=0.3, freq=2.0, gate_freq=0.2, gate_threshold=0.8),
        ),
        size=0.8,
        color=BLUE,
        intensity=0.5,
    )
    return scene


def build_aircraft(seed: int | None = None, scheduler: FrameScheduler | None = None) -> Scene:
    """Hovering jet that banks gently, with two flickering exhaust glows."""
    scene, _ = new_scene("aircraft", seed, scheduler)
    jet = scene.add_entity(
        "body",
        Compose(
            Bob(center=0.0, amplitude=0.2, freq=0.5),
            Bank(roll_amplitude=0.05, roll_freq=0.3, yaw_base=math.pi / 4, yaw_amplitude=0.1, yaw_freq=0.2),
        ),
        size=4.0,
        color=GRAPHITE,
        intensity=0.1,
    )
    scene.add_entity("body", Static(), z=-0.3, size=5.5, color=STEEL, intensity=0.1, parent=jet)
    for phase, x in ((0.0, 0.3), (0.5, -0.3)):
        scene.add_entity(
            "exhaust-glow",
            Pulse(0.8, 0.2, freq=10, phase=phase),
            x=x,
            z=2.1,
            size=0.2,
            color=BLUE,
            parent=jet,
        )
    scene.add_entity("body", Static(), y=-2.0, size=20.0, color=NIGHT)
    return scene
