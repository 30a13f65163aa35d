"""Rigid machinery scenes: factory, testing chamber, engine bay, robotic arm."""
from __future__ import annotations

import math

from opsviz import FrameScheduler, Scene
from opsviz_motion import Spin, Static, Swing

from opsviz_scenes.common import AMBER, BLUE, GRAPHITE, GREEN, NIGHT, RED, STEEL, WHITE, new_scene, ring

# 0.002 rad per frame at 60 fps.
FACTORY_SPIN = 0.12
TURNTABLE_SPIN = 0.1


def build_factory(seed: int | None = None, scheduler: FrameScheduler | None = None) -> Scene:
    scene, _ = new_scene("factory", seed, scheduler)
    root = scene.add_entity("body", Spin(FACTORY_SPIN, channel="heading"), color=GRAPHITE)
    still = Static()
    scene.add_entity("body", still, y=-1.0, size=8.0, color=GRAPHITE, intensity=0.05, parent=root)
    scene.add_entity("body", still, y=1.0, size=6.0, color=STEEL, intensity=0.08, parent=root)
    for y, size in ((2.5, 1.5), (4.0, 1.0)):
        scene.add_entity("body", still, y=y, size=size, color=STEEL, parent=root)
    scene.add_entity("orb", still, y=6.0, size=1.2, color=BLUE, intensity=0.8, parent=root)
    for x in (-2.0, 2.0):
        for z in (-2.0, 2.0):
            scene.add_entity("body", still, x=x, z=z, size=0.8, color=NIGHT, parent=root)
    for i, x in enumerate((-1.5, 1.5)):
        scene.add_entity(
            "indicator-light",
            still,
            x=x,
            y=1.2,
            z=3.0,
            size=0.3,
            color=BLUE if i % 2 == 0 else AMBER,
            intensity=1.2,
            parent=root,
        )
    return scene


def build_testing_chamber(
    seed: int | None = None, scheduler: FrameScheduler | None = None
) -> Scene:
    scene, _ = new_scene("testing_chamber", seed, scheduler)
    root = scene.add_entity("body", Spin(TURNTABLE_SPIN, channel="heading"), color=STEEL)
    still = Static()
    scene.add_entity("body", still, y=-1.5, size=4.0, color=STEEL, parent=root)
    scene.add_entity("body", still, size=3.0, color=GRAPHITE, opacity=0.7, parent=root)
    scene.add_entity("orb", still, size=2.0, color=BLUE, intensity=1.5, parent=root)
    scene.add_entity("body", still, y=-0.5, size=1.0, color=WHITE, intensity=0.2, parent=root)
    for i, x in enumerate((-2.0, 0.0, 2.0)):
        scene.add_entity(
            "indicator-light",
            still,
            x=x,
            y=1.0,
            size=0.3,
            color=GREEN if i == 1 else AMBER,
            intensity=1.0,
            parent=root,
        )
    scene.add_entity("orb", still, y=1.5, size=1.0, color=RED, intensity=1.0, parent=root)
    return scene


def build_engine_bay(seed: int | None = None, scheduler: FrameScheduler | None = None) -> Scene:
    scene, _ = new_scene("engine_bay", seed, scheduler)
    root = scene.add_entity("body", Spin(TURNTABLE_SPIN, channel="heading"), color=STEEL)
    still = Static()
    scene.add_entity("body", still, size=2.0, color=STEEL, intensity=0.05, parent=root)
    scene.add_entity("orb", still, z=-3.0, size=1.5, color=WHITE, intensity=0.1, parent=root)
    for i, (x, y) in enumerate(ring(8, 0.8)):
        scene.add_entity(
            "blade",
            still,
            x=x,
            y=y,
            z=-3.0,
            angle=i / 8 * math.pi * 2,
            size=0.8,
            color=WHITE,
            intensity=0.2,
            parent=root,
        )
    return scene


def build_robotic_arm(seed: int | None = None, scheduler: FrameScheduler | None = None) -> Scene:
    """Three chained joints, each swinging inside its own range."""
    scene, _ = new_scene("robotic_arm", seed, scheduler)
    still = Static()
    base = scene.add_entity("body", still, y=-2.0, size=1.5, color=STEEL, intensity=0.1)
    shoulder = scene.add_entity(
        "joint",
        Swing(-math.pi / 4, math.pi / 4, freq=0.5),
        y=0.7,
        size=3.0,
        color=GRAPHITE,
        parent=base,
    )
    elbow = scene.add_entity(
        "joint",
        Swing(-math.pi / 6, math.pi / 3, freq=0.7, phase=0.5),
        y=3.0,
        size=2.5,
        color=GRAPHITE,
        parent=shoulder,
    )
    scene.add_entity(
        "joint",
        Swing(-math.pi / 8, math.pi / 8, freq=1.0, phase=1.0),
        y=2.5,
        size=0.8,
        color=AMBER,
        intensity=0.8,
        parent=elbow,
    )
    for i, x in enumerate((-3.0, 3.0)):
        scene.add_entity(
            "indicator-light",
            still,
            x=x,
            y=0.9,
            z=-2.0,
            size=0.2,
            color=GREEN if i % 2 == 0 else RED,
            intensity=1.0,
            parent=base,
        )
    return scene
