"""opsviz-scenes - Animated entity sets for every console screen."""
from __future__ import annotations

from typing import Callable

from opsviz import FrameScheduler, Scene

from opsviz_scenes.health import STATUS_COLORS, STATUS_TEXT, HealthOrb
from opsviz_scenes.machines import (
    build_engine_bay,
    build_factory,
    build_robotic_arm,
    build_testing_chamber,
)
from opsviz_scenes.networks import build_network, build_neural, build_server_room
from opsviz_scenes.topology import Edge, Node, Topology, build_layered, build_mesh
from opsviz_scenes.vehicles import build_aircraft, build_warehouse

SceneBuilder = Callable[[int | None, FrameScheduler | None], Scene]

SCENES: dict[str, SceneBuilder] = {
    "factory": build_factory,
    "testing_chamber": build_testing_chamber,
    "engine_bay": build_engine_bay,
    "robotic_arm": build_robotic_arm,
    "network": build_network,
    "neural": build_neural,
    "server_room": build_server_room,
    "warehouse": build_warehouse,
    "aircraft": build_aircraft,
}


def build_scene(
    name: str, seed: int | None = None, scheduler: FrameScheduler | None = None
) -> Scene:
    try:
        builder = SCENES[name]
    except KeyError:
        raise KeyError(f"Unknown scene {name!r}; expected one of {sorted(SCENES)}") from None
    return builder(seed, scheduler)


__all__ = [
    "SCENES",
    "build_scene",
    "HealthOrb",
    "STATUS_COLORS",
    "STATUS_TEXT",
    "Topology",
    "Node",
    "Edge",
    "build_mesh",
    "build_layered",
]
