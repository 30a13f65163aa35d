"""Connected-graph scenes: alert network, neural network, server room."""
from __future__ import annotations

import math

from opsviz import FrameScheduler, Scene
from opsviz_motion import Bob, Compose, Flare, Flicker, Pulse, Spin, Static

from opsviz_scenes.common import AMBER, BLUE, GREEN, NIGHT, RED, STEEL, WHITE, new_scene
from opsviz_scenes.topology import Vec3, build_layered, build_mesh

NETWORK_NODES = 12
NEURAL_LAYERS = (4, 6, 8, 6, 3)
RACK_SLOTS = 5

_NODE_COLORS = (RED, BLUE, AMBER)


def build_network(seed: int | None = None, scheduler: FrameScheduler | None = None) -> Scene:
    """Jittered ring of nodes joined by a random mesh over a fixed backbone."""
    scene, rng = new_scene("network", seed, scheduler)
    positions: list[Vec3] = []
    node_ids = []
    for i in range(NETWORK_NODES):
        angle = (i / NETWORK_NODES) * math.pi * 2
        radius = 3 + rng.random()
        y = rng.random() * 2 - 1
        size = 0.2 + rng.random() * 0.2
        x, z = math.cos(angle) * radius, math.sin(angle) * radius
        positions.append((x, y, z))
        node_ids.append(
            scene.add_entity(
                "orbiting-node",
                Bob(center=y, amplitude=0.1, freq=0.5, phase=i),
                x=x,
                z=z,
                size=size,
                color=_NODE_COLORS[i % 3],
                intensity=1.0,
            )
        )

    topology = build_mesh(positions, rng)
    for k, edge in enumerate(topology.edges):
        scene.add_entity(
            "connection-line",
            Pulse(0.5, 0.3, freq=2, phase=k, channel="opacity"),
            color=BLUE,
            ends=(node_ids[edge.a], node_ids[edge.b]),
        )
    scene.add_entity("orb", Static(), size=0.5, color=GREEN, intensity=1.0)
    return scene


def build_neural(seed: int | None = None, scheduler: FrameScheduler | None = None) -> Scene:
    """Feed-forward layers whose nodes breathe and fire at random-looking moments."""
    scene, rng = new_scene("neural", seed, scheduler)
    topology = build_layered(NEURAL_LAYERS, rng)
    last = len(NEURAL_LAYERS) - 1

    node_ids = []
    for i, node in enumerate(topology.nodes):
        if node.layer == 0:
            color = BLUE
        elif node.layer == last:
            color = GREEN
        else:
            color = WHITE
        x, y, z = node.position
        node_ids.append(
            scene.add_entity(
                "node",
                Compose(
                    Pulse(1.0, 0.1, freq=2, phase=i * 0.2, channel="scale"),
                    Flare(0.7, hot=2.0, cool=0.5, phase=i),
                ),
                x=x,
                y=y,
                z=z,
                size=0.1,
                color=color,
                opacity=0.9,
            )
        )

    for k, edge in enumerate(topology.edges):
        target_layer = topology.nodes[edge.b].layer
        scene.add_entity(
            "connection-line",
            Flicker(0.2, 1.0, freq=3, phase=k * 0.5),
            color=GREEN if target_layer == last else BLUE,
            ends=(node_ids[edge.a], node_ids[edge.b]),
        )
    return scene


def build_server_room(seed: int | None = None, scheduler: FrameScheduler | None = None) -> Scene:
    """Four racks of blinking indicators around a hub, linked to corner switches."""
    scene, rng = new_scene("server_room", seed, scheduler)
    still = Static()
    root = scene.add_entity("body", Spin(0.1, channel="heading"), color=NIGHT)

    hub = scene.add_entity("body", still, size=0.5, color=GREEN, intensity=1.0, parent=root)
    corners = []
    for x, z, color in ((2.5, 2.5, BLUE), (-2.5, 2.5, BLUE), (2.5, -2.5, AMBER), (-2.5, -2.5, BLUE)):
        corners.append(
            scene.add_entity("body", still, x=x, z=z, size=0.5, color=color, intensity=1.0, parent=root)
        )

    racks = (
        (2.5, 0.0, -math.pi / 2),
        (-2.5, 0.0, math.pi / 2),
        (0.0, 2.5, math.pi),
        (0.0, -2.5, 0.0),
    )
    index = 0
    for x, z, heading in racks:
        rack = scene.add_entity(
            "body", still, x=x, z=z, heading=heading, size=1.2, color=NIGHT, parent=root
        )
        for slot in range(RACK_SLOTS):
            scene.add_entity(
                "indicator-light",
                Pulse(0.5, 0.5, freq=2, phase=index),
                x=0.4,
                y=-0.8 + slot * 0.35,
                z=0.39,
                size=0.03,
                color=GREEN if rng.random() > 0.2 else AMBER,
                parent=rack,
            )
            index += 1

    for k, corner in enumerate(corners):
        scene.add_entity(
            "connection-line",
            Flicker(0.3, 1.0, freq=3, phase=k * 0.5),
            color=BLUE,
            ends=(hub, corner),
        )
    scene.add_entity("body", still, y=-1.1, size=10.0, color=STEEL, opacity=0.5, intensity=0.1, parent=root)
    return scene
