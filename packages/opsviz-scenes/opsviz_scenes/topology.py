"""Node/edge topology for network scenes, built once per scene."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol, Sequence

Vec3 = tuple[float, float, float]


class RandomSource(Protocol):
    def random(self) -> float: ...


@dataclass(frozen=True, slots=True)
class Node:
    position: Vec3
    layer: int = 0


@dataclass(frozen=True, slots=True)
class Edge:
    a: int
    b: int


@dataclass(frozen=True, slots=True)
class Topology:
    nodes: tuple[Node, ...]
    edges: tuple[Edge, ...]

    def degree(self, index: int) -> int:
        return sum(1 for e in self.edges if index in (e.a, e.b))


def build_mesh(
    positions: Sequence[Vec3],
    rng: RandomSource,
    threshold: float = 0.7,
    stride: int = 4,
) -> Topology:
    """Connect node pairs at random, over a fixed backbone.

    Pair ``(i, j)`` with ``i < j`` is connected when a uniform draw exceeds
    ``threshold`` or both indices are multiples of ``stride``. One draw is
    consumed per pair, in pair order.
    """
    if stride <= 0:
        raise ValueError("stride must be positive")
    nodes = tuple(Node(position=p) for p in positions)
    edges = []
    for i in range(len(nodes)):
        for j in range(i + 1, len(nodes)):
            draw = rng.random()
            if draw > threshold or (i % stride == 0 and j % stride == 0):
                edges.append(Edge(i, j))
    return Topology(nodes, tuple(edges))


def layer_positions(layers: Sequence[int], spacing: float = 1.5) -> list[Vec3]:
    """Layers side by side on x, each layer's nodes on a circle in y/z."""
    positions = []
    for layer_index, count in enumerate(layers):
        x = (layer_index - (len(layers) - 1) / 2) * spacing
        radius = count * 0.15
        for i in range(count):
            angle = (i / count) * math.pi * 2
            positions.append((x, math.sin(angle) * radius, math.cos(angle) * radius))
    return positions


def build_layered(
    layers: Sequence[int],
    rng: RandomSource,
    keep: float = 0.3,
    spacing: float = 1.5,
) -> Topology:
    """Feed-forward layout: edges only between consecutive layers.

    Each candidate edge is kept when a uniform draw exceeds ``keep``.
    """
    positions = layer_positions(layers, spacing)
    nodes = []
    offsets = []
    offset = 0
    for layer_index, count in enumerate(layers):
        offsets.append(offset)
        for i in range(count):
            nodes.append(Node(position=positions[offset + i], layer=layer_index))
        offset += count

    edges = []
    for layer_index in range(1, len(layers)):
        prev_offset = offsets[layer_index - 1]
        for i in range(layers[layer_index]):
            for j in range(layers[layer_index - 1]):
                if rng.random() > keep:
                    edges.append(Edge(prev_offset + j, offsets[layer_index] + i))
    return Topology(tuple(nodes), tuple(edges))
