"""Graph sources — planar embeddings with 2D vertex coordinates.

Vertex ids run from 1 to n. ``coordinates()[i - 1]`` is the position of vertex
``i`` and ``neighbors(i)`` lists its neighbours in rotation order (the same
orientation, clockwise or counter-clockwise, for every vertex).
"""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Protocol

import networkx as nx


class GraphSource(Protocol):
    """Read-only view of an embedded graph consumed by the painter."""

    def size(self) -> int:
        """Number of vertices."""
        ...

    def coordinates(self) -> Sequence[tuple[float, float]]:
        """Raw position of every vertex; index ``i - 1`` holds vertex ``i``."""
        ...

    def neighbors(self, vertex: int) -> Iterable[int]:
        """Neighbours of ``vertex`` in rotation order."""
        ...


@dataclass
class EmbeddedGraph:
    """In-memory graph source.

    Attributes:
        coords: Position of vertex ``i`` at index ``i - 1``.
        rotation: Maps vertex id → neighbour ids in rotation order.
        labels: Optional original node name per vertex id (index ``i - 1``).
    """

    coords: list[tuple[float, float]]
    rotation: dict[int, list[int]]
    labels: list[Hashable] = field(default_factory=list)

    def size(self) -> int:
        return len(self.coords)

    def coordinates(self) -> Sequence[tuple[float, float]]:
        return self.coords

    def neighbors(self, vertex: int) -> Iterable[int]:
        if not 1 <= vertex <= len(self.coords):
            raise IndexError(f"vertex {vertex} out of range 1..{len(self.coords)}")
        return iter(self.rotation.get(vertex, ()))

    def edge_count(self) -> int:
        """Number of undirected edges, counting each adjacency once."""
        return sum(len(nbrs) for nbrs in self.rotation.values()) // 2

    @classmethod
    def from_straight_line(
        cls,
        coords: Sequence[tuple[float, float]],
        edges: Iterable[tuple[int, int]],
    ) -> EmbeddedGraph:
        """Build the rotation system of a straight-line drawing.

        Neighbours of each vertex are ordered counter-clockwise by the angle of
        the segment leaving it. The drawing is assumed to be crossing-free.
        """
        n = len(coords)
        adjacency: dict[int, set[int]] = {v: set() for v in range(1, n + 1)}
        for u, v in edges:
            if u == v:
                continue
            if not (1 <= u <= n and 1 <= v <= n):
                raise IndexError(f"edge ({u}, {v}) references a vertex outside 1..{n}")
            adjacency[u].add(v)
            adjacency[v].add(u)

        rotation: dict[int, list[int]] = {}
        for v, nbrs in adjacency.items():
            vx, vy = coords[v - 1]
            rotation[v] = sorted(nbrs, key=lambda w, vx=vx, vy=vy: math.atan2(coords[w - 1][1] - vy, coords[w - 1][0] - vx))

        return cls(coords=[(float(x), float(y)) for x, y in coords], rotation=rotation)

    @classmethod
    def from_planar_embedding(
        cls,
        embedding: nx.PlanarEmbedding,
        pos: Mapping[Hashable, tuple[float, float]] | None = None,
    ) -> EmbeddedGraph:
        """Build from a networkx ``PlanarEmbedding``.

        Nodes are numbered 1..n in the embedding's node order and neighbours
        follow ``neighbors_cw_order``. When ``pos`` is omitted a straight-line
        drawing is computed with ``combinatorial_embedding_to_pos``.

        Raises:
            networkx.NetworkXException: if the embedding is not consistent.
        """
        embedding.check_structure()
        if pos is None:
            pos = nx.combinatorial_embedding_to_pos(embedding)

        labels: list[Hashable] = list(embedding.nodes)
        ids: dict[Hashable, int] = {node: i for i, node in enumerate(labels, start=1)}

        coords = [(float(pos[node][0]), float(pos[node][1])) for node in labels]
        rotation = {ids[node]: [ids[nb] for nb in embedding.neighbors_cw_order(node)] for node in labels}
        return cls(coords=coords, rotation=rotation, labels=labels)
