"""Shared graph builders for the test suite."""

from __future__ import annotations

import math

import pytest

from planeview.graph import EmbeddedGraph


def regular_polygon(k: int, radius: float = 1.0) -> list[tuple[float, float]]:
    """Coordinates of a regular k-gon, vertex 1 at the top, counter-clockwise."""
    return [
        (radius * math.cos(math.pi / 2 + 2 * math.pi * i / k), radius * math.sin(math.pi / 2 + 2 * math.pi * i / k))
        for i in range(k)
    ]


def cycle_graph(k: int) -> EmbeddedGraph:
    """A k-cycle 1 → 2 → … → k → 1 whose rotation is the cycle itself."""
    rotation = {v: [(v - 2) % k + 1, v % k + 1] for v in range(1, k + 1)}
    return EmbeddedGraph(coords=regular_polygon(k), rotation=rotation)


# Pentagon 1..5 with a square 1-6-7-2 glued outside the edge 1-2.
PENTAGON_WITH_SQUARE_COORDS: list[tuple[float, float]] = [
    (0.0, 1.0),
    (-0.95, 0.31),
    (-0.59, -0.81),
    (0.59, -0.81),
    (0.95, 0.31),
    (-0.6, 1.8),
    (-1.55, 1.11),
]
PENTAGON_WITH_SQUARE_EDGES: list[tuple[int, int]] = [
    (1, 2),
    (2, 3),
    (3, 4),
    (4, 5),
    (5, 1),
    (1, 6),
    (6, 7),
    (7, 2),
]


@pytest.fixture
def pentagon() -> EmbeddedGraph:
    return cycle_graph(5)


@pytest.fixture
def square() -> EmbeddedGraph:
    return cycle_graph(4)


@pytest.fixture
def pentagon_with_square() -> EmbeddedGraph:
    return EmbeddedGraph.from_straight_line(PENTAGON_WITH_SQUARE_COORDS, PENTAGON_WITH_SQUARE_EDGES)


@pytest.fixture
def broken_triangle() -> EmbeddedGraph:
    """Triangle whose vertex 1 forgets its neighbour 2."""
    return EmbeddedGraph(
        coords=[(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)],
        rotation={1: [3], 2: [1, 3], 3: [1, 2]},
    )
