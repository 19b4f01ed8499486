"""Face tracing over a rotation system.

A directed edge (tail, head) is followed around a face by locating ``tail`` in
the rotation of ``head`` and stepping to the neighbour before it (or after it,
for the face on the other side). The old head becomes the new tail.
"""

from __future__ import annotations

import logging

from planeview.errors import MalformedEmbeddingError
from planeview.graph import GraphSource

logger = logging.getLogger(__name__)

PENTAGON_SIZE: int = 5

# Step directions through a rotation list.
PREVIOUS: int = -1
NEXT: int = 1

Rotation = dict[int, list[int]]
Positions = dict[int, dict[int, int]]


def read_rotation(graph: GraphSource) -> Rotation:
    """Materialise the rotation system of ``graph`` (each neighbour cursor is read once)."""
    return {v: list(graph.neighbors(v)) for v in range(1, graph.size() + 1)}


def check_vertex_ids(rotation: Rotation, n: int) -> None:
    """Reject neighbour ids outside 1..n (vertex 0 is not a vertex).

    Raises:
        MalformedEmbeddingError: naming the first offending neighbour and the
            vertex that lists it.
    """
    for v, nbrs in rotation.items():
        for w in nbrs:
            if not 1 <= w <= n:
                raise MalformedEmbeddingError(w, v, f"Vertex {v} lists neighbour {w} outside 1..{n}")


def neighbour_positions(rotation: Rotation) -> Positions:
    """Index every rotation list: vertex → {neighbour: position}."""
    return {v: {w: i for i, w in enumerate(nbrs)} for v, nbrs in rotation.items()}


def _step(tail: int, head: int, rotation: Rotation, positions: Positions, direction: int) -> tuple[int, int]:
    idx = positions.get(head, {}).get(tail)
    if idx is None:
        raise MalformedEmbeddingError(tail, head)
    nbrs = rotation[head]
    return head, nbrs[(idx + direction) % len(nbrs)]


def edge_on_face_of_size(
    v1: int,
    v2: int,
    rotation: Rotation,
    positions: Positions,
    size: int = PENTAGON_SIZE,
) -> bool:
    """Return True if the directed edge (v1, v2) borders a face with ``size`` edges.

    Both sides are checked, each starting from (v1, v2): one walk steps to the
    previous neighbour, the other to the next.

    Raises:
        MalformedEmbeddingError: if a walk reaches a vertex that does not list
            the vertex it came from.
    """
    for direction in (PREVIOUS, NEXT):
        tail, head = v1, v2
        for _ in range(size):
            tail, head = _step(tail, head, rotation, positions, direction)
        if tail == v1 and head == v2:
            return True
    return False


def determine_faces_of_size(graph: GraphSource, size: int) -> set[tuple[int, int]]:
    """Collect every edge lying on some face with exactly ``size`` edges.

    Edges are returned as ``(low, high)`` vertex-id pairs. Every directed edge
    is checked, vertices visited from n down to 1.
    """
    if size < 1:
        raise ValueError(f"face size must be positive, got {size}")

    rotation = read_rotation(graph)
    check_vertex_ids(rotation, graph.size())
    positions = neighbour_positions(rotation)

    marked: set[tuple[int, int]] = set()
    for i in range(graph.size(), 0, -1):
        for j in rotation[i]:
            if edge_on_face_of_size(i, j, rotation, positions, size):
                marked.add((min(i, j), max(i, j)))

    logger.debug("Found %d edge(s) on %d-faces among %d vertices", len(marked), size, graph.size())
    return marked


def determine_pentagons(graph: GraphSource) -> set[tuple[int, int]]:
    """Collect every edge lying on a pentagonal face."""
    return determine_faces_of_size(graph, PENTAGON_SIZE)


def trace_faces(graph: GraphSource) -> list[list[int]]:
    """Enumerate the faces of the embedding.

    Each face is the list of vertices met while walking its boundary by
    previous-neighbour steps. Every directed edge belongs to exactly one face.
    """
    rotation = read_rotation(graph)
    check_vertex_ids(rotation, graph.size())
    positions = neighbour_positions(rotation)

    visited: set[tuple[int, int]] = set()
    faces: list[list[int]] = []
    for v in range(1, graph.size() + 1):
        for w in rotation[v]:
            if (v, w) in visited:
                continue
            face: list[int] = []
            tail, head = v, w
            while (tail, head) not in visited:
                visited.add((tail, head))
                face.append(tail)
                tail, head = _step(tail, head, rotation, positions, PREVIOUS)
            faces.append(face)

    logger.debug("Traced %d face(s)", len(faces))
    return faces
