"""GraphPainter — fits an embedded graph into a paint area and draws it on a device.

The painter owns two cached artifacts:

  - transformed vertex points, invalidated by a new graph or a new paint area;
  - the pentagon edge set, invalidated by a new graph only and computed
    lazily by the first render with highlighting enabled.

It is not thread-safe; callers serialise access to one painter instance.
"""

from __future__ import annotations

import enum
import logging

from planeview.errors import NotReadyError
from planeview.faces import check_vertex_ids, determine_pentagons, read_rotation
from planeview.graph import GraphSource
from planeview.layout import (
    BoundingBox,
    Point,
    Transform,
    Viewport,
    bounding_box,
    fit_viewport,
    transform_points,
)
from planeview.renderers.base import RenderDevice

logger = logging.getLogger(__name__)


class CacheState(enum.Enum):
    INVALID = "invalid"
    VALID = "valid"


class GraphPainter:
    """Draws a graph source on a render device.

    Graph and paint area may be set in either order; geometry queries and
    ``paint`` require both (see ``is_ready``).
    """

    def __init__(self, device: RenderDevice) -> None:
        self.device = device
        self._graph: GraphSource | None = None
        self._bbox: BoundingBox | None = None
        self._viewport: Viewport | None = None
        self._transform: Transform | None = None
        self._points: list[Point] = []
        self._points_state = CacheState.INVALID
        self._pentagons: frozenset[tuple[int, int]] = frozenset()
        self._pentagons_state = CacheState.INVALID
        self._highlight_pentagons = False

    # ─── Configuration ────────────────────────────────────────────────────────

    def set_graph(self, graph: GraphSource) -> None:
        """Assign a new graph; resets every cache and refits the paint area."""
        self._graph = graph
        self._bbox = bounding_box(graph.coordinates())
        self._pentagons = frozenset()
        self._pentagons_state = CacheState.INVALID
        self._viewport_changed()

    def set_paint_area(self, hor_min: float, hor_max: float, ver_min: float, ver_max: float) -> None:
        """Set the paint area. A range given high-to-low flips that axis."""
        self._viewport = Viewport.from_ranges(hor_min, hor_max, ver_min, ver_max)
        self._viewport_changed()

    @property
    def highlight_pentagons(self) -> bool:
        return self._highlight_pentagons

    @highlight_pentagons.setter
    def highlight_pentagons(self, value: bool) -> None:
        self._highlight_pentagons = bool(value)

    def set_highlight_pentagons(self, value: bool) -> None:
        self.highlight_pentagons = value

    def _viewport_changed(self) -> None:
        self._points = []
        self._points_state = CacheState.INVALID
        self._transform = None
        if self._graph is None or self._viewport is None:
            return

        if self._bbox is not None:
            self._transform = fit_viewport(self._bbox, self._viewport)
            self._points = transform_points(self._graph.coordinates(), self._transform)
        self._points_state = CacheState.VALID
        logger.debug("Recomputed %d vertex point(s)", len(self._points))

    # ─── Queries ──────────────────────────────────────────────────────────────

    @property
    def is_ready(self) -> bool:
        """True once both a graph and a paint area have been set."""
        return self._points_state is CacheState.VALID

    @property
    def graph_size(self) -> int:
        return self._graph.size() if self._graph is not None else 0

    @property
    def transform(self) -> Transform:
        return self._require_transform()

    def _require_ready(self) -> None:
        if not self.is_ready:
            missing = [name for name, value in (("graph", self._graph), ("paint area", self._viewport)) if value is None]
            raise NotReadyError(f"painter is not ready: no {' and no '.join(missing)} set")

    def _require_transform(self) -> Transform:
        self._require_ready()
        if self._transform is None:
            raise NotReadyError("painter has no transform: the graph is empty")
        return self._transform

    def point(self, x: float, y: float) -> Point:
        """Map a graph coordinate to the device grid."""
        return self._require_transform().forward(x, y)

    def coordinate(self, px: float, py: float) -> Point:
        """Map a device coordinate back to graph space."""
        return self._require_transform().inverse(px, py)

    def bounding_box(self) -> tuple[Point, Point]:
        """Device-space corners of the fitted graph: (min corner, max corner) images."""
        transform = self._require_transform()
        assert self._bbox is not None
        return (
            transform.forward(self._bbox.x_min, self._bbox.y_min),
            transform.forward(self._bbox.x_max, self._bbox.y_max),
        )

    def vertex_point(self, vertex: int) -> Point:
        """Cached device point of ``vertex`` (1-based)."""
        self._require_ready()
        if not 1 <= vertex <= len(self._points):
            raise IndexError(f"vertex {vertex} out of range 1..{len(self._points)}")
        return self._points[vertex - 1]

    def pentagon_edges(self) -> frozenset[tuple[int, int]]:
        """Edges on pentagonal faces as ``(low, high)`` pairs, computed on first use."""
        if self._graph is None:
            raise NotReadyError("painter is not ready: no graph set")
        if self._pentagons_state is CacheState.INVALID:
            self._pentagons = frozenset(determine_pentagons(self._graph))
            self._pentagons_state = CacheState.VALID
        return self._pentagons

    def is_pentagon_edge(self, i: int, j: int) -> bool:
        return (min(i, j), max(i, j)) in self.pentagon_edges()

    # ─── Rendering ────────────────────────────────────────────────────────────

    def paint(self) -> None:
        """Run one render pass: all edges, then all vertices, highest id first.

        Raises:
            MalformedEmbeddingError: if a vertex lists a neighbour id outside
                1..n, whether or not highlighting is on. Nothing is drawn then.
        """
        self._require_ready()
        assert self._graph is not None

        n = self._graph.size()
        rotation = read_rotation(self._graph)
        check_vertex_ids(rotation, n)

        highlight = self._highlight_pentagons
        pentagons = self.pentagon_edges() if highlight else frozenset()

        device = self.device
        points = self._points

        device.begin_graph()
        device.begin_edges()
        edge_count = 0
        for i in range(n, 0, -1):
            p = points[i - 1]
            for j in rotation[i]:
                if j >= i:
                    continue  # drawn when j is visited
                q = points[j - 1]
                device.paint_edge(p.x, p.y, q.x, q.y, i, j, highlight and (j, i) in pentagons)
                edge_count += 1

        device.begin_vertices()
        for i in range(n, 0, -1):
            p = points[i - 1]
            device.paint_vertex(p.x, p.y, i)

        logger.debug("Painted %d edge(s) and %d vertex(es)", edge_count, n)
