"""Base render device protocol."""

from __future__ import annotations

from typing import Protocol


class RenderDevice(Protocol):
    """Protocol that all paint sinks must implement.

    A render pass calls ``begin_graph``, ``begin_edges`` and ``begin_vertices``
    exactly once each, in that order, with the draw calls of each phase in
    between.
    """

    def begin_graph(self) -> None: ...

    def begin_edges(self) -> None: ...

    def begin_vertices(self) -> None: ...

    def paint_edge(self, x1: float, y1: float, x2: float, y2: float, id1: int, id2: int, highlighted: bool) -> None:
        """Draw the edge between vertices ``id1`` and ``id2``."""
        ...

    def paint_vertex(self, x: float, y: float, vertex_id: int) -> None:
        """Draw a vertex."""
        ...
