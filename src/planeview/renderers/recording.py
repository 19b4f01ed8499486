"""Recording device — keeps every draw call of a render pass in memory."""

from __future__ import annotations

from dataclasses import dataclass, field

BEGIN_GRAPH = "begin_graph"
BEGIN_EDGES = "begin_edges"
BEGIN_VERTICES = "begin_vertices"
PAINT_EDGE = "paint_edge"
PAINT_VERTEX = "paint_vertex"


@dataclass(frozen=True)
class DrawCall:
    """One call received by the device: method name plus positional arguments."""

    name: str
    args: tuple = ()


@dataclass
class RecordingDevice:
    """Render device that records calls instead of drawing."""

    calls: list[DrawCall] = field(default_factory=list)

    def begin_graph(self) -> None:
        self.calls.append(DrawCall(BEGIN_GRAPH))

    def begin_edges(self) -> None:
        self.calls.append(DrawCall(BEGIN_EDGES))

    def begin_vertices(self) -> None:
        self.calls.append(DrawCall(BEGIN_VERTICES))

    def paint_edge(self, x1: float, y1: float, x2: float, y2: float, id1: int, id2: int, highlighted: bool) -> None:
        self.calls.append(DrawCall(PAINT_EDGE, (x1, y1, x2, y2, id1, id2, highlighted)))

    def paint_vertex(self, x: float, y: float, vertex_id: int) -> None:
        self.calls.append(DrawCall(PAINT_VERTEX, (x, y, vertex_id)))

    def edges(self) -> list[DrawCall]:
        return [c for c in self.calls if c.name == PAINT_EDGE]

    def vertices(self) -> list[DrawCall]:
        return [c for c in self.calls if c.name == PAINT_VERTEX]

    def clear(self) -> None:
        self.calls.clear()
