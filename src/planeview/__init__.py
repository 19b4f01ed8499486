from planeview.errors import MalformedEmbeddingError, NotReadyError, PlaneviewError
from planeview.faces import PENTAGON_SIZE, determine_faces_of_size, determine_pentagons, edge_on_face_of_size, trace_faces
from planeview.graph import EmbeddedGraph, GraphSource
from planeview.layout import (
    DELTA_DIVISOR,
    BoundingBox,
    Point,
    Transform,
    Viewport,
    bounding_box,
    fit_viewport,
    snap_to_grid,
)
from planeview.painter import CacheState, GraphPainter
from planeview.renderers import DrawCall, RecordingDevice, RenderDevice

__all__ = [
    "DELTA_DIVISOR",
    "PENTAGON_SIZE",
    "BoundingBox",
    "CacheState",
    "DrawCall",
    "EmbeddedGraph",
    "GraphPainter",
    "GraphSource",
    "MalformedEmbeddingError",
    "NotReadyError",
    "PlaneviewError",
    "Point",
    "RecordingDevice",
    "RenderDevice",
    "Transform",
    "Viewport",
    "bounding_box",
    "determine_faces_of_size",
    "determine_pentagons",
    "edge_on_face_of_size",
    "fit_viewport",
    "snap_to_grid",
    "trace_faces",
]
