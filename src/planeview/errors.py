"""Exceptions raised by planeview."""

from __future__ import annotations


class PlaneviewError(Exception):
    """Base class for all planeview errors."""


class MalformedEmbeddingError(PlaneviewError):
    """The rotation system does not describe a consistent embedding.

    Raised when a face trace reaches ``head`` and its rotation does not list
    ``vertex`` back, or when ``head`` lists a ``vertex`` id outside 1..n.
    """

    def __init__(self, vertex: int, head: int, message: str | None = None) -> None:
        self.vertex = vertex
        self.head = head
        super().__init__(message or f"Vertex {vertex} not found in list of neighbours of {head}")


class NotReadyError(PlaneviewError):
    """A geometry query or render was requested before graph and viewport were both set."""
