"""Render devices."""

from planeview.renderers.base import RenderDevice
from planeview.renderers.recording import DrawCall, RecordingDevice

__all__ = ["DrawCall", "RecordingDevice", "RenderDevice"]
