"""Draw backends understood by :class:`sketchslider.rendering.SliderRenderer`."""

from .mock import RecordingBackend
from .svg import SVGSketchBackend

__all__ = ["RecordingBackend", "SVGSketchBackend"]
