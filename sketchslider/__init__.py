"""Top-level package for the sketch slider widget.

This package exposes the slider geometry, the gesture state machine, the
renderer with its draw backends, and the HTTP and NiceGUI embeddings.
"""

from .config import SliderConfig
from .controller import SliderController, VisualState
from .geometry import SliderLayout, clamp_offset, offset_of, percentage_of, value_of
from .gestures import GestureEvent, PointerTracker
from .rendering import SliderRenderer

__all__ = [
    "SliderConfig",
    "SliderController",
    "VisualState",
    "SliderLayout",
    "percentage_of",
    "offset_of",
    "value_of",
    "clamp_offset",
    "GestureEvent",
    "PointerTracker",
    "SliderRenderer",
]
