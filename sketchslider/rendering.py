"""Drawing a slider through a draw backend.

The renderer knows which primitives make up a slider (one bar line, one knob
ellipse inside a translatable group) and how a :class:`VisualState` maps onto
group translation and style classes.  The backend decides what a line or an
ellipse actually looks like.

A backend is any object providing::

    clear()
    set_size(width, height)
    draw_line(x1, y1, x2, y2, *, group=None, classes=())
    draw_ellipse(cx, cy, w, h, *, group=None, classes=())
    translate_group(group, dx)
    set_classes(target, classes)

See :class:`sketchslider.backends.RecordingBackend` for the smallest one.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from .controller import HOST, KNOB, SliderController, VisualState
from .geometry import SliderLayout

logger = logging.getLogger(__name__)

BAR = "bar"


class SliderRenderer:
    """Render a slider onto ``backend``."""

    def __init__(self, backend: Any) -> None:
        self.backend = backend
        self.layout: Optional[SliderLayout] = None
        self.visual: Optional[VisualState] = None

    # ------------------------------------------------------------------
    # Public helpers
    # ------------------------------------------------------------------
    def attach(self, controller: SliderController) -> "SliderRenderer":
        """Follow ``controller``: redraw on layout changes, restyle on refresh."""
        controller.add_layout_listener(self.render)
        controller.add_refresh_listener(self.apply)
        if controller.layout is not None:
            self.render(controller.layout)
        self.apply(controller.visual)
        return self

    def render(self, layout: SliderLayout) -> None:
        """Draw bar and knob from scratch for ``layout``."""
        b = self.backend
        b.clear()
        b.set_size(layout.width, layout.height)
        (x1, y1), (x2, y2) = layout.bar_endpoints()
        b.draw_line(x1, y1, x2, y2, classes=(BAR,))
        cx, cy, w, h = layout.knob_box()
        b.draw_ellipse(cx, cy, w, h, group=KNOB, classes=(KNOB,))
        self.layout = layout
        logger.debug("Rendered slider %sx%s", layout.width, layout.height)
        if self.visual is not None:
            self.apply(self.visual)

    def apply(self, visual: VisualState) -> None:
        self.visual = visual
        b = self.backend
        b.translate_group(KNOB, visual.knob_offset_px)
        b.set_classes(KNOB, visual.classes(KNOB))
        b.set_classes(HOST, visual.classes(HOST))


__all__ = ["SliderRenderer", "BAR"]
