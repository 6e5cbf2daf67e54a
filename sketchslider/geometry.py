"""Geometry of the slider track.

Every numeric rule of the widget lives here: the mapping between a value, its
percentage inside ``[min, max]`` and the pixel offset of the knob along the
bar.  Rendering and drag handling both go through these helpers so a drawn
knob position and a drag-derived value never disagree.

None of the functions raise.  Degenerate input (empty range, unknown or
non-positive or non-finite bar width) is folded into the nearest sensible result instead.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .config import DEFAULT_KNOB_RADIUS

XY = Tuple[float, float]


# ---------------------------------------------------------------------------
# Value <-> percentage <-> offset
# ---------------------------------------------------------------------------


def percentage_of(value: float, min_value: float, max_value: float) -> float:
    """Position of ``value`` inside ``[min_value, max_value]`` clamped to ``[0, 1]``.

    An empty or inverted range pins the slider at its minimum.
    """
    if max_value <= min_value:
        return 0.0
    pct = (value - min_value) / (max_value - min_value)
    if math.isnan(pct):
        return 0.0
    return min(1.0, max(pct, 0.0))


def _has_bar(bar_width: Optional[float]) -> bool:
    return bool(bar_width) and math.isfinite(bar_width) and bar_width > 0


def offset_of(pct: float, bar_width: Optional[float]) -> int:
    """Pixel offset of the knob for ``pct``."""
    if not _has_bar(bar_width):
        return 0
    px = pct * bar_width
    return int(round(px)) if math.isfinite(px) else 0


def value_of(offset_px: float, bar_width: Optional[float], min_value: float, max_value: float) -> float:
    """Inverse of :func:`offset_of`; returns ``min_value`` while the bar has no length."""
    if not _has_bar(bar_width) or not math.isfinite(offset_px):
        return min_value
    return min_value + (offset_px / bar_width) * (max_value - min_value)


def clamp_offset(offset_px: float, bar_width: Optional[float]) -> float:
    if math.isnan(offset_px):
        return 0.0
    upper = bar_width if _has_bar(bar_width) else 0.0
    return max(0.0, min(offset_px, upper))


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SliderLayout:
    """Measured host box together with the knob size.

    The knob centre travels between ``knob_radius`` and
    ``width - knob_radius`` so the knob never leaves the host.
    """

    width: float
    height: float
    knob_radius: float = DEFAULT_KNOB_RADIUS

    @property
    def bar_width(self) -> float:
        return self.width - 2 * self.knob_radius

    @property
    def center_y(self) -> float:
        return self.height / 2.0

    def bar_endpoints(self) -> Tuple[XY, XY]:
        r = self.knob_radius
        return (r, self.center_y), (self.width - r, self.center_y)

    def knob_box(self) -> Tuple[float, float, float, float]:
        """Ellipse of the knob at offset 0 as ``(cx, cy, w, h)``."""
        r = self.knob_radius
        return r, self.center_y, 2 * r, 2 * r

    def knob_contains(self, x: float, y: float, offset_px: float) -> bool:
        cx = self.knob_radius + offset_px
        dx, dy = x - cx, y - self.center_y
        return dx * dx + dy * dy <= self.knob_radius * self.knob_radius

    def with_knob_radius(self, knob_radius: float) -> "SliderLayout":
        return SliderLayout(self.width, self.height, knob_radius)


__all__ = [
    "XY",
    "SliderLayout",
    "percentage_of",
    "offset_of",
    "value_of",
    "clamp_offset",
]
