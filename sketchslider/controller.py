"""Value and gesture state machine of the slider.

:class:`SliderController` owns the public slider state and the ephemeral drag
session.  It consumes normalized :class:`~sketchslider.gestures.GestureEvent`
objects, runs all numeric work through :mod:`sketchslider.geometry` and tells
interested parties about two things: a committed value at the end of a drag
and a new :class:`VisualState` whenever the knob needs redrawing.

Nothing in here raises for odd input.  Disabled sliders and sliders whose
layout has not been measured yet simply ignore gestures.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from .config import DEFAULT_KNOB_RADIUS, SliderConfig
from .geometry import SliderLayout, clamp_offset, offset_of, percentage_of, value_of
from .gestures import DOWN, END, MOVE, START, UP, GestureEvent

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[float], None]
RefreshCallback = Callable[["VisualState"], None]
LayoutCallback = Callable[[SliderLayout], None]

KNOB = "knob"
HOST = "host"


@dataclass
class DragSession:
    start_offset_px: float
    min_offset_px: float  # relative bounds keeping the absolute offset on the bar
    max_offset_px: float
    intermediate_value: float
    offset_px: float


@dataclass(frozen=True)
class VisualState:
    """Everything a renderer needs to show the slider."""

    has_value: bool = False
    expanded: bool = False
    disabled: bool = False
    pending: bool = True
    knob_offset_px: int = 0

    def classes(self, target: str) -> List[str]:
        """Style class names for the ``knob`` or ``host`` element."""
        if target == KNOB:
            flags = (("has-value", self.has_value), ("expanded", self.expanded))
        elif target == HOST:
            flags = (("disabled", self.disabled), ("pending", self.pending))
        else:
            raise ValueError(f"Unknown target: {target!r}")
        return [name for name, on in flags if on]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "has_value": self.has_value,
            "expanded": self.expanded,
            "disabled": self.disabled,
            "pending": self.pending,
            "knob_offset_px": self.knob_offset_px,
        }


class SliderController:
    """Logical state of one slider widget."""

    def __init__(self, config: Optional[SliderConfig] = None) -> None:
        config = config or SliderConfig()
        self._value = float(config.value)
        self._min = float(config.min)
        self._max = float(config.max)
        self._knob_radius = float(config.knob_radius or DEFAULT_KNOB_RADIUS)
        self._disabled = bool(config.disabled)

        self._layout: Optional[SliderLayout] = None
        self._pct = percentage_of(self._value, self._min, self._max)
        self._knob_offset = 0
        self._expanded = False
        self._session: Optional[DragSession] = None

        self._change_listeners: List[ChangeCallback] = []
        self._refresh_listeners: List[RefreshCallback] = []
        self._layout_listeners: List[LayoutCallback] = []

    # ------------------------------------------------------------------
    # Public configuration
    # ------------------------------------------------------------------
    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, value: float) -> None:
        self._value = float(value)
        self._property_changed()

    @property
    def min(self) -> float:
        return self._min

    @min.setter
    def min(self, value: float) -> None:
        self._min = float(value)
        self._property_changed()

    @property
    def max(self) -> float:
        return self._max

    @max.setter
    def max(self, value: float) -> None:
        self._max = float(value)
        self._property_changed()

    @property
    def knob_radius(self) -> float:
        return self._knob_radius

    @knob_radius.setter
    def knob_radius(self, value: float) -> None:
        self._knob_radius = float(value or DEFAULT_KNOB_RADIUS)
        if self._layout is not None:
            self._set_layout(self._layout.with_knob_radius(self._knob_radius))
        else:
            self._property_changed()

    @property
    def disabled(self) -> bool:
        return self._disabled

    @disabled.setter
    def disabled(self, value: bool) -> None:
        self._disabled = bool(value)
        if self._disabled and self._session is not None:
            logger.debug("Slider disabled mid-drag, dropping uncommitted value %s",
                         self._session.intermediate_value)
            self._session = None
            self._expanded = False
        self._property_changed()

    def configure(self, **changes: Any) -> None:
        """Assign several public properties at once."""
        for name in ("min", "max", "knob_radius", "value", "disabled"):
            if name in changes and changes[name] is not None:
                setattr(self, name, changes[name])

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------
    @property
    def layout(self) -> Optional[SliderLayout]:
        return self._layout

    @property
    def bar_width(self) -> Optional[float]:
        return self._layout.bar_width if self._layout is not None else None

    @property
    def pct(self) -> float:
        return self._pct

    @property
    def dragging(self) -> bool:
        return self._session is not None

    @property
    def session(self) -> Optional[DragSession]:
        return self._session

    @property
    def visual(self) -> VisualState:
        return VisualState(
            has_value=self._pct > 0,
            expanded=self._expanded,
            disabled=self._disabled,
            pending=self._layout is None,
            knob_offset_px=self._knob_offset,
        )

    def knob_contains(self, x: float, y: float) -> bool:
        if self._layout is None:
            return False
        return self._layout.knob_contains(x, y, self._knob_offset)

    def snapshot(self) -> Dict[str, Any]:
        session = self._session
        return {
            "value": self._value,
            "min": self._min,
            "max": self._max,
            "knob_radius": self._knob_radius,
            "disabled": self._disabled,
            "pct": self._pct,
            "bar_width": self.bar_width,
            "dragging": session is not None,
            "intermediate_value": session.intermediate_value if session else None,
            "visual": self.visual.to_dict(),
        }

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------
    def add_change_listener(self, callback: ChangeCallback) -> ChangeCallback:
        self._change_listeners.append(callback)
        return callback

    def remove_change_listener(self, callback: ChangeCallback) -> None:
        if callback in self._change_listeners:
            self._change_listeners.remove(callback)

    def add_refresh_listener(self, callback: RefreshCallback) -> RefreshCallback:
        self._refresh_listeners.append(callback)
        return callback

    def add_layout_listener(self, callback: LayoutCallback) -> LayoutCallback:
        self._layout_listeners.append(callback)
        return callback

    on_change = add_change_listener
    on_refresh = add_refresh_listener

    # ------------------------------------------------------------------
    # Layout source
    # ------------------------------------------------------------------
    def on_layout(self, width: float, height: float) -> None:
        """Measured size of the host box; enables gesture handling."""
        self._set_layout(SliderLayout(float(width), float(height), self._knob_radius))

    # ------------------------------------------------------------------
    # Gesture source
    # ------------------------------------------------------------------
    def handle(self, event: GestureEvent) -> None:
        if self._disabled:
            logger.debug("Ignoring %s gesture: slider disabled", event.type)
            return
        if self._layout is None:
            logger.debug("Ignoring %s gesture: layout not measured yet", event.type)
            return
        if event.type == DOWN:
            self._set_expanded(True)
        elif event.type == START:
            self._track_start()
        elif event.type == MOVE:
            self._track_move(event.dx or 0.0)
        elif event.type == END:
            self._track_end()
        elif event.type == UP:
            self._set_expanded(False)

    def handle_dict(self, data: Dict[str, Any]) -> None:
        self.handle(GestureEvent.from_dict(data))

    # ------------------------------------------------------------------
    # State machine
    # ------------------------------------------------------------------
    def _track_start(self) -> None:
        bar_width = max(0.0, self.bar_width or 0.0)
        start = percentage_of(self._value, self._min, self._max) * bar_width
        self._session = DragSession(
            start_offset_px=start,
            min_offset_px=-start,
            max_offset_px=bar_width - start,
            intermediate_value=self._value,
            offset_px=start,
        )
        self._expanded = True
        self._refresh()

    def _track_move(self, dx: float) -> None:
        if self._session is None:
            self._track_start()
        session = self._session
        assert session is not None
        offset = clamp_offset(session.start_offset_px + dx, self.bar_width)
        session.offset_px = offset
        session.intermediate_value = value_of(offset, self.bar_width, self._min, self._max)
        self._knob_offset = int(round(offset))
        self._refresh()

    def _track_end(self) -> None:
        session = self._session
        if session is None:
            logger.debug("Ignoring end gesture without a drag in progress")
            return
        self._session = None
        self._expanded = False
        self._value = session.intermediate_value
        self._derive()
        logger.info("Slider value committed: %s", self._value)
        for callback in list(self._change_listeners):
            callback(self._value)

    # ------------------------------------------------------------------
    # internal helpers
    # ------------------------------------------------------------------
    def _set_layout(self, layout: SliderLayout) -> None:
        self._layout = layout
        logger.debug("Slider layout %sx%s, bar width %s", layout.width, layout.height, layout.bar_width)
        for callback in list(self._layout_listeners):
            callback(layout)
        self._property_changed()

    def _set_expanded(self, expanded: bool) -> None:
        self._expanded = expanded
        self._refresh()

    def _property_changed(self) -> None:
        if self._session is not None:
            self._refresh()
            return
        self._derive()

    def _derive(self) -> None:
        self._pct = percentage_of(self._value, self._min, self._max)
        self._knob_offset = offset_of(self._pct, self.bar_width)
        self._refresh()

    def _refresh(self) -> None:
        visual = self.visual
        for callback in list(self._refresh_listeners):
            callback(visual)


__all__ = [
    "ChangeCallback",
    "RefreshCallback",
    "LayoutCallback",
    "DragSession",
    "VisualState",
    "SliderController",
    "KNOB",
    "HOST",
]
