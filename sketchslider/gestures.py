"""Normalized gesture events and a small pointer tracker that produces them."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

DOWN = "down"
START = "start"
MOVE = "move"
END = "end"
UP = "up"

GESTURE_TYPES = (DOWN, START, MOVE, END, UP)

HitTest = Callable[[float, float], bool]


@dataclass(frozen=True)
class GestureEvent:
    """Single normalized gesture.

    ``dx`` is the cumulative horizontal delta in pixels since ``start`` and is
    only meaningful for ``move`` events.
    """

    type: str
    dx: Optional[float] = None

    def __post_init__(self) -> None:
        if self.type not in GESTURE_TYPES:
            raise ValueError(f"Unknown gesture type: {self.type!r}")

    @classmethod
    def down(cls) -> "GestureEvent":
        return cls(DOWN)

    @classmethod
    def start(cls) -> "GestureEvent":
        return cls(START)

    @classmethod
    def move(cls, dx: float) -> "GestureEvent":
        return cls(MOVE, float(dx))

    @classmethod
    def end(cls) -> "GestureEvent":
        return cls(END)

    @classmethod
    def up(cls) -> "GestureEvent":
        return cls(UP)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "GestureEvent":
        kind = data.get("type")
        dx = data.get("dx")
        return GestureEvent(str(kind), None if dx is None else float(dx))

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.type}
        if self.dx is not None:
            out["dx"] = self.dx
        return out


class PointerTracker:
    """Turn raw press/move/release coordinates into :class:`GestureEvent` s.

    A press emits ``down``.  Tracking starts once the pointer has travelled
    more than ``threshold_px`` from the press point; from then on every move
    yields a ``move`` carrying the cumulative ``dx``.  Releasing emits ``end``
    when tracking started and ``up`` for a plain click.
    """

    def __init__(self, *, threshold_px: float = 5.0, hit_test: Optional[HitTest] = None) -> None:
        self.threshold_px = threshold_px
        self.hit_test = hit_test
        self._origin: Optional[tuple[float, float]] = None
        self._tracking = False

    @property
    def pressed(self) -> bool:
        return self._origin is not None

    @property
    def tracking(self) -> bool:
        return self._tracking

    def press(self, x: float, y: float) -> List[GestureEvent]:
        if self.hit_test is not None and not self.hit_test(x, y):
            return []
        self._origin = (x, y)
        self._tracking = False
        return [GestureEvent.down()]

    def move(self, x: float, y: float) -> List[GestureEvent]:
        if self._origin is None:
            return []
        ox, oy = self._origin
        events: List[GestureEvent] = []
        if not self._tracking:
            if math.hypot(x - ox, y - oy) <= self.threshold_px:
                return events
            self._tracking = True
            events.append(GestureEvent.start())
        events.append(GestureEvent.move(x - ox))
        return events

    def release(self, x: float, y: float) -> List[GestureEvent]:
        if self._origin is None:
            return []
        events = self.move(x, y) if self._tracking else []
        events.append(GestureEvent.end() if self._tracking else GestureEvent.up())
        self._origin = None
        self._tracking = False
        return events

    def cancel(self) -> None:
        self._origin = None
        self._tracking = False


__all__ = [
    "DOWN",
    "START",
    "MOVE",
    "END",
    "UP",
    "GESTURE_TYPES",
    "GestureEvent",
    "PointerTracker",
]
