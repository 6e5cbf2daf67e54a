"""In-memory backend that records draw calls, used for development and unit tests."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple


@dataclass
class RecordingBackend:
    """Small recorder that mimics the draw backend API."""

    width: float = 0.0
    height: float = 0.0

    def __post_init__(self) -> None:
        self.shapes: List[Dict[str, Any]] = []
        self.translations: Dict[str, float] = {}
        self.classes: Dict[str, List[str]] = {}
        self.calls: List[Tuple[str, tuple]] = []

    # Surface ------------------------------------------------------------
    def clear(self) -> None:
        self.calls.append(("clear", ()))
        self.shapes = []
        self.translations = {}

    def set_size(self, width: float, height: float) -> None:
        self.calls.append(("set_size", (width, height)))
        self.width = float(width)
        self.height = float(height)

    # Primitives ---------------------------------------------------------
    def draw_line(self, x1: float, y1: float, x2: float, y2: float, *,
                  group: Optional[str] = None, classes: Iterable[str] = ()) -> Dict[str, Any]:
        self.calls.append(("draw_line", (x1, y1, x2, y2)))
        shape = {"kind": "line", "args": (x1, y1, x2, y2), "group": group, "classes": list(classes)}
        self.shapes.append(shape)
        return shape

    def draw_ellipse(self, cx: float, cy: float, w: float, h: float, *,
                     group: Optional[str] = None, classes: Iterable[str] = ()) -> Dict[str, Any]:
        self.calls.append(("draw_ellipse", (cx, cy, w, h)))
        shape = {"kind": "ellipse", "args": (cx, cy, w, h), "group": group, "classes": list(classes)}
        self.shapes.append(shape)
        return shape

    # State --------------------------------------------------------------
    def translate_group(self, group: str, dx: float) -> None:
        self.calls.append(("translate_group", (group, dx)))
        self.translations[group] = dx

    def set_classes(self, target: str, classes: Iterable[str]) -> None:
        classes = list(classes)
        self.calls.append(("set_classes", (target, tuple(classes))))
        self.classes[target] = classes

    # Convenience --------------------------------------------------------
    def shapes_of(self, kind: str) -> List[Dict[str, Any]]:
        return [s for s in self.shapes if s["kind"] == kind]
