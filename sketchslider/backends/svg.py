"""Hand-drawn looking SVG output built from :mod:`svgpathtools` segments.

Every primitive is stroked twice with a little random jitter, which gives the
sketchy pencil look.  A seeded :class:`random.Random` keeps the output
reproducible between renders of the same slider.
"""
from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from svgpathtools import CubicBezier, Line, Path

from ..config import SketchStyle


@dataclass
class SVGElement:
    d: str
    classes: List[str]
    group: Optional[str] = None


@dataclass
class SVGSketchBackend:
    """Draw backend that accumulates sketch-style SVG paths."""

    style: SketchStyle = field(default_factory=SketchStyle)
    width: float = 0.0
    height: float = 0.0
    ellipse_points: int = 24

    def __post_init__(self) -> None:
        self.elements: List[SVGElement] = []
        self.translations: Dict[str, float] = {}
        self.classes: Dict[str, List[str]] = {}
        self._rng = random.Random(self.style.seed)

    # Surface ------------------------------------------------------------
    def clear(self) -> None:
        self.elements = []
        self.translations = {}
        self._rng = random.Random(self.style.seed)

    def set_size(self, width: float, height: float) -> None:
        self.width = float(width)
        self.height = float(height)

    # Primitives ---------------------------------------------------------
    def draw_line(self, x1: float, y1: float, x2: float, y2: float, *,
                  group: Optional[str] = None, classes: Iterable[str] = ()) -> SVGElement:
        length = math.hypot(x2 - x1, y2 - y1)
        path = Path(
            self._rough_segment(complex(x1, y1), complex(x2, y2), length),
            self._rough_segment(complex(x1, y1), complex(x2, y2), length),
        )
        return self._add(path, group, classes)

    def draw_ellipse(self, cx: float, cy: float, w: float, h: float, *,
                     group: Optional[str] = None, classes: Iterable[str] = ()) -> SVGElement:
        segments: List[Line] = []
        for _ in range(2):
            segments.extend(self._rough_ellipse(cx, cy, w / 2.0, h / 2.0))
        return self._add(Path(*segments), group, classes)

    # State --------------------------------------------------------------
    def translate_group(self, group: str, dx: float) -> None:
        self.translations[group] = float(dx)

    def set_classes(self, target: str, classes: Iterable[str]) -> None:
        self.classes[target] = list(classes)

    # Output -------------------------------------------------------------
    def to_svg_content(self) -> str:
        """Inner markup (style block, loose paths and groups) for embedding."""
        body = [self._style_block()]
        groups: Dict[str, List[str]] = {}
        for el in self.elements:
            markup = self._path_markup(el)
            if el.group is None:
                body.append(markup)
            else:
                groups.setdefault(el.group, []).append(markup)
        for name, items in groups.items():
            dx = self.translations.get(name, 0.0)
            body.append(
                f'<g class="{name}-group" transform="translate({dx:g} 0)">' + "".join(items) + "</g>"
            )
        return "".join(body)

    def to_svg(self) -> str:
        host = " ".join(["sketch-slider", *self.classes.get("host", [])])
        return (
            f'<svg xmlns="http://www.w3.org/2000/svg" class="{host}" '
            f'width="{self.width:g}" height="{self.height:g}" '
            f'viewBox="0 0 {self.width:g} {self.height:g}">' + self.to_svg_content() + "</svg>"
        )

    # ------------------------------------------------------------------
    # internal helpers
    # ------------------------------------------------------------------
    def _add(self, path: Path, group: Optional[str], classes: Iterable[str]) -> SVGElement:
        el = SVGElement(d=path.d(), classes=list(classes), group=group)
        self.elements.append(el)
        return el

    def _path_markup(self, el: SVGElement) -> str:
        names = list(el.classes)
        for base in el.classes:
            names.extend(self.classes.get(base, []))
        return f'<path class="{" ".join(names)}" d="{el.d}" />'

    def _jitter(self, amount: float) -> float:
        if amount <= 0:
            return 0.0
        return self._rng.uniform(-amount, amount)

    def _rough_segment(self, start: complex, end: complex, length: float) -> CubicBezier:
        off = self.style.roughness * min(2.0, 0.5 + 0.02 * length)
        a = start + complex(self._jitter(off), self._jitter(off))
        b = end + complex(self._jitter(off), self._jitter(off))
        c1 = a + (b - a) * (0.3 + self._jitter(0.1)) + complex(self._jitter(off), self._jitter(off))
        c2 = a + (b - a) * (0.7 + self._jitter(0.1)) + complex(self._jitter(off), self._jitter(off))
        return CubicBezier(a, c1, c2, b)

    def _rough_ellipse(self, cx: float, cy: float, rx: float, ry: float) -> List[Line]:
        n = max(8, self.ellipse_points)
        off = self.style.roughness * 0.05 * max(rx, ry)
        phase = self._jitter(math.pi / n)
        pts = []
        for k in range(n):
            ang = phase + 2 * math.pi * k / n
            pts.append(complex(cx + (rx + self._jitter(off)) * math.cos(ang),
                               cy + (ry + self._jitter(off)) * math.sin(ang)))
        pts.append(pts[0])
        return [Line(p, q) for p, q in zip(pts, pts[1:])]

    def _style_block(self) -> str:
        s = self.style
        return (
            "<style>"
            f"path{{stroke-width:{s.stroke_width};fill:transparent;}}"
            f".bar{{stroke:{s.stroke};}}"
            f".knob{{fill:{s.knob_zero_color};stroke:{s.knob_zero_color};}}"
            f".knob.has-value{{fill:{s.knob_color};stroke:{s.knob_color};}}"
            ".knob.expanded{stroke-width:1.4;}"
            "</style>"
        )


__all__ = ["SVGElement", "SVGSketchBackend"]
