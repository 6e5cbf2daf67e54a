"""Configuration models for the sketch slider."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

DEFAULT_KNOB_RADIUS = 10.0


@dataclass
class HostBox:
    """Rendered size of the widget host in pixels."""

    width: float = 300.0
    height: float = 40.0

    def as_tuple(self) -> tuple[float, float]:
        return self.width, self.height


@dataclass
class SliderConfig:
    """Initial public state of a slider."""

    value: float = 0.0
    min: float = 0.0
    max: float = 100.0
    knob_radius: float = DEFAULT_KNOB_RADIUS
    disabled: bool = False


@dataclass
class SketchStyle:
    """Look of the hand-drawn SVG output."""

    roughness: float = 1.0
    stroke: str = "#000000"
    stroke_width: float = 0.7
    knob_color: str = "rgb(51, 103, 214)"
    knob_zero_color: str = "gray"
    seed: Optional[int] = 1


@dataclass
class ServerSettings:
    """Aggregate settings for the HTTP server and the demo page."""

    host: str = "0.0.0.0"
    port: int = 8000
    ui_port: int = 8080
    log_level: str = "INFO"
    slider: SliderConfig = field(default_factory=SliderConfig)
    box: HostBox = field(default_factory=HostBox)
    style: SketchStyle = field(default_factory=SketchStyle)
