"""NiceGUI demo page embedding a sketch slider."""

from __future__ import annotations

import threading
import time
from typing import List, Optional

from nicegui import events, ui

from .backends import SVGSketchBackend
from .config import ServerSettings
from .controller import SliderController, VisualState
from .gestures import PointerTracker
from .logging_config import init_logging
from .rendering import SliderRenderer

# ---------------------------------------------------------------------------
# Global state shared between UI and backend
# ---------------------------------------------------------------------------
settings = ServerSettings()
controller = SliderController(settings.slider)
backend = SVGSketchBackend(style=settings.style)
renderer = SliderRenderer(backend).attach(controller)
tracker = PointerTracker(hit_test=controller.knob_contains)

status_messages: List[str] = []
status_lock = threading.Lock()

# UI element references (populated in create_ui)
slider_image: Optional[ui.interactive_image] = None  # type: ignore[assignment]
value_label: Optional[ui.label] = None  # type: ignore[assignment]
status_area: Optional[ui.textarea] = None  # type: ignore[assignment]


# ---------------------------------------------------------------------------
# Helper functions
# ---------------------------------------------------------------------------

def _append_status(message: str) -> None:
    timestamp = time.strftime("%H:%M:%S")
    with status_lock:
        status_messages.append(f"[{timestamp}] {message}")


def _on_commit(value: float) -> None:
    _append_status(f"Committed value {value:.2f}")


def _redraw(_visual: Optional[VisualState] = None) -> None:
    if slider_image is not None:
        slider_image.content = backend.to_svg_content()
    if value_label is not None:
        session = controller.session
        shown = session.intermediate_value if session is not None else controller.value
        value_label.text = f"Value: {shown:.2f} ({controller.pct * 100:.0f} %)"


def _sync_status_to_ui() -> None:
    if status_area is not None:
        with status_lock:
            status_area.value = "\n".join(status_messages[-250:])


def _handle_mouse(e: events.MouseEventArguments) -> None:
    if e.type == "mousedown":
        gestures = tracker.press(e.image_x, e.image_y)
    elif e.type == "mousemove":
        gestures = tracker.move(e.image_x, e.image_y)
    elif e.type == "mouseup":
        gestures = tracker.release(e.image_x, e.image_y)
    else:
        return
    for gesture in gestures:
        controller.handle(gesture)


def _set_number(name: str, value) -> None:
    try:
        setattr(controller, name, float(value))
    except (TypeError, ValueError):
        return
    _append_status(f"{name} set to {getattr(controller, name):g}")


def _set_disabled(value: bool) -> None:
    controller.disabled = bool(value)
    if controller.disabled:
        tracker.cancel()
    _append_status("Slider disabled" if controller.disabled else "Slider enabled")


controller.add_change_listener(_on_commit)
controller.add_refresh_listener(_redraw)


# ---------------------------------------------------------------------------
# UI construction
# ---------------------------------------------------------------------------

def create_ui() -> None:
    global slider_image, value_label, status_area

    ui.page_title("Sketch Slider")
    ui.markdown("# Sketch Slider")

    width, height = settings.box.as_tuple()
    with ui.row().classes("w-full gap-6"):
        with ui.column().classes("gap-4"):
            with ui.card():
                ui.label("Slider").classes("text-lg font-semibold")
                slider_image = ui.interactive_image(
                    size=(int(width), int(height)),
                    on_mouse=_handle_mouse,
                    events=["mousedown", "mousemove", "mouseup"],
                    cross=False,
                ).style(f"width:{width:g}px;height:{height:g}px")
                value_label = ui.label("")

            with ui.card():
                ui.label("Configuration").classes("text-lg font-semibold")
                ui.number(label="Value", value=controller.value,
                          on_change=lambda e: _set_number("value", e.value))
                ui.number(label="Min", value=controller.min,
                          on_change=lambda e: _set_number("min", e.value))
                ui.number(label="Max", value=controller.max,
                          on_change=lambda e: _set_number("max", e.value))
                ui.number(label="Knob radius", value=controller.knob_radius, min=1,
                          on_change=lambda e: _set_number("knob_radius", e.value))
                ui.switch("Disabled", value=controller.disabled,
                          on_change=lambda e: _set_disabled(e.value))

        with ui.column().classes("gap-4"):
            with ui.card():
                ui.label("Status log").classes("text-lg font-semibold")
                status_area = ui.textarea(value="", auto_resize=True)
                status_area.props("readonly")

    ui.timer(0.5, _sync_status_to_ui)
    if controller.layout is None:
        controller.on_layout(width, height)
    _redraw()


def run(**kwargs) -> None:
    init_logging(settings.log_level)
    ui.run(**kwargs)


@ui.page("/")
def index() -> None:
    create_ui()
