"""FastAPI application exposing one slider over HTTP.

The server owns a single :class:`SliderController` rendered through the SVG
backend.  Gesture events posted to ``/api/gesture`` drive the state machine
exactly the way a pointer would, which makes the endpoint handy for scripted
demos and for poking at the widget without a browser.
"""
from __future__ import annotations

import math
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from ..backends import SVGSketchBackend
from ..config import ServerSettings
from ..controller import SliderController
from ..rendering import SliderRenderer

SLIDER_FIELDS = ("value", "min", "max", "knob_radius")


def _finite(raw: Any, name: str) -> float:
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError(f"{name} must be a finite number")
    return value


@dataclass
class SliderSession:
    """Controller, renderer and commit history behind the HTTP API."""

    controller: SliderController
    backend: SVGSketchBackend
    renderer: SliderRenderer
    lock: threading.Lock = field(default_factory=threading.Lock)
    committed: List[float] = field(default_factory=list)

    @classmethod
    def create(cls, settings: ServerSettings) -> "SliderSession":
        controller = SliderController(settings.slider)
        backend = SVGSketchBackend(style=settings.style)
        renderer = SliderRenderer(backend).attach(controller)
        session = cls(controller=controller, backend=backend, renderer=renderer)
        controller.add_change_listener(session.committed.append)
        controller.on_layout(*settings.box.as_tuple())
        return session


def create_app(settings: Optional[ServerSettings] = None) -> FastAPI:
    settings = settings or ServerSettings()
    session = SliderSession.create(settings)

    app = FastAPI(title="Sketch Slider Server")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.slider = session

    @app.get("/api/health")
    def health() -> Dict[str, str]:
        return {"status": "ok"}

    @app.get("/api/slider")
    def get_slider() -> Dict[str, Any]:
        with session.lock:
            return session.controller.snapshot()

    @app.post("/api/slider")
    def post_slider(payload: Dict[str, Any]) -> Dict[str, Any]:
        try:
            changes = {name: _finite(payload[name], name) for name in SLIDER_FIELDS if payload.get(name) is not None}
            if payload.get("disabled") is not None:
                if not isinstance(payload["disabled"], bool):
                    raise ValueError("disabled must be a boolean")
                changes["disabled"] = payload["disabled"]
        except (TypeError, ValueError) as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        with session.lock:
            session.controller.configure(**changes)
            return session.controller.snapshot()

    @app.post("/api/layout")
    def post_layout(payload: Dict[str, Any]) -> Dict[str, Any]:
        try:
            width = _finite(payload["width"], "width")
            height = _finite(payload["height"], "height")
        except (KeyError, TypeError, ValueError) as exc:
            raise HTTPException(status_code=400, detail="finite width and height are required") from exc
        with session.lock:
            session.controller.on_layout(width, height)
            return session.controller.snapshot()

    @app.post("/api/gesture")
    def post_gesture(payload: Dict[str, Any]) -> Dict[str, Any]:
        with session.lock:
            before = len(session.committed)
            try:
                session.controller.handle_dict(payload)
            except (TypeError, ValueError) as exc:
                raise HTTPException(status_code=400, detail=str(exc)) from exc
            return {
                "ok": True,
                "committed": session.committed[before:],
                "slider": session.controller.snapshot(),
            }

    @app.get("/api/changes")
    def get_changes() -> Dict[str, Any]:
        with session.lock:
            return {"committed": list(session.committed)}

    @app.get("/api/slider.svg")
    def get_svg() -> Response:
        with session.lock:
            svg = session.backend.to_svg()
        return Response(content=svg, media_type="image/svg+xml")

    return app


app = create_app()


__all__ = ["app", "create_app", "SliderSession"]
