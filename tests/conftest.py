import pytest

from sketchslider.backends import RecordingBackend
from sketchslider.config import SliderConfig
from sketchslider.controller import SliderController
from sketchslider.rendering import SliderRenderer


@pytest.fixture
def slider():
    """Controller measured at the default 300x40 host box (bar width 280)."""
    controller = SliderController(SliderConfig(value=0, min=0, max=100))
    controller.on_layout(300, 40)
    return controller


@pytest.fixture
def commits(slider):
    values = []
    slider.add_change_listener(values.append)
    return values


@pytest.fixture
def recorded():
    backend = RecordingBackend()
    controller = SliderController()
    renderer = SliderRenderer(backend).attach(controller)
    return controller, renderer, backend
