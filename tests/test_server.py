import pytest
from fastapi.testclient import TestClient

from sketchslider.server.app import create_app


@pytest.fixture
def client():
    return TestClient(create_app())


def gesture(client, **payload):
    res = client.post("/api/gesture", json=payload)
    assert res.status_code == 200
    return res.json()


def test_health(client):
    assert client.get("/api/health").json() == {"status": "ok"}


def test_server_slider_is_measured_at_startup(client):
    data = client.get("/api/slider").json()
    assert data["bar_width"] == 280
    assert data["visual"]["pending"] is False


def test_drag_over_http_commits_once(client):
    assert gesture(client, type="start")["committed"] == []
    assert gesture(client, type="move", dx=140)["committed"] == []
    result = gesture(client, type="end")
    assert result["committed"] == [pytest.approx(50)]
    assert result["slider"]["value"] == pytest.approx(50)
    assert client.get("/api/changes").json()["committed"] == [pytest.approx(50)]


def test_configure_slider(client):
    data = client.post("/api/slider", json={"value": 30, "disabled": True}).json()
    assert data["pct"] == pytest.approx(0.3)
    assert data["disabled"] is True
    assert data["visual"]["knob_offset_px"] == 84
    assert gesture(client, type="move", dx=50)["slider"]["dragging"] is False


def test_layout_endpoint(client):
    data = client.post("/api/layout", json={"width": 220, "height": 30}).json()
    assert data["bar_width"] == 200


@pytest.mark.parametrize(
    "path,payload",
    [
        ("/api/gesture", {"type": "pinch"}),
        ("/api/gesture", {"type": "move", "dx": "far"}),
        ("/api/layout", {"width": 100}),
        ("/api/slider", {"value": "lots"}),
        ("/api/slider", {"value": "inf"}),
        ("/api/slider", {"min": "nan"}),
        ("/api/slider", {"knob_radius": "inf"}),
        ("/api/slider", {"disabled": "false"}),
        ("/api/slider", {"disabled": 0}),
        ("/api/layout", {"width": "nan", "height": 40}),
        ("/api/layout", {"width": 300, "height": "inf"}),
    ],
)
def test_bad_payloads_are_rejected(client, path, payload):
    assert client.post(path, json=payload).status_code == 400


def test_svg_endpoint(client):
    res = client.get("/api/slider.svg")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("image/svg+xml")
    assert res.text.startswith("<svg")


def test_rejected_payload_leaves_slider_untouched(client):
    assert client.post("/api/slider", json={"value": 30, "disabled": "false"}).status_code == 400
    assert client.post("/api/layout", json={"width": "nan", "height": 40}).status_code == 400
    data = client.get("/api/slider").json()
    assert data["disabled"] is False
    assert data["value"] == 0
    assert data["bar_width"] == 280


def test_disabled_accepts_json_booleans(client):
    assert client.post("/api/slider", json={"disabled": True}).json()["disabled"] is True
    assert client.post("/api/slider", json={"disabled": False}).json()["disabled"] is False
