import pytest

from sketchslider.gestures import GestureEvent, PointerTracker


def kinds(events):
    return [e.type for e in events]


def test_unknown_gesture_type_is_rejected():
    with pytest.raises(ValueError):
        GestureEvent("pinch")


def test_from_dict_and_back():
    event = GestureEvent.from_dict({"type": "move", "dx": "12.5"})
    assert event == GestureEvent.move(12.5)
    assert event.to_dict() == {"type": "move", "dx": 12.5}
    assert GestureEvent.from_dict({"type": "end"}).to_dict() == {"type": "end"}


def test_from_dict_without_type_is_rejected():
    with pytest.raises(ValueError):
        GestureEvent.from_dict({"dx": 3})


def test_tracker_drag_sequence():
    tracker = PointerTracker(threshold_px=5)
    events = tracker.press(10, 20)
    events += tracker.move(12, 20)
    events += tracker.move(30, 21)
    events += tracker.move(60, 25)
    events += tracker.release(80, 25)
    assert kinds(events) == ["down", "start", "move", "move", "move", "end"]
    assert [e.dx for e in events if e.type == "move"] == [20, 50, 70]
    assert not tracker.pressed


def test_tracker_click_emits_up():
    tracker = PointerTracker()
    events = tracker.press(10, 20) + tracker.move(11, 21) + tracker.release(11, 21)
    assert kinds(events) == ["down", "up"]


def test_tracker_dx_is_cumulative_and_signed():
    tracker = PointerTracker(threshold_px=0)
    tracker.press(100, 0)
    assert tracker.move(90, 0)[-1].dx == -10
    assert tracker.move(40, 0)[-1].dx == -60
    assert tracker.tracking


def test_tracker_ignores_moves_without_press():
    tracker = PointerTracker()
    assert tracker.move(50, 50) == []
    assert tracker.release(50, 50) == []


def test_tracker_hit_test_filters_presses():
    tracker = PointerTracker(hit_test=lambda x, y: x < 20)
    assert tracker.press(100, 20) == []
    assert not tracker.pressed
    assert kinds(tracker.press(10, 20)) == ["down"]


def test_tracker_cancel_forgets_press():
    tracker = PointerTracker(threshold_px=0)
    tracker.press(0, 0)
    tracker.move(10, 0)
    tracker.cancel()
    assert tracker.release(20, 0) == []


def test_tracker_drives_controller(slider, commits):
    tracker = PointerTracker(hit_test=slider.knob_contains)
    for event in tracker.press(10, 20) + tracker.move(80, 20) + tracker.move(150, 20) + tracker.release(150, 20):
        slider.handle(event)
    assert commits == [pytest.approx(50)]
