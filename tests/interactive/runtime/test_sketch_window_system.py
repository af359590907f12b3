import logging
from datetime import datetime

import pytest
from PIL import Image

from pirouette.core.sketch_config import SketchConfig
from pirouette.interactive.runtime import sketch_window_system as sws
from pirouette.interactive.runtime.frame_clock import FrameClock
from pirouette.render.frame_pipeline import SketchSession

NOON = datetime(2024, 5, 1, 12, 0, 0)


class _FakeWindow:
    def __init__(self, width=64, height=48):
        self.width = width
        self.height = height
        self.handlers = {}
        self.clears = 0
        self.closed = False

    def push_handlers(self, **handlers):
        self.handlers.update(handlers)

    def clear(self):
        self.clears += 1

    def close(self):
        self.closed = True


class _Shown:
    """blit された画像を記録する表示用ラッパ。"""

    def __init__(self, image):
        self.image = image
        self.blits = []

    def blit(self, x, y, *, width, height):
        self.blits.append((x, y, width, height))


@pytest.fixture
def display(monkeypatch):
    monkeypatch.setattr(sws, "_to_display_image", _Shown)


def _system():
    session = SketchSession(SketchConfig(shadow_enabled=False), (64, 48), seed=1)
    window = _FakeWindow()
    system = sws.SketchWindowSystem(session, window=window, clock=FrameClock(now=lambda: NOON))
    return system, window


def test_failed_frame_keeps_previous_image_and_logs(monkeypatch, display, caplog):
    frames = {}

    def render(session, frame_count, now):
        if frame_count == 2:
            raise RuntimeError("boom")
        image = Image.new("RGB", session.canvas_size, (frame_count, 0, 0))
        frames[frame_count] = image
        return image

    monkeypatch.setattr(sws, "render_frame", render)
    system, window = _system()

    system.draw_frame()
    shown = system._last_image
    assert shown.image.tobytes() == frames[1].tobytes()

    with caplog.at_level(logging.ERROR, logger=sws.__name__):
        system.draw_frame()

    assert system._last_image is shown
    assert shown.image.tobytes() == frames[1].tobytes()
    assert shown.blits == [(0, 0, 64, 48), (0, 0, 64, 48)]
    assert window.clears == 2
    failed = [r for r in caplog.records if "frame 2 failed" in r.getMessage()]
    assert failed and failed[0].exc_info is not None

    system.draw_frame()
    assert system._last_image is not shown
    assert system._last_image.image.getpixel((0, 0)) == (3, 0, 0)


def test_failure_before_any_frame_draws_nothing(monkeypatch, display):
    def render(session, frame_count, now):
        raise ValueError("no frame yet")

    monkeypatch.setattr(sws, "render_frame", render)
    system, window = _system()

    system.draw_frame()
    assert system._last_image is None
    assert window.clears == 1


def test_resize_event_is_forwarded_to_session(display):
    session = SketchSession(SketchConfig(), (64, 48), seed=1)
    window = _FakeWindow()
    system = sws.SketchWindowSystem(session, window=window)

    window.handlers["on_resize"](120, 90)
    assert session.canvas_size == (120, 90)

    system.close()
    assert window.closed
