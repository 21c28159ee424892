"""Tests for the preview scheduler (no window is opened)."""
from __future__ import annotations

import pytest

from tunnelvis import preview
from tunnelvis.geometry import Rect
from tunnelvis.preview import PreviewWindow, WindowScheduler


class FakeClock:
    def __init__(self):
        self.now = 10.0

    def __call__(self):
        return self.now


class TestWindowScheduler:
    def test_frame_delay(self):
        assert WindowScheduler(fps=60).frame_delay == 16
        assert WindowScheduler(fps=5000).frame_delay == 1

    def test_nothing_pending(self):
        assert WindowScheduler(fps=30).run_once() is False

    def test_runs_pending_callback_with_milliseconds(self):
        clock = FakeClock()
        scheduler = WindowScheduler(fps=30, clock=clock)
        received = []
        scheduler.schedule_next_frame(received.append)

        clock.now = 10.25
        assert scheduler.run_once() is True
        assert received == [pytest.approx(250.0)]

    def test_callback_runs_once(self):
        scheduler = WindowScheduler(fps=30)
        received = []
        scheduler.schedule_next_frame(received.append)
        scheduler.run_once()
        assert scheduler.run_once() is False
        assert len(received) == 1


class RecordingRenderer:
    def __init__(self):
        self.resizes = []

    def on_resize(self, size, focal_rect, dpi=None, time=0.0):
        self.resizes.append((size, focal_rect, dpi))


class TestPollResize:
    @pytest.fixture
    def window(self):
        renderer = RecordingRenderer()
        window = PreviewWindow(renderer, (40, 40), dpi=2.0)
        window._surface = (100, 100)
        return window

    def set_window_rect(self, monkeypatch, w, h):
        monkeypatch.setattr(preview.cv2, "getWindowImageRect", lambda name: (0, 0, w, h))

    def test_size_change_notifies_once(self, window, monkeypatch):
        """Window pixels are divided by dpi and the badge is re-centred."""
        self.set_window_rect(monkeypatch, 400, 300)
        window.poll_resize()
        window.poll_resize()

        assert window.renderer.resizes == [((200, 150), Rect(80, 55, 40, 40), 2.0)]

    def test_unchanged_size_is_ignored(self, window, monkeypatch):
        self.set_window_rect(monkeypatch, 200, 200)
        window.poll_resize()
        assert window.renderer.resizes == []

    def test_collapsed_window_is_ignored(self, window, monkeypatch):
        self.set_window_rect(monkeypatch, 0, 0)
        window.poll_resize()
        assert window.renderer.resizes == []
