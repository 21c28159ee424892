"""Live preview in an OpenCV HighGUI window."""
import logging
import time

import cv2

from tunnelvis.geometry import Rect

logger = logging.getLogger(__name__)

WINDOW_NAME = "tunnelvis"


class WindowScheduler:
    """
    Display-refresh scheduler backed by ``cv2.waitKey``.
    Holds at most one pending callback; ``run`` keeps invoking it with a
    monotonic millisecond timestamp until nothing is scheduled.
    """

    def __init__(self, fps, clock=time.monotonic):
        self.frame_delay = max(1, int(1000 / fps))
        self.clock = clock
        self._pending = None
        self._t0 = clock()

    def schedule_next_frame(self, callback):
        self._pending = callback

    def now(self):
        return (self.clock() - self._t0) * 1000

    def run_once(self):
        """Invoke the pending callback, if any. Returns False when the loop is over."""
        callback, self._pending = self._pending, None
        if callback is None:
            return False
        callback(self.now())
        return True


class PreviewWindow:
    """
    Hosts a TunnelRenderer in a resizable window.
    The window's client rect is the host surface; closing the window stops the loop.
    """

    def __init__(self, renderer, focal_size, dpi=1.0, fps=60):
        self.renderer = renderer
        self.focal_size = focal_size
        self.dpi = dpi
        self.scheduler = WindowScheduler(fps)
        self._surface = None

    def focal_rect(self, size):
        return Rect.centered(size, *self.focal_size)

    def open(self, size):
        cv2.namedWindow(WINDOW_NAME, cv2.WINDOW_NORMAL)
        cv2.resizeWindow(WINDOW_NAME, round(size[0] * self.dpi), round(size[1] * self.dpi))
        self._surface = size
        self.renderer.setup(size, self.focal_rect(size), self.dpi, self.scheduler.now())

    def poll_resize(self):
        """Compare the window's client rect with the current surface and notify on change."""
        _, _, w, h = cv2.getWindowImageRect(WINDOW_NAME)
        if w <= 0 or h <= 0:
            return
        size = (w / self.dpi, h / self.dpi)
        if size != self._surface:
            self._surface = size
            self.renderer.on_resize(size, self.focal_rect(size), self.dpi, self.scheduler.now())

    def is_open(self):
        return cv2.getWindowProperty(WINDOW_NAME, cv2.WND_PROP_VISIBLE) >= 1

    def run(self, size):
        self.open(size)
        self.renderer.start(self.scheduler)
        logger.info("[+] Preview running, close the window to quit")

        try:
            while self.scheduler.run_once():
                cv2.imshow(WINDOW_NAME, self.renderer.canvas.frame)
                cv2.waitKey(self.scheduler.frame_delay)
                if not self.is_open():
                    self.renderer.stop()
                    break
                self.poll_resize()
        except KeyboardInterrupt:
            self.renderer.stop()
        finally:
            cv2.destroyAllWindows()
