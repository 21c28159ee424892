"""
OpenCV-backed 2D canvas.

Implements the small drawing vocabulary the tunnel needs: clear, stroke
colour and width, ellipse outlines, batched line paths and single line
segments. Strokes with an alpha below 1 are composited onto the frame with
``cv2.addWeighted``; only the region the stroke touches is blended.
"""
from contextlib import contextmanager

import cv2
import numpy as np

from tunnelvis.constants import BG_COLOR, DRAW_SHIFT, STROKE_WIDTH


class Canvas:
    """
    A BGR frame plus the current stroke state.
    Coordinates passed to drawing calls are in device-independent units and
    are multiplied by the active scale before hitting the pixel buffer.
    """

    def __init__(self, width, height, bg_color=BG_COLOR):
        self.bg_color = bg_color
        self.frame = np.zeros((0, 0, 3), dtype=np.uint8)
        self.resize(width, height)

        self.stroke_color = (255, 255, 255)
        self.stroke_alpha = 1.0
        self.line_width = STROKE_WIDTH
        self._scale = 1.0

    @property
    def width(self):
        return self.frame.shape[1]

    @property
    def height(self):
        return self.frame.shape[0]

    def resize(self, width, height):
        """Reallocate the pixel buffer (device pixels)."""
        self.frame = np.full((max(int(height), 0), max(int(width), 0), 3), self.bg_color, dtype=np.uint8)

    def clear(self, x=0, y=0, w=None, h=None):
        """Fill a device-pixel region (the whole frame by default) with the background."""
        w = self.width if w is None else w
        h = self.height if h is None else h
        self.frame[int(y):int(y + h), int(x):int(x + w)] = self.bg_color

    def set_stroke(self, color, alpha=1.0, width=None):
        if not 0.0 <= alpha <= 1.0:
            raise ValueError(f"Stroke alpha must be within [0, 1], got {alpha}")
        if width is not None:
            if width <= 0:
                raise ValueError(f"Stroke width must be positive, got {width}")
            self.line_width = width
        self.stroke_color = tuple(int(c) for c in color)
        self.stroke_alpha = alpha

    @contextmanager
    def scaled(self, factor):
        """Apply a uniform scale transform for the duration of the block."""
        previous = self._scale
        self._scale = previous * factor
        try:
            yield self
        finally:
            self._scale = previous

    # --- Drawing primitives ---

    def _fixed(self, value, origin=0):
        # cv2 takes integer coordinates; DRAW_SHIFT fractional bits keep sub-pixel accuracy
        return int(round((value * self._scale - origin) * (1 << DRAW_SHIFT)))

    def _thickness(self):
        return max(1, int(round(self.line_width * self._scale)))

    def ellipse(self, x, y, rx, ry):
        """Stroke an ellipse outline. Zero-size ellipses draw nothing."""
        if rx <= 0 or ry <= 0 or self.frame.size == 0:
            return

        def draw(target, ox, oy):
            cv2.ellipse(
                target,
                (self._fixed(x, ox), self._fixed(y, oy)),
                (self._fixed(rx), self._fixed(ry)),
                0,
                0,
                360,
                self.stroke_color,
                self._thickness(),
                cv2.LINE_AA,
                DRAW_SHIFT,
            )

        self._stroke(draw, (0, 0, self.width, self.height))

    def line(self, p0, p1):
        """Stroke a single segment between two ``Point``-like objects."""
        if self.frame.size == 0:
            return
        self._stroke(self._segment_painter([(p0, p1)]), self._bounds(p0, p1))

    def lines(self, segments):
        """Stroke many segments as one path, composited once."""
        segments = list(segments)
        if not segments or self.frame.size == 0:
            return
        self._stroke(self._segment_painter(segments), (0, 0, self.width, self.height))

    def _segment_painter(self, segments):
        def draw(target, ox, oy):
            for p0, p1 in segments:
                cv2.line(
                    target,
                    (self._fixed(p0.x, ox), self._fixed(p0.y, oy)),
                    (self._fixed(p1.x, ox), self._fixed(p1.y, oy)),
                    self.stroke_color,
                    self._thickness(),
                    cv2.LINE_AA,
                    DRAW_SHIFT,
                )

        return draw

    def _bounds(self, p0, p1):
        """Device-pixel box (x0, y0, x1, y1) covering a segment and its stroke, clipped to the frame."""
        pad = self._thickness() + 2
        xs = (p0.x * self._scale, p1.x * self._scale)
        ys = (p0.y * self._scale, p1.y * self._scale)
        x0 = max(int(min(xs)) - pad, 0)
        y0 = max(int(min(ys)) - pad, 0)
        x1 = min(int(max(xs)) + pad + 1, self.width)
        y1 = min(int(max(ys)) + pad + 1, self.height)
        return x0, y0, x1, y1

    def _stroke(self, draw, bounds):
        """Run ``draw(target, ox, oy)`` and blend the result in at the current alpha."""
        x0, y0, x1, y1 = bounds
        if x1 <= x0 or y1 <= y0 or self.stroke_alpha <= 0.0:
            return

        if self.stroke_alpha >= 1.0:
            draw(self.frame, 0, 0)
            return

        roi = self.frame[y0:y1, x0:x1]
        layer = roi.copy()
        draw(layer, x0, y0)
        self.frame[y0:y1, x0:x1] = cv2.addWeighted(layer, self.stroke_alpha, roi, 1.0 - self.stroke_alpha, 0)
