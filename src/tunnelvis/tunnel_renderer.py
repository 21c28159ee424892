import logging
from enum import Enum

from tunnelvis.canvas import Canvas
from tunnelvis.constants import (
    BG_COLOR,
    DISC_COLOR,
    LINE_ALPHA,
    LINE_COLOR,
    PARTICLE_COLOR,
    STROKE_WIDTH,
)
from tunnelvis.engine import TunnelEngine

logger = logging.getLogger(__name__)


class LoopState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


class TunnelRenderer:
    """
    Handles the drawing logic using OpenCV.
    Drives a TunnelEngine one frame at a time and paints it onto a Canvas.
    """

    def __init__(self, engine: TunnelEngine, canvas: Canvas = None, bg_color=BG_COLOR):
        self.engine = engine
        self.canvas = canvas or Canvas(0, 0, bg_color)
        self.state = LoopState.IDLE
        self.frame_count = 0
        self._scheduler = None

    # --- Host surface ---

    def setup(self, size, focal_rect, dpi=1.0, time=0.0):
        """Size the canvas and engine for a surface, then start running."""
        self._size_canvas(size, dpi)
        self.engine.setup(size, focal_rect, dpi, time)
        if self.state is LoopState.IDLE:
            self.state = LoopState.RUNNING
            logger.info(f"[+] Tunnel running at {size[0]}x{size[1]} (dpi {dpi})")

    def on_resize(self, size, focal_rect, dpi=None, time=0.0):
        """Size-change notification: everything is rebuilt before the next frame."""
        dpi = self.engine.dpi if dpi is None else dpi
        self._size_canvas(size, dpi)
        self.engine.resize(size, focal_rect, dpi, time)

    def _size_canvas(self, size, dpi):
        width, height = size
        self.canvas.resize(round(width * dpi), round(height * dpi))

    # --- Loop ---

    def start(self, scheduler):
        """Hand the per-frame callback to a scheduler (``schedule_next_frame(callback)``)."""
        if self.state is not LoopState.RUNNING:
            raise RuntimeError(f"Cannot start the render loop from state {self.state.value!r}")
        self._scheduler = scheduler
        scheduler.schedule_next_frame(self.tick)

    def stop(self):
        """Teardown signal from the host: no further frames are scheduled."""
        if self.state is not LoopState.STOPPED:
            logger.info(f"[+] Tunnel stopped after {self.frame_count} frames")
        self.state = LoopState.STOPPED
        self._scheduler = None

    def tick(self, time):
        """Render one frame for clock ``time`` (ms) and schedule the next."""
        if self.state is not LoopState.RUNNING:
            return
        self.render(time)
        if self._scheduler is not None:
            self._scheduler.schedule_next_frame(self.tick)

    def render(self, time):
        """Clear, advance the engine, and draw discs, lines and particles."""
        canvas = self.canvas
        canvas.clear()

        self.engine.step(time)
        self.frame_count += 1

        if not self.engine.is_drawable:
            return canvas.frame

        with canvas.scaled(self.engine.dpi):
            self.draw_discs()
            self.draw_lines()
            self.draw_particles()

        return canvas.frame

    def make_frame(self, t):
        """
        The callback function for MoviePy.
        Generates a single video frame at time t (seconds).
        """
        return self.render(t * 1000).copy()

    # --- Drawing ---

    def draw_discs(self):
        canvas, engine = self.canvas, self.engine
        canvas.set_stroke(DISC_COLOR, 1.0, STROKE_WIDTH)

        # Outer disc first, then the animated discs in index order
        for ellipse in [engine.start_disc, *(disc.as_ellipse() for disc in engine.discs)]:
            if ellipse.is_degenerate:
                continue
            canvas.ellipse(ellipse.x, ellipse.y, ellipse.w, ellipse.h)

    def draw_lines(self):
        self.canvas.set_stroke(LINE_COLOR, LINE_ALPHA, STROKE_WIDTH)
        self.canvas.lines((line.p0, line.p1) for line in self.engine.lines)

    def draw_particles(self):
        canvas, lines = self.canvas, self.engine.lines

        for particle in self.engine.particles:
            start, end = particle.get_trail(lines[particle.line_index])
            canvas.set_stroke(PARTICLE_COLOR, particle.a, STROKE_WIDTH)
            canvas.line(start, end)
