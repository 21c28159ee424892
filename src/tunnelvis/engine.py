"""
Animation state for the tunnel effect.

The engine owns every collection (discs, lines, particles) and exposes a
single ``step(time)`` that advances them by one frame. It never draws; see
:mod:`tunnelvis.tunnel_renderer` for that.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from tunnelvis.constants import (
    DEFAULT_DPI,
    DISC_STEP,
    TOTAL_DISCS,
    TOTAL_LINES,
    TOTAL_PARTICLES,
)
from tunnelvis.disc import DiscAnimator
from tunnelvis.easing import Easing, get_easing
from tunnelvis.geometry import Rect, compute_boundary_discs
from tunnelvis.lines import regenerate_lines
from tunnelvis.particle import ParticleAnimator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TunnelConfig:
    total_discs: int = TOTAL_DISCS
    total_lines: int = TOTAL_LINES
    total_particles: int = TOTAL_PARTICLES
    disc_step: float = DISC_STEP
    x_easing: str | Easing = Easing.LINEAR
    y_easing: str | Easing = Easing.IN_EXPO
    size_easing: str | Easing = Easing.OUT_CUBIC
    seed: int | None = None

    def __post_init__(self):
        for name in ("total_discs", "total_lines", "total_particles"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if not 0 < self.disc_step < 1:
            raise ValueError(f"disc_step must be within (0, 1), got {self.disc_step}")

        # Resolve easing names now so a typo fails before anything is drawn
        for name in ("x_easing", "y_easing", "size_easing"):
            object.__setattr__(self, name, get_easing(getattr(self, name)))


class TunnelEngine:
    """
    Holds the boundary discs and the three animated collections.

    ``setup`` (and ``resize``, which is the same operation) rebuilds all of
    them from scratch, so particle line indices always match the current
    line list.
    """

    def __init__(self, config: TunnelConfig | None = None):
        self.config = config or TunnelConfig()
        self.rng = np.random.default_rng(self.config.seed)

        self.size = (0.0, 0.0)
        self.dpi = DEFAULT_DPI
        self.focal_rect = Rect(0, 0, 0, 0)
        self.start_disc = None
        self.end_disc = None
        self.disc_animator = None
        self.particle_animator = None
        self.lines = []

    @property
    def discs(self):
        return self.disc_animator.discs if self.disc_animator else []

    @property
    def particles(self):
        return self.particle_animator.particles if self.particle_animator else []

    @property
    def is_drawable(self) -> bool:
        """False while the surface has no area."""
        width, height = self.size
        return width > 0 and height > 0

    def setup(self, size: tuple[float, float], focal_rect: Rect, dpi: float = DEFAULT_DPI, time: float = 0.0):
        """Derive geometry for a surface and regenerate every collection."""
        cfg = self.config
        self.size = (float(size[0]), float(size[1]))
        self.focal_rect = focal_rect
        self.dpi = dpi

        self.start_disc, self.end_disc = compute_boundary_discs(self.size, focal_rect)
        self.disc_animator = DiscAnimator(
            self.start_disc,
            self.end_disc,
            cfg.total_discs,
            cfg.disc_step,
            cfg.x_easing,
            cfg.y_easing,
            cfg.size_easing,
        )
        self.lines = regenerate_lines(self.start_disc, self.end_disc, time, cfg.total_lines)
        self.particle_animator = ParticleAnimator(cfg.total_particles, cfg.total_lines, self.rng)

        if not self.is_drawable:
            logger.warning(f"[!] Surface has no area ({size[0]}x{size[1]}), frames will be blank")
        elif focal_rect.is_empty:
            logger.warning("[!] Focal rect has no area, the tunnel converges on a point")
        logger.debug(
            f"Setup {self.size[0]:.0f}x{self.size[1]:.0f} @{dpi}x: "
            f"outer r={self.start_disc.w:.1f}, inner {self.end_disc.w:.1f}x{self.end_disc.h:.1f}"
        )

    def resize(self, size: tuple[float, float], focal_rect: Rect, dpi: float | None = None, time: float = 0.0):
        logger.info(f"[i] Resized to {size[0]:.0f}x{size[1]:.0f}")
        self.setup(size, focal_rect, self.dpi if dpi is None else dpi, time)

    def step(self, time: float):
        """Advance discs and particles one frame and rebuild the lines for ``time`` (ms)."""
        if self.disc_animator is None:
            raise RuntimeError("TunnelEngine.step() called before setup()")

        self.disc_animator.advance()
        self.particle_animator.advance()
        self.lines = regenerate_lines(self.start_disc, self.end_disc, time, self.config.total_lines)
        return self
