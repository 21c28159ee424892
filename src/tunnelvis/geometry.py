"""Boundary ellipses of the tunnel: the outer mouth and the focal badge."""
from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> Point:
        return Point(self.x * k, self.y * k)


@dataclass(frozen=True)
class Rect:
    """Numeric rectangle as reported by the host surface."""

    x: float
    y: float
    width: float
    height: float

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    @classmethod
    def centered(cls, surface_size: tuple[float, float], width: float, height: float) -> Rect:
        """A ``width`` x ``height`` rect centred on a surface of ``surface_size``."""
        sw, sh = surface_size
        return cls((sw - width) * 0.5, (sh - height) * 0.5, width, height)


@dataclass(frozen=True)
class Ellipse:
    """Centre point plus the two semi-axis radii."""

    x: float
    y: float
    w: float
    h: float

    @property
    def is_degenerate(self) -> bool:
        return self.w <= 0 or self.h <= 0

    def point_at(self, angle: float) -> Point:
        """Point on the ellipse boundary at ``angle`` radians."""
        return Point(self.x + math.cos(angle) * self.w, self.y + math.sin(angle) * self.h)


def compute_boundary_discs(surface_size: tuple[float, float], focal_rect: Rect) -> tuple[Ellipse, Ellipse]:
    """
    Derive the outer and inner boundary ellipses for a surface.

    The outer disc is a circle reaching the surface corners (radius is half
    the diagonal). The inner disc matches the focal rect's half extents, so
    it is elliptical when the focal shape is not square. Both are centred on
    the surface midpoint.
    """
    width, height = surface_size
    diag = math.hypot(width, height)

    start_disc = Ellipse(width * 0.5, height * 0.5, diag * 0.5, diag * 0.5)
    end_disc = Ellipse(width * 0.5, height * 0.5, focal_rect.width * 0.5, focal_rect.height * 0.5)
    return start_disc, end_disc
