"""Radial lines joining the outer boundary to the focal boundary."""
from __future__ import annotations

import math
from dataclasses import dataclass

from tunnelvis.constants import LINE_ROTATION_SPEED, TOTAL_LINES
from tunnelvis.geometry import Ellipse, Point


@dataclass(frozen=True)
class RadialLine:
    p0: Point  # On the outer ellipse
    p1: Point  # On the inner ellipse
    l: Point  # p1 - p0


def regenerate_lines(
    start_disc: Ellipse,
    end_disc: Ellipse,
    time: float,
    total: int = TOTAL_LINES,
) -> list[RadialLine]:
    """
    Build the full set of radial lines for clock ``time`` (milliseconds).

    Angles are spaced evenly and rotate slowly with the clock rather than
    the frame count, so the sweep speed does not depend on frame rate. The
    result depends only on the arguments.
    """
    lines = []
    lines_angle = math.tau / total

    for i in range(total):
        angle = (i * lines_angle + time * LINE_ROTATION_SPEED) % math.tau

        # Both discs are centred on the surface midpoint
        p0 = start_disc.point_at(angle)
        p1 = end_disc.point_at(angle)
        lines.append(RadialLine(p0, p1, p1 - p0))

    return lines
