from __future__ import annotations

from dataclasses import dataclass

from tunnelvis.constants import DISC_STEP, TOTAL_DISCS
from tunnelvis.easing import Easing, get_easing, tween_value
from tunnelvis.geometry import Ellipse


@dataclass
class Disc:
    """An ellipse whose shape is derived from its progress through the tunnel."""

    progress: float
    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    def as_ellipse(self) -> Ellipse:
        return Ellipse(self.x, self.y, self.w, self.h)


class DiscAnimator:
    """
    Owns the ordered disc collection and re-derives each disc every frame.
    Later discs in the list are drawn on top of earlier ones.

    Each axis eases independently; the defaults (linear x, accelerating y,
    decelerating radii) give the "pull toward a point" look.
    """

    def __init__(
        self,
        start_disc: Ellipse,
        end_disc: Ellipse,
        total: int = TOTAL_DISCS,
        step: float = DISC_STEP,
        x_easing=Easing.LINEAR,
        y_easing=Easing.IN_EXPO,
        size_easing=Easing.OUT_CUBIC,
    ):
        self.start_disc = start_disc
        self.end_disc = end_disc
        self.step = step
        self.x_easing = get_easing(x_easing)
        self.y_easing = get_easing(y_easing)
        self.size_easing = get_easing(size_easing)
        self.discs = [self.tween_disc(Disc(progress=i / total)) for i in range(total)]

    def tween_disc(self, disc: Disc) -> Disc:
        """Recompute a disc's ellipse from its progress."""
        start, end, p = self.start_disc, self.end_disc, disc.progress

        disc.x = tween_value(start.x, end.x, p, self.x_easing)
        disc.y = tween_value(start.y, end.y, p, self.y_easing)
        disc.w = tween_value(start.w, end.w, p, self.size_easing)
        disc.h = tween_value(start.h, end.h, p, self.size_easing)
        return disc

    def advance(self):
        for disc in self.discs:
            disc.progress = (disc.progress + self.step) % 1
            self.tween_disc(disc)
