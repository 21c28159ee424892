import numpy as np

from tunnelvis.constants import (
    PARTICLE_ALPHA_MIN,
    PARTICLE_ALPHA_RANGE,
    PARTICLE_SPEED_MIN,
    PARTICLE_SPEED_RANGE,
    PARTICLE_TRAIL_MIN,
    PARTICLE_TRAIL_RANGE,
    TOTAL_LINES,
    TOTAL_PARTICLES,
)


class Particle:
    """A short trail sliding along one radial line."""

    def __init__(self, line_index, p, v, l, a):
        self.line_index = line_index  # Index into the current frame's lines
        self.p = p  # Progress along the line
        self.v = v  # Progress added per frame
        self.l = l  # Trail length as a fraction of the line
        self.a = a  # Opacity

    def update(self):
        """Move along the line, restarting from its beginning once past the end."""
        if self.p < 1:
            self.p += self.v
        else:
            self.p = 0

    def get_trail(self, line):
        """
        Start and end points of the trail on ``line``.
        The trail length is not bounded by the remaining line, so near the end
        of its run the trail extends past ``line.p1``.
        """
        start = line.p0 + line.l * self.p
        end = start + line.l * self.l
        return start, end

    def __repr__(self):
        return (
            f"Particle(line_index={self.line_index}, p={self.p:.3f}, "
            f"v={self.v:.4f}, l={self.l:.3f}, a={self.a:.3f})"
        )


class ParticleAnimator:
    """Fixed pool of particles, created already mid-flight."""

    def __init__(self, total=TOTAL_PARTICLES, line_count=TOTAL_LINES, rng=None):
        self.line_count = line_count
        self.rng = rng if rng is not None else np.random.default_rng()
        self.particles = [self.spawn_particle() for _ in range(total)]

    def spawn_particle(self):
        rng = self.rng
        return Particle(
            line_index=int(rng.integers(0, self.line_count)),
            p=float(rng.random()),
            v=PARTICLE_SPEED_MIN + float(rng.random()) * PARTICLE_SPEED_RANGE,
            l=PARTICLE_TRAIL_MIN + float(rng.random()) * PARTICLE_TRAIL_RANGE,
            a=PARTICLE_ALPHA_MIN + float(rng.random()) * PARTICLE_ALPHA_RANGE,
        )

    def advance(self):
        for particle in self.particles:
            particle.update()
