"""Easing functions for disc interpolation."""
from __future__ import annotations

from enum import Enum
from typing import Callable


class UnknownEasingError(ValueError):
    """Raised when an easing is requested by a name that is not registered."""


def linear(t: float) -> float:
    return t


def ease_in_expo(t: float) -> float:
    if t == 0:
        return 0.0
    return 2 ** (10 * t - 10)


def ease_out_cubic(t: float) -> float:
    return 1 - (1 - t) ** 3


class Easing(Enum):
    LINEAR = "linear"
    IN_EXPO = "inExpo"
    OUT_CUBIC = "outCubic"

    def __call__(self, t: float) -> float:
        return EASINGS[self](t)


EASINGS: dict[Easing, Callable[[float], float]] = {
    Easing.LINEAR: linear,
    Easing.IN_EXPO: ease_in_expo,
    Easing.OUT_CUBIC: ease_out_cubic,
}


def get_easing(name: str | Easing | None) -> Easing:
    """
    Resolve an easing by name.

    ``None`` means no easing was requested and maps to linear. Any other
    unrecognised name is a configuration error and raises
    :class:`UnknownEasingError` rather than falling back.
    """
    if name is None:
        return Easing.LINEAR
    if isinstance(name, Easing):
        return name
    try:
        return Easing(name)
    except ValueError:
        known = ", ".join(e.value for e in Easing)
        raise UnknownEasingError(
            f"Unknown easing {name!r} (expected one of: {known})"
        ) from None


def tween_value(start: float, end: float, p: float, easing=None) -> float:
    """Interpolate from ``start`` to ``end`` at progress ``p`` through an easing."""
    ease_fn = get_easing(easing)
    return start + (end - start) * ease_fn(p)
