"""Tests for easing functions and name lookup."""
from __future__ import annotations

import pytest

from tunnelvis.easing import (
    EASINGS,
    Easing,
    UnknownEasingError,
    ease_in_expo,
    ease_out_cubic,
    get_easing,
    linear,
    tween_value,
)


class TestEasingEndpoints:
    """Every easing maps 0 to 0 and 1 to 1 exactly."""

    @pytest.mark.parametrize("easing", list(Easing))
    def test_at_zero(self, easing):
        assert easing(0.0) == 0.0

    @pytest.mark.parametrize("easing", list(Easing))
    def test_at_one(self, easing):
        assert easing(1.0) == 1.0


class TestEasingCurves:
    def test_linear_is_identity(self):
        """Linear easing returns its input."""
        assert linear(0.25) == 0.25

    def test_in_expo_starts_slow(self):
        """In-expo stays far below linear early on."""
        assert ease_in_expo(0.5) == pytest.approx(2**-5)
        assert ease_in_expo(0.1) < 0.01

    def test_out_cubic_starts_fast(self):
        """Out-cubic is ahead of linear in the first half."""
        assert ease_out_cubic(0.5) == pytest.approx(0.875)

    @pytest.mark.parametrize("easing", list(Easing))
    def test_monotonic(self, easing):
        """Eased values never decrease across [0, 1]."""
        samples = [easing(i / 50) for i in range(51)]
        assert samples == sorted(samples)

    def test_every_member_is_registered(self):
        """The enum and the function table cover the same easings."""
        assert set(EASINGS) == set(Easing)


class TestGetEasing:
    def test_lookup_by_name(self):
        """Names resolve to enum members."""
        assert get_easing("linear") is Easing.LINEAR
        assert get_easing("inExpo") is Easing.IN_EXPO
        assert get_easing("outCubic") is Easing.OUT_CUBIC

    def test_none_defaults_to_linear(self):
        """No easing requested means linear."""
        assert get_easing(None) is Easing.LINEAR

    def test_member_passes_through(self):
        assert get_easing(Easing.OUT_CUBIC) is Easing.OUT_CUBIC

    def test_unknown_name_raises(self):
        """An unrecognised name is a configuration error, not a linear fallback."""
        with pytest.raises(UnknownEasingError, match="bounce"):
            get_easing("bounce")

    def test_unknown_easing_is_value_error(self):
        with pytest.raises(ValueError):
            get_easing("easeOutCubic")


class TestTweenValue:
    def test_endpoints(self):
        """Tweening hits both ends exactly."""
        assert tween_value(500, 50, 0.0, "outCubic") == 500
        assert tween_value(500, 50, 1.0, "outCubic") == 50

    def test_linear_midpoint(self):
        assert tween_value(0, 10, 0.5) == pytest.approx(5.0)

    def test_unknown_easing_raises(self):
        with pytest.raises(UnknownEasingError):
            tween_value(0, 1, 0.5, "wobble")
