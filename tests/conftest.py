"""Shared fixtures for tunnelvis tests."""
from __future__ import annotations

import pytest

from tunnelvis.engine import TunnelConfig, TunnelEngine
from tunnelvis.geometry import Rect, compute_boundary_discs


@pytest.fixture
def surface_size():
    return (800, 600)


@pytest.fixture
def focal_rect(surface_size):
    return Rect.centered(surface_size, 100, 60)


@pytest.fixture
def boundary_discs(surface_size, focal_rect):
    return compute_boundary_discs(surface_size, focal_rect)


@pytest.fixture
def engine(surface_size, focal_rect):
    engine = TunnelEngine(TunnelConfig(seed=1234))
    engine.setup(surface_size, focal_rect)
    return engine
