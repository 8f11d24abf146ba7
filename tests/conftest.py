"""Shared fixtures for radar layout tests."""
import math
import pytest
from radar.config import ChartConfig, CategoryDatum, resolve_geometry
from radar.dataset import CATEGORIES, ZONE_LABELS, CHART_SIZE
from radar.scene import render


@pytest.fixture(scope="session")
def cfg():
    """Default equal-arc config at the sample size (inner 105, outer 280)."""
    return ChartConfig(size=CHART_SIZE)


@pytest.fixture(scope="session")
def geo(cfg):
    return resolve_geometry(cfg)


@pytest.fixture(scope="session")
def data():
    """16 categories: 11 at zero, then 3, 4, 4, 3, 2 out of 5."""
    return list(CATEGORIES)


@pytest.fixture(scope="session")
def zone_labels():
    return list(ZONE_LABELS)


@pytest.fixture(scope="session")
def scene(cfg, data, zone_labels):
    return render(cfg, data, zone_labels)


def make_data(values, max_value=5):
    """CategoryDatum list labelled C0, C1, ... for the given values."""
    return [CategoryDatum(f"C{i}", v, max_value) for i, v in enumerate(values)]


def polar_of(p, geo):
    """(angle in degrees, radius) of point p around the chart center."""
    dx = p[0] - geo.cx; dy = p[1] - geo.cy
    return math.degrees(math.atan2(dy, dx)), math.hypot(dx, dy)


def same_angle(a, b, tol=1e-9):
    d = (a - b) % 360
    return min(d, 360 - d) < tol
