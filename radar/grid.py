"""Concentric grid rings and per-category spokes."""
from typing import NamedTuple

import numpy as np

from polar.types import Circle, Line
from polar.geometry import to_point, slot_angle
from radar.config import ChartGeometry, ConfigurationError
from radar.constants import STYLE_GRID


class Grid(NamedTuple):
    """Grid radii plus the primitives that draw them."""
    ring_radii: list[float]
    rings: list[Circle]
    spokes: list[Line]


def check_ring_count(ring_count: int):
    """Raise ConfigurationError unless ring_count is a positive integer."""
    if isinstance(ring_count, bool) or not isinstance(ring_count, (int, np.integer)):
        raise ConfigurationError(f"Ring count must be an integer: ring_count={ring_count!r}")
    if ring_count <= 0:
        raise ConfigurationError(f"Ring count must be positive: ring_count={ring_count}")


def ring_radii(inner_r: float, outer_r: float, ring_count: int) -> list[float]:
    """Evenly spaced ring radii in (inner_r, outer_r], outermost last."""
    check_ring_count(ring_count)
    t = np.arange(1, ring_count + 1) / ring_count
    return [float(r) for r in inner_r * (1 - t) + outer_r * t]


def spokes(geo: ChartGeometry, category_count: int) -> list[Line]:
    """One radial line per category from the inner to the outer radius."""
    if category_count <= 0:
        raise ConfigurationError(f"Need at least one category: category_count={category_count}")
    out = []
    for i in range(category_count):
        a = slot_angle(i, category_count)
        out.append(Line(to_point(geo.cx, geo.cy, a, geo.inner_r),
                        to_point(geo.cx, geo.cy, a, geo.outer_r), STYLE_GRID))
    return out


def build_grid(geo: ChartGeometry, ring_count: int, category_count: int) -> Grid:
    """Rings and spokes for the given counts."""
    radii = ring_radii(geo.inner_r, geo.outer_r, ring_count)
    rings = [Circle((geo.cx, geo.cy), r, STYLE_GRID) for r in radii]
    return Grid(ring_radii=radii, rings=rings, spokes=spokes(geo, category_count))
