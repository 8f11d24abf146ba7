"""Data polygon overlay and per-category markers."""
import math
import warnings
from typing import NamedTuple

import numpy as np

from polar.types import Point, Circle, Path
from polar.geometry import to_point, slot_angle, path_from_points
from radar.config import CategoryDatum, ChartGeometry, ConfigurationError, DataRangeWarning
from radar.constants import STYLE_DATA_FILL, STYLE_DATA_MARKER


class DataPolygon(NamedTuple):
    """Resolved overlay: one vertex per category, markers for non-zero values."""
    points: list[Point]
    radii: list[float]
    path: Path
    markers: list[Circle]
    clamped: list[int]   # indices of categories whose value was clamped


def validate_data(data: list[CategoryDatum]):
    """Raise ConfigurationError for empty data, non-finite numbers, or max_value <= 0."""
    if not data:
        raise ConfigurationError("Need at least one category")
    for i, d in enumerate(data):
        if not (math.isfinite(d.value) and math.isfinite(d.max_value)):
            raise ConfigurationError(
                f"Category {i} ({d.label!r}) has value={d.value}, max_value={d.max_value};"
                f" both must be finite")
        if not d.max_value > 0:
            raise ConfigurationError(
                f"Category {i} ({d.label!r}) has max_value={d.max_value}; must be > 0")


def normalize(data: list[CategoryDatum]) -> tuple[list[float], list[int]]:
    """Values as fractions of their max, clamped to [0, 1].

    Each clamp issues a DataRangeWarning. Returns (fractions, clamped indices).
    """
    validate_data(data)
    values = np.array([d.value for d in data], dtype=float)
    maxes = np.array([d.max_value for d in data], dtype=float)
    kept = np.clip(values, 0.0, maxes)
    clamped = [int(i) for i in np.flatnonzero(kept != values)]
    for i in clamped:
        d = data[i]
        warnings.warn(
            f"Category {i} ({d.label!r}) value {d.value} outside [0, {d.max_value}];"
            f" clamped to {kept[i]:g}",
            DataRangeWarning, stacklevel=3)
    return [float(f) for f in kept / maxes], clamped


def build_data_polygon(geo: ChartGeometry, data: list[CategoryDatum]) -> DataPolygon:
    """Closed polygon through each category's value radius, plus markers.

    A zero value still contributes a vertex at the inner radius but gets no marker.
    """
    fractions, clamped = normalize(data)
    n = len(data)
    # exact at both ends: f=0 -> inner_r, f=1 -> outer_r
    radii = [geo.inner_r * (1 - f) + geo.outer_r * f for f in fractions]
    points = [to_point(geo.cx, geo.cy, slot_angle(i, n), r) for i, r in enumerate(radii)]
    markers = [Circle(p, geo.marker_r, STYLE_DATA_MARKER)
               for p, f in zip(points, fractions) if f > 0]
    return DataPolygon(
        points=points, radii=radii,
        path=Path(path_from_points(points), STYLE_DATA_FILL),
        markers=markers, clamped=clamped,
    )
