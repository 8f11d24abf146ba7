"""Chart configuration, input records, and resolved chart geometry."""
from typing import Literal, NamedTuple

from radar.constants import (
    RING_COUNT, OUTER_RADIUS_FRACTION, INNER_RADIUS_FRACTION, INNER_LABEL_FRACTION,
    BAND_WIDTH_FRACTION, ZONE_LABEL_OFFSET_FRACTION,
    LINE_HEIGHT_FRACTION, MARKER_RADIUS_FRACTION,
    EQUAL_ARC,
)

# ============================================================
# Error Types
# ============================================================
class ConfigurationError(ValueError):
    """Raised when chart inputs cannot produce valid geometry."""

class DataRangeWarning(UserWarning):
    """Issued when a category value is clamped into [0, max_value]."""

# ============================================================
# Inputs
# ============================================================
class CategoryDatum(NamedTuple):
    """One measured criterion. *label* may contain line breaks."""
    label: str
    value: float
    max_value: float


class ChartConfig(NamedTuple):
    """Caller-facing chart settings. Lengths are fractions of *size*."""
    size: float
    ring_count: int = RING_COUNT
    outer_radius_fraction: float = OUTER_RADIUS_FRACTION
    inner_radius_fraction: float = INNER_RADIUS_FRACTION
    border_width_fraction: float | None = None   # outer zone band; None -> default
    layout: Literal["equal-arc", "quadrant"] = EQUAL_ARC
    inner_label_fraction: float = INNER_LABEL_FRACTION
    zone_label_offset_fraction: float = ZONE_LABEL_OFFSET_FRACTION
    line_height_fraction: float = LINE_HEIGHT_FRACTION
    marker_radius_fraction: float = MARKER_RADIUS_FRACTION
    center_x: float | None = None
    center_y: float | None = None
    background: bool = False
    decorative_ring: bool = False


class ChartGeometry(NamedTuple):
    """Absolute lengths resolved from a ChartConfig."""
    cx: float
    cy: float
    inner_r: float
    outer_r: float
    band_w: float
    label_offset: float
    inner_label_r: float
    line_height: float
    marker_r: float

# ============================================================
# Resolution
# ============================================================
def resolve_geometry(cfg: ChartConfig) -> ChartGeometry:
    """Turn size fractions into absolute lengths.

    Raises ConfigurationError unless 0 < inner_r < outer_r < size/2.
    """
    size = cfg.size
    if size <= 0:
        raise ConfigurationError(f"Chart size must be positive: size={size}")
    inner_r = size * cfg.inner_radius_fraction
    outer_r = size * cfg.outer_radius_fraction
    if inner_r <= 0:
        raise ConfigurationError(f"Inner radius must be positive: inner_r={inner_r}")
    if inner_r >= outer_r:
        raise ConfigurationError(
            f"Inner radius must be smaller than outer radius: inner_r={inner_r}, outer_r={outer_r}")
    if outer_r >= size / 2:
        raise ConfigurationError(
            f"Outer radius must stay inside the chart: outer_r={outer_r}, size/2={size/2}")
    band = cfg.border_width_fraction
    if band is None:
        band = BAND_WIDTH_FRACTION
    if band < 0:
        raise ConfigurationError(f"Band width fraction must not be negative: {band}")
    cx = size / 2 if cfg.center_x is None else cfg.center_x
    cy = size / 2 if cfg.center_y is None else cfg.center_y
    return ChartGeometry(
        cx=cx, cy=cy, inner_r=inner_r, outer_r=outer_r,
        band_w=size * band,
        label_offset=size * cfg.zone_label_offset_fraction,
        inner_label_r=outer_r * cfg.inner_label_fraction,
        line_height=size * cfg.line_height_fraction,
        marker_r=size * cfg.marker_radius_fraction,
    )
