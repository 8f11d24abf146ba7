"""Outer zone boundaries and zone label anchors.

Two layouts share one entry point, selected by the ``layout`` literal:

- ``equal-arc``: each zone is a filled annular wedge spanning 360/zone_count
  degrees between the outer ring and the outer band edge. The label anchor
  sits at the wedge's angular midpoint, ``label_offset`` beyond the outer ring.
- ``quadrant``: exactly four zones. Straight dividers run from the inner
  radius to the band edge on the quadrant boundaries; label anchors sit on
  the diagonals, halfway across the band.

Zones are partitioned by angle only. Which categories belong to which zone
is left to the caller.
"""
from typing import NamedTuple

from polar.types import Point, Path, Line, Primitive
from polar.geometry import to_point, arc_poly, path_from_points
from radar.config import ChartGeometry, ConfigurationError
from radar.constants import (
    EQUAL_ARC, QUADRANT, QUADRANT_ZONES,
    STYLE_ZONE_FILL, STYLE_ZONE_DIVIDER,
)

START_ANGLE = -90.0  # 12 o'clock
ARC_STEPS_PER_ZONE = 32


class ZoneLayout(NamedTuple):
    """Zone boundary primitives, label anchors, and (start, sweep) spans in degrees."""
    boundary_shapes: list[Primitive]
    label_anchors: list[Point]
    spans: list[tuple[float, float]]


def annular_wedge(cx: float, cy: float, r_in: float, r_out: float,
                  sa: float, ea: float, n: int = ARC_STEPS_PER_ZONE) -> list[Point]:
    """Outline of the ring sector between r_in and r_out from sa to ea (degrees).

    Runs clockwise along the inner arc, then back along the outer arc.
    """
    return arc_poly(cx, cy, r_in, sa, ea, n) + arc_poly(cx, cy, r_out, ea, sa, n)


# ============================================================
# Layout strategies
# ============================================================

def _equal_arc_zones(geo: ChartGeometry, zone_count: int) -> ZoneLayout:
    sweep = 360 / zone_count
    band_r = geo.outer_r + geo.band_w
    label_r = geo.outer_r + geo.label_offset
    shapes: list[Primitive] = []
    anchors: list[Point] = []
    spans = []
    for k in range(zone_count):
        sa = START_ANGLE + k * sweep
        ea = sa + sweep
        wedge = annular_wedge(geo.cx, geo.cy, geo.outer_r, band_r, sa, ea)
        shapes.append(Path(path_from_points(wedge), STYLE_ZONE_FILL))
        anchors.append(to_point(geo.cx, geo.cy, sa + sweep / 2, label_r))
        spans.append((sa, sweep))
    return ZoneLayout(boundary_shapes=shapes, label_anchors=anchors, spans=spans)


def _quadrant_zones(geo: ChartGeometry, zone_count: int) -> ZoneLayout:
    band_r = geo.outer_r + geo.band_w
    label_r = geo.outer_r + geo.band_w / 2
    shapes: list[Primitive] = []
    anchors: list[Point] = []
    spans = []
    for k in range(QUADRANT_ZONES):
        boundary = START_ANGLE + k * 90
        shapes.append(Line(to_point(geo.cx, geo.cy, boundary, geo.inner_r),
                           to_point(geo.cx, geo.cy, boundary, band_r), STYLE_ZONE_DIVIDER))
        anchors.append(to_point(geo.cx, geo.cy, boundary + 45, label_r))
        spans.append((boundary, 90.0))
    return ZoneLayout(boundary_shapes=shapes, label_anchors=anchors, spans=spans)


_LAYOUTS = {
    EQUAL_ARC: _equal_arc_zones,
    QUADRANT: _quadrant_zones,
}


# ============================================================
# Main entry point
# ============================================================

def check_zone_counts(layout: str, zone_count: int, category_count: int | None = None):
    """Raise ConfigurationError if *layout* cannot place *zone_count* zones.

    With *category_count* given, equal-arc zones must also own a whole number
    of categories each.
    """
    if layout not in _LAYOUTS:
        raise ConfigurationError(f"Unknown zone layout: {layout!r}")
    if layout == QUADRANT:
        if zone_count != QUADRANT_ZONES:
            raise ConfigurationError(
                f"Quadrant layout needs exactly {QUADRANT_ZONES} zone labels, got {zone_count}")
        return
    if zone_count <= 0:
        raise ConfigurationError("Equal-arc layout needs at least one zone label")
    if category_count is not None and category_count % zone_count:
        raise ConfigurationError(
            f"Zone count {zone_count} does not divide category count {category_count}")


def build_zones(geo: ChartGeometry, layout: str, zone_labels: list[str],
                category_count: int) -> ZoneLayout:
    """Zone boundary shapes and label anchors for *layout*.

    Boundaries depend on the zone count alone: equal-arc zones still split the
    circle evenly when the zone count does not divide *category_count*.
    """
    check_zone_counts(layout, len(zone_labels))
    return _LAYOUTS[layout](geo, len(zone_labels))
