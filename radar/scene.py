"""Assemble grid, zones, data overlay, and labels into one ordered Scene.

Paint order (later items occlude earlier ones):

1. optional background disc (plain or the quadrant decorative ring)
2. ring circles
3. spokes
4. zone boundary shapes
5. data polygon
6. data markers (value > 0 only)
7. inner category labels
8. zone labels
9. center disc, masking spoke and polygon convergence at the origin
"""
from typing import NamedTuple

from polar.types import Circle, Primitive
from radar.config import (
    CategoryDatum, ChartConfig, ChartGeometry, ConfigurationError, resolve_geometry,
)
from radar.constants import (
    QUADRANT, STYLE_BACKGROUND, STYLE_ZONE_RING, STYLE_CENTER,
)
from radar.grid import build_grid, check_ring_count
from radar.zones import build_zones, check_zone_counts
from radar.labels import place_category_labels, place_zone_labels
from radar.polygon import DataPolygon, build_data_polygon, validate_data


class Scene(NamedTuple):
    """Ordered primitives (paint order), clamped category indices, and the data overlay."""
    primitives: list[Primitive]
    clamped: list[int]
    overlay: DataPolygon


def validate_inputs(cfg: ChartConfig, data: list[CategoryDatum],
                    zone_labels: list[str]) -> ChartGeometry:
    """Check every input up front. Returns the resolved geometry."""
    geo = resolve_geometry(cfg)
    check_ring_count(cfg.ring_count)
    validate_data(data)
    check_zone_counts(cfg.layout, len(zone_labels), len(data))
    if cfg.decorative_ring and cfg.layout != QUADRANT:
        raise ConfigurationError("decorative_ring is only available with the quadrant layout")
    return geo


def _background(cfg: ChartConfig, geo: ChartGeometry) -> list[Circle]:
    if cfg.decorative_ring:
        return [Circle((geo.cx, geo.cy), geo.outer_r + geo.band_w, STYLE_ZONE_RING)]
    if cfg.background:
        return [Circle((geo.cx, geo.cy), geo.outer_r, STYLE_BACKGROUND)]
    return []


def render(cfg: ChartConfig, data: list[CategoryDatum], zone_labels: list[str]) -> Scene:
    """Build the full Scene for *data* under *cfg*.

    Raises ConfigurationError before any geometry is computed if the inputs
    are inconsistent.
    """
    geo = validate_inputs(cfg, data, zone_labels)
    grid = build_grid(geo, cfg.ring_count, len(data))
    zones = build_zones(geo, cfg.layout, zone_labels, len(data))
    overlay = build_data_polygon(geo, data)

    prims: list[Primitive] = []
    prims.extend(_background(cfg, geo))
    prims.extend(grid.rings)
    prims.extend(grid.spokes)
    prims.extend(zones.boundary_shapes)
    prims.append(overlay.path)
    prims.extend(overlay.markers)
    prims.extend(place_category_labels(geo, [d.label for d in data]))
    prims.extend(place_zone_labels(zones.label_anchors, zone_labels, geo.line_height))
    prims.append(Circle((geo.cx, geo.cy), geo.inner_r, STYLE_CENTER))
    return Scene(primitives=prims, clamped=overlay.clamped, overlay=overlay)
