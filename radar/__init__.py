"""Radar chart layout engine: grid, zones, labels, data overlay, scene."""

from .config import (
    ConfigurationError, DataRangeWarning,
    CategoryDatum, ChartConfig, ChartGeometry, resolve_geometry,
)
from .grid import Grid, check_ring_count, ring_radii, spokes, build_grid
from .zones import ZoneLayout, annular_wedge, build_zones, check_zone_counts
from .labels import text_align, stack_lines, place_category_labels, place_zone_labels
from .polygon import DataPolygon, validate_data, normalize, build_data_polygon
from .scene import Scene, validate_inputs, render
