"""Polar coordinate mapping, drawable primitives, and SVG rendering."""

from .types import Point, Circle, Line, Path, Text, TextLine, Primitive, PathCmd
from .geometry import (
    to_point, slot_angle, arc_poly,
    path_from_points, path_points, poly_area,
)
from .svg import THEME, scene_to_svg
