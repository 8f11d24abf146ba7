"""Tests for radar/zones.py — equal-arc and quadrant zone layouts."""
import pytest
from polar.types import Path, Line
from polar.geometry import path_points
from radar.config import ConfigurationError
from radar.constants import EQUAL_ARC, QUADRANT
from radar.zones import build_zones, check_zone_counts, annular_wedge
from conftest import polar_of, same_angle


LABELS4 = ["A", "B", "C", "D"]


class TestEqualArc:
    def test_one_wedge_per_zone(self, geo):
        zl = build_zones(geo, EQUAL_ARC, LABELS4, 16)
        assert len(zl.boundary_shapes) == 4
        assert all(isinstance(s, Path) and s.style == "zone-fill" for s in zl.boundary_shapes)

    def test_spans_cover_full_circle(self, geo):
        for n in (1, 2, 3, 4, 6):
            zl = build_zones(geo, EQUAL_ARC, ["z"] * n, 12)
            assert sum(sweep for _, sweep in zl.spans) == pytest.approx(360.0)

    def test_first_zone_starts_at_top(self, geo):
        zl = build_zones(geo, EQUAL_ARC, LABELS4, 16)
        assert zl.spans[0] == (-90.0, 90.0)

    def test_wedge_between_outer_and_band(self, geo):
        zl = build_zones(geo, EQUAL_ARC, LABELS4, 16)
        band_r = geo.outer_r + geo.band_w
        for shape in zl.boundary_shapes:
            for p in path_points(shape.commands):
                r = polar_of(p, geo)[1]
                assert r == pytest.approx(geo.outer_r) or r == pytest.approx(band_r)

    def test_wedge_path_closed(self, geo):
        zl = build_zones(geo, EQUAL_ARC, LABELS4, 16)
        pts = path_points(zl.boundary_shapes[0].commands)
        assert pts[0] == pts[-1]

    def test_anchor_at_wedge_midpoint(self, geo):
        zl = build_zones(geo, EQUAL_ARC, LABELS4, 16)
        for anchor, expected in zip(zl.label_anchors, [-45, 45, 135, 225]):
            a, r = polar_of(anchor, geo)
            assert same_angle(a, expected)
            assert r == pytest.approx(geo.outer_r + geo.label_offset)

    def test_uneven_partition_still_splits_by_zone_count(self, geo):
        zl = build_zones(geo, EQUAL_ARC, ["x", "y", "z"], 16)
        assert [sweep for _, sweep in zl.spans] == pytest.approx([120.0] * 3)


class TestQuadrant:
    def test_four_dividers(self, geo):
        zl = build_zones(geo, QUADRANT, LABELS4, 16)
        assert len(zl.boundary_shapes) == 4
        assert all(isinstance(s, Line) and s.style == "zone-divider" for s in zl.boundary_shapes)

    def test_dividers_span_inner_to_band_edge(self, geo):
        zl = build_zones(geo, QUADRANT, LABELS4, 16)
        for ln in zl.boundary_shapes:
            assert polar_of(ln.start, geo)[1] == pytest.approx(geo.inner_r)
            assert polar_of(ln.end, geo)[1] == pytest.approx(geo.outer_r + geo.band_w)

    def test_dividers_on_quadrant_boundaries(self, geo):
        zl = build_zones(geo, QUADRANT, LABELS4, 16)
        for ln, expected in zip(zl.boundary_shapes, [-90, 0, 90, 180]):
            assert same_angle(polar_of(ln.end, geo)[0], expected)

    def test_anchors_on_diagonals(self, geo):
        zl = build_zones(geo, QUADRANT, LABELS4, 16)
        for anchor, expected in zip(zl.label_anchors, [-45, 45, 135, 225]):
            a, r = polar_of(anchor, geo)
            assert same_angle(a, expected)
            assert r == pytest.approx(geo.outer_r + geo.band_w / 2)

    def test_independent_of_category_count(self, geo):
        assert build_zones(geo, QUADRANT, LABELS4, 16) == build_zones(geo, QUADRANT, LABELS4, 5)

    def test_spans_cover_full_circle(self, geo):
        zl = build_zones(geo, QUADRANT, LABELS4, 16)
        assert sum(sweep for _, sweep in zl.spans) == 360.0

    def test_wrong_zone_count_raises(self, geo):
        with pytest.raises(ConfigurationError, match="exactly 4"):
            build_zones(geo, QUADRANT, ["a", "b", "c"], 16)


class TestCheckZoneCounts:
    def test_unknown_layout(self):
        with pytest.raises(ConfigurationError, match="Unknown zone layout"):
            check_zone_counts("spiral", 4, 16)

    def test_equal_arc_zero_zones(self):
        with pytest.raises(ConfigurationError, match="at least one zone"):
            check_zone_counts(EQUAL_ARC, 0, 16)

    def test_equal_arc_uneven_division(self):
        with pytest.raises(ConfigurationError, match="does not divide"):
            check_zone_counts(EQUAL_ARC, 3, 16)

    def test_equal_arc_even_division_ok(self):
        check_zone_counts(EQUAL_ARC, 4, 16)

    def test_quadrant_ignores_category_count(self):
        check_zone_counts(QUADRANT, 4, 7)


def test_annular_wedge_point_count():
    pts = annular_wedge(0, 0, 1, 2, 0, 90, n=10)
    assert len(pts) == 22
