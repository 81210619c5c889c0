"""Tests for the analytic bounding-box extractor."""

from __future__ import annotations

import math

import pytest

from roadgeom.config.settings import GeometrySettings
from roadgeom.geometry.bbox import (
    ExtremumRoot,
    compute_bbox,
    extremum_arclengths,
    extremum_offset,
    heading_range,
)
from roadgeom.geometry.models import Point2D
from roadgeom.geometry.spiral import Spiral

# ---------------------------------------------------------------------------
# Test-data helpers
# ---------------------------------------------------------------------------

# (s0, x0, y0, hdg0, length, curv_start, curv_end)
SEGMENTS = [
    (0.0, 0.0, 0.0, 0.0, 10.0, 0.0, 0.1),
    (0.0, 0.0, 0.0, 0.0, 10.0, 0.0, 2 * math.pi / 10),
    (100.0, 50.0, -20.0, 1.2, 30.0, 0.05, -0.02),
    (5.0, -3.0, 7.0, -2.5, 60.0, -0.2, 0.1),
    (0.0, 0.0, 0.0, 0.0, 80.0, -0.1, 0.1),
    (0.0, 10.0, 10.0, 0.3, 20.0, 0.0, 0.0),
    (10.0, 1.0, 1.0, -1.0, 100.0, 0.04, 0.04),
    (0.0, 0.0, 0.0, 25.0, 50.0, 0.3, -0.1),
]


def dense_sample(spiral: Spiral, n: int = 2000) -> list[Point2D]:
    return [spiral.get_point(spiral.s0 + spiral.length * i / n, 0.0) for i in range(n + 1)]


# ---------------------------------------------------------------------------
# Containment and tightness
# ---------------------------------------------------------------------------

class TestBoundingBox:
    @pytest.mark.parametrize("desc", SEGMENTS)
    def test_contains_dense_sampling(self, desc):
        spiral = Spiral(*desc)
        bbox = spiral.get_bbox()
        for pt in dense_sample(spiral):
            assert bbox.contains(pt, tol=1e-9), f"{pt} outside {bbox}"

    @pytest.mark.parametrize("desc", SEGMENTS)
    def test_every_edge_is_reached_by_the_curve(self, desc):
        """No edge lies farther out than the densely sampled curve (plus sampling error)."""
        spiral = Spiral(*desc)
        bbox = spiral.get_bbox()
        pts = dense_sample(spiral)
        assert bbox.min.x == pytest.approx(min(p.x for p in pts), abs=1e-3)
        assert bbox.min.y == pytest.approx(min(p.y for p in pts), abs=1e-3)
        assert bbox.max.x == pytest.approx(max(p.x for p in pts), abs=1e-3)
        assert bbox.max.y == pytest.approx(max(p.y for p in pts), abs=1e-3)

    def test_reference_spiral_shape(self):
        """0 → 0.1 over 10 m never reaches π/2, so max.y is at the end point."""
        spiral = Spiral(0.0, 0.0, 0.0, 0.0, 10.0, 0.0, 0.1)
        bbox = spiral.get_bbox()
        end = spiral.get_point(10.0, 0.0)

        assert bbox.min.x <= 0.0 <= bbox.max.x
        assert bbox.min.x == pytest.approx(0.0, abs=1e-12)
        assert bbox.min.y == pytest.approx(0.0, abs=1e-12)
        assert bbox.max.x == pytest.approx(end.x)
        assert bbox.max.y == pytest.approx(end.y)

    def test_touches_interior_x_extremum(self):
        """Heading sweeps 0 → π; x peaks where the heading crosses π/2."""
        c_dot = 2 * math.pi / 100
        spiral = Spiral(0.0, 0.0, 0.0, 0.0, 10.0, 0.0, 2 * math.pi / 10)
        s_star = math.sqrt(math.pi / c_dot)
        peak = spiral.get_point(s_star, 0.0)
        end = spiral.get_point(10.0, 0.0)

        bbox = spiral.get_bbox()
        assert peak.x > end.x
        assert bbox.max.x == pytest.approx(peak.x, abs=1e-9)

    def test_full_circle(self):
        """A closed arc of radius 10 from the origin, heading +x, spans [-10, 10] × [0, 20]."""
        spiral = Spiral(0.0, 0.0, 0.0, 0.0, 20 * math.pi, 0.1, 0.1)
        bbox = spiral.get_bbox()
        assert bbox.min.x == pytest.approx(-10.0, abs=1e-9)
        assert bbox.max.x == pytest.approx(10.0, abs=1e-9)
        assert bbox.min.y == pytest.approx(0.0, abs=1e-9)
        assert bbox.max.y == pytest.approx(20.0, abs=1e-9)

    def test_straight_line_is_spanned_by_endpoints(self):
        spiral = Spiral(0.0, 1.0, 2.0, math.pi / 6, 10.0, 0.0, 0.0)
        bbox = spiral.get_bbox()
        assert bbox.min.x == pytest.approx(1.0)
        assert bbox.min.y == pytest.approx(2.0)
        assert bbox.max.x == pytest.approx(1.0 + 10.0 * math.cos(math.pi / 6))
        assert bbox.max.y == pytest.approx(2.0 + 5.0)

    def test_heading_offset_by_whole_turns_gives_same_box(self):
        """Extrema are found however far hdg0 is from zero."""
        base = Spiral(0.0, 0.0, 0.0, 0.4, 50.0, 0.3, -0.1).get_bbox()
        wound = Spiral(0.0, 0.0, 0.0, 0.4 + 6 * math.pi, 50.0, 0.3, -0.1).get_bbox()
        for a, b in ((base.min, wound.min), (base.max, wound.max)):
            assert b.x == pytest.approx(a.x, abs=1e-9)
            assert b.y == pytest.approx(a.y, abs=1e-9)

    def test_padding_from_settings(self):
        desc = (0.0, 0.0, 0.0, 0.0, 10.0, 0.0, 2 * math.pi / 10)
        default = Spiral(*desc).get_bbox()
        padded = Spiral(*desc, settings=GeometrySettings(bbox_padding=3)).get_bbox()
        assert padded == default

    def test_compute_bbox_matches_method(self):
        spiral = Spiral(100.0, 50.0, -20.0, 1.2, 30.0, 0.05, -0.02)
        assert compute_bbox(spiral, padding=2) == spiral.get_bbox()


# ---------------------------------------------------------------------------
# Root formulas
# ---------------------------------------------------------------------------

class TestExtremumRoots:
    def test_target_headings(self):
        assert ExtremumRoot.X_PLUS.target_heading(0) == pytest.approx(math.pi / 2)
        assert ExtremumRoot.X_MINUS.target_heading(-1) == pytest.approx(-math.pi / 2)
        assert ExtremumRoot.Y_PLUS.target_heading(2) == pytest.approx(2 * math.pi)
        assert ExtremumRoot.Y_MINUS.target_heading(0) == 0.0

    def test_root_solves_heading_equation(self):
        hdg0, k0, c_dot = 0.2, 0.05, 0.01
        for root in ExtremumRoot:
            for n in range(-2, 3):
                u = extremum_offset(root, n, hdg0, k0, c_dot)
                if u is None:
                    continue
                heading = hdg0 + k0 * u + 0.5 * c_dot * u * u
                assert heading == pytest.approx(root.target_heading(n), abs=1e-9)

    def test_negative_discriminant_has_no_root(self):
        """Heading 0.5 c_dot u² never goes negative, so y-extrema at -π do not exist."""
        assert extremum_offset(ExtremumRoot.Y_PLUS, -1, 0.0, 0.0, 0.01) is None
        assert extremum_offset(ExtremumRoot.Y_MINUS, -1, 0.0, 0.0, 0.01) is None

    def test_linear_heading_has_single_root(self):
        assert extremum_offset(ExtremumRoot.X_PLUS, 0, 0.0, 0.1, 0.0) == pytest.approx(5 * math.pi)
        assert extremum_offset(ExtremumRoot.X_MINUS, 0, 0.0, 0.1, 0.0) is None

    def test_constant_heading_has_no_root(self):
        for root in ExtremumRoot:
            assert extremum_offset(root, 0, 0.0, 0.0, 0.0) is None

    def test_heading_range_includes_vertex(self):
        """Curvature -0.1 → 0.1 over 20 m turns right then back: minimum at mid-segment."""
        a_min, a_max = heading_range(0.0, -0.1, 0.01, 20.0)
        assert a_min == pytest.approx(-0.5)
        assert a_max == pytest.approx(0.0)

    def test_arclengths_stay_within_segment(self):
        values = extremum_arclengths(5.0, 60.0, -2.5, -0.2, 0.005)
        assert values[:2] == [5.0, 65.0]
        assert all(5.0 <= s <= 65.0 for s in values)
        assert len(values) > 2
