"""Tests for drag constraints."""
import math

import pytest

from geoproof_drag import ArcConstraint, EllipseConstraint, FreeConstraint
from geoproof_geometry import Point, distance


class TestEllipseConstraint:
    @pytest.mark.parametrize("raw", [
        Point(0, 0), Point(1000, -50), Point(412.5, 301), Point(-300, 900),
    ])
    def test_result_satisfies_equation(self, raw):
        constraint = EllipseConstraint(Point(400, 300), a=200, b=100)
        p = constraint.apply(raw)
        value = ((p.x - 400) / 200) ** 2 + ((p.y - 300) / 100) ** 2
        assert value == pytest.approx(1.0)


class TestArcConstraint:
    def test_lower_half_by_default(self):
        """Canvas angles 0..pi are the lower half of the screen."""
        constraint = ArcConstraint(Point(0, 0), 50)
        p = constraint.apply(Point(3, 40))
        assert distance(p, Point(0, 0)) == pytest.approx(50)
        assert p.y > 0

    def test_upper_half_snaps_to_ends(self):
        constraint = ArcConstraint(Point(0, 0), 50, 0.0, math.pi)
        assert constraint.apply(Point(40, -5)) == pytest.approx(Point(50, 0))
        assert constraint.apply(Point(-40, -5)) == pytest.approx(Point(-50, 0), abs=1e-9)


class TestFreeConstraint:
    def test_unbounded(self):
        assert FreeConstraint().apply(Point(-5, 9000)) == Point(-5, 9000)

    def test_bounded(self):
        constraint = FreeConstraint(bounds=(0, 0, 100, 50))
        assert constraint.apply(Point(-5, 70)) == Point(0, 50)
        assert constraint.apply(Point(30, 20)) == Point(30, 20)
