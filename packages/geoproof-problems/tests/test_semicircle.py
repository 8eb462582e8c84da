"""Tests for the semicircle perpendicular problem."""
import math

import pytest

from geoproof_draw import Shape
from geoproof_geometry import Point, distance
from geoproof_problems import SemicirclePerpendicular


def _cd_gf(config):
    return distance(config.c, config.d), distance(config.g, config.f)


class TestConfig:
    def test_layout(self):
        c = SemicirclePerpendicular(800, 600).config
        assert c.origin == Point(400, 300)
        assert c.radius == pytest.approx(210)
        assert c.a == Point(190, 300)
        assert c.b == Point(610, 300)

    def test_initial_points_on_lower_arc(self):
        c = SemicirclePerpendicular(800, 600).config
        assert c.angle_c == pytest.approx(math.pi / 4)
        assert c.angle_e == pytest.approx(3 * math.pi / 4)
        for p in (c.c, c.e):
            assert distance(p, c.origin) == pytest.approx(c.radius)
            assert p.y > c.origin.y

    def test_feet_lie_on_diameter(self):
        c = SemicirclePerpendicular(800, 600).config
        assert c.d.y == pytest.approx(c.origin.y)
        assert c.f.y == pytest.approx(c.origin.y)
        assert c.d.x == pytest.approx(c.c.x)

    @pytest.mark.parametrize("angle_c,angle_e", [
        (math.pi / 4, 3 * math.pi / 4),
        (0.3, 2.0),
        (1.2, 1.4),
        (2.5, 0.7),
        (math.pi / 2, math.pi / 6),
    ])
    def test_cd_equals_gf(self, angle_c, angle_e):
        c = SemicirclePerpendicular(800, 600).config
        c.angle_c, c.angle_e = angle_c, angle_e
        cd, gf = _cd_gf(c)
        assert cd == pytest.approx(gf)


class TestSteps:
    def test_readouts_follow_steps(self, open_session):
        session = open_session("semicircle-perpendicular")
        session.select_step(2)
        assert session.readouts() == {}
        session.select_step(3)
        assert set(session.readouts()) == {"CD"}
        session.select_step(4)
        out = session.readouts()
        assert out["CD"] == out["GF"]


class TestDrag:
    def test_drag_c_to_bottom(self, open_session, drag_to):
        session = open_session("semicircle-perpendicular")
        session.select_step(5)
        assert session.toggle_drag()
        c = session.problem.config
        drag_to(session, "pointC", Point(c.origin.x, c.origin.y + 2 * c.radius))
        assert c.angle_c == pytest.approx(math.pi / 2)
        cd, gf = _cd_gf(c)
        assert cd == pytest.approx(c.radius)
        assert gf == pytest.approx(c.radius)

    def test_drag_above_diameter_snaps_to_an_end(self, open_session, drag_to):
        session = open_session("semicircle-perpendicular")
        session.select_step(4)
        session.toggle_drag()
        c = session.problem.config
        drag_to(session, "pointE", Point(c.origin.x - 300, c.origin.y - 10))
        assert c.angle_e == pytest.approx(math.pi)

    def test_invariant_holds_across_drags(self, open_session, drag_to):
        session = open_session("semicircle-perpendicular")
        session.select_step(5)
        session.toggle_drag()
        for target in (Point(550, 420), Point(300, 480), Point(420, 520)):
            drag_to(session, "pointC", target)
            drag_to(session, "pointE", Point(800 - target.x, target.y))
            out = session.readouts()
            assert out["CD"] == out["GF"]

    def test_length_text_updates(self, open_session, drag_to):
        session = open_session("semicircle-perpendicular")
        session.select_step(5)
        session.toggle_drag()
        c = session.problem.config
        drag_to(session, "pointC", Point(c.origin.x, c.origin.y + 500))
        text = session.scene.get(session.registry.first("lengthText"), Shape).text
        assert text == "CD = 210 = GF = 210"

    def test_gated_before_step_two(self, open_session):
        session = open_session("semicircle-perpendicular")
        session.select_step(1)
        assert not session.toggle_drag()
