"""Tests for the set intersection problem."""
import math

import pytest

from geoproof_draw import BOUNCE, Reveal, Shape
from geoproof_problems import SetIntersection
from geoproof_problems.set_intersection import (
    base_residue,
    intersection,
    interval_end,
    set_elements,
)


class TestSetElements:
    @pytest.mark.parametrize("omega,base", [(1.0, 6), (2.0, 3), (3.0, 2), (-1.0, 1)])
    def test_base_residue(self, omega, base):
        assert base_residue(omega) == base

    def test_no_residue_falls_back_to_zero(self):
        assert base_residue(0.5) == 0

    def test_members_repeat_every_seven(self):
        assert set_elements(1.0, -5, 5) == [-1.0]
        assert set_elements(3.0, -5, 5) == [-5.0, 2.0]
        assert set_elements(1.0, -20, 20) == [-15.0, -8.0, -1.0, 6.0, 13.0, 20.0]

    def test_multiple_of_seven_is_empty(self):
        assert set_elements(7.0, -100, 100) == []
        assert set_elements(14.0, -100, 100) == []

    def test_limit(self):
        assert len(set_elements(1.0, -1000, 1000, limit=5)) == 5


class TestIntersection:
    def test_interval_end(self):
        assert interval_end(0, 5) == pytest.approx(5 * math.exp(-2.5))

    def test_member_inside(self):
        assert intersection(1.0, -1.5, 1) == [-1.0]

    def test_open_interval_excludes_start(self):
        assert intersection(1.0, -1.0, 1) == []

    def test_default_parameters(self):
        assert intersection(1.0, 0, 5) == []


class TestParameters:
    def test_defaults(self):
        assert SetIntersection(800, 600).parameters() == {"omega": 1.0, "n": 5, "a": 0.0}

    def test_unknown_parameter(self):
        with pytest.raises(ValueError):
            SetIntersection(800, 600).set_parameter("theta", 1.0)

    def test_n_must_be_positive(self):
        with pytest.raises(ValueError):
            SetIntersection(800, 600).set_parameter("n", 0)

    def test_n_is_whole(self):
        problem = SetIntersection(800, 600)
        problem.set_parameter("n", 3.7)
        assert problem.config.n == 3

    def test_no_drag(self, open_session):
        session = open_session("set-intersection")
        session.select_step(5)
        assert not session.toggle_drag()


class TestSteps:
    def test_number_line(self, open_session):
        session = open_session("set-intersection")
        session.select_step(1)
        assert len(session.registry.ids("ticks")) == 11
        labels = [session.scene.get(did, Shape).text for did in session.registry.ids("tickLabels")]
        assert labels == [str(v) for v in range(-5, 6)]
        line = session.scene.get(session.registry.first("numberLine"), Shape).points
        assert [p.x for p in line] == [50, 750]

    def test_changing_omega_redraws_members(self, open_session):
        session = open_session("set-intersection")
        session.select_step(2)
        assert len(session.registry.ids("setElements")) == 1
        session.set_parameter("omega", 3.0)
        assert session.current_step == 2
        assert len(session.registry.ids("setElements")) == 2
        omega = session.scene.get(session.registry.first("omegaDisplay"), Shape).text
        assert omega == "ω = 3.00"

    def test_empty_set_message(self, open_session):
        session = open_session("set-intersection")
        session.set_parameter("omega", 7.0)
        session.select_step(2)
        assert session.registry.ids("setElements") == []
        note = session.scene.get(session.registry.first("distributionText"), Shape).text
        assert note.endswith("not visible in this range.")

    def test_intersection_count(self, open_session):
        session = open_session("set-intersection")
        session.set_parameter("a", -1.5)
        session.set_parameter("n", 1)
        session.select_step(3)
        assert len(session.registry.ids("intersectionElements")) == 1
        assert session.readouts()["|Sω ∩ I|"] == "1"

    def test_intersection_members_bounce_in(self, open_session):
        session = open_session("set-intersection")
        session.set_parameter("a", -1.5)
        session.set_parameter("n", 1)
        session.select_step(3)
        rings = session.registry.ids("intersectionElements")
        assert rings
        for did in rings:
            assert session.scene.get(did, Reveal).effect == BOUNCE

    def test_solution(self, open_session):
        session = open_session("set-intersection")
        session.select_step(5)
        text = session.scene.get(session.registry.first("solutionText"), Shape).text
        assert text == "Solution: 0 < ω < 7/3 or ω > 7"
        assert len(session.registry.ids("solutionRanges")) == 2
