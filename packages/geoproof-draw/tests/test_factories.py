"""Tests for drawable spawners."""
import pytest

from geoproof import Scene
from geoproof_draw import Reveal, Shape, Style, move, set_text
from geoproof_draw import factories as shapes
from geoproof_geometry import Point

RED = (200, 30, 30)


class TestSpawners:
    def test_point_carries_shape_style_and_reveal(self):
        scene = Scene()
        did = shapes.point(scene, Point(10, 20), RED, radius=5)
        shape = scene.get(did, Shape)
        assert shape.kind == "point"
        assert shape.anchor == Point(10, 20)
        assert shape.radius == 5
        assert scene.get(did, Style).fill == RED
        assert scene.get(did, Reveal).visible

    def test_hidden_spawn(self):
        scene = Scene()
        did = shapes.segment(scene, Point(0, 0), Point(5, 5), RED, hidden=True)
        assert not scene.get(did, Reveal).visible

    def test_ellipse_radii(self):
        scene = Scene()
        did = shapes.ellipse(scene, Point(0, 0), 40, 20, RED)
        shape = scene.get(did, Shape)
        assert (shape.radius, shape.radius_y) == (40, 20)

    def test_polygon_fill(self):
        scene = Scene()
        did = shapes.polygon(scene, [Point(0, 0), Point(1, 0), Point(0, 1)], RED, fill=RED)
        style = scene.get(did, Style)
        assert style.fill == RED
        assert 0 < style.fill_opacity < 1
        assert len(scene.get(did, Shape).points) == 3

    def test_right_angle_mark(self):
        corners = shapes.right_angle_points(Point(0, 0), Point(50, 0), Point(0, 30), 10)
        assert corners == [Point(10, 0), Point(10, 10), Point(0, 10)]


class TestMutation:
    def test_move_replaces_points(self):
        scene = Scene()
        did = shapes.segment(scene, Point(0, 0), Point(5, 5), RED)
        assert move(scene, did, Point(1, 1), Point(2, 2))
        assert scene.get(did, Shape).points == [Point(1, 1), Point(2, 2)]

    def test_move_dead_drawable(self):
        scene = Scene()
        did = shapes.point(scene, Point(0, 0), RED)
        scene.despawn(did)
        assert move(scene, did, Point(1, 1)) is False

    def test_set_text(self):
        scene = Scene()
        did = shapes.text(scene, Point(0, 0), "OQ/OP = 2.00", RED)
        assert set_text(scene, did, "OQ/OP = 1.99")
        assert scene.get(did, Shape).text == "OQ/OP = 1.99"

    def test_unknown_kind_is_still_storable(self):
        scene = Scene()
        did = shapes.spawn_shape(scene, Shape("arc", [Point(0, 0)], radius=3), Style(RED))
        assert scene.get(did, Shape).radius == pytest.approx(3)
