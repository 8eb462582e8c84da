"""Tests for DragController."""
import pytest

from geoproof import Engine
from geoproof_drag import DragController, DragHandle, EllipseConstraint, FreeConstraint
from geoproof_draw import Hover, Reveal, Shape, move
from geoproof_draw import factories as shapes
from geoproof_geometry import Point
from geoproof_schedule import Timer, TimerHandlers, make_timer_system
from geoproof_steps import ElementRegistry
from geoproof_tween import make_tween_system

GREEN = (76, 175, 80)
CENTER = Point(400, 300)


class Rig:
    def __init__(self, gate=None):
        self.engine = Engine(tps=60)
        self.scene = self.engine.scene
        self.handlers = TimerHandlers()
        self.engine.add_system(make_tween_system())
        self.engine.add_system(make_timer_system(self.handlers.fire))
        self.registry = ElementRegistry(self.scene)
        self.drag = DragController(
            self.scene, self.registry, self.handlers, self.engine.clock, gate=gate,
        )
        self.point = self.registry.register("pointP", shapes.point(self.scene, Point(600, 300), GREEN))
        self.moves = []

    def on_move(self, p):
        self.moves.append(p)
        move(self.scene, self.point, p)

    def handle(self, constraint=None):
        return DragHandle("pointP", constraint or EllipseConstraint(CENTER, 200, 100), self.on_move)


@pytest.fixture
def rig():
    return Rig()


class TestEnable:
    def test_enable_and_disable(self, rig):
        assert rig.drag.enable([rig.handle()]) is True
        assert rig.drag.enabled
        rig.drag.disable()
        assert not rig.drag.enabled

    def test_enable_twice_is_refused(self, rig):
        rig.drag.enable([rig.handle()])
        assert rig.drag.enable([rig.handle()]) is False

    def test_gate_blocks_enable(self):
        rig = Rig(gate=lambda: False)
        assert rig.drag.enable([rig.handle()]) is False
        assert not rig.drag.enabled

    def test_hint_overlay_lifecycle(self, rig):
        before = rig.scene.drawables()
        rig.drag.enable([rig.handle()], hint="Drag point P along ellipse C")
        hint = next(iter(rig.scene.drawables() - before))
        assert rig.scene.get(hint, Shape).text.startswith("Drag point P")
        rig.drag.disable()
        assert not rig.scene.alive(hint)

    def test_enable_pulses_handles(self, rig):
        rig.drag.enable([rig.handle()])
        rig.engine.run(30)
        assert rig.scene.get(rig.point, Reveal).scale == pytest.approx(1.3)
        rig.engine.run(30)
        assert rig.scene.get(rig.point, Reveal).scale == pytest.approx(1.0)

    def test_disable_is_idempotent(self, rig):
        rig.drag.disable()
        rig.drag.enable([rig.handle()])
        rig.drag.disable()
        rig.drag.disable()
        assert not rig.drag.enabled

    def test_toggle(self, rig):
        assert rig.drag.toggle([rig.handle()]) is True
        assert rig.drag.toggle([rig.handle()]) is False
        assert not rig.drag.enabled


class TestDragging:
    def test_pointer_down_needs_a_hit(self, rig):
        rig.drag.enable([rig.handle()])
        assert rig.drag.pointer_down(Point(100, 100)) is False
        assert rig.drag.pointer_down(Point(605, 298)) is True
        assert rig.drag.grabbed.key == "pointP"

    def test_disabled_controller_ignores_pointer(self, rig):
        assert rig.drag.pointer_down(Point(600, 300)) is False
        rig.drag.pointer_move(Point(500, 100))
        rig.engine.run(5)
        assert rig.moves == []

    def test_move_is_debounced(self, rig):
        """Only the last position of a burst is applied, one tick later."""
        rig.drag.enable([rig.handle()])
        rig.drag.pointer_down(Point(600, 300))
        rig.drag.pointer_move(Point(590, 250))
        rig.drag.pointer_move(Point(500, 150))
        rig.drag.pointer_move(Point(400, 100))
        assert rig.moves == []
        assert len(list(rig.scene.query(Timer))) == 1
        rig.engine.step()
        assert rig.moves == [pytest.approx(Point(400, 200))]

    def test_applied_point_is_constrained(self, rig):
        rig.drag.enable([rig.handle()])
        rig.drag.pointer_down(Point(600, 300))
        rig.drag.pointer_move(Point(731, 17))
        rig.engine.step()
        p = rig.moves[-1]
        assert ((p.x - 400) / 200) ** 2 + ((p.y - 300) / 100) ** 2 == pytest.approx(1.0)
        assert rig.scene.get(rig.point, Shape).anchor == p

    def test_pointer_up_flushes_pending(self, rig):
        rig.drag.enable([rig.handle()])
        rig.drag.pointer_down(Point(600, 300))
        rig.drag.pointer_move(Point(200, 300))
        rig.drag.pointer_up()
        assert rig.moves == [pytest.approx(Point(200, 300))]
        assert rig.drag.grabbed is None
        rig.engine.run(5)
        assert len(rig.moves) == 1

    def test_disable_cancels_pending_move(self, rig):
        rig.drag.enable([rig.handle()])
        rig.drag.pointer_down(Point(600, 300))
        rig.drag.pointer_move(Point(200, 300))
        rig.drag.disable()
        rig.engine.run(5)
        assert rig.moves == []

    def test_destroyed_handle_drops_grab(self, rig):
        rig.drag.enable([rig.handle()])
        rig.drag.pointer_down(Point(600, 300))
        rig.drag.pointer_move(Point(200, 300))
        rig.registry.discard("pointP")
        rig.engine.run(5)
        assert rig.moves == []
        assert rig.drag.grabbed is None

    def test_free_handle(self, rig):
        rig.drag.enable([rig.handle(FreeConstraint())])
        rig.drag.pointer_down(Point(600, 300))
        rig.drag.pointer_move(Point(123, 456))
        rig.engine.step()
        assert rig.moves == [Point(123, 456)]


class TestHover:
    def test_hover_marks_handle(self, rig):
        rig.drag.enable([rig.handle()])
        rig.drag.pointer_move(Point(602, 303))
        assert rig.scene.has(rig.point, Hover)
        assert rig.drag.hovered == rig.point
        rig.drag.pointer_move(Point(100, 100))
        assert not rig.scene.has(rig.point, Hover)
        assert rig.moves == []

    def test_disable_clears_hover(self, rig):
        rig.drag.enable([rig.handle()])
        rig.drag.pointer_move(Point(600, 300))
        rig.drag.disable()
        assert not rig.scene.has(rig.point, Hover)
        assert rig.drag.hovered is None

    def test_nearest_handle_wins(self, rig):
        other = rig.registry.register("pointQ", shapes.point(rig.scene, Point(610, 300), GREEN))
        rig.drag.enable([
            rig.handle(),
            DragHandle("pointQ", FreeConstraint(), lambda p: None),
        ])
        rig.drag.pointer_move(Point(608, 300))
        assert rig.drag.hovered == other
