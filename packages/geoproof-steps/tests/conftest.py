"""Shared fixtures: a three-step toy proof on a live engine."""
import pytest

from geoproof import Engine
from geoproof_draw import factories as shapes
from geoproof_draw import reveal_in_order
from geoproof_geometry import Point
from geoproof_schedule import TimerHandlers, make_timer_system
from geoproof_steps import ElementRegistry, StepDefinition, StepEngine
from geoproof_tween import Timeline, make_tween_system

GREY = (90, 90, 90)

STEP_KEYS = {
    1: frozenset({"pointA", "textA"}),
    2: frozenset({"pointB", "lineAB"}),
    3: frozenset({"pointC", "triangleABC"}),
}


class ToyProof:
    """Draws a triangle over three steps and records every draw call."""

    def __init__(self, scene, registry, clock):
        self.scene = scene
        self.registry = registry
        self.clock = clock
        self.calls = []

    def _point(self, key, at, hidden):
        return self.registry.register(key, shapes.point(self.scene, at, GREY, hidden=hidden))

    def draw1(self, animate):
        self.calls.append((1, animate))
        a = self._point("pointA", Point(0, 0), animate)
        t = self.registry.register("textA", shapes.text(self.scene, Point(5, 5), "A", GREY, hidden=animate))
        if animate:
            return reveal_in_order(self.scene, [[a], [t]], self.clock.ticks_for(300))
        return None

    def draw2(self, animate):
        self.calls.append((2, animate))
        b = self._point("pointB", Point(100, 0), animate)
        line = self.registry.register(
            "lineAB", shapes.segment(self.scene, Point(0, 0), Point(100, 0), GREY, hidden=animate),
        )
        if animate:
            return reveal_in_order(self.scene, [[line], [b]], self.clock.ticks_for(300))
        return None

    def draw3(self, animate):
        self.calls.append((3, animate))
        c = self._point("pointC", Point(50, 80), animate)
        sides = [
            shapes.segment(self.scene, Point(100, 0), Point(50, 80), GREY, hidden=animate),
            shapes.segment(self.scene, Point(50, 80), Point(0, 0), GREY, hidden=animate),
        ]
        self.registry.register("triangleABC", sides)
        if animate:
            return reveal_in_order(self.scene, [sides, [c]], self.clock.ticks_for(300))
        return None

    def steps(self):
        return [
            StepDefinition(1, STEP_KEYS[1], self.draw1, title="Point A"),
            StepDefinition(2, STEP_KEYS[2], self.draw2, title="Segment AB"),
            StepDefinition(3, STEP_KEYS[3], self.draw3, title="Triangle ABC"),
        ]


class Rig:
    def __init__(self, explain=None):
        self.engine = Engine(tps=60)
        self.scene = self.engine.scene
        self.timeline = Timeline()
        self.handlers = TimerHandlers()
        self.engine.add_system(make_tween_system())
        self.engine.add_system(self.timeline)
        self.engine.add_system(make_timer_system(self.handlers.fire))
        self.registry = ElementRegistry(self.scene)
        self.proof = ToyProof(self.scene, self.registry, self.engine.clock)
        self.steps = StepEngine(
            self.scene, self.registry, self.proof.steps(), self.timeline, explain=explain,
        )


@pytest.fixture
def make_rig():
    return Rig


@pytest.fixture
def rig():
    return Rig()
