"""Ellipse ratio: for P on C and Q = ray OP meets E, |OQ| / |OP| is always 2."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from functools import partial
from typing import TYPE_CHECKING

from geoproof_drag import DragHandle, EllipseConstraint
from geoproof_draw import factories as shapes
from geoproof_geometry import Point, distance, extend_line, point_on_ellipse
from geoproof_problems.base import LABEL_COLOR, Canvas, Problem
from geoproof_steps import StepDefinition

if TYPE_CHECKING:
    from geoproof_draw import Color

PALETTE: dict[str, Color] = {
    "axes": (51, 51, 51),
    "ellipseC": (63, 81, 181),
    "ellipseE": (233, 30, 99),
    "pointO": (33, 33, 33),
    "pointP": (76, 175, 80),
    "pointQ": (255, 152, 0),
    "ray": (103, 58, 183),
    "highlight": (244, 67, 54),
    "grid": (224, 224, 224),
    "gridMinor": (240, 240, 244),
    "gridLabels": (150, 150, 150),
}

STEP1_KEYS = frozenset({
    "grid", "gridLabels", "xAxis", "yAxis", "xLabel", "yLabel", "pointO", "textO",
    "ellipseC", "ellipseE", "labelC", "labelE", "ellipsesExplanation",
})
STEP2_KEYS = frozenset({"pointP", "textP", "pointPExplanation"})
STEP3_KEYS = frozenset({"rayOP", "pointQ", "textQ", "rayExplanation", "pointQExplanation"})
STEP4_KEYS = frozenset({"algebraicExplanation", "ratioText"})
STEP5_KEYS = frozenset({"finalExplanation"})


@dataclass
class EllipseRatioConfig:
    """``C: x^2/4 + y^2 = 1`` and ``E: x^2/16 + y^2/4 = 1`` in units of ``scale`` pixels."""

    width: float = 0.0
    height: float = 0.0
    origin: Point = Point(0.0, 0.0)
    scale: float = 0.0
    c_axes: tuple[float, float] = (2.0, 1.0)
    e_axes: tuple[float, float] = (4.0, 2.0)
    angle: float = math.pi / 4
    ray_reach: float = 2.5
    palette: dict[str, Color] = field(default_factory=lambda: dict(PALETTE))

    @property
    def c_radii(self) -> tuple[float, float]:
        return self.c_axes[0] * self.scale, self.c_axes[1] * self.scale

    @property
    def e_radii(self) -> tuple[float, float]:
        return self.e_axes[0] * self.scale, self.e_axes[1] * self.scale

    @property
    def p(self) -> Point:
        return point_on_ellipse(self.origin, *self.c_radii, self.angle)

    @property
    def q(self) -> Point:
        # Q = O + 2(P - O), which lies on E because E is C scaled by 2.
        return extend_line(self.origin, self.p, 1)

    @property
    def ray_end(self) -> Point:
        return extend_line(self.origin, self.p, self.ray_reach - 1)

    @property
    def ratio(self) -> float:
        return distance(self.origin, self.q) / distance(self.origin, self.p)

    def grid_lines(self) -> list[tuple[Point, Point, bool]]:
        """Lines every half unit through O; the flag marks whole units."""
        step = self.scale / 2
        if step <= 0:
            return []
        o, lines = self.origin, []
        for i in range(-math.ceil(o.x / step), math.ceil((self.width - o.x) / step) + 1):
            x = o.x + i * step
            if -1e-9 <= x <= self.width + 1e-9:
                lines.append((Point(x, 0), Point(x, self.height), i % 2 == 0))
        for i in range(-math.ceil(o.y / step), math.ceil((self.height - o.y) / step) + 1):
            y = o.y + i * step
            if -1e-9 <= y <= self.height + 1e-9:
                lines.append((Point(0, y), Point(self.width, y), i % 2 == 0))
        return lines

    def grid_labels(self) -> list[tuple[Point, str]]:
        """Whole-unit values along both axes, O left unlabelled."""
        if self.scale <= 0:
            return []
        o, labels = self.origin, []
        for i in range(-math.floor(o.x / self.scale), math.floor((self.width - o.x) / self.scale) + 1):
            if i:
                labels.append((Point(o.x + i * self.scale - 5, o.y + 5), str(i)))
        for i in range(-math.floor(o.y / self.scale), math.floor((self.height - o.y) / self.scale) + 1):
            if i:
                labels.append((Point(o.x + 5, o.y + i * self.scale - 7), str(-i)))
        return labels


class EllipseRatio(Problem):
    id = "ellipse-ratio"
    name = "Ellipse Ratio"
    drag_min_step = 3
    drag_hint = "Drag point P along ellipse C to see the constant ratio"
    point_radius = 6.0
    label_size = 16

    def layout(self, width: float, height: float) -> None:
        config = getattr(self, "config", None) or EllipseRatioConfig()
        config.width, config.height = width, height
        config.origin = Point(width / 2, height / 2)
        config.scale = min(width, height) * 0.8 / 2 / config.e_axes[0]
        self.config = config

    def build_steps(self, canvas: Canvas) -> list[StepDefinition]:
        return [
            StepDefinition(1, STEP1_KEYS, partial(self.draw_ellipses, canvas),
                           "Coordinate system and ellipses",
                           "Step 1: Draw the coordinate system and the two ellipses C and E"),
            StepDefinition(2, STEP2_KEYS, partial(self.draw_point_p, canvas),
                           "Point P on C", "Step 2: Select a point P on ellipse C"),
            StepDefinition(3, STEP3_KEYS, partial(self.draw_ray, canvas),
                           "Ray OP meets E at Q",
                           "Step 3: Draw ray OP and find its intersection Q with ellipse E"),
            StepDefinition(4, STEP4_KEYS, partial(self.draw_ratio, canvas),
                           "Ratio |OQ|/|OP|", "Step 4: Calculate and display the ratio |OQ|/|OP|"),
            StepDefinition(5, STEP5_KEYS, partial(self.draw_conclusion, canvas),
                           "The ratio is constant",
                           "Step 5: Demonstrate that the ratio |OQ|/|OP| = 2 is constant "
                           "for any point P on ellipse C"),
        ]

    def draw_ellipses(self, canvas: Canvas, animate: bool):
        c, scene, hidden = self.config, canvas.scene, animate
        colors = c.palette
        o = c.origin
        grid = canvas.add("grid", [
            shapes.segment(scene, start, end, colors["grid"] if major else colors["gridMinor"], 1, hidden=hidden)
            for start, end, major in c.grid_lines()
        ])
        grid_labels = canvas.add("gridLabels", [
            shapes.text(scene, at, value, colors["gridLabels"], font_size=10, hidden=hidden)
            for at, value in c.grid_labels()
        ])
        x_axis = canvas.add("xAxis", shapes.segment(
            scene, Point(0, o.y), Point(c.width, o.y), colors["axes"], hidden=hidden))
        y_axis = canvas.add("yAxis", shapes.segment(
            scene, Point(o.x, c.height), Point(o.x, 0), colors["axes"], hidden=hidden))
        x_label = canvas.add("xLabel", shapes.text(
            scene, Point(c.width - 20, o.y + 10), "x", LABEL_COLOR, hidden=hidden))
        y_label = canvas.add("yLabel", shapes.text(
            scene, Point(o.x - 20, 10), "y", LABEL_COLOR, hidden=hidden))
        origin = self.labelled_point(canvas, "O", o, colors["pointO"], (-20, 10), hidden)
        ellipse_c = canvas.add("ellipseC", shapes.ellipse(
            scene, o, *c.c_radii, colors["ellipseC"], width=2.5, hidden=hidden))
        ellipse_e = canvas.add("ellipseE", shapes.ellipse(
            scene, o, *c.e_radii, colors["ellipseE"], width=2.5, hidden=hidden))
        label_c = canvas.add("labelC", shapes.text(
            scene, Point(o.x + c.c_radii[0] + 5, o.y), "C: x²/4 + y² = 1", colors["ellipseC"],
            bold=True, hidden=hidden))
        label_e = canvas.add("labelE", shapes.text(
            scene, Point(o.x + c.e_radii[0] + 5, o.y - 20), "E: x²/16 + y²/4 = 1",
            colors["ellipseE"], bold=True, hidden=hidden))
        note = canvas.add("ellipsesExplanation", shapes.text(
            scene, Point(o.x, o.y + c.e_radii[1] + 30),
            "Note: Ellipse E is exactly twice the size of ellipse C in both x and y dimensions",
            LABEL_COLOR, font_size=14, align="center", hidden=hidden))
        return self.beats(canvas, animate, [
            grid + grid_labels, (x_axis, y_axis), (x_label, y_label), origin,
            ellipse_c, label_c, ellipse_e, label_e, note,
        ])

    def draw_point_p(self, canvas: Canvas, animate: bool):
        c = self.config
        p = c.p
        point = self.labelled_point(canvas, "P", p, c.palette["pointP"], hidden=animate)
        note = canvas.add("pointPExplanation", shapes.text(
            canvas.scene, Point(p.x + 25, p.y - 40), "P is any point on ellipse C\nP = (2cos(θ), sin(θ))",
            LABEL_COLOR, font_size=14, hidden=animate))
        return self.beats(canvas, animate, [point[0], point[1], note])

    def draw_ray(self, canvas: Canvas, animate: bool):
        c, scene = self.config, canvas.scene
        o, p, q = c.origin, c.p, c.q
        ray = canvas.add("rayOP", shapes.segment(scene, o, c.ray_end, c.palette["ray"], hidden=animate))
        point = self.labelled_point(canvas, "Q", q, c.palette["pointQ"], hidden=animate)
        ray_note = canvas.add("rayExplanation", shapes.text(
            scene, self._ray_note_at(), "Ray OP", c.palette["ray"], font_size=14, hidden=animate))
        q_note = canvas.add("pointQExplanation", shapes.text(
            scene, Point(q.x + 25, q.y - 40),
            "Q is where ray OP intersects ellipse E\nQ = (4cos(θ), 2sin(θ)) = 2P",
            LABEL_COLOR, font_size=14, hidden=animate))
        return self.beats(canvas, animate, [ray, ray_note, point[0], point[1], q_note])

    def draw_ratio(self, canvas: Canvas, animate: bool):
        c, scene = self.config, canvas.scene
        o = c.origin
        note = canvas.add("algebraicExplanation", shapes.text(
            scene, Point(o.x, o.y - c.e_radii[1] - 80),
            "For any point P on ellipse C, the ray OP intersects ellipse E\nat point Q where Q = 2P",
            LABEL_COLOR, font_size=16, align="center", hidden=animate))
        ratio = canvas.add("ratioText", shapes.text(
            scene, Point(20, 100), self._ratio_text(), c.palette["highlight"], font_size=18, bold=True,
            hidden=animate))
        return self.beats(canvas, animate, [note, ratio])

    def draw_conclusion(self, canvas: Canvas, animate: bool):
        c = self.config
        note = canvas.add("finalExplanation", shapes.text(
            canvas.scene, Point(c.origin.x, c.height - 50),
            "This constant ratio of 2 occurs because ellipse E is exactly twice the size of ellipse C\n"
            "in both dimensions, relative to the origin O.",
            LABEL_COLOR, font_size=16, align="center", hidden=animate))
        return self.beats(canvas, animate, [note])

    def drag_handles(self, canvas: Canvas) -> list[DragHandle]:
        c = self.config
        return [DragHandle("pointP", EllipseConstraint(c.origin, *c.c_radii), partial(self.move_p, canvas))]

    def move_p(self, canvas: Canvas, point: Point) -> None:
        c = self.config
        rx, ry = c.c_radii
        c.angle = math.atan2(-(point.y - c.origin.y) / ry, (point.x - c.origin.x) / rx)
        self.refresh(canvas)

    def refresh(self, canvas: Canvas) -> None:
        c = self.config
        p, q = c.p, c.q
        self.move_labelled_point(canvas, "P", p)
        canvas.place("pointPExplanation", Point(p.x + 25, p.y - 40))
        canvas.place("rayOP", c.origin, c.ray_end)
        canvas.place("rayExplanation", self._ray_note_at())
        self.move_labelled_point(canvas, "Q", q)
        canvas.place("pointQExplanation", Point(q.x + 25, q.y - 40))
        canvas.retext("ratioText", self._ratio_text())

    def readouts(self, step: int) -> dict[str, str]:
        if step < 3:
            return {}
        c = self.config
        return {
            "|OP|": f"{distance(c.origin, c.p):.1f}",
            "|OQ|": f"{distance(c.origin, c.q):.1f}",
            "|OQ|/|OP|": f"{c.ratio:.2f}",
        }

    def _ray_note_at(self) -> Point:
        c = self.config
        return Point((c.origin.x + c.p.x) / 2 + 20, (c.origin.y + c.p.y) / 2 - 30)

    def _ratio_text(self) -> str:
        return f"|OQ| / |OP| = {self.config.ratio:.2f}"
