"""Semicircle perpendiculars: with CD and EF dropped to AB and EG to CO, CD = GF."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from functools import partial
from typing import TYPE_CHECKING

from geoproof_drag import ArcConstraint, DragHandle
from geoproof_draw import factories as shapes
from geoproof_geometry import Point, distance, point_on_circle, project_point_onto_line
from geoproof_problems.base import LABEL_COLOR, Canvas, Problem
from geoproof_steps import StepDefinition

if TYPE_CHECKING:
    from geoproof_draw import Color

PALETTE: dict[str, Color] = {
    "circle": (51, 51, 51),
    "diameter": (85, 85, 85),
    "pointA": (233, 30, 99),
    "pointB": (255, 87, 34),
    "pointC": (76, 175, 80),
    "pointD": (3, 169, 244),
    "pointE": (156, 39, 176),
    "pointF": (255, 152, 0),
    "pointG": (121, 85, 72),
    "pointO": (96, 125, 139),
    "lineCD": (103, 58, 183),
    "lineEF": (33, 150, 243),
    "lineCO": (244, 67, 54),
    "lineEG": (0, 150, 136),
    "triangleCOD": (233, 30, 99),
    "triangleEGF": (0, 150, 136),
    "highlight": (255, 82, 82),
}

STEP1_KEYS = frozenset({"diameterLine", "semicircle", "pointA", "textA", "pointB", "textB", "pointO", "textO"})
STEP2_KEYS = frozenset({"pointC", "textC", "pointE", "textE"})
STEP3_KEYS = frozenset({
    "lineCD", "lineEF", "pointD", "textD", "pointF", "textF", "perpSymbolD", "perpSymbolF",
})
STEP4_KEYS = frozenset({"lineCO", "lineEG", "pointG", "textG", "perpSymbolG"})
STEP5_KEYS = frozenset({"triangleCOD", "triangleEGF", "proofText1", "proofText2", "lengthText"})

# Label offsets, per point.
OFFSETS = {
    "A": (-20, 10), "B": (10, 10), "O": (10, -20), "C": (-20, -20), "E": (10, -20),
    "D": (10, 10), "F": (10, 10), "G": (10, -20),
}


@dataclass
class SemicircleConfig:
    """Semicircle on diameter AB; C and E sit on the arc at canvas angles."""

    width: float = 0.0
    height: float = 0.0
    origin: Point = Point(0.0, 0.0)
    radius: float = 0.0
    angle_c: float = math.pi / 4
    angle_e: float = math.pi * 3 / 4
    palette: dict[str, Color] = field(default_factory=lambda: dict(PALETTE))

    @property
    def a(self) -> Point:
        return Point(self.origin.x - self.radius, self.origin.y)

    @property
    def b(self) -> Point:
        return Point(self.origin.x + self.radius, self.origin.y)

    @property
    def c(self) -> Point:
        return point_on_circle(self.origin, self.radius, self.angle_c)

    @property
    def e(self) -> Point:
        return point_on_circle(self.origin, self.radius, self.angle_e)

    @property
    def d(self) -> Point:
        return project_point_onto_line(self.c, self.a, self.b)

    @property
    def f(self) -> Point:
        return project_point_onto_line(self.e, self.a, self.b)

    @property
    def g(self) -> Point:
        return project_point_onto_line(self.e, self.c, self.origin)

    def points(self) -> dict[str, Point]:
        return {
            "A": self.a, "B": self.b, "O": self.origin, "C": self.c, "E": self.e,
            "D": self.d, "F": self.f, "G": self.g,
        }


class SemicirclePerpendicular(Problem):
    id = "semicircle-perpendicular"
    name = "Semicircle Perpendicular Equality"
    drag_min_step = 2
    drag_hint = "Drag points C and E along the semicircle: CD always equals GF"

    def layout(self, width: float, height: float) -> None:
        config = getattr(self, "config", None) or SemicircleConfig()
        config.width, config.height = width, height
        config.origin = Point(width / 2, height / 2)
        config.radius = min(width, height) * 0.35
        self.config = config

    def build_steps(self, canvas: Canvas) -> list[StepDefinition]:
        return [
            StepDefinition(1, STEP1_KEYS, partial(self.draw_semicircle, canvas), "Semicircle on AB",
                           "Step 1: Draw the semicircle centred at O with diameter AB"),
            StepDefinition(2, STEP2_KEYS, partial(self.draw_c_and_e, canvas), "Points C and E",
                           "Step 2: Take points C and E on the semicircle"),
            StepDefinition(3, STEP3_KEYS, partial(self.draw_feet, canvas), "CD ⊥ AB and EF ⊥ AB",
                           "Step 3: Drop perpendiculars CD ⊥ AB and EF ⊥ AB"),
            StepDefinition(4, STEP4_KEYS, partial(self.draw_eg, canvas), "EG ⊥ CO",
                           "Step 4: Join CO and drop the perpendicular EG ⊥ CO"),
            StepDefinition(5, STEP5_KEYS, partial(self.draw_proof, canvas), "CD = GF",
                           "Step 5: Prove CD = GF"),
        ]

    def _point(self, canvas: Canvas, name: str, hidden: bool):
        at = self.config.points()[name]
        return self.labelled_point(canvas, name, at, self.config.palette[f"point{name}"], OFFSETS[name], hidden)

    def draw_semicircle(self, canvas: Canvas, animate: bool):
        c, scene = self.config, canvas.scene
        diameter = canvas.add("diameterLine", shapes.segment(
            scene, c.a, c.b, c.palette["diameter"], width=2.5, hidden=animate))
        arc = canvas.add("semicircle", shapes.arc(
            scene, c.origin, c.radius, 0.0, math.pi, c.palette["circle"], width=2.5, hidden=animate))
        a, b, o = (self._point(canvas, name, animate) for name in "ABO")
        return self.beats(canvas, animate, [diameter, arc, (a[0], b[0], o[0]), (a[1], b[1], o[1])])

    def draw_c_and_e(self, canvas: Canvas, animate: bool):
        c_pt = self._point(canvas, "C", animate)
        e_pt = self._point(canvas, "E", animate)
        return self.beats(canvas, animate, [(c_pt[0], e_pt[0]), (c_pt[1], e_pt[1])])

    def draw_feet(self, canvas: Canvas, animate: bool):
        c, scene = self.config, canvas.scene
        line_cd = canvas.add("lineCD", shapes.segment(scene, c.c, c.d, c.palette["lineCD"], 2.5, hidden=animate))
        line_ef = canvas.add("lineEF", shapes.segment(scene, c.e, c.f, c.palette["lineEF"], 2.5, hidden=animate))
        d_pt = self._point(canvas, "D", animate)
        f_pt = self._point(canvas, "F", animate)
        perp_d = canvas.add("perpSymbolD", shapes.right_angle(
            scene, c.d, c.c, c.b, LABEL_COLOR, hidden=animate))
        perp_f = canvas.add("perpSymbolF", shapes.right_angle(
            scene, c.f, c.e, c.b, LABEL_COLOR, hidden=animate))
        return self.beats(canvas, animate, [
            (line_cd, line_ef), (d_pt[0], f_pt[0]), (d_pt[1], f_pt[1]), (perp_d, perp_f),
        ])

    def draw_eg(self, canvas: Canvas, animate: bool):
        c, scene = self.config, canvas.scene
        line_co = canvas.add("lineCO", shapes.segment(scene, c.c, c.origin, c.palette["lineCO"], 2.5, hidden=animate))
        line_eg = canvas.add("lineEG", shapes.segment(scene, c.e, c.g, c.palette["lineEG"], 2.5, hidden=animate))
        g_pt = self._point(canvas, "G", animate)
        perp_g = canvas.add("perpSymbolG", shapes.right_angle(
            scene, c.g, c.e, c.origin, LABEL_COLOR, hidden=animate))
        return self.beats(canvas, animate, [line_co, line_eg, g_pt[0], g_pt[1], perp_g])

    def draw_proof(self, canvas: Canvas, animate: bool):
        c, scene = self.config, canvas.scene
        cod = canvas.add("triangleCOD", shapes.polygon(
            scene, [c.c, c.origin, c.d], c.palette["triangleCOD"], fill=c.palette["triangleCOD"],
            fill_opacity=0.2, width=1.5, hidden=animate))
        egf = canvas.add("triangleEGF", shapes.polygon(
            scene, [c.e, c.g, c.f], c.palette["triangleEGF"], fill=c.palette["triangleEGF"],
            fill_opacity=0.2, width=1.5, hidden=animate))
        proof1 = canvas.add("proofText1", shapes.text(
            scene, Point(c.width / 2, 50), "△COD ≅ △EGF", LABEL_COLOR, 18, bold=True, align="center",
            hidden=animate))
        proof2 = canvas.add("proofText2", shapes.text(
            scene, Point(c.width / 2, 90), "∴ CD = GF", LABEL_COLOR, 18, bold=True, align="center",
            hidden=animate))
        lengths = canvas.add("lengthText", shapes.text(
            scene, Point(c.width / 2, c.height - 60), self._length_text(), c.palette["highlight"], 18,
            bold=True, align="center", hidden=animate))
        return self.beats(canvas, animate, [(cod, egf), proof1, proof2, lengths])

    def drag_handles(self, canvas: Canvas) -> list[DragHandle]:
        c = self.config
        arc = ArcConstraint(c.origin, c.radius, 0.0, math.pi)
        return [
            DragHandle("pointC", arc, partial(self.move_point, canvas, "angle_c")),
            DragHandle("pointE", arc, partial(self.move_point, canvas, "angle_e")),
        ]

    def move_point(self, canvas: Canvas, attr: str, point: Point) -> None:
        c = self.config
        setattr(c, attr, math.atan2(point.y - c.origin.y, point.x - c.origin.x) % (2 * math.pi))
        self.refresh(canvas)

    def refresh(self, canvas: Canvas) -> None:
        c = self.config
        points = c.points()
        for name, at in points.items():
            self.move_labelled_point(canvas, name, at, OFFSETS[name])
        canvas.place("diameterLine", c.a, c.b)
        canvas.place("lineCD", c.c, c.d)
        canvas.place("lineEF", c.e, c.f)
        canvas.place("lineCO", c.c, c.origin)
        canvas.place("lineEG", c.e, c.g)
        canvas.place("perpSymbolD", *shapes.right_angle_points(c.d, c.c, c.b, 10))
        canvas.place("perpSymbolF", *shapes.right_angle_points(c.f, c.e, c.b, 10))
        canvas.place("perpSymbolG", *shapes.right_angle_points(c.g, c.e, c.origin, 10))
        canvas.place("triangleCOD", c.c, c.origin, c.d)
        canvas.place("triangleEGF", c.e, c.g, c.f)
        canvas.retext("lengthText", self._length_text())

    def readouts(self, step: int) -> dict[str, str]:
        out = {}
        if step >= 3:
            out["CD"] = f"{distance(self.config.c, self.config.d):.1f}"
        if step >= 4:
            out["GF"] = f"{distance(self.config.g, self.config.f):.1f}"
        return out

    def _length_text(self) -> str:
        c = self.config
        return f"CD = {round(distance(c.c, c.d))} = GF = {round(distance(c.g, c.f))}"
