"""Minimum perimeter: reflect P across both sides of angle AOB; segment P′P″ cuts
the sides at C and D, and triangle PCD has perimeter |P′P″|, the least possible."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from functools import partial
from typing import TYPE_CHECKING, Optional

from geoproof_drag import DragHandle, FreeConstraint
from geoproof_draw import factories as shapes
from geoproof_draw import hide, show
from geoproof_geometry import (
    Point,
    distance,
    intersect_segment_with_ray,
    point_on_circle,
    reflect_point,
)
from geoproof_problems.base import LABEL_COLOR, Canvas, Problem
from geoproof_steps import StepDefinition

if TYPE_CHECKING:
    from geoproof import DrawableId
    from geoproof_draw import Color

logger = logging.getLogger(__name__)

PALETTE: dict[str, Color] = {
    "rays": (51, 51, 51),
    "angleFill": (200, 230, 255),
    "pointP": (255, 87, 34),
    "pointPPrime": (233, 30, 99),
    "pointPDoublePrime": (3, 169, 244),
    "pointsCD": (76, 175, 80),
    "constructionLine": (255, 152, 0),
    "finalTriangle": (213, 0, 0),
    "helperLines": (170, 170, 170),
}

STEP1_KEYS = frozenset({
    "angleFill", "rayOA", "rayOB", "pointP", "textP", "textPCoords", "textO", "textA", "textB",
})
STEP2_KEYS = frozenset({"pointPPrime", "textPPrime", "linePPPrime", "mirrorOA"})
STEP3_KEYS = frozenset({"pointPDoublePrime", "textPDoublePrime", "linePPDoublePrime", "mirrorOB"})
STEP4_KEYS = frozenset({"linePPrimePDoublePrime", "pointC", "textC", "pointD", "textD"})
STEP5_KEYS = frozenset({
    "triangleFill", "trianglePC", "triangleCD", "trianglePD",
    "helperPPrimeC", "helperPDoublePrimeD", "helperPC", "helperPD", "textTriangle",
})

# Everything positioned from C and D.
CD_KEYS = frozenset({"pointC", "textC", "pointD", "textD"}) | STEP5_KEYS

# Sides of the shaded wedge at O.
_WEDGE_SEGMENTS = 24


@dataclass
class MinPerimeterConfig:
    """Angle AOB opening up and to the right of O, in canvas angles."""

    width: float = 0.0
    height: float = 0.0
    origin: Point = Point(0.0, 0.0)
    angle_a: float = -math.pi / 10
    angle_b: float = -math.pi / 2.8
    ray_length: float = 0.0
    p: Point = Point(0.0, 0.0)
    palette: dict[str, Color] = field(default_factory=lambda: dict(PALETTE))

    @property
    def a(self) -> Point:
        return point_on_circle(self.origin, self.ray_length, self.angle_a)

    @property
    def b(self) -> Point:
        return point_on_circle(self.origin, self.ray_length, self.angle_b)

    @property
    def p_prime(self) -> Point:
        return reflect_point(self.p, self.origin, self.a)

    @property
    def p_double_prime(self) -> Point:
        return reflect_point(self.p, self.origin, self.b)

    @property
    def c(self) -> Optional[Point]:
        return intersect_segment_with_ray(self.p_prime, self.p_double_prime, self.origin, self.a)

    @property
    def d(self) -> Optional[Point]:
        return intersect_segment_with_ray(self.p_prime, self.p_double_prime, self.origin, self.b)

    @property
    def perimeter(self) -> float:
        return distance(self.p_prime, self.p_double_prime)

    def wedge(self) -> list[Point]:
        r = self.ray_length * 0.3
        step = (self.angle_b - self.angle_a) / _WEDGE_SEGMENTS
        return [self.origin] + [
            point_on_circle(self.origin, r, self.angle_a + k * step) for k in range(_WEDGE_SEGMENTS + 1)
        ]


class MinPerimeter(Problem):
    id = "min-perimeter"
    name = "Minimum Perimeter Triangle"
    drag_min_step = 1
    drag_hint = "Drag point P to explore!"

    _cd_missing = False

    def layout(self, width: float, height: float) -> None:
        config = getattr(self, "config", None) or MinPerimeterConfig()
        config.width, config.height = width, height
        config.origin = Point(100, height - 100)
        config.ray_length = max(width, height) * 1.2
        config.p = Point(width * 0.55, height * 0.45)
        self.config = config

    def build_steps(self, canvas: Canvas) -> list[StepDefinition]:
        return [
            StepDefinition(1, STEP1_KEYS, partial(self.draw_angle, canvas), "Angle AOB and point P",
                           "Step 1: Draw angle AOB and a point P inside it"),
            StepDefinition(2, STEP2_KEYS, partial(self.draw_p_prime, canvas), "Reflect P across OA",
                           "Step 2: Reflect P across OA to get P′"),
            StepDefinition(3, STEP3_KEYS, partial(self.draw_p_double_prime, canvas), "Reflect P across OB",
                           "Step 3: Reflect P across OB to get P″"),
            StepDefinition(4, STEP4_KEYS, partial(self.draw_cd, canvas), "Join P′P″",
                           "Step 4: Join P′P″; it meets OA at C and OB at D"),
            StepDefinition(5, STEP5_KEYS, partial(self.draw_triangle, canvas), "Triangle PCD",
                           "Step 5: PC + CD + DP = P′C + CD + DP″ = P′P″, the minimum perimeter"),
        ]

    def _coords_text(self) -> str:
        p = self.config.p
        return f"P({round(p.x)}, {round(p.y)})"

    def draw_angle(self, canvas: Canvas, animate: bool):
        c, scene = self.config, canvas.scene
        colors = c.palette
        wedge = canvas.add("angleFill", shapes.polygon(
            scene, c.wedge(), colors["angleFill"], fill=colors["angleFill"], fill_opacity=0.2, width=0,
            hidden=animate))
        ray_a = canvas.add("rayOA", shapes.segment(scene, c.origin, c.a, colors["rays"], 2.5, hidden=animate))
        ray_b = canvas.add("rayOB", shapes.segment(scene, c.origin, c.b, colors["rays"], 2.5, hidden=animate))
        labels = [
            canvas.add("textO", shapes.text(
                scene, Point(c.origin.x - 20, c.origin.y + 5), "O", LABEL_COLOR, self.label_size, bold=True,
                hidden=animate)),
            canvas.add("textA", shapes.text(
                scene, self._end_label(c.angle_a), "A", LABEL_COLOR, self.label_size, bold=True,
                hidden=animate)),
            canvas.add("textB", shapes.text(
                scene, self._end_label(c.angle_b), "B", LABEL_COLOR, self.label_size, bold=True,
                hidden=animate)),
        ]
        p_pt = self.labelled_point(canvas, "P", c.p, colors["pointP"], hidden=animate)
        coords = canvas.add("textPCoords", shapes.text(
            scene, Point(c.p.x + 10, c.p.y + 10), self._coords_text(), LABEL_COLOR, 12, hidden=animate))
        return self.beats(canvas, animate, [wedge, (ray_a, ray_b), labels, p_pt[0], (p_pt[1], coords)])

    def _end_label(self, angle: float) -> Point:
        # Just inside the canvas along the ray.
        c = self.config
        reach = min(c.width, c.height) * 0.75
        at = point_on_circle(c.origin, reach, angle)
        return Point(at.x + 10, at.y - 20)

    def draw_p_prime(self, canvas: Canvas, animate: bool):
        c, scene = self.config, canvas.scene
        colors = c.palette
        mirror = canvas.add("mirrorOA", shapes.segment(
            scene, c.origin, c.a, colors["pointPPrime"], 4, hidden=animate))
        line = canvas.add("linePPPrime", shapes.segment(
            scene, c.p, c.p_prime, colors["pointPPrime"], 2, dash=(6, 3), hidden=animate))
        point = self.labelled_point(
            canvas, "PPrime", c.p_prime, colors["pointPPrime"], hidden=animate, label="P′")
        return self.beats(canvas, animate, [mirror, line, point[0], point[1]])

    def draw_p_double_prime(self, canvas: Canvas, animate: bool):
        c, scene = self.config, canvas.scene
        colors = c.palette
        mirror = canvas.add("mirrorOB", shapes.segment(
            scene, c.origin, c.b, colors["pointPDoublePrime"], 4, hidden=animate))
        line = canvas.add("linePPDoublePrime", shapes.segment(
            scene, c.p, c.p_double_prime, colors["pointPDoublePrime"], 2, dash=(6, 3), hidden=animate))
        point = self.labelled_point(
            canvas, "PDoublePrime", c.p_double_prime, colors["pointPDoublePrime"], (10, 10), animate, label="P″")
        return self.beats(canvas, animate, [mirror, line, point[0], point[1]])

    def draw_cd(self, canvas: Canvas, animate: bool):
        c, scene = self.config, canvas.scene
        colors = c.palette
        line = canvas.add("linePPrimePDoublePrime", shapes.segment(
            scene, c.p_prime, c.p_double_prime, colors["constructionLine"], 2.5, hidden=animate))
        cc, dd, found = self._c_and_d()
        c_pt = self.labelled_point(canvas, "C", cc, colors["pointsCD"], (-20, -15), animate)
        d_pt = self.labelled_point(canvas, "D", dd, colors["pointsCD"], (10, 10), animate)
        self._cd_missing = not found
        if not found:
            logger.warning("P′P″ misses a side of the angle; C and D stay hidden")
            self._set_visible(canvas, c_pt + d_pt, False)
            return self.beats(canvas, animate, [line])
        return self.beats(canvas, animate, [line, (c_pt[0], d_pt[0]), (c_pt[1], d_pt[1])])

    def draw_triangle(self, canvas: Canvas, animate: bool):
        c, scene = self.config, canvas.scene
        colors = c.palette
        cc, dd, found = self._c_and_d()
        p, red, grey = c.p, colors["finalTriangle"], colors["helperLines"]
        fill = canvas.add("triangleFill", shapes.polygon(
            scene, [p, cc, dd], red, fill=red, fill_opacity=0.15, width=0, hidden=animate))
        helpers = [
            canvas.add("helperPPrimeC", shapes.segment(scene, c.p_prime, cc, grey, 1.5, (5, 5), animate)),
            canvas.add("helperPDoublePrimeD", shapes.segment(scene, c.p_double_prime, dd, grey, 1.5, (5, 5), animate)),
            canvas.add("helperPC", shapes.segment(scene, p, cc, grey, 1.5, (5, 5), animate)),
            canvas.add("helperPD", shapes.segment(scene, p, dd, grey, 1.5, (5, 5), animate)),
        ]
        sides = [
            canvas.add("trianglePC", shapes.segment(scene, p, cc, red, 3.5, hidden=animate)),
            canvas.add("triangleCD", shapes.segment(scene, cc, dd, red, 3.5, hidden=animate)),
            canvas.add("trianglePD", shapes.segment(scene, p, dd, red, 3.5, hidden=animate)),
        ]
        note = canvas.add("textTriangle", shapes.text(
            scene, self._centroid_label(cc, dd), "Minimum Perimeter", red, 14, bold=True, align="center",
            hidden=animate))
        if not found:
            logger.warning("no triangle PCD while P′P″ misses a side of the angle")
            self._cd_missing = True
            self._set_visible(canvas, [fill, note, *helpers, *sides], False)
            return None
        return self.beats(canvas, animate, [helpers, sides, fill, note])

    def _c_and_d(self) -> tuple[Point, Point, bool]:
        """C and D, or P′ and P″ as stand-ins when P′P″ misses a side."""
        c = self.config
        cc, dd = c.c, c.d
        if cc is None or dd is None:
            return c.p_prime, c.p_double_prime, False
        return cc, dd, True

    @staticmethod
    def _set_visible(canvas: Canvas, dids, visible: bool) -> None:
        for did in dids:
            if visible:
                show(canvas.scene, did)
            else:
                hide(canvas.scene, did)

    def _centroid_label(self, cc: Point, dd: Point) -> Point:
        p = self.config.p
        return Point((p.x + cc.x + dd.x) / 3, (p.y + cc.y + dd.y) / 3 - 10)

    @staticmethod
    def _cd_drawables(canvas: Canvas) -> list[DrawableId]:
        return [did for key in sorted(CD_KEYS) for did in canvas.registry.ids(key)]

    def drag_handles(self, canvas: Canvas) -> list[DragHandle]:
        bounds = (0.0, 0.0, self.config.width, self.config.height)
        return [DragHandle("pointP", FreeConstraint(bounds), partial(self.move_p, canvas))]

    def move_p(self, canvas: Canvas, point: Point) -> None:
        self.config.p = point
        self.refresh(canvas)

    def refresh(self, canvas: Canvas) -> None:
        c = self.config
        p, p1, p2 = c.p, c.p_prime, c.p_double_prime
        self.move_labelled_point(canvas, "P", p)
        canvas.place("textPCoords", Point(p.x + 10, p.y + 10))
        canvas.retext("textPCoords", self._coords_text())
        self.move_labelled_point(canvas, "PPrime", p1)
        canvas.place("linePPPrime", p, p1)
        self.move_labelled_point(canvas, "PDoublePrime", p2, (10, 10))
        canvas.place("linePPDoublePrime", p, p2)
        canvas.place("linePPrimePDoublePrime", p1, p2)
        cc, dd, found = self._c_and_d()
        if not found:
            if not self._cd_missing:
                logger.debug("P′P″ misses a side; hiding C, D and triangle PCD")
                self._set_visible(canvas, self._cd_drawables(canvas), False)
            self._cd_missing = True
            return
        if self._cd_missing:
            self._set_visible(canvas, self._cd_drawables(canvas), True)
            self._cd_missing = False
        self.move_labelled_point(canvas, "C", cc, (-20, -15))
        self.move_labelled_point(canvas, "D", dd, (10, 10))
        canvas.place("helperPPrimeC", p1, cc)
        canvas.place("helperPDoublePrimeD", p2, dd)
        canvas.place("helperPC", p, cc)
        canvas.place("helperPD", p, dd)
        canvas.place("trianglePC", p, cc)
        canvas.place("triangleCD", cc, dd)
        canvas.place("trianglePD", p, dd)
        canvas.place("triangleFill", p, cc, dd)
        canvas.place("textTriangle", self._centroid_label(cc, dd))

    def readouts(self, step: int) -> dict[str, str]:
        c = self.config
        out = {"P": self._coords_text()[1:]}
        if step >= 4 and c.c is not None and c.d is not None:
            cc, dd = c.c, c.d
            out["PC + CD + DP"] = f"{distance(c.p, cc) + distance(cc, dd) + distance(dd, c.p):.1f}"
            out["|P′P″|"] = f"{c.perimeter:.1f}"
        return out
