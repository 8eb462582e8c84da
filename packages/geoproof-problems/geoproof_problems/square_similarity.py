"""Square similarity: in square ABCD with E the midpoint of BC, triangles ABG and BCH
are congruent, AB² = AE·BH, and EH meets CD at I with IC = 2·DI."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import partial
from typing import TYPE_CHECKING, Optional

from geoproof_drag import DragHandle, FreeConstraint
from geoproof_draw import factories as shapes
from geoproof_geometry import (
    Point,
    distance,
    extend_line,
    intersect_lines,
    length_ratio,
    midpoint,
    project_point_onto_line,
    rederive_square,
)
from geoproof_problems.base import LABEL_COLOR, Canvas, Problem
from geoproof_steps import StepDefinition

if TYPE_CHECKING:
    from geoproof_draw import Color

logger = logging.getLogger(__name__)

PALETTE: dict[str, Color] = {
    "square": (51, 51, 51),
    "pointA": (233, 30, 99),
    "pointB": (255, 87, 34),
    "pointC": (76, 175, 80),
    "pointD": (3, 169, 244),
    "pointE": (156, 39, 176),
    "pointF": (255, 152, 0),
    "pointG": (121, 85, 72),
    "pointH": (96, 125, 139),
    "pointI": (255, 193, 7),
    "lineAE": (103, 58, 183),
    "lineBG": (33, 150, 243),
    "lineCF": (244, 67, 54),
    "lineEH": (0, 150, 136),
    "lineAH": (205, 220, 57),
    "triangleABG": (233, 30, 99),
    "triangleBCH": (0, 150, 136),
}

STEP1_KEYS = frozenset({
    "squareEdges", "pointA", "textA", "pointB", "textB", "pointC", "textC",
    "pointD", "textD", "pointE", "textE",
})
STEP2_KEYS = frozenset({"lineAE", "pointG", "textG", "lineBG", "perpSymbolG"})
STEP3_KEYS = frozenset({
    "extendedLineBG", "pointH", "textH", "perpSymbolH", "lineCF", "pointF", "textF",
})
STEP4_KEYS = frozenset({"triangleABG", "triangleBCH", "similarityAnnotation"})
STEP5_KEYS = frozenset({
    "lineAH", "lineEH", "extendedLineEH", "pointI", "textI", "proofText1", "proofText2",
})

OFFSETS = {"A": (-20, -20), "B": (10, -20), "C": (10, 10), "D": (-20, 10)}
CORNERS = "ABCD"


@dataclass
class SquareConfig:
    """Corners run A (top-left), B, C, D around the square."""

    width: float = 0.0
    height: float = 0.0
    size: float = 0.0
    corners: tuple[Point, Point, Point, Point] = (Point(0, 0),) * 4
    palette: dict[str, Color] = field(default_factory=lambda: dict(PALETTE))

    @property
    def a(self) -> Point:
        return self.corners[0]

    @property
    def b(self) -> Point:
        return self.corners[1]

    @property
    def c(self) -> Point:
        return self.corners[2]

    @property
    def d(self) -> Point:
        return self.corners[3]

    @property
    def e(self) -> Point:
        return midpoint(self.b, self.c)

    @property
    def g(self) -> Point:
        return project_point_onto_line(self.b, self.a, self.e)

    @property
    def h(self) -> Point:
        return project_point_onto_line(self.c, self.b, self.g)

    @property
    def f(self) -> Optional[Point]:
        return intersect_lines(self.c, self.h, self.a, self.d)

    @property
    def i(self) -> Optional[Point]:
        return intersect_lines(self.e, self.h, self.c, self.d)

    @property
    def bg_end(self) -> Point:
        return extend_line(self.b, self.g, 3)

    def points(self) -> dict[str, Optional[Point]]:
        return {
            "A": self.a, "B": self.b, "C": self.c, "D": self.d, "E": self.e,
            "G": self.g, "H": self.h, "F": self.f, "I": self.i,
        }


class SquareSimilarity(Problem):
    id = "square-similarity"
    name = "Square Perpendicular Similarity"
    drag_min_step = 1
    drag_hint = "Drag any corner: the square re-forms around the opposite corner"

    def layout(self, width: float, height: float) -> None:
        config = getattr(self, "config", None) or SquareConfig()
        config.width, config.height = width, height
        config.size = s = min(width, height) * 0.6
        x, y = (width - s) / 2, (height + s) / 2
        config.corners = (Point(x, y - s), Point(x + s, y - s), Point(x + s, y), Point(x, y))
        self.config = config

    def build_steps(self, canvas: Canvas) -> list[StepDefinition]:
        return [
            StepDefinition(1, STEP1_KEYS, partial(self.draw_square, canvas), "Square ABCD, midpoint E",
                           "Step 1: Draw square ABCD and find the midpoint E of side BC"),
            StepDefinition(2, STEP2_KEYS, partial(self.draw_bg, canvas), "BG ⊥ AE",
                           "Step 2: Join AE, then drop the perpendicular BG ⊥ AE"),
            StepDefinition(3, STEP3_KEYS, partial(self.draw_cf, canvas), "CF ⊥ BG",
                           "Step 3: Extend BG, then drop the perpendicular CF ⊥ BG from C"),
            StepDefinition(4, STEP4_KEYS, partial(self.draw_triangles, canvas), "△ABG ≅ △BCH",
                           "Step 4: Compare triangles △ABG and △BCH"),
            StepDefinition(5, STEP5_KEYS, partial(self.draw_proof, canvas), "EH meets CD at I",
                           "Step 5: Join AH and EH, extend EH to meet CD at I, and conclude"),
        ]

    def _offset(self, name: str) -> tuple[float, float]:
        return OFFSETS.get(name, (10, -20))

    def _point(self, canvas: Canvas, name: str, at: Point, hidden: bool):
        return self.labelled_point(
            canvas, name, at, self.config.palette[f"point{name}"], self._offset(name), hidden,
        )

    def _edges(self) -> list[tuple[Point, Point]]:
        corners = self.config.corners
        return [(corners[k], corners[(k + 1) % 4]) for k in range(4)]

    def draw_square(self, canvas: Canvas, animate: bool):
        c, scene = self.config, canvas.scene
        edges = canvas.add("squareEdges", [
            shapes.segment(scene, start, end, c.palette["square"], 2.5, hidden=animate)
            for start, end in self._edges()
        ])
        corners = [self._point(canvas, name, at, animate) for name, at in zip(CORNERS, c.corners)]
        e_pt = self._point(canvas, "E", c.e, animate)
        return self.beats(canvas, animate, [
            edges, [dot for dot, _ in corners], [label for _, label in corners], e_pt,
        ])

    def draw_bg(self, canvas: Canvas, animate: bool):
        c, scene = self.config, canvas.scene
        line_ae = canvas.add("lineAE", shapes.segment(scene, c.a, c.e, c.palette["lineAE"], 2.5, hidden=animate))
        line_bg = canvas.add("lineBG", shapes.segment(scene, c.b, c.g, c.palette["lineBG"], 2.5, hidden=animate))
        g_pt = self._point(canvas, "G", c.g, animate)
        perp = canvas.add("perpSymbolG", shapes.right_angle(scene, c.g, c.b, c.e, LABEL_COLOR, hidden=animate))
        return self.beats(canvas, animate, [line_ae, line_bg, g_pt, perp])

    def draw_cf(self, canvas: Canvas, animate: bool):
        c, scene = self.config, canvas.scene
        f = c.f
        if f is None:
            logger.warning("CH is parallel to AD; placing F level with C")
            f = Point(c.a.x, c.c.y)
        extension = canvas.add("extendedLineBG", shapes.segment(
            scene, c.g, c.bg_end, c.palette["lineBG"], 1.5, dash=(5, 5), hidden=animate))
        line_cf = canvas.add("lineCF", shapes.segment(scene, c.c, f, c.palette["lineCF"], 2.5, hidden=animate))
        h_pt = self._point(canvas, "H", c.h, animate)
        perp = canvas.add("perpSymbolH", shapes.right_angle(scene, c.h, c.c, c.b, LABEL_COLOR, hidden=animate))
        f_pt = self._point(canvas, "F", f, animate)
        return self.beats(canvas, animate, [extension, line_cf, h_pt, perp, f_pt])

    def draw_triangles(self, canvas: Canvas, animate: bool):
        c, scene = self.config, canvas.scene
        abg = canvas.add("triangleABG", shapes.polygon(
            scene, [c.a, c.b, c.g], c.palette["triangleABG"], fill=c.palette["triangleABG"],
            fill_opacity=0.4, width=1.5, hidden=animate))
        bch = canvas.add("triangleBCH", shapes.polygon(
            scene, [c.b, c.c, c.h], c.palette["triangleBCH"], fill=c.palette["triangleBCH"],
            fill_opacity=0.4, width=1.5, hidden=animate))
        note = canvas.add("similarityAnnotation", shapes.text(
            scene, Point(c.width / 2, 50), "△ABG ≅ △BCH", LABEL_COLOR, 18, bold=True, align="center",
            hidden=animate))
        return self.beats(canvas, animate, [abg, bch, note])

    def draw_proof(self, canvas: Canvas, animate: bool):
        c, scene = self.config, canvas.scene
        i = c.i
        if i is None:
            logger.warning("EH is parallel to CD; placing I at C")
            i = c.c
        line_ah = canvas.add("lineAH", shapes.segment(scene, c.a, c.h, c.palette["lineAH"], 2.5, hidden=animate))
        line_eh = canvas.add("lineEH", shapes.segment(scene, c.e, c.h, c.palette["lineEH"], 2.5, hidden=animate))
        extension = canvas.add("extendedLineEH", shapes.segment(
            scene, c.h, i, c.palette["lineEH"], 1.5, dash=(5, 5), hidden=animate))
        i_pt = self._point(canvas, "I", i, animate)
        proof1 = canvas.add("proofText1", shapes.text(
            scene, Point(c.width / 2, 90), "AB² = AE · BH", LABEL_COLOR, 18, bold=True, align="center",
            hidden=animate))
        proof2 = canvas.add("proofText2", shapes.text(
            scene, Point(c.width / 2, 130), "IC / DI = 2", LABEL_COLOR, 18, bold=True, align="center",
            hidden=animate))
        return self.beats(canvas, animate, [(line_ah, line_eh), extension, i_pt, proof1, proof2])

    def drag_handles(self, canvas: Canvas) -> list[DragHandle]:
        return [
            DragHandle(f"point{name}", FreeConstraint(), partial(self.move_corner, canvas, index))
            for index, name in enumerate(CORNERS)
        ]

    def move_corner(self, canvas: Canvas, index: int, point: Point) -> None:
        self.config.corners = rederive_square(self.config.corners, index, point)
        self.refresh(canvas)

    def refresh(self, canvas: Canvas) -> None:
        c = self.config
        for (start, end), did in zip(self._edges(), canvas.registry.ids("squareEdges")):
            shapes.move(canvas.scene, did, start, end)
        for name, at in c.points().items():
            # Parallel lines leave F or I where they were this frame.
            if at is not None:
                self.move_labelled_point(canvas, name, at, self._offset(name))
        canvas.place("lineAE", c.a, c.e)
        canvas.place("lineBG", c.b, c.g)
        canvas.place("perpSymbolG", *shapes.right_angle_points(c.g, c.b, c.e, 10))
        canvas.place("extendedLineBG", c.g, c.bg_end)
        canvas.place("perpSymbolH", *shapes.right_angle_points(c.h, c.c, c.b, 10))
        if c.f is not None:
            canvas.place("lineCF", c.c, c.f)
        canvas.place("triangleABG", c.a, c.b, c.g)
        canvas.place("triangleBCH", c.b, c.c, c.h)
        canvas.place("lineAH", c.a, c.h)
        canvas.place("lineEH", c.e, c.h)
        if c.i is not None:
            canvas.place("extendedLineEH", c.h, c.i)

    def readouts(self, step: int) -> dict[str, str]:
        c = self.config
        out: dict[str, str] = {}
        if step >= 1:
            out["AB"] = f"{distance(c.a, c.b):.1f}"
        if step >= 3:
            out["AB²"] = f"{distance(c.a, c.b) ** 2:.0f}"
            out["AE·BH"] = f"{distance(c.a, c.e) * distance(c.b, c.h):.0f}"
        if step >= 5 and c.i is not None:
            out["IC/DI"] = f"{length_ratio(c.c, c.i, c.d):.2f}"
        return out
