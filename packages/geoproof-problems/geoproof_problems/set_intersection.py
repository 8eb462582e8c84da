"""Set intersection constraint.

``S_ω = {θ : 2^2025 + ω·θ ≡ 0 (mod 7)}``. Since ``2^2025 ≡ 1 (mod 7)`` the
condition is ``1 + ω·θ ≡ 0 (mod 7)``, so the members repeat every 7. The
question is for which ω every interval ``(a, a + n·e^(-n/2))`` holds at most
three of them; the answer is ``0 < ω < 7/3`` or ``ω > 7``.

The set is not drawn by formula but sampled: the first residue ``i`` in
``0..6`` that satisfies the condition (rounded to the nearest integer) is
taken as the base, and members are ``base + 7k``.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from functools import partial
from typing import TYPE_CHECKING

from geoproof_draw import emphasize
from geoproof_draw import factories as shapes
from geoproof_geometry import Point
from geoproof_problems.base import Canvas, Problem
from geoproof_steps import StepDefinition

if TYPE_CHECKING:
    from geoproof_draw import Color

MODULUS = 7
PERIOD = 7
MAX_ELEMENTS = 100
VISIBLE_RANGE = (-5, 5)
CRITICAL_VALUES = (7 / 3, 7.0)
OMEGA_SCALE_MAX = 10

PALETTE: dict[str, Color] = {
    "numberLine": (85, 85, 85),
    "setElements": (66, 133, 244),
    "interval": (52, 168, 83),
    "intersection": (234, 67, 53),
    "annotation": (102, 102, 102),
    "controlPoint": (255, 87, 34),
    "critical": (213, 0, 0),
}

STEP1_KEYS = frozenset({"numberLine", "ticks", "tickLabels", "titleText", "explanationText"})
STEP2_KEYS = frozenset({"setElements", "setLabels", "omegaDisplay", "distributionText"})
STEP3_KEYS = frozenset({"intervalRect", "intervalLabel", "intersectionElements", "intersectionCount"})
STEP4_KEYS = frozenset({
    "omegaScale", "criticalLines", "criticalLabels", "omegaIndicator",
    "criticalValuesExplanation", "criticalValues",
})
STEP5_KEYS = frozenset({"solutionScale", "criticalPoints", "solutionRanges", "solutionText"})

PARAMETERS = ("omega", "n", "a")


def base_residue(omega: float) -> int:
    """First ``i`` in 0..6 with ``1 + ω·i`` rounding to a multiple of 7, else 0."""
    for i in range(MODULUS):
        if math.floor(math.fmod(1 + omega * i, MODULUS) + 0.5) == 0:
            return i
    return 0


def set_elements(omega: float, start: float, end: float, limit: int = MAX_ELEMENTS) -> list[float]:
    """Members of S_ω in ``[start, end]``, ascending, at most ``limit`` of them."""
    if abs(math.fmod(omega, MODULUS)) < 1e-4:
        return []
    value = math.floor(start / PERIOD) * PERIOD + base_residue(omega)
    while value > start:
        value -= PERIOD
    found: list[float] = []
    while value <= end and len(found) < limit:
        if value >= start:
            found.append(float(value))
        value += PERIOD
    return found


def interval_end(a: float, n: float) -> float:
    return a + n * math.exp(-0.5 * n)


def intersection(omega: float, a: float, n: float) -> list[float]:
    """Members of S_ω strictly inside ``(a, a + n·e^(-n/2))``."""
    end = interval_end(a, n)
    return [x for x in set_elements(omega, a, end) if a < x < end]


@dataclass
class SetIntersectionConfig:
    width: float = 0.0
    height: float = 0.0
    omega: float = 1.0
    n: int = 5
    a: float = 0.0
    line_y: float = 0.0
    element_radius: float = 6.0
    interval_height: float = 80.0
    palette: dict[str, Color] = field(default_factory=lambda: dict(PALETTE))

    @property
    def start_x(self) -> float:
        return 50.0

    @property
    def spacing(self) -> float:
        low, high = VISIBLE_RANGE
        return (self.width - 100) / (high - low)

    def x_of(self, value: float) -> float:
        return self.start_x + (value - VISIBLE_RANGE[0]) * self.spacing

    def scale_x(self, omega: float) -> float:
        """Position of ``omega`` on the 0..10 scale under the number line."""
        return 100 + omega / OMEGA_SCALE_MAX * (self.width - 200)

    @property
    def visible_elements(self) -> list[float]:
        return set_elements(self.omega, *VISIBLE_RANGE, limit=20)

    @property
    def interval(self) -> tuple[float, float]:
        return self.a, interval_end(self.a, self.n)

    @property
    def hits(self) -> list[float]:
        return intersection(self.omega, self.a, self.n)


class SetIntersection(Problem):
    id = "set-intersection"
    name = "Set Intersection Constraint"

    def layout(self, width: float, height: float) -> None:
        config = getattr(self, "config", None) or SetIntersectionConfig()
        config.width, config.height = width, height
        config.line_y = height / 2
        self.config = config

    def build_steps(self, canvas: Canvas) -> list[StepDefinition]:
        return [
            StepDefinition(1, STEP1_KEYS, partial(self.draw_number_line, canvas), "Understanding the Set Sω",
                           "Step 1: Sω collects every θ with 2^2025 + ω·θ divisible by 7"),
            StepDefinition(2, STEP2_KEYS, partial(self.draw_elements, canvas), "Distribution of Elements",
                           "Step 2: Plot the members of Sω; adjust ω to change them"),
            StepDefinition(3, STEP3_KEYS, partial(self.draw_interval, canvas), "Intersection Constraint",
                           "Step 3: Count the members inside the interval (a, a + ne^(-0.5n))"),
            StepDefinition(4, STEP4_KEYS, partial(self.draw_critical, canvas), "Finding Critical Values",
                           "Step 4: Locate the critical values of ω"),
            StepDefinition(5, STEP5_KEYS, partial(self.draw_solution, canvas), "Solution Range",
                           "Step 5: Read off the range of valid ω"),
        ]

    def parameters(self) -> dict[str, float]:
        return {name: getattr(self.config, name) for name in PARAMETERS}

    def set_parameter(self, name: str, value: float) -> None:
        if name not in PARAMETERS:
            super().set_parameter(name, value)
        if name == "n":
            if value < 1:
                raise ValueError(f"n must be at least 1, got {value}")
            value = int(value)
        setattr(self.config, name, value)

    def _text(self, canvas: Canvas, at: Point, content: str, color: Color, size: int = 14,
              bold: bool = False, hidden: bool = False):
        return shapes.text(canvas.scene, at, content, color, size, bold=bold, align="center", hidden=hidden)

    def _scale(self, canvas: Canvas, y: float, hidden: bool) -> list[int]:
        """A 0..10 axis for ω: the line, then a tick and a label per integer."""
        c, scene = self.config, canvas.scene
        grey = c.palette["numberLine"]
        parts = [shapes.segment(scene, Point(c.scale_x(0), y), Point(c.scale_x(OMEGA_SCALE_MAX), y), grey,
                                hidden=hidden)]
        for omega in range(OMEGA_SCALE_MAX + 1):
            x = c.scale_x(omega)
            parts.append(shapes.segment(scene, Point(x, y - 5), Point(x, y + 5), grey, hidden=hidden))
            parts.append(self._text(canvas, Point(x, y + 10), str(omega), c.palette["annotation"], hidden=hidden))
        return parts

    def draw_number_line(self, canvas: Canvas, animate: bool):
        c, scene = self.config, canvas.scene
        y, grey, note = c.line_y, c.palette["numberLine"], c.palette["annotation"]
        low, high = VISIBLE_RANGE
        line = canvas.add("numberLine", shapes.segment(
            scene, Point(c.x_of(low), y), Point(c.x_of(high), y), grey, hidden=animate))
        ticks = canvas.add("ticks", [
            shapes.segment(scene, Point(c.x_of(v), y - 5), Point(c.x_of(v), y + 5), grey, hidden=animate)
            for v in range(low, high + 1)
        ])
        labels = canvas.add("tickLabels", [
            self._text(canvas, Point(c.x_of(v), y + 15), str(v), note, hidden=animate)
            for v in range(low, high + 1)
        ])
        title = canvas.add("titleText", self._text(
            canvas, Point(c.width / 2, 30), "Understanding the Set Sω", note, 20, True, animate))
        explanation = canvas.add("explanationText", self._text(
            canvas, Point(c.width / 2, y - 80),
            "Sω = { θ | 2^2025 + ω·θ is divisible by 7 }\n"
            "The elements of this set form a regular pattern along the number line,\n"
            "with spacing that depends on the value of ω.",
            note, 16, hidden=animate))
        return self.beats(canvas, animate, [title, explanation, line, ticks, labels])

    def draw_elements(self, canvas: Canvas, animate: bool):
        c, scene = self.config, canvas.scene
        blue, y = c.palette["setElements"], c.line_y
        members = c.visible_elements
        dots = canvas.add("setElements", [
            shapes.point(scene, Point(c.x_of(v), y), blue, c.element_radius, animate) for v in members
        ])
        labels = canvas.add("setLabels", [
            self._text(canvas, Point(c.x_of(v), y - 25), f"{v:.1f}", blue, hidden=animate) for v in members
        ])
        omega = canvas.add("omegaDisplay", self._text(
            canvas, Point(c.width / 2, y + 60), f"ω = {c.omega:.2f}", blue, 18, True, animate))
        shown = "shown as blue dots." if members else "not visible in this range."
        note = canvas.add("distributionText", self._text(
            canvas, Point(c.width / 2, y - 120), f"For ω = {c.omega:.2f}, elements of Sω are {shown}",
            c.palette["annotation"], 16, hidden=animate))
        return self.beats(canvas, animate, [dots, labels, omega, note])

    def draw_interval(self, canvas: Canvas, animate: bool):
        c, scene = self.config, canvas.scene
        green, red, y = c.palette["interval"], c.palette["intersection"], c.line_y
        a, end = c.interval
        left, right = c.x_of(a), c.x_of(end)
        top, bottom = y - c.interval_height / 2, y + c.interval_height / 2
        rect = canvas.add("intervalRect", shapes.polygon(
            scene, [Point(left, top), Point(right, top), Point(right, bottom), Point(left, bottom)],
            green, fill=green, fill_opacity=0.2, hidden=animate))
        label = canvas.add("intervalLabel", self._text(
            canvas, Point((left + right) / 2, top - 25), f"({a:.1f}, {end:.3f})", green, hidden=animate))
        hits = c.hits
        rings = canvas.add("intersectionElements", [
            shapes.point(scene, Point(c.x_of(v), y), red, c.element_radius * 1.8, animate) for v in hits
        ])
        for did in rings:
            emphasize(scene, did)
        count = canvas.add("intersectionCount", self._text(
            canvas, Point(c.width / 2, y + 100), f"|Sω ∩ (a, a + ne^(-0.5n))| = {len(hits)}",
            green if len(hits) <= 3 else red, 18, True, animate))
        return self.beats(canvas, animate, [rect, label, rings, count])

    def draw_critical(self, canvas: Canvas, animate: bool):
        c, scene = self.config, canvas.scene
        y = c.line_y + 150
        scale = canvas.add("omegaScale", self._scale(canvas, y, animate))
        colors = (c.palette["critical"], c.palette["setElements"])
        lines = canvas.add("criticalLines", [
            shapes.segment(scene, Point(c.scale_x(v), y - 15), Point(c.scale_x(v), y + 30), color,
                           dash=(6, 3), hidden=animate)
            for v, color in zip(CRITICAL_VALUES, colors)
        ])
        labels = canvas.add("criticalLabels", [
            self._text(canvas, Point(c.scale_x(v), y - 30), f"ω = {name}", color, hidden=animate)
            for v, name, color in zip(CRITICAL_VALUES, ("7/3", "7"), colors)
        ])
        indicator = canvas.add("omegaIndicator", shapes.point(
            scene, Point(c.scale_x(c.omega), y), c.palette["controlPoint"], 8, animate))
        explanation = canvas.add("criticalValuesExplanation", self._text(
            canvas, Point(c.width / 2, y + 50),
            "Mathematical analysis shows that ω must be in the range 0 < ω < 7/3 or ω > 7\n"
            "to satisfy the constraint |Sω ∩ (a, a + ne^(-0.5n))| ≤ 3 for all a and n.",
            c.palette["annotation"], 16, hidden=animate))
        values = canvas.add("criticalValues", self._text(
            canvas, Point(c.width / 2, y + 100), "Critical values: ω = 7/3 and ω = 7",
            c.palette["annotation"], 18, True, animate))
        return self.beats(canvas, animate, [scale, (lines + labels), indicator, explanation, values])

    def draw_solution(self, canvas: Canvas, animate: bool):
        c, scene = self.config, canvas.scene
        y = c.line_y + 200
        red, blue = c.palette["critical"], c.palette["setElements"]
        scale = canvas.add("solutionScale", self._scale(canvas, y, animate))
        marks = []
        for value, name in ((0.0, "0"), (7 / 3, "7/3"), (7.0, "7")):
            x = c.scale_x(value)
            marks.append(shapes.point(scene, Point(x, y), red, 5, animate))
            marks.append(self._text(canvas, Point(x, y - 25), name, red, hidden=animate))
        points = canvas.add("criticalPoints", marks)
        ranges = canvas.add("solutionRanges", [
            shapes.polygon(scene, [Point(c.scale_x(lo), y - 8), Point(c.scale_x(hi), y - 8),
                                   Point(c.scale_x(hi), y + 8), Point(c.scale_x(lo), y + 8)],
                           blue, fill=blue, fill_opacity=0.3, width=1, hidden=animate)
            for lo, hi in ((0.0, CRITICAL_VALUES[0]), (CRITICAL_VALUES[1], OMEGA_SCALE_MAX))
        ])
        solution = canvas.add("solutionText", self._text(
            canvas, Point(c.width / 2, y + 50), "Solution: 0 < ω < 7/3 or ω > 7", red, 22, True, animate))
        return self.beats(canvas, animate, [scale, points, ranges, solution])

    def readouts(self, step: int) -> dict[str, str]:
        c = self.config
        out = {"ω": f"{c.omega:.2f}", "n": str(c.n), "a": f"{c.a:.1f}"}
        if step >= 3:
            a, end = c.interval
            out["interval"] = f"({a:.1f}, {end:.3f})"
            out["|Sω ∩ I|"] = str(len(c.hits))
        return out
