"""Curve parametrizations and the constraint projections used when dragging."""
from __future__ import annotations

import math
from typing import Sequence

from geoproof_geometry.kernel import midpoint
from geoproof_geometry.point import Point, add, cross, rotate90, sub

TAU = 2 * math.pi


def point_on_ellipse(center: Point, a: float, b: float, angle: float) -> Point:
    """Ellipse point at parameter ``angle``, measured counter-clockwise on screen."""
    return Point(center.x + a * math.cos(angle), center.y - b * math.sin(angle))


def constrain_to_ellipse(
    raw: Point, center: Point, a: float, b: float
) -> tuple[Point, float]:
    angle = math.atan2(-(raw.y - center.y), raw.x - center.x)
    return point_on_ellipse(center, a, b, angle), angle


def point_on_circle(center: Point, radius: float, angle: float) -> Point:
    """Circle point at canvas ``angle`` (clockwise on screen, y down)."""
    return Point(center.x + radius * math.cos(angle), center.y + radius * math.sin(angle))


def constrain_to_arc(
    raw: Point,
    center: Point,
    radius: float,
    start: float = 0.0,
    end: float = math.pi,
) -> tuple[Point, float]:
    """Nearest arc point by angle; angles outside ``[start, end]`` snap to an end.

    Angles are canvas angles normalized to ``[0, 2pi)``; ``start <= end``.
    """
    angle = math.atan2(raw.y - center.y, raw.x - center.x) % TAU
    if not start <= angle <= end:
        gap_start = min(abs(angle - start), TAU - abs(angle - start))
        gap_end = min(abs(angle - end), TAU - abs(angle - end))
        angle = start if gap_start <= gap_end else end
    return point_on_circle(center, radius, angle), angle


def rederive_square(
    corners: Sequence[Point], index: int, dragged: Point
) -> tuple[Point, Point, Point, Point]:
    """Rebuild a square after corner ``index`` moves to ``dragged``.

    The opposite corner stays put and the two form a diagonal; the remaining
    corners are the half-diagonal turned a quarter about its midpoint, keeping
    the same winding. Dropping a corner onto its opposite is rejected and
    the corners come back unchanged.
    """
    if len(corners) != 4:
        raise ValueError("a square has four corners")
    current = tuple(Point(*c) for c in corners)
    opposite = current[(index + 2) % 4]
    if dragged == opposite:
        return current  # type: ignore[return-value]

    winding = 1 if cross(sub(current[1], current[0]), sub(current[2], current[1])) >= 0 else -1
    center = midpoint(dragged, opposite)
    half = sub(dragged, center)
    turned = rotate90(half, winding)

    rebuilt = list(current)
    rebuilt[index] = Point(*dragged)
    rebuilt[(index + 1) % 4] = add(center, turned)
    rebuilt[(index + 2) % 4] = opposite
    rebuilt[(index + 3) % 4] = sub(center, turned)
    return rebuilt[0], rebuilt[1], rebuilt[2], rebuilt[3]
