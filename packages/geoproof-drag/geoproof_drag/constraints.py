"""Curves a dragged point is held to."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Protocol

from geoproof_geometry import Point, constrain_to_arc, constrain_to_ellipse


class Constraint(Protocol):
    def apply(self, raw: Point) -> Point:
        ...


@dataclass
class EllipseConstraint:
    """Stay on the ellipse with semi-axes ``a`` (x) and ``b`` (y)."""

    center: Point
    a: float
    b: float

    def apply(self, raw: Point) -> Point:
        return constrain_to_ellipse(raw, self.center, self.a, self.b)[0]


@dataclass
class ArcConstraint:
    """Stay on a circular arc; angles are canvas angles with start <= end."""

    center: Point
    radius: float
    start: float = 0.0
    end: float = math.pi

    def apply(self, raw: Point) -> Point:
        return constrain_to_arc(raw, self.center, self.radius, self.start, self.end)[0]


@dataclass
class FreeConstraint:
    """Go anywhere, optionally kept inside a (left, top, right, bottom) box."""

    bounds: Optional[tuple[float, float, float, float]] = None

    def apply(self, raw: Point) -> Point:
        if self.bounds is None:
            return Point(*raw)
        left, top, right, bottom = self.bounds
        return Point(min(max(raw.x, left), right), min(max(raw.y, top), bottom))
