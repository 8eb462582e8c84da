"""Point type and 2D vector helpers."""
from __future__ import annotations

import math
from typing import NamedTuple


class Point(NamedTuple):
    """Canvas position in pixels. y grows downward."""

    x: float
    y: float


def add(a: Point, b: Point) -> Point:
    return Point(a.x + b.x, a.y + b.y)


def sub(a: Point, b: Point) -> Point:
    return Point(a.x - b.x, a.y - b.y)


def scale(v: Point, s: float) -> Point:
    return Point(v.x * s, v.y * s)


def dot(a: Point, b: Point) -> float:
    return a.x * b.x + a.y * b.y


def cross(a: Point, b: Point) -> float:
    return a.x * b.y - a.y * b.x


def magnitude_sq(v: Point) -> float:
    return v.x * v.x + v.y * v.y


def magnitude(v: Point) -> float:
    return math.sqrt(magnitude_sq(v))


def rotate90(v: Point, direction: int = 1) -> Point:
    """Quarter turn. ``direction=1`` maps (x, y) to (-y, x)."""
    if direction >= 0:
        return Point(-v.y, v.x)
    return Point(v.y, -v.x)
