"""Analytic geometry on canvas points.

Every function is pure. Degenerate input never raises: a zero-length line
falls back to a defined point, and constructions with no unique answer
(parallel lines, a ray that misses a segment) return ``None`` so callers
can skip the dependent element for that frame.
"""
from __future__ import annotations

import logging
import math

from geoproof_geometry.point import Point, add, dot, magnitude, magnitude_sq, scale, sub

logger = logging.getLogger(__name__)

LINE_EPSILON = 1e-9
RAY_EPSILON = 1e-6


def distance(a: Point, b: Point) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def project_point_onto_line(point: Point, line_start: Point, line_end: Point) -> Point:
    """Foot of the perpendicular from ``point`` to the infinite line."""
    line_vec = sub(line_end, line_start)
    length_sq = magnitude_sq(line_vec)
    if length_sq == 0:
        return Point(line_start.x, line_start.y)
    t = dot(sub(point, line_start), line_vec) / length_sq
    return add(line_start, scale(line_vec, t))


def intersect_lines(
    a_start: Point, a_end: Point, b_start: Point, b_end: Point
) -> Point | None:
    """Crossing point of two infinite lines, or None if parallel/coincident."""
    a1 = a_end.y - a_start.y
    b1 = a_start.x - a_end.x
    c1 = a1 * a_start.x + b1 * a_start.y

    a2 = b_end.y - b_start.y
    b2 = b_start.x - b_end.x
    c2 = a2 * b_start.x + b2 * b_start.y

    det = a1 * b2 - a2 * b1
    if abs(det) < LINE_EPSILON:
        logger.debug("intersect_lines: parallel or coincident lines")
        return None
    return Point((b2 * c1 - b1 * c2) / det, (a1 * c2 - a2 * c1) / det)


def intersect_segment_with_ray(
    seg_start: Point, seg_end: Point, ray_origin: Point, ray_through: Point
) -> Point | None:
    """Where the ray from ``ray_origin`` through ``ray_through`` hits the segment."""
    x1, y1 = seg_start
    x2, y2 = seg_end
    x3, y3 = ray_origin
    x4, y4 = ray_through

    den = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if abs(den) < RAY_EPSILON:
        return None

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / den
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / den

    if -RAY_EPSILON <= t <= 1 + RAY_EPSILON and u >= -RAY_EPSILON:
        return Point(x1 + t * (x2 - x1), y1 + t * (y2 - y1))
    return None


def reflect_point(point: Point, line_start: Point, line_end: Point) -> Point:
    """Mirror image of ``point`` across the line. Zero-length line: unchanged."""
    a = line_end.y - line_start.y
    b = -(line_end.x - line_start.x)
    denom = a * a + b * b
    if denom == 0:
        return Point(point.x, point.y)
    c = -a * line_start.x - b * line_start.y
    t = -2 * (a * point.x + b * point.y + c) / denom
    return Point(point.x + a * t, point.y + b * t)


def extend_line(line_start: Point, line_end: Point, factor: float = 2) -> Point:
    """Point past ``line_end`` by ``factor`` times the segment vector."""
    return add(line_end, scale(sub(line_end, line_start), factor))


def angle_at(a: Point, b: Point, c: Point) -> float:
    """Angle ABC in radians, by the law of cosines. 0.0 if a side is empty."""
    ab = distance(a, b)
    bc = distance(b, c)
    if ab <= 0 or bc <= 0:
        return 0.0
    ac = distance(a, c)
    cos_theta = (ab * ab + bc * bc - ac * ac) / (2 * ab * bc)
    return math.acos(max(-1.0, min(1.0, cos_theta)))


def length_ratio(p1: Point, p2: Point, p3: Point) -> float:
    """|p1 p2| / |p2 p3|, or nan when p2 and p3 coincide."""
    denominator = distance(p2, p3)
    if denominator < LINE_EPSILON:
        logger.debug("length_ratio: zero-length denominator segment")
        return math.nan
    return distance(p1, p2) / denominator


def unit(v: Point) -> Point:
    mag = magnitude(v)
    if mag == 0.0:
        return v
    return scale(v, 1.0 / mag)
