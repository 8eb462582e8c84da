"""geoproof-geometry - Analytic geometry kernel for geometry proof scenes."""
from __future__ import annotations

from geoproof_geometry.curves import (
    constrain_to_arc,
    constrain_to_ellipse,
    point_on_circle,
    point_on_ellipse,
    rederive_square,
)
from geoproof_geometry.kernel import (
    angle_at,
    distance,
    extend_line,
    intersect_lines,
    intersect_segment_with_ray,
    length_ratio,
    midpoint,
    project_point_onto_line,
    reflect_point,
)
from geoproof_geometry.point import Point

__all__ = [
    "Point",
    "angle_at",
    "distance",
    "extend_line",
    "intersect_lines",
    "intersect_segment_with_ray",
    "length_ratio",
    "midpoint",
    "project_point_onto_line",
    "reflect_point",
    "constrain_to_arc",
    "constrain_to_ellipse",
    "point_on_circle",
    "point_on_ellipse",
    "rederive_square",
]
