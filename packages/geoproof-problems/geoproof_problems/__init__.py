"""geoproof-problems - Guided geometry proofs and the session that runs them."""
from __future__ import annotations

from geoproof_problems.base import Canvas, Problem
from geoproof_problems.catalog import PROBLEMS, create, list_problems
from geoproof_problems.ellipse_ratio import EllipseRatio
from geoproof_problems.min_perimeter import MinPerimeter
from geoproof_problems.semicircle_perpendicular import SemicirclePerpendicular
from geoproof_problems.session import ProblemSession
from geoproof_problems.set_intersection import SetIntersection
from geoproof_problems.square_similarity import SquareSimilarity

__all__ = [
    "Canvas",
    "Problem",
    "ProblemSession",
    "PROBLEMS",
    "create",
    "list_problems",
    "EllipseRatio",
    "MinPerimeter",
    "SemicirclePerpendicular",
    "SetIntersection",
    "SquareSimilarity",
]
