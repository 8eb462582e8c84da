"""The problems a viewer can open, by id."""
from __future__ import annotations

from typing import TYPE_CHECKING

from geoproof_problems.ellipse_ratio import EllipseRatio
from geoproof_problems.min_perimeter import MinPerimeter
from geoproof_problems.semicircle_perpendicular import SemicirclePerpendicular
from geoproof_problems.set_intersection import SetIntersection
from geoproof_problems.square_similarity import SquareSimilarity

if TYPE_CHECKING:
    from geoproof_problems.base import Problem

PROBLEMS: dict[str, type[Problem]] = {
    cls.id: cls
    for cls in (EllipseRatio, SemicirclePerpendicular, SquareSimilarity, MinPerimeter, SetIntersection)
}


def list_problems() -> list[dict[str, str]]:
    return [{"id": pid, "name": cls.name} for pid, cls in PROBLEMS.items()]


def create(problem_id: str, width: float = 800, height: float = 600) -> Problem:
    """Build a problem laid out for the given canvas. KeyError for an unknown id."""
    try:
        cls = PROBLEMS[problem_id]
    except KeyError:
        raise KeyError(f"unknown problem {problem_id!r}; choose from {sorted(PROBLEMS)}") from None
    return cls(width, height)
