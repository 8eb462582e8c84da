"""geoproof-drag - Constrained dragging of proof points."""
from __future__ import annotations

from geoproof_drag.constraints import ArcConstraint, Constraint, EllipseConstraint, FreeConstraint
from geoproof_drag.controller import DEFAULT_THROTTLE_MS, DragController, DragHandle

__all__ = [
    "ArcConstraint",
    "Constraint",
    "DEFAULT_THROTTLE_MS",
    "DragController",
    "DragHandle",
    "EllipseConstraint",
    "FreeConstraint",
]
