"""Drawable components: geometry, paint and reveal state."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from geoproof_geometry import Point

Color = tuple[int, int, int]

SHAPE_KINDS = frozenset({
    "point",
    "segment",
    "polyline",
    "polygon",
    "ellipse",
    "arc",
    "text",
})


@dataclass
class Shape:
    """Canvas geometry of one drawable.

    ``points[0]`` is the anchor: the centre of points, ellipses and arcs,
    the top-left of text. Arc angles are canvas angles (clockwise on
    screen, y down).
    """

    kind: str
    points: list[Point] = field(default_factory=list)
    radius: float = 0.0
    radius_y: float = 0.0
    start_angle: float = 0.0
    end_angle: float = 0.0
    text: str = ""

    @property
    def anchor(self) -> Point:
        return self.points[0]


@dataclass
class Style:
    color: Color
    width: float = 2.0
    fill: Optional[Color] = None
    fill_opacity: float = 1.0
    font_size: int = 16
    dash: Optional[tuple[int, int]] = None
    bold: bool = False
    align: str = "left"


@dataclass
class Reveal:
    """How much of a drawable is showing.

    ``progress`` is how far a stroke has been drawn, ``scale`` the pop-in
    size, ``opacity`` the fade. All three are tween targets. ``effect``
    overrides the reveal effect the shape kind would get.
    """

    visible: bool = True
    progress: float = 1.0
    scale: float = 1.0
    opacity: float = 1.0
    effect: Optional[str] = None


@dataclass
class Hover:
    """Marks the drag handle under the pointer."""

    outline: Color = (255, 255, 255)
    scale: float = 1.2
