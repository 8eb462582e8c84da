"""Spawners for the drawables a proof scene is made of."""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

from geoproof_draw.components import Color, Reveal, Shape, Style
from geoproof_geometry import Point
from geoproof_geometry.kernel import unit
from geoproof_geometry.point import add, scale, sub

if TYPE_CHECKING:
    from geoproof import DrawableId, Scene


def spawn_shape(scene: Scene, shape: Shape, style: Style, hidden: bool = False) -> DrawableId:
    did = scene.spawn()
    scene.attach(did, shape)
    scene.attach(did, style)
    scene.attach(did, Reveal(visible=not hidden))
    return did


def point(
    scene: Scene, at: Point, color: Color, radius: float = 6.0, hidden: bool = False,
) -> DrawableId:
    return spawn_shape(
        scene, Shape("point", [at], radius=radius), Style(color, fill=color), hidden,
    )


def segment(
    scene: Scene,
    start: Point,
    end: Point,
    color: Color,
    width: float = 2.0,
    dash: Optional[tuple[int, int]] = None,
    hidden: bool = False,
) -> DrawableId:
    return spawn_shape(
        scene, Shape("segment", [start, end]), Style(color, width=width, dash=dash), hidden,
    )


def polyline(
    scene: Scene, points: Iterable[Point], color: Color, width: float = 2.0, hidden: bool = False,
) -> DrawableId:
    return spawn_shape(scene, Shape("polyline", list(points)), Style(color, width=width), hidden)


def polygon(
    scene: Scene,
    points: Iterable[Point],
    color: Color,
    fill: Optional[Color] = None,
    fill_opacity: float = 0.25,
    width: float = 2.0,
    hidden: bool = False,
) -> DrawableId:
    style = Style(color, width=width, fill=fill, fill_opacity=fill_opacity)
    return spawn_shape(scene, Shape("polygon", list(points)), style, hidden)


def ellipse(
    scene: Scene,
    center: Point,
    rx: float,
    ry: float,
    color: Color,
    width: float = 2.0,
    hidden: bool = False,
) -> DrawableId:
    shape = Shape("ellipse", [center], radius=rx, radius_y=ry)
    return spawn_shape(scene, shape, Style(color, width=width), hidden)


def arc(
    scene: Scene,
    center: Point,
    radius: float,
    start_angle: float,
    end_angle: float,
    color: Color,
    width: float = 2.0,
    hidden: bool = False,
) -> DrawableId:
    shape = Shape("arc", [center], radius=radius, start_angle=start_angle, end_angle=end_angle)
    return spawn_shape(scene, shape, Style(color, width=width), hidden)


def text(
    scene: Scene,
    at: Point,
    content: str,
    color: Color,
    font_size: int = 16,
    bold: bool = False,
    align: str = "left",
    hidden: bool = False,
) -> DrawableId:
    """Text anchored at its top-left, or at its top-centre with ``align="center"``."""
    style = Style(color, font_size=font_size, bold=bold, align=align)
    return spawn_shape(scene, Shape("text", [at], text=content), style, hidden)


def right_angle_points(vertex: Point, toward_a: Point, toward_b: Point, size: float) -> list[Point]:
    """The three corners of a right-angle mark at ``vertex``."""
    u = scale(unit(sub(toward_a, vertex)), size)
    v = scale(unit(sub(toward_b, vertex)), size)
    return [add(vertex, u), add(add(vertex, u), v), add(vertex, v)]


def right_angle(
    scene: Scene,
    vertex: Point,
    toward_a: Point,
    toward_b: Point,
    color: Color,
    size: float = 10.0,
    hidden: bool = False,
) -> DrawableId:
    return polyline(
        scene, right_angle_points(vertex, toward_a, toward_b, size), color, width=1.5, hidden=hidden,
    )


def move(scene: Scene, did: DrawableId, *points: Point) -> bool:
    """Replace a live drawable's points. False if it is gone."""
    if not scene.has(did, Shape):
        return False
    scene.get(did, Shape).points = list(points)
    return True


def set_text(scene: Scene, did: DrawableId, content: str) -> bool:
    if not scene.has(did, Shape):
        return False
    scene.get(did, Shape).text = content
    return True
