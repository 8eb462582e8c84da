"""Draws the scene's shapes with their reveal state applied."""
from __future__ import annotations

import math

import pygame

from geoproof_draw import Hover, Reveal, Shape, Style
from ui.constants import ARC_SEGMENTS

_fonts: dict[tuple[int, bool], pygame.font.Font] = {}


def font_for(size: int, bold: bool = False) -> pygame.font.Font:
    key = (size, bold)
    if key not in _fonts:
        _fonts[key] = pygame.font.SysFont("dejavusans,arial", size, bold=bold)
    return _fonts[key]


def _lerp(a, b, t: float) -> tuple[float, float]:
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def _partial(points, progress: float) -> list[tuple[float, float]]:
    """The leading ``progress`` fraction of a polyline, by length."""
    if progress >= 1.0 or len(points) < 2:
        return [tuple(p) for p in points]
    lengths = [math.dist(a, b) for a, b in zip(points, points[1:])]
    budget = sum(lengths) * max(progress, 0.0)
    out = [tuple(points[0])]
    for (a, b), length in zip(zip(points, points[1:]), lengths):
        if budget >= length:
            out.append(tuple(b))
            budget -= length
            continue
        if length > 0:
            out.append(_lerp(a, b, budget / length))
        break
    return out


def _dashed(surface, color, points, width: int, dash: tuple[int, int]) -> None:
    on, off = dash
    for a, b in zip(points, points[1:]):
        length = math.dist(a, b)
        pos = 0.0
        while pos < length:
            end = min(pos + on, length)
            pygame.draw.line(surface, color, _lerp(a, b, pos / length), _lerp(a, b, end / length), width)
            pos = end + off


def _stroke(surface, color, points, style: Style) -> None:
    if len(points) < 2 or style.width <= 0:
        return
    width = max(1, round(style.width))
    if style.dash:
        _dashed(surface, color, points, width, style.dash)
    else:
        pygame.draw.lines(surface, color, False, points, width)


def _arc_points(shape: Shape, progress: float) -> list[tuple[float, float]]:
    cx, cy = shape.anchor
    sweep = (shape.end_angle - shape.start_angle) * min(max(progress, 0.0), 1.0)
    count = max(2, int(ARC_SEGMENTS * abs(sweep) / math.pi) + 1)
    return [
        (cx + shape.radius * math.cos(shape.start_angle + sweep * k / (count - 1)),
         cy + shape.radius * math.sin(shape.start_angle + sweep * k / (count - 1)))
        for k in range(count)
    ]


def _draw_text(surface, shape: Shape, style: Style, color) -> None:
    font = font_for(style.font_size, style.bold)
    x, y = shape.anchor
    for line in (shape.text or "").split("\n"):
        image = font.render(line, True, color)
        left = x - image.get_width() / 2 if style.align == "center" else x
        surface.blit(image, (left, y))
        y += font.get_linesize()


def _draw_shape(surface, shape: Shape, style: Style, reveal: Reveal, hovered: Hover | None) -> None:
    color = style.color
    if shape.kind == "point":
        scale = reveal.scale * (hovered.scale if hovered else 1.0)
        radius = max(0, round(shape.radius * scale))
        if radius:
            pygame.draw.circle(surface, color, shape.anchor, radius)
            if hovered:
                pygame.draw.circle(surface, hovered.outline, shape.anchor, radius, 2)
    elif shape.kind in ("segment", "polyline"):
        _stroke(surface, color, _partial(shape.points, reveal.progress), style)
    elif shape.kind == "arc":
        _stroke(surface, color, _arc_points(shape, reveal.progress), style)
    elif shape.kind == "ellipse":
        cx, cy = shape.anchor
        rect = pygame.Rect(0, 0, 2 * shape.radius, 2 * shape.radius_y)
        rect.center = (round(cx), round(cy))
        pygame.draw.ellipse(surface, color, rect, max(1, round(style.width)))
    elif shape.kind == "polygon":
        if len(shape.points) < 3:
            return
        if style.fill is not None:
            layer = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
            pygame.draw.polygon(layer, (*style.fill, round(255 * style.fill_opacity)), shape.points)
            surface.blit(layer, (0, 0))
        if style.width > 0:
            pygame.draw.polygon(surface, color, shape.points, max(1, round(style.width)))
    elif shape.kind == "text":
        _draw_text(surface, shape, style, color)


def draw_scene(surface: pygame.Surface, scene) -> None:
    """Draw every visible shape in spawn order, faded by its opacity."""
    size = surface.get_size()
    for did, (shape, style, reveal) in scene.query(Shape, Style, Reveal):
        if not reveal.visible or reveal.opacity <= 0:
            continue
        hovered = scene.get(did, Hover) if scene.has(did, Hover) else None
        if reveal.opacity >= 1.0:
            _draw_shape(surface, shape, style, reveal, hovered)
            continue
        layer = pygame.Surface(size, pygame.SRCALPHA)
        _draw_shape(layer, shape, style, reveal, hovered)
        layer.set_alpha(round(255 * reveal.opacity))
        surface.blit(layer, (0, 0))
