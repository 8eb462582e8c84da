"""geoproof-draw - Drawable components, spawners and reveal effects."""
from __future__ import annotations

from geoproof_draw.animation import (
    BOUNCE,
    FADE,
    GROW,
    POP,
    appear,
    emphasize,
    fade,
    grow,
    hide,
    pulse,
    reveal,
    reveal_in_order,
    show,
    together,
)
from geoproof_draw.components import Color, Hover, Reveal, Shape, Style
from geoproof_draw.factories import move, set_text, spawn_shape

__all__ = [
    "Color",
    "Hover",
    "Reveal",
    "Shape",
    "Style",
    "spawn_shape",
    "move",
    "set_text",
    "GROW",
    "POP",
    "FADE",
    "BOUNCE",
    "appear",
    "emphasize",
    "fade",
    "grow",
    "hide",
    "pulse",
    "reveal",
    "reveal_in_order",
    "show",
    "together",
]
