"""Step sidebar and bottom status bar."""
from __future__ import annotations

import pygame

from ui.constants import (
    ACTIVE_COLOR,
    LABEL_COLOR,
    SIDEBAR_BG,
    SIDEBAR_BORDER,
    SIDEBAR_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
)


def draw_sidebar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    problem_name: str,
    titles: list[str],
    current_step: int,
    auto_play: bool,
    drag: bool,
    readouts: dict[str, str],
) -> None:
    """Draw right-side panel: steps, modes and live measurements."""
    screen_w, screen_h = surface.get_size()
    x = screen_w - SIDEBAR_W
    h = screen_h - STATUS_H

    pygame.draw.rect(surface, SIDEBAR_BG, (x, 0, SIDEBAR_W, h))
    pygame.draw.line(surface, SIDEBAR_BORDER, (x, 0), (x, h))

    pad = 10
    line_h = 22
    cx = x + pad
    cy = 8

    surface.blit(font.render(problem_name, True, LABEL_COLOR), (cx, cy))
    cy += line_h + 6

    surface.blit(font.render("Steps:", True, TEXT_DIM), (cx, cy))
    cy += line_h
    for i, title in enumerate(titles, start=1):
        active = i == current_step
        prefix = "> " if active else "  "
        color = ACTIVE_COLOR if active else (TEXT_COLOR if i < current_step else TEXT_DIM)
        surface.blit(font.render(f"{prefix}{i}: {title}", True, color), (cx, cy))
        cy += line_h - 2
    cy += 10

    auto_color = ACTIVE_COLOR if auto_play else TEXT_DIM
    surface.blit(font.render(f"Auto: {'ON' if auto_play else 'OFF'}", True, auto_color), (cx, cy))
    cy += line_h
    drag_color = ACTIVE_COLOR if drag else TEXT_DIM
    surface.blit(font.render(f"Drag: {'ON' if drag else 'OFF'}", True, drag_color), (cx, cy))
    cy += line_h + 8

    if readouts:
        surface.blit(font.render("Measurements:", True, TEXT_DIM), (cx, cy))
        cy += line_h
        for name, value in readouts.items():
            surface.blit(font.render(f"{name} = {value}", True, TEXT_COLOR), (cx, cy))
            cy += line_h - 2


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font, has_parameters: bool) -> None:
    """Draw bottom key-bindings bar."""
    screen_w, screen_h = surface.get_size()
    y = screen_h - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, screen_w, STATUS_H))
    pygame.draw.line(surface, SIDEBAR_BORDER, (0, y), (screen_w, y))

    text = "[1-5] Step  [C] Clear  [A] Auto  [D] Drag  [Tab] Next problem  [Esc] Quit"
    if has_parameters:
        text += "  [ [ ] ] ω  [ , . ] n  [ ; ' ] a"
    label = font.render(text, True, TEXT_DIM)
    surface.blit(label, (8, y + STATUS_H // 2 - label.get_height() // 2))
