"""Proof Gallery — step through guided geometry proofs.

Exercises geoproof, geoproof-tween, geoproof-schedule, geoproof-draw,
geoproof-steps, geoproof-drag and geoproof-problems.

Controls:
  1-5     Go to step
  C       Clear the canvas
  A       Toggle auto-play
  D       Toggle dragging of the problem's points
  Tab     Next problem
  [ ]     Decrease / increase ω (set intersection)
  , .     Decrease / increase n (set intersection)
  ; '     Decrease / increase a (set intersection)
  Drag    Move a highlighted point while dragging is on
  Esc     Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from geoproof_geometry import Point
from geoproof_problems import PROBLEMS, ProblemSession, create, list_problems
from ui.constants import (
    CANVAS_BG,
    CANVAS_H,
    CANVAS_W,
    FPS,
    MIN_CANVAS_H,
    MIN_CANVAS_W,
    PARAM_STEP,
    SCREEN_H,
    SCREEN_W,
    SIDEBAR_W,
    STATUS_H,
    TPS,
)
from ui.renderer import draw_scene
from ui.status import draw_sidebar, draw_status_bar

logger = logging.getLogger("proof_gallery")

STEP_KEYS = {
    pygame.K_1: 1,
    pygame.K_2: 2,
    pygame.K_3: 3,
    pygame.K_4: 4,
    pygame.K_5: 5,
}

PARAM_KEYS = {
    pygame.K_LEFTBRACKET: ("omega", -1),
    pygame.K_RIGHTBRACKET: ("omega", 1),
    pygame.K_COMMA: ("n", -1),
    pygame.K_PERIOD: ("n", 1),
    pygame.K_SEMICOLON: ("a", -1),
    pygame.K_QUOTE: ("a", 1),
}


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Proof Gallery — geoproof visual demo")
    p.add_argument("--problem", choices=sorted(PROBLEMS), default=list_problems()[0]["id"],
                   help="Problem to open first")
    p.add_argument("--tps", type=int, default=TPS, help=f"Ticks per second (default: {TPS})")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level (default: WARNING)")
    return p.parse_args()


class Gallery:
    """The open session and which problem it belongs to."""

    def __init__(self, problem_id: str, tps: int, canvas_size: tuple[int, int]) -> None:
        self.ids = [entry["id"] for entry in list_problems()]
        self.tps = tps
        self.canvas_size = canvas_size
        self.session = self._open(problem_id)

    def _open(self, problem_id: str) -> ProblemSession:
        self.problem_id = problem_id
        width, height = self.canvas_size
        logger.info("opening %s", problem_id)
        return ProblemSession(create(problem_id, width, height), tps=self.tps)

    def next_problem(self) -> None:
        index = (self.ids.index(self.problem_id) + 1) % len(self.ids)
        self.session.clear()
        self.session = self._open(self.ids[index])

    def resize(self, width: int, height: int) -> None:
        self.canvas_size = (max(MIN_CANVAS_W, width - SIDEBAR_W), max(MIN_CANVAS_H, height - STATUS_H))
        self.session.resize(*self.canvas_size)

    def nudge(self, name: str, direction: int) -> None:
        params = self.session.problem.parameters()
        if name not in params:
            return
        try:
            self.session.set_parameter(name, params[name] + direction * PARAM_STEP[name])
        except ValueError as exc:
            logger.info("ignoring %s nudge: %s", name, exc)

    def handle(self, event: pygame.event.Event) -> bool:
        """Route one input event to the open session. False means quit."""
        session = self.session
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key in STEP_KEYS and STEP_KEYS[event.key] <= session.step_count:
                session.select_step(STEP_KEYS[event.key])
            elif event.key == pygame.K_c:
                session.clear()
            elif event.key == pygame.K_a:
                session.toggle_auto_play()
            elif event.key == pygame.K_d:
                session.toggle_drag()
            elif event.key == pygame.K_TAB:
                self.next_problem()
            elif event.key in PARAM_KEYS:
                self.nudge(*PARAM_KEYS[event.key])
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            session.pointer_down(Point(*event.pos))
        elif event.type == pygame.MOUSEMOTION:
            session.pointer_move(Point(*event.pos))
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            session.pointer_up()
        return True


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H), pygame.RESIZABLE)
    pygame.display.set_caption("Proof Gallery — geoproof demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("dejavusans,arial", 13)

    gallery = Gallery(args.problem, args.tps, (CANVAS_W, CANVAS_H))

    tick_interval = 1.0 / args.tps
    accumulator = 0.0
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode(event.size, pygame.RESIZABLE)
                gallery.resize(*event.size)
            elif not gallery.handle(event):
                running = False

        # --- Tick ---
        while accumulator >= tick_interval:
            gallery.session.tick()
            accumulator -= tick_interval

        # --- Render ---
        session = gallery.session
        screen.fill(CANVAS_BG)
        draw_scene(screen, session.scene)
        draw_sidebar(
            screen,
            font,
            problem_name=session.problem.name,
            titles=session.titles(),
            current_step=session.current_step,
            auto_play=session.autoplay.active,
            drag=session.drag.enabled,
            readouts=session.readouts(),
        )
        draw_status_bar(screen, font, bool(session.problem.parameters()))

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
