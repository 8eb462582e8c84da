"""ProblemSession - everything one open problem needs, wired together."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from geoproof import Engine
from geoproof_drag import DEFAULT_THROTTLE_MS, DragController
from geoproof_draw import factories as shapes
from geoproof_problems.base import LABEL_COLOR, Canvas
from geoproof_schedule import TimerHandlers, make_timer_system
from geoproof_steps import AutoPlay, ElementRegistry, StepEngine
from geoproof_tween import Timeline, make_tween_system

if TYPE_CHECKING:
    from geoproof import DrawableId, Scene
    from geoproof_geometry import Point
    from geoproof_problems.base import Problem
    from geoproof_steps import StepDefinition

logger = logging.getLogger(__name__)


class ProblemSession:
    """Owns the engine, the registry, the step engine, drag and auto-play.

    Systems run tweens first, then the timeline, then timers, so a beat
    sees tweens finished this tick and a timer handler sees the beats.
    """

    def __init__(
        self,
        problem: Problem,
        width: Optional[float] = None,
        height: Optional[float] = None,
        tps: int = 60,
        throttle_ms: float = DEFAULT_THROTTLE_MS,
    ) -> None:
        self.problem = problem
        self.engine = Engine(tps=tps)
        self.handlers = TimerHandlers()
        self.timeline = Timeline()
        self.engine.add_system(make_tween_system())
        self.engine.add_system(self.timeline)
        self.engine.add_system(make_timer_system(on_fire=self.handlers.fire))

        width = problem.width if width is None else width
        height = problem.height if height is None else height
        self.registry = ElementRegistry(self.scene)
        self.canvas = Canvas(self.scene, self.registry, self.engine.clock, width, height)
        self._layout(width, height)

        self.steps = StepEngine(
            self.scene, self.registry, problem.build_steps(self.canvas), self.timeline, self._explain,
        )
        self.drag = DragController(
            self.scene, self.registry, self.handlers, self.engine.clock, throttle_ms, self._drag_allowed,
        )
        self.autoplay = AutoPlay(self.steps, self.handlers, self.engine.clock, problem.autoplay_ms)
        self.autoplay.on_start(self.drag.disable)

    @property
    def scene(self) -> Scene:
        return self.engine.scene

    @property
    def current_step(self) -> int:
        return self.steps.current_step

    @property
    def step_count(self) -> int:
        return self.steps.step_count

    def titles(self) -> list[str]:
        return [step.title for step in self.steps.steps]

    def select_step(self, index: int) -> None:
        self.autoplay.stop()
        self.drag.disable()
        self.steps.go_to_step(index)

    def clear(self) -> None:
        """Back to an empty canvas with nothing running."""
        self.autoplay.stop()
        self.drag.disable()
        self.steps.reset()

    def toggle_auto_play(self) -> bool:
        if self.autoplay.active:
            self.autoplay.stop()
        else:
            self.autoplay.start()
        return self.autoplay.active

    def toggle_drag(self) -> bool:
        """Flip drag mode. Stays off before the problem's first draggable step."""
        if self.drag.enabled:
            self.drag.disable()
            return False
        if not self.drag.enable(self.problem.drag_handles(self.canvas), self.problem.drag_hint):
            logger.debug("drag not available on step %d of %s", self.current_step, self.problem.id)
            return False
        return True

    def pointer_down(self, pos: Point) -> bool:
        return self.drag.pointer_down(pos)

    def pointer_move(self, pos: Point) -> None:
        self.drag.pointer_move(pos)

    def pointer_up(self) -> None:
        self.drag.pointer_up()

    def resize(self, width: float, height: float) -> None:
        """Lay the problem out for a new canvas and redraw the current step still."""
        dragging = self.drag.enabled
        self.drag.disable()
        self._layout(width, height)
        self.steps.redraw()
        if dragging:
            self.toggle_drag()

    def set_parameter(self, name: str, value: float) -> None:
        self.problem.set_parameter(name, value)
        if self.current_step > 0:
            self.steps.redraw()

    def readouts(self) -> dict[str, str]:
        return self.problem.readouts(self.current_step)

    def tick(self) -> None:
        self.engine.step()

    def _layout(self, width: float, height: float) -> None:
        self.canvas.width, self.canvas.height = width, height
        self.problem.width, self.problem.height = width, height
        self.problem.layout(width, height)

    def _drag_allowed(self) -> bool:
        first = self.problem.drag_min_step
        return first is not None and self.current_step >= first

    def _explain(self, step: StepDefinition) -> Optional[DrawableId]:
        if not step.explanation:
            return None
        return shapes.text(
            self.scene, self.problem.explanation_anchor(), step.explanation, LABEL_COLOR, font_size=16,
        )
