"""AutoPlay - walks a StepEngine through every step on a fixed cadence."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from geoproof_schedule import arm_timer, cancel_timer

if TYPE_CHECKING:
    from geoproof import Clock, DrawableId, Scene, TickContext
    from geoproof_schedule import Timer, TimerHandlers
    from geoproof_steps.engine import StepEngine

logger = logging.getLogger(__name__)

TIMER_NAME = "autoplay.advance"
DEFAULT_INTERVAL_MS = 2500


class AutoPlay:
    def __init__(
        self,
        steps: StepEngine,
        handlers: TimerHandlers,
        clock: Clock,
        interval_ms: float = DEFAULT_INTERVAL_MS,
    ) -> None:
        self._steps = steps
        self._interval = clock.ticks_for(interval_ms)
        self._timer: DrawableId | None = None
        self._on_start: list[Callable[[], None]] = []
        self.active = False
        self.cursor = 0
        handlers.register(TIMER_NAME, self._on_timer)

    @property
    def interval_ticks(self) -> int:
        return self._interval

    def on_start(self, callback: Callable[[], None]) -> None:
        self._on_start.append(callback)

    def start(self) -> None:
        if self.active:
            return
        self._steps.reset()
        self.active = True
        for callback in self._on_start:
            callback()
        self.cursor = 1
        logger.debug("auto-play started")
        self.advance()

    def advance(self) -> None:
        # A timer that outlived stop() lands here and does nothing.
        if not self.active:
            return
        if self.cursor > self._steps.step_count:
            self.stop()
            return
        self._steps.go_to_step(self.cursor)
        self._timer = arm_timer(self._steps.scene, TIMER_NAME, self._interval)

    def stop(self) -> None:
        if self.active:
            logger.debug("auto-play stopped at step %d", self._steps.current_step)
        cancel_timer(self._steps.scene, self._timer)
        self._timer = None
        self.active = False
        self.cursor = 0

    def _on_timer(self, scene: Scene, ctx: TickContext, timer: Timer) -> None:
        self._timer = None
        if not self.active:
            return
        self.cursor += 1
        self.advance()
