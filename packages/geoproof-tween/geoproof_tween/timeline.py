"""Timeline - runs reveal generators beat by beat.

A reveal is a generator that starts tweens and then yields what it is
waiting for before the next beat: a ``Delay`` of some ticks, or
``UntilSettled`` drawables whose tweens must finish first. Beats run in
the order they were written, which is how "draw the line, then the label,
then the note" stays ordered without nesting completion callbacks.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generator, Iterable, Union

from geoproof_tween.components import Tween
from geoproof_tween.systems import settle_tweens

if TYPE_CHECKING:
    from geoproof import Scene, TickContext

logger = logging.getLogger(__name__)

# Upper bound on beats when fast-forwarding, so a looping reveal cannot hang.
_MAX_BEATS = 10_000


@dataclass
class Delay:
    ticks: int


@dataclass(frozen=True)
class UntilSettled:
    drawables: tuple[int, ...]

    @classmethod
    def of(cls, drawables: Iterable[int]) -> UntilSettled:
        return cls(tuple(drawables))


Wait = Union[Delay, UntilSettled, None]
Reveal = Generator[Wait, None, None]


@dataclass(eq=False)
class _Task:
    name: str
    reveal: Reveal
    wait: Wait = None


class Timeline:
    """Cooperative runner for reveal generators. Add it as a system."""

    def __init__(self) -> None:
        self._tasks: list[_Task] = []

    @property
    def running(self) -> bool:
        return bool(self._tasks)

    def names(self) -> list[str]:
        return [task.name for task in self._tasks]

    def start(self, scene: Scene, reveal: Reveal, name: str = "") -> None:
        """Run the first beat now and schedule the rest."""
        task = _Task(name=name, reveal=reveal)
        if self._advance(scene, task):
            self._tasks.append(task)

    def __call__(self, scene: Scene, ctx: TickContext) -> None:
        for task in list(self._tasks):
            # A beat earlier this tick may have cancelled everything.
            if task not in self._tasks:
                continue
            if self._satisfied(scene, task.wait) and not self._advance(scene, task):
                self._tasks.remove(task)

    def cancel(self) -> None:
        """Drop every reveal where it stands."""
        tasks, self._tasks = self._tasks, []
        for task in tasks:
            task.reveal.close()

    def finish(self, scene: Scene) -> None:
        """Fast-forward every reveal to its final state."""
        tasks, self._tasks = self._tasks, []
        for task in tasks:
            for _ in range(_MAX_BEATS):
                settle_tweens(scene)
                if not self._advance(scene, task):
                    break
            else:
                logger.warning("reveal %r did not finish; closing it", task.name)
                task.reveal.close()
        settle_tweens(scene)

    def _satisfied(self, scene: Scene, wait: Wait) -> bool:
        if wait is None:
            return True
        if isinstance(wait, Delay):
            wait.ticks -= 1
            return wait.ticks <= 0
        return not any(scene.has(did, Tween) for did in wait.drawables)

    def _advance(self, scene: Scene, task: _Task) -> bool:
        """Run beats until one has to wait. False once the reveal is done."""
        while True:
            try:
                wait = next(task.reveal)
            except StopIteration:
                return False
            if isinstance(wait, Delay) and wait.ticks <= 0:
                continue
            if isinstance(wait, UntilSettled) and self._satisfied(scene, wait):
                continue
            task.wait = wait
            return True
