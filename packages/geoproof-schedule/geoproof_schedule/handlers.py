"""TimerHandlers registry."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from geoproof import DrawableId, Scene, TickContext
    from geoproof_schedule.components import Timer

TimerHandler = Callable[["Scene", "TickContext", "Timer"], None]


class TimerHandlers:
    """Maps timer names to the callbacks run when they fire."""

    def __init__(self) -> None:
        self._handlers: dict[str, TimerHandler] = {}

    def register(self, name: str, fn: TimerHandler) -> None:
        """Register a named handler. Overwrites if already registered."""
        self._handlers[name] = fn

    def fire(self, scene: Scene, ctx: TickContext, did: DrawableId, timer: Timer) -> None:
        """Run the handler for ``timer.name``. Raises KeyError if not registered."""
        self._handlers[timer.name](scene, ctx, timer)

    def has(self, name: str) -> bool:
        return name in self._handlers

    def names(self) -> list[str]:
        return list(self._handlers)
