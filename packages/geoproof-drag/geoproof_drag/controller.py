"""DragController - pointer drags bound to curve constraints."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional, Sequence

from geoproof_draw import Hover, Shape, pulse
from geoproof_draw import factories as shapes
from geoproof_geometry import Point, distance
from geoproof_schedule import arm_timer, cancel_timer

if TYPE_CHECKING:
    from geoproof import Clock, DrawableId, Scene, TickContext
    from geoproof_drag.constraints import Constraint
    from geoproof_schedule import Timer, TimerHandlers
    from geoproof_steps import ElementRegistry

logger = logging.getLogger(__name__)

TIMER_NAME = "drag.apply"
DEFAULT_THROTTLE_MS = 10
HINT_COLOR = (119, 119, 119)


@dataclass
class DragHandle:
    """A draggable point: the registry key of its marker, its curve and
    the callback that rebuilds everything depending on it."""

    key: str
    constraint: Constraint
    on_move: Callable[[Point], None]
    hit_radius: float = 14.0


class DragController:
    def __init__(
        self,
        scene: Scene,
        registry: ElementRegistry,
        handlers: TimerHandlers,
        clock: Clock,
        throttle_ms: float = DEFAULT_THROTTLE_MS,
        gate: Optional[Callable[[], bool]] = None,
    ) -> None:
        self._scene = scene
        self._registry = registry
        self._clock = clock
        self._throttle = clock.ticks_for(throttle_ms)
        self.gate: Callable[[], bool] = gate or (lambda: True)
        self._handles: list[DragHandle] = []
        self._enabled = False
        self._grabbed: DragHandle | None = None
        self._grabbed_id: DrawableId | None = None
        self._pending: Point | None = None
        self._timer: DrawableId | None = None
        self._hovered: DrawableId | None = None
        self._hint: DrawableId | None = None
        handlers.register(TIMER_NAME, self._on_timer)
        scene.on_despawn(self._forget)

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def grabbed(self) -> DragHandle | None:
        return self._grabbed

    @property
    def hovered(self) -> DrawableId | None:
        return self._hovered

    def enable(self, handles: Sequence[DragHandle], hint: str | None = None) -> bool:
        """Turn drag mode on. False when already on or not yet allowed."""
        if self._enabled or not self.gate():
            return False
        self._enabled = True
        self._handles = list(handles)
        if hint:
            self._hint = shapes.text(self._scene, Point(20, 60), hint, HINT_COLOR, font_size=16)
        for handle in self._handles:
            did = self._registry.first(handle.key)
            if did is not None:
                pulse(self._scene, did, self._clock.ticks_for(1000))
        logger.debug("drag enabled for %s", [h.key for h in self._handles])
        return True

    def disable(self) -> None:
        if not self._enabled:
            return
        self._enabled = False
        self._flush_cancel()
        self._grabbed = self._grabbed_id = None
        self._set_hover(None)
        if self._hint is not None:
            self._scene.despawn(self._hint)
            self._hint = None
        self._handles = []
        logger.debug("drag disabled")

    def toggle(self, handles: Sequence[DragHandle], hint: str | None = None) -> bool:
        if self._enabled:
            self.disable()
            return False
        return self.enable(handles, hint)

    def pointer_down(self, pos: Point) -> bool:
        """Grab the handle under the pointer, if any."""
        if not self._enabled:
            return False
        hit = self._hit(pos)
        if hit is None:
            return False
        self._grabbed, self._grabbed_id = hit
        return True

    def pointer_move(self, pos: Point) -> None:
        if not self._enabled:
            return
        if self._grabbed is None:
            hit = self._hit(pos)
            self._set_hover(hit[1] if hit else None)
            return
        # Trailing debounce: only the last position in the window is applied.
        self._pending = Point(*pos)
        cancel_timer(self._scene, self._timer)
        self._timer = arm_timer(self._scene, TIMER_NAME, self._throttle)

    def pointer_up(self) -> None:
        if self._grabbed is not None and self._pending is not None:
            cancel_timer(self._scene, self._timer)
            self._timer = None
            self._apply()
        self._grabbed = self._grabbed_id = None
        self._pending = None

    def _hit(self, pos: Point) -> tuple[DragHandle, DrawableId] | None:
        best = None
        for handle in self._handles:
            did = self._registry.first(handle.key)
            if did is None or not self._scene.has(did, Shape):
                continue
            gap = distance(self._scene.get(did, Shape).anchor, pos)
            if gap <= handle.hit_radius and (best is None or gap < best[0]):
                best = (gap, handle, did)
        return (best[1], best[2]) if best else None

    def _set_hover(self, did: DrawableId | None) -> None:
        if did == self._hovered:
            return
        if self._hovered is not None:
            self._scene.detach(self._hovered, Hover)
        self._hovered = did
        if did is not None:
            self._scene.attach(did, Hover())

    def _on_timer(self, scene: Scene, ctx: TickContext, timer: Timer) -> None:
        self._timer = None
        self._apply()

    def _apply(self) -> None:
        handle, raw = self._grabbed, self._pending
        self._pending = None
        if handle is None or raw is None:
            return
        if self._registry.first(handle.key) is None:
            logger.debug("drag target %s is gone; dropping move", handle.key)
            return
        point = handle.constraint.apply(raw)
        logger.debug("drag %s -> (%.1f, %.1f)", handle.key, point.x, point.y)
        handle.on_move(point)

    def _flush_cancel(self) -> None:
        cancel_timer(self._scene, self._timer)
        self._timer = None
        self._pending = None

    def _forget(self, scene: Scene, did: DrawableId) -> None:
        if did == self._hovered:
            self._hovered = None
        if did == self._hint:
            self._hint = None
        if did == self._grabbed_id:
            self._grabbed = self._grabbed_id = None
            self._flush_cancel()
