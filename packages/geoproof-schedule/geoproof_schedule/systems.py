"""Timer system factory and arming helpers."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from geoproof_schedule.components import Timer

if TYPE_CHECKING:
    from geoproof import DrawableId, Scene, TickContext


def make_timer_system(
    on_fire: Callable[[Scene, TickContext, DrawableId, Timer], None],
) -> Callable[[Scene, TickContext], None]:
    """Return a system that counts Timers down and fires them at zero.

    The timer's drawable is destroyed before ``on_fire`` runs, so a handler
    can arm a fresh timer under the same name.
    """

    def timer_system(scene: Scene, ctx: TickContext) -> None:
        for did, (timer,) in list(scene.query(Timer)):
            # Cancelled by an earlier handler this tick.
            if not scene.has(did, Timer):
                continue
            timer.remaining -= 1
            if timer.remaining <= 0:
                scene.despawn(did)
                on_fire(scene, ctx, did, timer)

    return timer_system


def arm_timer(scene: Scene, name: str, ticks: int) -> DrawableId:
    """Spawn a drawable carrying a one-shot timer and return its id."""
    did = scene.spawn()
    scene.attach(did, Timer(name=name, remaining=max(1, ticks)))
    return did


def cancel_timer(scene: Scene, did: DrawableId | None) -> bool:
    """Destroy a pending timer. False if it already fired or was cancelled."""
    if did is None or not scene.has(did, Timer):
        return False
    scene.despawn(did)
    return True
