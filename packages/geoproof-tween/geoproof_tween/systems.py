"""System factory for tween interpolation, plus cancellation helpers."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Iterable

from geoproof_tween.components import Tween
from geoproof_tween.easing import EASINGS

if TYPE_CHECKING:
    from geoproof import DrawableId, Scene, TickContext


def _target(scene: Scene, did: DrawableId, tween: Tween) -> Any | None:
    target_type = scene.component_type(tween.target)
    if target_type is None or not scene.has(did, target_type):
        return None
    target_comp = scene.get(did, target_type)
    if not hasattr(target_comp, tween.field):
        return None
    return target_comp


def make_tween_system(
    on_complete: Callable[[Scene, TickContext, DrawableId, Tween], None] | None = None,
) -> Callable[[Scene, TickContext], None]:
    def tween_system(scene: Scene, ctx: TickContext) -> None:
        for did, (tween,) in list(scene.query(Tween)):
            # An earlier callback this tick may have destroyed the drawable.
            if not scene.has(did, Tween):
                continue
            if tween.delay > 0:
                tween.delay -= 1
                continue

            tween.elapsed += 1
            t = min(tween.elapsed / tween.duration, 1.0) if tween.duration > 0 else 1.0

            easing_fn = EASINGS.get(tween.easing)
            if easing_fn is None:
                continue

            target_comp = _target(scene, did, tween)
            if target_comp is None:
                continue

            value = tween.start_val + (tween.end_val - tween.start_val) * easing_fn(t)
            setattr(target_comp, tween.field, value)

            if t >= 1.0:
                setattr(target_comp, tween.field, tween.end_val)
                if tween.yoyo:
                    tween.start_val, tween.end_val = tween.end_val, tween.start_val
                    tween.elapsed = 0
                    tween.yoyo = False
                    continue
                scene.detach(did, Tween)
                if on_complete is not None:
                    on_complete(scene, ctx, did, tween)

    return tween_system


def settle_tweens(scene: Scene, drawables: Iterable[DrawableId] | None = None) -> int:
    """Jump in-flight tweens to their resting value and detach them.

    A yoyo tween rests at its start value. Returns how many were settled.
    """
    targets = list(drawables) if drawables is not None else [
        did for did, _ in scene.query(Tween)
    ]
    settled = 0
    for did in targets:
        if not scene.has(did, Tween):
            continue
        tween = scene.get(did, Tween)
        target_comp = _target(scene, did, tween)
        if target_comp is not None:
            rest = tween.start_val if tween.yoyo else tween.end_val
            setattr(target_comp, tween.field, rest)
        scene.detach(did, Tween)
        settled += 1
    return settled


def cancel_tweens(scene: Scene, drawables: Iterable[DrawableId] | None = None) -> int:
    """Detach in-flight tweens, leaving targets wherever they are."""
    targets = list(drawables) if drawables is not None else [
        did for did, _ in scene.query(Tween)
    ]
    cancelled = 0
    for did in targets:
        if scene.has(did, Tween):
            scene.detach(did, Tween)
            cancelled += 1
    return cancelled
