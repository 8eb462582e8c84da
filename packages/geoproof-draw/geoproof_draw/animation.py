"""Reveal effects built from tweens, and the beats that sequence them."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Sequence

from geoproof import component_key
from geoproof_draw.components import Reveal, Shape
from geoproof_tween import Delay, Tween, UntilSettled

if TYPE_CHECKING:
    from geoproof import DrawableId, Scene
    from geoproof_tween import Reveal as RevealBeats

logger = logging.getLogger(__name__)

_REVEAL = component_key(Reveal)

GROW = "grow"
POP = "pop"
FADE = "fade"
BOUNCE = "bounce"

_DEFAULT_EFFECT = {
    "point": POP,
    "segment": GROW,
    "polyline": GROW,
    "arc": GROW,
    "ellipse": FADE,
    "polygon": FADE,
    "text": FADE,
}


def effect_for(scene: Scene, did: DrawableId) -> str:
    if scene.has(did, Reveal) and scene.get(did, Reveal).effect:
        return scene.get(did, Reveal).effect
    if not scene.has(did, Shape):
        return FADE
    return _DEFAULT_EFFECT.get(scene.get(did, Shape).kind, FADE)


def _start(
    scene: Scene,
    did: DrawableId,
    field: str,
    start: float,
    end: float,
    ticks: int,
    easing: str,
    delay: int = 0,
) -> bool:
    if not scene.has(did, Reveal):
        logger.debug("skipping %s on drawable %d: gone", field, did)
        return False
    reveal = scene.get(did, Reveal)
    reveal.visible = True
    setattr(reveal, field, start)
    scene.attach(did, Tween(
        target=_REVEAL,
        field=field,
        start_val=start,
        end_val=end,
        duration=max(1, ticks),
        easing=easing,
        delay=delay,
    ))
    return True


def grow(scene: Scene, did: DrawableId, ticks: int, easing: str = "power2_out", delay: int = 0) -> bool:
    """Draw a stroke from its first point to its last."""
    return _start(scene, did, "progress", 0.0, 1.0, ticks, easing, delay)


def appear(scene: Scene, did: DrawableId, ticks: int, easing: str = "back_out", delay: int = 0) -> bool:
    """Pop in from nothing with a slight overshoot."""
    if scene.has(did, Reveal):
        scene.get(did, Reveal).opacity = 1.0
    return _start(scene, did, "scale", 0.0, 1.0, ticks, easing, delay)


def fade(
    scene: Scene,
    did: DrawableId,
    ticks: int,
    to: float = 1.0,
    easing: str = "ease_in_out",
    delay: int = 0,
) -> bool:
    if not scene.has(did, Reveal):
        return False
    state = scene.get(did, Reveal)
    start = state.opacity if state.visible else 0.0
    if start == to and to > 0:
        start = 0.0
    return _start(scene, did, "opacity", start, to, ticks, easing, delay)


def pulse(scene: Scene, did: DrawableId, ticks: int, peak: float = 1.3) -> bool:
    """Swell once and come back, to show a handle can be grabbed."""
    if not scene.has(did, Reveal) or scene.has(did, Tween):
        return False
    scene.attach(did, Tween(
        target=_REVEAL,
        field="scale",
        start_val=1.0,
        end_val=peak,
        duration=max(1, ticks // 2),
        easing="sine_in_out",
        yoyo=True,
    ))
    return True


def show(scene: Scene, did: DrawableId) -> None:
    """Fully visible at once."""
    if scene.has(did, Reveal):
        reveal = scene.get(did, Reveal)
        reveal.visible = True
        reveal.progress = reveal.scale = reveal.opacity = 1.0


def hide(scene: Scene, did: DrawableId) -> None:
    if scene.has(did, Reveal):
        scene.get(did, Reveal).visible = False


def emphasize(scene: Scene, did: DrawableId) -> None:
    """Reveal with an elastic pop instead of the kind's usual effect."""
    if scene.has(did, Reveal):
        scene.get(did, Reveal).effect = BOUNCE


def reveal(scene: Scene, did: DrawableId, ticks: int, effect: str | None = None) -> bool:
    """Start the drawable's reveal effect; its kind picks one if none is given."""
    effect = effect or effect_for(scene, did)
    if effect == GROW:
        return grow(scene, did, ticks)
    if effect == POP:
        return appear(scene, did, ticks)
    if effect == BOUNCE:
        return appear(scene, did, ticks, easing="elastic_out")
    if effect == FADE:
        return fade(scene, did, ticks)
    raise ValueError(f"unknown reveal effect {effect!r}")


def together(scene: Scene, dids: Iterable[DrawableId], ticks: int) -> UntilSettled:
    """Reveal several drawables at once; yield the result to wait for all."""
    dids = tuple(dids)
    for did in dids:
        reveal(scene, did, ticks)
    return UntilSettled(dids)


def reveal_in_order(
    scene: Scene, groups: Sequence[Iterable[DrawableId]], ticks: int, pause: int = 0,
) -> RevealBeats:
    """Beats revealing each group once the previous one has settled."""
    for group in groups:
        yield together(scene, group, ticks)
        if pause:
            yield Delay(pause)
