"""geoproof-tween - Value interpolation and sequenced reveals for geoproof scenes."""
from __future__ import annotations

from geoproof_tween.components import Tween
from geoproof_tween.easing import EASINGS
from geoproof_tween.systems import cancel_tweens, make_tween_system, settle_tweens
from geoproof_tween.timeline import Delay, Reveal, Timeline, UntilSettled

__all__ = [
    "Tween",
    "EASINGS",
    "make_tween_system",
    "settle_tweens",
    "cancel_tweens",
    "Timeline",
    "Delay",
    "UntilSettled",
    "Reveal",
]
