"""Tween component."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Tween:
    """Interpolates ``field`` of the component registered as ``target``.

    ``duration`` and ``delay`` are in ticks. With ``yoyo`` the value runs
    back to ``start_val`` once ``end_val`` is reached.
    """

    target: str
    field: str
    start_val: float
    end_val: float
    duration: int
    elapsed: int = 0
    easing: str = "linear"
    delay: int = 0
    yoyo: bool = False
