"""Easing functions for tween interpolation."""
from __future__ import annotations

import math
from typing import Callable


def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t


def ease_out(t: float) -> float:
    return t * (2 - t)


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


def sine_in_out(t: float) -> float:
    return -(math.cos(math.pi * t) - 1) / 2


def back_out(t: float, overshoot: float = 1.7) -> float:
    c3 = overshoot + 1
    return 1 + c3 * (t - 1) ** 3 + overshoot * (t - 1) ** 2


def elastic_out(t: float, amplitude: float = 1.0, period: float = 0.75) -> float:
    if t <= 0.0 or t >= 1.0:
        return t
    shift = period / (2 * math.pi) * math.asin(1 / amplitude)
    return amplitude * 2 ** (-10 * t) * math.sin((t - shift) * (2 * math.pi) / period) + 1


EASINGS: dict[str, Callable[[float], float]] = {
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
    # power2.out is the same quadratic curve as ease_out.
    "power2_out": ease_out,
    "sine_in_out": sine_in_out,
    "back_out": back_out,
    "elastic_out": elastic_out,
}
