"""Clock and TickContext for the fixed-timestep scene loop."""

import math

from geoproof.types import TickContext


class Clock:
    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def ticks_for(self, ms: float) -> int:
        """Whole ticks covering ``ms`` milliseconds. Never less than one."""
        return max(1, math.ceil(ms * self._tps / 1000.0 - 1e-9))

    def seconds(self, seconds: float) -> int:
        return self.ticks_for(seconds * 1000.0)

    def context(self) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            elapsed=self._tick_number * self._dt,
        )
