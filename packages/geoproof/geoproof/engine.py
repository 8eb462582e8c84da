"""Engine - scene loop and system ordering."""

from geoproof.clock import Clock
from geoproof.scene import Scene
from geoproof.types import System


class Engine:
    def __init__(self, tps: int = 60) -> None:
        self._clock = Clock(tps)
        self._scene = Scene()
        self._systems: list[System] = []

    @property
    def scene(self) -> Scene:
        return self._scene

    @property
    def clock(self) -> Clock:
        return self._clock

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def step(self) -> None:
        self._clock.advance()
        ctx = self._clock.context()
        for system in self._systems:
            system(self._scene, ctx)

    def run(self, n: int) -> None:
        for _ in range(n):
            self.step()

    def run_for_ms(self, ms: float) -> None:
        self.run(self._clock.ticks_for(ms))
