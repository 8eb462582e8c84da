"""StepEngine - forward and backward navigation over an ordered proof."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional, Sequence

from geoproof_tween import cancel_tweens

if TYPE_CHECKING:
    from geoproof import Scene
    from geoproof_steps.registry import ElementRegistry, Handle
    from geoproof_tween import Reveal, Timeline

logger = logging.getLogger(__name__)

EXPLANATION_KEY = "stepExplanation"

DrawFn = Callable[[bool], Optional["Reveal"]]
ChangeListener = Callable[[int, int], None]


@dataclass(frozen=True)
class StepDefinition:
    """One stage of a proof.

    ``draw(animate)`` creates every drawable of the step at its final
    position and registers it under one of ``element_keys``. When animating
    it creates them hidden and returns the reveal beats that show them.
    """

    index: int
    element_keys: frozenset[str]
    draw: DrawFn
    title: str = ""
    explanation: str = ""


class StepEngine:
    def __init__(
        self,
        scene: Scene,
        registry: ElementRegistry,
        steps: Sequence[StepDefinition],
        timeline: Timeline,
        explain: Callable[[StepDefinition], Optional[Handle]] | None = None,
    ) -> None:
        indices = [step.index for step in steps]
        if indices != list(range(1, len(steps) + 1)):
            raise ValueError(f"step indices must run 1..{len(steps)}, got {indices}")
        self._scene = scene
        self._registry = registry
        self._steps = list(steps)
        self._timeline = timeline
        self._explain = explain
        self._current = 0
        self._listeners: list[ChangeListener] = []

    @property
    def scene(self) -> Scene:
        return self._scene

    @property
    def registry(self) -> ElementRegistry:
        return self._registry

    @property
    def current_step(self) -> int:
        return self._current

    @property
    def step_count(self) -> int:
        return len(self._steps)

    @property
    def steps(self) -> list[StepDefinition]:
        return list(self._steps)

    @property
    def animating(self) -> bool:
        return self._timeline.running

    def step(self, index: int) -> StepDefinition:
        if not 1 <= index <= len(self._steps):
            raise ValueError(f"no step {index}; steps run 1..{len(self._steps)}")
        return self._steps[index - 1]

    def on_change(self, listener: ChangeListener) -> None:
        self._listeners.append(listener)

    def go_to_step(self, target: int, animate: bool = True) -> None:
        if not 0 <= target <= len(self._steps):
            raise ValueError(f"no step {target}; steps run 0..{len(self._steps)}")
        if target == self._current and target != 0:
            return

        # Reveals still playing jump to their end before anything changes.
        self._timeline.finish(self._scene)

        old = self._current
        if target < old:
            for index in range(old, target, -1):
                self.clear(index)
        else:
            for index in range(old + 1, target + 1):
                self._draw(self._steps[index - 1], animate and index == target)
        if target == 0 and len(self._registry):
            logger.debug("dropping stray registry keys %s", self._registry.keys())
            self._registry.clear()

        self._current = target
        logger.debug("step %d -> %d", old, target)
        for listener in self._listeners:
            listener(old, target)

    def clear(self, index: int) -> None:
        """Destroy everything step ``index`` drew, plus the explanation overlay."""
        step = self.step(index)
        logger.debug("clearing step %d", index)
        for key in sorted(step.element_keys):
            self._registry.discard(key)
        if EXPLANATION_KEY in self._registry:
            self._registry.discard(EXPLANATION_KEY)

    def reset(self) -> None:
        """Stop every reveal where it stands and go back to an empty canvas."""
        self._timeline.cancel()
        cancel_tweens(self._scene)
        self.go_to_step(0)

    def redraw(self) -> None:
        """Rebuild the current step without animation, e.g. after a resize."""
        target = self._current
        self._timeline.cancel()
        self.go_to_step(0)
        self.go_to_step(target, animate=False)

    def _draw(self, step: StepDefinition, animate: bool) -> None:
        logger.debug("drawing step %d (%s)%s", step.index, step.title, " animated" if animate else "")
        beats = step.draw(animate)
        missing = sorted(key for key in step.element_keys if key not in self._registry)
        if missing:
            logger.warning("step %d did not register %s", step.index, missing)

        if animate and self._explain is not None:
            overlay = self._explain(step)
            if overlay is not None:
                self._registry.register(EXPLANATION_KEY, overlay)

        if beats is None:
            return
        if animate:
            self._timeline.start(self._scene, beats, name=f"step{step.index}")
        else:
            beats.close()
