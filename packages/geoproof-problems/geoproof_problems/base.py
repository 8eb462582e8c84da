"""Problem base class and the canvas handle step procedures draw through."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional, Sequence, Union

from geoproof_draw import move, reveal_in_order, set_text
from geoproof_draw import factories as shapes
from geoproof_geometry import Point

if TYPE_CHECKING:
    from geoproof import Clock, DrawableId, Scene
    from geoproof_drag import DragHandle
    from geoproof_draw import Color
    from geoproof_steps import ElementRegistry, StepDefinition
    from geoproof_tween import Reveal as RevealBeats

ANIM_SECONDS = 0.8
AUTOPLAY_MS = 2500
LABEL_COLOR = (85, 85, 85)

Group = Union[int, Sequence[int]]


@dataclass
class Canvas:
    """What a step procedure draws with: the scene, the registry, the clock."""

    scene: Scene
    registry: ElementRegistry
    clock: Clock
    width: float = 0.0
    height: float = 0.0

    def ticks(self, seconds: float) -> int:
        return self.clock.seconds(seconds)

    def add(self, key: str, did: DrawableId | Sequence[DrawableId]):
        return self.registry.register(key, did)

    def place(self, key: str, *points: Point) -> bool:
        """Move the drawable under ``key`` if its step is on screen."""
        did = self.registry.first(key)
        if did is None:
            return False
        return move(self.scene, did, *points)

    def retext(self, key: str, content: str) -> bool:
        did = self.registry.first(key)
        if did is None:
            return False
        return set_text(self.scene, did, content)


class Problem:
    """One guided proof: its configuration, steps, drag handles and readouts.

    Subclasses set the class attributes and implement ``layout``,
    ``build_steps`` and ``refresh``. Geometry lives in ``self.config``;
    ``refresh`` repositions whatever is on screen from it.
    """

    id: str = ""
    name: str = ""
    drag_min_step: Optional[int] = None
    drag_hint: str = ""
    autoplay_ms: float = AUTOPLAY_MS
    anim_seconds: float = ANIM_SECONDS
    point_radius: float = 7.0
    label_size: int = 18

    def __init__(self, width: float = 800, height: float = 600) -> None:
        self.width = width
        self.height = height
        self.layout(width, height)

    def layout(self, width: float, height: float) -> None:
        raise NotImplementedError

    def build_steps(self, canvas: Canvas) -> list[StepDefinition]:
        raise NotImplementedError

    def refresh(self, canvas: Canvas) -> None:
        """Recompute dependent points and move the drawables showing them."""

    def drag_handles(self, canvas: Canvas) -> list[DragHandle]:
        return []

    def readouts(self, step: int) -> dict[str, str]:
        return {}

    def parameters(self) -> dict[str, float]:
        return {}

    def set_parameter(self, name: str, value: float) -> None:
        raise ValueError(f"{self.id} has no parameter {name!r}")

    def explanation_anchor(self) -> Point:
        return Point(20, 20)

    # Helpers shared by the step procedures.

    def labelled_point(
        self,
        canvas: Canvas,
        name: str,
        at: Point,
        color: Color,
        offset: tuple[float, float] = (10, -20),
        hidden: bool = False,
        label: Optional[str] = None,
    ) -> tuple[DrawableId, DrawableId]:
        """Register ``point<name>`` and ``text<name>``; the text reads ``label`` or ``name``."""
        dot = canvas.add(f"point{name}", shapes.point(canvas.scene, at, color, self.point_radius, hidden))
        tag = canvas.add(f"text{name}", shapes.text(
            canvas.scene, self.label_at(at, offset), label or name, LABEL_COLOR, self.label_size, bold=True, hidden=hidden,
        ))
        return dot, tag

    def move_labelled_point(
        self, canvas: Canvas, name: str, at: Point, offset: tuple[float, float] = (10, -20),
    ) -> None:
        canvas.place(f"point{name}", at)
        canvas.place(f"text{name}", self.label_at(at, offset))

    @staticmethod
    def label_at(at: Point, offset: tuple[float, float]) -> Point:
        return Point(at.x + offset[0], at.y + offset[1])

    def beats(
        self, canvas: Canvas, animate: bool, groups: Iterable[Group], seconds: float | None = None,
    ) -> RevealBeats | None:
        """Reveal beats for ``groups`` in order, or None when not animating."""
        if not animate:
            return None
        ordered = [[g] if isinstance(g, int) else list(g) for g in groups]
        return reveal_in_order(canvas.scene, ordered, canvas.ticks(seconds or self.anim_seconds * 0.5))
