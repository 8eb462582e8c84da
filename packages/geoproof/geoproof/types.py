"""Shared type aliases and errors for the geoproof runtime."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

DrawableId = int


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float


class DeadDrawableError(KeyError):
    """Raised when operating on a drawable that has been destroyed."""

    def __init__(self, drawable_id: int, message: str) -> None:
        self.drawable_id = drawable_id
        super().__init__(message)


if TYPE_CHECKING:
    from geoproof.scene import Scene

System = Callable[["Scene", TickContext], None]
