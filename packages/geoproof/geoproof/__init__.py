"""geoproof - A fixed-timestep scene runtime for step-by-step geometry proofs."""

from geoproof.clock import Clock
from geoproof.engine import Engine
from geoproof.scene import Scene, component_key
from geoproof.types import DeadDrawableError, DrawableId, TickContext

__all__ = [
    "Engine",
    "Scene",
    "Clock",
    "TickContext",
    "DrawableId",
    "DeadDrawableError",
    "component_key",
]
