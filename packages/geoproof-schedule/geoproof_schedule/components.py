"""Timer component."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Timer:
    """One-shot countdown. Fires when remaining reaches 0.

    A timer lives on its own drawable; firing or cancelling destroys it.
    """

    name: str
    remaining: int
