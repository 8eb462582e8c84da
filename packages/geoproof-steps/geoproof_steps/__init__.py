"""geoproof-steps - Step sequencing, the element registry and auto-play."""
from __future__ import annotations

from geoproof_steps.autoplay import AutoPlay
from geoproof_steps.engine import EXPLANATION_KEY, StepDefinition, StepEngine
from geoproof_steps.registry import ElementRegistry

__all__ = ["AutoPlay", "ElementRegistry", "EXPLANATION_KEY", "StepDefinition", "StepEngine"]
