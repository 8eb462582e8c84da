"""geoproof-schedule - One-shot timers for geoproof scenes."""
from __future__ import annotations

from geoproof_schedule.components import Timer
from geoproof_schedule.handlers import TimerHandlers
from geoproof_schedule.systems import arm_timer, cancel_timer, make_timer_system

__all__ = ["Timer", "TimerHandlers", "make_timer_system", "arm_timer", "cancel_timer"]
