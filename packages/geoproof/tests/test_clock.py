"""Tests for clock advancement and millisecond conversion."""

import pytest
from geoproof.clock import Clock
from geoproof.types import TickContext


def test_clock_initialization():
    """Clock starts at tick 0 with dt = 1 / tps."""
    clock = Clock(tps=60)
    assert clock.tps == 60
    assert clock.tick_number == 0
    assert abs(clock.dt - (1.0 / 60)) < 1e-9


def test_invalid_tps_rejected():
    with pytest.raises(ValueError):
        Clock(tps=0)
    with pytest.raises(ValueError):
        Clock(tps=-5)


def test_advance_returns_new_tick_number():
    clock = Clock(tps=20)
    assert clock.advance() == 1
    assert clock.advance() == 2
    assert clock.tick_number == 2


def test_ticks_for_exact_multiple():
    """2500ms at 60 tps is exactly 150 ticks."""
    clock = Clock(tps=60)
    assert clock.ticks_for(2500) == 150


def test_ticks_for_rounds_up():
    """10ms at 60 tps is less than one tick but still needs one."""
    clock = Clock(tps=60)
    assert clock.ticks_for(10) == 1
    assert clock.ticks_for(20) == 2


def test_ticks_for_never_zero():
    clock = Clock(tps=20)
    assert clock.ticks_for(0) == 1


def test_seconds_ignores_float_noise():
    """0.8s at 60 tps is 48 ticks, not 49."""
    clock = Clock(tps=60)
    assert clock.seconds(0.8) == 48


def test_context_values():
    clock = Clock(tps=20)
    clock.advance()
    clock.advance()
    ctx = clock.context()
    assert isinstance(ctx, TickContext)
    assert ctx.tick_number == 2
    assert ctx.elapsed == pytest.approx(0.1)
