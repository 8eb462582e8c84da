"""Tests for AutoPlay cadence and cancellation."""
import pytest

from geoproof_schedule import Timer
from geoproof_steps import AutoPlay
from geoproof_steps.autoplay import TIMER_NAME


@pytest.fixture
def autoplay(rig):
    return AutoPlay(rig.steps, rig.handlers, rig.engine.clock)


def _pending_timers(rig):
    return [timer for _, (timer,) in rig.scene.query(Timer)]


class TestStart:
    def test_registers_handler(self, rig, autoplay):
        assert rig.handlers.has(TIMER_NAME)

    def test_default_interval(self, autoplay):
        """2500 ms at 60 ticks per second."""
        assert autoplay.interval_ticks == 150

    def test_start_draws_first_step(self, rig, autoplay):
        autoplay.start()
        assert autoplay.active
        assert autoplay.cursor == 1
        assert rig.steps.current_step == 1
        assert len(_pending_timers(rig)) == 1

    def test_start_resets_first(self, rig, autoplay):
        rig.steps.go_to_step(3, animate=False)
        autoplay.start()
        assert rig.steps.current_step == 1
        assert "pointC" not in rig.registry

    def test_start_is_noop_when_active(self, rig, autoplay):
        autoplay.start()
        rig.engine.run(200)
        autoplay.start()
        assert rig.steps.current_step == 2

    def test_on_start_listeners(self, autoplay):
        seen = []
        autoplay.on_start(lambda: seen.append(autoplay.active))
        autoplay.start()
        assert seen == [True]


class TestCadence:
    def test_advances_every_interval(self, rig, autoplay):
        autoplay.start()
        rig.engine.run(149)
        assert rig.steps.current_step == 1
        rig.engine.run(1)
        assert rig.steps.current_step == 2
        rig.engine.run(150)
        assert rig.steps.current_step == 3

    def test_stops_after_last_step(self, rig, autoplay):
        autoplay.start()
        rig.engine.run_for_ms(2500 * 3)
        assert rig.steps.current_step == 3
        assert not autoplay.active
        assert autoplay.cursor == 0
        assert _pending_timers(rig) == []

    def test_custom_interval(self, rig):
        quick = AutoPlay(rig.steps, rig.handlers, rig.engine.clock, interval_ms=500)
        quick.start()
        rig.engine.run_for_ms(500)
        assert rig.steps.current_step == 2


class TestStop:
    def test_stop_before_first_interval(self, rig, autoplay):
        autoplay.start()
        reached = rig.steps.current_step
        autoplay.stop()
        rig.engine.run_for_ms(10_000)
        assert rig.steps.current_step == reached == 1
        assert not autoplay.active
        assert _pending_timers(rig) == []

    def test_stop_is_idempotent(self, autoplay):
        autoplay.stop()
        autoplay.start()
        autoplay.stop()
        autoplay.stop()
        assert not autoplay.active
        assert autoplay.cursor == 0

    def test_stale_advance_is_ignored(self, rig, autoplay):
        autoplay.start()
        autoplay.stop()
        autoplay.advance()
        assert rig.steps.current_step == 1

    def test_restart_after_stop(self, rig, autoplay):
        autoplay.start()
        rig.engine.run(150)
        autoplay.stop()
        autoplay.start()
        assert rig.steps.current_step == 1
        assert len(_pending_timers(rig)) == 1
