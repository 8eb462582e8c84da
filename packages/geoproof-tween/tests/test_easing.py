"""Tests for easing functions."""
import pytest

from geoproof_tween import EASINGS


class TestEndpoints:
    """Every easing starts at 0 and lands on 1."""

    @pytest.mark.parametrize("name", sorted(EASINGS))
    def test_starts_at_zero(self, name):
        assert EASINGS[name](0.0) == pytest.approx(0.0, abs=1e-9)

    @pytest.mark.parametrize("name", sorted(EASINGS))
    def test_ends_at_one(self, name):
        assert EASINGS[name](1.0) == pytest.approx(1.0)


class TestShapes:
    def test_linear_at_half(self):
        assert EASINGS["linear"](0.5) == 0.5

    def test_ease_in_at_half(self):
        """Ease-in is t*t."""
        assert EASINGS["ease_in"](0.5) == 0.25

    def test_ease_out_at_half(self):
        """Ease-out is t*(2-t)."""
        assert EASINGS["ease_out"](0.5) == 0.75

    def test_power2_out_matches_ease_out(self):
        assert EASINGS["power2_out"](0.3) == EASINGS["ease_out"](0.3)

    def test_ease_in_out_symmetric(self):
        f = EASINGS["ease_in_out"]
        assert f(0.5) == pytest.approx(0.5)
        assert f(0.25) == pytest.approx(1 - f(0.75))

    def test_sine_in_out_midpoint(self):
        assert EASINGS["sine_in_out"](0.5) == pytest.approx(0.5)

    def test_back_out_overshoots(self):
        """Back-out passes 1 before settling, which gives the pop effect."""
        f = EASINGS["back_out"]
        assert max(f(i / 100) for i in range(101)) > 1.0

    def test_elastic_out_oscillates_around_one(self):
        f = EASINGS["elastic_out"]
        values = [f(i / 50) for i in range(1, 50)]
        assert any(v > 1.0 for v in values)
        assert any(v < 1.0 for v in values)
