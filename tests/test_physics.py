"""
Tests for per-step integration and boundary policies.

Run with: pytest tests/test_physics.py -v
"""

import pytest

from cabinet.entities import Box, Disc
from cabinet.physics import (
    BOTTOM, LEFT, RIGHT, TOP,
    apply_gravity, below_floor, clamp_to_bounds, integrate, is_offscreen, reflect_in_bounds,
)


class TestIntegrate:
    """Velocity first, then position. No time scaling."""

    def test_constant_velocity(self):
        box = Box(x=10.0, y=20.0, vx=3.0, vy=-2.0, w=5.0, h=5.0)
        integrate(box)
        assert (box.x, box.y) == (13.0, 18.0)

    def test_gravity_applied_before_position(self):
        box = Box(x=0.0, y=0.0, vy=1.0, w=1.0, h=1.0)
        integrate(box, gravity=0.5)
        assert box.vy == 1.5
        assert box.y == 1.5

    def test_max_fall_speed_caps_downward_only(self):
        box = Box(x=0.0, y=0.0, vy=9.8, w=1.0, h=1.0)
        apply_gravity(box, 0.5, max_fall_speed=10.0)
        assert box.vy == 10.0

        rising = Box(x=0.0, y=0.0, vy=-20.0, w=1.0, h=1.0)
        apply_gravity(rising, 0.5, max_fall_speed=10.0)
        assert rising.vy == -19.5


class TestReflect:
    """Reflective walls flip one velocity component per crossing."""

    def test_left_wall(self):
        ball = Disc(x=3.0, y=50.0, vx=-4.0, vy=2.0, r=5.0)
        hits = reflect_in_bounds(ball, 100.0, 100.0)
        assert hits == (LEFT,)
        assert ball.vx == 4.0
        assert ball.x == 5.0
        assert ball.vy == 2.0

    def test_flip_happens_once_per_crossing(self):
        """A ball still outside after the flip is not flipped back."""
        ball = Disc(x=98.0, y=50.0, vx=-3.0, vy=0.0, r=5.0)
        reflect_in_bounds(ball, 100.0, 100.0)
        assert ball.vx == -3.0
        reflect_in_bounds(ball, 100.0, 100.0)
        assert ball.vx == -3.0

    def test_corner_handles_both_axes(self):
        ball = Disc(x=2.0, y=1.0, vx=-3.0, vy=-4.0, r=5.0)
        hits = reflect_in_bounds(ball, 100.0, 100.0)
        assert hits == (LEFT, TOP)
        assert (ball.vx, ball.vy) == (3.0, 4.0)

    def test_speed_unchanged(self):
        ball = Disc(x=99.0, y=50.0, vx=3.0, vy=-4.0, r=5.0)
        reflect_in_bounds(ball, 100.0, 100.0)
        assert (ball.vx ** 2 + ball.vy ** 2) ** 0.5 == pytest.approx(5.0)

    def test_floor_only_when_asked(self):
        ball = Disc(x=50.0, y=98.0, vx=0.0, vy=3.0, r=5.0)
        assert reflect_in_bounds(ball, 100.0, 100.0) == ()
        assert reflect_in_bounds(ball, 100.0, 100.0, floor=True) == (BOTTOM,)
        assert ball.vy == -3.0


class TestClamp:
    """Clamped entities stay within [0, extent - size]."""

    @pytest.mark.parametrize("x, expected", [(-5.0, 0.0), (0.0, 0.0), (50.0, 50.0), (95.0, 80.0)])
    def test_x_containment(self, x, expected):
        box = Box(x=x, y=0.0, vx=2.0, w=20.0, h=10.0)
        clamp_to_bounds(box, 100.0, None)
        assert box.x == expected

    def test_zeroes_velocity_on_pinned_axis(self):
        box = Box(x=90.0, y=10.0, vx=5.0, vy=1.0, w=20.0, h=10.0)
        hits = clamp_to_bounds(box, 100.0, 100.0)
        assert hits == (RIGHT,)
        assert box.vx == 0.0
        assert box.vy == 1.0

    def test_keep_velocity(self):
        box = Box(x=0.0, y=95.0, vy=5.0, w=10.0, h=10.0)
        hits = clamp_to_bounds(box, None, 100.0, zero_velocity=False)
        assert hits == (BOTTOM,)
        assert box.y == 90.0
        assert box.vy == 5.0

    def test_disc_uses_radius(self):
        ball = Disc(x=2.0, y=50.0, r=5.0)
        clamp_to_bounds(ball, 100.0, 100.0)
        assert ball.x == 5.0


class TestTerminalBoundaries:

    def test_below_floor_fully(self):
        ball = Disc(x=50.0, y=104.0, r=5.0)
        assert below_floor(ball, 100.0) is False
        ball.y = 106.0
        assert below_floor(ball, 100.0) is True

    def test_below_floor_touching(self):
        box = Box(x=0.0, y=90.0, w=10.0, h=10.0)
        assert below_floor(box, 100.0, fully=False) is True
        box.y = 89.0
        assert below_floor(box, 100.0, fully=False) is False

    def test_offscreen_margin(self):
        box = Box(x=-30.0, y=10.0, w=10.0, h=10.0)
        assert is_offscreen(box, 100.0, 100.0) is True
        assert is_offscreen(box, 100.0, 100.0, margin=50.0) is False
