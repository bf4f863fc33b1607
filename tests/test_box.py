"""Tests for the arena boundary."""

import pytest

from breakout.types import Vec2
from breakout.ball import Ball
from breakout.box import Box


def test_floor_ends_without_redirect():
    """Touching the bottom returns True and leaves the velocity alone."""
    box = Box(100, 100)
    ball = Ball(Vec2(50, 5), 8, Vec2(0, -1), 0.2)
    assert box.collision(ball)
    assert ball.velocity == Vec2(0, -1)


def test_left_wall_bounces():
    box = Box(100, 100)
    ball = Ball(Vec2(5, 50), 8, Vec2(-1, 0), 0.2)
    assert not box.collision(ball)
    assert ball.velocity.x == pytest.approx(1.0)


def test_right_wall_bounces():
    box = Box(100, 100)
    ball = Ball(Vec2(95, 50), 8, Vec2(1, 0), 0.2)
    assert not box.collision(ball)
    assert ball.velocity.x == pytest.approx(-1.0)


def test_top_wall_bounces():
    box = Box(100, 100)
    ball = Ball(Vec2(50, 95), 8, Vec2(0, 1), 0.2)
    assert not box.collision(ball)
    assert ball.velocity.y == pytest.approx(-1.0)


def test_bottom_left_corner_bounces_then_ends():
    """Side walls are checked before the floor, so the left bounce still applies."""
    box = Box(100, 100)
    ball = Ball(Vec2(5, 5), 8, Vec2(-1, -1), 0.2)
    vy = ball.velocity.y
    assert box.collision(ball)
    assert ball.velocity.x > 0
    assert ball.velocity.y == pytest.approx(vy), "floor does not redirect"


def test_clear_of_walls():
    box = Box(100, 100)
    ball = Ball(Vec2(50, 50), 8, Vec2(1, 1), 0.2)
    before = ball.velocity.copy()
    assert not box.collision(ball)
    assert ball.velocity == before


def test_touching_reports_walls_in_order():
    box = Box(100, 100)
    assert box.touching(Ball(Vec2(5, 5), 8, Vec2(0, 1), 0.2)) == ["left", "bottom"]
    assert box.touching(Ball(Vec2(95, 95), 8, Vec2(0, 1), 0.2)) == ["right", "top"]
    assert box.touching(Ball(Vec2(50, 50), 8, Vec2(0, 1), 0.2)) == []
