"""Tests for the per-tick frame update and headless sessions."""

import random
import pytest

from breakout.types import (
    BallLost,
    BrickHit,
    PaddleHit,
    PointerInput,
    Rect,
    Vec2,
    WallBounce,
    ENDED,
    PLAYING,
)
from breakout.ball import Ball
from breakout.box import Box
from breakout.bricks import Brick
from breakout.paddle import Paddle
from breakout.config import SessionConfig, get_config
from breakout.session import (
    Session,
    SessionResult,
    VALID_REASONS,
    new_session,
    simulate_session,
    step,
)
from breakout.autopilot import Autopilot


def _session(ball, bricks=None):
    return Session(
        ball=ball,
        paddle=Paddle(Rect.from_size(570, 100, 60, 10), field_width=1200),
        box=Box(1200, 800),
        bricks=bricks if bricks is not None else [],
    )


def test_new_session_from_defaults():
    session = new_session()
    assert session.status == PLAYING
    assert session.tick == 0
    assert len(session.bricks) == 119
    assert session.ball.center == Vec2(600, 400)
    assert session.ball.speed == pytest.approx(0.2)
    assert session.paddle.rect == Rect.from_size(570, 100, 60, 10)


def test_new_session_with_custom_bricks():
    bricks = [Brick(Rect.from_size(0, 600, 60, 20), id=0)]
    session = new_session(SessionConfig(), bricks=bricks)
    assert [b.id for b in session.bricks] == [0]


def test_step_moves_ball_and_paddle():
    session = new_session()
    start = session.ball.center.copy()
    v = session.ball.velocity.copy()

    scene = step(session, PointerInput(x=100, y=50))

    assert scene.status == PLAYING
    assert scene.tick == 1
    assert session.ball.center.x == pytest.approx(start.x + v.x * 0.2)
    assert session.ball.center.y == pytest.approx(start.y + v.y * 0.2)
    assert session.paddle.rect.min.x == 100
    assert scene.paddle.rect.min.x == 100
    assert len(scene.bricks) == 119
    assert scene.events == []


def test_pointer_outside_keeps_paddle():
    session = new_session()
    step(session, PointerInput(x=100, y=50, inside=False))
    assert session.paddle.rect.min.x == 570


def test_floor_hit_ends_session_with_no_other_updates():
    """Ball touching the floor: Ended, and no paddle/brick/ball updates that tick."""
    brick = Brick(Rect.from_size(590, 600, 60, 20), id=0)
    session = _session(Ball(Vec2(600, 5), 8, Vec2(0, -1), 0.2), bricks=[brick])

    scene = step(session, PointerInput(x=10, y=10))

    assert scene.status == ENDED
    assert session.status == ENDED
    assert session.ball.center == Vec2(600, 5), "ball should not move"
    assert session.paddle.rect.min.x == 570, "paddle should not move"
    assert len(scene.bricks) == 1
    assert session.tick == 0
    assert any(isinstance(e, BallLost) for e in scene.events)


def test_ended_session_is_frozen():
    session = _session(Ball(Vec2(600, 5), 8, Vec2(0, -1), 0.2))
    first = step(session, PointerInput(x=10, y=10))
    again = step(session, PointerInput(x=900, y=10))
    assert again is first
    assert session.paddle.rect.min.x == 570
    assert session.ball.center == Vec2(600, 5)


def test_ends_on_first_tick_the_floor_is_touched():
    """Falling straight down at 0.5/tick from y=9: touches y=8 on tick 2."""
    session = _session(Ball(Vec2(600, 9), 8, Vec2(0, -1), 0.5))
    pointer = PointerInput(x=570, y=10)

    assert step(session, pointer).status == PLAYING   # y 9 -> 8.5
    assert step(session, pointer).status == PLAYING   # y 8.5 -> 8.0
    scene = step(session, pointer)
    assert scene.status == ENDED
    assert session.tick == 2
    assert session.ball.center.y == pytest.approx(8.0)


def test_brick_destroyed_during_step():
    """Destroying B1 of four leaves [B0, B2, B3] and speeds the ball up."""
    bricks = [Brick(Rect.from_size(i * 100, 500, 60, 20), id=i) for i in range(4)]
    session = _session(Ball(Vec2(130, 495), 8, Vec2(0, 1), 0.2), bricks=bricks)

    scene = step(session, PointerInput(x=570, y=10))

    assert [b.id for b in session.bricks] == [0, 2, 3]
    assert len(scene.bricks) == 3
    assert session.ball.speed == pytest.approx(0.205)
    assert session.ball.velocity.y == pytest.approx(-1.0)
    hits = [e for e in scene.events if isinstance(e, BrickHit)]
    assert [h.brick_id for h in hits] == [1]


def test_paddle_hit_event():
    session = _session(Ball(Vec2(600, 115), 8, Vec2(0, -1), 0.2))
    scene = step(session, PointerInput(x=570, y=10))
    assert any(isinstance(e, PaddleHit) for e in scene.events)
    assert session.ball.velocity.y == pytest.approx(1.0)


def test_wall_bounce_event():
    session = _session(Ball(Vec2(5, 400), 8, Vec2(-1, 0), 0.2))
    scene = step(session, PointerInput(x=570, y=10))
    walls = [e.wall for e in scene.events if isinstance(e, WallBounce)]
    assert walls == ["left"]
    assert session.ball.velocity.x == pytest.approx(1.0)


def test_paddle_moves_after_collision_checks():
    """The pointer moves the paddle under the ball only after this tick's checks."""
    session = _session(Ball(Vec2(100, 115), 8, Vec2(0, -1), 0.2))
    scene = step(session, PointerInput(x=70, y=10))
    assert not any(isinstance(e, PaddleHit) for e in scene.events)
    assert session.paddle.rect.min.x == 70

    scene = step(session, PointerInput(x=70, y=10))
    assert any(isinstance(e, PaddleHit) for e in scene.events)


def test_idle_session_loses_ball():
    """Without a pilot the paddle stays put and the compact ball drops past it."""
    result = simulate_session(get_config("compact"), pilot=None)
    assert isinstance(result, SessionResult)
    assert result.reason == "lost"
    assert result.final_scene.status == ENDED
    assert result.stats["bricks_destroyed"] == 0
    assert result.stats["lost"]
    assert isinstance(result.events[-1], BallLost)


def test_timeout_reason():
    result = simulate_session(get_config("compact"), max_ticks=10)
    assert result.reason == "timeout"
    assert result.ticks == 10
    assert len(result.stats["speed_trace"]) == 10


def test_perfect_pilot_outlasts_idle():
    random.seed(1)
    idle = simulate_session(get_config("compact"), pilot=None)
    perfect = simulate_session(get_config("compact"), Autopilot("perfect"), max_ticks=3000)
    assert perfect.ticks > idle.ticks
    assert perfect.stats["paddle_hits"] > 0
    assert perfect.reason in VALID_REASONS


def test_session_stats_populated():
    random.seed(42)
    cfg = get_config("compact")
    result = simulate_session(cfg, Autopilot("steady"), max_ticks=5000)
    stats = result.stats
    for key in ("ticks", "bricks_initial", "bricks_destroyed", "bricks_remaining",
                "cleared_pct", "paddle_hits", "wall_bounces", "final_speed", "lost"):
        assert key in stats, f"missing stat {key}"
    assert stats["bricks_initial"] == cfg.brick_count()
    assert stats["bricks_destroyed"] + stats["bricks_remaining"] == stats["bricks_initial"]
    assert stats["final_speed"] <= cfg.max_speed
    assert max(stats["speed_trace"]) <= cfg.max_speed


def test_record_keeps_every_scene():
    result = simulate_session(get_config("compact"), max_ticks=25, record=True)
    assert len(result.scenes) == 25
    assert [s.tick for s in result.scenes] == list(range(1, 26))
