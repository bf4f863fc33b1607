"""Session simulation — the per-tick frame update and headless play-throughs.

Each tick, while the session is playing:
- Box collision: touching the floor ends the session and nothing else happens
- Paddle collision: may redirect the ball
- Brick collisions: destroyed bricks are dropped and speed the ball up
- Paddle follows the pointer input
- Ball moves one step
"""

from dataclasses import dataclass, field
from typing import Optional

from breakout.types import (
    BallLost,
    BrickHit,
    PaddleHit,
    PointerInput,
    Rect,
    Scene,
    Vec2,
    WallBounce,
    ENDED,
    PLAYING,
)
from breakout.ball import Ball
from breakout.box import Box
from breakout.bricks import Brick, build_bricks, strike_bricks
from breakout.paddle import Paddle
from breakout.config import SessionConfig


@dataclass
class Session:
    """All state for one play-through, owned by whoever drives `step`."""
    ball: Ball
    paddle: Paddle
    box: Box
    bricks: list  # list[Brick], layout order
    status: str = PLAYING
    tick: int = 0
    last_scene: Optional[Scene] = None


@dataclass
class SessionResult:
    """The outcome of a headless session."""
    ticks: int
    reason: str           # see VALID_REASONS below
    final_scene: Scene
    events: list          # every event from every tick
    scenes: list = field(default_factory=list)  # only filled when recording
    stats: dict = field(default_factory=dict)


VALID_REASONS = [
    "lost",      # ball touched the floor
    "cleared",   # no bricks left
    "timeout",   # tick limit reached
]


def new_session(config: Optional[SessionConfig] = None, bricks: Optional[list[Brick]] = None) -> Session:
    """Create a session from a config. Pass `bricks` to replace the grid layout."""
    cfg = config or SessionConfig()

    if bricks is None:
        bricks = build_bricks(
            width=cfg.width,
            rows=cfg.brick_rows,
            brick_w=cfg.brick_w,
            brick_h=cfg.brick_h,
            spacing=cfg.spacing,
            x0=cfg.brick_x0,
            y0=cfg.brick_y0,
            color=cfg.brick_color,
        )

    paddle = Paddle(
        Rect.from_size(cfg.paddle_x, cfg.paddle_y, cfg.paddle_w, cfg.paddle_h),
        field_width=cfg.width,
        color=cfg.paddle_color,
    )
    ball = Ball.from_angle(
        Vec2(cfg.ball_x, cfg.ball_y),
        cfg.ball_r,
        cfg.ball_angle,
        cfg.ball_speed,
        color=cfg.ball_color,
        speed_increment=cfg.speed_increment,
        max_speed=cfg.max_speed,
    )
    return Session(ball=ball, paddle=paddle, box=Box(cfg.width, cfg.height), bricks=list(bricks))


def snapshot(session: Session, events: Optional[list] = None) -> Scene:
    """Scene for the current state, without advancing."""
    return Scene(
        paddle=session.paddle.shape(),
        ball=session.ball.shape(),
        bricks=[b.shape() for b in session.bricks],
        status=session.status,
        tick=session.tick,
        events=events or [],
    )


def step(session: Session, pointer: PointerInput) -> Scene:
    """Advance the session by one tick and return the scene to draw.

    Once the session has ended, further calls change nothing and return the
    final scene again.
    """
    if session.status == ENDED:
        return session.last_scene or snapshot(session, [])

    ball = session.ball
    events: list = []

    # --- Boundary: the floor ends the session ---
    walls = session.box.touching(ball)
    if session.box.collision(ball):
        for name in walls:
            if name == "bottom":
                continue
            events.append(WallBounce(pos=ball.center.copy(), tick=session.tick, wall=name))
        events.append(BallLost(pos=ball.center.copy(), tick=session.tick))
        session.status = ENDED
        session.last_scene = snapshot(session, events)
        return session.last_scene
    for name in walls:
        events.append(WallBounce(pos=ball.center.copy(), tick=session.tick, wall=name))

    # --- Paddle ---
    if session.paddle.collision(ball):
        events.append(PaddleHit(pos=ball.center.copy(), tick=session.tick))

    # --- Bricks ---
    session.bricks, hits = strike_bricks(session.bricks, ball, tick=session.tick)
    events.extend(hits)

    session.paddle.update_position(pointer)
    ball.move()
    session.tick += 1

    session.last_scene = snapshot(session, events)
    return session.last_scene


def simulate_session(
    config: Optional[SessionConfig] = None,
    pilot=None,
    max_ticks: int = 200_000,
    record: bool = False,
    session: Optional[Session] = None,
) -> SessionResult:
    """Play a session headlessly until the ball is lost, the grid is cleared,
    or `max_ticks` runs out.

    Args:
        config: Session parameters (ignored when `session` is given).
        pilot: Object with `pointer(session) -> PointerInput`. Without one the
            pointer stays outside the play area and the paddle never moves.
        max_ticks: Safety limit.
        record: Keep every scene in the result (memory heavy for long runs).
        session: Continue an existing session instead of creating one.

    Returns:
        SessionResult with the final scene, all events and summary stats.
    """
    cfg = config or SessionConfig()
    if session is None:
        session = new_session(cfg)

    idle = PointerInput(inside=False)
    initial_bricks = len(session.bricks)
    initial_speed = session.ball.speed
    all_events: list = []
    scenes: list[Scene] = []
    speeds: list[float] = []
    remaining: list[int] = []

    scene = snapshot(session, [])
    reason = "timeout"
    for _ in range(max_ticks):
        pointer = pilot.pointer(session) if pilot is not None else idle
        scene = step(session, pointer)
        all_events.extend(scene.events)
        speeds.append(session.ball.speed)
        remaining.append(len(scene.bricks))
        if record:
            scenes.append(scene)

        if scene.status == ENDED:
            reason = "lost"
            break
        if not session.bricks:
            reason = "cleared"
            break

    stats = _compute_session_stats(all_events, initial_bricks, initial_speed, session)
    stats["speed_trace"] = speeds
    stats["bricks_trace"] = remaining

    return SessionResult(
        ticks=session.tick,
        reason=reason,
        final_scene=scene,
        events=all_events,
        scenes=scenes,
        stats=stats,
    )


def _compute_session_stats(events: list, initial_bricks: int, initial_speed: float, session: Session) -> dict:
    """Compute session statistics."""
    destroyed = sum(1 for e in events if isinstance(e, BrickHit))
    paddle_hits = sum(1 for e in events if isinstance(e, PaddleHit))

    walls = {}
    for e in events:
        if isinstance(e, WallBounce):
            walls[e.wall] = walls.get(e.wall, 0) + 1

    return {
        "ticks": session.tick,
        "bricks_initial": initial_bricks,
        "bricks_destroyed": destroyed,
        "bricks_remaining": len(session.bricks),
        "cleared_pct": round(100.0 * destroyed / initial_bricks, 1) if initial_bricks else 100.0,
        "paddle_hits": paddle_hits,
        "wall_bounces": walls,
        "initial_speed": initial_speed,
        "final_speed": round(session.ball.speed, 4),
        "lost": session.status == ENDED,
    }
