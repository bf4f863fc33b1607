"""Intersection tests between the ball's circle and lines or rectangles.

All tests are boundary-inclusive: a circle exactly tangent to a segment or
rectangle counts as touching it.
"""

from typing import Optional

from breakout.types import Circle, Line, Rect, Vec2


def closest_point(line: Line, p: Vec2) -> Vec2:
    """Point on the finite segment closest to p."""
    ab = line.b - line.a
    t = (p - line.a).dot(ab) / ab.dot(ab)
    # Clamp to the endpoints so the segment is treated as finite
    t = max(0.0, min(1.0, t))
    return line.a + ab * t


def intersect_line_circle(line: Line, circle: Circle) -> Optional[Vec2]:
    """Return the contact point on the segment, or None if the circle misses it."""
    p = closest_point(line, circle.center)
    if (circle.center - p).magnitude() <= circle.radius:
        return p
    return None


def intersect_rect_circle(rect: Rect, circle: Circle) -> bool:
    """Coarse check: does the circle overlap the rectangle at all?"""
    cx = max(rect.min.x, min(circle.center.x, rect.max.x))
    cy = max(rect.min.y, min(circle.center.y, rect.max.y))
    dx = circle.center.x - cx
    dy = circle.center.y - cy
    return dx * dx + dy * dy <= circle.radius * circle.radius


def edges(rect: Rect) -> list[Line]:
    """The four boundary segments in fixed order: left, right, top, bottom."""
    lo, hi = rect.min, rect.max
    return [
        Line(Vec2(lo.x, lo.y), Vec2(lo.x, hi.y)),  # left
        Line(Vec2(hi.x, lo.y), Vec2(hi.x, hi.y)),  # right
        Line(Vec2(lo.x, hi.y), Vec2(hi.x, hi.y)),  # top
        Line(Vec2(lo.x, lo.y), Vec2(hi.x, lo.y)),  # bottom
    ]


def deflect(rect: Rect, ball) -> bool:
    """Edge-by-edge collision shared by bricks and the paddle.

    Redirects the ball once for every edge its circle touches, so a ball at a
    corner gets both axis flips in the same call. Returns True if any edge
    was touched.
    """
    if not intersect_rect_circle(rect, ball.circle):
        return False

    hit = False
    for edge in edges(rect):
        if intersect_line_circle(edge, ball.circle) is not None:
            ball.redirect(edge)
            hit = True
    return hit
