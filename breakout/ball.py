"""The ball — a circle moving along a unit heading at a scalar speed."""

import math

from breakout.types import Circle, CircleShape, Color, Line, Vec2
from breakout import layout


class Ball:
    """A moving ball.

    `velocity` is kept unit length; `speed` is the distance travelled per tick.
    Speed only ever grows, one increment per destroyed brick, up to `max_speed`.
    """

    def __init__(
        self,
        center: Vec2,
        radius: float,
        velocity: Vec2,
        speed: float,
        color: Color = layout.BALL_COLOR,
        speed_increment: float = layout.SPEED_INCREMENT,
        max_speed: float = layout.MAX_SPEED,
    ):
        self.circle = Circle(center.copy(), radius)
        self.velocity = velocity.unit()
        self.speed = speed
        self.color = color
        self.speed_increment = speed_increment
        self.max_speed = max_speed

    @classmethod
    def from_angle(cls, center: Vec2, radius: float, angle: float, speed: float, **kwargs) -> "Ball":
        """Create a ball heading along `angle` (radians, counter-clockwise from +x)."""
        return cls(center, radius, Vec2(math.cos(angle), math.sin(angle)), speed, **kwargs)

    @property
    def center(self) -> Vec2:
        return self.circle.center

    def move(self):
        self.circle.center = self.circle.center + self.velocity * self.speed

    def accelerate(self):
        """Add one speed increment, never passing the cap."""
        if self.speed < self.max_speed:
            self.speed = min(self.speed + self.speed_increment, self.max_speed)

    def redirect(self, line: Line):
        """Bounce off a segment by flipping one velocity axis.

        Vertical segments flip x, anything else flips y. This is exact for the
        axis-aligned edges the ball meets and is not a general reflection.
        """
        if line.is_vertical():
            self.velocity.x = -self.velocity.x
        else:
            self.velocity.y = -self.velocity.y

    def shape(self) -> CircleShape:
        return CircleShape(self.circle.copy(), self.color)
