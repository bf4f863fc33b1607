"""Arena boundary — three bouncing walls and a losing floor."""

from breakout.types import Line, Rect, Vec2
from breakout.geometry import edges, intersect_line_circle

WALLS = ("left", "right", "top", "bottom")


class Box:
    """The four playfield boundary segments, fixed for the whole session."""

    def __init__(self, width: float, height: float):
        self.bounds = Rect(Vec2(0, 0), Vec2(width, height))
        self.lines: dict[str, Line] = dict(zip(WALLS, edges(self.bounds)))

    def touching(self, ball) -> list[str]:
        """Names of the walls the ball currently touches, in check order."""
        return [
            name for name, line in self.lines.items()
            if intersect_line_circle(line, ball.circle) is not None
        ]

    def collision(self, ball) -> bool:
        """Bounce off left/right/top; return True the moment the floor is touched.

        The floor does not redirect the ball — touching it ends the session.
        """
        for name in WALLS:
            line = self.lines[name]
            if intersect_line_circle(line, ball.circle) is None:
                continue
            if name == "bottom":
                return True
            ball.redirect(line)
        return False
