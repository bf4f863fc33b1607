"""Autopilot — scripted pointer input for headless sessions and demos.

Each style tracks the ball's x position with a different mix of speed,
aiming noise and attention. `reach` is the furthest the pointer can travel in
one tick; `focus` is the chance per tick that the pointer stays inside the
play area.
"""

import random

from breakout.types import PointerInput


# Autopilot style presets
PILOT_STYLES = {
    "perfect": {
        "label": "Perfect",
        "reach": float("inf"),
        "aim_noise": 0.0,
        "focus": 1.0,
    },
    "steady": {
        "label": "Steady",
        "reach": 6.0,
        "aim_noise": 4.0,
        "focus": 1.0,
    },
    "sloppy": {
        "label": "Sloppy",
        "reach": 8.0,
        "aim_noise": 25.0,
        "focus": 0.98,
    },
    "sluggish": {
        "label": "Sluggish",
        "reach": 1.5,
        "aim_noise": 6.0,
        "focus": 1.0,
    },
    "wanderer": {
        "label": "Wanderer",
        "reach": 5.0,
        "aim_noise": 10.0,
        "focus": 0.6,
    },
}


class Autopilot:
    """Moves a virtual pointer so the paddle's center chases the ball."""

    def __init__(self, style: str = "steady", start_x: float = None):
        """Create an autopilot.

        Args:
            style: Key from PILOT_STYLES.
            start_x: Initial pointer x; defaults to wherever the paddle is on
                the first call.
        """
        preset = PILOT_STYLES[style]
        self.style = style
        self.label = preset["label"]
        self.reach = preset["reach"]
        self.aim_noise = preset["aim_noise"]
        self.focus = preset["focus"]
        self.x = start_x

    def target(self, session) -> float:
        """Pointer x that would center the paddle under the ball."""
        half = session.paddle.width / 2
        aim = session.ball.center.x - half
        if self.aim_noise > 0:
            aim += random.gauss(0, self.aim_noise)
        return aim

    def pointer(self, session) -> PointerInput:
        """Next pointer sample for `session`."""
        if self.x is None:
            self.x = session.paddle.rect.min.x

        if random.random() > self.focus:
            return PointerInput(x=self.x, y=-1.0, inside=False)

        delta = self.target(session) - self.x
        delta = max(-self.reach, min(self.reach, delta))
        self.x += delta
        y = session.paddle.rect.min.y
        return PointerInput(x=self.x, y=y, inside=True)
