"""Session configuration and named layout presets."""

import math
from dataclasses import dataclass, fields

from breakout.types import Color
from breakout import layout


@dataclass
class SessionConfig:
    """Everything fixed at session start. Validated on construction."""
    width: float = layout.WIDTH
    height: float = layout.HEIGHT

    brick_w: float = layout.BRICK_W
    brick_h: float = layout.BRICK_H
    spacing: float = layout.SPACING
    brick_rows: int = layout.BRICK_ROWS
    brick_x0: float = layout.BRICK_X0
    brick_y0: float = layout.BRICK_Y0

    paddle_w: float = layout.PADDLE_W
    paddle_h: float = layout.PADDLE_H
    paddle_x: float = layout.PADDLE_X
    paddle_y: float = layout.PADDLE_Y

    ball_r: float = layout.BALL_R
    ball_x: float = layout.BALL_X
    ball_y: float = layout.BALL_Y
    ball_angle: float = layout.BALL_ANGLE
    ball_speed: float = layout.BALL_SPEED
    speed_increment: float = layout.SPEED_INCREMENT
    max_speed: float = layout.MAX_SPEED

    brick_color: Color = layout.BRICK_COLOR
    paddle_color: Color = layout.PADDLE_COLOR
    ball_color: Color = layout.BALL_COLOR
    background: Color = layout.BACKGROUND

    def __post_init__(self):
        for name in ("width", "height", "brick_w", "brick_h", "paddle_w", "paddle_h", "ball_r"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        for name in ("spacing", "brick_rows", "ball_speed", "speed_increment"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative, got {getattr(self, name)}")
        if self.max_speed < self.ball_speed:
            raise ValueError(f"max_speed {self.max_speed} is below ball_speed {self.ball_speed}")
        if not math.isfinite(self.ball_angle):
            raise ValueError(f"ball_angle must be finite, got {self.ball_angle}")

        if self.paddle_w > self.width:
            raise ValueError(f"paddle_w {self.paddle_w} is wider than the playfield ({self.width})")
        if not (0 <= self.paddle_y and self.paddle_y + self.paddle_h <= self.height):
            raise ValueError(f"paddle_y {self.paddle_y} puts the paddle outside the playfield")

        r = self.ball_r
        if not (r < self.ball_x < self.width - r and r < self.ball_y < self.height - r):
            raise ValueError(
                f"ball at ({self.ball_x}, {self.ball_y}) with radius {r} "
                f"does not fit inside the {self.width}x{self.height} playfield"
            )

        if self.brick_rows > 0:
            if self.brick_x0 < 0 or self.brick_x0 + self.brick_w > self.width:
                raise ValueError(f"brick_x0 {self.brick_x0} leaves no room for a brick")
            top = self.brick_y0 + self.brick_rows * (self.brick_h + self.spacing) - self.spacing
            if self.brick_y0 < 0 or top > self.height:
                raise ValueError(
                    f"{self.brick_rows} brick rows from y={self.brick_y0} overflow the playfield height"
                )

    def brick_columns(self) -> int:
        return int((self.width - self.brick_x0 + self.spacing) // (self.brick_w + self.spacing))

    def brick_count(self) -> int:
        return self.brick_rows * self.brick_columns()


# Each preset overrides SessionConfig defaults; "label" is for display only.
LAYOUT_PRESETS = {
    "classic": {
        "label": "Classic (1200x800, 7 rows)",
    },
    "compact": {
        "label": "Compact (400x300, 3 rows)",
        "width": 400,
        "height": 300,
        "brick_rows": 3,
        "brick_x0": 5,
        "brick_y0": 200,
        "paddle_x": 170,
        "paddle_y": 30,
        "ball_x": 200,
        "ball_y": 120,
        "ball_r": 6,
        "ball_speed": 2.0,
        "speed_increment": 0.05,
        "max_speed": 4.0,
    },
    "rapid": {
        "label": "Rapid (classic grid, fast ball)",
        "ball_speed": 3.0,
        "speed_increment": 0.05,
        "max_speed": 6.0,
    },
    "wide_paddle": {
        "label": "Wide Paddle (easy)",
        "paddle_w": 180,
        "paddle_x": layout.WIDTH / 2 - 90,
        "ball_speed": 2.0,
        "speed_increment": 0.02,
        "max_speed": 5.0,
    },
}

_FIELD_NAMES = {f.name for f in fields(SessionConfig)}


def get_config(key: str, **overrides) -> SessionConfig:
    """Build a SessionConfig from a preset key plus optional field overrides."""
    preset = LAYOUT_PRESETS[key]
    values = {k: v for k, v in preset.items() if k in _FIELD_NAMES}
    values.update(overrides)
    return SessionConfig(**values)


def list_configs() -> list[str]:
    """Return all available layout preset keys."""
    return list(LAYOUT_PRESETS.keys())
