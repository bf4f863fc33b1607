"""Bricks — grid layout, collision, and per-tick removal."""

from breakout.types import BrickHit, Color, Rect, RectShape
from breakout.geometry import deflect
from breakout import layout


class Brick:
    """A destructible rectangle identified by its layout index."""

    def __init__(self, rect: Rect, id: int, color: Color = layout.BRICK_COLOR):
        self.rect = rect
        self.id = id
        self.color = color

    def collision(self, ball) -> bool:
        """Deflect the ball off every touched edge; True means the brick is destroyed."""
        return deflect(self.rect, ball)

    def shape(self) -> RectShape:
        return RectShape(self.rect.copy(), self.color)

    def __repr__(self):
        return f"Brick(id={self.id}, min=({self.rect.min.x}, {self.rect.min.y}))"


def build_bricks(
    width: float = layout.WIDTH,
    rows: int = layout.BRICK_ROWS,
    brick_w: float = layout.BRICK_W,
    brick_h: float = layout.BRICK_H,
    spacing: float = layout.SPACING,
    x0: float = layout.BRICK_X0,
    y0: float = layout.BRICK_Y0,
    color: Color = layout.BRICK_COLOR,
) -> list[Brick]:
    """Lay out a row-major grid of bricks.

    Rows start at y0 and stack upward; each row holds as many bricks as fit
    between x0 and the right edge of the playfield.
    """
    cols = int((width - x0 + spacing) // (brick_w + spacing))
    bricks = []
    for i in range(rows * cols):
        row, col = divmod(i, cols)
        x = x0 + col * (brick_w + spacing)
        y = y0 + row * (brick_h + spacing)
        bricks.append(Brick(Rect.from_size(x, y, brick_w, brick_h), id=i, color=color))
    return bricks


def strike_bricks(bricks: list[Brick], ball, tick: int = 0) -> tuple[list[Brick], list[BrickHit]]:
    """Test every brick against the ball, in order.

    Destroyed bricks accelerate the ball once each and are dropped; survivors
    keep their relative order. Returns (survivors, hit events).
    """
    survivors: list[Brick] = []
    hits: list[BrickHit] = []
    for brick in bricks:
        if brick.collision(ball):
            ball.accelerate()
            hits.append(BrickHit(pos=ball.center.copy(), tick=tick, brick_id=brick.id))
        else:
            survivors.append(brick)
    return survivors, hits
