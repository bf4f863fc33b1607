"""The player's paddle."""

from breakout.types import Color, PointerInput, Rect, RectShape
from breakout.geometry import deflect
from breakout import layout


class Paddle:
    """A pointer-driven rectangle that deflects the ball and is never destroyed."""

    def __init__(self, rect: Rect, field_width: float = layout.WIDTH, color: Color = layout.PADDLE_COLOR):
        self.rect = rect
        self.field_width = field_width
        self.color = color

    @property
    def width(self) -> float:
        return self.rect.width()

    def update_position(self, pointer: PointerInput):
        """Slide the paddle so its left edge follows the pointer.

        Holds the last position while the pointer is outside the play area.
        """
        if not pointer.inside:
            return
        w = self.width
        x = max(0.0, min(pointer.x, self.field_width - w))
        self.rect.min.x = x
        self.rect.max.x = x + w

    def collision(self, ball) -> bool:
        return deflect(self.rect, ball)

    def shape(self) -> RectShape:
        return RectShape(self.rect.copy(), self.color)
