"""Core data types for the Breakout simulation.

Coordinates are y-up: the origin is the bottom-left corner of the playfield.
"""

from dataclasses import dataclass, field

PLAYING = "playing"
ENDED = "ended"

Color = tuple[int, int, int]


@dataclass
class Vec2:
    """2D vector for position and direction."""
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vec2":
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "Vec2":
        return self.__mul__(scalar)

    def dot(self, other: "Vec2") -> float:
        return self.x * other.x + self.y * other.y

    def magnitude(self) -> float:
        return (self.x**2 + self.y**2) ** 0.5

    def unit(self) -> "Vec2":
        """Unit vector in the same direction (zero stays zero)."""
        mag = self.magnitude()
        if mag < 1e-12:
            return Vec2()
        return Vec2(self.x / mag, self.y / mag)

    def copy(self) -> "Vec2":
        return Vec2(self.x, self.y)


@dataclass
class Line:
    """A finite line segment from a to b."""
    a: Vec2
    b: Vec2

    def __post_init__(self):
        if self.a.x == self.b.x and self.a.y == self.b.y:
            raise ValueError(f"degenerate line: both endpoints at ({self.a.x}, {self.a.y})")

    def is_vertical(self) -> bool:
        return self.b.x - self.a.x == 0


@dataclass
class Rect:
    """Axis-aligned rectangle given by its min and max corners."""
    min: Vec2
    max: Vec2

    def __post_init__(self):
        if self.min.x > self.max.x or self.min.y > self.max.y:
            raise ValueError(
                f"rect min ({self.min.x}, {self.min.y}) exceeds max ({self.max.x}, {self.max.y})"
            )

    @classmethod
    def from_size(cls, x: float, y: float, w: float, h: float) -> "Rect":
        return cls(Vec2(x, y), Vec2(x + w, y + h))

    def width(self) -> float:
        return self.max.x - self.min.x

    def height(self) -> float:
        return self.max.y - self.min.y

    def copy(self) -> "Rect":
        return Rect(self.min.copy(), self.max.copy())


@dataclass
class Circle:
    """Circle with a center and a strictly positive radius."""
    center: Vec2
    radius: float

    def __post_init__(self):
        if self.radius <= 0:
            raise ValueError(f"circle radius must be positive, got {self.radius}")

    def copy(self) -> "Circle":
        return Circle(self.center.copy(), self.radius)


@dataclass
class PointerInput:
    """Pointer sample supplied once per tick by the input collaborator."""
    x: float = 0.0
    y: float = 0.0
    inside: bool = True  # False when the pointer has left the play area


@dataclass
class RectShape:
    """A rectangle ready for drawing."""
    rect: Rect
    color: Color


@dataclass
class CircleShape:
    """A circle ready for drawing."""
    circle: Circle
    color: Color


@dataclass
class WallBounce:
    """Ball bounced off the left, right or top wall."""
    pos: Vec2
    tick: int
    wall: str  # "left", "right" or "top"


@dataclass
class PaddleHit:
    """Ball was deflected by the paddle."""
    pos: Vec2
    tick: int


@dataclass
class BrickHit:
    """Ball destroyed a brick."""
    pos: Vec2
    tick: int
    brick_id: int


@dataclass
class BallLost:
    """Ball touched the bottom boundary."""
    pos: Vec2
    tick: int


@dataclass
class Scene:
    """Everything the rendering collaborator needs for one tick."""
    paddle: RectShape
    ball: CircleShape
    bricks: list[RectShape] = field(default_factory=list)
    status: str = PLAYING
    tick: int = 0
    events: list = field(default_factory=list)
