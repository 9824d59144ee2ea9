"""
Pongo game entities: paddle, ball, score
"""

from dataclasses import dataclass
from enum import Enum


class BallShape(Enum):
    """Available ball shapes"""

    RECT = "rect"
    CIRCLE = "circle"


@dataclass
class Position:
    """Integer screen position"""

    x: int
    y: int

    def to_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


@dataclass
class Velocity:
    """Per-tick displacement"""

    dx: int
    dy: int

    def to_tuple(self) -> tuple[int, int]:
        return (self.dx, self.dy)


class Paddle:
    """Player paddle, anchored at its top-left corner"""

    def __init__(self, x: int, y: int, width: int, height: int):
        self.position = Position(x, y)
        self.width = width
        self.height = height

    @property
    def left(self) -> int:
        return self.position.x

    @property
    def right(self) -> int:
        return self.position.x + self.width

    @property
    def top(self) -> int:
        return self.position.y

    @property
    def bottom(self) -> int:
        return self.position.y + self.height

    def move(self, up: bool, down: bool, speed: int) -> None:
        """Moves the paddle vertically; both keys held cancel out"""
        if down:
            self.position.y += speed
        if up:
            self.position.y -= speed

    def clamp(self, screen_height: int) -> None:
        """Keeps the paddle fully on screen"""
        self.position.y = max(0, min(screen_height - self.height, self.position.y))

    def get_rect(self) -> tuple[int, int, int, int]:
        """Returns the paddle rectangle (x, y, width, height)"""
        return (self.position.x, self.position.y, self.width, self.height)


class Ball:
    """Game ball

    A rectangular ball is anchored at its top-left corner, a circular ball at its centre.
    """

    def __init__(
        self,
        x: int,
        y: int,
        dx: int,
        dy: int,
        shape: BallShape = BallShape.RECT,
        size: int = 15,
    ):
        self.position = Position(x, y)
        self.velocity = Velocity(dx, dy)
        self.shape = shape
        # Side length for RECT, radius for CIRCLE
        self.size = size

    def move(self) -> None:
        """Advances the ball by one tick"""
        self.position.x += self.velocity.dx
        self.position.y += self.velocity.dy

    def is_at_rest(self) -> bool:
        return self.velocity.dx == 0 and self.velocity.dy == 0

    def get_bounds(self) -> tuple[int, int, int, int]:
        """Returns (left, top, right, bottom)"""
        x, y = self.position.x, self.position.y
        if self.shape == BallShape.CIRCLE:
            return (x - self.size, y - self.size, x + self.size, y + self.size)
        return (x, y, x + self.size, y + self.size)

    def get_rect(self) -> tuple[int, int, int, int]:
        """Returns the bounding rectangle (x, y, width, height)"""
        left, top, right, bottom = self.get_bounds()
        return (left, top, right - left, bottom - top)


@dataclass
class Score:
    """Current score and best score of the session"""

    current: int = 0
    high: int = 0

    def increment(self) -> None:
        self.current += 1
        if self.current > self.high:
            self.high = self.current

    def reset(self) -> None:
        """Drops the current score; the high score is kept"""
        self.current = 0


@dataclass(frozen=True)
class InputState:
    """Keys held during one tick"""

    up: bool = False
    down: bool = False


@dataclass(frozen=True)
class GameState:
    """Snapshot of the game for renderers and observers"""

    ball_position: tuple[int, int]
    ball_velocity: tuple[int, int]
    ball_shape: str
    ball_size: int
    paddle_rect: tuple[int, int, int, int]
    score: int
    high_score: int
    tick: int
    field_bounds: tuple[int, int, int, int]
