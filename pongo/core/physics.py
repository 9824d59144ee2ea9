"""
Game-state updater for Pongo

One call to PhysicsEngine.update is one fixed tick: paddle input, ball movement,
wall collisions, paddle collision and scoring, in that order.
"""

from dataclasses import dataclass
from typing import Any

from pongo.core.collision import CollisionDetector
from pongo.core.collision import is_past_paddle
from pongo.core.collision import is_past_screen
from pongo.core.entities import Ball
from pongo.core.entities import BallShape
from pongo.core.entities import GameState
from pongo.core.entities import InputState
from pongo.core.entities import Paddle
from pongo.core.entities import Position
from pongo.core.entities import Score
from pongo.utils.config import LOGICAL_HEIGHT
from pongo.utils.config import LOGICAL_WIDTH
from pongo.utils.config import Variant
from pongo.utils.config import game_config

SCREEN_WIDTH = LOGICAL_WIDTH
SCREEN_HEIGHT = LOGICAL_HEIGHT
TICK_RATE = 60

BALL_SPEED = 3
PADDLE_SPEED = 6  # 6px per tick

PADDLE_X = 600
PADDLE_Y = 200
PADDLE_WIDTH = 15
PADDLE_HEIGHT = 100


@dataclass(frozen=True)
class VariantRules:
    """Behaviour that differs between rule sets"""

    ball_shape: BallShape
    # Side length for a rectangular ball, radius for a circular one
    ball_size: int
    # None means the screen centre
    ball_start: tuple[int, int] | None
    lazy_launch: bool
    clamp_paddle: bool
    reset_at_paddle_edge: bool
    inclusive_paddle_span: bool


RULES: dict[Variant, VariantRules] = {
    Variant.CLASSIC: VariantRules(
        ball_shape=BallShape.RECT,
        ball_size=15,
        ball_start=(0, 0),
        lazy_launch=False,
        clamp_paddle=False,
        reset_at_paddle_edge=False,
        inclusive_paddle_span=True,
    ),
    Variant.REFINED: VariantRules(
        ball_shape=BallShape.CIRCLE,
        ball_size=8,
        ball_start=None,
        lazy_launch=True,
        clamp_paddle=True,
        reset_at_paddle_edge=True,
        inclusive_paddle_span=False,
    ),
}


class PhysicsEngine:
    """Owns the paddle, the ball and the score, and advances them tick by tick"""

    def __init__(
        self,
        field_width: int = SCREEN_WIDTH,
        field_height: int = SCREEN_HEIGHT,
        variant: Variant | str | None = None,
    ):
        self.field_width = field_width
        self.field_height = field_height
        self.variant = Variant(variant) if variant is not None else game_config.VARIANT
        self.rules = RULES[self.variant]
        self.collision_detector = CollisionDetector(self.rules.inclusive_paddle_span)

        self.score = Score()
        self.tick = 0
        self.reset_paddle()
        self.ball = self._create_ball()

    @property
    def start_position(self) -> Position:
        """Where the ball starts and where it returns after a miss"""
        if self.rules.ball_start is None:
            return Position(self.field_width // 2, self.field_height // 2)
        return Position(*self.rules.ball_start)

    def _create_ball(self) -> Ball:
        start = self.start_position
        speed = 0 if self.rules.lazy_launch else BALL_SPEED
        return Ball(start.x, start.y, speed, speed, self.rules.ball_shape, self.rules.ball_size)

    def reset_paddle(self) -> None:
        """Puts the paddle back at its initial position"""
        self.paddle = Paddle(PADDLE_X, PADDLE_Y, PADDLE_WIDTH, PADDLE_HEIGHT)

    def reset(self) -> None:
        """Handles a miss: ball back to its start, current score dropped"""
        self.ball.position = self.start_position
        self.score.reset()

    def update(self, action: InputState) -> dict[str, list[Any]]:
        """Advances the game by one tick and returns what happened"""
        self.tick += 1

        # Player input
        self.paddle.move(action.up, action.down, PADDLE_SPEED)
        if self.rules.clamp_paddle:
            self.paddle.clamp(self.field_height)

        # Ball movement
        if self.rules.lazy_launch and self.ball.is_at_rest():
            self.ball.velocity.dx = BALL_SPEED
            self.ball.velocity.dy = BALL_SPEED
        self.ball.move()

        return self._check_collisions()

    def _is_miss(self) -> bool:
        if self.rules.reset_at_paddle_edge:
            return is_past_paddle(self.ball, self.paddle)
        return is_past_screen(self.ball, self.field_width)

    def _check_collisions(self) -> dict[str, list[Any]]:
        """Checks all collisions and returns events"""
        events: dict[str, list[Any]] = {
            "misses": [],
            "wall_bounces": [],
            "paddle_hits": [],
        }

        if self._is_miss():
            events["misses"].append({"lost_score": self.score.current})
            self.reset()

        walls = self.collision_detector.check_ball_walls(self.ball, self.field_height, BALL_SPEED)
        events["wall_bounces"].extend(wall.value for wall in walls)

        if self.collision_detector.check_ball_paddle(self.ball, self.paddle):
            self.score.increment()
            events["paddle_hits"].append({"score": self.score.current})

        return events

    def get_game_state(self) -> GameState:
        """Returns a snapshot of the current state"""
        return GameState(
            ball_position=self.ball.position.to_tuple(),
            ball_velocity=self.ball.velocity.to_tuple(),
            ball_shape=self.ball.shape.value,
            ball_size=self.ball.size,
            paddle_rect=self.paddle.get_rect(),
            score=self.score.current,
            high_score=self.score.high,
            tick=self.tick,
            field_bounds=(0, self.field_width, 0, self.field_height),
        )

    def reset_game(self) -> None:
        """Starts over, high score included"""
        self.score = Score()
        self.tick = 0
        self.reset_paddle()
        self.ball = self._create_ball()
