"""
Collision detection for Pongo

Wall responses force a direction instead of reflecting the velocity, while paddle hits
reflect it.
"""

from enum import Enum

from pongo.core.entities import Ball, Paddle


class Wall(Enum):
    """Screen edges the ball can touch"""

    LEFT = "left"
    TOP = "top"
    BOTTOM = "bottom"


def walls_touched(ball: Ball, field_height: int) -> list[Wall]:
    """Returns every screen edge the ball is on or past, in resolution order"""
    left, top, _, bottom = ball.get_bounds()
    touched = []
    if left <= 0:
        touched.append(Wall.LEFT)
    if top <= 0:
        touched.append(Wall.TOP)
    if bottom >= field_height:
        touched.append(Wall.BOTTOM)
    return touched


def apply_wall_bounce(ball: Ball, wall: Wall, speed: int) -> None:
    """Forces the velocity component away from the wall"""
    if wall == Wall.LEFT:
        ball.velocity.dx = speed
    elif wall == Wall.TOP:
        ball.velocity.dy = speed
    elif wall == Wall.BOTTOM:
        ball.velocity.dy = -speed


def is_past_screen(ball: Ball, field_width: int) -> bool:
    """The ball left the screen through the right edge"""
    left, _, _, _ = ball.get_bounds()
    return left >= field_width


def is_past_paddle(ball: Ball, paddle: Paddle) -> bool:
    """The ball's reference point reached the paddle's right edge"""
    return ball.position.x >= paddle.right


def within_paddle_span(y: int, paddle: Paddle, inclusive: bool) -> bool:
    """Checks a vertical coordinate against the paddle's span"""
    if inclusive:
        return paddle.top <= y <= paddle.bottom
    return paddle.top < y < paddle.bottom


def ball_hits_paddle(ball: Ball, paddle: Paddle, inclusive: bool = True) -> bool:
    """
    Detects a paddle hit.

    The ball must be moving towards the paddle and overlap it horizontally, and its
    y coordinate must lie within the paddle's vertical span. Requiring a rightward
    velocity means a ball still overlapping the paddle after bouncing is not hit again.
    """
    if ball.velocity.dx <= 0:
        return False
    left, _, right, _ = ball.get_bounds()
    if right < paddle.left or left > paddle.right:
        return False
    return within_paddle_span(ball.position.y, paddle, inclusive)


class CollisionDetector:
    """Ball collision detection and response"""

    def __init__(self, inclusive_paddle_span: bool = True):
        self.inclusive_paddle_span = inclusive_paddle_span

    def check_ball_walls(self, ball: Ball, field_height: int, speed: int) -> list[Wall]:
        """Bounces the ball off every touched wall and returns them"""
        touched = walls_touched(ball, field_height)
        for wall in touched:
            apply_wall_bounce(ball, wall, speed)
        return touched

    def check_ball_paddle(self, ball: Ball, paddle: Paddle) -> bool:
        """Reflects the ball off the paddle; returns True on a hit"""
        if not ball_hits_paddle(ball, paddle, self.inclusive_paddle_span):
            return False
        ball.velocity.dx = -ball.velocity.dx
        return True
