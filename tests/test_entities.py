"""
Tests for Pongo game entities
"""

import pytest

from pongo.core.entities import Ball, BallShape, InputState, Paddle, Position, Score, Velocity


class TestPosition:
    """Tests for Position and Velocity value types"""

    def test_to_tuple(self) -> None:
        assert Position(3, 4).to_tuple() == (3, 4)
        assert Velocity(-3, 3).to_tuple() == (-3, 3)


class TestPaddle:
    """Tests for Paddle class"""

    def test_edges(self) -> None:
        paddle = Paddle(600, 200, 15, 100)
        assert (paddle.left, paddle.right) == (600, 615)
        assert (paddle.top, paddle.bottom) == (200, 300)
        assert paddle.get_rect() == (600, 200, 15, 100)

    @pytest.mark.parametrize(
        "up,down,expected_y",
        [
            (False, False, 200),
            (True, False, 194),
            (False, True, 206),
            (True, True, 200),
        ],
    )
    def test_move(self, up: bool, down: bool, expected_y: int) -> None:
        """Test that each held key moves the paddle by its speed"""
        paddle = Paddle(600, 200, 15, 100)
        paddle.move(up, down, 6)
        assert paddle.position.y == expected_y
        assert paddle.position.x == 600

    def test_clamp_top(self) -> None:
        paddle = Paddle(600, -4, 15, 100)
        paddle.clamp(480)
        assert paddle.position.y == 0

    def test_clamp_bottom(self) -> None:
        paddle = Paddle(600, 384, 15, 100)
        paddle.clamp(480)
        assert paddle.position.y == 380

    def test_clamp_inside_is_noop(self) -> None:
        paddle = Paddle(600, 250, 15, 100)
        paddle.clamp(480)
        assert paddle.position.y == 250


class TestBall:
    """Tests for Ball class"""

    def test_move(self) -> None:
        ball = Ball(10, 20, 3, -3)
        ball.move()
        assert ball.position.to_tuple() == (13, 17)

    def test_rect_bounds_anchor_top_left(self) -> None:
        ball = Ball(100, 50, 3, 3, BallShape.RECT, 15)
        assert ball.get_bounds() == (100, 50, 115, 65)
        assert ball.get_rect() == (100, 50, 15, 15)

    def test_circle_bounds_anchor_centre(self) -> None:
        ball = Ball(320, 240, 0, 0, BallShape.CIRCLE, 8)
        assert ball.size == 8
        assert ball.get_bounds() == (312, 232, 328, 248)
        assert ball.get_rect() == (312, 232, 16, 16)

    def test_is_at_rest(self) -> None:
        assert Ball(0, 0, 0, 0).is_at_rest()
        assert not Ball(0, 0, 3, 0).is_at_rest()
        assert not Ball(0, 0, 0, -3).is_at_rest()


class TestScore:
    """Tests for Score class"""

    def test_increment_raises_high_score(self) -> None:
        score = Score()
        score.increment()
        score.increment()
        assert score.current == 2
        assert score.high == 2

    def test_reset_keeps_high_score(self) -> None:
        score = Score()
        for _ in range(5):
            score.increment()
        score.reset()
        assert score.current == 0
        assert score.high == 5

    def test_high_score_only_moves_when_exceeded(self) -> None:
        score = Score(current=0, high=3)
        score.increment()
        assert score.high == 3
        for _ in range(3):
            score.increment()
        assert score.current == 4
        assert score.high == 4


def test_input_state_defaults() -> None:
    state = InputState()
    assert state.up is False
    assert state.down is False
