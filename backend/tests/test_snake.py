"""
Tests for domain/snake.py and domain/vec2.py.
"""

import os
import sys
from collections import deque

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import DOWN, LEFT, MOVE_INTERVAL, RIGHT, STILL, UP
from domain.snake import Snake
from domain.vec2 import Vec2


class TestVec2:
    """Tests for the Vec2 value type."""

    def test_equal_to_plain_tuple(self):
        assert Vec2(3, 4) == (3, 4)

    def test_offset(self):
        assert Vec2(3, 4).offset(LEFT) == Vec2(2, 4)

    def test_opposite(self):
        assert RIGHT.opposite() == LEFT
        assert UP.opposite() == DOWN
        assert STILL.opposite() == STILL

    def test_wrap_negative(self):
        assert Vec2(-1, -1).wrap(10, 3) == Vec2(9, 2)

    def test_wrap_past_the_end(self):
        assert Vec2(10, 3).wrap(10, 3) == Vec2(0, 0)

    def test_distance(self):
        assert Vec2(0, 0).distance_to(Vec2(3, 4)) == pytest.approx(5.0)


class TestSnake:
    """Tests for the Snake class."""

    def test_snake_initialization(self):
        """A new snake is one cell, standing still."""
        snake = Snake([Vec2(5, 5)])
        assert list(snake.positions) == [(5, 5)]
        assert snake.direction == STILL
        assert snake.next_direction == STILL
        assert snake.frames_since_last_move == 0
        assert len(snake) == 1

    def test_snake_positions_is_deque(self):
        snake = Snake([Vec2(5, 5)])
        assert isinstance(snake.positions, deque)

    def test_empty_body_rejected(self):
        with pytest.raises(ValueError):
            Snake([])

    def test_head_and_tail(self):
        snake = Snake([Vec2(5, 5), Vec2(4, 5), Vec2(3, 5)])
        assert snake.head == (5, 5)
        assert snake.tail == [(4, 5), (3, 5)]

    def test_steer_only_buffers(self):
        """Steering does not change the committed direction until the next move."""
        snake = Snake([Vec2(5, 5)], direction=RIGHT)
        snake.steer(UP)
        assert snake.direction == RIGHT
        assert snake.next_direction == UP


class TestReversalGuard:
    """The buffered direction is dropped if it would reverse the snake."""

    def test_reversal_ignored(self):
        snake = Snake([Vec2(5, 5), Vec2(4, 5)], direction=RIGHT)
        snake.steer(LEFT)
        snake.commit_direction()
        assert snake.direction == RIGHT

    @pytest.mark.parametrize("turn", [DOWN, UP])
    def test_perpendicular_turn_commits(self, turn):
        snake = Snake([Vec2(5, 5), Vec2(4, 5)], direction=RIGHT)
        snake.steer(turn)
        snake.commit_direction()
        assert snake.direction == turn

    def test_reversal_is_not_queued(self):
        """An ignored reversal stays ignored, it does not apply later."""
        snake = Snake([Vec2(5, 5)], direction=RIGHT)
        snake.steer(LEFT)
        snake.commit_direction()
        snake.commit_direction()
        assert snake.direction == RIGHT

    def test_any_direction_from_standing_still(self):
        snake = Snake([Vec2(5, 5)])
        snake.steer(LEFT)
        snake.commit_direction()
        assert snake.direction == LEFT


class TestSnakeMovement:
    """Tests for head computation, wrapping and collisions."""

    def test_next_head(self):
        snake = Snake([Vec2(2, 1)], direction=DOWN)
        assert snake.next_head(10, 3) == Vec2(2, 2)

    def test_wrap_right_edge(self):
        """Moving off the right edge re-enters at column 0 on the same row."""
        snake = Snake([Vec2(9, 1)], direction=RIGHT)
        assert snake.next_head(10, 3) == Vec2(0, 1)

    def test_wrap_left_edge(self):
        snake = Snake([Vec2(0, 1)], direction=LEFT)
        assert snake.next_head(10, 3) == Vec2(9, 1)

    def test_wrap_top_edge(self):
        snake = Snake([Vec2(4, 0)], direction=UP)
        assert snake.next_head(10, 3) == Vec2(4, 2)

    def test_wrap_bottom_edge(self):
        snake = Snake([Vec2(4, 2)], direction=DOWN)
        assert snake.next_head(10, 3) == Vec2(4, 0)

    def test_hits_body_excludes_head(self):
        snake = Snake([Vec2(2, 2), Vec2(3, 2)])
        assert snake.hits_body(Vec2(2, 2)) is False
        assert snake.hits_body(Vec2(3, 2)) is True

    def test_hits_body_includes_tail_end(self):
        """The last cell still counts, even though it is about to be vacated."""
        snake = Snake([Vec2(2, 2), Vec2(3, 2), Vec2(3, 3), Vec2(2, 3)])
        assert snake.hits_body(Vec2(2, 3)) is True

    def test_prepend_and_remove_last_segment(self):
        snake = Snake([Vec2(2, 2), Vec2(1, 2)])
        snake.prepend(Vec2(3, 2))
        snake.remove_last_segment()
        assert list(snake.positions) == [(3, 2), (2, 2)]


class TestMoveCadence:
    """The snake only moves every MOVE_INTERVAL ticks."""

    def test_advance_frame(self):
        snake = Snake([Vec2(0, 0)])
        due = [snake.advance_frame() for _ in range(MOVE_INTERVAL * 3)]
        assert due.count(True) == 3
        assert due[MOVE_INTERVAL - 1] is True
        assert due[0] is False
        assert snake.frames_since_last_move == 0
