"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List

from .constants import MOVE_INTERVAL, STILL
from .vec2 import Vec2


class Snake:
    """
    Represents the player-controlled snake.

    Attributes:
        positions: deque of cells from head at index 0 to tail at the end
        direction: the direction applied on the last move
        next_direction: the latest player intent, applied on the next move
            unless it would reverse the snake into itself
        frames_since_last_move: ticks counted towards the next move
    """

    def __init__(self, positions: List[Vec2], direction: Vec2 = STILL):
        if not positions:
            raise ValueError("Snake needs at least one cell")
        self.positions = deque(positions)
        self.direction = direction
        self.next_direction = STILL
        self.frames_since_last_move = 0

    @property
    def head(self) -> Vec2:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> List[Vec2]:
        """Every cell except the head."""
        return list(self.positions)[1:]

    def __len__(self) -> int:
        return len(self.positions)

    def steer(self, direction: Vec2) -> None:
        self.next_direction = direction

    def advance_frame(self) -> bool:
        """Count one tick; True when the snake is due to move."""
        self.frames_since_last_move += 1
        if self.frames_since_last_move < MOVE_INTERVAL:
            return False
        self.frames_since_last_move = 0
        return True

    def commit_direction(self) -> None:
        # Reversals are ignored
        if self.next_direction != self.direction.opposite():
            self.direction = self.next_direction

    def next_head(self, width: int, height: int) -> Vec2:
        return self.head.offset(self.direction).wrap(width, height)

    def hits_body(self, cell: Vec2) -> bool:
        """Check cell against the current body, head excluded, tail included."""
        return cell in self.tail

    def prepend(self, head: Vec2) -> None:
        self.positions.appendleft(head)

    def remove_last_segment(self) -> None:
        self.positions.pop()
