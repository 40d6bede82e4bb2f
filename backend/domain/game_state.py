"""
GameState aggregate, tick input and the read-only Snapshot handed to renderers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from .constants import START_BLINK_VISIBLE, VIEWPORT_WIDTH
from .enemy import Enemy
from .level import Level, parse_level
from .snake import Snake
from .vec2 import Vec2


class GameStatus(Enum):
    START = "start"
    PLAYING = "playing"
    LOST = "lost"
    WON = "won"

    @property
    def is_over(self) -> bool:
        return self in (GameStatus.LOST, GameStatus.WON)


@dataclass(frozen=True)
class TickInput:
    """
    What the driver saw this tick.

    direction is one of the four unit directions, or None when no arrow is
    held. start is honoured on the start screen only, restart only once the
    game is over.
    """
    direction: Optional[Vec2] = None
    start: bool = False
    restart: bool = False


@dataclass(frozen=True, eq=False)
class Snapshot:
    """
    Everything a renderer needs for one frame.

    Snapshots compare by identity.
    """
    status: GameStatus
    width: int
    height: int
    viewport_x: int
    walls: np.ndarray
    visible_walls: np.ndarray
    foods: Tuple[Vec2, ...]
    exit: Vec2
    snake: Tuple[Vec2, ...]
    enemies: Tuple[Vec2, ...]
    score: int
    power_up_ticks: int
    show_start_prompt: bool

    @property
    def head(self) -> Vec2:
        return self.snake[0]

    def is_wall(self, cell: Vec2) -> bool:
        """True if cell is a wall anywhere in the level, on screen or not."""
        return bool(self.walls[cell.y, cell.x])

    def is_visible_wall(self, cell: Vec2) -> bool:
        """True if cell is a wall inside the visible window."""
        column = cell.x - self.viewport_x
        if not 0 <= column < self.visible_walls.shape[1]:
            return False
        return bool(self.visible_walls[cell.y, column])

    def print_board(self) -> str:
        """
        Returns a string representation of the visible window with:
        # = wall
        F = food
        E = exit
        X = enemy
        H = snake head
        o = snake body
        . = empty floor
        """
        visible_width = self.visible_walls.shape[1]
        board = [
            ['#' if self.visible_walls[y, x] else '.' for x in range(visible_width)]
            for y in range(self.height)
        ]

        def place(cell: Vec2, glyph: str):
            column = cell.x - self.viewport_x
            if 0 <= column < visible_width:
                board[cell.y][column] = glyph

        for food in self.foods:
            place(food, 'F')
        place(self.exit, 'E')
        for i, cell in enumerate(self.snake):
            place(cell, 'H' if i == 0 else 'o')
        for enemy in self.enemies:
            place(enemy, 'X')

        return "\n".join("".join(row) for row in board)


class GameState:
    """
    The single live session, owned by the driving loop.

    Attributes:
        level_source: raw level text, kept so a restart can re-parse it
        level, snake, enemies: the simulated world
        status: top of the state machine
        score: food eaten plus enemy bonuses
        power_up_ticks: ticks left in the power-up window
        viewport_x: first visible column
        start_blink_counter: start screen prompt blink cycle
        ticks: number of updates applied to this session
    """

    def __init__(
        self,
        level_source: str,
        level: Level,
        status: GameStatus = GameStatus.START
    ):
        self.level_source = level_source
        self.level = level
        self.snake = Snake([level.entrance])
        self.enemies: List[Enemy] = [Enemy(p) for p in level.enemy_spawns]
        self.status = status
        self.score = 0
        self.power_up_ticks = 0
        self.viewport_x = 0
        self.start_blink_counter = 0
        self.ticks = 0

    @classmethod
    def from_source(cls, level_source: str, status: GameStatus = GameStatus.START) -> "GameState":
        """Parse level_source and build a fresh session on it."""
        return cls(level_source, parse_level(level_source), status=status)

    @property
    def power_up_active(self) -> bool:
        return self.power_up_ticks > 0

    def snapshot(self) -> Snapshot:
        return Snapshot(
            status=self.status,
            width=self.level.width,
            height=self.level.height,
            viewport_x=self.viewport_x,
            walls=self.level.walls,
            visible_walls=self.level.visible_walls(self.viewport_x, VIEWPORT_WIDTH),
            foods=tuple(self.level.foods),
            exit=self.level.exit,
            snake=tuple(self.snake.positions),
            enemies=tuple(e.position for e in self.enemies),
            score=self.score,
            power_up_ticks=self.power_up_ticks,
            show_start_prompt=self.start_blink_counter < START_BLINK_VISIBLE,
        )

    def __repr__(self):
        return (
            f"<GameState status={self.status.value}, score={self.score}, "
            f"length={len(self.snake)}, enemies={len(self.enemies)}, "
            f"power_up={self.power_up_ticks}>"
        )
