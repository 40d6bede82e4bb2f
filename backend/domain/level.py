"""
Level entity - maze geometry parsed from a textual grid.

Level files are plain text, one row per line:
    # = wall
    F = food
    S = snake entrance (exactly one)
    E = exit (exactly one)
    X = enemy spawn
Anything else is empty floor.
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

import numpy as np

from .constants import WALL, FOOD, ENTRANCE, EXIT, ENEMY_SPAWN
from .vec2 import Vec2

logger = logging.getLogger(__name__)


class LevelError(ValueError):
    """Raised when a level source cannot be read or is not completable."""


class Level:
    """
    Maze geometry for one play session.

    Attributes:
        walls: read-only numpy bool array indexed [y, x]
        foods: food positions in file order, shrinks as food is eaten
        entrance: where the snake starts
        exit: reaching this cell wins the level
        enemy_spawns: initial enemy positions in file order
    """

    def __init__(
        self,
        walls: np.ndarray,
        foods: List[Vec2],
        entrance: Vec2,
        exit: Vec2,
        enemy_spawns: Tuple[Vec2, ...] = ()
    ):
        self.walls = walls
        self.walls.setflags(write=False)
        self.foods = foods
        self.entrance = entrance
        self.exit = exit
        self.enemy_spawns = enemy_spawns

    @property
    def height(self) -> int:
        return self.walls.shape[0]

    @property
    def width(self) -> int:
        return self.walls.shape[1]

    def is_wall(self, cell: Vec2) -> bool:
        return bool(self.walls[cell.y, cell.x])

    def eat(self, cell: Vec2) -> bool:
        """Remove the food at cell, keeping the order of the remaining food."""
        for i, food in enumerate(self.foods):
            if food == cell:
                del self.foods[i]
                return True
        return False

    def visible_walls(self, offset: int, width: int) -> np.ndarray:
        """Return the wall columns [offset, offset + width) as a read-only view."""
        window = self.walls[:, offset:offset + width]
        window.setflags(write=False)
        return window

    def __repr__(self):
        return (
            f"<Level {self.width}x{self.height}, foods={len(self.foods)}, "
            f"entrance={tuple(self.entrance)}, exit={tuple(self.exit)}, "
            f"enemies={len(self.enemy_spawns)}>"
        )


def parse_level(text: str) -> Level:
    """
    Build a Level from its textual grid.

    Raises:
        LevelError: if the grid is empty or ragged, or the entrance, exit or
            food is missing.
    """
    lines = text.strip().splitlines()
    if not lines:
        raise LevelError("Invalid level: source is empty")

    width = len(lines[0])
    for y, line in enumerate(lines):
        if len(line) != width:
            raise LevelError(
                f"Invalid level: row {y} has {len(line)} columns, expected {width}"
            )

    walls = np.zeros((len(lines), width), dtype=bool)
    foods: List[Vec2] = []
    enemy_spawns: List[Vec2] = []
    entrance: Optional[Vec2] = None
    exit_cell: Optional[Vec2] = None

    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            cell = Vec2(x, y)
            if char == WALL:
                walls[y, x] = True
            elif char == FOOD:
                foods.append(cell)
            elif char == ENEMY_SPAWN:
                enemy_spawns.append(cell)
            elif char == ENTRANCE:
                if entrance is not None:
                    raise LevelError(f"Invalid level: second snake start at {tuple(cell)}")
                entrance = cell
            elif char == EXIT:
                if exit_cell is not None:
                    raise LevelError(f"Invalid level: second exit at {tuple(cell)}")
                exit_cell = cell

    if entrance is None or exit_cell is None or not foods:
        raise LevelError("Invalid level: missing snake start, exit, or food")

    level = Level(walls, foods, entrance, exit_cell, tuple(enemy_spawns))
    logger.debug(f"Parsed {level!r}")
    return level


def read_level_source(path: Union[str, Path]) -> str:
    """Read raw level text, turning I/O failures into LevelError."""
    try:
        return Path(path).read_text()
    except OSError as e:
        raise LevelError(f"Could not read level file {path}: {e}") from e


def load_level(path: Union[str, Path]) -> Level:
    return parse_level(read_level_source(path))
