"""
Domain entities for the Pacsnek game engine.

This module contains the core game entities that are independent of
rendering and input concerns.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, STILL, DIRECTIONS,
    MOVE_INTERVAL, POWERUP_TIME, VIEWPORT_WIDTH, ENEMY_BONUS,
)
from .vec2 import Vec2
from .level import Level, LevelError, parse_level, load_level, read_level_source
from .snake import Snake
from .enemy import Enemy
from .game_state import GameState, GameStatus, Snapshot, TickInput

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'STILL', 'DIRECTIONS',
    'MOVE_INTERVAL', 'POWERUP_TIME', 'VIEWPORT_WIDTH', 'ENEMY_BONUS',
    'Vec2',
    'Level', 'LevelError', 'parse_level', 'load_level', 'read_level_source',
    'Snake',
    'Enemy',
    'GameState', 'GameStatus', 'Snapshot', 'TickInput',
]
