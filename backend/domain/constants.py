"""
Game constants for Pacsnek.
"""

from .vec2 import Vec2

# Movement directions (y grows downwards, row 0 is the top of the level)
RIGHT = Vec2(1, 0)
LEFT = Vec2(-1, 0)
DOWN = Vec2(0, 1)
UP = Vec2(0, -1)
STILL = Vec2(0, 0)

DIRECTIONS = {
    "RIGHT": RIGHT,
    "LEFT": LEFT,
    "DOWN": DOWN,
    "UP": UP,
}

# Order in which enemies evaluate their candidate steps
ENEMY_MOVE_ORDER = (RIGHT, LEFT, DOWN, UP)

# Timing (all counted in ticks, the game runs at 60 ticks per second)
MOVE_INTERVAL = 10
POWERUP_TIME = 300  # 5 seconds @ 60 ticks
START_BLINK_PERIOD = 60
START_BLINK_VISIBLE = 30

# Rendering window
VIEWPORT_WIDTH = 32  # 640px screen / 20px cells

# Scoring
FOOD_SCORE = 1
ENEMY_BONUS = 10

# Level glyphs
WALL = "#"
FOOD = "F"
ENTRANCE = "S"
EXIT = "E"
ENEMY_SPAWN = "X"
