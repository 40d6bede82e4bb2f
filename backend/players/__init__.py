"""
Player implementations for Pacsnek.

Players decide what happens next: input sources produce the per-tick
controls for the snake, and the enemy AI steers the pursuers.
"""

from .base import Player
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer, parse_moves
from .enemy_ai import choose_step, next_position

__all__ = [
    'Player',
    'RandomPlayer',
    'ScriptedPlayer',
    'parse_moves',
    'choose_step',
    'next_position',
]
