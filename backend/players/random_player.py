"""
Random player implementation - wanders along safe cells.
"""

import random
from typing import List, Optional

from domain.constants import DIRECTIONS, STILL
from domain.game_state import GameStatus, Snapshot, TickInput
from domain.vec2 import Vec2
from .base import Player


class RandomPlayer(Player):
    """
    A random autopilot that keeps its heading while the cell ahead is safe and
    turns to a random safe direction otherwise (or, now and then, anyway).
    It never asks for a reversal.
    """

    def __init__(self, seed: Optional[int] = None, turn_chance: float = 0.05):
        self.rng = random.Random(seed)
        self.turn_chance = turn_chance
        self.heading = STILL

    def _is_safe(self, snapshot: Snapshot, direction: Vec2) -> bool:
        cell = snapshot.head.offset(direction).wrap(snapshot.width, snapshot.height)
        if snapshot.is_wall(cell):
            return False
        # The body minus the head, tail included, is what the snake collides with
        return cell not in snapshot.snake[1:]

    def get_input(self, snapshot: Snapshot) -> TickInput:
        if snapshot.status is GameStatus.START:
            return TickInput(start=True)
        if snapshot.status is not GameStatus.PLAYING:
            return TickInput()

        candidates: List[Vec2] = [
            d for d in DIRECTIONS.values()
            if d != self.heading.opposite() and self._is_safe(snapshot, d)
        ]
        if not candidates:
            # Boxed in, keep going and accept the crash
            return TickInput(direction=self.heading if self.heading != STILL else None)

        keep = self.heading in candidates and self.rng.random() >= self.turn_chance
        if not keep:
            self.heading = self.rng.choice(candidates)
        return TickInput(direction=self.heading)
