"""
Scripted player - replays a fixed list of directions, one per movement cycle.
"""

from typing import Iterable, List, Union

from domain.constants import DIRECTIONS, MOVE_INTERVAL
from domain.game_state import GameStatus, Snapshot, TickInput
from domain.vec2 import Vec2
from .base import Player

# Single-letter shorthands accepted on the command line
SHORTHANDS = {name[0]: direction for name, direction in DIRECTIONS.items()}


def parse_moves(moves: Iterable[Union[str, Vec2]]) -> List[Vec2]:
    """
    Turn 'RIGHT' / 'r' / Vec2 entries into direction vectors.

    Raises:
        ValueError: If an entry is not a known direction.
    """
    parsed = []
    for move in moves:
        if isinstance(move, Vec2):
            parsed.append(move)
            continue
        key = move.strip().upper()
        direction = DIRECTIONS.get(key) or SHORTHANDS.get(key)
        if direction is None:
            raise ValueError(f"Unknown move '{move}'. Use one of: {', '.join(DIRECTIONS)}")
        parsed.append(direction)
    return parsed


class ScriptedPlayer(Player):
    """
    Presses start, then holds each scripted direction for one movement cycle.
    Once the script runs out no arrow is held and the snake keeps going.
    """

    def __init__(self, moves: Iterable[Union[str, Vec2]], hold_ticks: int = MOVE_INTERVAL):
        self.moves = parse_moves(moves)
        self.hold_ticks = hold_ticks
        self.playing_ticks = 0

    def get_input(self, snapshot: Snapshot) -> TickInput:
        if snapshot.status is GameStatus.START:
            return TickInput(start=True)
        if snapshot.status is not GameStatus.PLAYING:
            return TickInput()

        index = self.playing_ticks // self.hold_ticks
        self.playing_ticks += 1
        if index < len(self.moves):
            return TickInput(direction=self.moves[index])
        return TickInput()
