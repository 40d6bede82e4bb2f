"""
Enemy AI - greedy one-step pursuit/evasion.

There is no path search: each movement cycle an enemy looks at its four
neighbouring cells and steps to the one that is closest to the snake head,
or furthest from it while a power-up is active.
"""

from typing import Optional

from domain.constants import ENEMY_MOVE_ORDER, STILL
from domain.level import Level
from domain.vec2 import Vec2


def choose_step(level: Level, position: Vec2, target: Vec2, evading: bool) -> Vec2:
    """
    Pick the direction an enemy at position takes this movement cycle.

    Candidates are tried in ENEMY_MOVE_ORDER and only a strictly better score
    replaces the current best, so ties go to the earlier direction. Walls are
    the only obstacle.

    Returns:
        The chosen unit direction, or STILL when every neighbour is a wall.
    """
    best: Optional[Vec2] = None
    best_distance = 0.0

    for direction in ENEMY_MOVE_ORDER:
        candidate = position.offset(direction).wrap(level.width, level.height)
        if level.is_wall(candidate):
            continue

        distance = candidate.distance_to(target)
        if best is None:
            improves = True
        elif evading:
            improves = distance > best_distance
        else:
            improves = distance < best_distance

        if improves:
            best = direction
            best_distance = distance

    return best if best is not None else STILL


def next_position(level: Level, position: Vec2, target: Vec2, evading: bool) -> Vec2:
    """Where the enemy at position ends up after one movement cycle."""
    step = choose_step(level, position, target, evading)
    return position.offset(step).wrap(level.width, level.height)
