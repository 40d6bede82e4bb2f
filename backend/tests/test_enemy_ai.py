"""
Tests for players/enemy_ai.py - greedy pursuit and evasion.
"""

import os
import sys

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import DOWN, LEFT, RIGHT, STILL, UP
from domain.level import parse_level
from domain.vec2 import Vec2
from players.enemy_ai import choose_step, next_position


OPEN_LEVEL = parse_level("""
#######
#S....#
#.....#
#.....#
#.....#
#....E#
#F....#
#######
""")


class TestPursuit:
    """Without a power-up the enemy closes in on the head."""

    def test_moves_towards_target(self):
        assert choose_step(OPEN_LEVEL, Vec2(3, 3), Vec2(5, 3), evading=False) == RIGHT

    def test_moves_up_towards_target(self):
        assert choose_step(OPEN_LEVEL, Vec2(3, 3), Vec2(3, 1), evading=False) == UP

    def test_tie_keeps_earlier_candidate(self):
        """RIGHT and DOWN are equally close; RIGHT comes first in the order."""
        assert choose_step(OPEN_LEVEL, Vec2(3, 3), Vec2(5, 5), evading=False) == RIGHT

    def test_walls_are_skipped(self):
        """In the top-left corner only RIGHT and DOWN are open."""
        assert choose_step(OPEN_LEVEL, Vec2(1, 1), Vec2(1, 3), evading=False) == DOWN

    def test_next_position(self):
        assert next_position(OPEN_LEVEL, Vec2(3, 3), Vec2(5, 3), evading=False) == Vec2(4, 3)

    def test_target_cell_is_not_an_obstacle(self):
        """Enemies only avoid walls, so they can step onto the head."""
        assert next_position(OPEN_LEVEL, Vec2(3, 3), Vec2(4, 3), evading=False) == Vec2(4, 3)


class TestEvasion:
    """With a power-up active the enemy runs away."""

    def test_moves_away_from_target(self):
        assert choose_step(OPEN_LEVEL, Vec2(3, 3), Vec2(5, 3), evading=True) == LEFT

    def test_tie_keeps_earlier_candidate(self):
        """LEFT and UP are equally far; LEFT comes first in the order."""
        assert choose_step(OPEN_LEVEL, Vec2(3, 3), Vec2(5, 5), evading=True) == LEFT

    def test_cornered_enemy_takes_first_furthest_open_cell(self):
        """Against the right wall, DOWN and UP are equally far; DOWN comes first."""
        assert choose_step(OPEN_LEVEL, Vec2(5, 5), Vec2(4, 5), evading=True) == DOWN


class TestEdgeCases:
    """Wrapping and blocked enemies."""

    def test_boxed_in_enemy_stays(self):
        level = parse_level("######\n#X#SFE\n######")
        assert choose_step(level, Vec2(1, 1), Vec2(3, 1), evading=False) == STILL
        assert next_position(level, Vec2(1, 1), Vec2(3, 1), evading=False) == Vec2(1, 1)

    def test_candidates_wrap_around(self):
        """Stepping LEFT from column 0 lands on the last column."""
        level = parse_level("#####\nX.SF.\n#E###")
        assert choose_step(level, Vec2(0, 1), Vec2(4, 1), evading=False) == LEFT
        assert next_position(level, Vec2(0, 1), Vec2(4, 1), evading=False) == Vec2(4, 1)
