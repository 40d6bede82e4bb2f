"""
Vec2 - integer grid coordinate / direction.
"""

import math
from typing import NamedTuple


class Vec2(NamedTuple):
    """A position or a unit direction on the grid."""

    x: int
    y: int

    def offset(self, direction: "Vec2") -> "Vec2":
        return Vec2(self.x + direction.x, self.y + direction.y)

    def opposite(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def wrap(self, width: int, height: int) -> "Vec2":
        """Wrap both axes around the level edges (toroidal world)."""
        return Vec2(self.x % width, self.y % height)

    def distance_to(self, other: "Vec2") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)
