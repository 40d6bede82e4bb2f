"""
Enemy entity - a single-cell pursuer.
"""

from .vec2 import Vec2


class Enemy:
    """
    A pursuer occupying one cell. Moved once per movement cycle by the
    enemy AI, removed from play when eaten during a power-up.
    """

    def __init__(self, position: Vec2):
        self.position = position

    def __repr__(self):
        return f"<Enemy at {tuple(self.position)}>"
