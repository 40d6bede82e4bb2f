"""
Base player interface for the game engine.
"""

from domain.game_state import Snapshot, TickInput


class Player:
    """
    Base class/interface for input sources.

    A player is asked once per tick what it is doing with the controls,
    given the snapshot the renderer would show.
    """

    def get_input(self, snapshot: Snapshot) -> TickInput:
        """
        Return the input for the next tick.

        Args:
            snapshot: Current state of the game

        Returns:
            TickInput with at most one direction and the start/restart signals
        """
        raise NotImplementedError
