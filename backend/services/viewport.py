"""
Viewport controller - horizontal dead-zone scrolling.

The level can be wider than the screen. The camera only scrolls once the
snake head leaves the middle half of the visible window, then clamps to the
level edges.
"""

from domain.constants import VIEWPORT_WIDTH


def follow_head(
    viewport_x: int,
    head_x: int,
    level_width: int,
    visible_width: int = VIEWPORT_WIDTH
) -> int:
    """
    Return the new first visible column for a head at column head_x.

    Args:
        viewport_x: Current first visible column
        head_x: Column of the snake head
        level_width: Number of columns in the level
        visible_width: Number of columns on screen

    Returns:
        Offset within [0, level_width - visible_width], or 0 when the level is
        narrower than the screen.
    """
    right_mark = visible_width * 3 // 4
    left_mark = visible_width // 4

    if head_x - viewport_x > right_mark:
        viewport_x = head_x - right_mark
    elif head_x - viewport_x < left_mark:
        viewport_x = head_x - left_mark

    viewport_x = min(viewport_x, level_width - visible_width)
    return max(viewport_x, 0)
