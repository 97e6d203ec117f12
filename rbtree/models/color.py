"""
Node colors and the one-shade color algebra used by deletion.
"""

from enum import IntEnum


class Color(IntEnum):
    """Node color for the red-black tree.

    RED and BLACK are the only colors a finished tree may carry.
    DOUBLE_BLACK and NEGATIVE_BLACK exist only while a single delete is
    bubbling a black-height deficiency toward the root.
    """

    RED = 0
    BLACK = 1
    DOUBLE_BLACK = 2
    NEGATIVE_BLACK = -1


def blacker(color: Color) -> Color:
    """Darken a color by one shade."""
    if color == Color.NEGATIVE_BLACK:
        return Color.RED
    if color == Color.RED:
        return Color.BLACK
    return Color.DOUBLE_BLACK


def redder(color: Color) -> Color:
    """Lighten a color by one shade."""
    if color == Color.BLACK:
        return Color.RED
    if color == Color.DOUBLE_BLACK:
        return Color.BLACK
    return Color.NEGATIVE_BLACK
