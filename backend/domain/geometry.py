"""
Grid helpers shared by the legality filter and the search.
"""

from typing import Tuple

from .constants import DIRECTION_DELTAS

Coord = Tuple[int, int]


def next_position(pos: Coord, direction: str) -> Coord:
    """Return the cell one step from pos in the given direction."""
    dx, dy = DIRECTION_DELTAS[direction]
    return (pos[0] + dx, pos[1] + dy)


def is_out_of_bounds(pos: Coord, width: int, height: int) -> bool:
    x, y = pos
    return x < 0 or x >= width or y < 0 or y >= height
