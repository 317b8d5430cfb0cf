"""
One-ply legality filter.

Marks which of the four directions do not lead to immediate, certain death
when every other snake is treated as a static obstacle. This is an
approximation: opponent tails are assumed to stay put and opponents are
assumed not to move.
"""

from collections import OrderedDict
from typing import Dict, List, Optional

from domain.board import Board
from domain.constants import DIRECTIONS, UP, DOWN, LEFT, RIGHT
from domain.geometry import Coord, next_position, is_out_of_bounds
from domain.snake import Snake


def neck_direction(snake: Snake) -> Optional[str]:
    """
    Return the direction that would move the head back onto the neck,
    or None when there is no neck or the neck is stacked on the head.
    """
    neck = snake.neck
    if neck is None:
        return None

    head_x, head_y = snake.head
    neck_x, neck_y = neck
    if neck_x < head_x:
        return LEFT
    if neck_x > head_x:
        return RIGHT
    if neck_y < head_y:
        return DOWN
    if neck_y > head_y:
        return UP
    return None


def attacks_opponent(pos: Coord, snake: Snake, board: Board) -> bool:
    """True if pos lies on the body of another snake at least as long as snake."""
    for other in board.snakes:
        if other.snake_id == snake.snake_id:
            continue
        if other.length >= snake.length and pos in other.body:
            return True
    return False


def filter_moves(board: Board, snake: Snake) -> Dict[str, bool]:
    """
    Map each direction to True unless it is known to be fatal next turn.

    If every direction is fatal, all four are returned as allowed so the
    snake still moves somewhere.

    Returns:
        OrderedDict keyed up, down, left, right.
    """
    bad_moves = set()

    reverse = neck_direction(snake)
    if reverse is not None:
        bad_moves.add(reverse)

    for direction in DIRECTIONS:
        if direction in bad_moves:
            continue
        new_pos = next_position(snake.head, direction)
        if (is_out_of_bounds(new_pos, board.width, board.height)
                or new_pos in snake.body
                or attacks_opponent(new_pos, snake, board)):
            bad_moves.add(direction)

    if len(bad_moves) == len(DIRECTIONS):
        bad_moves = set()

    return OrderedDict((direction, direction not in bad_moves) for direction in DIRECTIONS)


def allowed_moves(board: Board, snake: Snake) -> List[str]:
    """Allowed directions in the fixed iteration order."""
    return [direction for direction, ok in filter_moves(board, snake).items() if ok]
