"""
Domain entities for the search snake.

This module contains the board entities that are independent of
infrastructure concerns (HTTP, JSON decoding, configuration).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, DIRECTIONS, VALID_MOVES,
    DEFAULT_SEARCH_DEPTH, FOOD_SCORE, MIN_SCORE, FALLBACK_MOVE,
)
from .geometry import Coord, next_position, is_out_of_bounds
from .snake import Snake
from .board import Board, SnakeNotFoundError

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'DIRECTIONS', 'VALID_MOVES',
    'DEFAULT_SEARCH_DEPTH', 'FOOD_SCORE', 'MIN_SCORE', 'FALLBACK_MOVE',
    'Coord', 'next_position', 'is_out_of_bounds',
    'Snake',
    'Board', 'SnakeNotFoundError',
]
