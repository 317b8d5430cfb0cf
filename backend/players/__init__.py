"""
Player implementations for the search snake.

This module contains the player abstractions, the legality filter and the
bounded search that drive move decisions.
"""

from .base import Player
from .legality import filter_moves, allowed_moves, attacks_opponent
from .search import SearchState, best_move
from .search_player import SearchPlayer
from .random_player import RandomPlayer
from .variant_registry import get_player_class, list_variants, AVAILABLE_VARIANTS

__all__ = [
    'Player',
    'filter_moves',
    'allowed_moves',
    'attacks_opponent',
    'SearchState',
    'best_move',
    'SearchPlayer',
    'RandomPlayer',
    'get_player_class',
    'list_variants',
    'AVAILABLE_VARIANTS',
]
