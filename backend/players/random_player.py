"""
Random player implementation - picks a random move the legality filter allows.
"""

import random

from domain.board import Board
from .base import Player
from .legality import allowed_moves


class RandomPlayer(Player):
    """
    A random AI that picks any direction not known to be fatal.

    player_config keys:
        seed: optional seed for reproducible choices
    """

    def __init__(self, snake_id: str, player_config=None):
        super().__init__(snake_id, player_config)
        self.rng = random.Random(self.config.get("seed"))

    def get_move(self, board: Board) -> str:
        snake = board.get_snake(self.snake_id)
        # The filter never leaves every direction disallowed
        return self.rng.choice(allowed_moves(board, snake))
