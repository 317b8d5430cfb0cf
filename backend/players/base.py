"""
Base player interface for the move engine.
"""

from typing import Any, Dict, Optional

from domain.board import Board


class Player:
    """
    Base class/interface for player logic.

    Each player is responsible for returning a move for its snake_id
    given the current board.
    """

    def __init__(self, snake_id: str, player_config: Optional[Dict[str, Any]] = None):
        self.snake_id = snake_id
        self.config = player_config or {}

    def get_move(self, board: Board) -> str:
        """
        Return a move direction given the current board.

        Args:
            board: Current board, including this player's snake

        Returns:
            One of: "up", "down", "left", "right"
        """
        raise NotImplementedError
