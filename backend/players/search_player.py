"""
Search player - bounded lookahead over the legality-filtered move tree.
"""

import logging
import time
from typing import Any, Dict, Optional

from domain.board import Board
from domain.constants import DEFAULT_SEARCH_DEPTH
from .base import Player
from .search import SearchState

logger = logging.getLogger(__name__)


class SearchPlayer(Player):
    """
    Picks the move whose best reachable leaf scores highest.

    player_config keys:
        depth: plies to look ahead (default DEFAULT_SEARCH_DEPTH)
    """

    def __init__(self, snake_id: str, player_config: Optional[Dict[str, Any]] = None):
        super().__init__(snake_id, player_config)
        self.depth = int(self.config.get("depth", DEFAULT_SEARCH_DEPTH))
        if self.depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {self.depth}")

    def get_move(self, board: Board) -> str:
        start = time.perf_counter()
        state = SearchState(board, self.snake_id)
        move = state.best_move(self.depth)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.debug(
            f"Snake {self.snake_id} chose {move} at depth {self.depth} in {elapsed_ms:.1f}ms"
        )
        return move
