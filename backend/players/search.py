"""
Bounded single-agent search over future boards.

Only the searching snake moves during lookahead; every other snake stays
where it is. Each branch owns its own board clone, so siblings never share
mutable state.
"""

import logging

from domain.board import Board
from domain.constants import FOOD_SCORE, MIN_SCORE, FALLBACK_MOVE
from domain.geometry import next_position
from domain.snake import Snake
from .legality import filter_moves

logger = logging.getLogger(__name__)


class SearchState:
    """
    A board clone plus the identity of the searching snake.

    Raises:
        SnakeNotFoundError: if snake_id is not on the board.
    """

    def __init__(self, board: Board, snake_id: str):
        self.board = board.clone()
        self.snake_id = snake_id
        self.idx = self.board.find_snake_index(snake_id)

    @property
    def snake(self) -> Snake:
        return self.board.snakes[self.idx]

    def advance(self, direction: str) -> "SearchState":
        """Return a new state with the searching snake moved one cell."""
        child = SearchState(self.board, self.snake_id)
        snake = child.snake
        snake.move_head(next_position(snake.head, direction))
        return child

    # No state update is allowed in this method.
    def score_leaf(self) -> int:
        """
        FOOD_SCORE when the head sits on food, else 0.

        A head on food is assumed safe since fatal moves are filtered
        before we get here.
        """
        if self.snake.head in self.board.food:
            return FOOD_SCORE
        return 0

    def search(self, depth: int) -> int:
        """Best leaf score reachable within depth more plies."""
        if depth <= 0:
            return self.score_leaf()

        max_score = MIN_SCORE
        for direction, allowed in filter_moves(self.board, self.snake).items():
            if not allowed:
                continue
            score = self.advance(direction).search(depth - 1)
            if score > max_score:
                max_score = score
        return max_score

    def best_move(self, depth_limit: int) -> str:
        """
        Pick the root direction whose subtree reaches the highest leaf score.

        Directions are tried in up, down, left, right order and only a
        strictly better score replaces the current pick, so ties go to the
        earliest direction.
        """
        if depth_limit < 1:
            raise ValueError(f"depth_limit must be at least 1, got {depth_limit}")

        best = FALLBACK_MOVE
        max_score = MIN_SCORE
        for direction, allowed in filter_moves(self.board, self.snake).items():
            if not allowed:
                continue
            score = self.advance(direction).search(depth_limit - 1)
            logger.debug(f"Snake {self.snake_id}: {direction} scores {score}")
            if score > max_score:
                max_score = score
                best = direction
        return best


def best_move(board: Board, snake_id: str, depth_limit: int) -> str:
    """Convenience wrapper: build the root state and search it."""
    return SearchState(board, snake_id).best_move(depth_limit)
