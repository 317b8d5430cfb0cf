"""
Tests for the domain entities - Snake and Board.
"""

import os
import sys
from collections import deque

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import (  # noqa: E402
    Board,
    Snake,
    SnakeNotFoundError,
    next_position,
    is_out_of_bounds,
    UP, DOWN, LEFT, RIGHT,
)


class TestGeometry:
    """Tests for the grid helpers."""

    def test_next_position_unit_vectors(self):
        """up is +y, down is -y, right is +x, left is -x."""
        assert next_position((5, 5), UP) == (5, 6)
        assert next_position((5, 5), DOWN) == (5, 4)
        assert next_position((5, 5), LEFT) == (4, 5)
        assert next_position((5, 5), RIGHT) == (6, 5)

    @pytest.mark.parametrize("pos", [(-1, 0), (0, -1), (11, 0), (0, 11)])
    def test_out_of_bounds(self, pos):
        assert is_out_of_bounds(pos, 11, 11) is True

    @pytest.mark.parametrize("pos", [(0, 0), (10, 10), (0, 10), (10, 0)])
    def test_corners_are_in_bounds(self, pos):
        assert is_out_of_bounds(pos, 11, 11) is False


class TestSnake:
    """Tests for the Snake class."""

    def test_snake_head_and_length(self):
        """Head is body[0] and length defaults to the body size."""
        snake = Snake("a", [(5, 5), (5, 4), (5, 3)])
        assert snake.head == (5, 5)
        assert snake.length == 3
        assert isinstance(snake.body, deque)

    def test_explicit_length_is_kept(self):
        """Length can differ from the body size (stacked segments)."""
        snake = Snake("a", [(1, 1), (1, 1)], length=3)
        assert snake.length == 3

    def test_neck_missing_for_single_segment(self):
        assert Snake("a", [(2, 2)]).neck is None
        assert Snake("a", [(2, 2), (2, 1)]).neck == (2, 1)

    def test_empty_body_rejected(self):
        with pytest.raises(ValueError):
            Snake("a", [])

    def test_move_head_slides_body(self):
        """The new head leads and the tail drops off."""
        snake = Snake("a", [(5, 5), (5, 4), (5, 3)])
        snake.move_head((5, 6))
        assert list(snake.body) == [(5, 6), (5, 5), (5, 4)]
        assert snake.head == (5, 6)
        assert snake.length == 3

    def test_clone_is_independent(self):
        snake = Snake("a", [(5, 5), (5, 4)])
        copy = snake.clone()
        copy.move_head((6, 5))
        assert list(snake.body) == [(5, 5), (5, 4)]
        assert copy != snake


class TestBoard:
    """Tests for the Board class."""

    def make_board(self):
        return Board(
            width=11,
            height=11,
            food=[(3, 3)],
            snakes=[
                Snake("me", [(5, 5), (5, 4)]),
                Snake("them", [(8, 8), (8, 7), (8, 6)]),
            ],
        )

    def test_find_snake_index(self):
        board = self.make_board()
        assert board.find_snake_index("me") == 0
        assert board.find_snake_index("them") == 1
        assert board.get_snake("them").head == (8, 8)

    def test_missing_snake_raises(self):
        """A missing id is an error, never a silent index 0."""
        board = self.make_board()
        with pytest.raises(SnakeNotFoundError) as exc_info:
            board.find_snake_index("ghost")
        assert exc_info.value.snake_id == "ghost"
        assert isinstance(exc_info.value, ValueError)

    def test_duplicate_snake_ids_rejected(self):
        with pytest.raises(ValueError):
            Board(11, 11, [], [Snake("a", [(1, 1)]), Snake("a", [(2, 2)])])

    def test_clone_shares_no_state(self):
        board = self.make_board()
        clone = board.clone()
        assert clone == board

        clone.snakes[0].move_head((5, 6))
        clone.food.add((0, 0))
        assert board.snakes[0].head == (5, 5)
        assert (0, 0) not in board.food
        assert clone != board

    def test_print_board_marks_food_heads_and_bodies(self):
        board = Board(3, 3, [(0, 2)], [Snake("me", [(1, 1), (1, 0)])])
        rendered = board.print_board()
        lines = rendered.split("\n")
        # Top row first, x-axis labels last
        assert lines[0] == " 2 F . ."
        assert lines[1] == " 1 . 0 ."
        assert lines[2] == " 0 . T ."
        assert lines[3] == "   0 1 2"

    def test_print_board_skips_off_grid_cells(self):
        board = Board(2, 2, [], [Snake("me", [(-1, 0), (0, 0)])])
        rendered = board.print_board()
        assert "T" in rendered
        assert "0 T ." in rendered
