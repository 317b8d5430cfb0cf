"""
Board entity - a snapshot of the arena handed to the engine each turn.
"""

from typing import Iterable, List, Optional, Set

from .geometry import Coord, is_out_of_bounds
from .snake import Snake


class SnakeNotFoundError(ValueError):
    """Raised when a snake id is not present on the board."""

    def __init__(self, snake_id: str):
        super().__init__(f"Snake '{snake_id}' is not on the board.")
        self.snake_id = snake_id


class Board:
    """
    A snapshot of the board at a specific turn.

    Attributes:
        width, height: board dimensions, cells are [0, width) x [0, height)
        food: set of (x, y) positions holding food
        snakes: every living snake, the searching snake included
    """

    def __init__(
        self,
        width: int,
        height: int,
        food: Optional[Iterable[Coord]] = None,
        snakes: Optional[List[Snake]] = None,
    ):
        self.width = width
        self.height = height
        self.food: Set[Coord] = set(tuple(cell) for cell in (food or ()))
        self.snakes: List[Snake] = list(snakes or [])

        seen = set()
        for snake in self.snakes:
            if snake.snake_id in seen:
                raise ValueError(f"Snake with id {snake.snake_id} already exists.")
            seen.add(snake.snake_id)

    def find_snake_index(self, snake_id: str) -> int:
        """
        Return the index of snake_id in self.snakes.

        Raises:
            SnakeNotFoundError: if no snake has that id.
        """
        for i, snake in enumerate(self.snakes):
            if snake.snake_id == snake_id:
                return i
        raise SnakeNotFoundError(snake_id)

    def get_snake(self, snake_id: str) -> Snake:
        return self.snakes[self.find_snake_index(snake_id)]

    def clone(self) -> "Board":
        """Deep copy; the clone shares no mutable state with this board."""
        return Board(
            self.width,
            self.height,
            set(self.food),
            [snake.clone() for snake in self.snakes],
        )

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        T = snake body
        0,1,2... = snake head (index of the snake on the board)
        (0,0) is at the bottom left and x-axis labels are at the bottom.
        """
        grid = [['.' for _ in range(self.width)] for _ in range(self.height)]

        for fx, fy in self.food:
            if not is_out_of_bounds((fx, fy), self.width, self.height):
                grid[fy][fx] = 'F'

        for i, snake in enumerate(self.snakes):
            # Draw tail first so the head wins on stacked segments
            for pos_idx in range(len(snake.body) - 1, -1, -1):
                x, y = snake.body[pos_idx]
                if is_out_of_bounds((x, y), self.width, self.height):
                    continue
                grid[y][x] = str(i) if pos_idx == 0 else 'T'

        result = []
        for y in range(self.height - 1, -1, -1):
            result.append(f"{y:2d} {' '.join(grid[y])}")
        result.append("   " + " ".join(str(i) for i in range(self.width)))

        return "\n".join(result)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.food == other.food
            and self.snakes == other.snakes
        )

    def __repr__(self):
        return (
            f"<Board {self.width}x{self.height}, food={sorted(self.food)}, "
            f"snakes={len(self.snakes)}>"
        )
