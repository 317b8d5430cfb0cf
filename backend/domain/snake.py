"""
Snake entity for the move engine.
"""

from collections import deque
from typing import Iterable, Optional

from .geometry import Coord


class Snake:
    """
    Represents a snake on the board.

    Attributes:
        snake_id: unique identifier on the board
        body: deque of (x, y) from head at index 0 to tail at the end
        length: snake length, used to settle head-to-head collisions
    """

    def __init__(self, snake_id: str, body: Iterable[Coord], length: Optional[int] = None):
        self.snake_id = snake_id
        self.body = deque(tuple(cell) for cell in body)
        if not self.body:
            raise ValueError(f"Snake {snake_id} has an empty body.")
        self.length = len(self.body) if length is None else length

    @property
    def head(self) -> Coord:
        """Return the head position (first element)."""
        return self.body[0]

    @property
    def neck(self) -> Optional[Coord]:
        """Return the second segment, or None for a single-segment snake."""
        if len(self.body) < 2:
            return None
        return self.body[1]

    def move_head(self, new_head: Coord) -> None:
        """Slide the body one cell so that new_head leads; length is unchanged."""
        self.body.appendleft(new_head)
        self.body.pop()

    def clone(self) -> "Snake":
        return Snake(self.snake_id, self.body, self.length)

    def __eq__(self, other):
        if not isinstance(other, Snake):
            return NotImplemented
        return (
            self.snake_id == other.snake_id
            and self.body == other.body
            and self.length == other.length
        )

    def __repr__(self):
        return f"<Snake id={self.snake_id} length={self.length} body={list(self.body)}>"
