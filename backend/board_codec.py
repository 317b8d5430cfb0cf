"""
Decode Battlesnake API game-state documents into domain boards and encode
move responses.

Only the fields the engine needs are read; everything else in the payload
(health, hazards, ruleset, latency, ...) is ignored.
"""

from dataclasses import dataclass
from typing import Any, Dict, List

from domain.board import Board
from domain.constants import VALID_MOVES
from domain.geometry import Coord
from domain.snake import Snake


class BoardDecodeError(ValueError):
    """Raised when a game-state document is missing fields or malformed."""


@dataclass
class MoveRequest:
    """One decoded turn: the board plus who is asking and when."""
    game_id: str
    turn: int
    board: Board
    you_id: str


def _require(data: Dict[str, Any], key: str, where: str) -> Any:
    if not isinstance(data, dict):
        raise BoardDecodeError(f"Expected an object for {where}, got {type(data).__name__}")
    if key not in data:
        raise BoardDecodeError(f"Missing '{key}' in {where}")
    return data[key]


def _int(value: Any, where: str) -> int:
    # bool is an int subclass, reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise BoardDecodeError(f"Expected an integer for {where}, got {value!r}")
    return value


def decode_coord(data: Dict[str, Any], where: str = "coordinate") -> Coord:
    return (_int(_require(data, "x", where), f"{where}.x"),
            _int(_require(data, "y", where), f"{where}.y"))


def decode_snake(data: Dict[str, Any]) -> Snake:
    snake_id = _require(data, "id", "snake")
    if not isinstance(snake_id, str):
        raise BoardDecodeError(f"Snake id must be a string, got {snake_id!r}")

    raw_body = _require(data, "body", f"snake {snake_id}")
    if not isinstance(raw_body, list) or not raw_body:
        raise BoardDecodeError(f"Snake {snake_id} must have a non-empty body list")
    body = [decode_coord(cell, f"snake {snake_id} body") for cell in raw_body]

    if "head" in data and decode_coord(data["head"], f"snake {snake_id} head") != body[0]:
        raise BoardDecodeError(f"Snake {snake_id} head does not match body[0]")

    length = data.get("length")
    if length is not None:
        length = _int(length, f"snake {snake_id} length")

    return Snake(snake_id, body, length)


def decode_board(data: Dict[str, Any]) -> Board:
    width = _int(_require(data, "width", "board"), "board.width")
    height = _int(_require(data, "height", "board"), "board.height")
    if width <= 0 or height <= 0:
        raise BoardDecodeError(f"Board dimensions must be positive, got {width}x{height}")

    food = [decode_coord(cell, "food") for cell in data.get("food") or []]
    snakes: List[Snake] = [decode_snake(s) for s in data.get("snakes") or []]

    try:
        return Board(width, height, food, snakes)
    except ValueError as e:
        raise BoardDecodeError(str(e)) from e


def decode_move_request(data: Dict[str, Any]) -> MoveRequest:
    """
    Decode a full /move payload.

    Raises:
        BoardDecodeError: on missing or malformed fields.
        SnakeNotFoundError: if 'you' is not one of the board's snakes.
    """
    game = _require(data, "game", "request")
    game_id = str(_require(game, "id", "game"))
    turn = _int(data.get("turn", 0), "turn")
    board = decode_board(_require(data, "board", "request"))

    you = _require(data, "you", "request")
    you_id = _require(you, "id", "you")

    # Fails early with SnakeNotFoundError instead of searching the wrong snake
    board.find_snake_index(you_id)

    return MoveRequest(game_id=game_id, turn=turn, board=board, you_id=you_id)


def encode_move(direction: str) -> Dict[str, str]:
    if direction not in VALID_MOVES:
        raise ValueError(f"Invalid move '{direction}'")
    return {"move": direction}
