import os
import logging
import time
from flask import Flask, jsonify, request
from flask_cors import CORS
from dotenv import load_dotenv

from board_codec import BoardDecodeError, decode_move_request, encode_move
from domain.board import SnakeNotFoundError
from domain.constants import DEFAULT_SEARCH_DEPTH
from players.variant_registry import DEFAULT_VARIANT, get_player_class

load_dotenv()

app = Flask(__name__)
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def read_search_depth() -> int:
    """SEARCH_DEPTH from the environment; must be a positive integer."""
    raw = os.getenv("SEARCH_DEPTH")
    if raw is None or raw.strip() == "":
        return DEFAULT_SEARCH_DEPTH
    depth = int(raw)
    if depth < 1:
        raise ValueError(f"SEARCH_DEPTH must be at least 1, got {depth}")
    return depth


def read_player_variant() -> str:
    """PLAYER_VARIANT from the environment; unknown keys raise ValueError."""
    variant = os.getenv("PLAYER_VARIANT") or DEFAULT_VARIANT
    get_player_class(variant)
    return variant


def read_flag(name: str) -> bool:
    """True for 1, true, yes or on (case-insensitive), False otherwise."""
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


SEARCH_DEPTH = read_search_depth()
PLAYER_VARIANT = read_player_variant()

# Personalize the look of the snake per https://docs.battlesnake.com/references/personalization
SNAKE_INFO = {
    "apiversion": "1",
    "author": os.getenv("SNAKE_AUTHOR", "gandhi56"),
    "color": os.getenv("SNAKE_COLOR", "#3c0c59"),
    "head": os.getenv("SNAKE_HEAD", "evil"),
    "tail": os.getenv("SNAKE_TAIL", "small-rattle"),
}

# Allowed origins can be configured via CORS_ALLOWED_ORIGINS env var (comma-separated)
allowed_origins_env = os.getenv("CORS_ALLOWED_ORIGINS")
if allowed_origins_env:
    allowed_origins = [o.strip() for o in allowed_origins_env.split(",") if o.strip()]
else:
    # sensible defaults for local dev
    allowed_origins = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "https://play.battlesnake.com",
    ]

CORS(app, resources={r"/*": {"origins": allowed_origins}})


def _game_id(payload) -> str:
    game = payload.get("game") if isinstance(payload, dict) else None
    if isinstance(game, dict):
        return str(game.get("id", "unknown"))
    return "unknown"


@app.route("/", methods=["GET"])
def info():
    """Snake metadata and customization for the Battlesnake engine."""
    logger.info("INFO")
    return jsonify(SNAKE_INFO)


@app.route("/start", methods=["POST"])
def start():
    payload = request.get_json(silent=True) or {}
    logger.info(f"{_game_id(payload)} START")
    return jsonify({})


@app.route("/end", methods=["POST"])
def end():
    payload = request.get_json(silent=True) or {}
    logger.info(f"{_game_id(payload)} END")
    return jsonify({})


@app.route("/move", methods=["POST"])
def move():
    """
    Choose the next move for the requesting snake.

    Request body: a Battlesnake game-state document.

    Returns:
    - {"move": "up" | "down" | "left" | "right"}
    - 400 with {"error": ...} when the document cannot be decoded
    """
    payload = request.get_json(silent=True)
    if payload is None:
        return jsonify({"error": "Request body must be JSON"}), 400

    try:
        move_request = decode_move_request(payload)
    except (BoardDecodeError, SnakeNotFoundError) as error:
        logger.warning(f"Rejected move request for game {_game_id(payload)}: {error}")
        return jsonify({"error": str(error)}), 400

    try:
        player_cls = get_player_class(PLAYER_VARIANT)
        player = player_cls(move_request.you_id, {"depth": SEARCH_DEPTH})

        start_time = time.perf_counter()
        chosen = player.get_move(move_request.board)
        elapsed_ms = (time.perf_counter() - start_time) * 1000
    except Exception as error:
        logger.error(f"Error choosing move for game {move_request.game_id}: {error}")
        return jsonify({"error": "Failed to choose a move"}), 500

    logger.info(
        f"{move_request.game_id} MOVE {chosen} "
        f"(turn {move_request.turn}, {elapsed_ms:.1f}ms)"
    )
    return jsonify(encode_move(chosen))


if __name__ == "__main__":
    app.run(
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8000")),
        debug=read_flag("FLASK_DEBUG"),
    )
